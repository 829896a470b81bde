class ArvileError(Exception):
    """Base exception for all Arvile calendar errors."""


class MonthIndexError(ArvileError, ValueError):
    """Raised when a month index falls outside 1..26 and the year-day sentinel."""

    def __init__(self, index: object) -> None:
        super().__init__(f"Month index must be in 1..27; got {index}.")
        self.index = index
