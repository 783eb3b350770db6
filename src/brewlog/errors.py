"""Error types raised by the BrewLog core."""


class BrewLogError(Exception):
    """Base class for all BrewLog errors."""

    kind = "Error"

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(f"{self.kind}: {detail}")


class InvalidInputError(BrewLogError):
    """Raised when a supplied value violates a validation rule."""

    kind = "Invalid input"


class NotFoundError(BrewLogError):
    """Raised when a referenced entry or the current goal does not exist."""

    kind = "Not found"


class DatabaseError(BrewLogError):
    """Raised when the storage engine fails to open, prepare, or execute."""

    kind = "Database error"
