class DateHelperError(Exception):
    """Base error."""

class FormatError(DateHelperError):
    """Raised when a string does not have the required shape or range."""

    def __init__(self, detail: str, at: str):
        self.detail = detail
        self.at = at
        super().__init__(f"Format error in {at}: {detail}")

class InvalidInputError(DateHelperError):
    """Raised when a constructor value cannot be resolved to an instant."""
