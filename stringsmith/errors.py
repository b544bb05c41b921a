"""Exceptions raised by the string extraction pipeline."""


class StringsmithError(Exception):
    """Base class for all stringsmith errors."""


class UsageError(StringsmithError):
    """Invalid, missing or contradictory command-line options."""


class UnsupportedFormatError(StringsmithError):
    """An input path cannot be handled by any registered parser."""

    def __init__(self, path: str):
        self.path = str(path)
        super().__init__(f"No parser supports input: {self.path}")


class ParseError(StringsmithError):
    """Malformed input for a given format."""

    def __init__(self, path: str, message: str):
        self.path = str(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")
