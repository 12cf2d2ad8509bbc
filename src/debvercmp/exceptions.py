"""Exceptions raised by the outer surfaces of debvercmp.

Parsing, comparing and serializing versions never raise: they are total over
any input string. The exceptions here belong to the layers around that core:
reading control data and loading configuration.
"""


class DebVersionError(Exception):
    """Base exception for all debvercmp errors."""


class ControlFieldError(DebVersionError):
    """Raised when control data cannot be read as a control paragraph."""


class MissingVersionFieldError(ControlFieldError):
    """Raised when a control paragraph has no usable Version field."""

    def __init__(self, message: str = "Control data has no Version field") -> None:
        """Initialize the error.

        Args:
            message: Human readable description of the problem.
        """
        super().__init__(message)


class ConfigError(DebVersionError):
    """Raised when settings fail validation."""
