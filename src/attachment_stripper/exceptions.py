"""Exceptions raised by the attachment stripper."""


class StripperError(Exception):
    """Base class for attachment stripper errors."""


class InvalidInputError(StripperError, TypeError):
    """Raised when a Stripper is built from something that is not a MIME message."""
