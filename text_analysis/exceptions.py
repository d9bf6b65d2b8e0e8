"""
exceptions.py

Errors raised by the tagging engine.

Both errors are recoverable: the engine validates its input before touching
any state, so a rejected call leaves the vocabulary and the assignment table
exactly as they were.
"""


class TaggingError(Exception):
    """Base class for tagging engine errors."""


class InvalidInputError(TaggingError, ValueError):
    """Raised for a malformed or empty label name, or a malformed document set."""


class NotFoundError(TaggingError, LookupError):
    """Raised for an unknown document identifier or label name."""
