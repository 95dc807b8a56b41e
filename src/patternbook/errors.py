"""
Error Taxonomy
==============

Exceptions shared by every lesson in the catalogue.

Each concrete error also derives from the closest built-in exception so
callers that only know the standard library can still catch it:

    ValidationError      -> ValueError   (bad argument or unknown discriminator)
    NotFoundError        -> LookupError  (record does not exist)
    EmptyCollectionError -> IndexError   (indexing into an empty collection)

Not-found frame lookups are NOT errors: they return None.
"""


class PatternbookError(Exception):
    """Base class for all catalogue errors."""


class ValidationError(PatternbookError, ValueError):
    """Raised when an argument or discriminator is rejected at the boundary."""


class NotFoundError(PatternbookError, LookupError):
    """Raised when a keyed record does not exist."""


class EmptyCollectionError(PatternbookError, IndexError):
    """Raised when an operation needs at least one element but got none."""


class EmptyVideoError(EmptyCollectionError):
    """Raised when a frame lookup runs against a video with no frames."""


class UndoNotSupportedError(PatternbookError):
    """Raised when undo is requested for a command that cannot be reversed."""


def parse_choice(enum_cls, value, what: str):
    """
    Parse a string discriminator into a member of a closed str Enum.

    Matching is case-insensitive and ignores surrounding whitespace.
    Enum members are returned unchanged.

    Raises:
        ValidationError: If value is not one of the enum's values.
    """
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        for member in enum_cls:
            if member.value == normalized:
                return member
    accepted = ", ".join(member.value for member in enum_cls)
    raise ValidationError(f"Unknown {what}: {value!r} (expected one of: {accepted})")
