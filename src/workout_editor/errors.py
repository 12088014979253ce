"""Exceptions raised by the workout structure editor."""


class StructureEditorError(RuntimeError):
    """Base class for editor errors."""


class InvalidAddressError(StructureEditorError, ValueError):
    """Raised when a caller passes an index or argument that can never be valid.

    Stale coordinates from a drag gesture are not errors; operations log them
    and return the workout unchanged. This error is reserved for contract
    violations such as negative or non-integer indices.
    """


class UnknownStructureTypeError(StructureEditorError, ValueError):
    """Raised when a structure type outside the supported set is requested."""


class InvalidUpdateError(StructureEditorError, ValueError):
    """Raised when an exercise update names fields the model does not have."""
