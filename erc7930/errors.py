class ValidationError(ValueError):
    """Input violates a structural constraint of an interoperable address."""


class DecodeError(ValueError):
    """Input could not be decoded (malformed hex, binary or name)."""
