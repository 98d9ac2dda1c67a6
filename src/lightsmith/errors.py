"""Custom exception hierarchy for LightSmith."""


class LightSmithError(Exception):
    """Base exception for all LightSmith errors."""


class ValidationError(LightSmithError):
    """Input validation failures."""


class InvalidParameter(ValidationError):
    """Unknown light or field, or a value outside the field's domain."""


class InvalidColorFormat(InvalidParameter):
    """Color string is not a 6-digit hex color."""


class UnsupportedOperation(LightSmithError):
    """Operation is not defined for the requested light."""
