"""Rejection kinds raised by the fulfilment engines.

All three are Protean ``ValidationError`` subclasses carrying a
``{field: [reason]}`` messages dict, so callers may catch the base class or
tell the kinds apart.
"""

from protean.exceptions import ValidationError


class InvalidArgument(ValidationError):
    """A required value is missing, blank, or out of range."""


class NotFound(ValidationError):
    """A referenced location, warehouse or business unit code does not resolve."""


class ConstraintViolation(ValidationError):
    """Admitting the change would break a count, capacity or fan-out limit."""
