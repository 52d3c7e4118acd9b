"""Exceptions raised by checkmark."""


class ConditionConfigError(ValueError):
    """A condition was built without the pieces it needs (e.g. a predicate)."""


class PreconditionViolation(ValueError):
    """A required argument was ``None``."""
