"""
Exceptions raised by the specialist router.

An ambiguous match is not an error; it is reported as a signal on a
successful decision.
"""


class RoutingError(Exception):
    """Base class for routing failures."""


class InvalidRequest(RoutingError, ValueError):
    """The request description is empty after trimming whitespace."""

    def __init__(self, message: str = "Task description must not be empty"):
        super().__init__(message)


class EmptyRegistry(RoutingError):
    """No specialist profiles are registered, not even the fallback."""

    def __init__(self, message: str = "No specialist profiles are registered"):
        super().__init__(message)


class RegistryError(RoutingError, ValueError):
    """Registry data is malformed (duplicate ids, missing fallback, bad records)."""
