"""Exceptions raised by the scope resolver."""


class ContextMeshError(Exception):
    """Base class for scope resolver errors."""

    pass


class UsageError(ContextMeshError):
    """Raised when a resolution request is invalid (e.g. blank scope)."""

    pass
