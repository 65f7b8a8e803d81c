"""Errors raised by issue records and their views."""


class UnsupportedOperationError(TypeError):
    """Raised when a caller tries to mutate a read-only view."""
