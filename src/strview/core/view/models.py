"""View error types."""


class OutOfRangeError(IndexError):
    """Raised when a checked position argument exceeds the view's length."""

    pass


class PreconditionError(AssertionError):
    """Raised for caller contract violations when precondition checking is enabled."""

    pass
