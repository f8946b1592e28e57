"""Errors raised by the series transformers."""


class TransformError(ValueError):
    """A series cannot be transformed as requested."""


class ZeroBaselineError(TransformError):
    """The reference value a series is divided by is zero."""

    def __init__(self, date: str, message: str = ''):
        self.date = date
        super().__init__(message or f"Reference value on {date} is zero")
