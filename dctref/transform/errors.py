"""Errors raised by the DCT transforms."""


class InvalidDimensionError(ValueError):
    """Raised when a matrix shape cannot be transformed.

    Either dimension is odd, the input is not two-dimensional, or a
    supplied output buffer does not match the input shape.
    """
