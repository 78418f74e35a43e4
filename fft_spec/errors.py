"""Error kinds raised by the field arithmetic and the transforms.

Every error originates where the violation is detected and propagates
unchanged through the recursive transforms.
"""


class TransformError(Exception):
    """Base class for all fft_spec errors."""


class FieldMismatchError(TransformError, ValueError):
    """Operands belong to different fields."""


class InvalidLengthError(TransformError, ValueError):
    """Sequence length is not a power of two."""


class NotInvertibleError(TransformError, ZeroDivisionError):
    """Inverse of (or division by) an element that has no inverse."""


class InvalidExponentError(TransformError, ValueError):
    """Exponent outside the signed 128-bit non-negative range."""


# Short kind names
FieldMismatch = FieldMismatchError
InvalidLength = InvalidLengthError
NotInvertible = NotInvertibleError
InvalidExponent = InvalidExponentError
