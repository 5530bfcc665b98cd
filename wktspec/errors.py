__all__ = (
    "WKTError",
    "DecodeError",
    "EncodeError",
    "UnrecognizedTypeError",
    "UnbalancedDelimitersError",
    "InvalidCoordinateError",
    "MalformedGeometryError",
)


def __dir__():
    return __all__


class WKTError(Exception):
    """Base class for all wktspec exceptions"""


class DecodeError(WKTError, ValueError):
    """An error occurred while reading WKT text.

    Attributes
    ----------
    index : int or None
        When raised from a batch read, the position of the failing item in
        the document. ``None`` otherwise.
    """

    index = None


class EncodeError(WKTError, ValueError):
    """An error occurred while writing WKT text"""


class UnrecognizedTypeError(DecodeError):
    """The text doesn't start with a known geometry keyword"""


class UnbalancedDelimitersError(DecodeError):
    """Parentheses are not matched pairwise"""


class InvalidCoordinateError(DecodeError):
    """A coordinate is missing a value, has extra values, or isn't numeric"""


class MalformedGeometryError(DecodeError, EncodeError):
    """A geometry doesn't have the structure its type requires.

    Raised when reading (missing or extra outer parentheses, ``EMPTY`` where a
    component is required, a collection member that fails to parse) and when
    writing a value that doesn't follow the geometry model.
    """
