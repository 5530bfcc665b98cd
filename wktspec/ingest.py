"""Parse WKT fragments into the geometry model.

Each per-type function takes the text following the type keyword (for
example ``"(1 2,3 4)"`` for ``LINESTRING(1 2,3 4)``) and returns that type's
payload. `geometry` and `read` handle full geometries and documents.
"""
from typing import List

from . import _tokenizer
from .errors import DecodeError, MalformedGeometryError
from .geometry import (
    GEOMETRY_TYPES,
    Coordinate,
    Geometry,
    GeometryType,
)

__all__ = (
    "point",
    "linestring",
    "polygon",
    "multipoint",
    "multilinestring",
    "multipolygon",
    "geometrycollection",
    "geometry",
    "read",
)


def __dir__():
    return __all__


def _coordinates(inner, separator):
    return [
        _tokenizer.parse_coordinate_pair(part)
        for part in _tokenizer.split_top_level(inner, separator)
    ]


def _rings(inner, separator):
    return [
        _coordinates(_tokenizer.strip_outer_parens(part), separator)
        for part in _tokenizer.split_top_level(inner, separator)
    ]


def point(fragment: str, *, separator: str = ",") -> Coordinate:
    """Parse a ``POINT`` fragment, either ``(x y)`` or a bare ``x y``"""
    stripped = fragment.strip()
    if stripped.startswith("(") or stripped.upper() == _tokenizer.EMPTY:
        inner = _tokenizer.strip_outer_parens(stripped)
        if not inner:
            raise MalformedGeometryError("A POINT requires a coordinate, got EMPTY")
    else:
        inner = stripped
    return _tokenizer.parse_coordinate_pair(inner)


def linestring(fragment: str, *, separator: str = ",") -> List[Coordinate]:
    """Parse a ``LINESTRING`` fragment"""
    return _coordinates(_tokenizer.strip_outer_parens(fragment), separator)


def multipoint(fragment: str, *, separator: str = ",") -> List[Coordinate]:
    """Parse a ``MULTIPOINT`` fragment.

    Members may be written bare (``1 2,3 4``) or wrapped (``(1 2),(3 4)``).
    """
    inner = _tokenizer.strip_outer_parens(fragment)
    out = []
    for part in _tokenizer.split_top_level(inner, separator):
        if part.startswith("("):
            part = _tokenizer.strip_outer_parens(part)
        out.append(_tokenizer.parse_coordinate_pair(part))
    return out


def polygon(fragment: str, *, separator: str = ",") -> List[List[Coordinate]]:
    """Parse a ``POLYGON`` fragment into a list of rings"""
    return _rings(_tokenizer.strip_outer_parens(fragment), separator)


def multilinestring(
    fragment: str, *, separator: str = ","
) -> List[List[Coordinate]]:
    """Parse a ``MULTILINESTRING`` fragment"""
    return _rings(_tokenizer.strip_outer_parens(fragment), separator)


def multipolygon(
    fragment: str, *, separator: str = ","
) -> List[List[List[Coordinate]]]:
    """Parse a ``MULTIPOLYGON`` fragment into a list of polygons"""
    inner = _tokenizer.strip_outer_parens(fragment)
    return [
        _rings(_tokenizer.strip_outer_parens(part), separator)
        for part in _tokenizer.split_top_level(inner, separator)
    ]


def geometrycollection(fragment: str, *, separator: str = ",") -> List[Geometry]:
    """Parse a ``GEOMETRYCOLLECTION`` fragment.

    Members are complete geometries (keyword included), and may themselves be
    collections.
    """
    inner = _tokenizer.strip_outer_parens(fragment)
    out = []
    for i, part in enumerate(_tokenizer.split_top_level(inner, separator)):
        try:
            out.append(_geometry(part, separator))
        except DecodeError as exc:
            raise MalformedGeometryError(
                f"Invalid member {i} of GEOMETRYCOLLECTION: {exc}"
            ) from exc
    return out


_PARSERS = {
    GeometryType.POINT: point,
    GeometryType.LINESTRING: linestring,
    GeometryType.POLYGON: polygon,
    GeometryType.MULTIPOINT: multipoint,
    GeometryType.MULTILINESTRING: multilinestring,
    GeometryType.MULTIPOLYGON: multipolygon,
    GeometryType.GEOMETRYCOLLECTION: geometrycollection,
}


def geometry(text: str, *, separator: str = ",") -> Geometry:
    """Parse a single WKT geometry, keyword included.

    Examples
    --------
    >>> geometry("POINT(1 2)")
    Point(coordinate=Coordinate(x=1.0, y=2.0))
    """
    try:
        return _geometry(text, separator)
    except RecursionError:
        raise MalformedGeometryError("Geometry is nested too deeply") from None


def _geometry(text, separator):
    kind, fragment = _tokenizer.match_type(text)
    payload = _PARSERS[kind](fragment, separator=separator)
    return GEOMETRY_TYPES[kind](payload)


def read(
    document: str, *, delimiter: str = ";", separator: str = ","
) -> List[Geometry]:
    """Parse a document holding several WKT geometries.

    Geometries are separated by ``delimiter``; blank items are skipped. If an
    item fails to parse, the raised error has its ``index`` set to the
    position of that item.
    """
    out = []
    items = _tokenizer.split_document(document, delimiter, separator)
    for i, text in enumerate(items):
        if not text:
            continue
        try:
            out.append(geometry(text, separator=separator))
        except DecodeError as exc:
            exc.index = i
            raise
    return out
