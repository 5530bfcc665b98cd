"""Write the geometry model as WKT.

The per-type functions return the argument list of a geometry without its
type keyword (``"1 2,3 4"`` for a two vertex ``LINESTRING``). `geometry`
adds the keyword, and `write` joins several geometries into a document.
"""
import math
from typing import Iterable, List

from ._tokenizer import EMPTY
from .errors import MalformedGeometryError
from .geometry import (
    Coordinate,
    Geometry,
    GeometryType,
    GEOMETRY_TYPES,
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
    "write",
)


def __dir__():
    return __all__


def _format_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedGeometryError(
            f"Expected a number, got {type(value).__name__}"
        )
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        raise MalformedGeometryError(f"Can't write non-finite value {value!r}")
    if value == 0 and math.copysign(1.0, value) < 0:
        return "-0"
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def _list(value, what):
    if not isinstance(value, (list, tuple)):
        raise MalformedGeometryError(
            f"Expected a list of {what}, got {type(value).__name__}"
        )
    return value


def point(
    point: Coordinate, *, separator: str = ",", wrap_vertices: bool = False
) -> str:
    """Format a coordinate as ``"x y"``"""
    if not isinstance(point, Coordinate):
        raise MalformedGeometryError(
            f"Expected a Coordinate, got {type(point).__name__}"
        )
    return f"{_format_number(point.x)} {_format_number(point.y)}"


def linestring(
    linestring: List[Coordinate],
    *,
    separator: str = ",",
    wrap_vertices: bool = False,
) -> str:
    return separator.join(point(c) for c in _list(linestring, "coordinates"))


def multipoint(
    multipoint: List[Coordinate],
    *,
    separator: str = ",",
    wrap_vertices: bool = False,
) -> str:
    """Format the points of a ``MULTIPOINT``.

    With ``wrap_vertices`` each point is written in its own parentheses,
    ``(1 2),(3 4)``, rather than ``1 2,3 4``.
    """
    coords = _list(multipoint, "coordinates")
    if wrap_vertices:
        return separator.join(f"({point(c)})" for c in coords)
    return separator.join(point(c) for c in coords)


def _group(coords, separator):
    text = linestring(coords, separator=separator)
    return f"({text})" if text else EMPTY


def polygon(
    polygon: List[List[Coordinate]],
    *,
    separator: str = ",",
    wrap_vertices: bool = False,
) -> str:
    """Format the rings of a ``POLYGON``. An empty ring is written ``EMPTY``."""
    return separator.join(_group(r, separator) for r in _list(polygon, "rings"))


def multilinestring(
    multilinestring: List[List[Coordinate]],
    *,
    separator: str = ",",
    wrap_vertices: bool = False,
) -> str:
    return separator.join(
        _group(line, separator) for line in _list(multilinestring, "linestrings")
    )


def multipolygon(
    multipolygon: List[List[List[Coordinate]]],
    *,
    separator: str = ",",
    wrap_vertices: bool = False,
) -> str:
    parts = []
    for rings in _list(multipolygon, "polygons"):
        text = polygon(rings, separator=separator)
        parts.append(f"({text})" if text else EMPTY)
    return separator.join(parts)


def geometrycollection(
    geometrycollection: List[Geometry],
    *,
    separator: str = ",",
    wrap_vertices: bool = False,
) -> str:
    """Format the members of a ``GEOMETRYCOLLECTION``, each with its own
    keyword"""
    return separator.join(
        geometry(g, separator=separator, wrap_vertices=wrap_vertices)
        for g in _list(geometrycollection, "geometries")
    )


_WRITERS = {
    GeometryType.POINT: (point, "coordinate"),
    GeometryType.LINESTRING: (linestring, "coordinates"),
    GeometryType.POLYGON: (polygon, "rings"),
    GeometryType.MULTIPOINT: (multipoint, "coordinates"),
    GeometryType.MULTILINESTRING: (multilinestring, "lines"),
    GeometryType.MULTIPOLYGON: (multipolygon, "polygons"),
    GeometryType.GEOMETRYCOLLECTION: (geometrycollection, "geometries"),
}


def geometry(
    geometry: Geometry, *, separator: str = ",", wrap_vertices: bool = False
) -> str:
    """Write a geometry as WKT, keyword included.

    Geometries with no components are written as ``KEYWORD EMPTY``.
    """
    kind = getattr(geometry, "kind", None)
    if kind not in _WRITERS or not isinstance(geometry, GEOMETRY_TYPES[kind]):
        raise MalformedGeometryError(
            f"Expected a geometry, got {type(geometry).__name__}"
        )
    func, field = _WRITERS[kind]
    body = func(
        getattr(geometry, field), separator=separator, wrap_vertices=wrap_vertices
    )
    if not body:
        return f"{kind.keyword} {EMPTY}"
    return f"{kind.keyword}({body})"


def write(
    geometries: Iterable[Geometry],
    *,
    delimiter: str = ";",
    separator: str = ",",
    wrap_vertices: bool = False,
) -> str:
    """Write several geometries as a single document, joined by ``delimiter``"""
    return delimiter.join(
        geometry(g, separator=separator, wrap_vertices=wrap_vertices)
        for g in geometries
    )
