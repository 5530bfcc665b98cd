"""Translate between the geometry model and another library's geometry objects.

The other library is reached only through two small capabilities supplied by
the caller: a `GeometryFactory` that builds its objects, and a
`GeometryInspector` that takes them apart. See `wktspec.geojson` for an
implementation of both.
"""
from typing import Any, Protocol, Sequence, Tuple

from .errors import MalformedGeometryError
from .geometry import (
    GEOMETRY_TYPES,
    Coordinate,
    Geometry,
    GeometryCollection,
    GeometryType,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

__all__ = ("GeometryFactory", "GeometryInspector", "to_object", "from_object")


def __dir__():
    return __all__


XY = Tuple[float, float]


class GeometryFactory(Protocol):
    """Builds foreign geometry objects. Positions are ``(x, y)`` tuples."""

    def point(self, x: float, y: float) -> Any: ...

    def linestring(self, coords: Sequence[XY]) -> Any: ...

    def polygon(self, rings: Sequence[Sequence[XY]]) -> Any: ...

    def multipoint(self, coords: Sequence[XY]) -> Any: ...

    def multilinestring(self, lines: Sequence[Sequence[XY]]) -> Any: ...

    def multipolygon(self, polygons: Sequence[Sequence[Sequence[XY]]]) -> Any: ...

    def geometrycollection(self, members: Sequence[Any]) -> Any: ...


class GeometryInspector(Protocol):
    """Takes foreign geometry objects apart.

    ``coordinates_of`` returns the positions nested as deep as the type
    requires: one ``(x, y)`` pair for a point, a sequence of pairs for a
    linestring or multipoint, a sequence of those for a polygon or
    multilinestring, and one level more for a multipolygon.
    """

    def type_of(self, obj: Any) -> GeometryType: ...

    def coordinates_of(self, obj: Any) -> Any: ...

    def children_of(self, obj: Any) -> Sequence[Any]: ...


def _xy(c):
    return (c.x, c.y)


def _xys(coords):
    return [_xy(c) for c in coords]


def to_object(geometry: Geometry, factory: GeometryFactory) -> Any:
    """Build a foreign geometry object from ``geometry`` using ``factory``"""
    if isinstance(geometry, Point):
        return factory.point(geometry.coordinate.x, geometry.coordinate.y)
    elif isinstance(geometry, LineString):
        return factory.linestring(_xys(geometry.coordinates))
    elif isinstance(geometry, Polygon):
        return factory.polygon([_xys(r) for r in geometry.rings])
    elif isinstance(geometry, MultiPoint):
        return factory.multipoint(_xys(geometry.coordinates))
    elif isinstance(geometry, MultiLineString):
        return factory.multilinestring([_xys(line) for line in geometry.lines])
    elif isinstance(geometry, MultiPolygon):
        return factory.multipolygon(
            [[_xys(r) for r in rings] for rings in geometry.polygons]
        )
    elif isinstance(geometry, GeometryCollection):
        return factory.geometrycollection(
            [to_object(g, factory) for g in geometry.geometries]
        )
    raise MalformedGeometryError(f"Expected a geometry, got {type(geometry).__name__}")


def _coord(value):
    if isinstance(value, Coordinate):
        return value
    try:
        x, y = value
    except (TypeError, ValueError):
        raise MalformedGeometryError(
            f"Expected an (x, y) position, got {value!r}"
        ) from None
    for v in (x, y):
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise MalformedGeometryError(f"Expected a number, got {v!r}")
    return Coordinate(float(x), float(y))


def _nested(value, depth):
    if depth == 0:
        return _coord(value)
    if isinstance(value, (str, bytes)):
        raise MalformedGeometryError(f"Expected a sequence, got {value!r}")
    try:
        items = list(value)
    except TypeError:
        raise MalformedGeometryError(
            f"Expected a sequence, got {type(value).__name__}"
        ) from None
    return [_nested(v, depth - 1) for v in items]


_DEPTHS = {
    GeometryType.POINT: 0,
    GeometryType.LINESTRING: 1,
    GeometryType.MULTIPOINT: 1,
    GeometryType.POLYGON: 2,
    GeometryType.MULTILINESTRING: 2,
    GeometryType.MULTIPOLYGON: 3,
}


def from_object(obj: Any, inspector: GeometryInspector) -> Geometry:
    """Build a geometry from a foreign geometry object using ``inspector``"""
    kind = inspector.type_of(obj)
    if kind is GeometryType.GEOMETRYCOLLECTION:
        return GeometryCollection(
            [from_object(child, inspector) for child in inspector.children_of(obj)]
        )
    if kind not in _DEPTHS:
        raise MalformedGeometryError(f"Unknown geometry type {kind!r}")
    return GEOMETRY_TYPES[kind](_nested(inspector.coordinates_of(obj), _DEPTHS[kind]))
