from __future__ import annotations

import enum
from typing import List, Union

import msgspec

__all__ = (
    "GeometryType",
    "Coordinate",
    "Point",
    "LineString",
    "Polygon",
    "MultiPoint",
    "MultiLineString",
    "MultiPolygon",
    "GeometryCollection",
    "Geometry",
    "GEOMETRY_TYPES",
    "same_coords",
    "is_collection",
)


def __dir__():
    return __all__


class GeometryType(enum.Enum):
    """The closed set of geometry kinds. Values are the WKT keywords."""

    POINT = "POINT"
    LINESTRING = "LINESTRING"
    POLYGON = "POLYGON"
    MULTIPOINT = "MULTIPOINT"
    MULTILINESTRING = "MULTILINESTRING"
    MULTIPOLYGON = "MULTIPOLYGON"
    GEOMETRYCOLLECTION = "GEOMETRYCOLLECTION"

    @property
    def keyword(self) -> str:
        return self.value


class Coordinate(msgspec.Struct, frozen=True, array_like=True):
    """An ``x``/``y`` pair.

    Encodes as a two element array (``[x, y]``), which is also the GeoJSON
    position layout.
    """

    x: float
    y: float


Ring = List[Coordinate]


# All geometry types set `tag=True`, so each encodes with a `type` field
# holding the class name. The names match the GeoJSON geometry type names.
class _GeometryBase(msgspec.Struct, frozen=True, tag=True):
    pass


class Point(_GeometryBase):
    coordinate: Coordinate

    kind = GeometryType.POINT


class LineString(_GeometryBase):
    coordinates: List[Coordinate] = []

    kind = GeometryType.LINESTRING


class Polygon(_GeometryBase):
    """A polygon. The first ring is the outer boundary, the rest are holes.

    Rings are not checked for closure or minimum length.
    """

    rings: List[Ring] = []

    kind = GeometryType.POLYGON


class MultiPoint(_GeometryBase):
    coordinates: List[Coordinate] = []

    kind = GeometryType.MULTIPOINT


class MultiLineString(_GeometryBase):
    lines: List[List[Coordinate]] = []

    kind = GeometryType.MULTILINESTRING


class MultiPolygon(_GeometryBase):
    polygons: List[List[Ring]] = []

    kind = GeometryType.MULTIPOLYGON


class GeometryCollection(_GeometryBase):
    geometries: List[Geometry] = []

    kind = GeometryType.GEOMETRYCOLLECTION


Geometry = Union[
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
]

GEOMETRY_TYPES = {
    cls.kind: cls
    for cls in (
        Point,
        LineString,
        Polygon,
        MultiPoint,
        MultiLineString,
        MultiPolygon,
        GeometryCollection,
    )
}


def same_coords(a: Coordinate, b: Coordinate) -> bool:
    """Compare two coordinates for exact equality.

    No tolerance is applied, ``0.1 + 0.2`` and ``0.3`` are different
    coordinates.
    """
    return a.x == b.x and a.y == b.y


def is_collection(geometry: Geometry) -> bool:
    """Whether a geometry is made of several parts (a multi type or a
    ``GeometryCollection``)"""
    return geometry.kind in (
        GeometryType.MULTIPOINT,
        GeometryType.MULTILINESTRING,
        GeometryType.MULTIPOLYGON,
        GeometryType.GEOMETRYCOLLECTION,
    )
