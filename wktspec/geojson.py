"""GeoJSON geometry objects, and conversion to and from the geometry model.

The GeoJSON types here are msgspec structs, so `to_geojson` and
`from_geojson` go straight between the model and JSON bytes.

Examples
--------
>>> from wktspec import decode
>>> to_geojson(decode("POINT(1 2)"))
b'{"type":"Point","coordinates":[1.0,2.0]}'
"""
from __future__ import annotations

from typing import List, Tuple, Union

import msgspec

from .adapters import from_object, to_object
from .geometry import Geometry as _Geometry, GeometryType

__all__ = (
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Geometry",
    "FACTORY",
    "INSPECTOR",
    "to_geojson",
    "from_geojson",
)


def __dir__():
    return __all__


Position = Tuple[float, float]


# All types set `tag=True`, meaning that they'll make use of a `type` field to
# disambiguate between types when decoding.
class Point(msgspec.Struct, tag=True):
    coordinates: Position


class MultiPoint(msgspec.Struct, tag=True):
    coordinates: List[Position]


class LineString(msgspec.Struct, tag=True):
    coordinates: List[Position]


class MultiLineString(msgspec.Struct, tag=True):
    coordinates: List[List[Position]]


class Polygon(msgspec.Struct, tag=True):
    coordinates: List[List[Position]]


class MultiPolygon(msgspec.Struct, tag=True):
    coordinates: List[List[List[Position]]]


class GeometryCollection(msgspec.Struct, tag=True):
    geometries: List[Geometry]


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]


class _Factory:
    def point(self, x, y):
        return Point((x, y))

    def linestring(self, coords):
        return LineString(list(coords))

    def polygon(self, rings):
        return Polygon([list(r) for r in rings])

    def multipoint(self, coords):
        return MultiPoint(list(coords))

    def multilinestring(self, lines):
        return MultiLineString([list(line) for line in lines])

    def multipolygon(self, polygons):
        return MultiPolygon([[list(r) for r in rings] for rings in polygons])

    def geometrycollection(self, members):
        return GeometryCollection(list(members))


class _Inspector:
    _kinds = {
        Point: GeometryType.POINT,
        MultiPoint: GeometryType.MULTIPOINT,
        LineString: GeometryType.LINESTRING,
        MultiLineString: GeometryType.MULTILINESTRING,
        Polygon: GeometryType.POLYGON,
        MultiPolygon: GeometryType.MULTIPOLYGON,
        GeometryCollection: GeometryType.GEOMETRYCOLLECTION,
    }

    def type_of(self, obj):
        try:
            return self._kinds[type(obj)]
        except KeyError:
            raise TypeError(
                f"Expected a GeoJSON geometry, got {type(obj).__name__}"
            ) from None

    def coordinates_of(self, obj):
        return obj.coordinates

    def children_of(self, obj):
        return obj.geometries


FACTORY = _Factory()
INSPECTOR = _Inspector()

_decoder = msgspec.json.Decoder(Geometry)
_encoder = msgspec.json.Encoder()


def to_geojson(geometry: _Geometry) -> bytes:
    """Serialize a geometry as a GeoJSON geometry object"""
    return _encoder.encode(to_object(geometry, FACTORY))


def from_geojson(buf: Union[bytes, str]) -> _Geometry:
    """Deserialize a GeoJSON geometry object.

    Raises
    ------
    msgspec.DecodeError
        If ``buf`` isn't valid JSON, or isn't a GeoJSON geometry.
    """
    return from_object(_decoder.decode(buf), INSPECTOR)
