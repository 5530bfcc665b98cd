from .errors import (
    WKTError,
    DecodeError,
    EncodeError,
    UnrecognizedTypeError,
    UnbalancedDelimitersError,
    InvalidCoordinateError,
    MalformedGeometryError,
)
from .geometry import (
    GeometryType,
    Coordinate,
    Point,
    LineString,
    Polygon,
    MultiPoint,
    MultiLineString,
    MultiPolygon,
    GeometryCollection,
    Geometry,
    same_coords,
    is_collection,
)
from .wkt import Encoder, Decoder, ReadResult, Wkt, encode, decode, read, write
from . import adapters, extract, geojson, ingest
from ._version import __version__
