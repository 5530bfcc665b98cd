import pytest

from utils import coords

from wktspec import (
    Coordinate,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)

SQUARE = coords((0, 0), (1, 0), (1, 1), (0, 1), (0, 0))
HOLE = coords((0.25, 0.25), (0.5, 0.25), (0.5, 0.5), (0.25, 0.25))


EXAMPLES = {
    "point": Point(Coordinate(30, 10)),
    "linestring": LineString(coords((30, 10), (10, 30), (40, 40))),
    "polygon": Polygon([SQUARE, HOLE]),
    "multipoint": MultiPoint(coords((10, 40), (40, 30), (20, 20), (30, 10))),
    "multilinestring": MultiLineString(
        [coords((10, 10), (20, 20), (10, 40)), coords((40, 40), (30, 30))]
    ),
    "multipolygon": MultiPolygon([[SQUARE], [SQUARE, HOLE]]),
    "geometrycollection": GeometryCollection(
        [
            Point(Coordinate(4, 6)),
            LineString(coords((4, 6), (7, 10))),
            GeometryCollection([Polygon([SQUARE])]),
        ]
    ),
    "negative-and-fractional": LineString(
        coords((-122.4194, 37.7749), (1e-7, -2.5e20), (0.1, 0.30000000000000004))
    ),
    "empty-linestring": LineString([]),
    "empty-polygon": Polygon([]),
    "polygon-empty-ring": Polygon([SQUARE, []]),
    "empty-multipoint": MultiPoint([]),
    "empty-multipolygon": MultiPolygon([]),
    "empty-collection": GeometryCollection([]),
    "collection-with-empties": GeometryCollection(
        [MultiPoint([]), Point(Coordinate(1, 2)), GeometryCollection([])]
    ),
}


@pytest.fixture(params=sorted(EXAMPLES))
def example(request):
    return EXAMPLES[request.param]


@pytest.fixture(params=[False, True])
def wrap_vertices(request):
    return request.param
