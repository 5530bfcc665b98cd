import math

import pytest

from utils import coords, nested_collection

from wktspec import (
    Coordinate,
    EncodeError,
    GeometryCollection,
    LineString,
    MalformedGeometryError,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    decode,
    encode,
    extract,
)

SQUARE = coords((0, 0), (1, 0), (1, 1), (0, 0))


def test_module_dir():
    assert set(dir(extract)) == {
        "point",
        "linestring",
        "polygon",
        "multipoint",
        "multilinestring",
        "multipolygon",
        "geometrycollection",
        "geometry",
        "write",
    }


class TestNumbers:
    @pytest.mark.parametrize(
        "x, sol",
        [
            (1, "1"),
            (1.0, "1"),
            (-3.0, "-3"),
            (0.5, "0.5"),
            (-122.4194, "-122.4194"),
            (0.1 + 0.2, "0.30000000000000004"),
            (1e-7, "1e-07"),
            (1e16, "1e+16"),
            (123456789012345.0, "123456789012345"),
            (2**60, str(2**60)),
            (-0.0, "-0"),
            (0.0, "0"),
        ],
    )
    def test_format(self, x, sol):
        assert extract.point(Coordinate(x, 0)) == f"{sol} 0"

    def test_negative_zero_roundtrips(self):
        res = decode(encode(Point(Coordinate(-0.0, 1))))
        assert math.copysign(1.0, res.coordinate.x) == -1.0

    @pytest.mark.parametrize("x", [float("nan"), float("inf"), "1", None, True])
    def test_invalid(self, x):
        with pytest.raises(MalformedGeometryError):
            extract.point(Coordinate(x, 0))


class TestFragments:
    def test_point(self):
        assert extract.point(Coordinate(30, 10)) == "30 10"

    def test_linestring(self):
        assert extract.linestring(coords((30, 10), (10, 30))) == "30 10,10 30"

    def test_linestring_custom_separator(self):
        res = extract.linestring(coords((30, 10), (10, 30)), separator=", ")
        assert res == "30 10, 10 30"

    def test_multipoint(self):
        assert extract.multipoint(coords((1, 2), (3, 4))) == "1 2,3 4"

    def test_multipoint_wrap_vertices(self):
        res = extract.multipoint(coords((1, 2), (3, 4)), wrap_vertices=True)
        assert res == "(1 2),(3 4)"

    def test_polygon(self):
        rings = [SQUARE, coords((0.2, 0.2), (0.3, 0.2), (0.2, 0.2))]
        assert extract.polygon(rings) == (
            "(0 0,1 0,1 1,0 0),(0.2 0.2,0.3 0.2,0.2 0.2)"
        )

    def test_polygon_empty_ring(self):
        assert extract.polygon([SQUARE, []]) == "(0 0,1 0,1 1,0 0),EMPTY"

    def test_multilinestring(self):
        lines = [coords((1, 2), (3, 4)), coords((5, 6))]
        assert extract.multilinestring(lines) == "(1 2,3 4),(5 6)"

    def test_multipolygon(self):
        polys = [[SQUARE], [SQUARE, coords((0, 0))], []]
        assert extract.multipolygon(polys) == (
            "((0 0,1 0,1 1,0 0)),((0 0,1 0,1 1,0 0),(0 0)),EMPTY"
        )

    def test_geometrycollection(self):
        members = [
            Point(Coordinate(1, 2)),
            MultiPoint(coords((1, 2))),
            GeometryCollection([LineString([])]),
        ]
        assert extract.geometrycollection(members) == (
            "POINT(1 2),MULTIPOINT(1 2),GEOMETRYCOLLECTION(LINESTRING EMPTY)"
        )

    def test_geometrycollection_wrap_vertices(self):
        members = [MultiPoint(coords((1, 2), (3, 4)))]
        res = extract.geometrycollection(members, wrap_vertices=True)
        assert res == "MULTIPOINT((1 2),(3 4))"

    @pytest.mark.parametrize(
        "func", [extract.linestring, extract.multipoint, extract.polygon]
    )
    def test_empty_fragment(self, func):
        assert func([]) == ""

    @pytest.mark.parametrize(
        "func", [extract.point, extract.linestring, extract.polygon]
    )
    def test_unknown_option(self, func):
        with pytest.raises(TypeError):
            func([], seperator="|")

    def test_input_not_mutated(self):
        rings = [list(SQUARE)]
        extract.polygon(rings)
        assert rings == [SQUARE]


class TestGeometry:
    @pytest.mark.parametrize(
        "geom, sol",
        [
            (Point(Coordinate(30, 10)), "POINT(30 10)"),
            (LineString(coords((1, 2), (3, 4))), "LINESTRING(1 2,3 4)"),
            (Polygon([SQUARE]), "POLYGON((0 0,1 0,1 1,0 0))"),
            (MultiPoint(coords((1, 2), (3, 4))), "MULTIPOINT(1 2,3 4)"),
            (
                MultiLineString([coords((1, 2), (3, 4))]),
                "MULTILINESTRING((1 2,3 4))",
            ),
            (MultiPolygon([[SQUARE]]), "MULTIPOLYGON(((0 0,1 0,1 1,0 0)))"),
            (
                GeometryCollection([Point(Coordinate(1, 2))]),
                "GEOMETRYCOLLECTION(POINT(1 2))",
            ),
        ],
    )
    def test_geometry(self, geom, sol):
        assert extract.geometry(geom) == sol

    @pytest.mark.parametrize(
        "geom, sol",
        [
            (LineString([]), "LINESTRING EMPTY"),
            (Polygon([]), "POLYGON EMPTY"),
            (MultiPoint([]), "MULTIPOINT EMPTY"),
            (MultiLineString([]), "MULTILINESTRING EMPTY"),
            (MultiPolygon([]), "MULTIPOLYGON EMPTY"),
            (GeometryCollection([]), "GEOMETRYCOLLECTION EMPTY"),
        ],
    )
    def test_empty(self, geom, sol):
        assert extract.geometry(geom) == sol

    def test_wrap_vertices(self):
        geom = MultiPoint(coords((1, 2), (3, 4)))
        assert extract.geometry(geom, wrap_vertices=True) == "MULTIPOINT((1 2),(3 4))"

    def test_deep_nesting(self):
        text, geom = nested_collection(30)
        assert extract.geometry(geom) == text

    @pytest.mark.parametrize(
        "geom",
        [
            Coordinate(1, 2),
            None,
            "POINT(1 2)",
            Point((1, 2)),
            LineString([(1, 2), (3, 4)]),
            LineString(Coordinate(1, 2)),
            Polygon(coords((1, 2))),
            MultiPolygon([SQUARE]),
            GeometryCollection([Coordinate(1, 2)]),
            GeometryCollection(Point(Coordinate(1, 2))),
        ],
    )
    def test_malformed(self, geom):
        with pytest.raises(MalformedGeometryError):
            extract.geometry(geom)

    def test_malformed_is_encode_error(self):
        with pytest.raises(EncodeError):
            extract.geometry(LineString([None]))


class TestWrite:
    def test_write(self):
        geoms = [Point(Coordinate(1, 2)), LineString([])]
        assert extract.write(geoms) == "POINT(1 2);LINESTRING EMPTY"

    def test_write_delimiter(self):
        geoms = [Point(Coordinate(1, 2)), Point(Coordinate(3, 4))]
        assert extract.write(geoms, delimiter="\n") == "POINT(1 2)\nPOINT(3 4)"

    def test_write_nothing(self):
        assert extract.write([]) == ""
