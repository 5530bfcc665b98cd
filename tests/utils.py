from wktspec import Coordinate, GeometryCollection, Point


def coords(*pairs):
    """Build a list of coordinates from ``(x, y)`` pairs"""
    return [Coordinate(x, y) for x, y in pairs]


def nested_collection(depth):
    """Build a point wrapped in ``depth`` geometry collections, returning the
    WKT text and the expected geometry"""
    text = "POINT(1 2)"
    geom = Point(Coordinate(1, 2))
    for _ in range(depth):
        text = f"GEOMETRYCOLLECTION({text})"
        geom = GeometryCollection([geom])
    return text, geom
