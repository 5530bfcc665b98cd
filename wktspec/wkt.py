import logging
from typing import Any, Iterable, List, Optional, Union

import msgspec

from . import _tokenizer, extract, ingest
from .adapters import GeometryFactory, GeometryInspector, from_object, to_object
from .errors import DecodeError
from .geojson import from_geojson, to_geojson
from .geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    is_collection,
    same_coords,
)

__all__ = (
    "Encoder",
    "Decoder",
    "ReadResult",
    "Wkt",
    "encode",
    "decode",
    "read",
    "write",
)

logger = logging.getLogger(__name__)


def __dir__():
    return __all__


def _check_separator(name, value):
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    if not value or set(value) & set("()"):
        raise ValueError(
            f"{name} must be a non-empty string without parentheses, "
            f"got {value!r}"
        )
    return value


class ReadResult(msgspec.Struct):
    """The outcome of reading one item of a WKT document.

    Parameters
    ----------
    index: int
        The position of the item in the document.
    text: str
        The item's text.
    geometry: Geometry, optional
        The parsed geometry, if reading succeeded.
    error: DecodeError, optional
        The reason reading failed, if it did.
    """

    index: int
    text: str
    geometry: Optional[Geometry] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Decoder:
    """A WKT decoder.

    Parameters
    ----------
    delimiter : str, optional
        The separator between geometries in a document. Defaults to ``";"``.
    separator : str, optional
        The separator between the components of a geometry. Defaults to
        ``","``.
    """

    __slots__ = ("delimiter", "separator")

    def __init__(self, *, delimiter: str = ";", separator: str = ","):
        self.delimiter = _check_separator("delimiter", delimiter)
        self.separator = _check_separator("separator", separator)

    def __repr__(self):
        return (
            f"Decoder(delimiter={self.delimiter!r}, separator={self.separator!r})"
        )

    def decode(self, text: str) -> Geometry:
        """Read a single geometry.

        Raises
        ------
        DecodeError
            If ``text`` isn't a single well formed geometry.
        """
        return ingest.geometry(text, separator=self.separator)

    def read(self, document: str) -> List[Geometry]:
        """Read every geometry in ``document``.

        Stops at the first malformed item; the raised error has ``index`` set
        to that item's position.
        """
        return ingest.read(
            document, delimiter=self.delimiter, separator=self.separator
        )

    def read_results(self, document: str) -> List[ReadResult]:
        """Read every geometry in ``document``, reporting each item separately.

        Malformed items don't stop the read; their `ReadResult` holds the
        error instead of a geometry. When the delimiter overlaps the separator
        items are split by parenthesis depth, so unbalanced parentheses there
        raise `UnbalancedDelimitersError` for the whole document.
        """
        out = []
        for i, text in enumerate(
            _tokenizer.split_document(document, self.delimiter, self.separator)
        ):
            if not text:
                continue
            try:
                geom = ingest.geometry(text, separator=self.separator)
            except DecodeError as exc:
                exc.index = i
                logger.debug("Failed reading item %d of WKT document: %s", i, exc)
                out.append(ReadResult(i, text, error=exc))
            else:
                out.append(ReadResult(i, text, geometry=geom))
        logger.debug(
            "Read %d WKT items, %d failed",
            len(out),
            sum(not r.ok for r in out),
        )
        return out


class Encoder:
    """A WKT encoder.

    Parameters
    ----------
    delimiter : str, optional
        The separator between geometries in a document. Defaults to ``";"``.
    separator : str, optional
        The separator between the components of a geometry. Defaults to
        ``","``.
    wrap_vertices : bool, optional
        Whether to wrap each point of a ``MULTIPOINT`` in parentheses. If
        ``True``: ``MULTIPOINT((30 10),(10 30))``; if ``False`` (the default):
        ``MULTIPOINT(30 10,10 30)``.
    """

    __slots__ = ("delimiter", "separator", "wrap_vertices")

    def __init__(
        self,
        *,
        delimiter: str = ";",
        separator: str = ",",
        wrap_vertices: bool = False,
    ):
        self.delimiter = _check_separator("delimiter", delimiter)
        self.separator = _check_separator("separator", separator)
        self.wrap_vertices = bool(wrap_vertices)

    def __repr__(self):
        return (
            f"Encoder(delimiter={self.delimiter!r}, separator={self.separator!r}, "
            f"wrap_vertices={self.wrap_vertices!r})"
        )

    def encode(self, geometry: Geometry) -> str:
        """Write a single geometry.

        Raises
        ------
        EncodeError
            If ``geometry`` doesn't follow the geometry model.
        """
        return extract.geometry(
            geometry, separator=self.separator, wrap_vertices=self.wrap_vertices
        )

    def write(self, geometries: Iterable[Geometry]) -> str:
        """Write several geometries as one document"""
        return extract.write(
            geometries,
            delimiter=self.delimiter,
            separator=self.separator,
            wrap_vertices=self.wrap_vertices,
        )


_default_decoder = Decoder()
_default_encoder = Encoder()


def decode(text: str) -> Geometry:
    """Read a single WKT geometry.

    Examples
    --------
    >>> decode("LINESTRING(30 10, 10 30, 40 40)")
    LineString(coordinates=[Coordinate(x=30.0, y=10.0), Coordinate(x=10.0, y=30.0), Coordinate(x=40.0, y=40.0)])
    """
    return _default_decoder.decode(text)


def encode(geometry: Geometry, *, wrap_vertices: bool = False) -> str:
    """Write a single geometry as WKT"""
    if wrap_vertices:
        return Encoder(wrap_vertices=True).encode(geometry)
    return _default_encoder.encode(geometry)


def read(document: str, *, delimiter: str = ";") -> List[Geometry]:
    """Read every geometry in a ``delimiter`` separated document"""
    return Decoder(delimiter=delimiter).read(document)


def write(geometries: Iterable[Geometry], *, delimiter: str = ";") -> str:
    """Write geometries as a ``delimiter`` separated document"""
    return Encoder(delimiter=delimiter).write(geometries)


class Wkt:
    """A stateful reader and writer holding the geometries last read.

    Parameters
    ----------
    text : str, optional
        A WKT document to read immediately.
    delimiter : str, optional
        The separator between geometries in a document. Defaults to ``";"``.
    wrap_vertices : bool, optional
        Whether to wrap each point of a ``MULTIPOINT`` in parentheses when
        writing.

    Examples
    --------
    >>> w = Wkt("POINT(1 2);POINT(3 4)")
    >>> len(w.components)
    2
    >>> w.write()
    'POINT(1 2);POINT(3 4)'
    """

    def __init__(
        self,
        text: Optional[str] = None,
        *,
        delimiter: str = ";",
        wrap_vertices: bool = False,
    ):
        self.components: List[Geometry] = []
        self.delimiter = delimiter
        self.wrap_vertices = wrap_vertices
        if text is not None:
            self.read(text)

    def __repr__(self):
        return f"Wkt({self.write()!r})"

    def _encoder(self):
        return Encoder(delimiter=self.delimiter, wrap_vertices=self.wrap_vertices)

    def read(self, text: str) -> List[Geometry]:
        """Read a WKT document, replacing the held components"""
        self.components = Decoder(delimiter=self.delimiter).read(text)
        return self.components

    def write(self, components: Optional[Iterable[Geometry]] = None) -> str:
        """Write ``components`` (or the held components) as WKT"""
        if components is None:
            components = self.components
        return self._encoder().write(components)

    def is_collection(self) -> bool:
        """Whether the held geometry is made of several parts"""
        if len(self.components) != 1:
            return len(self.components) > 1
        return is_collection(self.components[0])

    @staticmethod
    def same_coords(a: Coordinate, b: Coordinate) -> bool:
        return same_coords(a, b)

    def to_object(self, factory: GeometryFactory) -> Union[Any, List[Any]]:
        """Build foreign geometry objects from the held components.

        Returns a single object when one geometry is held, and a list
        otherwise.
        """
        objs = [to_object(g, factory) for g in self.components]
        return objs[0] if len(objs) == 1 else objs

    def from_object(self, obj: Any, inspector: GeometryInspector) -> "Wkt":
        """Replace the held components with a geometry read from a foreign
        object"""
        self.components = [from_object(obj, inspector)]
        return self

    def to_json(self) -> bytes:
        """Serialize the held geometry as a GeoJSON geometry object.

        Several held geometries are written as a ``GeometryCollection``.
        """
        if len(self.components) == 1:
            return to_geojson(self.components[0])
        return to_geojson(GeometryCollection(list(self.components)))

    def from_json(self, buf: Union[bytes, str]) -> "Wkt":
        """Replace the held components with a GeoJSON geometry object"""
        self.components = [from_geojson(buf)]
        return self
