import math
import re
from typing import List, Tuple

from .errors import (
    InvalidCoordinateError,
    MalformedGeometryError,
    UnbalancedDelimitersError,
    UnrecognizedTypeError,
)
from .geometry import Coordinate, GeometryType

# Longest keywords first, so MULTIPOINT isn't read as POINT etc.
_KEYWORD_RE = re.compile(
    r"\s*(%s)(?=[\s(]|$)"
    % "|".join(
        sorted((t.keyword for t in GeometryType), key=len, reverse=True)
    ),
    re.IGNORECASE,
)
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

EMPTY = "EMPTY"


def _abbrev(text, n=40):
    text = text.strip()
    return text if len(text) <= n else text[: n - 3] + "..."


def match_type(text: str) -> Tuple[GeometryType, str]:
    """Match the geometry keyword at the start of ``text``.

    Returns the geometry type and the text following the keyword.
    """
    match = _KEYWORD_RE.match(text)
    if match is None:
        raise UnrecognizedTypeError(
            f"Expected a geometry type keyword, got `{_abbrev(text)}`"
        )
    return GeometryType(match.group(1).upper()), text[match.end() :]


def _check_balanced(text):
    depth = 0
    for i, c in enumerate(text):
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth < 0:
                raise UnbalancedDelimitersError(
                    f"Unexpected `)` at position {i} in `{_abbrev(text)}`"
                )
    if depth:
        raise UnbalancedDelimitersError(
            f"{depth} unclosed `(` in `{_abbrev(text)}`"
        )


def split_top_level(text: str, separator: str = ",") -> List[str]:
    """Split ``text`` on ``separator``, ignoring separators nested inside
    parentheses.

    Parts are stripped of surrounding whitespace. Blank text splits into no
    parts at all.
    """
    if not separator:
        raise ValueError("separator must be a non-empty string")
    if not text.strip():
        return []
    parts = []
    depth = 0
    start = 0
    i = 0
    n = len(text)
    width = len(separator)
    while i < n:
        c = text[i]
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth < 0:
                raise UnbalancedDelimitersError(
                    f"Unexpected `)` at position {i} in `{_abbrev(text)}`"
                )
        elif depth == 0 and text.startswith(separator, i):
            parts.append(text[start:i].strip())
            i += width
            start = i
            continue
        i += 1
    if depth:
        raise UnbalancedDelimitersError(f"{depth} unclosed `(` in `{_abbrev(text)}`")
    parts.append(text[start:].strip())
    return parts


def strip_outer_parens(text: str) -> str:
    """Remove the single pair of parentheses wrapping ``text``.

    The ``EMPTY`` marker is accepted in place of a parenthesized list, and
    returns an empty string.
    """
    stripped = text.strip()
    if stripped.upper() == EMPTY:
        return ""
    _check_balanced(stripped)
    if not (stripped.startswith("(") and stripped.endswith(")")):
        raise MalformedGeometryError(
            f"Expected `(...)` or `EMPTY`, got `{_abbrev(stripped)}`"
        )
    # The opening paren must be the one closed by the final character
    depth = 0
    for c in stripped[:-1]:
        if c == "(":
            depth += 1
        elif c == ")":
            depth -= 1
            if depth == 0:
                raise MalformedGeometryError(
                    f"Expected a single `(...)` group, got `{_abbrev(stripped)}`"
                )
    inner = stripped[1:-1]
    if not inner.strip():
        raise MalformedGeometryError("Empty `()`, use `EMPTY` instead")
    return inner


def parse_coordinate_pair(text: str) -> Coordinate:
    """Parse an ``"x y"`` pair"""
    tokens = text.split()
    if len(tokens) != 2:
        raise InvalidCoordinateError(
            f"Expected 2 coordinate values, got {len(tokens)} in `{_abbrev(text)}`"
        )
    values = []
    for token in tokens:
        if _NUMBER_RE.fullmatch(token) is None:
            raise InvalidCoordinateError(f"Invalid coordinate value `{token}`")
        value = float(token)
        if not math.isfinite(value):
            raise InvalidCoordinateError(
                f"Invalid coordinate value `{token}`, out of range"
            )
        values.append(value)
    return Coordinate(*values)


def split_document(document: str, delimiter: str, separator: str = ",") -> List[str]:
    """Split a document into the text of its geometries.

    When ``delimiter`` can't occur inside a geometry each item is cut out
    without looking at parentheses, so an unbalanced item only affects
    itself. Otherwise the split falls back to `split_top_level`.
    """
    if not delimiter:
        raise ValueError("delimiter must be a non-empty string")
    if delimiter in separator or separator in delimiter:
        return split_top_level(document, delimiter)
    return [part.strip() for part in document.split(delimiter)]
