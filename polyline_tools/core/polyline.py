from __future__ import annotations

import math
from numbers import Real
from typing import List, Optional, Sequence, Tuple

from polyline_tools.core.errors import InvalidInput, MalformedEncoding

# Canonical Google polyline precision (5 decimal digits, factor 1e5).
DEFAULT_PRECISION = 5
ENCODE_PRECISION = 5

_OFFSET = 63
_CHUNK_MASK = 0x1F
_CONTINUATION = 0x20
_MAX_BYTE = 126

# Values are 32-bit in the canonical format; seven 5-bit chunks (35 bits) hold
# every zigzagged delta, anything longer is rejected on decode.
_MAX_CHUNKS = 7
# Largest scaled coordinate magnitude whose deltas still fit in _MAX_CHUNKS
_MAX_SCALED = 2 ** 33

Coord = Tuple[float, float]
IntCoord = Tuple[int, int]


# ──────────────────────────────────────────────────────────────
# Varint + zigzag
# ──────────────────────────────────────────────────────────────

def encode_unsigned(v: int) -> str:
    chunks = []
    while v >= _CONTINUATION:
        chunks.append(chr((_CONTINUATION | (v & _CHUNK_MASK)) + _OFFSET))
        v >>= 5
    chunks.append(chr(v + _OFFSET))
    return "".join(chunks)


def decode_unsigned(s: str, idx: int) -> tuple[int, int]:
    """
    Read one varint starting at ``idx``.

    Returns ``(value, next_idx)``. Raises MalformedEncoding when the string
    runs out with the continuation flag still set, on a byte outside 63-126,
    or when the value runs past seven chunks.
    """
    result = 0
    shift = 0
    n = len(s)
    start = idx
    while True:
        if idx >= n:
            raise MalformedEncoding(
                f"truncated varint starting at index {start} of polyline of length {n}"
            )
        code = ord(s[idx])
        if code < _OFFSET or code > _MAX_BYTE:
            raise MalformedEncoding(f"invalid character {s[idx]!r} at index {idx}")
        b = code - _OFFSET
        idx += 1
        result |= (b & _CHUNK_MASK) << shift
        shift += 5
        if b < _CONTINUATION:
            break
        if shift >= _MAX_CHUNKS * 5:
            raise MalformedEncoding(
                f"varint starting at index {start} is longer than {_MAX_CHUNKS} characters"
            )
    return result, idx


def zigzag_encode(d: int) -> int:
    return ~(d << 1) if d < 0 else (d << 1)


def zigzag_decode(r: int) -> int:
    return ~(r >> 1) if (r & 1) else (r >> 1)


def encode_signed(d: int) -> str:
    return encode_unsigned(zigzag_encode(d))


def decode_signed(s: str, idx: int) -> tuple[int, int]:
    r, idx = decode_unsigned(s, idx)
    return zigzag_decode(r), idx


# ──────────────────────────────────────────────────────────────
# Validation
# ──────────────────────────────────────────────────────────────

def _is_number(v) -> bool:
    return isinstance(v, Real) and not isinstance(v, bool)


def _check_polyline(poly, arg: str = "polyline") -> None:
    if not isinstance(poly, str):
        raise InvalidInput(f"{arg} is not a string, got {poly!r}")


def _check_precision(precision) -> int:
    if precision is None:
        return DEFAULT_PRECISION
    if not isinstance(precision, int) or isinstance(precision, bool) or precision < 0:
        raise InvalidInput(f"precision must be a non-negative integer, got {precision!r}")
    return precision


def _check_points(points) -> None:
    if not isinstance(points, (list, tuple)):
        raise InvalidInput(f"points is not a sequence of [lat, lon] pairs, got {points!r}")
    for i, p in enumerate(points):
        if not isinstance(p, (list, tuple)) or len(p) != 2:
            raise InvalidInput(f"points[{i}] is not a [lat, lon] pair, got {p!r}")
        for v in p:
            if not _is_number(v) or not math.isfinite(v):
                raise InvalidInput(f"points[{i}] has a non-numeric coordinate, got {p!r}")
            if abs(v) * 10 ** ENCODE_PRECISION >= _MAX_SCALED:
                raise InvalidInput(f"points[{i}] has a coordinate out of encodable range, got {p!r}")


# ──────────────────────────────────────────────────────────────
# Fixed-point codec
# ──────────────────────────────────────────────────────────────

def encode_ints(pairs: Sequence[IntCoord]) -> str:
    """Encode already-scaled integer (lat, lon) pairs."""
    last_lat = 0
    last_lon = 0
    out = []
    for ilat, ilon in pairs:
        out.append(encode_signed(ilat - last_lat))
        out.append(encode_signed(ilon - last_lon))
        last_lat = ilat
        last_lon = ilon
    return "".join(out)


def decode_ints(poly: str) -> List[IntCoord]:
    """Decode into cumulative integer (lat, lon) pairs, before any scaling."""
    _check_polyline(poly)
    idx = 0
    lat = 0
    lon = 0
    pairs: List[IntCoord] = []
    n = len(poly)
    while idx < n:
        dlat, idx = decode_signed(poly, idx)
        if idx >= n:
            raise MalformedEncoding(
                f"latitude delta at point {len(pairs)} has no longitude delta"
            )
        dlon, idx = decode_signed(poly, idx)
        lat += dlat
        lon += dlon
        pairs.append((lat, lon))
    return pairs


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


# ──────────────────────────────────────────────────────────────
# Public codec
# ──────────────────────────────────────────────────────────────

def encode(points: Sequence[Sequence[float]]) -> str:
    """
    Encode [(lat, lon), ...] into a Google polyline at 1e5 precision.

    Encode precision is fixed; decode with a matching precision to read it back.
    """
    _check_points(points)
    factor = 10 ** ENCODE_PRECISION
    return encode_ints(
        [(_round_half_up(lat * factor), _round_half_up(lon * factor)) for lat, lon in points]
    )


def decode(poly: str, precision: Optional[int] = None) -> List[Coord]:
    """
    Decode a Google polyline into [(lat, lon), ...].

    ``precision`` is the number of decimal digits the text was encoded with
    (default 5). An empty string decodes to an empty list.
    """
    _check_polyline(poly)
    factor = 10 ** _check_precision(precision)
    return [(lat / factor, lon / factor) for lat, lon in decode_ints(poly)]
