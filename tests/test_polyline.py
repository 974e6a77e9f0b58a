"""
Codec tests: varint/zigzag building blocks, decode, encode.

Pure logic, no app or settings involved.
"""

import pytest

from polyline_tools.core.errors import InvalidInput, MalformedEncoding
from polyline_tools.core.polyline import (
    decode,
    decode_ints,
    decode_signed,
    decode_unsigned,
    encode,
    encode_ints,
    encode_signed,
    encode_unsigned,
    zigzag_decode,
    zigzag_encode,
)

HELSINKI_POINTS = [
    [60.19731, 24.92249],
    [60.19381, 24.92600],
    [60.19112, 24.91613],
    [60.19385, 24.90429],
    [60.20170, 24.89940],
]
HELSINKI_POLYLINE = "ehlnJqtbwCzT}TxOt|@aP~hAap@p]"

ESPOO_POINTS = [
    [60.22353, 24.78627],
    [60.22191, 24.78679],
    [60.21961, 24.78610],
    [60.21692, 24.78782],
]
ESPOO_POLYLINE = "alqnJeahvCbIgBjMhCxOwI"

TWELVE_POINT_POLYLINE = "asgnJcidwCti@a{@wJimAcQcAkT|Li\\jDaWaNwKa{@}Etu@~FjmA{T~\\cq@qG"


# ------------------------------------------------------------------
# Varint / zigzag
# ------------------------------------------------------------------

@pytest.mark.parametrize("d,r", [(0, 0), (-1, 1), (1, 2), (-2, 3), (2, 4), (-17998321, 35996641)])
def test_zigzag(d, r):
    assert zigzag_encode(d) == r
    assert zigzag_decode(r) == d


def test_encode_unsigned_single_chunk():
    assert encode_unsigned(0) == "?"
    assert encode_unsigned(0x1F) == "^"


def test_encode_unsigned_uses_continuation_flag():
    s = encode_unsigned(0x20)
    assert s == "_@"
    assert all(63 <= ord(c) <= 126 for c in s)


def test_decode_unsigned_advances_cursor():
    text = encode_unsigned(123456) + encode_unsigned(7)
    value, idx = decode_unsigned(text, 0)
    assert value == 123456
    value, idx = decode_unsigned(text, idx)
    assert value == 7
    assert idx == len(text)


def test_signed_value_from_format_documentation():
    # -179.98321 at 1e5
    assert encode_signed(-17998321) == "`~oia@"
    assert decode_signed("`~oia@", 0) == (-17998321, 6)


# ------------------------------------------------------------------
# encode
# ------------------------------------------------------------------

def test_encode_known_vectors():
    assert encode(HELSINKI_POINTS) == HELSINKI_POLYLINE
    assert encode(ESPOO_POINTS) == ESPOO_POLYLINE


def test_encode_format_documentation_example():
    pts = [(38.5, -120.2), (40.7, -120.95), (43.252, -126.453)]
    assert encode(pts) == "_p~iF~ps|U_ulLnnqC_mqNvxq`@"


def test_encode_empty():
    assert encode([]) == ""


def test_encode_accepts_ints_and_tuples():
    assert encode([(0, 0)]) == "??"
    assert encode(((0.00001, -0.00001),)) == "A@"


@pytest.mark.parametrize(
    "bad",
    [
        None,
        "not points",
        42,
        [[1.0]],
        [[1.0, 2.0, 3.0]],
        [[1.0, "2"]],
        [[True, 2.0]],
        [[float("nan"), 0.0]],
        [[0.0, float("inf")]],
        [[1.0, 2.0], "xy"],
    ],
)
def test_encode_rejects_bad_points(bad):
    with pytest.raises(InvalidInput):
        encode(bad)


def test_encode_error_names_offending_index():
    with pytest.raises(InvalidInput, match=r"points\[1\]"):
        encode([[1.0, 2.0], [3.0]])


# ------------------------------------------------------------------
# decode
# ------------------------------------------------------------------

def test_decode_known_vector():
    result = decode(TWELVE_POINT_POLYLINE)
    assert isinstance(result, list)
    assert len(result) == 12
    assert result[-1] == (60.19675, 24.93759)
    assert result[0] == (60.17345, 24.9309)


def test_decode_empty_string():
    assert decode("") == []


def test_decode_custom_precision():
    # Same integers, read at 1e6
    pts = decode("_p~iF~ps|U", precision=6)
    assert pts == [(3.85, -12.02)]


def test_decode_precision_zero():
    assert decode("A@", precision=0) == [(1.0, -1.0)]


@pytest.mark.parametrize("precision", [-1, 1.5, "5", True])
def test_decode_rejects_bad_precision(precision):
    with pytest.raises(InvalidInput):
        decode(HELSINKI_POLYLINE, precision)


def test_decode_accepts_valid_integer_precision():
    # The guard rejects invalid precisions only
    assert len(decode(HELSINKI_POLYLINE, 5)) == 5


@pytest.mark.parametrize("bad", [None, 123, ["abc"], b"??"])
def test_decode_rejects_non_string(bad):
    with pytest.raises(InvalidInput):
        decode(bad)


def test_decode_truncated_varint():
    # "_" has the continuation flag set and nothing follows
    with pytest.raises(MalformedEncoding):
        decode("??_")


def test_decode_missing_longitude():
    with pytest.raises(MalformedEncoding):
        decode("?")


def test_decode_out_of_range_character():
    with pytest.raises(MalformedEncoding):
        decode("? ")


# ------------------------------------------------------------------
# Round trip
# ------------------------------------------------------------------

@pytest.mark.parametrize(
    "pts",
    [
        HELSINKI_POINTS,
        [[-33.868820, 151.209296], [-33.868821, 151.209297], [-33.9, 151.3]],
        [[89.999994, 179.999996], [-89.999994, -179.999996]],
        [[0.123456789, -0.987654321], [0.123456789, -0.987654321]],
    ],
)
def test_round_trip_within_half_unit(pts):
    out = decode(encode(pts))
    assert len(out) == len(pts)
    for (lat, lon), (olat, olon) in zip(pts, out):
        assert abs(lat - olat) <= 0.5e-5 + 1e-12
        assert abs(lon - olon) <= 0.5e-5 + 1e-12


def test_int_codec_round_trip():
    pairs = [(0, 0), (6019731, 2492249), (-17998321, 3), (-17998321, 3)]
    assert decode_ints(encode_ints(pairs)) == pairs


def test_encode_rejects_coordinate_that_overflows_scaling():
    with pytest.raises(InvalidInput, match=r"points\[0\]"):
        encode([[1e304, 0.0]])


def test_encode_rejects_coordinate_past_fixed_width():
    with pytest.raises(InvalidInput):
        encode([[0.0, 90000.0]])


def test_decode_rejects_overlong_varint():
    # Eight continuation chunks before the terminator
    with pytest.raises(MalformedEncoding, match="longer than 7"):
        decode_unsigned("_" * 8 + "?", 0)
    with pytest.raises(MalformedEncoding):
        decode("_" * 40 + "??")


def test_decode_accepts_seven_chunk_varint():
    value, idx = decode_unsigned("~" * 6 + "^", 0)
    assert value == 2 ** 35 - 1
    assert idx == 7
