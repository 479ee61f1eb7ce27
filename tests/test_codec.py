import pytest
from hypothesis import given, strategies as st

import geohash64
from geohash64 import (
    bounding_box,
    bounding_box_int,
    bounding_box_int_with_precision,
    convert_int_to_string,
    convert_string_to_int,
    decode,
    decode_center,
    decode_int,
    decode_int_with_precision,
    encode,
    encode_int,
    encode_int_with_precision,
    encode_with_max_precision,
    encode_with_precision,
    is_valid,
    validate,
)

# The upper edge of each axis wraps to the lower edge, and so does any value
# whose offset x + r rounds onto it; both are left out.
latitudes = st.floats(-90, 90).filter(lambda lat: lat + 90 < 180)
longitudes = st.floats(-180, 180).filter(lambda lng: lng + 180 < 360)
chars = st.integers(0, 12)

# (x + r) / 2r is rounded to a double, which can move a point lying within
# an ulp of a cell edge into the neighboring cell.
EDGE_TOLERANCE = 1e-12


def contains(box, lat, lng):
    return (
        box.min_lat - EDGE_TOLERANCE <= lat <= box.max_lat + EDGE_TOLERANCE
        and box.min_lng - EDGE_TOLERANCE <= lng <= box.max_lng + EDGE_TOLERANCE
    )


@pytest.mark.parametrize(
    "lat, lng, expected",
    [
        (42.6, -5.6, "ezs42"),
        (45.37, -121.7, "c216nekg2kyz"),
        (57.64911, 10.40744, "u4pruydqqvj"),
        (0.0, 0.0, "s"),
        (-90.0, -180.0, "000000000000"),
    ],
)
def test_encode_known_hashes(lat, lng, expected):
    assert encode_with_precision(lat, lng, len(expected)) == expected
    assert encode(lat, lng).startswith(expected)


def test_encode_full_width():
    assert encode(45.37, -121.7) == "c216nekg2kyz"
    assert encode_with_max_precision(45.37, -121.7) == b"c216nekg2kyz"


def test_encode_int_full_width():
    # lat axis 0xC086B67F, lng axis 0x297530EC
    assert encode_int(45.37, -121.7) == 0x58826A364F14BDF5
    assert encode_int(-90.0, -180.0) == 0
    assert encode_int(0.0, 0.0) == 0xC000000000000000


def test_encode_with_zero_precision():
    assert encode_with_precision(45.37, -121.7, 0) == ""
    assert encode_int_with_precision(45.37, -121.7, 0) == 0


@given(latitudes, longitudes)
def test_encode_with_max_precision(lat, lng):
    buf = encode_with_max_precision(lat, lng)
    assert len(buf) == 12
    assert buf.decode("ascii") == encode(lat, lng)


def test_encode_int_known_value():
    assert encode_int_with_precision(42.6, -5.6, 25) == 14672002
    assert encode_int(42.6, -5.6) >> 39 == 14672002


@given(latitudes, longitudes, st.integers(0, 64))
def test_encode_int_with_precision_is_raw(lat, lng, bits):
    full = encode_int(lat, lng)
    assert encode_int_with_precision(lat, lng, bits) == full >> (64 - bits)


@pytest.mark.parametrize("chars", [-1, 13, 20])
def test_encode_rejects_out_of_range_chars(chars):
    with pytest.raises(ValueError, match="chars must be between 0 and 12"):
        encode_with_precision(1.0, 2.0, chars)


@pytest.mark.parametrize("bits", [-1, 65])
def test_int_precision_out_of_range(bits):
    with pytest.raises(ValueError, match="bits must be between 0 and 64"):
        encode_int_with_precision(1.0, 2.0, bits)
    with pytest.raises(ValueError):
        bounding_box_int_with_precision(0, bits)


@pytest.mark.parametrize("hash", ["zzzzzzzzzzzza", "c216nekg2kyz0", "0" * 20])
def test_string_longer_than_64_bits_is_rejected(hash):
    with pytest.raises(ValueError, match="bits must be between 0 and 64"):
        bounding_box(hash)
    with pytest.raises(ValueError, match="bits must be between 0 and 64"):
        convert_string_to_int(hash)
    with pytest.raises(ValueError):
        decode(hash)


@given(latitudes, longitudes, st.integers(1, 11))
def test_prefix_property(lat, lng, chars):
    shorter = encode_with_precision(lat, lng, chars)
    longer = encode_with_precision(lat, lng, chars + 1)
    assert longer[:chars] == shorter
    assert encode(lat, lng)[:chars] == shorter


@given(latitudes, longitudes, chars)
def test_bounding_box_contains_point(lat, lng, chars):
    box = bounding_box(encode_with_precision(lat, lng, chars))
    assert contains(box, lat, lng)


@given(latitudes, longitudes, st.integers(0, 64))
def test_bounding_box_int_contains_point(lat, lng, bits):
    box = bounding_box_int_with_precision(encode_int_with_precision(lat, lng, bits), bits)
    assert contains(box, lat, lng)
    assert contains(bounding_box_int(encode_int(lat, lng)), lat, lng)


def test_bounding_box_known_cell():
    box = bounding_box("s")
    assert (box.min_lat, box.max_lat, box.min_lng, box.max_lng) == (0.0, 45.0, 0.0, 45.0)
    assert bounding_box("c216nekg2kyz").contains(45.37, -121.7)


def test_bounding_box_of_empty_hash_is_world():
    box = bounding_box("")
    assert (box.min_lat, box.max_lat, box.min_lng, box.max_lng) == (
        -90.0,
        90.0,
        -180.0,
        180.0,
    )


def test_bounding_box_matches_int_form():
    inthash, bits = convert_string_to_int("ezs42")
    assert bounding_box_int_with_precision(inthash, bits) == bounding_box("ezs42")


def test_decode_rounds_inside_box():
    assert decode("ezs42") == pytest.approx((42.59, -5.62))
    assert decode("s") == (0.0, 0.0)


def test_decode_center():
    assert decode_center("s") == (22.5, 22.5)
    lat, lng = decode_center("ezs42")
    assert bounding_box("ezs42").contains(lat, lng)


@pytest.mark.parametrize("hash", ["s", "z", "0", "ezs42", "c216ne", "u4pruydqqvj"])
def test_decode_then_encode(hash):
    lat, lng = decode(hash)
    assert encode_with_precision(lat, lng, len(hash)) == hash
    lat, lng = decode_center(hash)
    assert encode_with_precision(lat, lng, len(hash)) == hash


@given(st.data())
def test_decode_then_encode_generated(data):
    n = data.draw(st.integers(1, 12))
    inthash = data.draw(st.integers(0, 2 ** (5 * n) - 1))
    hash = convert_int_to_string(inthash, n)
    assert encode_with_precision(*decode(hash), n) == hash
    assert encode_with_precision(*decode_center(hash), n) == hash


@given(latitudes, longitudes)
def test_decode_int_is_close(lat, lng):
    dlat, dlng = decode_int(encode_int(lat, lng))
    assert abs(dlat - lat) < 1e-7
    assert abs(dlng - lng) < 1e-7


def test_decode_int_with_precision():
    lat, lng = decode_int_with_precision(14672002, 25)
    assert (lat, lng) == pytest.approx((42.59, -5.62))


@given(latitudes, longitudes, chars)
def test_convert_string_to_int(lat, lng, chars):
    inthash, bits = convert_string_to_int(encode(lat, lng)[:chars])
    assert bits == 5 * chars
    assert inthash == encode_int(lat, lng) >> (64 - bits)


@given(latitudes, longitudes, chars)
def test_convert_int_to_string(lat, lng, chars):
    inthash = encode_int(lat, lng) >> (64 - 5 * chars)
    assert convert_int_to_string(inthash, chars) == encode(lat, lng)[:chars]


def test_convert_known_values():
    assert convert_string_to_int("ezs42") == (14672002, 25)
    assert convert_string_to_int("") == (0, 0)
    assert convert_int_to_string(14672002, 5) == "ezs42"
    assert convert_string_to_int("c216nekg2kyz") == (0x58826A364F14BDF5 >> 4, 60)


@given(latitudes, longitudes, chars)
def test_generated_hashes_validate(lat, lng, chars):
    validate(encode(lat, lng))
    assert is_valid(encode_with_precision(lat, lng, chars))


@pytest.mark.parametrize("c", ["a", "i", "l", "o", "A", "E", "Z"])
def test_validate_rejects_invalid_character(c):
    hash = "ezs4" + c
    with pytest.raises(geohash64.InvalidCharacterError) as excinfo:
        validate(hash)
    assert str(excinfo.value) == f"invalid character {c!r}"
    assert excinfo.value.char == c
    assert excinfo.value.code == "invalid_character"
    assert not is_valid(hash)


def test_validate_rejects_long_hash():
    with pytest.raises(geohash64.HashTooLongError, match="too long"):
        validate("0" * 13)
    assert not is_valid("ezs42ezs42ezs42")


def test_validate_checks_length_first():
    with pytest.raises(geohash64.HashTooLongError):
        validate("a" * 13)


def test_validation_errors_are_value_errors():
    with pytest.raises(ValueError):
        validate("hello")
    validate("")
    validate("zzzzzzzzzzzz")
