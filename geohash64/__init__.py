"""Geohash encoding and decoding in string and 64-bit integer form."""

from geohash64.box import Box
from geohash64.codec import (
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
from geohash64.errors import GeohashError, HashTooLongError, InvalidCharacterError
from geohash64.geohash import Geohash
from geohash64.neighbors import (
    Direction,
    neighbor,
    neighbor_int,
    neighbor_int_with_precision,
    neighbors,
    neighbors_int,
    neighbors_int_with_precision,
)

__all__ = [
    "Box",
    "Direction",
    "Geohash",
    "GeohashError",
    "HashTooLongError",
    "InvalidCharacterError",
    "bounding_box",
    "bounding_box_int",
    "bounding_box_int_with_precision",
    "convert_int_to_string",
    "convert_string_to_int",
    "decode",
    "decode_center",
    "decode_int",
    "decode_int_with_precision",
    "encode",
    "encode_int",
    "encode_int_with_precision",
    "encode_with_max_precision",
    "encode_with_precision",
    "is_valid",
    "neighbor",
    "neighbor_int",
    "neighbor_int_with_precision",
    "neighbors",
    "neighbors_int",
    "neighbors_int_with_precision",
    "validate",
]
