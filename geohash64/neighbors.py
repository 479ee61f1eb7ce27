"""Neighbor derivation for string and integer geohashes.

Neighbors are found by re-encoding the points one cell width away from the
center of the hash's box. Longitudes past the antimeridian wrap around and
latitudes past a pole stay on the cell's own row. Cells of uneven size can
still yield a neighbor in an unexpected lateral cell, so this is an
approximation of the canonical neighbor tables.
"""

import enum
from typing import Callable

from geohash64.box import Box
from geohash64.codec import (
    MAX_BITS,
    bounding_box,
    bounding_box_int_with_precision,
    encode_int_with_precision,
    encode_with_precision,
)


class Direction(enum.IntEnum):
    """Cardinal and intercardinal directions, in neighbor list order."""

    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7


# (lat, lng) unit offsets, indexed by Direction
_OFFSETS = (
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)


def _neighbor_points(box: Box) -> list[tuple[float, float]]:
    lat, lng = box.center()
    lat_delta = box.height
    lng_delta = box.width

    points = []
    for dlat, dlng in _OFFSETS:
        nlat = lat + dlat * lat_delta
        nlng = lng + dlng * lng_delta

        # no row beyond the poles
        if nlat > 90 or nlat < -90:
            nlat = lat

        # handle longitude wrapping
        if nlng >= 180:
            nlng -= 360
        elif nlng < -180:
            nlng += 360

        points.append((nlat, nlng))
    return points


def _encode_all(
    box: Box, encoder: Callable[[float, float, int], str | int], precision: int
) -> list:
    return [encoder(lat, lng, precision) for lat, lng in _neighbor_points(box)]


def neighbors(hash: str) -> list[str]:
    """Return the 8 neighbors of a string geohash, ordered N, NE, E, ... NW.

    A cell on the northernmost or southernmost row is returned as its own
    neighbor toward the pole, since no row lies beyond it.
    """
    return _encode_all(bounding_box(hash), encode_with_precision, len(hash))


def neighbor(hash: str, direction: Direction) -> str:
    return neighbors(hash)[direction]


def neighbors_int(hash: int) -> list[int]:
    """Return the 8 neighbors of a full 64-bit integer geohash."""
    return neighbors_int_with_precision(hash, MAX_BITS)


def neighbors_int_with_precision(hash: int, bits: int) -> list[int]:
    """Return the 8 neighbors of a raw integer geohash with `bits` bits."""
    box = bounding_box_int_with_precision(hash, bits)
    return _encode_all(box, encode_int_with_precision, bits)


def neighbor_int(hash: int, direction: Direction) -> int:
    return neighbors_int_with_precision(hash, MAX_BITS)[direction]


def neighbor_int_with_precision(hash: int, bits: int, direction: Direction) -> int:
    return neighbors_int_with_precision(hash, bits)[direction]
