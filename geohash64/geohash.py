import logging

from geohash64 import codec
from geohash64.box import Box, error_with_precision
from geohash64.neighbors import Direction, neighbors
from geohash64.settings import get_settings

logger = logging.getLogger(__name__)


class Geohash:
    def __init__(self, precision: int | None = None):
        """Initialize Geohash encoder/decoder with given precision.

        Falls back to the configured default precision when none is given.
        """
        if precision is None:
            precision = get_settings().default_precision
        if not 1 <= precision <= codec.MAX_CHARS:  # 12 is standard max precision
            raise ValueError(f"Precision must be between 1 and {codec.MAX_CHARS}")
        self.precision = precision
        logger.debug("Geohash codec initialized with precision %d", precision)

    def _check(self, geohash: str) -> None:
        if len(geohash) != self.precision:
            raise ValueError(
                f"Geohash length {len(geohash)} doesn't match precision {self.precision}"
            )
        codec.validate(geohash)

    def encode(self, lat: float, lon: float) -> str:
        """Encode a latitude and longitude into a geohash."""
        return codec.encode_with_precision(lat, lon, self.precision)

    def encode_int(self, lat: float, lon: float) -> int:
        """Encode a latitude and longitude into a raw integer geohash."""
        return codec.encode_int_with_precision(lat, lon, 5 * self.precision)

    def decode(self, geohash: str) -> tuple[float, float]:
        """Decode a geohash into a rounded latitude and longitude."""
        self._check(geohash)
        return codec.decode(geohash)

    def decode_center(self, geohash: str) -> tuple[float, float]:
        """Decode a geohash into the center of its cell."""
        self._check(geohash)
        return codec.decode_center(geohash)

    def bounding_box(self, geohash: str) -> Box:
        self._check(geohash)
        return codec.bounding_box(geohash)

    def cell_size(self) -> tuple[float, float]:
        """Size of a geohash cell at this precision.

        Returns:
            (latitude_error, longitude_error)
        """
        return error_with_precision(5 * self.precision)

    def get_neighbors(self, geohash: str) -> dict[str, str]:
        """
        Compute the 8 neighboring geohashes (N, S, E, W, NE, NW, SE, SW).
        """
        self._check(geohash)
        return {
            direction.name.lower(): neighbor
            for direction, neighbor in zip(Direction, neighbors(geohash))
        }


if __name__ == "__main__":
    geo = Geohash(precision=6)
    encoded = geo.encode(41.878738, -87.6359612)  # Willis Tower
    decoded = geo.decode(encoded)
    neighbors_ = geo.get_neighbors(encoded)

    print(f"Encoded: {encoded}")
    print(f"Decoded: {decoded}")
    print(f"Bounding box: {geo.bounding_box(encoded)}")
    print(f"Neighbors: {neighbors_}")
