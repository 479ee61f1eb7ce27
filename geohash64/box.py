import dataclasses
import math


@dataclasses.dataclass(frozen=True)
class Box:
    """A rectangle in latitude/longitude space."""

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @property
    def height(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def width(self) -> float:
        return self.max_lng - self.min_lng

    def center(self) -> tuple[float, float]:
        """Return the midpoint of the box."""
        lat = (self.min_lat + self.max_lat) / 2.0
        lng = (self.min_lng + self.max_lng) / 2.0
        return lat, lng

    def contains(self, lat: float, lng: float) -> bool:
        """Check whether (lat, lng) lies in the box, edges and corners included."""
        return (
            self.min_lat <= lat <= self.max_lat
            and self.min_lng <= lng <= self.max_lng
        )

    def round(self) -> tuple[float, float]:
        """Return a point inside the box with as few decimal places as possible."""
        x = max_decimal_power(self.height)
        lat = math.ceil(self.min_lat / x) * x
        x = max_decimal_power(self.width)
        lng = math.ceil(self.min_lng / x) * x
        return lat, lng


def max_decimal_power(r: float) -> float:
    """Largest power of ten not exceeding r.

    Any range of width r contains a multiple of this value, which is what
    Box.round relies on.
    """
    return math.pow(10, math.floor(math.log10(r)))


def error_with_precision(bits: int) -> tuple[float, float]:
    """Calculate the size of a cell for an integer hash of the given bits.

    Args:
        bits (int): significant bits of the hash

    Returns:
        (latitude_error, longitude_error)
    """
    lat_bits = bits // 2
    lng_bits = bits - lat_bits

    lat_err = math.ldexp(180.0, -lat_bits)
    lng_err = math.ldexp(360.0, -lng_bits)

    return lat_err, lng_err
