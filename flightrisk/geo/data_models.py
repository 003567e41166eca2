# flightrisk/geo/data_models.py
from dataclasses import dataclass
from typing import Sequence, Tuple


@dataclass(frozen=True)
class GeoPoint:
    """
    A latitude/longitude pair in degrees on a spherical Earth.

    Values are not normalised or range-checked here; callers must keep
    latitude within [-90, 90] and longitude within [-180, 180].
    """
    lat: float
    lon: float

    @classmethod
    def from_pair(cls, pair: Sequence[float]) -> "GeoPoint":
        """Builds a point from a [lat, lon] pair as used by the upstream feeds."""
        lat, lon = pair
        return cls(lat=float(lat), lon=float(lon))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.lat, self.lon)
