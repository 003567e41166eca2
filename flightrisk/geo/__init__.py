"""
geo - Great-circle math on a spherical Earth

Pure functions used by the conflict engine and the position extrapolator.
"""

from .data_models import GeoPoint
from .coordinates import (
    distance_km,
    bearing_deg,
    cross_track_distance_km,
    project,
    distances_km,
    cross_track_distances_km,
)

__all__ = [
    "GeoPoint",
    "distance_km",
    "bearing_deg",
    "cross_track_distance_km",
    "project",
    "distances_km",
    "cross_track_distances_km",
]
