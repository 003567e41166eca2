# flightrisk/geo/coordinates.py
"""
Core great-circle geometry. All functions are pure and accept numpy arrays
for the latitude/longitude arguments of the array variants, so a whole
conflict dataset can be filtered in one call.

Degenerate input is not corrected: coincident or antipodal points give a
bearing of 0 (atan2(0, 0)), and NaN coordinates propagate as NaN.
"""
import numpy as np

from ..constants.risk import UnitConversions
from .data_models import GeoPoint

EARTH_RADIUS_KM = UnitConversions.EARTH_RADIUS_KM


def _haversine_km(lat1, lon1, lat2, lon2):
    d_lat = np.radians(lat2 - lat1)
    d_lon = np.radians(lon2 - lon1)
    a = np.sin(d_lat / 2)**2 + np.cos(np.radians(lat1)) * np.cos(np.radians(lat2)) * np.sin(d_lon / 2)**2
    a = np.clip(a, 0.0, 1.0)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def _initial_bearing_deg(lat1, lon1, lat2, lon2):
    lat1_rad, lat2_rad = np.radians(lat1), np.radians(lat2)
    d_lon = np.radians(lon2 - lon1)
    y = np.sin(d_lon) * np.cos(lat2_rad)
    x = np.cos(lat1_rad) * np.sin(lat2_rad) - np.sin(lat1_rad) * np.cos(lat2_rad) * np.cos(d_lon)
    return (np.degrees(np.arctan2(y, x)) + 360) % 360


def distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Haversine distance between two points in kilometers."""
    return float(_haversine_km(a.lat, a.lon, b.lat, b.lon))


def bearing_deg(a: GeoPoint, b: GeoPoint) -> float:
    """Initial great-circle bearing from a to b, in [0, 360)."""
    return float(_initial_bearing_deg(a.lat, a.lon, b.lat, b.lon))


def cross_track_distance_km(point: GeoPoint, path_start: GeoPoint, path_end: GeoPoint) -> float:
    """
    Unsigned distance of `point` from the great circle through path_start and
    path_end. The great circle is unbounded: points beyond either end of the
    segment are measured against its extension.
    """
    return float(cross_track_distances_km(point.lat, point.lon, path_start, path_end))


def project(origin: GeoPoint, heading_deg: float, distance_km: float) -> GeoPoint:
    """
    Destination reached by travelling distance_km from origin on an initial
    heading. Longitude is wrapped into [-180, 180) across the antimeridian.
    """
    lat_rad = np.radians(origin.lat)
    lon_rad = np.radians(origin.lon)
    bearing_rad = np.radians(heading_deg)
    delta = distance_km / EARTH_RADIUS_KM

    lat2_rad = np.arcsin(np.sin(lat_rad) * np.cos(delta) +
                         np.cos(lat_rad) * np.sin(delta) * np.cos(bearing_rad))
    lon2_rad = lon_rad + np.arctan2(np.sin(bearing_rad) * np.sin(delta) * np.cos(lat_rad),
                                    np.cos(delta) - np.sin(lat_rad) * np.sin(lat2_rad))
    lon2 = (np.degrees(lon2_rad) + 540) % 360 - 180
    return GeoPoint(lat=float(np.degrees(lat2_rad)), lon=float(lon2))


# --- Array variants used by the conflict engine ---

def distances_km(point: GeoPoint, lats, lons) -> np.ndarray:
    """Distances from `point` to every (lats[i], lons[i]) in kilometers."""
    return _haversine_km(point.lat, point.lon, np.asarray(lats, dtype=float), np.asarray(lons, dtype=float))


def cross_track_distances_km(lats, lons, path_start: GeoPoint, path_end: GeoPoint) -> np.ndarray:
    """Cross-track distance of every (lats[i], lons[i]) from the start->end great circle."""
    lats = np.asarray(lats, dtype=float)
    lons = np.asarray(lons, dtype=float)
    angular_13 = _haversine_km(path_start.lat, path_start.lon, lats, lons) / EARTH_RADIUS_KM
    bearing_13 = _initial_bearing_deg(path_start.lat, path_start.lon, lats, lons)
    bearing_12 = _initial_bearing_deg(path_start.lat, path_start.lon, path_end.lat, path_end.lon)
    d_xt = np.arcsin(np.sin(angular_13) * np.sin(np.radians(bearing_13 - bearing_12))) * EARTH_RADIUS_KM
    return np.abs(d_xt)
