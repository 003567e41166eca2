# flightrisk/geo/tests/test_coordinates.py

import math
import unittest

import numpy as np

from flightrisk.geo.coordinates import (
    bearing_deg,
    cross_track_distance_km,
    cross_track_distances_km,
    distance_km,
    distances_km,
    project,
)
from flightrisk.geo.data_models import GeoPoint

JFK = GeoPoint(40.6413, -73.7781)
LAX = GeoPoint(33.9425, -118.4081)
LHR = GeoPoint(51.4700, -0.4543)


class TestDistance(unittest.TestCase):
    def test_symmetric(self):
        for a, b in [(JFK, LAX), (LAX, LHR), (GeoPoint(-33.9, 151.2), GeoPoint(35.5, 139.8))]:
            self.assertAlmostEqual(distance_km(a, b), distance_km(b, a), places=9)

    def test_zero_for_same_point(self):
        self.assertEqual(distance_km(JFK, JFK), 0.0)

    def test_known_route_length(self):
        # JFK-LAX great circle is about 3983 km
        self.assertAlmostEqual(distance_km(JFK, LAX), 3983, delta=15)

    def test_one_degree_of_latitude(self):
        expected = 2 * math.pi * 6371 / 360
        self.assertAlmostEqual(distance_km(GeoPoint(0, 0), GeoPoint(1, 0)), expected, places=6)

    def test_antipodal_points(self):
        self.assertAlmostEqual(distance_km(GeoPoint(0, 0), GeoPoint(0, 180)), math.pi * 6371, places=3)

    def test_nan_propagates(self):
        self.assertTrue(math.isnan(distance_km(GeoPoint(float('nan'), 0), JFK)))

    def test_array_variant_matches_scalar(self):
        lats = np.array([LAX.lat, LHR.lat])
        lons = np.array([LAX.lon, LHR.lon])
        result = distances_km(JFK, lats, lons)
        self.assertAlmostEqual(result[0], distance_km(JFK, LAX), places=9)
        self.assertAlmostEqual(result[1], distance_km(JFK, LHR), places=9)


class TestBearing(unittest.TestCase):
    def test_cardinal_directions(self):
        origin = GeoPoint(0, 0)
        self.assertAlmostEqual(bearing_deg(origin, GeoPoint(1, 0)), 0.0, places=6)
        self.assertAlmostEqual(bearing_deg(origin, GeoPoint(0, 1)), 90.0, places=6)
        self.assertAlmostEqual(bearing_deg(origin, GeoPoint(-1, 0)), 180.0, places=6)
        self.assertAlmostEqual(bearing_deg(origin, GeoPoint(0, -1)), 270.0, places=6)

    def test_range(self):
        for a, b in [(JFK, LAX), (LAX, JFK), (LHR, JFK), (JFK, LHR)]:
            value = bearing_deg(a, b)
            self.assertGreaterEqual(value, 0.0)
            self.assertLess(value, 360.0)

    def test_coincident_points_give_zero(self):
        self.assertEqual(bearing_deg(JFK, JFK), 0.0)


class TestCrossTrack(unittest.TestCase):
    def test_point_on_path_is_zero(self):
        a, b = GeoPoint(0, 0), GeoPoint(0, 40)
        self.assertAlmostEqual(cross_track_distance_km(GeoPoint(0, 20), a, b), 0.0, places=6)

    def test_projected_midpoint_is_on_path(self):
        mid = project(JFK, bearing_deg(JFK, LAX), distance_km(JFK, LAX) / 2)
        self.assertLess(cross_track_distance_km(mid, JFK, LAX), 1e-6)

    def test_perpendicular_offset(self):
        # One degree north of an equatorial path
        a, b = GeoPoint(0, 0), GeoPoint(0, 40)
        expected = 2 * math.pi * 6371 / 360
        self.assertAlmostEqual(cross_track_distance_km(GeoPoint(1, 20), a, b), expected, delta=0.01)

    def test_unsigned(self):
        a, b = GeoPoint(0, 0), GeoPoint(0, 40)
        north = cross_track_distance_km(GeoPoint(2, 10), a, b)
        south = cross_track_distance_km(GeoPoint(-2, 10), a, b)
        self.assertGreater(north, 0)
        self.assertAlmostEqual(north, south, places=6)

    def test_no_along_track_bound(self):
        # Beyond the end of the segment but on the same great circle
        a, b = GeoPoint(0, 0), GeoPoint(0, 40)
        self.assertAlmostEqual(cross_track_distance_km(GeoPoint(0, 170), a, b), 0.0, places=6)

    def test_array_variant_matches_scalar(self):
        point = GeoPoint(36.1, -115.1)
        result = cross_track_distances_km([point.lat], [point.lon], JFK, LAX)
        self.assertAlmostEqual(result[0], cross_track_distance_km(point, JFK, LAX), places=9)


class TestProject(unittest.TestCase):
    def test_round_trip_distance(self):
        for heading in (0, 45, 90, 135, 200, 315):
            for dist in (1.0, 250.0, 3000.0):
                dest = project(LHR, heading, dist)
                self.assertAlmostEqual(distance_km(LHR, dest), dist, delta=1e-6 * max(1.0, dist))

    def test_round_trip_bearing(self):
        dest = project(JFK, 60.0, 500.0)
        self.assertAlmostEqual(bearing_deg(JFK, dest), 60.0, places=6)

    def test_due_east_on_equator(self):
        dest = project(GeoPoint(0, 0), 90, 111.19492664455873)
        self.assertAlmostEqual(dest.lat, 0.0, places=9)
        self.assertAlmostEqual(dest.lon, 1.0, places=6)

    def test_zero_distance(self):
        dest = project(JFK, 123.0, 0.0)
        self.assertAlmostEqual(dest.lat, JFK.lat, places=9)
        self.assertAlmostEqual(dest.lon, JFK.lon, places=9)

    def test_crossing_antimeridian_eastbound(self):
        # 0.2 degrees of arc along the equator
        dest = project(GeoPoint(0, 179.9), 90, 111.19492664455873 * 0.2)
        self.assertAlmostEqual(dest.lat, 0.0, places=9)
        self.assertAlmostEqual(dest.lon, -179.9, places=6)

    def test_crossing_antimeridian_westbound(self):
        dest = project(GeoPoint(0, -179.9), 270, 111.19492664455873 * 0.2)
        self.assertAlmostEqual(dest.lon, 179.9, places=6)

    def test_longitude_stays_in_range(self):
        for heading in (0, 60, 90, 180, 250, 270):
            for dist in (10.0, 5000.0, 15000.0):
                dest = project(GeoPoint(35.0, 170.0), heading, dist)
                self.assertGreaterEqual(dest.lon, -180.0)
                self.assertLess(dest.lon, 180.0)


if __name__ == '__main__':
    unittest.main()
