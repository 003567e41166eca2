# flightrisk/weather/tests/test_scoring.py

import unittest

from flightrisk.weather.data_models import WeatherObservation
from flightrisk.weather.scoring import (
    WeatherRiskScorer,
    cloud_risk,
    humidity_risk,
    precipitation_risk,
    temperature_risk,
    weather_condition,
    wind_risk,
)

CALM = dict(wind_speed_kmh=5.0, precipitation_mm=0.0, cloud_cover_pct=20.0, temperature_c=18.0, humidity_pct=50.0)


def make_obs(**overrides) -> WeatherObservation:
    return WeatherObservation(**{**CALM, **overrides})


class TestSubScores(unittest.TestCase):
    def test_wind_buckets(self):
        self.assertEqual(wind_risk(35), 10)
        self.assertEqual(wind_risk(30), 7)  # thresholds are exclusive
        self.assertEqual(wind_risk(21), 7)
        self.assertEqual(wind_risk(13), 4)
        self.assertEqual(wind_risk(7), 2)
        self.assertEqual(wind_risk(6), 1)
        self.assertEqual(wind_risk(0), 1)

    def test_precipitation_buckets(self):
        self.assertEqual(precipitation_risk(12), 10)
        self.assertEqual(precipitation_risk(6), 7)
        self.assertEqual(precipitation_risk(3), 5)
        self.assertEqual(precipitation_risk(1), 3)
        self.assertEqual(precipitation_risk(0.5), 1)

    def test_cloud_buckets(self):
        self.assertEqual(cloud_risk(95), 5)
        self.assertEqual(cloud_risk(80), 3)
        self.assertEqual(cloud_risk(50), 2)
        self.assertEqual(cloud_risk(10), 1)

    def test_temperature_buckets(self):
        self.assertEqual(temperature_risk(38), 10)
        self.assertEqual(temperature_risk(-12), 10)
        self.assertEqual(temperature_risk(32), 7)
        self.assertEqual(temperature_risk(-7), 7)
        self.assertEqual(temperature_risk(27), 4)
        self.assertEqual(temperature_risk(-1), 4)
        self.assertEqual(temperature_risk(15), 1)

    def test_humidity_buckets(self):
        self.assertEqual(humidity_risk(95), 5)
        self.assertEqual(humidity_risk(75), 3)
        self.assertEqual(humidity_risk(20), 2)
        self.assertEqual(humidity_risk(50), 1)


class TestCondition(unittest.TestCase):
    def test_priority_order(self):
        # Heavy rain wins over wind and cloud
        self.assertEqual(weather_condition(precipitation_mm=6, cloud_cover_pct=95, wind_speed_kmh=40), 'Heavy Rain')
        self.assertEqual(weather_condition(precipitation_mm=1, cloud_cover_pct=95, wind_speed_kmh=40), 'Rain')
        self.assertEqual(weather_condition(precipitation_mm=0, cloud_cover_pct=95, wind_speed_kmh=40), 'Windy')
        self.assertEqual(weather_condition(precipitation_mm=0, cloud_cover_pct=85, wind_speed_kmh=10), 'Overcast')
        self.assertEqual(weather_condition(precipitation_mm=0, cloud_cover_pct=60, wind_speed_kmh=10), 'Partly Cloudy')
        self.assertEqual(weather_condition(precipitation_mm=0, cloud_cover_pct=10, wind_speed_kmh=10), 'Clear')

    def test_gated_on_raw_values(self):
        # 22 km/h scores a 7 on wind but is below the "Windy" threshold
        self.assertEqual(weather_condition(precipitation_mm=0, cloud_cover_pct=10, wind_speed_kmh=22), 'Clear')


class TestWeatherRiskScorer(unittest.TestCase):
    def setUp(self):
        self.scorer = WeatherRiskScorer()

    def test_saturated_observation(self):
        obs = WeatherObservation(wind_speed_kmh=35, precipitation_mm=12, cloud_cover_pct=95,
                                 temperature_c=38, humidity_pct=95)
        risk = self.scorer.score(obs)
        self.assertEqual(risk.score, 10)
        self.assertEqual(risk.condition, 'Heavy Rain')
        self.assertEqual(risk.factors, {'wind': 10, 'precipitation': 10, 'cloud': 5, 'temperature': 10, 'humidity': 5})

    def test_calm_observation(self):
        risk = self.scorer.score(make_obs())
        self.assertEqual(risk.score, 1)
        self.assertEqual(risk.condition, 'Clear')
        self.assertFalse(risk.is_default)
        self.assertEqual(risk.temperature_c, 18.0)
        self.assertEqual(risk.humidity_pct, 50.0)
        self.assertEqual(risk.wind_speed_kmh, 5.0)

    def test_weighted_mixes(self):
        # Calm factors each score 1; the weighted sum is rescaled by 10 / 8.75
        cases = [
            (dict(wind_speed_kmh=35), 4),                          # 3.70 -> 4.23
            (dict(temperature_c=38), 3),                           # 2.80 -> 3.20
            (dict(cloud_cover_pct=95), 2),                         # 1.60 -> 1.83
            (dict(wind_speed_kmh=35, temperature_c=38), 6),        # 5.50 -> 6.29
            (dict(wind_speed_kmh=22, precipitation_mm=3), 4),      # 3.80 -> 4.34
        ]
        for overrides, expected in cases:
            self.assertEqual(self.scorer.score(make_obs(**overrides)).score, expected, overrides)

    def test_rescaling_changes_rounding(self):
        # Unscaled these would round to 6, 3 and 1
        self.assertEqual(self.scorer.score(make_obs(wind_speed_kmh=35, precipitation_mm=12)).score, 7)  # 5.95
        self.assertEqual(self.scorer.score(make_obs(precipitation_mm=12)).score, 4)                      # 3.25
        self.assertEqual(self.scorer.score(make_obs(humidity_pct=95)).score, 2)                          # 1.40

    def test_factors_reported(self):
        risk = self.scorer.score(make_obs(wind_speed_kmh=22, precipitation_mm=3, humidity_pct=20))
        self.assertEqual(risk.factors, {'wind': 7, 'precipitation': 5, 'cloud': 1, 'temperature': 1, 'humidity': 2})

    def test_score_bounds(self):
        for wind in (0, 10, 25, 50):
            for rain in (0, 3, 20):
                for temp in (-30, 0, 20, 45):
                    score = self.scorer.score(make_obs(wind_speed_kmh=wind, precipitation_mm=rain,
                                                       temperature_c=temp)).score
                    self.assertGreaterEqual(score, 0)
                    self.assertLessEqual(score, 10)

    def test_monotonic_in_wind(self):
        scores = [self.scorer.score(make_obs(wind_speed_kmh=w)).score for w in range(0, 60, 2)]
        self.assertEqual(scores, sorted(scores))

    def test_monotonic_in_precipitation(self):
        values = [0, 0.3, 0.6, 1, 2.5, 4, 5.5, 8, 11, 25]
        scores = [self.scorer.score(make_obs(precipitation_mm=p)).score for p in values]
        self.assertEqual(scores, sorted(scores))

    def test_monotonic_in_temperature_deviation(self):
        hot = [self.scorer.score(make_obs(temperature_c=t)).score for t in range(15, 50, 2)]
        cold = [self.scorer.score(make_obs(temperature_c=t)).score for t in range(15, -30, -2)]
        self.assertEqual(hot, sorted(hot))
        self.assertEqual(cold, sorted(cold))

    def test_none_returns_default(self):
        risk = self.scorer.score(None)
        self.assertEqual(risk.score, 1)
        self.assertEqual(risk.condition, 'Clear')
        self.assertTrue(risk.is_default)

    def test_malformed_fields_return_default(self):
        for bad in (None, float('nan'), float('inf'), 'windy'):
            risk = self.scorer.score(make_obs(wind_speed_kmh=bad))
            self.assertTrue(risk.is_default)
            self.assertEqual(risk.score, 1)

    def test_wrong_type_returns_default(self):
        self.assertTrue(self.scorer.score({'wind_speed_kmh': 50}).is_default)


if __name__ == '__main__':
    unittest.main()
