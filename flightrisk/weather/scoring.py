# flightrisk/weather/scoring.py
"""
Bucketed weather hazard scoring.

Each factor is scored independently against fixed thresholds, then the
sub-scores are combined with fixed weights, rescaled so that every factor
at its ceiling scores 10, and clamped to [0, 10].
"""
import logging
from typing import Dict, Optional

from ..constants.risk import RiskConstants
from ..utils.calculations import bucket_score, clamp, is_number, round_half_up
from .data_models import WeatherObservation, WeatherRisk

logger = logging.getLogger(__name__)

_FIELDS = ('wind_speed_kmh', 'precipitation_mm', 'cloud_cover_pct', 'temperature_c', 'humidity_pct')


def wind_risk(wind_speed_kmh: float) -> int:
    return bucket_score(wind_speed_kmh, RiskConstants.WIND_BUCKETS_KMH, RiskConstants.BASELINE_SUB_SCORE)


def precipitation_risk(precipitation_mm: float) -> int:
    return bucket_score(precipitation_mm, RiskConstants.PRECIPITATION_BUCKETS_MM, RiskConstants.BASELINE_SUB_SCORE)


def cloud_risk(cloud_cover_pct: float) -> int:
    return bucket_score(cloud_cover_pct, RiskConstants.CLOUD_BUCKETS_PCT, RiskConstants.BASELINE_SUB_SCORE)


def temperature_risk(temperature_c: float) -> int:
    for too_hot, too_cold, score in RiskConstants.TEMPERATURE_BUCKETS_C:
        if temperature_c > too_hot or temperature_c < too_cold:
            return score
    return RiskConstants.BASELINE_SUB_SCORE


def humidity_risk(humidity_pct: float) -> int:
    score = bucket_score(humidity_pct, RiskConstants.HUMIDITY_HIGH_BUCKETS_PCT, 0)
    if score:
        return score
    if humidity_pct < RiskConstants.HUMIDITY_LOW_PCT:
        return RiskConstants.HUMIDITY_LOW_SCORE
    return RiskConstants.BASELINE_SUB_SCORE


def weather_condition(precipitation_mm: float, cloud_cover_pct: float, wind_speed_kmh: float) -> str:
    """Condition label by priority, gated on the raw values."""
    if precipitation_mm > RiskConstants.HEAVY_RAIN_MM:
        return 'Heavy Rain'
    if precipitation_mm > RiskConstants.RAIN_MM:
        return 'Rain'
    if wind_speed_kmh > RiskConstants.WINDY_KMH:
        return 'Windy'
    if cloud_cover_pct > RiskConstants.OVERCAST_PCT:
        return 'Overcast'
    if cloud_cover_pct > RiskConstants.PARTLY_CLOUDY_PCT:
        return 'Partly Cloudy'
    return 'Clear'


class WeatherRiskScorer:
    """Scores a WeatherObservation. Never raises; bad input yields the neutral default."""

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        self.weights = weights or RiskConstants.WEATHER_WEIGHTS
        self._ceiling = sum(
            self.weights[name] * top for name, top in RiskConstants.WEATHER_MAX_SUB_SCORES.items()
        )

    def score(self, obs: Optional[WeatherObservation]) -> WeatherRisk:
        if not self._is_well_formed(obs):
            logger.warning("Weather observation unavailable or malformed; using neutral default.")
            return self.default()

        factors = {
            'wind': wind_risk(obs.wind_speed_kmh),
            'precipitation': precipitation_risk(obs.precipitation_mm),
            'cloud': cloud_risk(obs.cloud_cover_pct),
            'temperature': temperature_risk(obs.temperature_c),
            'humidity': humidity_risk(obs.humidity_pct),
        }
        weighted = sum(self.weights[name] * value for name, value in factors.items())
        total = weighted / self._ceiling * RiskConstants.MAX_SCORE
        score = clamp(round_half_up(total), RiskConstants.MIN_SCORE, RiskConstants.MAX_SCORE)

        return WeatherRisk(
            score=score,
            condition=weather_condition(obs.precipitation_mm, obs.cloud_cover_pct, obs.wind_speed_kmh),
            temperature_c=obs.temperature_c,
            humidity_pct=obs.humidity_pct,
            wind_speed_kmh=obs.wind_speed_kmh,
            precipitation_mm=obs.precipitation_mm,
            cloud_cover_pct=obs.cloud_cover_pct,
            factors=factors,
        )

    @staticmethod
    def default() -> WeatherRisk:
        """The neutral result used whenever upstream weather is unavailable."""
        return WeatherRisk(**RiskConstants.NEUTRAL_WEATHER, is_default=True)

    @staticmethod
    def _is_well_formed(obs) -> bool:
        if obs is None:
            return False
        return all(is_number(getattr(obs, name, None)) for name in _FIELDS)
