"""
weather - Weather hazard scoring

Turns the five raw meteorological fields into a bounded 0-10 hazard score
and a human-readable condition label.
"""

from .data_models import WeatherObservation, WeatherRisk
from .scoring import WeatherRiskScorer

__all__ = ["WeatherObservation", "WeatherRisk", "WeatherRiskScorer"]
