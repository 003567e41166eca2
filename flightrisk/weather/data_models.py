# flightrisk/weather/data_models.py
"""
Data structures exchanged between the weather adapter and the scorer.
Units follow the Open-Meteo defaults: km/h, mm, percent and Celsius.
"""
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class WeatherObservation:
    """The five raw fields of the nearest hourly forecast slot."""
    wind_speed_kmh: float
    precipitation_mm: float
    cloud_cover_pct: float
    temperature_c: float
    humidity_pct: float


@dataclass(frozen=True)
class WeatherRisk:
    """Derived weather hazard. Recomputed on every risk update, never cached."""
    score: int
    condition: str
    temperature_c: float
    humidity_pct: float
    wind_speed_kmh: float
    precipitation_mm: float = 0.0
    cloud_cover_pct: float = 0.0
    factors: Dict[str, int] = field(default_factory=dict)
    is_default: bool = False
