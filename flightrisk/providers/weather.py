# flightrisk/providers/weather.py
"""
Fetches the raw hourly weather fields for a position from the Open-Meteo
forecast API.
"""
import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

import requests

from ..constants.providers import ProviderConstants
from ..weather.data_models import WeatherObservation
from .exceptions import WeatherProviderError
from .session import build_session

logger = logging.getLogger(__name__)


def _nearest_slot(times: List[str], reference: Optional[str]) -> int:
    """Index of the hourly slot closest to the reference timestamp (0 if unknown)."""
    if not times or not reference:
        return 0
    try:
        ref = datetime.fromisoformat(reference)
        deltas = [abs((datetime.fromisoformat(t) - ref).total_seconds()) for t in times]
    except (TypeError, ValueError):
        return 0
    return deltas.index(min(deltas))


def _value_at(series: Any, index: int) -> Optional[float]:
    if not isinstance(series, list) or index >= len(series):
        return None
    value = series[index]
    return float(value) if isinstance(value, (int, float)) and not isinstance(value, bool) else None


class OpenMeteoWeatherProvider:
    """
    A dedicated handler for the Open-Meteo forecast endpoint.
    """

    def __init__(self, timeout: int = ProviderConstants.REQUEST_TIMEOUT_SEC,
                 cache_enabled: bool = True, session: Optional[requests.Session] = None):
        """
        Args:
            timeout: The timeout in seconds for the API request.
            cache_enabled: If True, responses are cached locally for ten
                           minutes, which is finer than the hourly forecast.
            session: An existing session to use instead of building one.
        """
        self.timeout = timeout
        self.session = session or build_session(
            ProviderConstants.WEATHER_CACHE_NAME,
            ProviderConstants.WEATHER_CACHE_EXPIRY_SEC,
            cache_enabled,
        )
        logger.info(f"OpenMeteoWeatherProvider initialized. Cache enabled: {cache_enabled}")

    def get_observation(self, lat: float, lon: float) -> Optional[WeatherObservation]:
        """
        Returns the five scoring fields for the hourly slot nearest to now,
        or None if the request or the payload fails.
        """
        try:
            payload = self._fetch(lat, lon)
            return self._parse(payload)
        except WeatherProviderError as e:
            logger.error(f"Failed to fetch weather for ({lat:.4f}, {lon:.4f}): {e}")
            return None

    def _fetch(self, lat: float, lon: float) -> Dict[str, Any]:
        params = {
            'latitude': lat,
            'longitude': lon,
            'hourly': ProviderConstants.OPEN_METEO_HOURLY,
            'current_weather': 'true',
            'forecast_days': 1,
        }
        try:
            response = self.session.get(ProviderConstants.OPEN_METEO_URL, params=params, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            raise WeatherProviderError(f"request failed: {e}") from e
        except ValueError as e:
            raise WeatherProviderError(f"invalid JSON: {e}") from e

    @staticmethod
    def _parse(payload: Dict[str, Any]) -> WeatherObservation:
        hourly = payload.get('hourly') if isinstance(payload, dict) else None
        current = payload.get('current_weather') if isinstance(payload, dict) else None
        if not isinstance(hourly, dict) or not isinstance(current, dict):
            raise WeatherProviderError("invalid weather data structure")

        idx = _nearest_slot(hourly.get('time'), current.get('time'))
        temperature = _value_at(hourly.get('temperature_2m'), idx)
        if temperature is None:
            temperature = _value_at([current.get('temperature')], 0)
        if temperature is None:
            raise WeatherProviderError("no temperature in payload")

        # Missing entries in the other series read as 0, as the service does for calm/dry slots
        return WeatherObservation(
            wind_speed_kmh=_value_at(hourly.get('wind_speed_10m'), idx) or 0.0,
            precipitation_mm=_value_at(hourly.get('precipitation'), idx) or 0.0,
            cloud_cover_pct=_value_at(hourly.get('cloudcover'), idx) or 0.0,
            temperature_c=temperature,
            humidity_pct=_value_at(hourly.get('relative_humidity_2m'), idx) or 0.0,
        )
