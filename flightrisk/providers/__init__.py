"""
providers - Adapters for the external data sources

Weather (Open-Meteo), live telemetry (adsbdb.com + adsb.lol) and the
conflict-zone dataset. Each adapter translates upstream faults into None
at its public boundary so the risk pipeline never blocks.
"""

from .conflicts import ConflictDataset
from .exceptions import ProviderError, WeatherProviderError, TelemetryError, ConflictDataError
from .session import build_session
from .telemetry import AdsbTelemetryProvider, normalize_callsign
from .weather import OpenMeteoWeatherProvider

__all__ = [
    'ConflictDataset',
    'ProviderError',
    'WeatherProviderError',
    'TelemetryError',
    'ConflictDataError',
    'build_session',
    'AdsbTelemetryProvider',
    'normalize_callsign',
    'OpenMeteoWeatherProvider',
]
