# flightrisk/constants/providers.py

class ProviderConstants:
    """Shared constants for the external data adapters."""

    OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"
    OPEN_METEO_HOURLY = "temperature_2m,relative_humidity_2m,wind_speed_10m,precipitation,cloudcover"

    ADSBDB_CALLSIGN_URL = "https://api.adsbdb.com/v0/callsign/{callsign}"
    ADSB_LOL_CALLSIGN_URL = "https://api.adsb.lol/v2/callsign/{callsign}"

    REQUEST_TIMEOUT_SEC = 10
    LIVE_RETRY_LIMIT = 3
    LIVE_RETRY_DELAY_SEC = 2.0

    WEATHER_CACHE_NAME = "flightrisk_weather_cache"
    WEATHER_CACHE_EXPIRY_SEC = 600
    ROUTE_CACHE_NAME = "flightrisk_route_cache"
    ROUTE_CACHE_EXPIRY_SEC = 3600
    SESSION_RETRIES = 3
    SESSION_BACKOFF_FACTOR = 0.2
