# flightrisk/constants/risk.py
"""
Scoring weights, bucket thresholds and unit conversions shared by the
weather scorer, the conflict engine and the tracking loop.
"""


class UnitConversions:
    EARTH_RADIUS_KM: float = 6371.0
    METERS_PER_MILE: float = 1609.34
    MPH_PER_KNOT: float = 1.15078
    SECONDS_PER_HOUR: float = 3600.0


class RiskConstants:
    """Constants used throughout the risk pipeline"""

    MIN_SCORE = 0
    MAX_SCORE = 10

    # Weather sub-score weights (sum to 1.0)
    WEATHER_WEIGHTS = {
        'wind': 0.3,
        'precipitation': 0.25,
        'cloud': 0.15,
        'temperature': 0.2,
        'humidity': 0.1,
    }

    # (exclusive lower bound, sub-score), checked top-down
    WIND_BUCKETS_KMH = ((30, 10), (20, 7), (12, 4), (6, 2))
    PRECIPITATION_BUCKETS_MM = ((10, 10), (5, 7), (2, 5), (0.5, 3))
    CLOUD_BUCKETS_PCT = ((90, 5), (70, 3), (30, 2))
    # (upper bound, lower bound, sub-score): hotter than upper or colder than lower
    TEMPERATURE_BUCKETS_C = ((35, -10, 10), (30, -5, 7), (25, 0, 4))
    HUMIDITY_HIGH_BUCKETS_PCT = ((90, 5), (70, 3))
    HUMIDITY_LOW_PCT = 30
    HUMIDITY_LOW_SCORE = 2
    BASELINE_SUB_SCORE = 1
    # Ceiling of each sub-score; the weighted sum is rescaled so that all
    # factors at their ceiling map to MAX_SCORE.
    WEATHER_MAX_SUB_SCORES = {
        'wind': 10,
        'precipitation': 10,
        'cloud': 5,
        'temperature': 10,
        'humidity': 5,
    }

    # Condition labels gate on the raw observation, not the sub-score
    HEAVY_RAIN_MM = 5
    RAIN_MM = 0.5
    WINDY_KMH = 25
    OVERCAST_PCT = 80
    PARTLY_CLOUDY_PCT = 50

    NEUTRAL_WEATHER = {
        'score': 1,
        'condition': 'Clear',
        'temperature_c': 20.0,
        'humidity_pct': 50.0,
        'wind_speed_kmh': 5.0,
        'precipitation_mm': 0.0,
        'cloud_cover_pct': 20.0,
    }

    # Conflict engine
    AIRPORT_RADIUS_KM = 300
    PATH_CORRIDOR_KM = 150
    POSITION_RADIUS_KM = 300
    # (minimum match count, score), checked top-down
    CONFLICT_COUNT_BUCKETS = ((6, 5), (4, 4), (2, 3), (1, 2))
    COMPOSITE_WEIGHTS = {'airport': 0.4, 'path': 0.4, 'position': 0.2}

    # Presentation bands for the overall score
    HIGH_RISK_ABOVE = 7
    MEDIUM_RISK_ABOVE = 4
    ADVISORIES = {
        'high': "Exercise caution - multiple risk factors present",
        'medium': "Standard risk level - monitor conditions",
        'low': "Minimal risk - normal operations",
    }

    TRACKING_INTERVAL_SEC = 6
    # Path history kept per flight (two hours at the default interval)
    MAX_PATH_POINTS = 1200
