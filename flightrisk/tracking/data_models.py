# flightrisk/tracking/data_models.py
"""
Defines the flight-state structures owned by the tracking loop, and the
tracker configuration.

AirportInfo is the one canonical shape for a route end; the tracker never
works with bare airport codes.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..conflict.data_models import ConflictZone
from ..constants.risk import RiskConstants
from ..geo.data_models import GeoPoint
from ..weather.data_models import WeatherRisk


@dataclass(frozen=True)
class FlightKinematics:
    """Represents the aircraft's motion at a moment in time. Speed is in mph."""
    position: GeoPoint
    heading_deg: float
    speed_mph: float
    altitude_ft: float


@dataclass(frozen=True)
class AirportInfo:
    code: str
    name: str
    city: str
    country: str
    position: GeoPoint


@dataclass(frozen=True)
class FlightData:
    """A telemetry fix merged with the flight's route."""
    callsign: str
    kinematics: FlightKinematics
    origin: AirportInfo
    destination: AirportInfo
    airline: Dict[str, Optional[str]] = field(default_factory=dict)
    aircraft_type: str = "Unknown"
    status: str = "Unknown"


@dataclass
class RiskAssessment:
    """The risk picture for one tick. Overwritten each tick, never accumulated."""
    weather_risk: int
    conflict_risk: int
    overall_risk: int
    nearest_conflict: Optional[ConflictZone] = None
    airport_risk: int = 0
    path_risk: int = 0
    position_risk: Optional[int] = None
    level: str = "low"
    advisory: str = ""
    weather: Optional[WeatherRisk] = None


@dataclass
class FlightState:
    """The single mutable record of the tracked flight. Written only by FlightTracker."""
    flight: FlightData
    path: List[GeoPoint] = field(default_factory=list)
    risk: Optional[RiskAssessment] = None
    source: str = "live"
    tick_count: int = 0
    last_update: float = 0.0


@dataclass
class TrackerConfig:
    """Configuration parameters for the tracking loop."""
    interval_sec: float = RiskConstants.TRACKING_INTERVAL_SEC
    airport_radius_km: float = RiskConstants.AIRPORT_RADIUS_KM
    path_corridor_km: float = RiskConstants.PATH_CORRIDOR_KM
    position_radius_km: float = RiskConstants.POSITION_RADIUS_KM
    conflict_source: Optional[str] = None
    cache_enabled: bool = True
    max_workers: int = 2
    recent_flights_limit: int = 5
    max_path_points: int = RiskConstants.MAX_PATH_POINTS

    def as_dict(self) -> Dict[str, Any]:
        return dict(self.__dict__)
