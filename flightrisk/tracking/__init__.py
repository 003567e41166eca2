"""
tracking - Flight tracking loop, dead reckoning and risk aggregation
"""

from .aggregator import RiskAggregator
from .core import FlightTracker
from .data_models import (
    AirportInfo,
    FlightData,
    FlightKinematics,
    FlightState,
    RiskAssessment,
    TrackerConfig,
)
from .exceptions import TrackingError, InvalidCallsignError, NotTrackingError
from .extrapolation import PositionExtrapolator

__all__ = [
    "RiskAggregator",
    "FlightTracker",
    "AirportInfo",
    "FlightData",
    "FlightKinematics",
    "FlightState",
    "RiskAssessment",
    "TrackerConfig",
    "TrackingError",
    "InvalidCallsignError",
    "NotTrackingError",
    "PositionExtrapolator",
]
