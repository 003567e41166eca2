# flightrisk/tracking/extrapolation.py
"""Dead reckoning between telemetry fixes."""
from dataclasses import replace

from ..constants.risk import UnitConversions
from ..geo.coordinates import project
from .data_models import FlightKinematics


def speed_mph_to_mps(speed_mph: float) -> float:
    return speed_mph * UnitConversions.METERS_PER_MILE / UnitConversions.SECONDS_PER_HOUR


class PositionExtrapolator:
    """Advances an aircraft in a straight line along its current heading."""

    @staticmethod
    def advance(kinematics: FlightKinematics, elapsed_seconds: float) -> FlightKinematics:
        """
        Returns a new record moved by speed * elapsed along the heading.
        Heading, speed and altitude are carried over unchanged.
        """
        travel_m = speed_mph_to_mps(kinematics.speed_mph) * elapsed_seconds
        new_position = project(kinematics.position, kinematics.heading_deg, travel_m / 1000.0)
        return replace(kinematics, position=new_position)
