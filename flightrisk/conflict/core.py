# flightrisk/conflict/core.py
"""
The conflict-zone risk engine. Every query is a pure function of its
arguments; the dataset is passed in per call and never retained.

A dataset that failed to load is passed as None and scores 0 with no
matches. Queries never raise for numeric coordinates.
"""
import logging
from typing import Dict, Optional, Sequence

import numpy as np

from ..constants.risk import RiskConstants
from ..geo.coordinates import cross_track_distances_km, distances_km
from ..geo.data_models import GeoPoint
from ..utils.calculations import round_half_up
from .data_models import ConflictAssessment, ConflictRiskResult, ConflictZone

logger = logging.getLogger(__name__)


def conflict_count_score(count: int) -> int:
    """Maps a number of matching conflicts to a 0-5 score."""
    for minimum, score in RiskConstants.CONFLICT_COUNT_BUCKETS:
        if count >= minimum:
            return score
    return 0


def _coordinate_arrays(conflicts: Sequence[ConflictZone]):
    lats = np.array([c.position.lat for c in conflicts], dtype=float)
    lons = np.array([c.position.lon for c in conflicts], dtype=float)
    return lats, lons


def _result_from_mask(conflicts: Sequence[ConflictZone], mask: np.ndarray) -> ConflictRiskResult:
    matches = [conflict for conflict, hit in zip(conflicts, mask) if hit]
    return ConflictRiskResult(score=conflict_count_score(len(matches)), matches=matches)


class ConflictRiskEngine:
    """Computes airport, flight-path and current-position conflict risk."""

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        self.weights = weights or RiskConstants.COMPOSITE_WEIGHTS

    def airport_risk(self, origin: GeoPoint, destination: GeoPoint,
                     conflicts: Optional[Sequence[ConflictZone]],
                     radius_km: float = RiskConstants.AIRPORT_RADIUS_KM) -> ConflictRiskResult:
        """Conflicts within radius_km of the origin OR the destination airport."""
        if not conflicts:
            return ConflictRiskResult(score=0)
        lats, lons = _coordinate_arrays(conflicts)
        mask = (distances_km(origin, lats, lons) <= radius_km) | (distances_km(destination, lats, lons) <= radius_km)
        return _result_from_mask(conflicts, mask)

    def path_risk(self, origin: GeoPoint, destination: GeoPoint,
                  conflicts: Optional[Sequence[ConflictZone]],
                  corridor_km: float = RiskConstants.PATH_CORRIDOR_KM) -> ConflictRiskResult:
        """
        Conflicts within corridor_km of the origin->destination great circle.

        The corridor has no along-track bound, so a conflict on the same great
        circle beyond either airport (even near the route's antipode) matches.
        """
        if not conflicts:
            return ConflictRiskResult(score=0)
        lats, lons = _coordinate_arrays(conflicts)
        mask = cross_track_distances_km(lats, lons, origin, destination) <= corridor_km
        return _result_from_mask(conflicts, mask)

    def position_risk(self, position: GeoPoint,
                      conflicts: Optional[Sequence[ConflictZone]],
                      radius_km: float = RiskConstants.POSITION_RADIUS_KM) -> ConflictRiskResult:
        """Conflicts within radius_km of the aircraft's current position."""
        if not conflicts:
            return ConflictRiskResult(score=0)
        lats, lons = _coordinate_arrays(conflicts)
        mask = distances_km(position, lats, lons) <= radius_km
        return _result_from_mask(conflicts, mask)

    @staticmethod
    def nearest_conflict(position: GeoPoint, matches: Sequence[ConflictZone]) -> Optional[ConflictZone]:
        """The match closest to position; the first one wins a tie."""
        if not matches:
            return None
        lats, lons = _coordinate_arrays(matches)
        # argmin returns the first occurrence of the minimum
        return matches[int(np.argmin(distances_km(position, lats, lons)))]

    def composite_risk(self, airport_score: int, path_score: int, position_score: Optional[int] = None) -> int:
        """
        Weighted blend of the three scores. A missing position score counts
        as 0; the remaining weights are not renormalised.
        """
        position_score = position_score if position_score is not None else 0
        blended = (self.weights['airport'] * airport_score +
                   self.weights['path'] * path_score +
                   self.weights['position'] * position_score)
        return round_half_up(blended)

    def assess(self, origin: GeoPoint, destination: GeoPoint,
               conflicts: Optional[Sequence[ConflictZone]],
               position: Optional[GeoPoint] = None,
               airport_radius_km: float = RiskConstants.AIRPORT_RADIUS_KM,
               corridor_km: float = RiskConstants.PATH_CORRIDOR_KM,
               position_radius_km: float = RiskConstants.POSITION_RADIUS_KM) -> ConflictAssessment:
        """Runs all three queries for one flight and blends them."""
        if conflicts is None:
            logger.warning("Conflict dataset unavailable; conflict risk defaults to 0.")

        airport = self.airport_risk(origin, destination, conflicts, airport_radius_km)
        path = self.path_risk(origin, destination, conflicts, corridor_km)
        current = self.position_risk(position, conflicts, position_radius_km) if position is not None else None

        composite = self.composite_risk(airport.score, path.score, current.score if current else None)
        nearest = self.nearest_conflict(position, current.matches) if current else None

        logger.debug(f"Conflict risk: airport={airport.score} path={path.score} "
                     f"position={current.score if current else None} composite={composite}")
        return ConflictAssessment(
            airport=airport,
            path=path,
            position=current,
            composite=composite,
            nearest_conflict=nearest,
        )
