# flightrisk/tracking/aggregator.py
from ..constants.risk import RiskConstants
from ..utils.calculations import round_half_up


class RiskAggregator:
    """
    Merges the weather and conflict scores into the overall risk.

    Inputs must already be in [0, 10]; they are not re-clamped here. The
    conflict slot takes ConflictRiskEngine.composite_risk output.
    """

    @staticmethod
    def overall(weather_risk: int, conflict_risk: int) -> int:
        return round_half_up((weather_risk + conflict_risk) / 2)

    @staticmethod
    def level(score: int) -> str:
        if score > RiskConstants.HIGH_RISK_ABOVE:
            return "high"
        if score > RiskConstants.MEDIUM_RISK_ABOVE:
            return "medium"
        return "low"

    @classmethod
    def advisory(cls, score: int) -> str:
        return RiskConstants.ADVISORIES[cls.level(score)]
