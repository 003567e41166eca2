"""
conflict - Conflict-zone proximity risk

Point-radius and corridor queries over a conflict-zone dataset, bucketed
into airport, path and position scores and a weighted composite.
"""

from .core import ConflictRiskEngine, conflict_count_score
from .data_models import ConflictZone, ConflictRiskResult, ConflictAssessment

__all__ = [
    "ConflictRiskEngine",
    "conflict_count_score",
    "ConflictZone",
    "ConflictRiskResult",
    "ConflictAssessment",
]
