# flightrisk/conflict/data_models.py
"""
Defines the conflict-zone record and the results returned by the
ConflictRiskEngine queries.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..geo.data_models import GeoPoint


@dataclass(frozen=True)
class ConflictZone:
    """A geographically anchored record of elevated airspace risk."""
    id: str
    date: str
    type: str
    location: str
    position: GeoPoint
    notes: Optional[str] = None

    @classmethod
    def from_dict(cls, record: Dict[str, Any]) -> "ConflictZone":
        """
        Parses a dataset record of the form
        {"id", "date", "type", "location", "notes"?, "position": [lat, lon]}.
        Raises ValueError if a required key is missing or the position is unusable.
        """
        try:
            position = GeoPoint.from_pair(record['position'])
            return cls(
                id=str(record['id']),
                date=str(record['date']),
                type=str(record['type']),
                location=str(record['location']),
                position=position,
                notes=record.get('notes'),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Malformed conflict record: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id, 'date': self.date, 'type': self.type,
            'location': self.location, 'notes': self.notes,
            'position': [self.position.lat, self.position.lon],
        }


@dataclass
class ConflictRiskResult:
    """Bucketed score of a single query plus the matching records, in input order."""
    score: int
    matches: List[ConflictZone] = field(default_factory=list)


@dataclass
class ConflictAssessment:
    """All three conflict queries for one flight, and their weighted composite."""
    airport: ConflictRiskResult
    path: ConflictRiskResult
    position: Optional[ConflictRiskResult]
    composite: int
    nearest_conflict: Optional[ConflictZone] = None
