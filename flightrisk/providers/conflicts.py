# flightrisk/providers/conflicts.py
"""
Loads the conflict-zone dataset from a local JSON file or an http(s) URL.

The dataset is a JSON list of records:
    {"id", "date", "type", "location", "notes"?, "position": [lat, lon]}
Malformed records are skipped; an unreadable dataset loads as None, which
the conflict engine scores as zero risk.
"""
import json
import logging
import os
from typing import Any, List, Optional

import requests

from ..conflict.data_models import ConflictZone
from ..constants.providers import ProviderConstants
from .exceptions import ConflictDataError
from .session import build_session

DEFAULT_DATASET_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "conflicts.json")


class ConflictDataset:
    """Reads ConflictZone records on every load(); refresh policy belongs to the source."""

    def __init__(self, source: Optional[str] = None, timeout: int = ProviderConstants.REQUEST_TIMEOUT_SEC,
                 session: Optional[requests.Session] = None):
        self.source = source or DEFAULT_DATASET_PATH
        self.timeout = timeout
        self._session = session
        logging.info(f"ConflictDataset initialized with source: {self.source}")

    @property
    def is_remote(self) -> bool:
        return self.source.startswith(("http://", "https://"))

    def load(self) -> Optional[List[ConflictZone]]:
        try:
            records = self._read_records()
        except ConflictDataError as e:
            logging.error(f"Failed to load conflict dataset from {self.source}: {e}")
            return None

        zones, skipped = [], 0
        for record in records:
            try:
                zones.append(ConflictZone.from_dict(record))
            except ValueError as e:
                skipped += 1
                logging.debug(f"Skipping conflict record: {e}")
        if skipped:
            logging.warning(f"Skipped {skipped} malformed conflict records in {self.source}")
        return zones

    def _read_records(self) -> List[Any]:
        if self.is_remote:
            data = self._read_remote()
        else:
            try:
                with open(self.source, 'r', encoding='utf-8') as f:
                    data = json.load(f)
            except (OSError, ValueError) as e:  # covers JSONDecodeError and UnicodeDecodeError
                raise ConflictDataError(str(e)) from e

        if not isinstance(data, list):
            raise ConflictDataError("expected a JSON list of conflict records")
        return [record for record in data if isinstance(record, dict)]

    def _read_remote(self) -> Any:
        if self._session is None:
            self._session = build_session('flightrisk_conflict_cache', ProviderConstants.ROUTE_CACHE_EXPIRY_SEC)
        try:
            response = self._session.get(self.source, timeout=self.timeout)
            response.raise_for_status()
            return response.json()
        except requests.exceptions.RequestException as e:
            raise ConflictDataError(f"request failed: {e}") from e
        except ValueError as e:
            raise ConflictDataError(f"invalid JSON: {e}") from e
