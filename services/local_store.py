"""JSON file store used when the Firebase database is unavailable.

Every collection is kept in a single document on disk so that a restart
picks up where the last session left off.
"""

import json
import logging
import os
import threading
import uuid
from typing import Dict, List, Optional

logger = logging.getLogger(__name__)


class LocalStore:
    """Document store persisted to a local JSON file."""

    backend = "local"

    def __init__(self, path: str):
        self.path = path
        self._lock = threading.Lock()
        self._data: Dict[str, Dict[str, dict]] = self._load()

    def _load(self) -> Dict[str, Dict[str, dict]]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Could not read local store %s, starting empty: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Local store %s is not a JSON object, starting empty", self.path)
            return {}
        return data

    def _commit(self, collection: str, records: Dict[str, dict]) -> None:
        """Writes the new state to disk, then swaps it in. Callers hold the lock."""
        data = dict(self._data)
        data[collection] = records
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        os.replace(tmp_path, self.path)
        self._data = data

    def _with_id(self, record_id: str, data: dict) -> dict:
        record = dict(data)
        record["id"] = record_id
        return record

    def create(self, collection: str, data: dict) -> dict:
        record_id = str(uuid.uuid4())
        to_save = {k: v for k, v in data.items() if k != "id"}
        with self._lock:
            records = dict(self._data.get(collection, {}))
            records[record_id] = to_save
            self._commit(collection, records)
        return self._with_id(record_id, to_save)

    def get(self, collection: str, record_id: str) -> Optional[dict]:
        with self._lock:
            data = self._data.get(collection, {}).get(record_id)
            return self._with_id(record_id, data) if data is not None else None

    def list(self, collection: str) -> List[dict]:
        with self._lock:
            return [self._with_id(k, v) for k, v in self._data.get(collection, {}).items()]

    def query(self, collection: str, field: str, value) -> List[dict]:
        with self._lock:
            return [
                self._with_id(k, v)
                for k, v in self._data.get(collection, {}).items()
                if v.get(field) == value
            ]

    def update(self, collection: str, record_id: str, fields: dict) -> Optional[dict]:
        with self._lock:
            current = self._data.get(collection, {}).get(record_id)
            if current is None:
                return None
            updated = {**current, **{k: v for k, v in fields.items() if k != "id"}}
            records = dict(self._data[collection])
            records[record_id] = updated
            self._commit(collection, records)
            return self._with_id(record_id, updated)

    def delete(self, collection: str, record_id: str) -> bool:
        with self._lock:
            if record_id not in self._data.get(collection, {}):
                return False
            records = dict(self._data[collection])
            del records[record_id]
            self._commit(collection, records)
            return True
