import copy
import threading
from typing import Any, Dict, Iterable, List, Optional


class InMemoryRepository:
    """List-backed record store keyed by each record's ``id``.

    Every public method takes ``lock``. Handlers that need a read, check and
    write to happen together hold ``lock`` around the whole sequence; it is
    re-entrant so the nested calls do not deadlock. Records are deep-copied
    in and out, so nothing outside the store can change it without a call.
    """

    def __init__(self, records: Optional[Iterable[Dict[str, Any]]] = None) -> None:
        self._records: List[Dict[str, Any]] = [copy.deepcopy(r) for r in records or []]
        self.lock = threading.RLock()

    def list_all(self) -> List[Dict[str, Any]]:
        with self.lock:
            return copy.deepcopy(self._records)

    def get(self, record_id: str) -> Optional[Dict[str, Any]]:
        with self.lock:
            index = self._find_index(record_id)
            if index is None:
                return None
            return copy.deepcopy(self._records[index])

    def add(self, record: Dict[str, Any]) -> Dict[str, Any]:
        with self.lock:
            if self._find_index(record["id"]) is not None:
                raise KeyError(f"Duplicate record id: {record['id']}")
            self._records.append(copy.deepcopy(record))
            return copy.deepcopy(record)

    def replace(self, record: Dict[str, Any]) -> Dict[str, Any]:
        with self.lock:
            index = self._find_index(record["id"])
            if index is None:
                raise KeyError(f"Unknown record id: {record['id']}")
            self._records[index] = copy.deepcopy(record)
            return copy.deepcopy(record)

    def remove(self, record_id: str) -> bool:
        with self.lock:
            index = self._find_index(record_id)
            if index is None:
                return False
            del self._records[index]
            return True

    def __len__(self) -> int:
        with self.lock:
            return len(self._records)

    def _find_index(self, record_id: str) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.get("id") == record_id:
                return index
        return None
