"""
Retitle — Process persistence.

The host owns the real process table; these stores stand in for it.
JsonProcessStore keeps all records in one JSON file and is what the HTTP
surface uses. InMemoryProcessStore backs tests and embedding.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Protocol

from retitle.errors import PersistenceError, ProcessNotFoundError, StorageSwapError
from retitle.models.process import ProcessRecord


class ProcessStore(Protocol):
    def get(self, process_id: int) -> ProcessRecord: ...

    def save(self, process: ProcessRecord) -> None: ...


class InMemoryProcessStore:
    def __init__(self, processes: list[ProcessRecord] | None = None):
        self._records: dict[int, ProcessRecord] = {}
        self.save_count = 0
        for p in processes or []:
            self._records[p.id] = p.model_copy()

    def get(self, process_id: int) -> ProcessRecord:
        try:
            return self._records[process_id].model_copy()
        except KeyError:
            raise ProcessNotFoundError(process_id)

    def save(self, process: ProcessRecord) -> None:
        if process.swapped_out:
            raise StorageSwapError(process.id)
        self._records[process.id] = process.model_copy()
        self.save_count += 1


class JsonProcessStore:
    """
    File-backed store: ``{"processes": [ {...}, ... ]}``.

    Writes go to a sibling temp file that replaces the original, so a failed
    save never leaves a half-written store behind.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict[int, dict]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return {int(p["id"]): p for p in data.get("processes", [])}
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as exc:
            raise PersistenceError(0, f"store {self.path} unreadable: {exc}")

    def get(self, process_id: int) -> ProcessRecord:
        records = self._load()
        if process_id not in records:
            raise ProcessNotFoundError(process_id)
        return ProcessRecord.model_validate(records[process_id])

    def save(self, process: ProcessRecord) -> None:
        if process.swapped_out:
            raise StorageSwapError(process.id)

        records = self._load()
        records[process.id] = process.model_dump()
        payload = {"processes": [records[k] for k in sorted(records)]}

        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as exc:
            raise PersistenceError(process.id, exc.strerror or str(exc))
