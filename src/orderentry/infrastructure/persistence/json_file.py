"""A JSON array of records on disk with staged, atomically replaced writes."""

from __future__ import annotations

import json
import os
from pathlib import Path

from orderentry.domain.exceptions import PersistenceError


class JsonRecordFile:

    def __init__(self, file_path: Path) -> None:
        self.path = file_path
        self._staged: list[dict] | None = None
        self._ensure_file()

    @property
    def has_staged(self) -> bool:
        return self._staged is not None

    def load(self) -> list[dict]:
        """Return the staged records if any, otherwise what is on disk."""
        if self._staged is not None:
            return [dict(r) for r in self._staged]
        try:
            records = json.loads(self.path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise PersistenceError(f"Cannot read {self.path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise PersistenceError(f"Malformed JSON in {self.path}: {exc}") from exc
        if not isinstance(records, list):
            raise PersistenceError(f"{self.path} must contain a JSON array")
        return records

    def stage(self, records: list[dict]) -> None:
        self._staged = records

    def discard(self) -> None:
        self._staged = None

    def write_temp(self) -> Path:
        """Write the staged records to a sibling temp file and return its path."""
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            tmp.write_text(json.dumps(self._staged, indent=2) + "\n", encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Cannot write {tmp}: {exc}") from exc
        return tmp

    def replace_with(self, tmp: Path) -> None:
        try:
            os.replace(tmp, self.path)
        except OSError as exc:
            raise PersistenceError(f"Cannot replace {self.path}: {exc}") from exc
        self._staged = None

    def _ensure_file(self) -> None:
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Cannot create {self.path}: {exc}") from exc
