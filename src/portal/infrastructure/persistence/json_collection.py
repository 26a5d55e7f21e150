"""Shared file handling for the JSON-file repositories.

Every collection lives in its own file as a JSON list of records. A
whole collection is rewritten on each save, so one ``_persist_raw``
call is one atomic unit of work.
"""

from __future__ import annotations

import contextlib
import json
import os
import tempfile
from pathlib import Path

from portal.domain.exceptions import StoreError


class JsonCollection:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        try:
            records = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StoreError(f"{self._file_path.name}: {exc}") from exc
        if not isinstance(records, list):
            raise StoreError(f"{self._file_path.name}: expected a list of records")
        return records

    def _persist_raw(self, records: list[dict]) -> None:
        text = json.dumps(records, indent=2, ensure_ascii=False) + "\n"
        try:
            # Write next to the target and swap in, so readers never
            # see a half-written file.
            fd, tmp = tempfile.mkstemp(dir=self._file_path.parent, suffix=".tmp")
        except OSError as exc:
            raise StoreError(f"{self._file_path.name}: {exc}") from exc
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            os.replace(tmp, self._file_path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                os.unlink(tmp)
            raise StoreError(f"{self._file_path.name}: {exc}") from exc

    def _upsert_raw(self, records: list[dict], record: dict, key: str = "id") -> None:
        for i, raw in enumerate(records):
            if raw.get(key) == record[key]:
                records[i] = record
                return
        records.append(record)

    def _ensure_file(self) -> None:
        try:
            if not self._file_path.exists():
                self._file_path.parent.mkdir(parents=True, exist_ok=True)
                self._file_path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"{self._file_path.name}: {exc}") from exc
