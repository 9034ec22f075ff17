"""Mini README: Key-value backends that hold the serialised budget.

Structure:
    * KeyValueBackend - protocol with ``get`` and ``set``.
    * InMemoryBackend - dict-backed store for tests and throwaway sessions.
    * JsonFileBackend - a local-storage style JSON file on disk.

Backends only move strings around; they know nothing about budgets. A missing
or unreadable file behaves like an empty store so the caller can fall back to
its defaults.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Dict, Optional, Protocol

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class KeyValueBackend(Protocol):
    """Minimal storage contract used by ``BudgetStore``."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryBackend:
    """Keep values in a dictionary for the lifetime of the object."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class JsonFileBackend:
    """Persist key-value pairs in a single JSON object file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except (json.JSONDecodeError, UnicodeDecodeError, OSError) as error:
            LOGGER.warning("Storage file %s unreadable (%s); treating as empty", self.path, error)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("Storage file %s does not hold an object; treating as empty", self.path)
            return {}
        return {str(key): value for key, value in data.items() if isinstance(value, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        values = self._read_all()
        values[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with temp_path.open("w", encoding="utf-8") as handle:
            json.dump(values, handle, indent=2, sort_keys=True)
        os.replace(temp_path, self.path)
        LOGGER.debug("Wrote key '%s' to %s", key, self.path)
