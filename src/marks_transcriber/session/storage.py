"""
Key-value persistence for the session.

The session only needs ``get(key)`` and ``set(key, value)`` on string
values. JsonFileKeyValueStore keeps them in one JSON object on disk;
any malformed file falls back to an empty store instead of crashing.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Protocol

from marks_transcriber.core.errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String key-value store used to save and load the transport text."""

    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        """Persist value. Raises StorageError on failure."""
        ...


class MemoryKeyValueStore:
    """Dict-backed store; nothing survives the process."""

    def __init__(self, data: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(data or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileKeyValueStore:
    """Lightweight JSON-backed store, written through on every set."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self.data: Dict[str, str] = {}
        self.load_error: Optional[str] = None

        if self.path.exists():
            try:
                loaded = json.loads(self.path.read_text(encoding="utf-8"))
                if not isinstance(loaded, dict):
                    raise ValueError(f"expected a JSON object, got {type(loaded).__name__}")
                self.data = {str(k): v for k, v in loaded.items() if isinstance(v, str)}
            except (json.JSONDecodeError, RecursionError) as e:
                self.load_error = f"Storage file is corrupted:\n{e}"
            except (OSError, ValueError) as e:
                self.load_error = f"Failed to read storage:\n{e}"
            if self.load_error:
                logger.warning(f"{self.load_error} ({self.path})")
                self.data = {}

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        previous = self.data.get(key)
        self.data[key] = value
        try:
            self._save()
        except OSError as e:
            # Keep memory in step with what is on disk
            if previous is None:
                del self.data[key]
            else:
                self.data[key] = previous
            raise StorageError(f"failed writing {key} to {self.path}: {e}") from e

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # ASCII escapes keep lone surrogates writable and readable
        self.path.write_text(json.dumps(self.data, indent=2), encoding="utf-8")
