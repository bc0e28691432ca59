import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

CONFIGURATIONS_KEY = "ai_configurations_fallback"

# Serializes read-modify-write across request threads.
_write_lock = threading.Lock()


class LocalCache:
    """
    Key/value JSON file used as a client-side cache.

    Each key holds one JSON value. Missing or corrupted files read as empty;
    write failures are logged and never raised.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        try:
            if not self.path.exists():
                return {}
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError, ValueError) as exc:
            logger.warning("Local cache %s unreadable, treating as empty: %s", self.path, exc)
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Any:
        return self._load().get(key)

    def set(self, key: str, value: Any) -> None:
        with _write_lock:
            data = self._load()
            data[key] = value
            tmp_path = None
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                # Write a sibling temp file then swap it in, so readers never see a partial file.
                fd, tmp_path = tempfile.mkstemp(
                    dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
                )
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2, default=str)
                os.replace(tmp_path, self.path)
                tmp_path = None
            except (OSError, TypeError) as exc:
                logger.warning("Could not write local cache %s: %s", self.path, exc)
            finally:
                if tmp_path is not None:
                    Path(tmp_path).unlink(missing_ok=True)

    def get_list(self, key: str) -> list[dict[str, Any]]:
        value = self.get(key)
        if not isinstance(value, list):
            return []
        return [item for item in value if isinstance(item, dict)]
