"""Small persistent key-value store for integer preferences (the high score)."""

from pathlib import Path
from typing import Dict, Optional, Protocol
import json
import logging
import os
import tempfile

logger = logging.getLogger(__name__)

HIGH_SCORE_KEY = "highscore"


class PreferenceStore(Protocol):
    """Integer preferences keyed by name."""

    def get_int(self, key: str, default: int = 0) -> int:
        ...

    def put_int(self, key: str, value: int) -> None:
        ...


class MemoryPreferenceStore:
    """In-process store; nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, int]] = None) -> None:
        self._values: Dict[str, int] = dict(initial or {})
        self.writes = 0

    def get_int(self, key: str, default: int = 0) -> int:
        return self._values.get(key, default)

    def put_int(self, key: str, value: int) -> None:
        self._values[key] = int(value)
        self.writes += 1


class JsonPreferenceStore:
    """Preferences kept in a JSON object on disk.

    A missing or unreadable file reads as empty. Writes go to a temp file
    that replaces the old one, so a crash never leaves half a file.
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._values: Dict[str, int] = self._load()

    def _load(self) -> Dict[str, int]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable preferences {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring preferences {self.path}: not a JSON object")
            return {}
        return {k: v for k, v in data.items() if isinstance(v, int) and not isinstance(v, bool)}

    def get_int(self, key: str, default: int = 0) -> int:
        return self._values.get(key, default)

    def put_int(self, key: str, value: int) -> None:
        self._values[key] = int(value)
        try:
            self._write()
        except OSError as e:
            logger.error(f"Failed to save preferences to {self.path}: {e}")

    def _write(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".prefs-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Preferences saved to {self.path}")
