# core/settings_utils.py
from __future__ import annotations
import json, logging, math, os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict

logger = logging.getLogger(__name__)

MIN_LENGTH = 4
MAX_LENGTH = 128
DEFAULT_LENGTH = 16

STORAGE_KEY = "passwordSettings"

# python field -> stored key (giữ đúng shape đã lưu)
_KEYS = {
    "length": "length",
    "include_lower": "includeLower",
    "include_upper": "includeUpper",
    "include_numbers": "includeNumbers",
    "include_symbols": "includeSymbols",
    "exclude_similar_chars": "excludeSimilarChars",
    "guarantee_each_type": "guaranteeEachType",
}


@dataclass(frozen=True)
class Settings:
    length: int = DEFAULT_LENGTH
    include_lower: bool = True
    include_upper: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_similar_chars: bool = False
    guarantee_each_type: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return {_KEYS[k]: v for k, v in asdict(self).items()}

    @classmethod
    def from_dict(cls, data: Any) -> "Settings":
        """
        Build Settings from the stored shape.
        Missing keys or values of the wrong type fall back to the field default.
        """
        if not isinstance(data, dict):
            return cls()
        defaults = cls()
        values: Dict[str, Any] = {}
        for f in fields(cls):
            raw = data.get(_KEYS[f.name])
            if f.name == "length":
                ok = isinstance(raw, (int, float)) and not isinstance(raw, bool) and math.isfinite(raw)
                values[f.name] = int(raw) if ok else defaults.length
            else:
                values[f.name] = raw if isinstance(raw, bool) else getattr(defaults, f.name)
        return cls(**values)


def clamp_length(value: Any, lo: int = MIN_LENGTH, hi: int = MAX_LENGTH) -> int:
    try:
        v = int(value)
    except (TypeError, ValueError, OverflowError):
        return lo
    return max(lo, min(hi, v))


# --------- Paths ---------
def data_dir() -> Path:
    return Path(os.getenv("PASSGEN_DATA_DIR") or Path.home() / ".passgen").expanduser()


def default_settings_path() -> Path:
    return data_dir() / "settings.json"


# --------- Persistence ---------
class SettingsStore:
    """JSON key-value file; Settings live under a single key."""

    def __init__(self, path: str | os.PathLike | None = None, key: str = STORAGE_KEY):
        self.path = Path(path) if path else default_settings_path()
        self.key = key

    def _read_all(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not read settings file %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Settings file %s is not a JSON object, ignoring", self.path)
            return {}
        return data

    def load(self) -> Settings:
        data = self._read_all()
        if self.key not in data:
            logger.info("No saved settings, using defaults")
            return Settings()
        return Settings.from_dict(data[self.key])

    def save(self, settings: Settings) -> bool:
        data = self._read_all()
        data[self.key] = settings.to_dict()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error("Could not save settings to %s: %s", self.path, e)
            return False
        logger.debug("Settings saved to %s", self.path)
        return True
