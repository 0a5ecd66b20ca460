"""Application settings: worker threads, search limit, binaries and proxies."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path

ORGANIZATION_NAME = "ComposerGUI"
SETTINGS_PROJECT = "Projects"
SETTINGS_APPLICATION = "Application"

MIN_WORKER_THREADS = 1
MIN_SEARCH_LIMIT = 0
MAX_SEARCH_LIMIT = 99
DEFAULT_SEARCH_LIMIT = 2

# Attribute name -> key used in the stored settings file.
_KEYS = {
    "worker_threads": "worker_threads",
    "packagist_search_limit": "packagist_search_limit",
    "php_binary_path": "php_binary_path",
    "composer_binary_path": "composer_binary_path",
    "http_proxy": "var_http_proxy",
    "https_proxy": "var_https_proxy",
}


def _ideal_thread_count() -> int:
    return os.cpu_count() or 1


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def _config_root() -> Path:
    if os.name == "nt":
        appdata = os.environ.get("APPDATA")
        if appdata:
            return Path(appdata)
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def default_settings_path() -> Path:
    """Return the file where the application settings are kept by default."""
    return _config_root() / ORGANIZATION_NAME / f"{SETTINGS_APPLICATION}.json"


@dataclass
class AppSettings:
    """Persistent application settings.

    Numeric values are kept within the ranges the settings dialog allows:
    worker threads between one and the number of CPUs, the search limit
    between 0 and 99.
    """

    worker_threads: int = field(default_factory=_ideal_thread_count)
    packagist_search_limit: int = DEFAULT_SEARCH_LIMIT
    php_binary_path: str = ""
    composer_binary_path: str = ""
    http_proxy: str = ""
    https_proxy: str = ""

    def __post_init__(self) -> None:
        self.worker_threads = _clamp(
            int(self.worker_threads), MIN_WORKER_THREADS, _ideal_thread_count()
        )
        self.packagist_search_limit = _clamp(
            int(self.packagist_search_limit), MIN_SEARCH_LIMIT, MAX_SEARCH_LIMIT
        )

    @classmethod
    def load(cls, path: str | os.PathLike | None = None) -> "AppSettings":
        """Read settings from ``path``; missing or unreadable values take defaults."""
        path = Path(path) if path is not None else default_settings_path()
        try:
            stored = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            stored = {}
        if not isinstance(stored, dict):
            stored = {}

        defaults = cls()
        values = {}
        for attribute, key in _KEYS.items():
            default = getattr(defaults, attribute)
            raw = stored.get(key, default)
            try:
                values[attribute] = int(raw) if isinstance(default, int) else str(raw)
            except (TypeError, ValueError):
                values[attribute] = default
        return cls(**values)

    def save(self, path: str | os.PathLike | None = None) -> None:
        """Write the settings to ``path``, creating its directory if needed."""
        path = Path(path) if path is not None else default_settings_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {_KEYS[name]: value for name, value in asdict(self).items()}
        path.write_text(json.dumps(data, indent=4), encoding="utf-8")