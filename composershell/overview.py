"""Overview of a project or one of its installed packages."""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Mapping
from enum import Enum, IntEnum
from typing import Any

STUB_TEXT = "No package selected"
UNKNOWN_STATISTIC = "?"
LOCKED_VERSION_KEY = "composergui_locked_version"


class State(Enum):
    """What the overview currently shows."""

    VIEW_PACKAGE = "view_package"
    STUB = "stub"


class Field(IntEnum):
    """The values shown for a package, in display order."""

    DOWNLOADS = 0
    FAVERS = 1
    LOCKED = 2
    MINIMUM_STABILITY = 3
    TYPE = 4
    LICENSE = 5
    ABANDONED = 6
    KEYWORDS = 7
    TIME = 8
    HOMEPAGE = 9
    README = 10
    DESCRIPTION = 11


class PackageLoadError(RuntimeError):
    """Raised when a package file is missing or does not hold valid JSON."""


Lookup = Callable[[str], "Mapping[str, Any] | None"]


def load_json_object(path: str | os.PathLike) -> dict[str, Any]:
    """Read the JSON object in ``path``; a top-level array yields ``{}``."""
    path = os.fspath(path)
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError):
        raise PackageLoadError(f"{path} does not exists") from None
    try:
        document = json.loads(text)
    except ValueError:
        raise PackageLoadError(f"{path} does not contain valid JSON") from None
    if isinstance(document, dict):
        return document
    if isinstance(document, list):
        return {}
    raise PackageLoadError(f"{path} does not contain valid JSON")


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return ""


def _keywords(value: Any) -> str:
    if isinstance(value, list):
        return ", ".join(_text(item) for item in value)
    return _text(value)


def _count(value: Any) -> str:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "0"
    return str(int(value))


def describe_package(package: Mapping[str, Any]) -> dict[Field, str]:
    """Return the displayed value of every field for ``package``.

    Download and favourite counts are not part of a package file and
    read ``?`` until looked up.
    """
    return {
        Field.DOWNLOADS: UNKNOWN_STATISTIC,
        Field.FAVERS: UNKNOWN_STATISTIC,
        Field.LOCKED: _string(package.get(LOCKED_VERSION_KEY)),
        Field.MINIMUM_STABILITY: _string(package.get("minimum-stability")),
        Field.TYPE: _string(package.get("type")),
        Field.LICENSE: _string(package.get("license")),
        Field.ABANDONED: "true" if package.get("abandoned") is True else "false",
        Field.KEYWORDS: _keywords(package.get("keywords")),
        Field.TIME: _string(package.get("time")),
        Field.HOMEPAGE: _string(package.get("homepage")),
        Field.README: _string(package.get("readme")),
        Field.DESCRIPTION: _string(package.get("description")),
    }


class Overview:
    """Shows either a placeholder or the details of one package.

    ``lookup`` is given a package name and may return download statistics
    with ``downloads`` and ``favers`` counts, or None.
    """

    def __init__(self, lookup: Lookup | None = None) -> None:
        self.lookup = lookup
        self.state = State.STUB
        self.fields: dict[Field, str] = {field: "" for field in Field}
        self.locked_visible = False

    def set_state(self, state: State) -> None:
        self.state = State(state)

    def dispatch(self, path: str | os.PathLike, child_name: str | None = None) -> None:
        """Show the project at ``path``, or its installed package ``child_name``.

        For a package, its locked version is taken from ``composer.lock``
        when that file is present and lists it.
        """
        path = os.fspath(path)
        root = load_json_object(os.path.join(path, "composer.json"))
        if child_name is None:
            self.populate(root)
            return

        vendor_dir = root.get("vendor-dir")
        if not isinstance(vendor_dir, str):
            vendor_dir = "vendor"
        child_path = os.path.join(path, vendor_dir, os.path.normpath(child_name))
        child = load_json_object(os.path.join(child_path, "composer.json"))

        try:
            lock = load_json_object(os.path.join(path, "composer.lock"))
        except PackageLoadError:
            lock = {}
        packages = lock.get("packages")
        for locked in packages if isinstance(packages, list) else []:
            if isinstance(locked, dict) and _string(locked.get("name")) == child_name:
                child[LOCKED_VERSION_KEY] = _string(locked.get("version"))

        self.populate(child)

    def populate(self, package: Mapping[str, Any]) -> None:
        """Fill the fields from ``package`` and switch to the package view."""
        self.fields = describe_package(package)
        self.locked_visible = bool(self.fields[Field.LOCKED])
        self.set_state(State.VIEW_PACKAGE)

        if self.lookup is None:
            return
        try:
            statistics = self.lookup(_string(package.get("name")))
        except OSError:
            return
        if statistics is not None:
            self.fields[Field.DOWNLOADS] = _count(statistics.get("downloads"))
            self.fields[Field.FAVERS] = _count(statistics.get("favers"))