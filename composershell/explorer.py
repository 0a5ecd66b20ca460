"""The list of open projects and their required packages."""

from __future__ import annotations

import json
import os
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .commands import Signal
from .overview import PackageLoadError, load_json_object
from .settings import SETTINGS_PROJECT, default_settings_path

COMPOSER_JSON = "composer.json"
COMPOSER_LOCK = "composer.lock"


def _default_projects_path() -> Path:
    return default_settings_path().parent / f"{SETTINGS_PROJECT}.json"


def _native(path: str) -> str:
    return path.replace("/", os.sep) if os.sep != "/" else path


def _string(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(eq=False)
class Project:
    """One project: its display name, its ``composer.json`` and its requirements.

    Each requirement reads ``name@constraint``.
    """

    fullname: str
    path: str
    requirements: tuple[str, ...] = field(default_factory=tuple)


class ProjectExplorer:
    """Keeps the open projects sorted by name and remembers them between runs.

    Signals: ``install(project)``, ``update(project)`` and ``empty()``, the
    last emitted when removing a project leaves none.
    """

    def __init__(self, settings_path: str | os.PathLike | None = None) -> None:
        self.settings_path = (
            Path(settings_path) if settings_path is not None else _default_projects_path()
        )
        self._projects: list[Project] = []
        self.install = Signal()
        self.update = Signal()
        self.empty = Signal()

        for path in self._stored_paths():
            if not os.path.exists(path):
                continue
            try:
                document = load_json_object(path)
            except PackageLoadError:
                continue
            self.add_project(path, document)

    def _stored_paths(self) -> list[str]:
        try:
            stored = json.loads(self.settings_path.read_text(encoding="utf-8"))
        except (OSError, ValueError):
            return []
        if not isinstance(stored, dict):
            return []
        return [value for _, value in sorted(stored.items()) if isinstance(value, str)]

    @property
    def projects(self) -> list[Project]:
        """The projects in display order."""
        return list(self._projects)

    def __iter__(self) -> Iterator[Project]:
        return iter(list(self._projects))

    def __len__(self) -> int:
        return len(self._projects)

    def add_project(self, path: str | os.PathLike, project: Mapping[str, Any]) -> Project:
        """Add the project described by ``project``, stored at ``path``."""
        fullname = _string(project.get("name"))
        version = _string(project.get("version"))
        if version:
            fullname += "@" + version

        required = project.get("require")
        if not isinstance(required, Mapping):
            required = {}
        requirements = tuple(
            f"{key}@{_string(required[key])}" for key in sorted(required)
        )

        added = Project(fullname=fullname, path=os.fspath(path), requirements=requirements)
        self._projects.append(added)
        self._projects.sort(key=lambda item: item.fullname)
        return added

    def add_project_from_path(self, directory: str | os.PathLike) -> Project | None:
        """Add the project whose ``composer.json`` lies in ``directory``.

        Returns None when the file cannot be read or is not valid JSON.
        """
        file_path = os.path.join(os.fspath(directory), COMPOSER_JSON)
        try:
            document = load_json_object(file_path)
        except PackageLoadError:
            return None
        return self.add_project(file_path, document)

    def remove_project(self, project: Project) -> None:
        """Remove ``project``; raises ValueError if it is not open."""
        self._projects.remove(project)
        if not self._projects:
            self.empty.emit()

    def exists(self, directory: str | os.PathLike) -> bool:
        """Whether the project in ``directory`` is already open."""
        needle = os.path.join(os.fspath(directory), COMPOSER_JSON)
        return any(project.path == needle for project in self._projects)

    def path_of(self, project: Project) -> str:
        """The directory that holds ``project``'s ``composer.json``."""
        return _native(os.path.dirname(project.path) or ".")

    def is_locked(self, project: Project) -> bool:
        """Whether the project has a ``composer.lock`` next to its ``composer.json``."""
        return os.path.exists(os.path.join(self.path_of(project), COMPOSER_LOCK))

    def save(self) -> None:
        """Store the paths of the open projects in the settings file."""
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        data = {str(index): project.path for index, project in enumerate(self._projects)}
        self.settings_path.write_text(json.dumps(data, indent=4), encoding="utf-8")