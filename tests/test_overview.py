import json

import pytest

from composershell.overview import (
    Field,
    Overview,
    PackageLoadError,
    State,
    describe_package,
    load_json_object,
)


def write_json(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def test_load_missing_file(tmp_path):
    target = tmp_path / "composer.json"
    with pytest.raises(PackageLoadError, match="does not exists"):
        load_json_object(target)


def test_load_invalid_json(tmp_path):
    target = tmp_path / "composer.json"
    target.write_text("{not json", encoding="utf-8")
    with pytest.raises(PackageLoadError, match="does not contain valid JSON"):
        load_json_object(target)


def test_load_array_gives_empty_object(tmp_path):
    target = tmp_path / "composer.json"
    write_json(target, [1, 2])
    assert load_json_object(target) == {}


def test_load_object_round_trip(tmp_path):
    data = {"name": "acme/app", "require": {"php": ">=8.0"}}
    target = tmp_path / "composer.json"
    write_json(target, data)
    assert load_json_object(target) == data


def test_describe_package_values():
    package = {
        "type": "library",
        "license": "MIT",
        "abandoned": True,
        "keywords": ["http", "client"],
        "homepage": "https://example.com",
        "description": "A client",
        "minimum-stability": "dev",
    }
    fields = describe_package(package)
    assert fields[Field.DOWNLOADS] == "?"
    assert fields[Field.FAVERS] == "?"
    assert fields[Field.TYPE] == "library"
    assert fields[Field.LICENSE] == "MIT"
    assert fields[Field.ABANDONED] == "true"
    assert fields[Field.KEYWORDS] == ", ".join(package["keywords"])
    assert fields[Field.HOMEPAGE] == package["homepage"]
    assert fields[Field.MINIMUM_STABILITY] == "dev"
    assert fields[Field.LOCKED] == ""


def test_describe_package_non_strings_are_empty():
    fields = describe_package({"license": ["MIT"], "abandoned": "other/pkg"})
    assert fields[Field.LICENSE] == ""
    assert fields[Field.ABANDONED] == "false"
    assert set(fields) == set(Field)


def test_initial_state_is_stub():
    overview = Overview()
    assert overview.state is State.STUB
    assert all(value == "" for value in overview.fields.values())


def test_dispatch_root_project(tmp_path):
    write_json(tmp_path / "composer.json", {"name": "acme/app", "type": "project"})
    overview = Overview()
    overview.dispatch(tmp_path)
    assert overview.state is State.VIEW_PACKAGE
    assert overview.fields[Field.TYPE] == "project"
    assert overview.locked_visible is False


def test_dispatch_child_with_locked_version(tmp_path):
    write_json(tmp_path / "composer.json", {"name": "acme/app"})
    write_json(
        tmp_path / "vendor" / "acme" / "lib" / "composer.json",
        {"name": "acme/lib", "type": "library"},
    )
    write_json(
        tmp_path / "composer.lock",
        {"packages": [{"name": "other/x", "version": "v0.1"},
                      {"name": "acme/lib", "version": "v2.3.4"}]},
    )
    overview = Overview()
    overview.dispatch(tmp_path, "acme/lib")
    assert overview.fields[Field.LOCKED] == "v2.3.4"
    assert overview.fields[Field.TYPE] == "library"
    assert overview.locked_visible is True


def test_dispatch_child_without_lock_file(tmp_path):
    write_json(tmp_path / "composer.json", {"name": "acme/app", "vendor-dir": "deps"})
    write_json(tmp_path / "deps" / "acme" / "lib" / "composer.json", {"name": "acme/lib"})
    overview = Overview()
    overview.dispatch(tmp_path, "acme/lib")
    assert overview.state is State.VIEW_PACKAGE
    assert overview.fields[Field.LOCKED] == ""
    assert overview.locked_visible is False


def test_dispatch_missing_child_raises(tmp_path):
    write_json(tmp_path / "composer.json", {"name": "acme/app"})
    overview = Overview()
    with pytest.raises(PackageLoadError):
        overview.dispatch(tmp_path, "acme/missing")
    assert overview.state is State.STUB


def test_lookup_fills_statistics():
    requested = []

    def lookup(name):
        requested.append(name)
        return {"downloads": 1500, "favers": 42}

    overview = Overview(lookup=lookup)
    overview.populate({"name": "acme/lib"})
    assert requested == ["acme/lib"]
    assert overview.fields[Field.DOWNLOADS] == "1500"
    assert overview.fields[Field.FAVERS] == "42"


def test_lookup_failure_keeps_placeholders():
    def lookup(name):
        raise OSError("offline")

    overview = Overview(lookup=lookup)
    overview.populate({"name": "acme/lib"})
    assert overview.fields[Field.DOWNLOADS] == "?"
    assert overview.state is State.VIEW_PACKAGE


def test_set_state_switches_back_to_stub():
    overview = Overview()
    overview.populate({"name": "acme/lib"})
    overview.set_state(State.STUB)
    assert overview.state is State.STUB