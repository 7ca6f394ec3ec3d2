from __future__ import annotations

from pathlib import Path

import pytest

from hashed_assets.config import HashOptions, options_from_env
from hashed_assets.errors import ConfigurationError

_ENV_VARS = (
    "HASHED_ASSETS_RESOURCES_DIR",
    "HASHED_ASSETS_PUBLIC_DIR",
    "HASHED_ASSETS_TARGET_DIR",
    "HASHED_ASSETS_MANIFEST_FILE",
    "HASHED_ASSETS_INCLUDE",
    "HASHED_ASSETS_EXCLUDE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    options = HashOptions()

    assert options.resources_dir == Path("resources")
    assert options.public_dir == "public"
    assert options.resources_dir_target == Path("resources-hashed")
    assert options.manifest_file == "manifest.edn"
    assert options.include_patterns == ()
    assert options.exclude_patterns == ()
    assert options.scan_root == Path("resources/public")
    assert options.target_public_dir == Path("resources-hashed/public")
    assert options.manifest_path == Path("resources-hashed/manifest.edn")


def test_paths_and_patterns_are_normalized() -> None:
    options = HashOptions(
        resources_dir="res",  # type: ignore[arg-type]
        resources_dir_target="out",  # type: ignore[arg-type]
        include_patterns=["css/.*"],  # type: ignore[arg-type]
    )

    assert options.resources_dir == Path("res")
    assert options.include_patterns == ("css/.*",)
    assert options.path_filter.matches("css/a.css")
    assert not options.path_filter.matches("js/a.js")


def test_single_string_pattern_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        HashOptions(include_patterns="css/.*")  # type: ignore[arg-type]


@pytest.mark.parametrize("field", ["public_dir", "manifest_file"])
def test_empty_names_are_rejected(field: str) -> None:
    with pytest.raises(ConfigurationError):
        HashOptions(**{field: " "})


def test_invalid_exclude_pattern_is_rejected() -> None:
    with pytest.raises(ConfigurationError):
        HashOptions(exclude_patterns=("*.js",))


def test_options_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HASHED_ASSETS_RESOURCES_DIR", "site")
    monkeypatch.setenv("HASHED_ASSETS_TARGET_DIR", "site-hashed")
    monkeypatch.setenv("HASHED_ASSETS_MANIFEST_FILE", "manifest.json")
    monkeypatch.setenv("HASHED_ASSETS_INCLUDE", "css/.*, js/.*")

    options = options_from_env(public_dir="static")

    assert options.resources_dir == Path("site")
    assert options.public_dir == "static"
    assert options.resources_dir_target == Path("site-hashed")
    assert options.manifest_file == "manifest.json"
    assert options.include_patterns == ("css/.*", "js/.*")
    assert options.exclude_patterns == ()


def test_explicit_arguments_beat_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HASHED_ASSETS_EXCLUDE", "js/.*")

    options = options_from_env(exclude_patterns=[])

    assert options.exclude_patterns == ()
