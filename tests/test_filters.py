from __future__ import annotations

import re

import pytest

from hashed_assets.errors import ConfigurationError
from hashed_assets.filters import PathFilter, compile_patterns, should_include


def test_no_patterns_includes_everything() -> None:
    assert should_include("css/app.css", [], [])
    assert should_include("js/app.js", None, None)


def test_include_patterns_restrict_to_matches() -> None:
    assert should_include("css/app.css", ["css/.*"], [])
    assert not should_include("js/app.js", ["css/.*"], [])


def test_exclude_patterns_veto_without_include() -> None:
    assert should_include("css/app.css", [], ["js/.*"])
    assert not should_include("js/app.js", [], ["js/.*"])


def test_exclude_wins_over_include() -> None:
    assert not should_include("css/vendor/reset.css", ["css/.*"], ["vendor/"])


def test_matching_is_substring_search_not_full_match() -> None:
    assert should_include("icssue/file.txt", ["css"], [])
    assert not should_include("icssue/file.txt", ["^css/"], [])


def test_backslash_paths_are_normalized() -> None:
    assert should_include("css\\app.css", ["^css/app\\.css$"], [])


def test_precompiled_patterns_are_accepted() -> None:
    f = PathFilter.from_patterns([re.compile(r"\.css$")], ["min"])
    assert f.matches("css/app.css")
    assert not f.matches("css/app.min.css")
    assert not f.matches("js/app.js")


def test_invalid_regex_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        compile_patterns(["css/(unclosed"])
    assert "css/(unclosed" in str(excinfo.value)


def test_non_string_pattern_raises_configuration_error() -> None:
    with pytest.raises(ConfigurationError):
        compile_patterns([42])  # type: ignore[list-item]
