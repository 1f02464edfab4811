# topmark:header:start
#
#   project      : PluginYml
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for tool settings discovery and validation (tomlkit-backed)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from pluginyml.config.io import SettingsError, load_toml_dict
from pluginyml.config.settings import (
    FailOn,
    Settings,
    discover_settings,
    load_settings,
    load_settings_file,
    settings_from_table,
)
from pluginyml.diagnostic import DiagnosticLevel

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    settings = Settings()
    assert settings.fail_on is FailOn.ERROR
    assert settings.extra_keys == ()
    assert settings.source is None
    assert settings.warnings == ()


def test_fail_on_thresholds() -> None:
    assert FailOn.ERROR.threshold is DiagnosticLevel.ERROR
    assert FailOn.WARNING.threshold is DiagnosticLevel.WARNING
    assert FailOn.NEVER.threshold is None


def test_settings_from_table() -> None:
    settings = settings_from_table(
        {"fail_on": "warning", "extra_keys": ["api-version", "libraries", "api-version"]},
        where="pluginyml.toml",
    )
    assert settings.fail_on is FailOn.WARNING
    assert settings.extra_keys == ("api-version", "libraries")
    assert settings.warnings == ()


def test_invalid_values_fall_back_with_warnings() -> None:
    settings = settings_from_table(
        {"fail_on": "sometimes", "extra_keys": ["ok", 3], "colour": True},
        where="pluginyml.toml",
    )
    assert settings.fail_on is FailOn.ERROR
    assert settings.extra_keys == ("ok",)
    assert len(settings.warnings) == 3
    assert any("pluginyml.toml.fail_on" in w for w in settings.warnings)
    assert any("non-string entry" in w for w in settings.warnings)
    assert any("Unknown setting pluginyml.toml.colour" in w for w in settings.warnings)


def test_wrong_types_fall_back() -> None:
    settings = settings_from_table({"fail_on": 1, "extra_keys": "api-version"}, where="x")
    assert settings.fail_on is FailOn.ERROR
    assert settings.extra_keys == ()
    assert len(settings.warnings) == 2


def test_discover_prefers_pluginyml_toml(tmp_path: Path) -> None:
    (tmp_path / "pluginyml.toml").write_text('fail_on = "never"\n', encoding="utf-8")
    (tmp_path / "pyproject.toml").write_text(
        '[tool.pluginyml]\nfail_on = "warning"\n', encoding="utf-8"
    )
    settings = discover_settings(tmp_path)
    assert settings.fail_on is FailOn.NEVER
    assert settings.source == tmp_path / "pluginyml.toml"


def test_discover_reads_pyproject_tool_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[project]\nname = "x"\n\n[tool.pluginyml]\nextra_keys = ["api-version"]\n',
        encoding="utf-8",
    )
    settings = discover_settings(tmp_path)
    assert settings.extra_keys == ("api-version",)
    assert settings.source == tmp_path / "pyproject.toml"


def test_discover_ignores_pyproject_without_tool_table(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert discover_settings(tmp_path) == Settings()


def test_discover_defaults_when_nothing_found(tmp_path: Path) -> None:
    assert discover_settings(tmp_path) == Settings()


def test_explicit_file(tmp_path: Path) -> None:
    path = tmp_path / "custom.toml"
    path.write_text('fail_on = "warning"\n', encoding="utf-8")
    assert load_settings(path).fail_on is FailOn.WARNING
    assert load_settings_file(path).source == path


def test_explicit_pyproject_uses_tool_table(tmp_path: Path) -> None:
    path = tmp_path / "pyproject.toml"
    path.write_text('[tool.pluginyml]\nfail_on = "never"\n', encoding="utf-8")
    assert load_settings(path).fail_on is FailOn.NEVER


def test_load_settings_discovers_in_cwd(tmp_path: Path) -> None:
    (tmp_path / "pluginyml.toml").write_text('fail_on = "warning"\n', encoding="utf-8")
    assert load_settings(cwd=tmp_path).fail_on is FailOn.WARNING


def test_invalid_toml_raises(tmp_path: Path) -> None:
    path = tmp_path / "pluginyml.toml"
    path.write_text("fail_on = \n", encoding="utf-8")
    with pytest.raises(SettingsError, match="Invalid TOML"):
        load_settings_file(path)


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(SettingsError, match="Cannot read"):
        load_toml_dict(tmp_path / "missing.toml")


def test_non_utf8_file_raises(tmp_path: Path) -> None:
    path = tmp_path / "pluginyml.toml"
    path.write_bytes(b'fail_on = "\xff"\n')
    with pytest.raises(SettingsError, match="not valid UTF-8"):
        load_settings_file(path)


@pytest.mark.parametrize("blank", ["", "   ", "\t"])
def test_blank_extra_keys_are_dropped_with_warning(blank: str) -> None:
    settings = settings_from_table({"extra_keys": [blank, "api-version"]}, where="pluginyml.toml")
    assert settings.extra_keys == ("api-version",)
    assert settings.warnings == ("Ignoring blank entries in pluginyml.toml.extra_keys",)
