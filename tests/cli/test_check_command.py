# topmark:header:start
#
#   project      : PluginYml
#   file         : test_check_command.py
#   file_relpath : tests/cli/test_check_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `check` command output and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from pluginyml.cli.exit_codes import ExitCode
from tests.cli.conftest import (
    ERROR_DESCRIPTOR,
    VALID_DESCRIPTOR,
    WARNING_DESCRIPTOR,
    assert_exit,
    run_cli_in,
    write,
)
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_clean_file_succeeds(isolation: Path) -> None:
    write(isolation, "plugin.yml", VALID_DESCRIPTOR)
    result = run_cli_in(isolation, ["--no-color", "check", "plugin.yml"])
    assert_exit(result, ExitCode.SUCCESS)
    assert result.output.strip() == "plugin.yml: ok"


@mark_cli
def test_warnings_do_not_fail_by_default(isolation: Path) -> None:
    write(isolation, "plugin.yml", WARNING_DESCRIPTOR)
    result = run_cli_in(isolation, ["--no-color", "check", "plugin.yml"])
    assert_exit(result, ExitCode.SUCCESS)
    lines = result.output.splitlines()
    assert lines[0] == "plugin.yml:3:14: warning: Unknown key 'api-version' [unknown_key]"
    assert lines[1] == "plugin.yml: 1 warning"


@mark_cli
def test_errors_fail_with_diagnostics_code(isolation: Path) -> None:
    write(isolation, "plugin.yml", ERROR_DESCRIPTOR)
    result = run_cli_in(isolation, ["--no-color", "check", "plugin.yml"])
    assert_exit(result, ExitCode.DIAGNOSTICS)
    assert "plugin.yml:2:7: error: Invalid value for 'load'" in result.output
    assert "[invalid_enum_value]" in result.output
    assert "[expected_boolean]" in result.output
    assert "plugin.yml: 2 errors" in result.output


@mark_cli
def test_quiet_only_prints_problems(isolation: Path) -> None:
    write(isolation, "ok.yml", VALID_DESCRIPTOR)
    write(isolation, "bad.yml", ERROR_DESCRIPTOR)
    result = run_cli_in(isolation, ["--no-color", "-q", "check", "ok.yml", "bad.yml"])
    assert_exit(result, ExitCode.DIAGNOSTICS)
    assert "ok.yml" not in result.output
    assert all(line.startswith("bad.yml:") for line in result.output.splitlines())


@mark_cli
def test_fail_on_warning_from_settings(isolation: Path) -> None:
    write(isolation, "plugin.yml", WARNING_DESCRIPTOR)
    write(isolation, "pluginyml.toml", 'fail_on = "warning"\n')
    result = run_cli_in(isolation, ["--no-color", "check", "plugin.yml"])
    assert_exit(result, ExitCode.DIAGNOSTICS)


@mark_cli
def test_fail_on_never(isolation: Path) -> None:
    write(isolation, "plugin.yml", ERROR_DESCRIPTOR)
    write(isolation, "pyproject.toml", '[tool.pluginyml]\nfail_on = "never"\n')
    result = run_cli_in(isolation, ["--no-color", "check", "plugin.yml"])
    assert_exit(result, ExitCode.SUCCESS)


@mark_cli
def test_extra_keys_are_accepted(isolation: Path) -> None:
    write(isolation, "plugin.yml", WARNING_DESCRIPTOR)
    write(isolation, "custom.toml", 'extra_keys = ["api-version"]\nfail_on = "warning"\n')
    result = run_cli_in(
        isolation, ["--no-color", "check", "--config", "custom.toml", "plugin.yml"]
    )
    assert_exit(result, ExitCode.SUCCESS)
    assert result.output.strip() == "plugin.yml: ok"


@mark_cli
def test_invalid_settings_file_is_a_config_error(isolation: Path) -> None:
    write(isolation, "plugin.yml", VALID_DESCRIPTOR)
    write(isolation, "pluginyml.toml", "fail_on = \n")
    result = run_cli_in(isolation, ["--no-color", "check", "plugin.yml"])
    assert_exit(result, ExitCode.CONFIG_ERROR)


@mark_cli
def test_non_utf8_settings_file_is_a_config_error(isolation: Path) -> None:
    write(isolation, "plugin.yml", VALID_DESCRIPTOR)
    (isolation / "pluginyml.toml").write_bytes(b'fail_on = "\xff"\n')
    result = run_cli_in(isolation, ["--no-color", "check", "plugin.yml"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "not valid UTF-8" in result.output


@mark_cli
def test_blank_extra_key_is_a_settings_warning(isolation: Path) -> None:
    write(isolation, "plugin.yml", VALID_DESCRIPTOR)
    write(isolation, "pluginyml.toml", 'extra_keys = [""]\n')
    result = run_cli_in(isolation, ["--no-color", "check", "plugin.yml"])
    assert_exit(result, ExitCode.SUCCESS)
    assert "Warning: Ignoring blank entries in pluginyml.toml.extra_keys" in result.output
    assert "plugin.yml: ok" in result.output


@mark_cli
def test_missing_and_unparsable_files_fail(isolation: Path) -> None:
    write(isolation, "ok.yml", VALID_DESCRIPTOR)
    write(isolation, "list.yml", "- a\n- b\n")
    result = run_cli_in(isolation, ["--no-color", "check", "missing.yml", "list.yml", "ok.yml"])
    assert_exit(result, ExitCode.FAILURE)
    assert "File not found: missing.yml" in result.output
    assert "list.yml:1:1: Top-level value must be a mapping" in result.output
    assert "ok.yml: ok" in result.output


@mark_cli
def test_json_output_is_one_array(isolation: Path) -> None:
    write(isolation, "a.yml", VALID_DESCRIPTOR)
    write(isolation, "b.yml", WARNING_DESCRIPTOR)
    result = run_cli_in(isolation, ["check", "--format", "json", "a.yml", "b.yml"])
    assert_exit(result, ExitCode.SUCCESS)
    documents = json.loads(result.output)
    assert [d["path"] for d in documents] == ["a.yml", "b.yml"]
    assert documents[0]["record"]["load"] == "STARTUP"
    assert documents[1]["diagnostics"][0]["kind"] == "unknown_key"
    assert documents[1]["summary"] == {"info": 0, "warning": 1, "error": 0}


@mark_cli
def test_ndjson_output(isolation: Path) -> None:
    write(isolation, "plugin.yml", ERROR_DESCRIPTOR)
    result = run_cli_in(isolation, ["check", "--format", "NDJSON", "plugin.yml"])
    assert_exit(result, ExitCode.DIAGNOSTICS)
    records = [json.loads(line) for line in result.output.splitlines()]
    assert [r["kind"] for r in records] == ["record", "diagnostic", "diagnostic", "summary"]
    assert records[0]["record"]["database"] is False


@mark_cli
def test_check_requires_paths(isolation: Path) -> None:
    result = run_cli_in(isolation, ["check"])
    assert result.exit_code != ExitCode.SUCCESS


@mark_cli
def test_invalid_format_is_rejected(isolation: Path) -> None:
    write(isolation, "plugin.yml", VALID_DESCRIPTOR)
    result = run_cli_in(isolation, ["check", "--format", "xml", "plugin.yml"])
    assert result.exit_code != ExitCode.SUCCESS
    assert "Must be one of: text, json, ndjson" in result.output
