# topmark:header:start
#
#   project      : PluginYml
#   file         : test_render.py
#   file_relpath : tests/cli/test_render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the human-readable renderers."""

from __future__ import annotations

from pathlib import Path

from pluginyml.cli.render import format_diagnostic, format_record_lines, format_summary
from pluginyml.diagnostic import DiagnosticKind, DiagnosticLog
from pluginyml.plugin import PluginConfig, PluginLoadOrder
from pluginyml.tree import PlainScalar, SourcePosition
from tests.conftest import plain


def test_record_lines_are_aligned() -> None:
    record = PluginConfig(name="Demo", load=PluginLoadOrder.STARTUP, depend=["A", "B"])
    lines = list(format_record_lines(record))
    assert "name        : Demo" in lines
    assert "load        : STARTUP" in lines
    assert "depend      : [A, B]" in lines
    assert "version     : <not set>" in lines
    assert "database    : false" in lines


def test_multiline_values_are_escaped() -> None:
    record = PluginConfig(description="a\nb\n", authors=["x", "y\nz"])
    lines = list(format_record_lines(record))
    assert len(lines) == len(PluginConfig.__dataclass_fields__)
    assert "description : 'a\\nb\\n'" in lines
    assert "authors     : [x, 'y\\nz']" in lines


def test_diagnostic_line_with_and_without_position() -> None:
    log = DiagnosticLog()
    node = PlainScalar("x", SourcePosition(3, 7))
    log.add("load", DiagnosticKind.INVALID_ENUM_VALUE, node, "bad")
    log.add("foo", DiagnosticKind.UNKNOWN_KEY, plain("1"), "Unknown key 'foo'")
    path = Path("plugin.yml")
    first, second = log.items
    assert (
        format_diagnostic(first, path=path, color=False)
        == "plugin.yml:3:7: error: bad [invalid_enum_value]"
    )
    assert (
        format_diagnostic(second, path=path, color=False)
        == "plugin.yml: warning: Unknown key 'foo' [unknown_key]"
    )


def test_summary() -> None:
    log = DiagnosticLog()
    assert format_summary(log.freeze()) == "ok"
    log.add("a", DiagnosticKind.EXPECTED_SCALAR, plain("1"), "m")
    log.add("b", DiagnosticKind.UNKNOWN_KEY, plain("1"), "m")
    log.add("c", DiagnosticKind.UNKNOWN_KEY, plain("1"), "m")
    assert format_summary(log.freeze()) == "1 error, 2 warnings"
