# topmark:header:start
#
#   project      : PluginYml
#   file         : test_payloads.py
#   file_relpath : tests/machine/test_payloads.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for JSON/NDJSON payload builders and serializers."""

from __future__ import annotations

import json
from pathlib import Path

from pluginyml import PLUGIN_SCHEMA, build_tree, decode
from pluginyml.constants import PLUGINYML, PLUGINYML_VERSION
from pluginyml.machine import (
    build_meta_payload,
    build_result_payload,
    iter_result_records,
    normalize_payload,
    serialize_json_object,
    serialize_ndjson,
)
from pluginyml.plugin import PluginLoadOrder

TEXT: str = "name: Demo\nload: POSTWORLD\ndepend: [A, {x: y}]\nfoo: bar\n"


def test_meta_payload() -> None:
    meta = build_meta_payload()
    assert meta["tool"] == PLUGINYML
    assert meta["version"] == PLUGINYML_VERSION
    assert isinstance(meta["platform"], str)


def test_normalize_payload() -> None:
    assert normalize_payload(Path("a") / "b") == str(Path("a") / "b")
    assert normalize_payload(PluginLoadOrder.STARTUP) == "STARTUP"
    assert normalize_payload({1: (2, {3})}) == {"1": [2, [3]]}
    assert normalize_payload("x") == "x"


def test_result_payload() -> None:
    result = decode(build_tree(TEXT), PLUGIN_SCHEMA)
    payload = build_result_payload(result, path=Path("plugin.yml"))

    assert payload["path"] == "plugin.yml"
    record = payload["record"]
    assert isinstance(record, dict)
    assert record["name"] == "Demo"
    assert record["load"] == "POSTWORLD"
    assert record["depend"] == ["A"]
    assert record["database"] is False
    assert record["website"] is None

    diagnostics = payload["diagnostics"]
    assert diagnostics == [
        {
            "key": "depend",
            "kind": "invalid_list_element",
            "level": "warning",
            "message": diagnostics[0]["message"],  # type: ignore[index]
            "node": "mapping",
            "line": 3,
            "column": 13,
        },
        {
            "key": "foo",
            "kind": "unknown_key",
            "level": "warning",
            "message": "Unknown key 'foo'",
            "node": "scalar",
            "line": 4,
            "column": 6,
        },
    ]
    assert payload["summary"] == {"info": 0, "warning": 2, "error": 0}


def test_result_payload_without_path() -> None:
    result = decode(build_tree("name: x\n"), PLUGIN_SCHEMA)
    payload = build_result_payload(result)
    assert payload["path"] is None
    assert payload["diagnostics"] == []


def test_serialize_json_object_round_trips() -> None:
    result = decode(build_tree(TEXT), PLUGIN_SCHEMA)
    text = serialize_json_object(build_result_payload(result))
    assert not text.endswith("\n")
    assert json.loads(text)["record"]["name"] == "Demo"


def test_ndjson_records() -> None:
    result = decode(build_tree(TEXT), PLUGIN_SCHEMA)
    records = list(iter_result_records(result, path=Path("plugin.yml")))
    assert [r["kind"] for r in records] == ["record", "diagnostic", "diagnostic", "summary"]
    assert all(r["path"] == "plugin.yml" for r in records)

    text = serialize_ndjson(records)
    assert text.endswith("\n")
    lines = text.splitlines()
    assert len(lines) == 4
    parsed = [json.loads(line) for line in lines]
    assert parsed[0]["record"]["load"] == "POSTWORLD"
    assert parsed[-1]["summary"]["warning"] == 2


def test_serialize_ndjson_empty() -> None:
    assert serialize_ndjson([]) == ""
