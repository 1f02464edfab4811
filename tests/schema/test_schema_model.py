# topmark:header:start
#
#   project      : PluginYml
#   file         : test_schema_model.py
#   file_relpath : tests/schema/test_schema_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for schema construction and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import pytest

from pluginyml.schema import (
    RuleKind,
    Schema,
    SchemaError,
    SchemaFieldMismatchError,
    SchemaRule,
    boolean_rule,
    enum_rule,
    reserved_rule,
    scalar_rule,
    string_list_rule,
)


class Color(Enum):
    RED = 1
    GREEN = 2


@dataclass
class Record:
    title: str | None = None
    enabled: bool | str = False
    color: Color | None = None
    tags: list[str] = field(default_factory=lambda: [])


def test_valid_schema_exposes_rules_in_order() -> None:
    schema = Schema(
        Record,
        [
            scalar_rule("title"),
            boolean_rule("enabled", strict=False),
            enum_rule("colour", Color, "color"),
            string_list_rule("tags"),
            reserved_rule("extra"),
        ],
    )
    assert schema.keys() == ("title", "enabled", "colour", "tags", "extra")
    assert len(schema) == 5
    assert "colour" in schema
    assert "color" not in schema
    assert [r.kind for r in schema] == [
        RuleKind.SCALAR,
        RuleKind.BOOLEAN,
        RuleKind.ENUM,
        RuleKind.STRING_LIST,
        RuleKind.RESERVED,
    ]
    assert schema.record_type is Record
    rule = schema.rule_for("colour")
    assert rule is not None and rule.target_field == "color" and rule.enum_type is Color
    assert schema.rule_for("missing") is None
    assert "Record" in repr(schema)


def test_rule_targeting_missing_field_is_rejected() -> None:
    with pytest.raises(SchemaFieldMismatchError) as info:
        Schema(Record, [scalar_rule("nmae")])
    err = info.value
    assert err.key == "nmae"
    assert err.target_field == "nmae"
    assert err.record_type is Record
    assert isinstance(err, SchemaError)
    assert isinstance(err, ValueError)


def test_duplicate_rule_keys_are_rejected() -> None:
    with pytest.raises(SchemaError, match="Duplicate"):
        Schema(Record, [scalar_rule("title"), scalar_rule("title")])


def test_record_type_must_be_a_dataclass() -> None:
    class NotADataclass:
        title: str | None = None

    with pytest.raises(SchemaError, match="dataclass"):
        Schema(NotADataclass, [scalar_rule("title")])


def test_record_type_must_not_be_frozen() -> None:
    @dataclass(frozen=True)
    class Frozen:
        title: str | None = None

    with pytest.raises(SchemaError, match="frozen"):
        Schema(Frozen, [scalar_rule("title")])


def test_record_fields_need_defaults() -> None:
    @dataclass
    class NoDefault:
        title: str

    with pytest.raises(SchemaError, match="default"):
        Schema(NoDefault, [scalar_rule("title")])


@pytest.mark.parametrize(
    "kwargs",
    [
        {"key": "", "kind": RuleKind.SCALAR, "target_field": "title"},
        {"key": "title", "kind": RuleKind.SCALAR},
        {"key": "color", "kind": RuleKind.ENUM, "target_field": "color"},
        {"key": "title", "kind": RuleKind.SCALAR, "target_field": "title", "enum_type": Color},
        {"key": "title", "kind": RuleKind.SCALAR, "target_field": "title", "strict": True},
        {"key": "extra", "kind": RuleKind.RESERVED, "target_field": "title"},
    ],
)
def test_inconsistent_rules_are_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(SchemaError):
        SchemaRule(**kwargs)  # type: ignore[arg-type]


def test_new_record_is_fresh_each_time() -> None:
    schema = Schema(Record, [string_list_rule("tags")])
    a = schema.new_record()
    b = schema.new_record()
    assert a == Record()
    assert a is not b
    a.tags.append("x")
    assert b.tags == []


def test_assign_uses_target_field() -> None:
    schema = Schema(Record, [enum_rule("colour", Color, "color")])
    record = schema.new_record()
    schema.assign(record, "colour", Color.GREEN)
    assert record.color is Color.GREEN


def test_assign_to_reserved_key_raises() -> None:
    schema = Schema(Record, [reserved_rule("extra")])
    with pytest.raises(KeyError):
        schema.assign(schema.new_record(), "extra", "value")


def test_with_reserved_keys_adds_new_keys_only() -> None:
    schema = Schema(Record, [scalar_rule("title")])
    extended = schema.with_reserved_keys(["title", "api-version", "api-version"])
    assert extended.keys() == ("title", "api-version")
    title_rule = extended.rule_for("title")
    assert title_rule is not None and title_rule.kind is RuleKind.SCALAR
    api_rule = extended.rule_for("api-version")
    assert api_rule is not None and api_rule.kind is RuleKind.RESERVED
    # The source schema is untouched.
    assert schema.keys() == ("title",)


def test_with_reserved_keys_without_new_keys_returns_same_schema() -> None:
    schema = Schema(Record, [scalar_rule("title")])
    assert schema.with_reserved_keys([]) is schema
    assert schema.with_reserved_keys(["title"]) is schema
