# topmark:header:start
#
#   project      : PluginYml
#   file         : model.py
#   file_relpath : src/pluginyml/schema/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declarative decode schemas.

A `Schema` lists the recognized top-level keys of a document format. Each key is
described by a `SchemaRule` naming its decode strategy (`RuleKind`) and the record
field receiving the decoded value.

Schemas are validated **once**, at construction time, against the record type
they populate:

    * the record type must be a mutable dataclass whose fields all have defaults,
    * rule keys must be unique,
    * every decodable rule must target an existing field.

A violation raises `SchemaFieldMismatchError` (or its base `SchemaError`): it is a
programming error, not a user-input problem. Construction also builds the
key -> setter table used by the decoder, so no field lookup by name happens while
decoding.
"""

from __future__ import annotations

import dataclasses
from dataclasses import MISSING, dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from pluginyml.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from pluginyml.config.logging import PluginYmlLogger

logger: PluginYmlLogger = get_logger(__name__)

R = TypeVar("R")


class SchemaError(ValueError):
    """Raised when a schema is inconsistent (construction time only)."""


class SchemaFieldMismatchError(SchemaError):
    """Raised when a rule targets a field that does not exist on the record type.

    Attributes:
        key: The rule key.
        target_field: The missing field name.
        record_type: The record type the schema was built for.
    """

    def __init__(self, key: str, target_field: str, record_type: type[Any]) -> None:
        super().__init__(
            f"Rule for key {key!r} targets unknown field {target_field!r} "
            f"of {record_type.__name__}"
        )
        self.key = key
        self.target_field = target_field
        self.record_type = record_type


class RuleKind(str, Enum):
    """Decode strategy of a schema rule.

    Attributes:
        SCALAR: Text value; block scalars are folded per their style.
        BOOLEAN: YAML 1.1 boolean token; strict rules reject anything else.
        ENUM: Exact (case-sensitive) member name of an enum type.
        STRING_LIST: List of strings from a sequence or mapping.
        RESERVED: Recognized key whose value is not decoded.
    """

    SCALAR = "scalar"
    BOOLEAN = "boolean"
    ENUM = "enum"
    STRING_LIST = "string_list"
    RESERVED = "reserved"


@dataclass(frozen=True)
class SchemaRule:
    """Decode instruction for one recognized key.

    Prefer the factory helpers (`scalar_rule`, `boolean_rule`, ...) over calling
    this constructor directly.

    Attributes:
        key: Document key.
        kind: Decode strategy.
        target_field: Record field receiving the value (``None`` for reserved keys).
        strict: Boolean rules only: reject non-boolean tokens instead of keeping the text.
        enum_type: Enum rules only: the enumeration whose member names are accepted.
    """

    key: str
    kind: RuleKind
    target_field: str | None = None
    strict: bool = False
    enum_type: type[Enum] | None = None

    def __post_init__(self) -> None:
        if not self.key:
            raise SchemaError("Schema rule keys must not be empty")
        if self.kind is RuleKind.RESERVED:
            if self.target_field is not None:
                raise SchemaError(f"Reserved key {self.key!r} cannot target a field")
            return
        if not self.target_field:
            raise SchemaError(f"Rule for key {self.key!r} needs a target field")
        if self.kind is RuleKind.ENUM and self.enum_type is None:
            raise SchemaError(f"Enum rule for key {self.key!r} needs an enum type")
        if self.kind is not RuleKind.ENUM and self.enum_type is not None:
            raise SchemaError(f"Only enum rules take an enum type (key {self.key!r})")
        if self.kind is not RuleKind.BOOLEAN and self.strict:
            raise SchemaError(f"Only boolean rules can be strict (key {self.key!r})")


def scalar_rule(key: str, target_field: str | None = None) -> SchemaRule:
    """Return a text rule; ``target_field`` defaults to ``key``."""
    return SchemaRule(key=key, kind=RuleKind.SCALAR, target_field=target_field or key)


def boolean_rule(key: str, target_field: str | None = None, *, strict: bool) -> SchemaRule:
    """Return a boolean rule; ``target_field`` defaults to ``key``."""
    return SchemaRule(
        key=key,
        kind=RuleKind.BOOLEAN,
        target_field=target_field or key,
        strict=strict,
    )


def enum_rule(key: str, enum_type: type[Enum], target_field: str | None = None) -> SchemaRule:
    """Return an enum rule; ``target_field`` defaults to ``key``."""
    return SchemaRule(
        key=key,
        kind=RuleKind.ENUM,
        target_field=target_field or key,
        enum_type=enum_type,
    )


def string_list_rule(key: str, target_field: str | None = None) -> SchemaRule:
    """Return a string list rule; ``target_field`` defaults to ``key``."""
    return SchemaRule(key=key, kind=RuleKind.STRING_LIST, target_field=target_field or key)


def reserved_rule(key: str) -> SchemaRule:
    """Return a rule for a recognized key that is not decoded."""
    return SchemaRule(key=key, kind=RuleKind.RESERVED)


def _make_setter(field_name: str) -> Callable[[Any, Any], None]:
    def _set(record: Any, value: Any) -> None:
        setattr(record, field_name, value)

    _set.__name__ = f"set_{field_name}"
    return _set


def _record_field_names(record_type: type[Any]) -> frozenset[str]:
    """Validate ``record_type`` and return its field names."""
    if not (isinstance(record_type, type) and dataclasses.is_dataclass(record_type)):
        raise SchemaError(f"Record type must be a dataclass, got {record_type!r}")
    params: Any = getattr(record_type, "__dataclass_params__", None)
    if params is not None and params.frozen:
        raise SchemaError(f"Record type {record_type.__name__} must not be frozen")

    names: set[str] = set()
    for f in dataclasses.fields(record_type):
        if f.init and f.default is MISSING and f.default_factory is MISSING:
            raise SchemaError(
                f"Field {f.name!r} of {record_type.__name__} needs a default value"
            )
        names.add(f.name)
    return frozenset(names)


class Schema(Generic[R]):
    """Validated set of rules bound to a record type.

    Args:
        record_type: Dataclass populated by the decoder.
        rules: Rules, one per recognized key.

    Raises:
        SchemaError: If the record type or the rules are inconsistent.
        SchemaFieldMismatchError: If a rule targets a field missing from ``record_type``.
    """

    def __init__(self, record_type: type[R], rules: Iterable[SchemaRule]) -> None:
        field_names: frozenset[str] = _record_field_names(record_type)

        by_key: dict[str, SchemaRule] = {}
        setters: dict[str, Callable[[R, Any], None]] = {}
        for rule in rules:
            if rule.key in by_key:
                raise SchemaError(f"Duplicate schema rule for key {rule.key!r}")
            by_key[rule.key] = rule
            if rule.target_field is None:
                continue
            if rule.target_field not in field_names:
                raise SchemaFieldMismatchError(rule.key, rule.target_field, record_type)
            setters[rule.key] = _make_setter(rule.target_field)

        self._record_type: type[R] = record_type
        self._rules: dict[str, SchemaRule] = by_key
        self._setters: dict[str, Callable[[R, Any], None]] = setters
        logger.debug(
            "Built schema for %s with %d rules", record_type.__name__, len(self._rules)
        )

    @property
    def record_type(self) -> type[R]:
        """Return the record type populated by this schema."""
        return self._record_type

    @property
    def rules(self) -> tuple[SchemaRule, ...]:
        """Return the rules in declaration order."""
        return tuple(self._rules.values())

    def keys(self) -> tuple[str, ...]:
        """Return the recognized keys in declaration order."""
        return tuple(self._rules)

    def rule_for(self, key: str) -> SchemaRule | None:
        """Return the rule for ``key``, or ``None`` when the key is not recognized."""
        return self._rules.get(key)

    def new_record(self) -> R:
        """Return a fresh record with all fields at their defaults."""
        return self._record_type()

    def assign(self, record: R, key: str, value: Any) -> None:
        """Write ``value`` into the field bound to ``key``.

        Raises:
            KeyError: If ``key`` has no target field (unknown or reserved).
        """
        self._setters[key](record, value)

    def with_reserved_keys(self, keys: Iterable[str]) -> Schema[R]:
        """Return a new schema that also recognizes ``keys`` without decoding them.

        Keys already known to this schema are left unchanged.
        """
        extra: list[SchemaRule] = [
            reserved_rule(key) for key in dict.fromkeys(keys) if key not in self._rules
        ]
        if not extra:
            return self
        return Schema(self._record_type, [*self._rules.values(), *extra])

    def __contains__(self, key: object) -> bool:
        return key in self._rules

    def __iter__(self) -> Iterator[SchemaRule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"Schema({self._record_type.__name__}, keys={list(self._rules)!r})"
