# topmark:header:start
#
#   project      : PluginYml
#   file         : cli_types.py
#   file_relpath : src/pluginyml/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI parameter types for PluginYml.

Defines the `OutputFormat` choices and `EnumChoiceParam`, a Click parameter
type mapping a case-insensitive string onto a member of a string-valued Enum.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Generic, NoReturn, Protocol, TypeVar, cast

import click
from click.shell_completion import CompletionItem

if TYPE_CHECKING:

    class ParamTypeBase(Protocol):
        """Typed base to avoid subclassing Any when Click lacks stubs."""

        name: str

else:
    ParamTypeBase = click.ParamType

E = TypeVar("E", bound=Enum)


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      TEXT: Human-friendly text output; may include ANSI color if enabled.
      JSON: One JSON document per input file.
      NDJSON: One JSON object per line (record, diagnostics, summary).

    Notes:
      - Machine formats (``JSON`` and ``NDJSON``) never include ANSI color.
    """

    TEXT = "text"
    JSON = "json"
    NDJSON = "ndjson"

    @property
    def is_machine(self) -> bool:
        """Return True for machine-readable formats."""
        return self in (OutputFormat.JSON, OutputFormat.NDJSON)


class EnumChoiceParam(ParamTypeBase, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", e.value) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: str | E | None,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string to a member of the Enum (case-insensitive, by value)."""
        if value is None or isinstance(value, self.enum_cls):
            return value

        lookup: dict[str, E] = {cast("str", e.value).lower(): e for e in self.enum_cls}
        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Tab completion for Click.

        Bash: `eval "$(_PLUGINYML_COMPLETE=bash_source pluginyml)"`
        """
        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]
