# topmark:header:start
#
#   project      : PluginYml
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the PluginYml test suite.

This file sets up global fixtures and customizes the logging configuration for test
runs. It also provides small builders for document trees, so tests can spell out
the exact node shapes they feed to the decoder:

```python
root = mapping(("name", plain("Demo")), ("depend", seq(plain("A"), plain("B"))))
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar, cast

import pytest

from pluginyml.config import logging
from pluginyml.tree.model import (
    BlockScalar,
    BlockStyle,
    MappingNode,
    PlainScalar,
    SequenceNode,
)

if TYPE_CHECKING:
    from pathlib import Path

    from pluginyml.tree.model import TreeNode

F = TypeVar("F", bound=Callable[..., object])


def as_typed_mark(mark: Any) -> Callable[[F], F]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: Callable[[F], F] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    return as_typed_mark(pytest.mark.parametrize(*args, **kwargs))


def plain(text: str) -> PlainScalar:
    """Return a plain scalar node."""
    return PlainScalar(text)


def literal(text: str) -> BlockScalar:
    """Return a literal (``|``) block scalar node; ``text`` includes the indicator line."""
    return BlockScalar(text, BlockStyle.LITERAL)


def folded(text: str) -> BlockScalar:
    """Return a folded (``>``) block scalar node; ``text`` includes the indicator line."""
    return BlockScalar(text, BlockStyle.FOLDED)


def seq(*items: TreeNode) -> SequenceNode:
    """Return a sequence node holding ``items``."""
    return SequenceNode(tuple(items))


def mapping(*entries: tuple[str, TreeNode]) -> MappingNode:
    """Return a mapping node holding ``entries`` (duplicates allowed)."""
    return MappingNode(tuple(entries))


@pytest.fixture(autouse=True)
def silence_pluginyml_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure log level and color are not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Fixture used to manipulate environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty temporary working directory.

    Settings discovery looks at the current directory, so CLI and settings tests
    must not see the repository's own ``pyproject.toml``.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
