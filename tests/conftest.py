# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Pytest configuration for the HeaderSmith test suite.

Sets up logging at TRACE level for test runs and provides typed wrappers for
pytest marks plus small builders shared by the engine tests.

Notes:
    Tests respect the immutable/mutable configuration split: build with
    `headersmith.config.MutableConfig`, then `freeze()` into a `Config` before
    handing it to `HeaderReplacer`.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from headersmith.config import MutableConfig, logging
from headersmith.headers.tokens import UserInfo
from headersmith.languages.base import Language
from headersmith.languages.registry import LanguageRegistry
from headersmith.replacer import HeaderReplacer

if TYPE_CHECKING:
    from headersmith.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]

# Fixed clock so %CurrentYear% and friends are predictable.
FIXED_NOW = datetime(2024, 3, 7, 9, 5)

TEST_USER = UserInfo(name="jdoe", display_name="Jane Doe")

# Plain-text language used by the removal tests.
TXT_LANGUAGE = Language(name="text", extensions=(".txt",), line_comment="//")


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_headersmith_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's ``HEADERSMITH_LOG_LEVEL`` from leaking into tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to drop the environment variable.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during the test session.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and ``overrides``.

    Args:
        **overrides (Any): Attribute values set on the builder before freezing.

    Returns:
        Config: The frozen configuration.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def make_replacer(*, dry_run: bool = False, **overrides: Any) -> HeaderReplacer:
    """Return a `HeaderReplacer` with a fixed clock, a fixed user and the test languages.

    Args:
        dry_run (bool): Forwarded to `HeaderReplacer`.
        **overrides (Any): Configuration overrides (see `make_config`).

    Returns:
        HeaderReplacer: The replacer.
    """
    config: Config = make_config(**overrides)
    registry = LanguageRegistry.with_builtins([TXT_LANGUAGE, *config.languages])
    return HeaderReplacer(
        config,
        registry,
        user=TEST_USER,
        clock=lambda: FIXED_NOW,
        dry_run=dry_run,
    )
