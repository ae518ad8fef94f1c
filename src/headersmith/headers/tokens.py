# headersmith:header:start
#
#   project      : HeaderSmith
#   file         : tokens.py
#   file_relpath : src/headersmith/headers/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# headersmith:header:end

"""Token expansion for header templates.

A `Token` is plain data: the placeholder text, a predicate deciding whether
the token applies to a `DocumentContext`, and a resolver producing the
replacement text. Built-in tokens come first (`BUILTIN_TOKENS`); tokens
supplied by the caller are appended after them and shadow built-ins with the
same placeholder.

Expansion scans each line once, left to right. Replacement values are never
re-scanned, and a token whose predicate is false stays in the output as
literal text. This matters for content-only documents: without file metadata
``%FileName%`` and ``%CreationYear%`` remain visible instead of disappearing.

Built-in tokens:

| Token | Requires | Value |
| --- | --- | --- |
| ``%FullFileName%`` | file metadata | absolute path (on-disk capitalization when available) |
| ``%FileName%`` | file metadata | file name (on-disk capitalization when available) |
| ``%CreationYear%`` / ``Month`` / ``Day`` / ``Time`` | file metadata | creation date parts, ``HH:MM`` |
| ``%CurrentYear%`` / ``Month`` / ``Day`` / ``Time`` | (always) | current date parts, ``HH:MM`` |
| ``%UserName%`` | known user | login name |
| ``%UserDisplayName%`` | known display name | full name |
"""

from __future__ import annotations

import getpass
import os
import re
import sys
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Callable

from headersmith.config.logging import HeaderSmithLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from headersmith.types import AdditionalToken

logger: HeaderSmithLogger = get_logger(__name__)


@dataclass(frozen=True)
class UserInfo:
    """Identity of the operating user.

    Attributes:
        name (str | None): Login name, None if unknown.
        display_name (str | None): Full display name, None if unknown.
    """

    name: str | None = None
    display_name: str | None = None

    @classmethod
    def current(cls) -> UserInfo:
        """Look up the operating user. Unknown parts are left as None."""
        try:
            name: str | None = getpass.getuser()
        except (KeyError, OSError) as e:
            logger.debug("Cannot determine login name: %s", e)
            return cls()

        display_name: str | None = None
        if sys.platform != "win32":
            import pwd

            try:
                gecos: str = pwd.getpwnam(name).pw_gecos
            except KeyError:
                gecos = ""
            display_name = gecos.split(",")[0].strip() or None
        return cls(name=name, display_name=display_name)


@dataclass(frozen=True, kw_only=True)
class DocumentContext:
    """Everything token resolvers may look at for one document.

    Attributes:
        path (Path): Path of the document, as supplied by the caller.
        creation_time (datetime | None): File creation time; None when file
            metadata is unavailable (e.g. in-memory content for a path that
            does not exist).
        now (datetime): The current time, fixed once per document.
        user (UserInfo): Operating user.
        additional_tokens (tuple[AdditionalToken, ...]): Caller-supplied tokens.
    """

    path: Path
    creation_time: datetime | None = None
    now: datetime = field(default_factory=datetime.now)
    user: UserInfo = field(default_factory=UserInfo)
    additional_tokens: tuple[AdditionalToken, ...] = ()

    @property
    def has_file_metadata(self) -> bool:
        """Whether file-system metadata is available for the document."""
        return self.creation_time is not None

    @classmethod
    def for_path(
        cls,
        path: Path,
        *,
        additional_tokens: tuple[AdditionalToken, ...] = (),
        user: UserInfo | None = None,
        now: datetime | None = None,
    ) -> DocumentContext:
        """Build a context for ``path``, reading file metadata when the file exists.

        Args:
            path (Path): Path of the document.
            additional_tokens (tuple[AdditionalToken, ...]): Caller-supplied tokens.
            user (UserInfo | None): User identity; looked up when None.
            now (datetime | None): Current time; `datetime.now()` when None.

        Returns:
            DocumentContext: The context.
        """
        return cls(
            path=path,
            creation_time=file_creation_time(path),
            now=now or datetime.now(),
            user=user if user is not None else UserInfo.current(),
            additional_tokens=additional_tokens,
        )


def file_creation_time(path: Path) -> datetime | None:
    """Return the creation time of ``path`` or None if it cannot be stat'ed.

    Uses ``st_birthtime`` where the platform provides it and falls back to
    ``st_ctime`` otherwise.
    """
    try:
        st: os.stat_result = path.stat()
    except OSError:
        return None
    if not path.is_file():
        return None
    timestamp: float = getattr(st, "st_birthtime", None) or st.st_ctime
    return datetime.fromtimestamp(timestamp)


def proper_path_capitalization(path: Path) -> Path:
    """Return the absolute path of ``path`` spelled as stored on disk.

    On case-insensitive file systems the caller may spell a path differently
    from the directory entries; this walks the path component by component and
    picks the stored spelling.

    Raises:
        OSError: If the path does not exist or a directory cannot be listed.
    """
    resolved: Path = path.resolve(strict=True)
    current = Path(resolved.anchor)
    for part in resolved.parts[1:]:
        entries: list[str] = os.listdir(current)
        if part in entries:
            current = current / part
            continue
        lowered: str = part.lower()
        match: str | None = next((e for e in entries if e.lower() == lowered), None)
        if match is None:
            raise FileNotFoundError(f"No directory entry for '{part}' in {current}")
        current = current / match
    return current


def _full_file_name(ctx: DocumentContext) -> str:
    try:
        return str(proper_path_capitalization(ctx.path))
    except OSError as e:
        logger.debug("Falling back to supplied path for %s: %s", ctx.path, e)
        return str(ctx.path)


def _file_name(ctx: DocumentContext) -> str:
    try:
        return proper_path_capitalization(ctx.path).name
    except OSError as e:
        logger.debug("Falling back to supplied file name for %s: %s", ctx.path, e)
        return ctx.path.name


def _short_time(dt: datetime) -> str:
    return dt.strftime("%H:%M")


def _creation(ctx: DocumentContext) -> datetime:
    # Only called when the predicate guaranteed metadata is present.
    assert ctx.creation_time is not None
    return ctx.creation_time


def _always(ctx: DocumentContext) -> bool:
    return True


def _has_metadata(ctx: DocumentContext) -> bool:
    return ctx.has_file_metadata


@dataclass(frozen=True)
class Token:
    """A placeholder with an applicability predicate and a resolver.

    Attributes:
        token (str): Placeholder text as it appears in templates.
        predicate (Callable[[DocumentContext], bool]): Whether the token applies.
        resolver (Callable[[DocumentContext], str]): Produces the replacement text.
    """

    token: str
    predicate: Callable[[DocumentContext], bool]
    resolver: Callable[[DocumentContext], str]

    @classmethod
    def constant(cls, token: str, value: str) -> Token:
        """Return a token that always applies and always resolves to ``value``."""
        return cls(token=token, predicate=_always, resolver=lambda _ctx: value)


BUILTIN_TOKENS: tuple[Token, ...] = (
    Token("%FullFileName%", _has_metadata, _full_file_name),
    Token("%FileName%", _has_metadata, _file_name),
    Token("%CreationYear%", _has_metadata, lambda ctx: str(_creation(ctx).year)),
    Token("%CreationMonth%", _has_metadata, lambda ctx: str(_creation(ctx).month)),
    Token("%CreationDay%", _has_metadata, lambda ctx: str(_creation(ctx).day)),
    Token("%CreationTime%", _has_metadata, lambda ctx: _short_time(_creation(ctx))),
    Token("%CurrentYear%", _always, lambda ctx: str(ctx.now.year)),
    Token("%CurrentMonth%", _always, lambda ctx: str(ctx.now.month)),
    Token("%CurrentDay%", _always, lambda ctx: str(ctx.now.day)),
    Token("%CurrentTime%", _always, lambda ctx: _short_time(ctx.now)),
    Token("%UserName%", lambda ctx: ctx.user.name is not None, lambda ctx: ctx.user.name or ""),
    Token(
        "%UserDisplayName%",
        lambda ctx: ctx.user.display_name is not None,
        lambda ctx: ctx.user.display_name or "",
    ),
)


def tokens_for(
    context: DocumentContext,
    builtins: Sequence[Token] = BUILTIN_TOKENS,
) -> list[Token]:
    """Return the built-ins followed by the context's additional tokens."""
    tokens: list[Token] = list(builtins)
    tokens.extend(Token.constant(t.token, t.value) for t in context.additional_tokens)
    return tokens


def expand_lines(
    lines: Iterable[str],
    context: DocumentContext,
    tokens: Sequence[Token] | None = None,
) -> list[str]:
    """Expand every applicable token in ``lines``.

    Args:
        lines (Iterable[str]): Template lines (pre-expansion).
        context (DocumentContext): The document the header is rendered for.
        tokens (Sequence[Token] | None): Tokens in evaluation order; defaults to
            the built-ins followed by ``context.additional_tokens``. Later
            tokens shadow earlier ones with the same placeholder.

    Returns:
        list[str]: The expanded lines.
    """
    if tokens is None:
        tokens = tokens_for(context)

    applicable: dict[str, Token] = {}
    for tok in tokens:
        if not tok.token:
            continue
        if tok.predicate(context):
            applicable[tok.token] = tok
        else:
            # A non-applicable shadowing token hides the earlier definition too.
            applicable.pop(tok.token, None)
            logger.trace("Token %s does not apply to %s", tok.token, context.path)

    if not applicable:
        return list(lines)

    # Longest placeholders first so overlapping tokens resolve to the most specific one.
    pattern = re.compile(
        "|".join(re.escape(t) for t in sorted(applicable, key=len, reverse=True))
    )
    resolved: dict[str, str] = {}

    def _substitute(match: re.Match[str]) -> str:
        key: str = match.group(0)
        if key not in resolved:
            resolved[key] = applicable[key].resolver(context)
        return resolved[key]

    return [pattern.sub(_substitute, line) for line in lines]
