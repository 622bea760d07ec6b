"""Placeholder tokens and the substitution pass applied to Template Set files.

Templates mark values with bracketed placeholders such as ``[Module Name]``.
A ``TokenSet`` says which placeholders get replaced and which are left for
the human editing the generated module. Anything placeholder-shaped that the
token set does not know about is an authoring mistake and is reported.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from clap_orchestrator.core.errors import TemplateReadError, UnknownPlaceholderError

# Substituted at scaffold time
MODULE_NAME_TOKEN = "[Module Name]"
TIMESTAMP_TOKEN = "[ISO 8601 Timestamp]"
SLUG_TOKEN = "[module-name]"

# Filled in by hand after scaffolding
ENTITY_TOKEN = "[Entity]"
ENTITY_NAME_TOKEN = "[Entity Name]"
AUTHOR_TOKENS = frozenset({ENTITY_TOKEN, ENTITY_NAME_TOKEN})

# "[Title Case Words]" or "[hyphenated-slug]", never a markdown link "[text](url)"
PLACEHOLDER_PATTERN = re.compile(
    r"\[(?:[A-Z][A-Za-z0-9]*(?: [A-Za-z0-9]+)*|[a-z][a-z0-9]*(?:-[a-z0-9]+)+)\](?!\()"
)
_MIN_TITLE_TOKEN_LENGTH = 4  # "[X]" is a checkbox, not a placeholder


@dataclass(frozen=True)
class TokenSet:
    """Placeholders to replace, plus known placeholders to leave untouched."""

    substitutions: dict[str, str]
    preserved: frozenset[str] = field(default_factory=frozenset)

    def known(self) -> frozenset[str]:
        return frozenset(self.substitutions) | self.preserved


def creation_timestamp(now: datetime | None = None) -> str:
    """Return a UTC ISO-8601 timestamp with millisecond precision.

    Example: ``2026-10-19T08:15:30.123Z``
    """
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def scaffold_tokens(name: str, created_at: str) -> TokenSet:
    """Token set used by ``create-module``: name, timestamp and slug."""
    return TokenSet(
        substitutions={
            MODULE_NAME_TOKEN: name,
            TIMESTAMP_TOKEN: created_at,
            SLUG_TOKEN: name,
        },
        preserved=AUTHOR_TOKENS,
    )


def generator_tokens(name: str, created_at: str) -> TokenSet:
    """Token set used by ``generate``: name and timestamp, slug left as-is."""
    return TokenSet(
        substitutions={
            MODULE_NAME_TOKEN: name,
            TIMESTAMP_TOKEN: created_at,
        },
        preserved=AUTHOR_TOKENS | {SLUG_TOKEN},
    )


def _is_placeholder(token: str) -> bool:
    return token[1].islower() or len(token) >= _MIN_TITLE_TOKEN_LENGTH


def find_placeholders(text: str) -> list[str]:
    """Return placeholder-shaped markers in ``text``, in order of appearance."""
    return [
        match.group(0)
        for match in PLACEHOLDER_PATTERN.finditer(text)
        if _is_placeholder(match.group(0))
    ]


def substitute(text: str, tokens: TokenSet, source: Path | None = None) -> str:
    """Replace every substitution token in ``text`` in a single pass.

    Args:
        text: File content
        tokens: Token set for this run
        source: File the text came from (for error messages)

    Raises:
        UnknownPlaceholderError: If ``text`` contains a placeholder that is
            neither substituted nor preserved by ``tokens``.
    """
    unknown: list[str] = []

    def _replace(match: re.Match[str]) -> str:
        token = match.group(0)
        if token in tokens.substitutions:
            return tokens.substitutions[token]
        if token not in tokens.preserved and _is_placeholder(token) and token not in unknown:
            unknown.append(token)
        return token

    result = PLACEHOLDER_PATTERN.sub(_replace, text)
    if unknown:
        raise UnknownPlaceholderError(unknown, source)
    return result


def render_template(path: Path, tokens: TokenSet) -> str:
    """Return the content of ``path`` with ``tokens`` applied.

    The file itself is not modified.

    Raises:
        TemplateReadError: If the file cannot be read or is not UTF-8
        UnknownPlaceholderError: If the file contains an unknown placeholder
    """
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateReadError(path, str(exc)) from exc
    return substitute(content, tokens, source=path)
