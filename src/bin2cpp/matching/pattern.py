"""Wildcard filename patterns compiled into full-string match rules.

A pattern is tokenized into a tiny AST of :class:`Literal`, :class:`AnyOne`
(``?``) and :class:`AnyOneOrMore` (``*``) nodes, then lowered to a Python
regular expression. Only ``.`` is escaped on lowering; other regex
metacharacters in a pattern keep their regex meaning.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path

from bin2cpp.errors import PatternError

MATCH_ALL = "*"


@dataclass(frozen=True)
class Literal:
    """A single character copied into the rule."""

    char: str


@dataclass(frozen=True)
class AnyOne:
    """Exactly one arbitrary character."""


@dataclass(frozen=True)
class AnyOneOrMore:
    """One or more arbitrary characters (greedy)."""


type PatternToken = Literal | AnyOne | AnyOneOrMore


@dataclass(frozen=True)
class MatchRule:
    """Compiled matcher for directory entry names."""

    pattern: str
    tokens: tuple[PatternToken, ...]
    regex: re.Pattern[str]

    def matches(self, name: str) -> bool:
        """Return ``True`` when the whole ``name`` matches the rule."""
        return self.regex.fullmatch(name) is not None


def tokenize(pattern: str) -> tuple[PatternToken, ...]:
    """Split a wildcard pattern into AST tokens."""
    tokens: list[PatternToken] = []
    for char in pattern:
        if char == "?":
            tokens.append(AnyOne())
        elif char == "*":
            tokens.append(AnyOneOrMore())
        else:
            tokens.append(Literal(char))
    return tuple(tokens)


def _lower(token: PatternToken) -> str:
    if isinstance(token, AnyOne):
        return "."
    if isinstance(token, AnyOneOrMore):
        return ".+"
    if token.char == ".":
        return r"\."
    return token.char


def to_regex(tokens: tuple[PatternToken, ...]) -> str:
    """Lower AST tokens to regular expression source."""
    return "".join(_lower(token) for token in tokens)


def compile_pattern(pattern: str | None) -> MatchRule:
    """Compile a wildcard filename pattern.

    Parameters
    ----------
    pattern : str | None
        Filename pattern using ``?`` and ``*`` wildcards. ``None`` or an
        empty string matches every entry.

    Returns
    -------
    MatchRule
        Immutable rule performing full-string matches.

    Raises
    ------
    PatternError
        If the lowered pattern is not a valid regular expression.
    """
    source_pattern = pattern or MATCH_ALL
    tokens = tokenize(source_pattern)
    expression = to_regex(tokens)
    try:
        regex = re.compile(expression)
    except re.error as exc:
        raise PatternError(f"Invalid filename pattern '{source_pattern}': {exc}") from exc
    return MatchRule(pattern=source_pattern, tokens=tokens, regex=regex)


def split_path_argument(argument: str) -> tuple[Path, str]:
    """Split a path argument into its directory and filename pattern.

    The raw string is split on its last separator, so a trailing ``.``
    stays the filename pattern. The directory defaults to ``.`` when the
    argument has no parent part; the pattern defaults to ``*`` only when the
    filename part is empty (for example ``assets/``).
    """
    head, tail = os.path.split(argument)
    directory = Path(head) if head else Path(".")
    return directory, tail or MATCH_ALL
