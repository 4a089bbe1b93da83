"""Wildcard pattern compilation and directory matching."""

from __future__ import annotations

from bin2cpp.matching.listing import FileEntry, iter_matches
from bin2cpp.matching.pattern import MatchRule, compile_pattern, split_path_argument

__all__ = [
    "FileEntry",
    "MatchRule",
    "compile_pattern",
    "iter_matches",
    "split_path_argument",
]
