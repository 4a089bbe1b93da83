"""Non-recursive directory enumeration filtered by a match rule."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from bin2cpp.errors import DirectoryNotFound
from bin2cpp.matching.pattern import MatchRule

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileEntry:
    """One directory entry that matched a rule."""

    path: Path
    name: str


def iter_matches(directory: Path, rule: MatchRule) -> Iterator[FileEntry]:
    """Yield the immediate entries of ``directory`` whose name matches ``rule``.

    Parameters
    ----------
    directory : Path
        Directory to list. Subdirectories are yielded like files when they
        match, never descended into.
    rule : MatchRule
        Compiled filename pattern.

    Returns
    -------
    Iterator[FileEntry]
        Matching entries in the order the filesystem reports them.

    Raises
    ------
    DirectoryNotFound
        If ``directory`` does not exist. Raised on the call itself, before
        iteration starts.
    """
    if not directory.exists():
        raise DirectoryNotFound(f"Directory not found: {directory}")
    # Snapshot the listing so artifacts written mid-iteration are not revisited.
    try:
        with os.scandir(directory) as scanner:
            entries = list(scanner)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise DirectoryNotFound(f"Directory not found: {directory}") from exc
    return _filter_entries(entries, rule)


def _filter_entries(
    entries: list[os.DirEntry[str]], rule: MatchRule
) -> Iterator[FileEntry]:
    for entry in entries:
        logger.info("%s", entry.path)
        if rule.matches(entry.name):
            yield FileEntry(path=Path(entry.path), name=entry.name)
        else:
            logger.debug("skipped %s (no match for '%s')", entry.name, rule.pattern)
