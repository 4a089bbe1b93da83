"""Top-level API for embedding binary files as C++ byte arrays."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from bin2cpp.application.results import BatchResult, ConversionResult
from bin2cpp.matching.pattern import MatchRule, compile_pattern
from bin2cpp.types import StrPath

__version__ = "0.1.0"


def convert_file(
    input_path: StrPath,
    *,
    temp_dir: Path | None = None,
) -> ConversionResult:
    """Convert one binary file into a C++ source/header pair.

    Parameters
    ----------
    input_path : str | os.PathLike
        File to embed.
    temp_dir : Path | None, default=None
        Staging directory for atomic writes. Defaults to the system
        temporary directory.

    Returns
    -------
    ConversionResult
        Paths of the written artifacts and the input size.
    """
    from .api import convert_file as _impl

    return _impl(input_path, temp_dir=temp_dir)


def convert_pattern(
    argument: str,
    *,
    temp_dir: Path | None = None,
) -> BatchResult:
    """Convert every file matched by a wildcard path.

    Parameters
    ----------
    argument : str
        Path whose filename part may contain ``?`` and ``*`` wildcards,
        for example ``assets/*.png``.
    temp_dir : Path | None, default=None
        Staging directory for atomic writes.

    Returns
    -------
    BatchResult
        One result per converted file, in enumeration order.
    """
    from .api import convert_pattern as _impl

    return _impl(argument, temp_dir=temp_dir)


def convert_patterns(
    arguments: Iterable[str],
    *,
    temp_dir: Path | None = None,
) -> list[BatchResult]:
    """Convert several wildcard paths in order, stopping at the first failure."""
    from .api import convert_patterns as _impl

    return _impl(arguments, temp_dir=temp_dir)


__all__ = [
    "MatchRule",
    "compile_pattern",
    "convert_file",
    "convert_pattern",
    "convert_patterns",
]
