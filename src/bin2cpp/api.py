"""Public conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional

from bin2cpp.application.results import BatchResult, ConversionResult
from bin2cpp.application.use_cases import build_settings
from bin2cpp.application.use_cases import convert_file as _convert_file
from bin2cpp.application.use_cases import convert_path_argument
from bin2cpp.application.use_cases import convert_path_arguments
from bin2cpp.types import StrPath


def convert_file(
    input_path: StrPath,
    *,
    temp_dir: Optional[Path] = None,
) -> ConversionResult:
    """Write ``<stem>.cpp`` and ``<stem>.h`` beside a single input file."""
    settings = build_settings(temp_dir=temp_dir)
    return _convert_file(Path(input_path), settings=settings)


def convert_pattern(
    argument: str,
    *,
    temp_dir: Optional[Path] = None,
) -> BatchResult:
    """Convert every file matched by a wildcard path such as ``assets/*.png``."""
    settings = build_settings(temp_dir=temp_dir)
    return convert_path_argument(argument, settings=settings)


def convert_patterns(
    arguments: Iterable[str],
    *,
    temp_dir: Optional[Path] = None,
) -> list[BatchResult]:
    """Convert several wildcard paths in order, stopping at the first failure."""
    settings = build_settings(temp_dir=temp_dir)
    return convert_path_arguments(arguments, settings=settings)
