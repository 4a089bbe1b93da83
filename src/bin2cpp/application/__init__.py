"""Application-layer use-cases and result objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from bin2cpp.application.ports import DeclarationEmitter, SourceEncoder
from bin2cpp.application.results import Artifact, BatchResult, ConversionResult
from bin2cpp.application.units import ConversionUnit
from bin2cpp.schemas import ConverterSettings


def build_settings(
    *,
    temp_dir: Path | None = None,
    chunk_size: int | None = None,
    bytes_per_line: int | None = None,
    encoding: str | None = None,
) -> ConverterSettings:
    """Build validated settings via lazy use-case import."""
    from bin2cpp.application.use_cases import build_settings as _impl

    return _impl(
        temp_dir=temp_dir,
        chunk_size=chunk_size,
        bytes_per_line=bytes_per_line,
        encoding=encoding,
    )


def convert_file(
    input_path: Path,
    *,
    settings: ConverterSettings | None = None,
    encoder: SourceEncoder | None = None,
    emitter: DeclarationEmitter | None = None,
) -> ConversionResult:
    """Convert one file via lazy use-case import."""
    from bin2cpp.application.use_cases import convert_file as _impl

    return _impl(input_path, settings=settings, encoder=encoder, emitter=emitter)


def convert_path_arguments(
    arguments: Iterable[str],
    *,
    settings: ConverterSettings | None = None,
    encoder: SourceEncoder | None = None,
    emitter: DeclarationEmitter | None = None,
) -> list[BatchResult]:
    """Convert several path arguments via lazy use-case import."""
    from bin2cpp.application.use_cases import convert_path_arguments as _impl

    return _impl(arguments, settings=settings, encoder=encoder, emitter=emitter)


__all__ = [
    "Artifact",
    "BatchResult",
    "ConversionResult",
    "ConversionUnit",
    "ConverterSettings",
    "DeclarationEmitter",
    "SourceEncoder",
    "build_settings",
    "convert_file",
    "convert_path_arguments",
]
