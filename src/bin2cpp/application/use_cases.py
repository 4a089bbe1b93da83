"""Application use-cases orchestrating binary-to-C++ conversion."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from pydantic import ValidationError

from bin2cpp.adapters.emitters import CppArrayEncoder, CppDeclarationEmitter
from bin2cpp.application.ports import DeclarationEmitter, SourceEncoder
from bin2cpp.application.results import BatchResult, ConversionResult
from bin2cpp.application.units import ConversionUnit
from bin2cpp.errors import ArgumentError, InputVanished
from bin2cpp.matching.listing import iter_matches
from bin2cpp.matching.pattern import compile_pattern, split_path_argument
from bin2cpp.schemas import ConverterSettings

logger = logging.getLogger(__name__)


def build_settings(
    *,
    temp_dir: Path | None = None,
    chunk_size: int | None = None,
    bytes_per_line: int | None = None,
    encoding: str | None = None,
) -> ConverterSettings:
    """Use-case: validate converter tunables, omitting unset values."""
    raw: dict[str, object] = {
        "temp_dir": temp_dir,
        "chunk_size": chunk_size,
        "bytes_per_line": bytes_per_line,
        "encoding": encoding,
    }
    try:
        return ConverterSettings(**{k: v for k, v in raw.items() if v is not None})
    except ValidationError as exc:
        raise ArgumentError(f"Invalid converter settings: {exc}") from exc


def convert_file(
    input_path: Path,
    *,
    settings: ConverterSettings | None = None,
    encoder: SourceEncoder | None = None,
    emitter: DeclarationEmitter | None = None,
) -> ConversionResult:
    """Use-case: write the source and declaration artifacts for one file.

    Steps run strictly in order (existence check, encode, declare); the
    first failure propagates and the remaining steps are skipped.
    """
    settings = settings or ConverterSettings()
    encoder = encoder or CppArrayEncoder()
    emitter = emitter or CppDeclarationEmitter()

    if not input_path.exists():
        raise InputVanished(f"Input no longer exists: {input_path}")
    unit = ConversionUnit.from_input(input_path)

    source = encoder.encode(unit, settings)
    header = emitter.emit(unit, settings)
    logger.debug("converted %s (%d bytes)", input_path, header.size_bytes)
    return ConversionResult(
        input_path=input_path,
        source_path=source.path,
        header_path=header.path,
        size_bytes=header.size_bytes,
    )


def convert_path_argument(
    argument: str,
    *,
    settings: ConverterSettings | None = None,
    encoder: SourceEncoder | None = None,
    emitter: DeclarationEmitter | None = None,
) -> BatchResult:
    """Use-case: convert every entry matched by one wildcard path argument."""
    directory, pattern = split_path_argument(argument)
    rule = compile_pattern(pattern)
    results: list[ConversionResult] = []
    for entry in iter_matches(directory, rule):
        results.append(
            convert_file(
                entry.path,
                settings=settings,
                encoder=encoder,
                emitter=emitter,
            )
        )
    return BatchResult(
        argument=argument,
        directory=directory,
        pattern=rule.pattern,
        results=tuple(results),
    )


def convert_path_arguments(
    arguments: Iterable[str],
    *,
    settings: ConverterSettings | None = None,
    encoder: SourceEncoder | None = None,
    emitter: DeclarationEmitter | None = None,
) -> list[BatchResult]:
    """Use-case: process path arguments in order, stopping at the first error."""
    pending = list(arguments)
    if not pending:
        raise ArgumentError("No input paths given.")
    return [
        convert_path_argument(
            argument,
            settings=settings,
            encoder=encoder,
            emitter=emitter,
        )
        for argument in pending
    ]
