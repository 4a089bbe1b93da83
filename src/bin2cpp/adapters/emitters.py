"""C++ artifact writers implementing application ports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from bin2cpp.application.results import Artifact
from bin2cpp.application.units import ConversionUnit
from bin2cpp.errors import InputVanished, ReadError
from bin2cpp.infrastructure.atomic import atomic_text_output
from bin2cpp.schemas import ConverterSettings

logger = logging.getLogger(__name__)


def render_source_prologue(stem: str, header_name: str) -> str:
    """Return the includes and the opening of the array definition."""
    return (
        "#include <cstdint>\n"
        f'#include "{header_name}"\n'
        f"const uint8_t {stem}[] {{\n"
    )


def render_chunk(chunk: bytes, bytes_per_line: int) -> str:
    """Render one chunk as hex literals.

    Each byte becomes `` 0xHH,``. A newline follows every
    ``bytes_per_line``-th byte of the chunk, and the chunk always ends with
    its own newline.
    """
    parts: list[str] = []
    for index, value in enumerate(chunk):
        parts.append(f" 0x{value:02x},")
        if index % bytes_per_line == bytes_per_line - 1:
            parts.append("\n")
    parts.append("\n")
    return "".join(parts)


SOURCE_EPILOGUE = "};\n"


def render_declaration(stem: str, size: int) -> str:
    """Return the full declaration artifact text."""
    return (
        "#pragma once\n"
        f"constexpr size_t {stem}_size{{ {size} }};\n"
        f"extern const uint8_t {stem}[];\n"
    )


def _open_input(path: Path) -> BinaryIO:
    try:
        return path.open("rb")
    except FileNotFoundError as exc:
        raise InputVanished(f"Input no longer exists: {path}") from exc
    except OSError as exc:
        raise ReadError(f"Cannot open {path} for binary read: {exc}") from exc


class CppArrayEncoder:
    """Stream an input file into a ``const uint8_t`` array definition."""

    def encode(self, unit: ConversionUnit, settings: ConverterSettings) -> Artifact:
        """Encode ``unit.input_path`` and publish ``unit.source_path``.

        Parameters
        ----------
        unit : ConversionUnit
            Input and destination paths.
        settings : ConverterSettings
            Chunk size, line width and staging options.

        Returns
        -------
        Artifact
            Published source artifact; ``size_bytes`` counts encoded input
            bytes.

        Raises
        ------
        InputVanished
            If the input disappeared before it could be opened.
        ReadError
            If the input cannot be opened or read in binary mode.
        WriteError
            If the artifact cannot be staged or moved into place.
        """
        encoded = 0
        with _open_input(unit.input_path) as source:
            with atomic_text_output(
                unit.source_path,
                temp_dir=settings.temp_dir,
                encoding=settings.encoding,
            ) as out:
                out.write(render_source_prologue(unit.stem, unit.header_name))
                while True:
                    try:
                        chunk = source.read(settings.chunk_size)
                    except OSError as exc:
                        raise ReadError(f"Cannot read {unit.input_path}: {exc}") from exc
                    if not chunk:
                        break
                    out.write(render_chunk(chunk, settings.bytes_per_line))
                    encoded += len(chunk)
                out.write(SOURCE_EPILOGUE)
        logger.debug("encoded %d bytes into %s", encoded, unit.source_path)
        return Artifact(path=unit.source_path, kind="source", size_bytes=encoded)


class CppDeclarationEmitter:
    """Publish the header exposing the array symbol and its size."""

    def emit(self, unit: ConversionUnit, settings: ConverterSettings) -> Artifact:
        """Stat ``unit.input_path`` and publish ``unit.header_path``."""
        try:
            size = unit.input_path.stat().st_size
        except FileNotFoundError as exc:
            raise InputVanished(f"Input no longer exists: {unit.input_path}") from exc
        except OSError as exc:
            raise ReadError(f"Cannot stat {unit.input_path}: {exc}") from exc
        with atomic_text_output(
            unit.header_path,
            temp_dir=settings.temp_dir,
            encoding=settings.encoding,
        ) as out:
            out.write(render_declaration(unit.stem, size))
        return Artifact(path=unit.header_path, kind="header", size_bytes=size)
