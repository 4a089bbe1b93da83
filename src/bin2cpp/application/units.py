"""Per-file working set for a single conversion."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

SOURCE_SUFFIX = ".cpp"
HEADER_SUFFIX = ".h"


@dataclass(frozen=True)
class ConversionUnit:
    """Input path plus the derived symbol name and artifact destinations.

    ``stem`` is used verbatim as the emitted C++ symbol; characters that are
    not valid in an identifier are not rewritten.
    """

    input_path: Path
    stem: str
    source_path: Path
    header_path: Path

    @classmethod
    def from_input(cls, input_path: Path) -> ConversionUnit:
        """Derive artifact paths beside ``input_path``."""
        stem = input_path.stem
        directory = input_path.parent
        return cls(
            input_path=input_path,
            stem=stem,
            source_path=directory / f"{stem}{SOURCE_SUFFIX}",
            header_path=directory / f"{stem}{HEADER_SUFFIX}",
        )

    @property
    def header_name(self) -> str:
        """File name of the declaration artifact, as included by the source."""
        return self.header_path.name
