"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from bin2cpp.types import ArtifactKind


@dataclass(frozen=True)
class Artifact:
    """One published output file."""

    path: Path
    kind: ArtifactKind
    size_bytes: int


@dataclass(frozen=True)
class ConversionResult:
    """Structured outcome of converting one input file."""

    input_path: Path
    source_path: Path
    header_path: Path
    size_bytes: int


@dataclass(frozen=True)
class BatchResult:
    """Outcome of one path argument."""

    argument: str
    directory: Path
    pattern: str
    results: tuple[ConversionResult, ...] = ()

    @property
    def converted(self) -> int:
        """Number of converted input files."""
        return len(self.results)
