"""Application ports for the artifact writers."""

from __future__ import annotations

from typing import Protocol

from bin2cpp.application.results import Artifact
from bin2cpp.application.units import ConversionUnit
from bin2cpp.schemas import ConverterSettings


class SourceEncoder(Protocol):
    """Write the byte-array definition artifact for a unit."""

    def encode(self, unit: ConversionUnit, settings: ConverterSettings) -> Artifact:
        """Encode the input file and publish the source artifact."""


class DeclarationEmitter(Protocol):
    """Write the declaration artifact for a unit."""

    def emit(self, unit: ConversionUnit, settings: ConverterSettings) -> Artifact:
        """Publish the declaration artifact."""
