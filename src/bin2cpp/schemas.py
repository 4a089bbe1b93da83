"""Pydantic schemas for runtime validation of converter settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CHUNK_SIZE = 4096
DEFAULT_BYTES_PER_LINE = 32


class ConverterSettings(BaseModel):
    """Validated tunables shared by the encoder and declaration emitter.

    Parameters
    ----------
    chunk_size : int, default=4096
        Number of bytes read from the input per ``read`` call.
    bytes_per_line : int, default=32
        Hex literals emitted per line within a chunk.
    temp_dir : Path | None, default=None
        Staging directory for atomic writes. ``None`` selects the system
        temporary directory.
    encoding : str, default="utf-8"
        Text encoding of the generated artifacts.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, gt=0)
    bytes_per_line: int = Field(default=DEFAULT_BYTES_PER_LINE, gt=0)
    temp_dir: Path | None = None
    encoding: str = "utf-8"

    @field_validator("temp_dir")
    @classmethod
    def _validate_temp_dir(cls, value: Path | None) -> Path | None:
        if value is not None and not value.is_dir():
            raise ValueError(f"temp_dir must be an existing directory: {value}")
        return value

    @field_validator("encoding")
    @classmethod
    def _validate_encoding(cls, value: str) -> str:
        import codecs

        try:
            codecs.lookup(value)
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {value}") from exc
        return value
