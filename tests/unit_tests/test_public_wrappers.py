"""Unit tests for the lazy top-level and application wrappers."""

from __future__ import annotations

from pathlib import Path

import pytest

import bin2cpp
from bin2cpp import application
from bin2cpp import api as api_module
from bin2cpp.application.results import BatchResult, ConversionResult


def test_top_level_exports() -> None:
    """The package exposes the public conversion helpers."""
    for name in ("compile_pattern", "convert_file", "convert_pattern", "convert_patterns"):
        assert name in bin2cpp.__all__
        assert callable(getattr(bin2cpp, name))


def test_convert_file_delegates_to_api(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """The top-level wrapper forwards arguments unchanged."""
    seen: dict[str, object] = {}
    expected = ConversionResult(
        input_path=tmp_path / "a.bin",
        source_path=tmp_path / "a.cpp",
        header_path=tmp_path / "a.h",
        size_bytes=0,
    )

    def fake_convert(input_path: object, *, temp_dir: Path | None = None) -> ConversionResult:
        seen["input_path"] = input_path
        seen["temp_dir"] = temp_dir
        return expected

    monkeypatch.setattr(api_module, "convert_file", fake_convert)
    assert bin2cpp.convert_file("a.bin", temp_dir=tmp_path) is expected
    assert seen == {"input_path": "a.bin", "temp_dir": tmp_path}


def test_convert_patterns_delegates_to_api(monkeypatch: pytest.MonkeyPatch) -> None:
    """The multi-argument wrapper forwards the argument list."""
    seen: list[list[str]] = []

    def fake_convert(arguments: list[str], *, temp_dir: Path | None = None) -> list[BatchResult]:
        seen.append(list(arguments))
        return []

    monkeypatch.setattr(api_module, "convert_patterns", fake_convert)
    assert bin2cpp.convert_patterns(["a/*", "b/*"]) == []
    assert seen == [["a/*", "b/*"]]


def test_api_convert_file_accepts_strings(tmp_path: Path, staging_dir: Path) -> None:
    """String paths are accepted and converted."""
    (tmp_path / "data.bin").write_bytes(b"\xaa")
    result = api_module.convert_file(str(tmp_path / "data.bin"), temp_dir=staging_dir)
    assert result.source_path == tmp_path / "data.cpp"
    assert result.size_bytes == 1


def test_application_wrappers_run_use_cases(tmp_path: Path, staging_dir: Path) -> None:
    """The application package wrappers reach the real use-cases."""
    (tmp_path / "x.bin").write_bytes(b"\x01\x02")
    settings = application.build_settings(temp_dir=staging_dir, chunk_size=1)
    result = application.convert_file(tmp_path / "x.bin", settings=settings)
    assert " 0x01,\n 0x02,\n" in result.source_path.read_text(encoding="utf-8")

    batches = application.convert_path_arguments([str(tmp_path / "x.bin")], settings=settings)
    assert [batch.converted for batch in batches] == [1]
