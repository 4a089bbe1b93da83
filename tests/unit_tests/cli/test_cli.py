"""Unit tests for CLI command behavior."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from bin2cpp.application.results import BatchResult, ConversionResult
from bin2cpp.cli import cli as cli_module
from bin2cpp.errors import DirectoryNotFound, ReadError, WriteError

runner = CliRunner()


def _batch(argument: str, tmp_path: Path) -> BatchResult:
    return BatchResult(
        argument=argument,
        directory=tmp_path,
        pattern="*.bin",
        results=(
            ConversionResult(
                input_path=tmp_path / "a.bin",
                source_path=tmp_path / "a.cpp",
                header_path=tmp_path / "a.h",
                size_bytes=1,
            ),
        ),
    )


def test_help_lists_options() -> None:
    """Help output lists the supported options."""
    result = runner.invoke(cli_module.app, ["--help"])
    assert result.exit_code == 0
    assert "--temp-dir" in result.output
    assert "--quiet" in result.output


def test_no_paths_prints_usage_and_fails() -> None:
    """Invoking without arguments prints usage with exit status 1."""
    result = runner.invoke(cli_module.app, [])
    assert result.exit_code == 1
    assert "usage" in result.output
    assert "bin2cpp input" in result.output


def test_version_flag() -> None:
    """``--version`` prints the package version."""
    from bin2cpp import __version__

    result = runner.invoke(cli_module.app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_forwards_each_argument_in_order(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Every PATH is forwarded to the API with the staging directory."""
    calls: list[tuple[str, Path | None]] = []

    def fake_convert(argument: str, *, temp_dir: Path | None = None) -> BatchResult:
        calls.append((argument, temp_dir))
        return _batch(argument, tmp_path)

    import bin2cpp.api as api_module

    monkeypatch.setattr(api_module, "convert_pattern", fake_convert)
    result = runner.invoke(
        cli_module.app, ["--temp-dir", str(tmp_path), "x/*.bin", "y/*.bin"]
    )

    assert result.exit_code == 0
    assert calls == [("x/*.bin", tmp_path), ("y/*.bin", tmp_path)]
    assert result.output.count("Saved:") == 2


@pytest.mark.parametrize(
    ("error", "code"),
    [
        (DirectoryNotFound("Directory not found: x"), 1),
        (ReadError("Cannot open x"), 2),
        (WriteError("Cannot move x into place at x.h"), 3),
    ],
)
def test_conversion_error_sets_exit_code(
    error: Exception, code: int, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Typed errors map to their exit status and stop further arguments."""
    calls: list[str] = []

    def fake_convert(argument: str, *, temp_dir: Path | None = None) -> BatchResult:
        calls.append(argument)
        raise error

    import bin2cpp.api as api_module

    monkeypatch.setattr(api_module, "convert_pattern", fake_convert)
    result = runner.invoke(cli_module.app, ["first/*", "second/*"])

    assert result.exit_code == code
    assert type(error).__name__ in result.output
    assert calls == ["first/*"]


def test_unexpected_error_exits_one_with_traceback_in_debug(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Unknown exceptions still exit cleanly; ``--debug`` adds the traceback."""

    def fake_convert(argument: str, *, temp_dir: Path | None = None) -> BatchResult:
        raise RuntimeError("kaboom")

    import bin2cpp.api as api_module

    monkeypatch.setattr(api_module, "convert_pattern", fake_convert)
    result = runner.invoke(cli_module.app, ["--debug", "x/*"])

    assert result.exit_code == 1
    assert "RuntimeError" in result.output
    assert "Traceback" in result.output


def test_entries_are_logged_unless_quiet(assets_dir: Path, staging_dir: Path) -> None:
    """Visited entries are logged by default and hidden by ``--quiet``."""
    logo = str(assets_dir / "logo.png")
    notes = str(assets_dir / "notes.txt")

    loud = runner.invoke(
        cli_module.app, ["--temp-dir", str(staging_dir), str(assets_dir / "*.png")]
    )
    assert loud.exit_code == 0
    assert logo in loud.output
    assert notes in loud.output

    quiet = runner.invoke(
        cli_module.app,
        ["-q", "--temp-dir", str(staging_dir), str(assets_dir / "*.png")],
    )
    assert quiet.exit_code == 0
    assert notes not in quiet.output
    assert "Saved:" in quiet.output


def test_missing_temp_dir_is_argument_error(tmp_path: Path, assets_dir: Path) -> None:
    """An unusable staging directory is reported before any conversion."""
    result = runner.invoke(
        cli_module.app,
        ["--temp-dir", str(tmp_path / "nope"), str(assets_dir / "*.png")],
    )
    assert result.exit_code == 1
    assert "ArgumentError" in result.output
    assert not (assets_dir / "logo.cpp").exists()
