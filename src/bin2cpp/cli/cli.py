#!/usr/bin/env python3
"""
bin2cpp.cli.cli

Typer-based CLI that embeds binary files as C++ byte arrays.

Each PATH argument may carry ``?`` / ``*`` wildcards in its filename part;
every matching entry of the (non-recursive) parent directory is converted
into ``<stem>.cpp`` and ``<stem>.h`` beside the input.

Examples
--------
Convert every PNG under ``assets``:

    bin2cpp "assets/*.png"

Stage temp files on the same device as the outputs:

    bin2cpp --temp-dir build/tmp "shaders/*.spv"
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from bin2cpp.errors import Bin2CppError

app = typer.Typer(
    name="bin2cpp",
    help="Convert binary files into C++ byte-array source and header files.",
    add_completion=False,
)

USAGE_TEXT = "usage\nbin2cpp input..."
_HANDLER_FLAG = "_bin2cpp_cli_handler"


# -----------------------------
# Utilities
# -----------------------------
def _configure_logging(quiet: bool, verbose: bool) -> None:
    """Route package log records to stderr at the requested level.

    Parameters
    ----------
    quiet : bool
        Only show warnings and errors.
    verbose : bool
        Include debug records (skipped entries, published artifacts).
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    package_logger = logging.getLogger("bin2cpp")
    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(handler, _HANDLER_FLAG, True)
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _version_callback(value: bool) -> None:
    if value:
        from bin2cpp import __version__

        typer.echo(f"bin2cpp {__version__}")
        raise typer.Exit()


# -----------------------------
# Command
# -----------------------------
@app.command()
def main(
    paths: list[str] | None = typer.Argument(
        None,
        help="Input paths; the filename part may use ? and * wildcards.",
        show_default=False,
    ),
    temp_dir: Path | None = typer.Option(
        None,
        "--temp-dir",
        help="Staging directory for atomic writes (default: system temp dir).",
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Do not log visited directory entries."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Also log skipped entries and published files."
    ),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    """Convert every file matched by each PATH, in argument order.

    Parameters
    ----------
    paths : list[str] | None
        Wildcard path arguments. Processing stops at the first failing one.
    temp_dir : Path | None, default=None
        Staging directory for temp files.
    debug : bool, default=False
        Whether to print tracebacks on error.

    Notes
    -----
    - Exit status 1: no PATH, missing directory, vanished input or bad pattern.
    - Exit status 2: a matched entry could not be read (directories included).
    - Exit status 3: an artifact could not be written or moved into place.
    """
    del version
    if not paths:
        typer.echo(USAGE_TEXT)
        raise typer.Exit(code=1)

    _configure_logging(quiet=quiet, verbose=verbose)

    from bin2cpp.api import convert_pattern

    for argument in paths:
        try:
            batch = convert_pattern(argument, temp_dir=temp_dir)
        except Bin2CppError as exc:
            raise typer.Exit(code=_print_conversion_error(exc, debug))
        except Exception as exc:
            # Unexpected crash: still show a clean message; debug prints traceback.
            raise typer.Exit(code=_print_conversion_error(exc, debug))
        for result in batch.results:
            source = typer.format_filename(result.source_path)
            header = typer.format_filename(result.header_path)
            typer.echo(f"✓ Saved: {source} {header}")


def run() -> None:
    """Console-script entry point."""
    app(prog_name="bin2cpp")


if __name__ == "__main__":
    run()
