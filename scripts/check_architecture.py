#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/bin2cpp"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    inner_layers = [
        PACKAGE / "application",
        PACKAGE / "adapters",
        PACKAGE / "infrastructure",
        PACKAGE / "matching",
    ]
    for layer in inner_layers:
        for path in layer.glob("*.py"):
            _assert_no_imports(
                path,
                [
                    "import typer",
                    "from typer",
                    "bin2cpp.cli",
                    "bin2cpp.api",
                ],
            )

    for path in (PACKAGE / "matching").glob("*.py"):
        _assert_no_imports(
            path,
            [
                "bin2cpp.application",
                "bin2cpp.adapters",
            ],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
