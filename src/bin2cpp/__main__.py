"""Allow ``python -m bin2cpp``."""

from __future__ import annotations

from bin2cpp.cli.cli import run

if __name__ == "__main__":
    run()
