"""Shared pytest configuration, marker assignment and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    """Temp-file staging directory on the same filesystem as ``tmp_path``."""
    path = tmp_path / "staging"
    path.mkdir()
    return path


@pytest.fixture
def assets_dir(tmp_path: Path) -> Path:
    """Directory holding a 3-byte ``logo.png`` and an unrelated text file."""
    path = tmp_path / "assets"
    path.mkdir()
    (path / "logo.png").write_bytes(b"\x01\x02\x03")
    (path / "notes.txt").write_text("not an image", encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_package_logging() -> Iterator[None]:
    """Drop handlers the CLI attaches so they never outlive a test's streams."""
    yield
    package_logger = logging.getLogger("bin2cpp")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.setLevel(logging.NOTSET)
