"""Atomic publish-or-discard text output."""

from __future__ import annotations

import logging
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import TextIO

from bin2cpp.errors import WriteError

logger = logging.getLogger(__name__)


def _default_file_mode() -> int:
    """Permission bits an ordinary ``open(path, "w")`` would create."""
    mask = os.umask(0)
    os.umask(mask)
    return 0o666 & ~mask


# Read once at import: toggling the process-wide umask is not thread-safe.
_FILE_MODE = _default_file_mode()


@contextmanager
def atomic_text_output(
    final_path: Path,
    *,
    temp_dir: Path | None = None,
    encoding: str = "utf-8",
) -> Iterator[TextIO]:
    """Stage text output in a temp file and move it to ``final_path``.

    The file is created in ``temp_dir`` (the system temporary directory when
    omitted) and renamed into place only when the ``with`` body completes.
    If the body raises, the staged file is removed and the exception
    propagates unchanged.

    Parameters
    ----------
    final_path : Path
        Destination of the published artifact.
    temp_dir : Path | None, default=None
        Staging directory.
    encoding : str, default="utf-8"
        Text encoding of the staged file. Undecodable file-name bytes
        (surrogate escapes) are written back as the original bytes.

    Raises
    ------
    WriteError
        If the temp file cannot be created or written (including text the
        encoding cannot represent), or the rename fails
        (cross-device move, permission denial).
    """
    staging_dir = temp_dir if temp_dir is not None else Path(tempfile.gettempdir())
    try:
        fd, raw_tmp_path = tempfile.mkstemp(
            prefix=f"{final_path.stem}-",
            suffix=final_path.suffix,
            dir=staging_dir,
        )
    except OSError as exc:
        raise WriteError(f"Cannot create temp file for {final_path}: {exc}") from exc
    tmp_path = Path(raw_tmp_path)

    published = False
    try:
        try:
            handle = os.fdopen(
                fd, "w", encoding=encoding, errors="surrogateescape", newline="\n"
            )
        except OSError as exc:
            os.close(fd)
            raise WriteError(f"Cannot open temp file {tmp_path}: {exc}") from exc
        try:
            with handle:
                yield handle
        except (OSError, UnicodeError) as exc:
            raise WriteError(f"Cannot write temp file {tmp_path}: {exc}") from exc
        try:
            # mkstemp creates 0600 files.
            os.chmod(tmp_path, _FILE_MODE)
            os.replace(tmp_path, final_path)
        except OSError as exc:
            raise WriteError(
                f"Cannot move {tmp_path} into place at {final_path}: {exc}"
            ) from exc
        published = True
        logger.debug("published %s", final_path)
    finally:
        if not published:
            tmp_path.unlink(missing_ok=True)
