"""Shared type aliases for converter modules."""

from __future__ import annotations

import os
from typing import Literal

type StrPath = str | os.PathLike[str]
type ArtifactKind = Literal["source", "header"]
