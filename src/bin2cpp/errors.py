"""Exception hierarchy for binary-to-C++ conversion.

Every exception carries an ``exit_code`` that the CLI surfaces as the
process exit status.
"""

from __future__ import annotations


class Bin2CppError(Exception):
    """Base class for conversion failures."""

    exit_code: int = 1


class ArgumentError(Bin2CppError):
    """Raised when no path arguments are given or settings are invalid."""

    exit_code = 1


class PatternError(ArgumentError):
    """Raised when a filename pattern cannot be compiled into a match rule."""


class DirectoryNotFound(Bin2CppError):
    """Raised when the directory part of a path argument does not exist."""

    exit_code = 1


class InputVanished(Bin2CppError):
    """Raised when a matched entry no longer exists at conversion time."""

    exit_code = 1


class ReadError(Bin2CppError):
    """Raised when a matched entry cannot be opened or read as binary."""

    exit_code = 2


class WriteError(Bin2CppError):
    """Raised when an artifact cannot be staged or moved into place."""

    exit_code = 3
