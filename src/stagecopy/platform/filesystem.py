"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import shutil
from pathlib import Path


def absolute_path(path: Path | str) -> Path:
    """Return ``path`` made absolute against the current directory.

    Symlinks are left alone so a link keeps its own name.
    """

    return Path(os.path.abspath(os.path.expanduser(os.fspath(path))))


def is_writable_directory(path: Path) -> bool:
    """Return whether ``path`` is an existing directory the process can write into."""

    return path.is_dir() and os.access(path, os.W_OK | os.X_OK)


def copy_directory(source: Path, destination: Path) -> Path:
    """Recursively copy ``source`` to ``destination``, merging into existing folders.

    Files are copied with ``shutil.copy2`` so modification times survive;
    files already present at the destination are overwritten.
    """

    return Path(shutil.copytree(source, destination, dirs_exist_ok=True))


def copy_file(source: Path, destination: Path) -> Path:
    """Copy ``source`` to ``destination`` keeping metadata, overwriting silently."""

    return Path(shutil.copy2(source, destination))


__all__ = [
    "absolute_path",
    "copy_directory",
    "copy_file",
    "is_writable_directory",
]
