"""Filesystem adapter for the paste use case."""

from __future__ import annotations

from pathlib import Path

from stagecopy.platform.filesystem import copy_directory, copy_file, is_writable_directory

from ...domain.errors import InvalidTargetError
from ...usecases.ports import FileSystemGateway


class LocalFileSystemGateway(FileSystemGateway):
    """Thin wrapper around the local filesystem."""

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def check_target(self, path: Path) -> None:
        if not path.exists():
            raise InvalidTargetError(path, "directory does not exist")
        if not path.is_dir():
            raise InvalidTargetError(path, "not a directory")
        if not is_writable_directory(path):
            raise InvalidTargetError(path, "directory is not writable")

    def copy_tree(self, source: Path, destination: Path) -> None:
        _ = copy_directory(source, destination)

    def copy_file(self, source: Path, destination: Path) -> None:
        _ = copy_file(source, destination)


__all__ = ["LocalFileSystemGateway"]
