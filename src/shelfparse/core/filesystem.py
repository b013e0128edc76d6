# ABOUTME: File-system abstraction used by the metadata readers.
# ABOUTME: LocalFileSystem is the default; tests can pass any object matching the protocol.

from pathlib import Path
from typing import Protocol, runtime_checkable

from shelfparse.parsing.paths import file_name


@runtime_checkable
class FileSystem(Protocol):
    """The three file operations the parsing engine needs."""

    def exists(self, path: str) -> bool: ...

    def read_bytes(self, path: str) -> bytes: ...

    def file_name(self, path: str) -> str: ...


class LocalFileSystem:
    """FileSystem backed by the local disk."""

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()

    def file_name(self, path: str) -> str:
        return file_name(path)
