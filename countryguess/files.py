"""Whole-file text helpers and a binary file handle with end-relative seeking."""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Optional, Union

PathLike = Union[str, os.PathLike]


def get_extension(filepath: PathLike) -> str:
    """The extension of ``filepath`` including its dot, or an empty string."""
    return Path(filepath).suffix


def get_files(path: PathLike, recursive: bool = False) -> list[str]:
    """Paths of the files (not directories) under ``path``."""
    root = Path(path)
    entries = root.rglob("*") if recursive else root.iterdir()
    return [str(entry) for entry in entries if not entry.is_dir()]


def read_string(filepath: PathLike) -> str:
    """The whole text content of ``filepath``."""
    with open(filepath, encoding="utf-8") as stream:
        return stream.read()


def write_string(filepath: PathLike, data: str) -> None:
    """Replace the content of ``filepath`` with ``data``."""
    with open(filepath, "w", encoding="utf-8") as stream:
        stream.write(data)


def append_string(filepath: PathLike, data: str, position: int = -1) -> None:
    """Write ``data`` into an existing file at byte ``position``, or at its end if negative.

    Writing at a position overwrites what is there.
    """
    with open(filepath, "r+b") as stream:
        if position < 0:
            stream.seek(0, os.SEEK_END)
        else:
            stream.seek(position)
        stream.write(data.encode("utf-8"))


class BinaryFile:
    """A binary file opened for reading and writing.

    Opened with ``clear`` the file is truncated; otherwise it is kept and every
    write goes to its end.
    """

    def __init__(self, filepath: Optional[PathLike] = None, clear: bool = True):
        self._stream: Optional[BinaryIO] = None
        if filepath is not None:
            self.open(filepath, clear)

    def __enter__(self) -> BinaryFile:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __bool__(self) -> bool:
        return self.is_open

    @property
    def is_open(self) -> bool:
        return self._stream is not None

    def _require(self) -> BinaryIO:
        if self._stream is None:
            raise ValueError("file is not open")
        return self._stream

    def open(self, filepath: PathLike, clear: bool = True) -> None:
        """Close any open file and open ``filepath``."""
        self.close()
        self._stream = open(filepath, "wb+" if clear else "ab+")

    def close(self) -> None:
        """Close the file if it is open."""
        if self._stream is not None:
            self._stream.close()
            self._stream = None

    def seek(self, position: int) -> int:
        """Move to ``position``; a negative one counts from the end, -1 being the end itself."""
        stream = self._require()
        if position >= 0:
            return stream.seek(position, os.SEEK_SET)
        return stream.seek(position + 1, os.SEEK_END)

    def move(self, delta: int) -> int:
        """Move by ``delta`` bytes from the current position."""
        return self._require().seek(delta, os.SEEK_CUR)

    def rewind(self) -> int:
        """Move to the start."""
        return self.seek(0)

    def unwind(self) -> int:
        """Move to the end."""
        return self.seek(-1)

    def tell(self) -> int:
        """The current position."""
        return self._require().tell()

    def read(self, size: int = -1) -> bytes:
        """Read up to ``size`` bytes, or everything left."""
        return self._require().read(size)

    def write(self, data: Union[bytes, bytearray, memoryview]) -> int:
        """Write ``data`` and return the number of bytes written."""
        return self._require().write(data)