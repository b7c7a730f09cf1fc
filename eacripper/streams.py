"""Seekable byte streams over memory and files."""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import BinaryIO


class SeekMode(IntEnum):
    """Origin of a seek."""

    BEGIN = 0
    CURRENT = 1
    END = 2


class StreamError(OSError):
    """Raised when a stream operation fails."""


class StreamReader(ABC):
    """A readable, seekable stream of bytes."""

    @abstractmethod
    def usable(self) -> bool:
        """Return whether the stream can be used."""

    @abstractmethod
    def size(self) -> int:
        """Return the total size of the stream in bytes."""

    @abstractmethod
    def seek(self, pos: int, mode: SeekMode = SeekMode.BEGIN) -> int:
        """Move the stream position and return the new position."""

    @abstractmethod
    def tell(self) -> int:
        """Return the current position from the beginning."""

    @abstractmethod
    def read(self, size: int = -1) -> bytes:
        """Read up to *size* bytes from the current position."""


class StreamWriter(ABC):
    """A writable, seekable stream of bytes."""

    @abstractmethod
    def usable(self) -> bool:
        """Return whether the stream can be used."""

    @abstractmethod
    def size(self) -> int:
        """Return the total size of the stream in bytes."""

    @abstractmethod
    def seek(self, pos: int, mode: SeekMode = SeekMode.BEGIN) -> int:
        """Move the stream position and return the new position."""

    @abstractmethod
    def tell(self) -> int:
        """Return the current position from the beginning."""

    @abstractmethod
    def write(self, data: bytes) -> int:
        """Write *data* at the current position and return the count written."""


class MemoryStreamReader(StreamReader):
    """A reader over an in-memory bytes-like object.

    Seeking never fails: positions are clamped into ``[0, size]``. With
    ``SeekMode.END`` the offset counts backwards from the end.
    """

    def __init__(self, memory: bytes | bytearray | memoryview | None = None) -> None:
        self._memory: memoryview | None = None
        self._pos = 0
        if memory is not None:
            self.open(memory)

    def open(self, memory: bytes | bytearray | memoryview) -> None:
        """Use *memory* as the stream contents and rewind."""
        self._memory = memoryview(memory).cast("B")
        self._pos = 0

    def close(self) -> None:
        """Drop the memory; the stream then holds nothing."""
        self._memory = None
        self._pos = 0

    def usable(self) -> bool:
        return self._memory is not None

    def size(self) -> int:
        return 0 if self._memory is None else len(self._memory)

    def seek(self, pos: int, mode: SeekMode = SeekMode.BEGIN) -> int:
        mode = SeekMode(mode)
        total = self.size()
        if mode is SeekMode.BEGIN:
            self._pos = min(max(pos, 0), total)
        elif mode is SeekMode.CURRENT:
            self._pos = min(max(self._pos + pos, 0), total)
        else:
            self._pos = total - min(max(pos, 0), total)
        return self._pos

    def tell(self) -> int:
        return self._pos

    def read(self, size: int = -1) -> bytes:
        if self._memory is None:
            return b""
        remaining = len(self._memory) - self._pos
        count = remaining if size < 0 else min(size, remaining)
        chunk = bytes(self._memory[self._pos:self._pos + count])
        self._pos += count
        return chunk

    def __enter__(self) -> MemoryStreamReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


_WHENCE = {
    SeekMode.BEGIN: os.SEEK_SET,
    SeekMode.CURRENT: os.SEEK_CUR,
    SeekMode.END: os.SEEK_END,
}


class _FileStream:
    """Shared handling of an open binary file."""

    def __init__(self) -> None:
        self._file: BinaryIO | None = None

    def _require(self) -> BinaryIO:
        if self._file is None:
            raise StreamError("stream is not open")
        return self._file

    def _close_file(self) -> None:
        if self._file is None:
            return
        try:
            self._file.close()
        except OSError as exc:
            raise StreamError(f"cannot close stream: {exc}") from exc
        self._file = None

    def _file_size(self) -> int:
        file = self._require()
        try:
            file.flush()
            return os.fstat(file.fileno()).st_size
        except OSError as exc:
            raise StreamError(f"cannot get stream size: {exc}") from exc

    def _seek_file(self, pos: int, mode: SeekMode) -> int:
        whence = _WHENCE[SeekMode(mode)]
        file = self._require()
        try:
            return file.seek(pos, whence)
        except (OSError, ValueError) as exc:
            raise StreamError(f"cannot seek to {pos}: {exc}") from exc

    def _tell_file(self) -> int:
        file = self._require()
        try:
            return file.tell()
        except OSError as exc:
            raise StreamError(f"cannot tell stream position: {exc}") from exc


class FileStreamReader(_FileStream, StreamReader):
    """A reader over a file on disk."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__()
        if path is not None:
            self.open(path)

    def open(self, path: str | os.PathLike[str], make: bool = False) -> None:
        """Open *path* for reading, creating an empty file first if *make*."""
        self.close()
        try:
            if make and not os.path.exists(path):
                with open(path, "ab"):
                    pass
            self._file = open(path, "rb")
        except OSError as exc:
            raise StreamError(f"cannot open {os.fspath(path)!r}: {exc}") from exc

    def close(self) -> None:
        """Close the file if one is open."""
        self._close_file()

    def usable(self) -> bool:
        return self._file is not None

    def size(self) -> int:
        return self._file_size()

    def seek(self, pos: int, mode: SeekMode = SeekMode.BEGIN) -> int:
        return self._seek_file(pos, mode)

    def tell(self) -> int:
        return self._tell_file()

    def read(self, size: int = -1) -> bytes:
        file = self._require()
        try:
            return file.read(size)
        except OSError as exc:
            raise StreamError(f"cannot read stream: {exc}") from exc

    def __enter__(self) -> FileStreamReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class FileStreamWriter(_FileStream, StreamWriter):
    """A writer over a file on disk."""

    def __init__(self, path: str | os.PathLike[str] | None = None) -> None:
        super().__init__()
        if path is not None:
            self.open(path)

    def open(self, path: str | os.PathLike[str], truncate: bool = True) -> None:
        """Open *path* for writing, emptying it if *truncate*.

        The file is created when missing; the position starts at the beginning.
        """
        self.close()
        try:
            if truncate:
                self._file = open(path, "wb")
            else:
                if not os.path.exists(path):
                    with open(path, "ab"):
                        pass
                self._file = open(path, "r+b")
        except OSError as exc:
            raise StreamError(f"cannot open {os.fspath(path)!r}: {exc}") from exc

    def close(self) -> None:
        """Close the file if one is open."""
        self._close_file()

    def usable(self) -> bool:
        return self._file is not None

    def size(self) -> int:
        return self._file_size()

    def seek(self, pos: int, mode: SeekMode = SeekMode.BEGIN) -> int:
        return self._seek_file(pos, mode)

    def tell(self) -> int:
        return self._tell_file()

    def write(self, data: bytes) -> int:
        file = self._require()
        try:
            return file.write(data)
        except OSError as exc:
            raise StreamError(f"cannot write stream: {exc}") from exc

    def __enter__(self) -> FileStreamWriter:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()