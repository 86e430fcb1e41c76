"""Thin file wrapper with open modes, attributes and raw I/O."""

from __future__ import annotations

import enum
import os
import stat
import time
from types import TracebackType

_O_BINARY = getattr(os, "O_BINARY", 0)
_O_SYNC = getattr(os, "O_SYNC", 0)


class OsFileError(OSError):
    """Raised when a file cannot be opened or is used while closed."""


class FileStatus(enum.Enum):
    """Open state of an :class:`OsFile`."""

    CLOSED = 0
    OPEN_READ = 1
    OPEN_WRITE = 2
    OPEN_READWRITE = 3


class SeekFrom(enum.IntEnum):
    """Reference point for :meth:`OsFile.seek`."""

    BEGIN = os.SEEK_SET
    CURRENT = os.SEEK_CUR
    END = os.SEEK_END


class OsFile:
    """A regular file opened by path, read and written through a descriptor."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = os.fspath(path)
        self._fd = -1
        self.status = FileStatus.CLOSED

    def _open(self, flags: int, status: FileStatus) -> OsFile:
        self.close()
        try:
            info = os.stat(self.path)
        except OSError:
            raise OsFileError("File is missing.") from None
        if stat.S_ISREG(info.st_mode):
            try:
                self._fd = os.open(self.path, flags | _O_BINARY)
            except OSError:
                raise OsFileError("Cannot open this file.") from None
            self.status = status
            return self
        if stat.S_ISDIR(info.st_mode):
            raise OsFileError("Cannot open a directory.")
        raise OsFileError("File is missing.")

    def open_read(self) -> OsFile:
        """Open an existing regular file for reading."""
        return self._open(os.O_RDONLY, FileStatus.OPEN_READ)

    def open_read_scan(self) -> OsFile:
        """Open an existing regular file for sequential reading."""
        return self.open_read()

    def open_write(self) -> OsFile:
        """Open an existing regular file for synchronous writing."""
        return self._open(os.O_RDWR | os.O_CREAT | _O_SYNC, FileStatus.OPEN_WRITE)

    def open_read_write(self) -> OsFile:
        """Open an existing regular file for reading and writing."""
        return self.open_write()

    def length(self) -> int:
        """Return the file size in bytes, or 0 if it cannot be read."""
        try:
            return os.stat(self.path).st_size
        except OSError:
            return 0

    def modified_time(self) -> float | None:
        """Return the modification time as a POSIX timestamp, or None."""
        try:
            return os.stat(self.path).st_mtime
        except OSError:
            return None

    def modified_time_format(self) -> str:
        """Return the local modification time as ``YYYY-MM-DD HH:MM``, or ""."""
        mtime = self.modified_time()
        if mtime is None:
            return ""
        return time.strftime("%Y-%m-%d %H:%M", time.localtime(int(mtime)))

    def _require_open(self) -> int:
        if self.status is FileStatus.CLOSED:
            raise OsFileError("File is not open.")
        return self._fd

    def seek(self, offset: int, whence: SeekFrom = SeekFrom.BEGIN) -> int:
        """Move the file position and return the new absolute position."""
        return os.lseek(self._require_open(), offset, int(whence))

    def read(self, size: int) -> bytes:
        """Read up to ``size`` bytes; an empty result means end of file."""
        return os.read(self._require_open(), size)

    def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        return os.write(self._require_open(), bytes(data))

    def close(self) -> None:
        """Close the file if it is open."""
        if self.status is not FileStatus.CLOSED:
            os.close(self._fd)
            self._fd = -1
            self.status = FileStatus.CLOSED

    def __enter__(self) -> OsFile:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()