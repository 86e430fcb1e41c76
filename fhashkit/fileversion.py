"""Read the file version from the resources of a PE executable."""

from __future__ import annotations

import os
from typing import BinaryIO, Protocol

_MASK32 = 0xFFFFFFFF
_RSRC_NAME = b".rsrc"
_VS_VERSION_INFO_NAME = b"VS_VERSION_INFO"
_RT_VERSION = 16
_DIR_FLAG = 0x80000000
_MAX_KEY_CHARS = 200
_MAX_DEPTH = 64


class _Stream(Protocol):
    def seek(self, offset: int) -> int: ...

    def read(self, size: int) -> bytes: ...


class _Malformed(Exception):
    pass


def _pad(offset: int) -> int:
    return (offset + 3) & 0xFFFFFFFC


class FileVersionHelper:
    """Find the VS_FIXEDFILEINFO version of a PE image read through a stream.

    The stream needs ``seek(offset)`` and ``read(size)``; reads past the
    end are treated as zero bytes.
    """

    def __init__(self, stream: _Stream | BinaryIO) -> None:
        self._stream = stream

    def _read(self, offset: int, size: int) -> bytes:
        try:
            self._stream.seek(offset)
            data = self._stream.read(size)
        except (OSError, OverflowError, ValueError):
            data = b""
        return bytes(data or b"")[:size].ljust(size, b"\0")

    def _word(self, offset: int) -> int:
        return int.from_bytes(self._read(offset, 2), "little")

    def _dword(self, offset: int) -> int:
        return int.from_bytes(self._read(offset, 4), "little")

    def _find_version(self) -> int | None:
        if self._word(0) != 0x5A4D:  # MZ
            return None
        pe = self._dword(0x3C)
        if self._word(pe) != 0x4550:  # PE
            return None
        coff = pe + 4
        num_sections = self._word(coff + 2)
        opt_header_size = self._word(coff + 16)
        if num_sections == 0 or opt_header_size == 0:
            return None
        opt_header = coff + 20
        magic = self._word(opt_header)
        if magic not in (0x10B, 0x20B):
            return None
        data_dir = opt_header + (96 if magic == 0x10B else 112)
        va_res = self._dword(data_dir + 8 * 2)

        sec_table = opt_header + opt_header_size
        for index in range(num_sections):
            sec = sec_table + 40 * index
            name = self._read(sec, 8).split(b"\0", 1)[0]
            if name != _RSRC_NAME:
                continue
            va_sec = self._dword(sec + 12)
            raw = self._dword(sec + 20)
            res_sec = raw + ((va_res - va_sec) & _MASK32)
            num_entries = self._word(res_sec + 12) + self._word(res_sec + 14)
            for entry in range(num_entries):
                res = res_sec + 16 + 8 * entry
                if self._dword(res) != _RT_VERSION:
                    continue
                offs = self._dword(res + 4)
                for _ in range(2):
                    if not offs & _DIR_FLAG:
                        return None
                    ver_dir = res_sec + (offs & 0x7FFFFFFF)
                    if self._word(ver_dir + 12) == 0 and self._word(ver_dir + 14) == 0:
                        return None
                    offs = self._dword(ver_dir + 16 + 4)
                if offs & _DIR_FLAG:
                    return None
                ver_va = self._dword(res_sec + offs)
                return raw + ((ver_va - va_sec) & _MASK32)
            return None
        return None

    def _find_fixed(
        self, version: int, offs: int, found: int | None, depth: int
    ) -> tuple[int, int | None]:
        if depth > _MAX_DEPTH:
            raise _Malformed
        offs = _pad(offs)
        length = self._word(version + offs)
        value_length = self._word(version + offs + 2)
        node_type = self._word(version + offs + 4)
        offs += 6
        key = bytearray()
        for _ in range(_MAX_KEY_CHARS):
            char = self._word(version + offs)
            offs += 2
            key.append(char & 0xFF)
            if not char:
                break
        offs = _pad(offs)

        if node_type == 0:
            if bytes(key).split(b"\0", 1)[0] == _VS_VERSION_INFO_NAME:
                found = version + offs
            offs += value_length

        while offs < length:
            offs, found = self._find_fixed(version, offs, found, depth + 1)
        return _pad(offs), found

    def find(self) -> str:
        """Return the version as ``"major.minor.build.revision"``, or ""."""
        version = self._find_version()
        if version is None:
            return ""
        try:
            _, fixed = self._find_fixed(version, 0, None, 0)
        except _Malformed:
            return ""
        if fixed is None:
            return ""
        ms = self._dword(fixed + 8)
        ls = self._dword(fixed + 12)
        return f"{ms >> 16}.{ms & 0xFFFF}.{ls >> 16}.{ls & 0xFFFF}"


def file_version(path: str | os.PathLike[str]) -> str:
    """Return the file version of the PE image at ``path``, or "".

    Raises OSError if the file cannot be opened.
    """
    with open(path, "rb") as stream:
        return FileVersionHelper(stream).find()