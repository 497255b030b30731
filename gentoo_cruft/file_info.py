"""File descriptions shared by the package database and filesystem readers."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass


class FileType(enum.Enum):
    """Kind of filesystem entry as recorded in a CONTENTS file."""

    DIR = "dir"
    OBJ = "obj"
    SYM = "sym"

    @classmethod
    def parse(cls, text: str) -> "FileType":
        """Return the file type named by a CONTENTS entry keyword."""
        try:
            return cls(text)
        except ValueError:
            raise ValueError(f"Unexpected file type: {text!r}") from None


@dataclass(frozen=True, eq=False)
class FileInfo:
    """A file path with optional checksum and modification time.

    Two entries compare equal on type and path alone; when ``full_hash`` is
    set the MD5 sum and modification time take part in equality and hashing.
    """

    ftype: FileType = FileType.OBJ
    path: str = ""
    md5: str | None = None
    mtime: int | None = None
    executable: bool = False
    full_hash: bool = False

    def with_full_hash(self) -> "FileInfo":
        """Return a copy that compares on checksum and mtime as well."""
        return dataclasses.replace(self, full_hash=True)

    def _key(self) -> tuple:
        if self.full_hash:
            return (self.ftype, self.path, self.md5, self.mtime)
        return (self.ftype, self.path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FileInfo):
            return NotImplemented
        same = self.ftype == other.ftype and self.path == other.path
        if self.full_hash:
            same = same and self.md5 == other.md5 and self.mtime == other.mtime
        return same

    def __hash__(self) -> int:
        return hash(self._key())

    def __str__(self) -> str:
        prefix = "*" if self.executable else ""
        return f"{prefix}{self.path}"