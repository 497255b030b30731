"""Read file records from the package database's CONTENTS files."""

from __future__ import annotations

import os
from concurrent.futures import ThreadPoolExecutor

from gentoo_cruft.catalogs import iter_catalogs
from gentoo_cruft.file_info import FileInfo, FileType
from gentoo_cruft.settings import Settings

_SYMLINK_ARROW = " -> "


def parse_entry(line: str, settings: Settings) -> FileInfo:
    """Parse one CONTENTS line into a :class:`FileInfo`.

    The checksum and modification time are kept only when the settings ask
    for them. Raises :class:`ValueError` on a malformed line.
    """
    line = line.rstrip("\r\n")
    fields = line.split(" ")
    ftype = FileType.parse(fields[0])
    md5: str | None = None
    mtime: int | None = None

    if ftype is FileType.OBJ:
        if len(fields) < 3:
            raise ValueError(f"Malformed obj entry: {line!r}")
        path = " ".join(fields[1:-2])
        if settings.md5:
            md5 = fields[-2]
        if settings.mtime:
            mtime = int(fields[-1])
    elif ftype is FileType.DIR:
        path = " ".join(fields[1:])
    else:
        link = line.split(_SYMLINK_ARROW)[0].split(" ")
        path = " ".join(link[1:])
        if settings.mtime:
            mtime = int(fields[-1])

    return FileInfo(ftype=ftype, path=path, md5=md5, mtime=mtime)


def read_catalog(path: str | os.PathLike, settings: Settings) -> set[FileInfo]:
    """Return every entry recorded in one CONTENTS file."""
    entries: set[FileInfo] = set()
    with open(path, encoding="utf-8", errors="surrogateescape") as handle:
        for line in handle:
            info = parse_entry(line, settings)
            if info not in entries:
                entries.add(info)
    return entries


class PkgReader:
    """Collects the entries of every installed package."""

    def __init__(self, settings: Settings, max_workers: int | None = None) -> None:
        self.settings = settings
        self.max_workers = max_workers

    def read(self) -> set[FileInfo]:
        """Return the union of all CONTENTS files below the package directory."""
        catalog: set[FileInfo] = set()
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            results = pool.map(
                lambda path: read_catalog(path, self.settings),
                iter_catalogs(self.settings.pkg_dir),
            )
            for entries in results:
                catalog |= entries - catalog
        return catalog