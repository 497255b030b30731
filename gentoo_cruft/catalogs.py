"""Locate CONTENTS files in the package database."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


def _scan(directory: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            return sorted(entries, key=lambda entry: entry.name)
    except OSError:
        return []


def iter_catalogs(pkg_dir: str | os.PathLike) -> Iterator[Path]:
    """Yield the CONTENTS file of every ``category/package`` entry.

    Entries two levels below ``pkg_dir`` are examined; those without a
    CONTENTS file are skipped, as are directories that cannot be read.
    """
    root = Path(pkg_dir)
    for category in _scan(root):
        try:
            if not category.is_dir(follow_symlinks=False):
                continue
        except OSError:
            continue
        for package in _scan(Path(category.path)):
            contents = Path(package.path) / "CONTENTS"
            if contents.exists():
                yield contents