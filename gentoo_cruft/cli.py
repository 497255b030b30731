"""Command-line entry point: report files unknown to the package database."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from gentoo_cruft.file_info import FileInfo
from gentoo_cruft.fs_reader import FsReader
from gentoo_cruft.pkg_reader import PkgReader
from gentoo_cruft.settings import ConfigError, load_settings


def _by_path(items: Iterable[FileInfo]) -> list[FileInfo]:
    return sorted(items, key=lambda item: item.path)


def find_untracked(files: set[FileInfo], catalog: set[FileInfo]) -> list[FileInfo]:
    """Return files absent from the catalog, sorted by path."""
    return _by_path(files - catalog)


def find_modified(
    files: set[FileInfo],
    catalog: set[FileInfo],
    untracked: Iterable[FileInfo],
) -> list[FileInfo]:
    """Return tracked files whose checksum or mtime differ from the catalog."""
    full_catalog = {item.with_full_hash() for item in catalog}
    tracked = {item.with_full_hash() for item in files ^ set(untracked)}
    return _by_path(tracked - full_catalog)


def _print_section(title: str, items: list[FileInfo]) -> None:
    print(title)
    for item in items:
        print(f"  {item}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return the process exit status."""
    try:
        settings = load_settings(argv)
    except ConfigError as exc:
        print(f"Error reading configuration: {exc}")
        return 1

    catalog = PkgReader(settings).read()
    files = FsReader(settings).read()

    untracked = find_untracked(files, catalog)
    if untracked:
        _print_section("Files not in package database:", untracked)

    if settings.md5 or settings.mtime:
        modified = find_modified(files, catalog, untracked)
        if modified:
            _print_section("\nFiles that have been modified:", modified)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())