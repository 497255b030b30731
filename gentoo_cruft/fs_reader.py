"""Walk the filesystem and describe every file found."""

from __future__ import annotations

import hashlib
import os
import stat
import sys
from collections.abc import Iterator
from concurrent.futures import FIRST_COMPLETED, Future, ThreadPoolExecutor, wait
from pathlib import Path

from gentoo_cruft.file_info import FileInfo, FileType
from gentoo_cruft.settings import Settings

_CHUNK_SIZE = 8192
_MAX_PENDING = 4096


def calc_md5(path: str | os.PathLike) -> str:
    """Return the hexadecimal MD5 digest of a file's contents."""
    digest = hashlib.md5()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def stat_file(path: str | os.PathLike, settings: Settings) -> FileInfo:
    """Describe one filesystem entry without following symbolic links.

    Raises :class:`OSError` if the entry cannot be examined or read.
    """
    st = os.lstat(path)
    mode = st.st_mode
    ftype = FileType.OBJ
    md5: str | None = None
    mtime: int | None = None
    executable = False

    if stat.S_ISLNK(mode):
        ftype = FileType.SYM
        if settings.mtime:
            mtime = int(st.st_mtime)
    elif stat.S_ISDIR(mode):
        ftype = FileType.DIR
    elif not stat.S_ISFIFO(mode) and not stat.S_ISSOCK(mode):
        executable = bool(mode & 0o111)
        if settings.md5:
            md5 = calc_md5(path)
        if settings.mtime:
            mtime = int(st.st_mtime)

    return FileInfo(
        ftype=ftype,
        path=os.fspath(path),
        md5=md5,
        mtime=mtime,
        executable=executable,
    )


class FsReader:
    """Collects a description of every entry below a root directory."""

    def __init__(
        self,
        settings: Settings,
        root: str | os.PathLike = "/",
        max_workers: int | None = None,
    ) -> None:
        self.settings = settings
        self.root = os.fspath(root)
        self.max_workers = max_workers
        self._ignore_files = frozenset(settings.ignore_files or ())
        self._ignore_paths = frozenset(settings.ignore_paths or ())

    def _warn(self, message: str) -> None:
        if self.settings.verbose:
            print(message, file=sys.stderr)

    def _keep(self, path: str, is_dir: bool) -> bool:
        as_path = Path(path)
        if not is_dir and as_path in self._ignore_files:
            return False
        return as_path not in self._ignore_paths

    def _walk(self) -> Iterator[str]:
        try:
            root_is_dir = stat.S_ISDIR(os.stat(self.root).st_mode)
        except OSError as exc:
            self._warn(f"Error accessing path: {exc}")
            return
        if not self._keep(self.root, root_is_dir):
            return
        yield self.root
        stack = [self.root] if root_is_dir else []
        while stack:
            directory = stack.pop()
            try:
                with os.scandir(directory) as it:
                    entries = list(it)
            except OSError as exc:
                self._warn(f"Error accessing path: {exc}")
                continue
            for entry in entries:
                try:
                    is_dir = entry.is_dir(follow_symlinks=False)
                except OSError:
                    is_dir = False
                if not self._keep(entry.path, is_dir):
                    continue
                yield entry.path
                if is_dir:
                    stack.append(entry.path)

    def _stat(self, path: str) -> FileInfo | None:
        try:
            return stat_file(path, self.settings)
        except OSError as exc:
            self._warn(f"Error reading file {path}: {exc}")
            return None

    @staticmethod
    def _collect(done: set[Future], results: set[FileInfo]) -> None:
        for future in done:
            info = future.result()
            if info is not None and info not in results:
                results.add(info)

    def read(self) -> set[FileInfo]:
        """Walk the tree and return a description of every entry kept."""
        results: set[FileInfo] = set()
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            pending: set[Future] = set()
            for path in self._walk():
                if Path(path) in self._ignore_files:
                    continue
                pending.add(pool.submit(self._stat, path))
                if len(pending) >= _MAX_PENDING:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    self._collect(done, results)
            done, _ = wait(pending)
            self._collect(done, results)
        return results