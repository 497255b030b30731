"""Configuration from YAML files and command-line arguments."""

from __future__ import annotations

import argparse
import dataclasses
import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

DEFAULT_PKG_DIR = "/var/db/pkg"
SYSTEM_CONFIG = "/etc/cruft.yaml"
VERSION = "1.0.5"


class ConfigError(Exception):
    """Raised when configuration cannot be read or is invalid."""


@dataclass(frozen=True)
class Settings:
    """Effective program settings."""

    pkg_dir: str = DEFAULT_PKG_DIR
    ignore_files: tuple[Path, ...] | None = None
    ignore_paths: tuple[Path, ...] | None = None
    md5: bool = False
    mtime: bool = False
    verbose: bool = False

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Settings":
        """Build settings from a configuration mapping, applying defaults."""
        return cls(
            pkg_dir=_as_str(mapping, "pkg_dir", DEFAULT_PKG_DIR),
            ignore_files=_as_paths(mapping, "ignore_files"),
            ignore_paths=_as_paths(mapping, "ignore_paths"),
            md5=_as_bool(mapping, "md5"),
            mtime=_as_bool(mapping, "mtime"),
            verbose=_as_bool(mapping, "verbose"),
        )


def _as_str(mapping: Mapping[str, Any], key: str, default: str) -> str:
    value = mapping.get(key, default)
    if value is None:
        return default
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise ConfigError(f"invalid type for {key}: expected a string")
    return str(value)


def _as_bool(mapping: Mapping[str, Any], key: str) -> bool:
    value = mapping.get(key, False)
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise ConfigError(f"invalid type for {key}: expected a boolean")


def _as_paths(mapping: Mapping[str, Any], key: str) -> tuple[Path, ...] | None:
    value = mapping.get(key)
    if value is None:
        return None
    if isinstance(value, (str, bytes)) or not isinstance(value, list):
        raise ConfigError(f"invalid type for {key}: expected a list")
    if not all(isinstance(item, str) for item in value):
        raise ConfigError(f"invalid type for {key}: expected strings")
    return tuple(Path(item) for item in value)


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="cruft",
        description="Find files that are not recorded in the Gentoo package database",
    )
    parser.add_argument(
        "-d", "--pkg-dir",
        metavar="PATH",
        default=DEFAULT_PKG_DIR,
        help="Path to the Gentoo package database",
    )
    parser.add_argument(
        "-m", "--md5",
        action="store_true",
        help="Calculate and compare MD5 sums (inverts config setting)",
    )
    parser.add_argument(
        "-t", "--mtime",
        action="store_true",
        help="Compare file modification times (inverts config setting)",
    )
    parser.add_argument(
        "-f", "--ignore-file",
        dest="ignore_file",
        action="append",
        metavar="FILE",
        help="Add file to ignore when traversing the directory tree",
    )
    parser.add_argument(
        "-p", "--ignore-path",
        dest="ignore_path",
        action="append",
        metavar="PATH",
        help="Add path to ignore when traversing the directory tree",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Display warnings on STDERR",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def home_config() -> str:
    """Return the path of the per-user configuration file."""
    home = os.environ.get("HOME")
    if home is None:
        raise ConfigError("HOME is not set")
    return f"{home}/.config/cruft.yaml"


def default_config_files() -> list[str]:
    """Return configuration files in the order they are applied."""
    return [SYSTEM_CONFIG, home_config()]


def read_config(paths: Iterable[str | os.PathLike]) -> dict[str, Any]:
    """Merge the top-level keys of the given YAML files; later files win.

    Files that do not exist are skipped.
    """
    merged: dict[str, Any] = {}
    for path in paths:
        try:
            with open(path, encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise ConfigError(f"cannot read {path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigError(f"invalid YAML in {path}: {exc}") from exc
        if data is None:
            continue
        if not isinstance(data, dict):
            raise ConfigError(f"{path}: expected a mapping at top level")
        merged.update(data)
    return merged


def merge_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Apply parsed command-line arguments on top of settings."""
    changes: dict[str, Any] = {}
    if args.md5:
        changes["md5"] = not settings.md5
    if args.mtime:
        changes["mtime"] = not settings.mtime
    if args.verbose:
        changes["verbose"] = True
    if args.pkg_dir is not None:
        changes["pkg_dir"] = args.pkg_dir
    if args.ignore_path:
        changes["ignore_paths"] = tuple(Path(p) for p in args.ignore_path)
    if args.ignore_file:
        changes["ignore_files"] = tuple(Path(f) for f in args.ignore_file)
    return dataclasses.replace(settings, **changes)


def load_settings(
    argv: Sequence[str] | None = None,
    config_files: Iterable[str | os.PathLike] | None = None,
) -> Settings:
    """Parse arguments, read configuration files and combine them."""
    args = build_parser().parse_args(argv)
    if config_files is None:
        config_files = default_config_files()
    settings = Settings.from_mapping(read_config(config_files))
    return merge_args(settings, args)