"""Find files that are not recorded in the Gentoo package database."""

__version__ = "1.0.5"

__all__ = ["catalogs", "cli", "file_info", "fs_reader", "pkg_reader", "settings"]