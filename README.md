# gentoo-cruft

`cruft` walks the whole filesystem from `/` and lists every entry that no
installed package in the Gentoo package database claims. The database is read
from the `CONTENTS` file of each `category/package` directory. `cruft` can also
report files whose MD5 sum or modification time no longer matches what the
database recorded.

## Installation

```
pip install .
```

## Usage

```
cruft [-d PATH] [-m] [-t] [-f FILE]... [-p PATH]... [-v] [-V]
```

| Option | Meaning |
| --- | --- |
| `-d`, `--pkg-dir PATH` | Path to the Gentoo package database (default `/var/db/pkg`) |
| `-m`, `--md5` | Calculate and compare MD5 sums (inverts the config setting) |
| `-t`, `--mtime` | Compare file modification times (inverts the config setting) |
| `-f`, `--ignore-file FILE` | Add a file to ignore while walking the tree; may be repeated |
| `-p`, `--ignore-path PATH` | Add a path to skip while walking the tree; may be repeated |
| `-v`, `--verbose` | Print warnings about unreadable paths to standard error |
| `-V`, `--version` | Print the version and exit |

The output has two sections:

```
Files not in package database:
  /etc/some.conf
  */usr/local/bin/tool

Files that have been modified:
  /etc/portage/make.conf
```

Entries are sorted by path. A leading `*` marks an executable regular file.
The second section is printed only when MD5 or mtime checking is enabled, and
lists entries that are in the database but whose recorded checksum or
modification time differs from what is on disk. Each section is left out when
it would be empty.

Ignored paths and files are compared as exact paths. A directory given with
`-p` is not descended into. You will usually want to run `cruft` as root and
skip virtual and volatile trees:

```
cruft -p /proc -p /sys -p /dev -p /run -p /tmp -p /home
```

If the configuration cannot be read, `cruft` prints
`Error reading configuration: ...` and exits with status 1.

## Configuration

Settings are read from `/etc/cruft.yaml` and then from
`~/.config/cruft.yaml`; top-level keys in the later file override the earlier
one. Neither file has to exist.

```yaml
md5: false
mtime: false
verbose: false
ignore_paths:
  - /proc
  - /sys
  - /dev
  - /run
  - /tmp
ignore_files:
  - /etc/machine-id
```

`--md5` and `--mtime` flip whatever the configuration says, so with `md5: true`
in the file, `cruft -m` turns MD5 checking off. `--verbose` turns warnings on
regardless of the file. `--ignore-path` and `--ignore-file` replace the lists
from the configuration rather than adding to them.

A `pkg_dir` key is accepted in the files, but the `--pkg-dir` option always
has a value (its default is `/var/db/pkg`), so the command-line value is the
one used.

## Library use

The pieces can also be used from Python:

```python
from gentoo_cruft.settings import load_settings
from gentoo_cruft.pkg_reader import PkgReader
from gentoo_cruft.fs_reader import FsReader
from gentoo_cruft.cli import find_untracked, find_modified

settings = load_settings(["-p", "/proc", "-p", "/sys", "-m"])
catalog = PkgReader(settings).read()
files = FsReader(settings).read()
untracked = find_untracked(files, catalog)
for info in untracked:
    print(info)
for info in find_modified(files, catalog, untracked):
    print(info)
```

- `gentoo_cruft.settings`: `Settings`, `ConfigError`, `load_settings(argv,
  config_files)`, `read_config(paths)`, `merge_args(settings, args)`,
  `build_parser()`, `home_config()`, `default_config_files()`.
- `gentoo_cruft.catalogs.iter_catalogs(pkg_dir)` yields the `CONTENTS` files
  found two levels below the package directory.
- `gentoo_cruft.pkg_reader`: `parse_entry(line, settings)` parses one
  `CONTENTS` line, `read_catalog(path, settings)` reads one file, and
  `PkgReader(settings, max_workers=None).read()` reads them all in a thread
  pool.
- `gentoo_cruft.fs_reader`: `calc_md5(path)`, `stat_file(path, settings)`, and
  `FsReader(settings, root="/", max_workers=None).read()`, which walks the tree
  from `root` without following symbolic links.
- `gentoo_cruft.file_info`: `FileType` (`DIR`, `OBJ`, `SYM`) and `FileInfo`.
  Two `FileInfo` values compare equal on type and path; a copy made with
  `with_full_hash()` also compares on MD5 sum and modification time.