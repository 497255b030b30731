import pytest

from gentoo_cruft.cli import find_modified, find_untracked, main
from gentoo_cruft.file_info import FileInfo, FileType


def obj(path, md5=None, mtime=None, executable=False):
    return FileInfo(ftype=FileType.OBJ, path=path, md5=md5, mtime=mtime,
                    executable=executable)


def test_find_untracked_sorted_by_path():
    files = {obj("/c"), obj("/a"), obj("/b")}
    catalog = {obj("/b")}
    assert [item.path for item in find_untracked(files, catalog)] == ["/a", "/c"]


def test_find_untracked_ignores_checksums():
    files = {obj("/a", md5="aa", mtime=1)}
    catalog = {obj("/a", md5="bb", mtime=2)}
    assert find_untracked(files, catalog) == []


def test_find_untracked_distinguishes_types():
    files = {FileInfo(ftype=FileType.DIR, path="/a")}
    catalog = {obj("/a")}
    assert [item.ftype for item in find_untracked(files, catalog)] == [FileType.DIR]


def test_find_modified_reports_changed_checksum():
    files = {obj("/same", md5="aa"), obj("/changed", md5="bb"), obj("/new", md5="cc")}
    catalog = {obj("/same", md5="aa"), obj("/changed", md5="00")}
    untracked = find_untracked(files, catalog)
    modified = find_modified(files, catalog, untracked)
    assert [item.path for item in modified] == ["/changed"]
    assert modified[0].md5 == "bb"


def test_find_modified_reports_changed_mtime():
    files = {obj("/x", mtime=5), obj("/y", mtime=7)}
    catalog = {obj("/x", mtime=5), obj("/y", mtime=6)}
    modified = find_modified(files, catalog, find_untracked(files, catalog))
    assert [item.path for item in modified] == ["/y"]


def test_find_modified_empty_when_all_match():
    files = {obj("/x", md5="aa", mtime=1)}
    catalog = {obj("/x", md5="aa", mtime=1)}
    assert find_modified(files, catalog, find_untracked(files, catalog)) == []


def test_main_reports_bad_configuration(tmp_path, monkeypatch, capsys):
    config = tmp_path / ".config"
    config.mkdir()
    (config / "cruft.yaml").write_text("md5: [1\n")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main([]) == 1
    assert capsys.readouterr().out.startswith("Error reading configuration:")


def test_main_reports_wrong_value_type(tmp_path, monkeypatch, capsys):
    config = tmp_path / ".config"
    config.mkdir()
    (config / "cruft.yaml").write_text("ignore_files: notalist\n")
    monkeypatch.setenv("HOME", str(tmp_path))
    assert main(["-m"]) == 1
    assert "Error reading configuration" in capsys.readouterr().out


def test_main_rejects_unknown_option(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--no-such-option"])
    assert excinfo.value.code == 2