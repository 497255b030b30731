import pytest

from gentoo_cruft.file_info import FileInfo, FileType


@pytest.mark.parametrize(
    "text, expected",
    [("obj", FileType.OBJ), ("dir", FileType.DIR), ("sym", FileType.SYM)],
)
def test_parse_known_types(text, expected):
    assert FileType.parse(text) is expected


@pytest.mark.parametrize("text", ["", "dev", "OBJ", "fif"])
def test_parse_unknown_type_raises(text):
    with pytest.raises(ValueError):
        FileType.parse(text)


def test_defaults():
    info = FileInfo()
    assert info.ftype is FileType.OBJ
    assert info.path == ""
    assert info.md5 is None
    assert info.mtime is None
    assert info.executable is False
    assert info.full_hash is False


def test_str_marks_executable():
    assert str(FileInfo(path="/usr/bin/ls", executable=True)) == "*/usr/bin/ls"
    assert str(FileInfo(path="/etc/hosts")) == "/etc/hosts"


def test_equality_ignores_checksum_without_full_hash():
    a = FileInfo(path="/etc/hosts", md5="aa", mtime=1)
    b = FileInfo(path="/etc/hosts", md5="bb", mtime=2)
    assert a == b
    assert hash(a) == hash(b)


def test_equality_depends_on_type_and_path():
    assert FileInfo(FileType.DIR, "/etc") != FileInfo(FileType.OBJ, "/etc")
    assert FileInfo(path="/a") != FileInfo(path="/b")


def test_full_hash_compares_checksum_and_mtime():
    a = FileInfo(path="/etc/hosts", md5="aa", mtime=1).with_full_hash()
    b = FileInfo(path="/etc/hosts", md5="bb", mtime=1).with_full_hash()
    c = FileInfo(path="/etc/hosts", md5="aa", mtime=2).with_full_hash()
    d = FileInfo(path="/etc/hosts", md5="aa", mtime=1).with_full_hash()
    assert a != b
    assert a != c
    assert a == d
    assert hash(a) == hash(d)


def test_with_full_hash_returns_copy():
    original = FileInfo(path="/x", md5="aa")
    copy = original.with_full_hash()
    assert copy.full_hash is True
    assert original.full_hash is False
    assert copy.path == original.path and copy.md5 == original.md5


def test_set_difference_on_path():
    files = {FileInfo(path="/a", md5="1"), FileInfo(path="/b")}
    catalog = {FileInfo(path="/a", md5="2")}
    assert {f.path for f in files - catalog} == {"/b"}


def test_set_difference_with_full_hash():
    files = {FileInfo(path="/a", md5="1").with_full_hash()}
    catalog = {FileInfo(path="/a", md5="2").with_full_hash()}
    assert {f.path for f in files - catalog} == {"/a"}