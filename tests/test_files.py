import pytest

from countryguess.files import (
    BinaryFile,
    append_string,
    get_extension,
    get_files,
    read_string,
    write_string,
)


def test_get_extension():
    assert get_extension("dir/map.png") == ".png"
    assert get_extension("dir/noext") == ""


def test_get_files(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "b.txt").write_text("b")
    flat = get_files(tmp_path)
    deep = get_files(tmp_path, recursive=True)
    assert sorted(flat) == [str(tmp_path / "a.txt")]
    assert sorted(deep) == sorted([str(tmp_path / "a.txt"), str(sub / "b.txt")])


def test_write_read_round_trip(tmp_path):
    path = tmp_path / "text.txt"
    write_string(path, "line one\nline two\n")
    assert read_string(path) == "line one\nline two\n"


def test_write_replaces_content(tmp_path):
    path = tmp_path / "text.txt"
    write_string(path, "a long first version")
    write_string(path, "short")
    assert read_string(path) == "short"


def test_read_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_string(tmp_path / "missing.txt")


def test_append_at_end(tmp_path):
    path = tmp_path / "text.txt"
    write_string(path, "hello")
    append_string(path, " world")
    assert read_string(path) == "hello" + " world"


def test_append_at_position_overwrites(tmp_path):
    path = tmp_path / "text.txt"
    write_string(path, "hello world")
    append_string(path, "HELLO", 0)
    assert read_string(path) == "HELLO world"


def test_append_missing_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        append_string(tmp_path / "missing.txt", "x")


def test_binary_round_trip(tmp_path):
    data = bytes(range(20))
    with BinaryFile(tmp_path / "data.bin") as handle:
        assert handle.write(data) == len(data)
        handle.rewind()
        assert handle.read() == data
        assert handle.tell() == len(data)


def test_binary_seek_from_end(tmp_path):
    data = bytes(range(10))
    with BinaryFile(tmp_path / "data.bin") as handle:
        handle.write(data)
        handle.unwind()
        assert handle.tell() == len(data)
        handle.seek(-3)
        assert handle.read() == data[-2:]


def test_binary_move(tmp_path):
    data = bytes(range(10))
    with BinaryFile(tmp_path / "data.bin") as handle:
        handle.write(data)
        handle.seek(2)
        handle.move(3)
        assert handle.read(1) == data[5:6]


def test_binary_keep_appends(tmp_path):
    path = tmp_path / "data.bin"
    with BinaryFile(path) as handle:
        handle.write(b"abc")
    with BinaryFile(path, clear=False) as handle:
        handle.write(b"def")
        handle.rewind()
        assert handle.read() == b"abc" + b"def"


def test_binary_clear_truncates(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"old content")
    with BinaryFile(path) as handle:
        assert handle.read() == b""


def test_binary_closed_operations_raise(tmp_path):
    handle = BinaryFile()
    assert not handle
    with pytest.raises(ValueError):
        handle.tell()
    with pytest.raises(ValueError):
        handle.write(b"x")


def test_binary_context_closes(tmp_path):
    with BinaryFile(tmp_path / "data.bin") as handle:
        assert handle.is_open
    assert handle.is_open is False