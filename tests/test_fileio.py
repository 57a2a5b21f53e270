import pytest

from calcarith.fileio import read_file, write_file


def test_round_trip(tmp_path):
    target = tmp_path / "out.txt"
    write_file(target, "Here's an arithmetic 2=2.")
    assert read_file(target) == "Here's an arithmetic 2=2."


def test_round_trip_unicode_and_line_endings(tmp_path):
    target = tmp_path / "out.txt"
    content = "Тест\r\nline two\nend"
    write_file(target, content)
    assert read_file(target) == content


def test_write_truncates_existing_file(tmp_path):
    target = tmp_path / "out.txt"
    write_file(target, "a much longer first content")
    write_file(target, "short")
    assert read_file(target) == "short"


def test_empty_content(tmp_path):
    target = tmp_path / "empty.txt"
    write_file(target, "")
    assert read_file(target) == ""
    assert target.stat().st_size == 0


def test_read_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_file(tmp_path / "missing.txt")


def test_write_into_missing_directory(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_file(tmp_path / "nope" / "out.txt", "x")