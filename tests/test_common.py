import pytest

from aocpuzzles.common import (
    binary_string_to_int,
    get_bit,
    lines_to_int,
    read_lines,
    split_lines,
    split_lines_no_empty_strings,
)


@pytest.fixture
def sample_int(tmp_path):
    path = tmp_path / "sampleInt"
    path.write_text("1\n" * 6)
    return path


@pytest.fixture
def sample_int_str(tmp_path):
    path = tmp_path / "sampleIntStr"
    path.write_text("1 a\n2 b\n3 c\n4 d\n5 e\n6 f\n")
    return path


def test_it_reads_lines(sample_int):
    lines = read_lines(sample_int)
    assert lines == ["1"] * 6


def test_it_converts_read_lines_to_int(sample_int):
    ints = lines_to_int(read_lines(sample_int))
    assert len(ints) == 6
    assert all(value == 1 for value in ints)


def test_it_splits_lines_by_space(sample_int_str):
    split = split_lines(read_lines(sample_int_str), " ")
    assert len(split) == 6
    assert split[0] == ["1", "a"]


def test_it_converts_string_to_int():
    assert binary_string_to_int("0101") == 5


def test_it_gets_a_specific_bit():
    assert get_bit(7, 0) is True
    assert get_bit(7, 1) is True
    assert get_bit(7, 2) is True
    assert get_bit(7, 3) is False


def test_read_lines_strips_crlf(tmp_path):
    path = tmp_path / "crlf"
    path.write_bytes(b"a\r\nb\r\n")
    assert read_lines(path) == ["a", "b"]


def test_read_lines_empty_file(tmp_path):
    path = tmp_path / "empty"
    path.write_text("")
    assert read_lines(path) == []


def test_lines_to_int_skips_blank_lines():
    assert lines_to_int(["3", "", "-4"]) == [3, -4]


def test_lines_to_int_rejects_garbage():
    with pytest.raises(ValueError):
        lines_to_int(["x"])


def test_split_with_empty_delimiter():
    assert split_lines(["ab"], "") == [["", "a", "b", ""]]
    assert split_lines_no_empty_strings(["ab"], "") == [["a", "b"]]


def test_split_no_empty_strings_drops_blanks():
    assert split_lines_no_empty_strings([" 1  2 "], " ") == [["1", "2"]]