"""Tests for the verbatim text payload encoder."""

import pytest

from aggregate_to_txt.encoders.text_encoder import TextPayloadEncoder
from aggregate_to_txt.exceptions import TextDecodeError
from aggregate_to_txt.locale_strings import ENGLISH, RUSSIAN


@pytest.fixture
def encoder():
    return TextPayloadEncoder()


@pytest.mark.parametrize(
    "data,expected",
    [
        (b"hello\nworld\n", ["hello", "world"]),
        (b"hello\nworld", ["hello", "world"]),
        (b"", []),
        (b"\n", [""]),
        (b"a\n\nb\n", ["a", "", "b"]),
        (b"a\n\n", ["a", ""]),
        (b"dos\r\nline\r\n", ["dos\r", "line\r"]),
        ("привет\n".encode("utf-8"), ["привет"]),
    ],
)
def test_encode_lines(encoder, data, expected):
    assert encoder.encode_lines(data, "file.txt") == expected


def test_lines_never_contain_line_feeds(encoder):
    lines = encoder.encode_lines(b"one\ntwo\n\nthree\n\n\n", "file.txt")
    assert all("\n" not in line for line in lines)
    assert len(lines) == 6


def test_invalid_utf8_raises(encoder):
    with pytest.raises(TextDecodeError) as excinfo:
        encoder.encode_lines(b"ok\n\xff\xfe", "broken.txt")

    assert excinfo.value.file_path == "broken.txt"
    assert excinfo.value.offset == 3
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_intro_label(encoder):
    assert encoder.intro_label(ENGLISH) == "file contents, total lines:"
    assert encoder.intro_label(RUSSIAN) == "начало файла, всего строк:"
