"""Tests for text/binary file classification."""

from pathlib import Path

import pytest

from aggregate_to_txt.classifier.classification import Classification
from aggregate_to_txt.classifier.text_detector import (
    TEXT_EXTENSIONS,
    TEXT_NAMES,
    classify,
    classify_file,
    find_control_byte,
    get_extension,
)


def write(directory: Path, name: str, data: bytes) -> Path:
    path = directory / name
    path.write_bytes(data)
    return path


class TestGetExtension:
    """Test extension extraction from base names."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("main.c", "c"),
            ("Main.KT", "kt"),
            ("archive.tar.gz", "gz"),
            (".gitignore", "gitignore"),
            ("trailing.", ""),
            ("Makefile", None),
        ],
    )
    def test_get_extension(self, name, expected):
        assert get_extension(name) == expected


class TestAllowlists:
    """Test that allowlisted names and extensions win over content."""

    @pytest.mark.parametrize("extension", sorted(TEXT_EXTENSIONS))
    def test_text_extension_ignores_content(self, temp_directory, extension):
        """Files with a known text extension are text even when full of control bytes."""
        path = write(temp_directory, f"file.{extension}", b"\x00\x01\x02\x03")
        assert classify(path) is Classification.TEXT

    def test_text_extension_is_case_insensitive(self, temp_directory):
        path = write(temp_directory, "README.MD", b"\x00")
        assert classify(path) is Classification.TEXT

    @pytest.mark.parametrize("name", sorted(TEXT_NAMES))
    def test_text_names(self, temp_directory, name):
        path = write(temp_directory, name, b"\x00binary-looking")
        assert classify(path) is Classification.TEXT

    def test_text_names_are_case_sensitive(self, temp_directory):
        """'makefile' is not 'Makefile', so its content decides."""
        path = write(temp_directory, "makefile", b"all:\n\t\x07cc main.c\n")
        assert classify(path) is Classification.BINARY

    def test_dotfile_extension(self, temp_directory):
        path = write(temp_directory, ".gitignore", b"\x00")
        assert classify(path) is Classification.TEXT

    def test_allowlisted_file_is_not_read(self):
        """Allowlisted files are classified from their name alone."""
        assert classify(Path("/nonexistent/dir/main.cpp")) is Classification.TEXT
        assert classify(Path("/nonexistent/dir/Vagrantfile")) is Classification.TEXT


class TestContentSniffing:
    """Test content-based classification for unknown extensions and extension-less files."""

    def test_empty_file_is_text(self, temp_directory):
        path = write(temp_directory, "empty.bin", b"")
        assert classify(path) is Classification.TEXT

    def test_plain_text_unknown_extension(self, temp_directory):
        path = write(temp_directory, "notes.rst", b"Title\n=====\r\n\tindented text\n")
        assert classify(path) is Classification.TEXT

    @pytest.mark.parametrize("control", [b for b in range(32) if b not in (9, 10, 13)])
    def test_any_stray_control_byte_is_binary(self, temp_directory, control):
        path = write(temp_directory, "data.unknown", b"abc" + bytes([control]) + b"def")
        assert classify(path) is Classification.BINARY

    def test_high_bytes_are_text(self, temp_directory):
        """Non-ASCII bytes, valid UTF-8 or not, never count as binary evidence."""
        path = write(temp_directory, "latin.unknown", "café".encode("latin-1") + "日本".encode("utf-8") + b"\xff\x7f")
        assert classify(path) is Classification.TEXT

    def test_shebang_without_extension_is_text(self, temp_directory):
        path = write(temp_directory, "deploy", b"#!/usr/bin/env python\n\x00\x01")
        assert classify(path) is Classification.TEXT

    def test_shebang_with_unknown_extension_is_text(self, temp_directory):
        path = write(temp_directory, "tool.py3", b"#!python\n\x1b")
        assert classify(path) is Classification.TEXT

    def test_extensionless_file_is_sniffed(self, temp_directory):
        """Files without an extension are not automatically text."""
        path = write(temp_directory, "LICENSE", b"MIT\n")
        assert classify(path) is Classification.TEXT

        path = write(temp_directory, "core", b"\x7fELF\x02\x01\x01\x00")
        assert classify(path) is Classification.BINARY

    def test_single_control_byte_file(self, temp_directory):
        path = write(temp_directory, "one", b"\x00")
        assert classify(path) is Classification.BINARY

    def test_control_byte_beyond_first_chunk(self, temp_directory):
        """The whole file is scanned, not just a prefix."""
        data = b"a" * (3 * 65536 + 17) + b"\x00" + b"b" * 10
        path = write(temp_directory, "big.unknown", data)
        assert classify(path) is Classification.BINARY
        assert find_control_byte(path) == (3 * 65536 + 17, 0)

    def test_custom_chunk_size(self, temp_directory):
        data = b"x" * 5000 + b"\x02"
        path = write(temp_directory, "chunked.unknown", data)
        assert find_control_byte(path, chunk_size=4096) == (5000, 2)

    def test_find_control_byte_text(self, temp_directory):
        path = write(temp_directory, "ok.unknown", b"line\r\n\tnext \n")
        assert find_control_byte(path) is None

    def test_unreadable_file_raises(self):
        with pytest.raises(OSError):
            classify(Path("/path/that/does/not/exist.unknownext"))


class TestUnknownExtensions:
    """Test recording of unknown extensions treated as binary."""

    def test_binary_unknown_extension_is_recorded(self, temp_directory):
        seen = set()
        classify(write(temp_directory, "blob.DAT", b"\x00\x01"), seen)
        assert seen == {"dat"}

    def test_text_unknown_extension_is_not_recorded(self, temp_directory):
        seen = set()
        classify(write(temp_directory, "notes.rst", b"text\n"), seen)
        assert seen == set()

    def test_allowlisted_extension_is_not_recorded(self, temp_directory):
        seen = set()
        classify(write(temp_directory, "data.json", b"\x00"), seen)
        assert seen == set()

    def test_extensionless_binary_is_not_recorded(self, temp_directory):
        seen = set()
        assert classify(write(temp_directory, "core", b"\x00"), seen) is Classification.BINARY
        assert seen == set()

    def test_recording_does_not_change_classification(self, temp_directory):
        """The set is diagnostic only: a later text file with the same extension stays text."""
        seen = set()
        assert classify(write(temp_directory, "a.bin", b"\x00"), seen) is Classification.BINARY
        assert classify(write(temp_directory, "b.bin", b"plain"), seen) is Classification.TEXT
        assert seen == {"bin"}


class TestClassifyFile:
    """Test that the evidence behind a binary verdict is kept."""

    def test_binary_by_content_keeps_control_byte(self, temp_directory):
        result = classify_file(write(temp_directory, "blob.dat", bytes([0x00, 0x01, 0x02])))
        assert result.classification is Classification.BINARY
        assert result.control_byte == (0, 0)

    def test_control_byte_offset(self, temp_directory):
        result = classify_file(write(temp_directory, "image.png", b"\x89PNG\r\n\x1a\n"))
        assert result.control_byte == (6, 26)

    def test_text_has_no_evidence(self, temp_directory):
        assert classify_file(write(temp_directory, "notes.rst", b"text\n")).control_byte is None
        assert classify_file(write(temp_directory, "script", b"#!/bin/sh\n\x00")).control_byte is None
        assert classify_file(Path("/nonexistent/main.c")).control_byte is None

    def test_records_unknown_extension(self, temp_directory):
        seen = set()
        classify_file(write(temp_directory, "blob.BIN", b"\x07"), seen)
        assert seen == {"bin"}
