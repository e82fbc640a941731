"""Test configuration and fixtures for aggregate_to_txt."""

import tempfile
from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def temp_directory():
    """Create an empty temporary directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_tree(temp_directory):
    """Create a small project tree mixing text, binary and extension-less files.

    Layout:
        notes.txt       text by extension
        blob.dat        binary by content (unknown extension)
        run             extension-less script with a shebang
        docs/readme     text by name
        docs/logo.png   binary by content
        empty/          empty directory
    """
    (temp_directory / "docs").mkdir()
    (temp_directory / "empty").mkdir()
    (temp_directory / "notes.txt").write_bytes(b"hello\nworld\n")
    (temp_directory / "blob.dat").write_bytes(bytes([0x00, 0x01, 0x02]))
    (temp_directory / "run").write_bytes(b"#!/bin/sh\necho hi\n")
    (temp_directory / "docs" / "readme").write_bytes(b"Read me\n")
    (temp_directory / "docs" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\x00\x00")
    return temp_directory
