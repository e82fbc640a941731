"""Tests for directory traversal."""

import os

import pytest

from aggregate_to_txt.exceptions import RootNotFoundError, SpecialFileError
from aggregate_to_txt.exclusion_rules.git_rules import GitIgnoreExclusionRules
from aggregate_to_txt.traversal.walker import check_root, walk


def listing(root, **kwargs):
    return [(entry.relative_path, entry.is_directory) for entry in walk(root, **kwargs)]


def test_preorder_sorted_by_name(sample_tree):
    assert listing(sample_tree) == [
        ("blob.dat", False),
        ("docs", True),
        ("docs/logo.png", False),
        ("docs/readme", False),
        ("empty", True),
        ("notes.txt", False),
        ("run", False),
    ]


def test_entry_paths_join_root(sample_tree):
    entries = {entry.relative_path: entry for entry in walk(sample_tree)}
    assert entries["docs/readme"].path == sample_tree / "docs" / "readme"
    assert entries["docs/readme"].name == "readme"


def test_root_not_yielded(sample_tree):
    assert all(entry.path != sample_tree for entry in walk(sample_tree))


def test_empty_root(temp_directory):
    assert listing(temp_directory) == []


def test_traversal_is_deterministic(sample_tree):
    assert listing(sample_tree) == listing(sample_tree)


def test_missing_root_raises_before_iteration(temp_directory):
    with pytest.raises(RootNotFoundError) as exc_info:
        walk(temp_directory / "missing")
    assert "not found" in str(exc_info.value)


def test_file_root_raises(temp_directory):
    path = temp_directory / "file.txt"
    path.write_text("x")
    with pytest.raises(RootNotFoundError) as exc_info:
        check_root(path)
    assert "is not a directory" in str(exc_info.value)


def test_symlinked_directory_is_not_descended(temp_directory):
    (temp_directory / "real").mkdir()
    (temp_directory / "real" / "inside.txt").write_text("x")
    os.symlink(temp_directory / "real", temp_directory / "zlink")
    os.symlink(temp_directory, temp_directory / "real" / "loop")

    assert listing(temp_directory) == [
        ("real", True),
        ("real/inside.txt", False),
        ("real/loop", True),
        ("zlink", True),
    ]


def test_exclusion_prunes_directories(sample_tree):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("docs/")
    rules.add_rule("*.dat")

    assert listing(sample_tree, exclusion_rules=rules) == [
        ("empty", True),
        ("notes.txt", False),
        ("run", False),
    ]


def test_exclusion_negation(sample_tree):
    rules = GitIgnoreExclusionRules()
    rules.add_rule("docs/*")
    rules.add_rule("!docs/readme")

    paths = [path for path, _ in listing(sample_tree, exclusion_rules=rules)]
    assert "docs/readme" in paths
    assert "docs/logo.png" not in paths


def test_subdirectory_error_reported_and_skipped(sample_tree, monkeypatch):
    real_scandir = os.scandir
    blocked = str(sample_tree / "docs")

    def scandir(path):
        if str(path) == blocked:
            raise PermissionError(13, "Permission denied", blocked)
        return real_scandir(path)

    monkeypatch.setattr("aggregate_to_txt.traversal.walker.os.scandir", scandir)
    errors = []

    paths = [path for path, _ in listing(sample_tree, on_error=lambda p, e: errors.append((p, e)))]

    assert "docs" in paths
    assert "docs/readme" not in paths
    assert "notes.txt" in paths
    assert len(errors) == 1
    assert errors[0][0] == blocked
    assert isinstance(errors[0][1], PermissionError)


def test_subdirectory_error_propagates_without_callback(sample_tree, monkeypatch):
    real_scandir = os.scandir

    def scandir(path):
        if str(path).endswith("docs"):
            raise PermissionError(13, "Permission denied", str(path))
        return real_scandir(path)

    monkeypatch.setattr("aggregate_to_txt.traversal.walker.os.scandir", scandir)
    with pytest.raises(PermissionError):
        listing(sample_tree)


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs are not available on this platform")
def test_special_files_are_reported_not_yielded(temp_directory):
    (temp_directory / "a.txt").write_text("a")
    os.mkfifo(temp_directory / "pipe")
    errors = []

    entries = listing(temp_directory, on_error=lambda p, e: errors.append((p, e)))

    assert entries == [("a.txt", False)]
    assert len(errors) == 1
    assert errors[0][0] == str(temp_directory / "pipe")
    assert isinstance(errors[0][1], SpecialFileError)


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs are not available on this platform")
def test_special_files_skipped_without_callback(temp_directory):
    os.mkfifo(temp_directory / "pipe")
    assert listing(temp_directory) == []


def test_dangling_symlink_is_reported(temp_directory):
    os.symlink(temp_directory / "missing", temp_directory / "broken")
    errors = []

    assert listing(temp_directory, on_error=lambda p, e: errors.append(p)) == []
    assert errors == [str(temp_directory / "broken")]
