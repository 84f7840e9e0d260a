from __future__ import annotations

"""
Integration tests for the Tree Materializer.

Uses the in-memory recording filesystem to check call order and the real
filesystem (tmp_path) to check on-disk effects.
"""

import os
from pathlib import Path

import pytest

from folderforge.core.adapters import parse
from folderforge.core.analysis.tree_renderer import tree_to_paths
from folderforge.core.pipeline.materializer import MaterializeReport, materialize, materialize_tree
from folderforge.domain.errors import FilesystemError
from folderforge.domain.tree_models import Node
from folderforge.infra.fs import LocalFileSystem, collect_paths

# -----------------------------------------------------------------------------
# ORDERING (IN-MEMORY)
# -----------------------------------------------------------------------------

def test_parents_are_created_before_children(recording_fs, expected_project_tree):
    """TC-01: Depth-first, parent strictly before child, canonical sibling order."""
    materialize(expected_project_tree[0], "/base", "", recording_fs)

    created = [os.path.relpath(p, "/base").replace(os.sep, "/") for _, p in recording_fs.mutations]
    assert created == [
        "project",
        "project/src",
        "project/src/utils",
        "project/src/utils/helper.ts",
        "project/src/index.ts",
        "project/.bunfig.toml",
        "project/README.md",
        "project/package.json",
    ]


def test_files_are_written_empty(recording_fs):
    materialize(Node.folder("a", [Node.file("b.txt")]), "/base", "", recording_fs)

    assert recording_fs.files == {os.path.normpath("/base/a/b.txt"): b""}


def test_existing_directories_are_kept(make_recording_fs):
    """TC-02: Existing folders get no mkdir call and are reported."""
    fs = make_recording_fs(existing_dirs=["/base/app"])
    report = materialize(Node.folder("app", [Node.folder("lib")]), "/base", "", fs)

    assert ("mkdir", os.path.normpath("/base/app")) not in fs.calls
    assert report.existing_dirs == [os.path.join("/base", "", "app")]
    assert len(report.created_dirs) == 1


def test_parent_relative_path_is_honoured(recording_fs):
    report = materialize(Node.file("x.py"), "/base", "pkg/sub", recording_fs)

    assert report.created_files == [os.path.join("/base", "pkg/sub", "x.py")]


def test_failure_aborts_walk_without_rollback(make_recording_fs):
    """TC-03: A collaborator error stops the walk; earlier entries stay."""
    fs = make_recording_fs(fail_on="b.txt")
    tree = Node.folder("root", [Node.file("a.txt"), Node.file("b.txt"), Node.file("c.txt")])
    report = MaterializeReport()

    with pytest.raises(FilesystemError) as exc:
        materialize(tree, "/base", "", fs, report)

    assert exc.value.operation == "write_file"
    assert len(report.created_files) == 1
    assert os.path.normpath("/base/root/a.txt") in fs.files
    assert os.path.normpath("/base/root/c.txt") not in fs.files

# -----------------------------------------------------------------------------
# REAL FILESYSTEM
# -----------------------------------------------------------------------------

def test_round_trip_through_disk(tmp_path: Path, project_inputs, expected_project_tree):
    """TC-04: Walking the created tree reproduces the parsed paths."""
    tree = parse("tree", project_inputs["tree"])
    report = materialize_tree(tree, str(tmp_path), LocalFileSystem())

    assert sorted(collect_paths(str(tmp_path))) == sorted(tree_to_paths(expected_project_tree, mark_folders=True))
    assert report.total == 8


def test_rerun_truncates_files_and_keeps_directories(tmp_path: Path):
    """TC-05: Re-creating a file empties it; directories are untouched."""
    tree = [Node.folder("app", [Node.file("notes.md")])]
    materialize_tree(tree, str(tmp_path))
    notes = tmp_path / "app" / "notes.md"
    notes.write_text("draft", encoding="utf-8")
    (tmp_path / "app" / "keep.txt").write_text("keep", encoding="utf-8")

    report = materialize_tree(tree, str(tmp_path))

    assert notes.read_text(encoding="utf-8") == ""
    assert (tmp_path / "app" / "keep.txt").read_text(encoding="utf-8") == "keep"
    assert report.created_dirs == []
    assert len(report.existing_dirs) == 1


def test_empty_tree_creates_nothing(tmp_path: Path):
    report = materialize_tree([], str(tmp_path))

    assert report.total == 0
    assert collect_paths(str(tmp_path)) == []
