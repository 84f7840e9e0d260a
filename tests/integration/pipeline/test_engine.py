from __future__ import annotations

"""
Integration tests for the pipeline engine.

Runs the full validate -> resolve -> parse -> materialize sequence against
both the recording filesystem and tmp_path.
"""

import json
from pathlib import Path

from folderforge.core.pipeline.engine import run_pipeline
from folderforge.infra.fs import collect_paths


def test_pipeline_creates_structure(tmp_path: Path, project_inputs):
    """TC-01: A successful run reports roots, tree lines and effects."""
    result = run_pipeline({
        "format": "tree",
        "input_source": project_inputs["tree"],
        "base_directory": str(tmp_path),
    })

    assert result.ok, result.error
    assert result.roots == ["project"]
    assert result.tree_lines[0] == "project"
    assert len(result.created_dirs) == 3
    assert len(result.created_files) == 5
    assert result.summary["entries"] == 8
    assert "project/src/utils/helper.ts" in collect_paths(str(tmp_path))


def test_pipeline_reads_input_file(tmp_path: Path):
    source = tmp_path / "layout.json"
    source.write_text(json.dumps({"svc": {"main.go": None}}), encoding="utf-8")
    out = tmp_path / "out"

    result = run_pipeline({
        "format": "nested",
        "input_source": str(source),
        "base_directory": str(out),
    })

    assert result.ok, result.error
    assert (out / "svc" / "main.go").is_file()


def test_pipeline_uses_injected_filesystem(recording_fs, project_inputs):
    result = run_pipeline(
        {"format": "paths", "input_source": "\n".join(project_inputs["paths"]), "base_directory": "/virtual"},
        fs=recording_fs,
    )

    assert result.ok, result.error
    assert len(recording_fs.files) == 5


def test_dry_run_touches_nothing(tmp_path: Path, recording_fs):
    """TC-02: Dry runs report planned entries without writing."""
    result = run_pipeline(
        {
            "format": "flat",
            "input_source": '{"app/src/main.py": true}',
            "base_directory": str(tmp_path / "missing"),
            "dry_run": True,
        },
        fs=recording_fs,
    )

    assert result.ok
    assert result.dry_run is True
    assert len(result.created_dirs) == 2
    assert len(result.created_files) == 1
    assert recording_fs.calls == []
    assert not (tmp_path / "missing").exists()


def test_parse_error_performs_no_filesystem_calls(recording_fs):
    """TC-03: Malformed input fails before any filesystem operation."""
    result = run_pipeline(
        {"format": "nested", "input_source": '{"app": {', "base_directory": "/virtual"},
        fs=recording_fs,
    )

    assert not result.ok
    assert "[nested]" in result.error
    assert recording_fs.calls == []


def test_unknown_format_is_reported(recording_fs):
    result = run_pipeline({"format": "xml", "input_source": "a"}, fs=recording_fs)

    assert not result.ok
    assert "Unknown format" in result.error
    assert recording_fs.calls == []


def test_empty_input_is_reported_not_materialized(recording_fs):
    result = run_pipeline({"format": "tree", "input_source": "", "base_directory": "/virtual"}, fs=recording_fs)

    assert not result.ok
    assert "no entries" in result.error
    assert recording_fs.calls == []


def test_filesystem_error_returns_partial_report(make_recording_fs):
    """TC-04: Entries created before the failure are reported."""
    fs = make_recording_fs(existing_dirs=["/virtual"], fail_on="b.txt")
    result = run_pipeline(
        {"format": "paths", "input_source": "root/a.txt\nroot/b.txt", "base_directory": "/virtual"},
        fs=fs,
    )

    assert not result.ok
    assert "Permission denied" in result.error
    assert len(result.created_dirs) == 1
    assert len(result.created_files) == 1
    assert result.summary["created_files"] == 1
