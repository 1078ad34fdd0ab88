from __future__ import annotations

"""
Unit tests for the Pipeline Setup stage.

Validates path normalization, catalog and output checks, overwrite detection
and output directory creation.
"""

from pathlib import Path

from imageassetgen.core.pipeline.stages.setup import OUTPUT_FILENAMES, prepare_environment


def test_prepare_environment_success(tmp_path: Path, sample_catalog: Path) -> None:
    """TC-01: Valid paths produce a context and create the output directory."""
    output_dir = tmp_path / "Generated"
    cfg = {"assets_path": str(sample_catalog), "output_dir": str(output_dir)}

    result, context = prepare_environment(cfg, dry_run=False)

    assert result is None
    assert context["assets_path"] == str(sample_catalog)
    assert context["output_dir"] == str(output_dir)
    assert context["existing_files"] == []
    assert output_dir.is_dir()


def test_prepare_environment_missing_assets_path() -> None:
    result, context = prepare_environment({"assets_path": "", "output_dir": "/tmp"}, dry_run=False)

    assert result is not None
    assert result.ok is False
    assert "No asset catalog path" in result.error
    assert result.summary["stage"] == "setup"
    assert context == {}


def test_prepare_environment_nonexistent_catalog(tmp_path: Path) -> None:
    """TC-02: A missing catalog is a setup error, not an exception."""
    cfg = {"assets_path": str(tmp_path / "Void.xcassets"), "output_dir": str(tmp_path)}

    result, _ = prepare_environment(cfg, dry_run=False)

    assert result is not None
    assert "does not exist" in result.error


def test_prepare_environment_rejects_non_catalog_folder(tmp_path: Path) -> None:
    folder = tmp_path / "Images"
    folder.mkdir()

    result, _ = prepare_environment({"assets_path": str(folder), "output_dir": str(tmp_path)}, dry_run=False)

    assert result is not None
    assert ".xcassets" in result.error
    assert result.summary["stage"] == "setup"


def test_prepare_environment_trailing_separator(tmp_path: Path, sample_catalog: Path) -> None:
    cfg = {"assets_path": str(sample_catalog) + "/", "output_dir": str(tmp_path / "out")}

    result, context = prepare_environment(cfg, dry_run=True)

    assert result is None
    assert context["assets_path"] == str(sample_catalog)


def test_prepare_environment_missing_output(sample_catalog: Path) -> None:
    result, _ = prepare_environment({"assets_path": str(sample_catalog), "output_dir": ""}, dry_run=False)

    assert result is not None
    assert "No output directory" in result.error


def test_prepare_environment_missing_output_parent(tmp_path: Path, sample_catalog: Path) -> None:
    cfg = {"assets_path": str(sample_catalog), "output_dir": str(tmp_path / "a" / "b")}

    result, _ = prepare_environment(cfg, dry_run=False)

    assert result is not None
    assert "parent folder does not exist" in result.error
    assert not (tmp_path / "a").exists()


def test_prepare_environment_detects_existing_files(tmp_path: Path, sample_catalog: Path) -> None:
    """TC-03: Files that will be overwritten are reported."""
    output_dir = tmp_path / "Generated"
    output_dir.mkdir()
    (output_dir / OUTPUT_FILENAMES[0]).write_text("old", encoding="utf-8")

    result, context = prepare_environment(
        {"assets_path": str(sample_catalog), "output_dir": str(output_dir)}, dry_run=False
    )

    assert result is None
    assert context["existing_files"] == [str(output_dir / OUTPUT_FILENAMES[0])]


def test_prepare_environment_dry_run_skips_mkdir(tmp_path: Path, sample_catalog: Path) -> None:
    """TC-04: Dry runs never touch the output location."""
    output_dir = tmp_path / "Generated"

    result, _ = prepare_environment(
        {"assets_path": str(sample_catalog), "output_dir": str(output_dir)}, dry_run=True
    )

    assert result is None
    assert not output_dir.exists()


def test_prepare_environment_mkdir_failure(tmp_path: Path, sample_catalog: Path) -> None:
    blocker = tmp_path / "Generated"
    blocker.write_text("a file, not a folder", encoding="utf-8")

    result, _ = prepare_environment(
        {"assets_path": str(sample_catalog), "output_dir": str(blocker)}, dry_run=False
    )

    assert result is not None
    assert "Failed to create output directory" in result.error
    assert result.summary["stage"] == "setup"
