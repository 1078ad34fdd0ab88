from __future__ import annotations

"""
Unit tests for the CLI Application Controller.

Runs the controller in-process to verify configuration merging, exit codes
and rendered output without spawning a subprocess.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from imageassetgen.infra.logging import shutdown_logging
from imageassetgen.interface.cli.app import (
    EXIT_FAILURE,
    EXIT_INTERRUPTED,
    EXIT_OK,
    EXIT_USAGE,
    main,
)


@pytest.fixture(autouse=True)
def release_logging(capsys):
    """Stop the log listener while the captured streams are still open."""
    yield
    shutdown_logging()


def test_success_prints_done_and_files(tmp_path: Path, sample_catalog: Path, capsys) -> None:
    out = tmp_path / "Generated"

    code = main(["--use-defaults", "-a", str(sample_catalog), "-o", str(out)])

    captured = capsys.readouterr()
    assert code == EXIT_OK
    assert f"Done. Files generated in: {out}" in captured.out
    assert "• ImageAsset.swift" in captured.out
    assert (out / "Image+ImageAsset.swift").exists()


def test_verbose_prints_structure(tmp_path: Path, sample_catalog: Path, capsys) -> None:
    code = main(["--use-defaults", "-v", "-a", str(sample_catalog), "-o", str(tmp_path / "out")])

    stdout = capsys.readouterr().out
    assert code == EXIT_OK
    assert f"Scanning: {sample_catalog}" in stdout
    assert "Structure:" in stdout
    assert "├── Icons/" in stdout
    assert "Wrote: " in stdout


def test_missing_assets_argument_is_usage_error(capsys) -> None:
    code = main(["--use-defaults", "-o", "out"])

    assert code == EXIT_USAGE
    assert "--assets" in capsys.readouterr().err


def test_missing_output_argument_is_usage_error(sample_catalog: Path, capsys) -> None:
    code = main(["--use-defaults", "-a", str(sample_catalog)])

    assert code == EXIT_USAGE
    assert "--output" in capsys.readouterr().err


def test_nonexistent_assets_path(tmp_path: Path, capsys) -> None:
    code = main(["--use-defaults", "-a", str(tmp_path / "Nope.xcassets"), "-o", str(tmp_path)])

    assert code == EXIT_USAGE
    assert "does not exist" in capsys.readouterr().err


def test_wrong_catalog_suffix_is_usage_error(tmp_path: Path, capsys) -> None:
    folder = tmp_path / "Images"
    folder.mkdir()

    code = main(["--use-defaults", "-a", str(folder), "-o", str(tmp_path / "out")])

    assert code == EXIT_USAGE
    assert ".xcassets" in capsys.readouterr().err


def test_json_output(tmp_path: Path, sample_catalog: Path, capsys) -> None:
    code = main(["--use-defaults", "--json", "--dry-run", "-a", str(sample_catalog), "-o", str(tmp_path / "o")])

    data = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert data["ok"] is True
    assert data["dry_run"] is True
    assert data["image_count"] == 5


def test_dump_config_merges_overrides(tmp_path: Path, capsys) -> None:
    config_file = tmp_path / "cfg.json"
    config_file.write_text(json.dumps({"output_dir": "/saved/out", "verbose": True}), encoding="utf-8")

    code = main(["--config", str(config_file), "-a", "A.xcassets", "--no-namespace-default", "--dump-config"])

    data = json.loads(capsys.readouterr().out)
    assert code == EXIT_OK
    assert data["assets_path"] == "A.xcassets"
    assert data["output_dir"] == "/saved/out"
    assert data["verbose"] is True
    assert data["namespace_default"] is False


def test_save_config_persists_merged_values(tmp_path: Path, sample_catalog: Path) -> None:
    config_file = tmp_path / "cfg.json"
    out = tmp_path / "out"

    code = main(["--config", str(config_file), "--save-config", "-a", str(sample_catalog), "-o", str(out)])

    assert code == EXIT_OK
    stored = json.loads(config_file.read_text(encoding="utf-8"))
    assert stored["assets_path"] == str(sample_catalog)
    assert stored["output_dir"] == str(out)


def test_keyboard_interrupt_exit_code(tmp_path: Path, sample_catalog: Path) -> None:
    with patch("imageassetgen.interface.cli.app.run_pipeline", side_effect=KeyboardInterrupt):
        code = main(["--use-defaults", "-a", str(sample_catalog), "-o", str(tmp_path)])

    assert code == EXIT_INTERRUPTED


def test_unexpected_exception_exit_code(tmp_path: Path, sample_catalog: Path, capsys) -> None:
    with patch("imageassetgen.interface.cli.app.run_pipeline", side_effect=RuntimeError("boom")):
        code = main(["--use-defaults", "-a", str(sample_catalog), "-o", str(tmp_path)])

    assert code == EXIT_FAILURE
    assert "Generation failed: boom" in capsys.readouterr().err


def test_write_failure_exit_code(tmp_path: Path, sample_catalog: Path) -> None:
    with patch(
        "imageassetgen.core.pipeline.engine.write_generated_files",
        side_effect=OSError("read-only"),
    ):
        code = main(["--use-defaults", "-a", str(sample_catalog), "-o", str(tmp_path / "out")])

    assert code == EXIT_FAILURE


def test_assets_path_with_home_shortcut(tmp_path: Path, sample_catalog: Path, monkeypatch) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config_file = tmp_path / "cfg.json"
    config_file.write_text(json.dumps({"assets_path": "~/Assets.xcassets"}), encoding="utf-8")
    out = tmp_path / "out"

    code = main(["--config", str(config_file), "-o", str(out)])

    assert code == EXIT_OK
    assert (out / "ImageAsset.swift").exists()


def test_assets_path_with_env_variable(tmp_path: Path, sample_catalog: Path, monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_ROOT", str(tmp_path))

    code = main(["--use-defaults", "-a", "$CATALOG_ROOT/Assets.xcassets", "-o", str(tmp_path / "out")])

    assert code == EXIT_OK


def test_debug_logs_to_default_file(tmp_path: Path, sample_catalog: Path) -> None:
    log_file = tmp_path / "logs" / "imageassetgen.log"

    with patch("imageassetgen.interface.cli.app.get_default_log_path", return_value=str(log_file)):
        code = main(["--use-defaults", "--debug", "-a", str(sample_catalog), "-o", str(tmp_path / "out")])
    shutdown_logging()

    assert code == EXIT_OK
    assert "Pipeline completed successfully." in log_file.read_text(encoding="utf-8")


def test_explicit_log_file_wins_over_default(tmp_path: Path, sample_catalog: Path) -> None:
    log_file = tmp_path / "run.log"

    with patch("imageassetgen.interface.cli.app.get_default_log_path") as default_path:
        code = main([
            "--use-defaults", "--debug", "--log-file", str(log_file),
            "-a", str(sample_catalog), "-o", str(tmp_path / "out"),
        ])
    shutdown_logging()

    assert code == EXIT_OK
    default_path.assert_not_called()
    assert log_file.exists()
