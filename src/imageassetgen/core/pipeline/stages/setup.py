from __future__ import annotations

"""
Pipeline Setup & Environment Preparation Stage.

1. Path normalization and validation of the asset catalog.
2. Validation of the output location.
3. Detection of artifacts that will be overwritten.
4. Output directory creation (skipped on dry runs).
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from imageassetgen.domain.constants import (
    BASE_ENUM_FILENAME,
    CATALOG_SUFFIX,
    SWIFTUI_FILENAME,
    UIKIT_FILENAME,
)
from imageassetgen.domain.pipeline_models import GenerationResult, create_error_result
from imageassetgen.infra.fs import check_existing_output_files, normalize_path, safe_mkdir

logger = logging.getLogger(__name__)

OUTPUT_FILENAMES = [BASE_ENUM_FILENAME, UIKIT_FILENAME, SWIFTUI_FILENAME]


def prepare_environment(
        cfg: Dict[str, Any],
        dry_run: bool,
) -> Tuple[Optional[GenerationResult], Dict[str, Any]]:
    """
    Validate paths and prepare the output directory.

    Args:
        cfg: Validated configuration dictionary.
        dry_run: Whether execution is a simulation (no directory creation).

    Returns:
        Tuple[Optional[GenerationResult], Dict[str, Any]]:
            An error result and an empty context if setup fails, else None
            and the environment context.
    """
    cwd = os.getcwd()
    raw_assets = cfg.get("assets_path", "")

    if not raw_assets:
        msg = "No asset catalog path was provided."
        logger.error(msg)
        return _setup_error(msg, ""), {}

    assets_path = normalize_path(raw_assets, cwd)

    # --- 1. Catalog validation ---
    if not os.path.isdir(assets_path):
        msg = f"Assets path does not exist: {assets_path}"
        logger.error(msg)
        return _setup_error(msg, assets_path), {}

    if not assets_path.rstrip(os.sep).endswith(CATALOG_SUFFIX):
        msg = f"Must provide a valid {CATALOG_SUFFIX} folder: {assets_path}"
        logger.error(msg)
        return _setup_error(msg, assets_path), {}

    # --- 2. Output validation ---
    raw_output = cfg.get("output_dir", "")
    if not raw_output:
        msg = "No output directory was provided."
        logger.error(msg)
        return _setup_error(msg, assets_path), {}

    output_dir = normalize_path(raw_output, cwd)
    parent = os.path.dirname(output_dir)
    if parent and not os.path.isdir(parent):
        msg = f"Output parent folder does not exist: {parent}"
        logger.error(msg)
        return _setup_error(msg, assets_path, output_dir), {}

    # --- 3. Overwrite detection ---
    existing_files = check_existing_output_files(output_dir, OUTPUT_FILENAMES)
    if existing_files:
        logger.debug(f"Artifacts that will be overwritten: {existing_files}")

    # --- 4. Output directory ---
    if not dry_run:
        ok, err = safe_mkdir(output_dir)
        if not ok:
            msg = f"Failed to create output directory {output_dir}: {err}"
            logger.critical(msg)
            return _setup_error(msg, assets_path, output_dir, existing_files), {}

    env_context = {
        "assets_path": assets_path,
        "output_dir": output_dir,
        "existing_files": existing_files,
    }

    logger.debug("Pipeline environment setup complete.")
    return None, env_context


def _setup_error(
        msg: str,
        assets_path: str,
        output_dir: str = "",
        existing_files: Optional[List[str]] = None,
) -> GenerationResult:
    """Build an error result tagged as a setup (input validation) failure."""
    return create_error_result(
        msg, assets_path, output_dir, existing_files,
        summary_extra={"stage": "setup"},
    )
