from __future__ import annotations

"""
Core generation pipeline.

Coordinates one generation run:
1. Validates and normalizes the configuration.
2. Validates the catalog and output paths.
3. Collects the catalog into a group tree.
4. Generates the Swift sources.
5. Writes them to the output directory (unless dry run).
"""

import logging
from typing import Any, Dict, Optional

from imageassetgen.core.analysis.asset_collector import collect_image_assets
from imageassetgen.core.analysis.namespace_resolver import NamespacePolicy
from imageassetgen.core.analysis.tree_renderer import render_group_tree
from imageassetgen.core.generation.code_generator import generate_enum_files
from imageassetgen.core.pipeline.components.writer import write_generated_files
from imageassetgen.core.pipeline.stages.setup import prepare_environment
from imageassetgen.core.pipeline.stages.validator import validate_config
from imageassetgen.domain.pipeline_models import (
    GenerationResult,
    create_error_result,
    create_success_result,
)

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        dry_run: bool = False,
) -> GenerationResult:
    """
    Execute a full generation run.

    Filesystem problems are reported through the returned result, never
    raised.

    Args:
        config: The configuration dictionary (raw or partial).
        dry_run: Generate in memory without writing any file.

    Returns:
        GenerationResult: Status, counts and generated file paths.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Environment
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    error_result, env = prepare_environment(cfg, dry_run=dry_run)
    if error_result is not None:
        return error_result

    assets_path = env["assets_path"]
    output_dir = env["output_dir"]

    # -------------------------------------------------------------------------
    # 2) Collection
    # -------------------------------------------------------------------------
    policy = NamespacePolicy(
        unreadable=bool(cfg["namespace_fallback"]),
        missing_metadata=bool(cfg["namespace_default"]),
    )
    tree = collect_image_assets(assets_path, policy=policy)

    if tree.is_empty:
        logger.warning(f"No image assets found in {assets_path}.")

    tree_lines = render_group_tree(tree)
    if cfg["verbose"]:
        logger.info("Catalog structure:\n" + "\n".join(tree_lines))

    # -------------------------------------------------------------------------
    # 3) Generation
    # -------------------------------------------------------------------------
    code = generate_enum_files(tree)
    files = code.files()

    # -------------------------------------------------------------------------
    # 4) Persistence
    # -------------------------------------------------------------------------
    if dry_run:
        logger.info("Dry run: skipping file writes.")
        generated = {name: f"(Simulated) {name}" for name in files}
    else:
        try:
            generated = write_generated_files(files, output_dir)
        except OSError as e:
            msg = f"Failed to write generated sources to {output_dir}: {e}"
            logger.error(msg)
            return create_error_result(msg, assets_path, output_dir, env["existing_files"])

    summary = {
        "images": tree.image_count,
        "groups": tree.group_count,
        "enum_types": tree.group_count + 1,
        "bytes": {name: len(content.encode("utf-8")) for name, content in files.items()},
        "existing_files_before_run": list(env["existing_files"]),
        "dry_run": dry_run,
        "namespace_policy": {
            "missing_metadata": policy.missing_metadata,
            "unreadable": policy.unreadable,
        },
    }

    logger.info("Pipeline completed successfully.")
    return create_success_result(
        assets_path=assets_path,
        output_dir=output_dir,
        image_count=tree.image_count,
        group_count=tree.group_count,
        generated_files=generated,
        existing_files=env["existing_files"],
        tree_lines=tree_lines,
        dry_run=dry_run,
        summary_extra=summary,
    )
