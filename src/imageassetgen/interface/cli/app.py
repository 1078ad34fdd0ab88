from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merging
(defaults, config file, CLI overrides), pre-flight checks, pipeline
execution and result rendering.
"""

import json
import os
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from imageassetgen.core.pipeline.engine import run_pipeline
from imageassetgen.core.pipeline.stages.validator import validate_config
from imageassetgen.domain.config import get_default_config, load_config, save_config
from imageassetgen.domain.pipeline_models import GenerationResult
from imageassetgen.infra.fs import normalize_path
from imageassetgen.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_default_log_path,
    get_logger,
)
from imageassetgen.interface.cli import args as cli_args
from imageassetgen.utils.i18n import i18n

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the CLI workflow.

    Args:
        argv: Command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code.
    """
    # 1. Argument parsing
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Logging bootstrap
    log_level = "DEBUG" if args.debug else "WARNING"
    log_file = args.log_file or (get_default_log_path() if args.debug else None)
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=log_file))

    # 3. Configuration hierarchy
    base_conf = get_default_config() if args.use_defaults else load_config(args.config_file)
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return EXIT_OK

    # 4. Pre-flight checks
    assets_path = clean_conf["assets_path"]
    if not assets_path:
        print(f"ERROR: {i18n.t('cli.errors.missing_assets')}", file=sys.stderr)
        return EXIT_USAGE
    if not os.path.exists(normalize_path(assets_path, os.getcwd())):
        msg = i18n.t("cli.errors.path_not_exist", path=assets_path)
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_USAGE
    if not clean_conf["output_dir"]:
        print(f"ERROR: {i18n.t('cli.errors.missing_output')}", file=sys.stderr)
        return EXIT_USAGE

    if args.save_config:
        save_config(clean_conf, args.config_file)

    verbose = bool(clean_conf["verbose"]) and not args.json_output
    if verbose:
        print(i18n.t("cli.status.scanning", path=assets_path))

    # 5. Pipeline execution
    try:
        result = run_pipeline(clean_conf, dry_run=bool(args.dry_run))
    except KeyboardInterrupt:
        msg = i18n.t("cli.status.interrupted")
        logger.warning(msg)
        print(msg, file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        msg = i18n.t("cli.errors.pipeline_fail", error=str(e))
        logger.critical(msg, exc_info=True)
        print(f"ERROR: {msg}", file=sys.stderr)
        return EXIT_FAILURE

    # 6. Output rendering
    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_human_summary(result, verbose)

    if result.ok:
        return EXIT_OK
    return EXIT_USAGE if result.summary.get("stage") == "setup" else EXIT_FAILURE

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge non-None overrides for known keys into `base`."""
    out = dict(base)
    for k in get_default_config():
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING (HUMAN READABLE)
# -----------------------------------------------------------------------------

def _print_human_summary(result: GenerationResult, verbose: bool) -> None:
    """Print the generation result for a terminal user."""
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if result.image_count == 0:
        print(i18n.t("cli.status.no_assets", path=result.assets_path), file=sys.stderr)

    if verbose:
        print(i18n.t("cli.status.structure"))
        for line in result.tree_lines:
            print(f"  {line}")
        if not result.dry_run:
            for path in result.generated_files.values():
                print(i18n.t("cli.status.wrote", path=path))

    if result.dry_run:
        print(i18n.t("cli.status.dry_run"))
    else:
        print(i18n.t("cli.status.done", path=result.output_dir))

    if not verbose:
        for name in result.generated_files:
            print(f"   • {name}")
