from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse namespace
into configuration overrides.
"""

import argparse
from typing import Any, Dict

from imageassetgen.utils.i18n import i18n

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the imageassetgen CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="imageassetgen",
        description=i18n.t("app.description"),
    )

    # --- Path Management ---
    p.add_argument(
        "-a", "--assets",
        dest="assets_path",
        default=None,
        help=i18n.t("cli.args.assets"),
    )
    p.add_argument(
        "-o", "--output",
        dest="output_dir",
        default=None,
        help=i18n.t("cli.args.output"),
    )

    # --- Generation Behaviour ---
    p.add_argument(
        "--no-namespace-default",
        action="store_true",
        help=i18n.t("cli.args.no_namespace_default"),
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help=i18n.t("cli.args.dry_run"),
    )

    # --- Output Format ---
    p.add_argument(
        "-v", "--verbose",
        action="store_true",
        help=i18n.t("cli.args.verbose"),
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help=i18n.t("cli.args.json"),
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--config",
        dest="config_file",
        default=None,
        help=i18n.t("cli.args.config"),
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help=i18n.t("cli.args.defaults"),
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help=i18n.t("cli.args.dump"),
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help=i18n.t("cli.args.save"),
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help=i18n.t("cli.args.log_file"),
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help=i18n.t("cli.args.debug"),
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Paths are always present (None when not given); flags only appear when
    set, so they never reset a value loaded from a config file.
    """
    overrides: Dict[str, Any] = {
        "assets_path": args.assets_path,
        "output_dir": args.output_dir,
    }

    if args.verbose:
        overrides["verbose"] = True
    if args.no_namespace_default:
        overrides["namespace_default"] = False

    return overrides
