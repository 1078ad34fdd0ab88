from __future__ import annotations

"""
Generated Source Persistence.

Writes generated Swift sources to the output directory. Each file is written
to a temporary sibling first and then moved into place, so an interrupted run
never leaves a truncated source behind.
"""

import logging
import os
from typing import Dict

logger = logging.getLogger(__name__)


def write_generated_files(files: Dict[str, str], output_dir: str) -> Dict[str, str]:
    """
    Persist every generated source into `output_dir`.

    Args:
        files: Mapping of filename to UTF-8 content.
        output_dir: Existing target directory.

    Returns:
        Dict[str, str]: Mapping of filename to absolute written path.

    Raises:
        OSError: If a file cannot be written.
    """
    written: Dict[str, str] = {}
    for filename, content in files.items():
        target = os.path.abspath(os.path.join(output_dir, filename))
        write_text_atomic(target, content)
        written[filename] = target
        logger.info(f"Wrote: {target}")
    return written


def write_text_atomic(path: str, content: str) -> None:
    """Write `content` to `path` via a temporary file and os.replace."""
    tmp_path = f"{path}.tmp"
    try:
        with open(tmp_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except OSError:
        if os.path.exists(tmp_path):
            os.remove(tmp_path)
        raise
