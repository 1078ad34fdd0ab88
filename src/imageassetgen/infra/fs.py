from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path normalization, user data directory resolution and output directory
checks shared by the pipeline stages and the configuration layer.
"""

import os
from typing import List, Optional, Tuple

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "ImageAssetGen"
UNIX_APP_DIR_NAME = ".imageassetgen"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the OS-specific directory for persistent tool data.

    - Windows: %LOCALAPPDATA%/ImageAssetGen
    - Linux/Mac: ~/.imageassetgen

    The directory is created on a best-effort basis.

    Returns:
        str: Absolute path to the data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        home = os.path.expanduser("~")
        path = os.path.join(home, UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Expands environment variables and `~`. Empty input resolves to
    `fallback`.

    Args:
        path: Raw input path string.
        fallback: Path to use when `path` is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    p = os.path.expandvars(os.path.expanduser(p))
    return os.path.abspath(p)

# -----------------------------------------------------------------------------
# FILESYSTEM VALIDATION API
# -----------------------------------------------------------------------------

def check_existing_output_files(output_dir: str, names: List[str]) -> List[str]:
    """
    List the artifacts that already exist in the output directory.

    Args:
        output_dir: Directory to inspect.
        names: Filenames to check.

    Returns:
        List[str]: Absolute paths of files that already exist.
    """
    existing: List[str] = []
    for n in names:
        full = os.path.join(output_dir, n)
        if os.path.exists(full):
            existing.append(full)
    return existing


def safe_mkdir(path: str) -> Tuple[bool, Optional[str]]:
    """
    Create a directory hierarchy without raising.

    Returns:
        Tuple[bool, Optional[str]]: (Success flag, error message if any).
    """
    try:
        os.makedirs(path, exist_ok=True)
        return True, None
    except OSError as e:
        return False, str(e)
