from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Helpers that build `.xcassets` catalogs on disk.
3. Shared fixtures for catalogs and configuration dictionaries.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Catalog Builders
# -----------------------------------------------------------------------------
def create_image_set(catalog: Path, rel_path: str) -> Path:
    """
    Create `<rel_path>.imageset` (with its own Contents.json) inside `catalog`.

    Intermediate folders are created without any group metadata.
    """
    image_set = catalog / f"{rel_path}.imageset"
    image_set.mkdir(parents=True, exist_ok=True)
    (image_set / "Contents.json").write_text(
        json.dumps({"images": [], "info": {"author": "xcode", "version": 1}}),
        encoding="utf-8",
    )
    return image_set


def create_group(catalog: Path, rel_path: str, provides_namespace: Optional[bool] = None) -> Path:
    """
    Create a group folder with a Contents.json sidecar.

    Args:
        catalog: Catalog root.
        rel_path: Slash-separated group path.
        provides_namespace: Flag written under properties; None writes a
                            sidecar without a properties block.
    """
    group = catalog / rel_path
    group.mkdir(parents=True, exist_ok=True)
    document: Dict[str, Any] = {"info": {"author": "xcode", "version": 1}}
    if provides_namespace is not None:
        document["properties"] = {"provides-namespace": provides_namespace}
    (group / "Contents.json").write_text(json.dumps(document), encoding="utf-8")
    return group


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_catalog(tmp_path: Path) -> Path:
    """
    Build the reference catalog.

    Structure:
    /Assets.xcassets
      app_logo.imageset
      background-image.imageset
      /Icons                 (namespace)
        home_icon.imageset
        /Navigation          (namespace)
          arrow_left.imageset
      /NoNamespace           (no namespace)
        shared_icon.imageset
    """
    catalog = tmp_path / "Assets.xcassets"
    catalog.mkdir()
    (catalog / "Contents.json").write_text(
        json.dumps({"info": {"author": "xcode", "version": 1}}), encoding="utf-8"
    )

    create_image_set(catalog, "app_logo")
    create_image_set(catalog, "background-image")

    create_group(catalog, "Icons", provides_namespace=True)
    create_image_set(catalog, "Icons/home_icon")
    create_group(catalog, "Icons/Navigation", provides_namespace=True)
    create_image_set(catalog, "Icons/Navigation/arrow_left")

    create_group(catalog, "NoNamespace", provides_namespace=False)
    create_image_set(catalog, "NoNamespace/shared_icon")

    return catalog


@pytest.fixture
def mock_config_dict(tmp_path: Path, sample_catalog: Path) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary for testing.

    Reflects the structure defined in 'imageassetgen.domain.config'.

    Returns:
        Dict[str, Any]: A sample configuration dictionary.
    """
    return {
        # IO Paths
        "assets_path": str(sample_catalog),
        "output_dir": str(tmp_path / "Generated"),

        # Namespace policy
        "namespace_default": True,
        "namespace_fallback": False,

        # Output
        "verbose": False,
    }
