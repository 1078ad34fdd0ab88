from __future__ import annotations

"""
Domain Constants and Catalog Conventions.

Centralizes the on-disk conventions of Xcode asset catalogs and the fixed
names of the generated Swift artifacts.
"""

from typing import Final, Tuple

# -----------------------------------------------------------------------------
# CATALOG CONVENTIONS
# -----------------------------------------------------------------------------

CATALOG_SUFFIX: Final[str] = ".xcassets"
ASSET_ENTRY_SUFFIX: Final[str] = ".imageset"
METADATA_FILENAME: Final[str] = "Contents.json"

# Key path of the namespace flag inside a group's Contents.json
NAMESPACE_KEY_PATH: Final[Tuple[str, ...]] = ("properties", "provides-namespace")

# -----------------------------------------------------------------------------
# GENERATED ARTIFACTS
# -----------------------------------------------------------------------------

ROOT_ENUM_NAME: Final[str] = "ImageAsset"
GENERATOR_NAME: Final[str] = "ImageAssetGenerator"

BASE_ENUM_FILENAME: Final[str] = "ImageAsset.swift"
UIKIT_FILENAME: Final[str] = "UIImage+ImageAsset.swift"
SWIFTUI_FILENAME: Final[str] = "Image+ImageAsset.swift"

INDENT: Final[str] = "    "

# Identifier placeholders for names that sanitize to nothing
PLACEHOLDER_VALUE_IDENTIFIER: Final[str] = "unnamedImage"
PLACEHOLDER_TYPE_IDENTIFIER: Final[str] = "UnnamedGroup"
