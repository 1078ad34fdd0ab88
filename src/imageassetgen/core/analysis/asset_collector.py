from __future__ import annotations

"""
Asset Catalog Collector.

Walks an `.xcassets` directory and builds the GroupTree consumed by the code
generator. Group folders become tree nodes, `.imageset` entries become leaf
images, and each group's namespace flag is resolved from its sidecar
metadata. An unreadable catalog yields an empty tree, never an exception.
"""

import logging
import os
from typing import Dict, List, Optional, Tuple

from imageassetgen.core.analysis.namespace_resolver import NamespacePolicy, NamespaceResolver
from imageassetgen.domain.constants import ASSET_ENTRY_SUFFIX, METADATA_FILENAME
from imageassetgen.domain.group_models import GroupTree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def collect_image_assets(
        path: str,
        *,
        policy: Optional[NamespacePolicy] = None,
) -> GroupTree:
    """
    Collect every image set of a catalog into a frozen GroupTree.

    Args:
        path: Path of the asset catalog directory.
        policy: Namespace fallback values. Defaults to NamespacePolicy().

    Returns:
        GroupTree: The populated tree, or a root-only tree if `path` cannot
                   be enumerated.
    """
    policy = policy or NamespacePolicy()
    tree = GroupTree()
    catalog_root = os.path.abspath(path)

    if not os.path.isdir(catalog_root):
        logger.error(f"Cannot enumerate asset catalog: {path}")
        return tree.freeze()

    logger.info(f"Collecting image assets from: {catalog_root}")

    # 1. Discovery walk: sidecar-bearing group folders and asset entries
    group_paths, asset_paths = _scan_catalog(catalog_root)

    # 2. Namespace resolution, one sidecar read per group
    resolver = NamespaceResolver(catalog_root, fallback=policy.unreadable)
    namespace_info: Dict[str, bool] = {
        group_path: resolver.resolve(group_path) for group_path in group_paths
    }

    # 3. Tree construction
    _build_node_tree(tree, asset_paths, namespace_info, policy.missing_metadata)

    logger.info(
        f"Collected {tree.image_count} images in {tree.group_count} groups "
        f"({resolver.calls} group metadata files read)."
    )
    return tree.freeze()

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (SCANNING)
# -----------------------------------------------------------------------------

def _scan_catalog(catalog_root: str) -> Tuple[List[str], List[str]]:
    """
    Walk the catalog in sorted order.

    Asset entries are recorded but not descended into, so metadata and
    images inside an `.imageset` never count as groups.

    Returns:
        Tuple[List[str], List[str]]: (group paths with a sidecar, asset entry
                                      paths), both slash-separated and
                                      relative to the catalog root.
    """
    group_paths: List[str] = []
    asset_paths: List[str] = []

    for root, dirs, files in os.walk(catalog_root, onerror=_log_walk_error):
        dirs.sort()

        rel_root = os.path.relpath(root, catalog_root)
        rel_root = "" if rel_root == "." else rel_root.replace(os.sep, "/")

        if rel_root and METADATA_FILENAME in files:
            group_paths.append(rel_root)

        for d in dirs:
            if d.endswith(ASSET_ENTRY_SUFFIX):
                asset_paths.append(f"{rel_root}/{d}" if rel_root else d)

        # In-place pruning keeps os.walk out of asset entries
        dirs[:] = [d for d in dirs if not d.endswith(ASSET_ENTRY_SUFFIX)]

    return group_paths, asset_paths


def _log_walk_error(error: OSError) -> None:
    logger.warning(f"Skipping unreadable catalog folder '{error.filename}': {error.strerror}")

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (TREE CONSTRUCTION)
# -----------------------------------------------------------------------------

def _build_node_tree(
        tree: GroupTree,
        asset_paths: List[str],
        namespace_info: Dict[str, bool],
        missing_metadata: bool,
) -> None:
    """
    Insert every asset entry into `tree`.

    Intermediate segments are groups; the last segment, without the entry
    suffix, is the image name. A group's namespace flag is assigned once,
    when the node is first created.
    """
    for asset in asset_paths:
        trimmed = asset[: -len(ASSET_ENTRY_SUFFIX)]
        components = trimmed.split("/")

        current = tree.root
        for index, component in enumerate(components[:-1]):
            is_new = component not in current.children
            current = tree.child_node(current, component)
            if is_new:
                group_path = "/".join(components[: index + 1])
                tree.set_namespace(current, namespace_info.get(group_path, missing_metadata))

        tree.add_image(current, components[-1])
