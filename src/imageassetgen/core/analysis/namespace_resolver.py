from __future__ import annotations

"""
Group Namespace Resolver.

Reads the `Contents.json` sidecar of an asset catalog group folder and
decides whether the group provides a namespace, i.e. whether its folder name
prefixes the raw values of the images below it. Any uncertainty (missing,
unreadable or malformed metadata) resolves to an explicit fallback value
instead of an exception.
"""

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict

from imageassetgen.domain.constants import METADATA_FILENAME, NAMESPACE_KEY_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NamespacePolicy:
    """
    Fallback values used while resolving namespace flags.

    Attributes:
        unreadable: Flag returned when a sidecar is absent, unreadable or
                    malformed.
        missing_metadata: Flag given to groups that have no sidecar at all
                          when the tree is built.
    """
    unreadable: bool = False
    missing_metadata: bool = True

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def resolve_provides_namespace(
        catalog_root: str,
        group_rel_path: str,
        *,
        fallback: bool = False,
) -> bool:
    """
    Resolve the 'provides-namespace' flag of one group folder.

    Args:
        catalog_root: Path of the asset catalog.
        group_rel_path: Slash-separated path of the group, relative to the
                        catalog root.
        fallback: Value returned on any missing or malformed metadata.

    Returns:
        bool: The boolean stored at properties.provides-namespace, or
              `fallback`.
    """
    segments = [p for p in group_rel_path.split("/") if p]
    contents_path = os.path.join(catalog_root, *segments, METADATA_FILENAME)

    if not os.path.isfile(contents_path):
        logger.debug(f"No metadata for group '{group_rel_path}'. Using fallback={fallback}.")
        return fallback

    try:
        with open(contents_path, "r", encoding="utf-8") as f:
            document = json.load(f)
    except (OSError, UnicodeDecodeError, ValueError) as e:
        logger.warning(f"Unreadable metadata '{contents_path}': {e}. Using fallback={fallback}.")
        return fallback

    value = _lookup(document, NAMESPACE_KEY_PATH)
    # bool is checked exactly: JSON 0/1 are not accepted as flags
    if not isinstance(value, bool):
        logger.debug(
            f"Metadata '{contents_path}' has no boolean "
            f"'{'.'.join(NAMESPACE_KEY_PATH)}'. Using fallback={fallback}."
        )
        return fallback

    return value


class NamespaceResolver:
    """
    Memoizing front-end to `resolve_provides_namespace` for one collection run.

    Attributes:
        catalog_root: Catalog being collected.
        fallback: Value for absent or malformed sidecars.
        calls: Number of filesystem resolutions performed (cache misses).
    """

    def __init__(self, catalog_root: str, fallback: bool = False) -> None:
        self.catalog_root = catalog_root
        self.fallback = fallback
        self.calls = 0
        self._cache: Dict[str, bool] = {}

    def resolve(self, group_rel_path: str) -> bool:
        key = os.path.abspath(os.path.join(self.catalog_root, group_rel_path))
        if key not in self._cache:
            self.calls += 1
            self._cache[key] = resolve_provides_namespace(
                self.catalog_root, group_rel_path, fallback=self.fallback
            )
        return self._cache[key]

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _lookup(document: Any, key_path: tuple) -> Any:
    """Follow `key_path` through nested dicts, returning None on any miss."""
    current = document
    for key in key_path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current
