from __future__ import annotations

"""
Asset Group Tree Data Models.

Provides the arena-backed tree used to represent an asset catalog between
collection and code generation. Nodes are addressed by integer id and carry
their parent id and precomputed path, so ancestry lookups never search the
tree.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------

class AssetGenError(Exception):
    """Base class for unrecoverable asset generation errors."""


class TreeFrozenError(AssetGenError):
    """Raised when a collected (read-only) tree is mutated."""

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

ROOT_ID = 0


@dataclass
class GroupNode:
    """
    A single group level of the asset catalog.

    Attributes:
        node_id: Index of the node inside its owning GroupTree.
        name: Directory name of the group ("" for the root).
        parent_id: Index of the parent node, None for the root.
        path: Slash-joined path from the catalog root ("" for the root).
        images: Leaf image names in discovery order, without duplicates.
        children: Child node ids keyed by child name.
        provides_namespace: Whether the group contributes its path segment.
        is_root: True only for the synthetic root.
    """
    node_id: int
    name: str
    parent_id: Optional[int] = None
    path: str = ""
    images: List[str] = field(default_factory=list)
    children: Dict[str, int] = field(default_factory=dict)
    provides_namespace: bool = True
    is_root: bool = False

    @property
    def display_name(self) -> str:
        return "<Root>" if self.is_root else self.name


class GroupTree:
    """
    Arena of GroupNode objects rooted at a synthetic, unnamed root.

    The tree is mutable while the collector builds it and becomes read-only
    once `freeze()` is called.
    """

    def __init__(self) -> None:
        self._nodes: List[GroupNode] = [GroupNode(node_id=ROOT_ID, name="", is_root=True)]
        self._frozen = False

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def root(self) -> GroupNode:
        return self._nodes[ROOT_ID]

    @property
    def frozen(self) -> bool:
        return self._frozen

    def node(self, node_id: int) -> GroupNode:
        return self._nodes[node_id]

    def parent_of(self, node: GroupNode) -> Optional[GroupNode]:
        if node.parent_id is None:
            return None
        return self._nodes[node.parent_id]

    def full_path(self, node: GroupNode) -> str:
        """Return the slash-joined path of `node` from the root."""
        return node.path

    def find(self, path: str) -> Optional[GroupNode]:
        """
        Resolve a slash-joined group path to its node.

        Args:
            path: Relative group path, e.g. "Icons/Navigation".

        Returns:
            Optional[GroupNode]: The matching node or None.
        """
        current = self.root
        for segment in [p for p in path.split("/") if p]:
            child_id = current.children.get(segment)
            if child_id is None:
                return None
            current = self._nodes[child_id]
        return current

    def sorted_children(self, node: GroupNode) -> List[GroupNode]:
        """Return the children of `node` ordered by name."""
        return [self._nodes[node.children[name]] for name in sorted(node.children)]

    def iter_groups(self, node: Optional[GroupNode] = None) -> Iterator[GroupNode]:
        """Yield every non-root group in sorted pre-order."""
        start = node if node is not None else self.root
        for child in self.sorted_children(start):
            yield child
            yield from self.iter_groups(child)

    @property
    def group_count(self) -> int:
        return len(self._nodes) - 1

    @property
    def image_count(self) -> int:
        return sum(len(n.images) for n in self._nodes)

    @property
    def is_empty(self) -> bool:
        return self.group_count == 0 and not self.root.images

    def __len__(self) -> int:
        return len(self._nodes)

    # -------------------------------------------------------------------------
    # Mutation (collection phase only)
    # -------------------------------------------------------------------------

    def child_node(self, parent: GroupNode, name: str) -> GroupNode:
        """
        Return the child of `parent` called `name`, creating it if needed.

        Args:
            parent: Parent node.
            name: Child group name.

        Returns:
            GroupNode: The existing or newly created child.

        Raises:
            TreeFrozenError: If a new node would be added to a frozen tree.
        """
        existing = parent.children.get(name)
        if existing is not None:
            return self._nodes[existing]

        self._ensure_mutable()
        child = GroupNode(
            node_id=len(self._nodes),
            name=name,
            parent_id=parent.node_id,
            path=f"{parent.path}/{name}" if parent.path else name,
        )
        self._nodes.append(child)
        parent.children[name] = child.node_id
        return child

    def add_image(self, node: GroupNode, image: str) -> None:
        """Register a leaf image under `node`, ignoring duplicates."""
        self._ensure_mutable()
        if image not in node.images:
            node.images.append(image)

    def set_namespace(self, node: GroupNode, provides_namespace: bool) -> None:
        self._ensure_mutable()
        node.provides_namespace = provides_namespace

    def freeze(self) -> "GroupTree":
        self._frozen = True
        return self

    def _ensure_mutable(self) -> None:
        if self._frozen:
            raise TreeFrozenError("Group tree is read-only after collection.")


@dataclass(frozen=True)
class EnumTypeInfo:
    """
    Fully qualified nested enum type emitted by the generator.

    Attributes:
        enum_path: Dot-joined path, e.g. "ImageAsset.Icons.Navigation".
        enum_name: Bare type name, e.g. "Navigation".
    """
    enum_path: str
    enum_name: str
