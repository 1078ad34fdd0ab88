from __future__ import annotations

"""
Group Tree Renderer.

Converts a collected GroupTree into an ASCII preview used by the verbose
CLI mode. Groups are listed before images at each level, both sorted.
"""

from typing import List

from imageassetgen.domain.group_models import GroupNode, GroupTree

NO_NAMESPACE_MARK = " (no namespace)"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_group_tree(tree: GroupTree) -> List[str]:
    """
    Render the whole tree, starting with the root's display name.

    Returns:
        List[str]: Preview lines, e.g. "├── Icons" or "│   └── home_icon".
    """
    lines: List[str] = [tree.root.display_name]
    render_tree_structure(tree, tree.root, lines, prefix="")
    return lines


def render_tree_structure(
        tree: GroupTree,
        node: GroupNode,
        lines: List[str],
        prefix: str = "",
) -> None:
    """
    Recursively append the entries below `node` to `lines`.

    Args:
        tree: Tree owning `node`.
        node: Node whose children and images are rendered.
        lines: Accumulator for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    children = tree.sorted_children(node)
    images = sorted(node.images)
    total = len(children) + len(images)

    for i, child in enumerate(children):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        mark = "" if child.provides_namespace else NO_NAMESPACE_MARK
        lines.append(f"{prefix}{connector}{child.name}/{mark}")

        new_prefix = prefix + ("    " if is_last else "│   ")
        render_tree_structure(tree, child, lines, prefix=new_prefix)

    for j, image in enumerate(images):
        is_last = (len(children) + j == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{image}")
