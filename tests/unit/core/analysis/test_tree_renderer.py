from __future__ import annotations

"""
Unit tests for the Group Tree Renderer.

Verifies the ASCII preview: connectors, indentation, group-before-image
ordering and the no-namespace marker.
"""

from pathlib import Path

from imageassetgen.core.analysis.asset_collector import collect_image_assets
from imageassetgen.core.analysis.tree_renderer import render_group_tree
from imageassetgen.domain.group_models import GroupTree


def test_render_reference_catalog(sample_catalog: Path) -> None:
    """TC-01: Full preview of the reference catalog."""
    lines = render_group_tree(collect_image_assets(str(sample_catalog)))

    assert lines == [
        "<Root>",
        "├── Icons/",
        "│   ├── Navigation/",
        "│   │   └── arrow_left",
        "│   └── home_icon",
        "├── NoNamespace/ (no namespace)",
        "│   └── shared_icon",
        "├── app_logo",
        "└── background-image",
    ]


def test_render_empty_tree() -> None:
    assert render_group_tree(GroupTree().freeze()) == ["<Root>"]


def test_render_sorts_images() -> None:
    tree = GroupTree()
    tree.add_image(tree.root, "zebra")
    tree.add_image(tree.root, "apple")

    assert render_group_tree(tree) == ["<Root>", "├── apple", "└── zebra"]


def test_last_group_uses_blank_prefix() -> None:
    tree = GroupTree()
    group = tree.child_node(tree.root, "Only")
    tree.add_image(group, "icon")

    assert render_group_tree(tree) == ["<Root>", "└── Only/", "    └── icon"]
