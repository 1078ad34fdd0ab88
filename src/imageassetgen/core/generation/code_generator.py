from __future__ import annotations

"""
Swift Code Generator.

Turns a collected GroupTree into Swift sources: the nested `ImageAsset`
enum and one wrapper file per image-loading API. Wrapper files share a
single traversal of the tree and differ only in their WrapperTemplate.
Every traversal is explicitly sorted, so output is byte-identical for an
unchanged tree.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

from imageassetgen.core.analysis.asset_collector import collect_image_assets
from imageassetgen.core.analysis.namespace_resolver import NamespacePolicy
from imageassetgen.core.processing.identifiers import (
    IdentifierScope,
    swift_string_literal,
    to_type_identifier,
    to_value_identifier,
)
from imageassetgen.domain.constants import (
    GENERATOR_NAME,
    INDENT,
    PLACEHOLDER_TYPE_IDENTIFIER,
    PLACEHOLDER_VALUE_IDENTIFIER,
    ROOT_ENUM_NAME,
    SWIFTUI_FILENAME,
    UIKIT_FILENAME,
)
from imageassetgen.domain.group_models import EnumTypeInfo, GroupNode, GroupTree
from imageassetgen.domain.pipeline_models import GeneratedCode

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# WRAPPER TEMPLATES
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class WrapperTemplate:
    """
    Text template binding enum types to one image-loading API.

    Attributes:
        kind: Short key of the wrapper ("uikit", "swiftui").
        filename: Output filename of the wrapper source.
        preamble: Text emitted before the first binding.
        binding: Per-type declaration; `{enum_path}` is substituted.
        postamble: Text emitted after the last binding.
    """
    kind: str
    filename: str
    preamble: str
    binding: str
    postamble: str = ""

    def render(self, enum_paths: Sequence[str]) -> str:
        blocks = [self.binding.format(enum_path=p) for p in enum_paths]
        return self.preamble + "".join(blocks) + self.postamble


UIKIT_WRAPPER = WrapperTemplate(
    kind="uikit",
    filename=UIKIT_FILENAME,
    preamble="#if canImport(UIKit)\nimport UIKit\n\n",
    binding=(
        "extension UIImage {{\n"
        "    convenience init?(asset: {enum_path}) {{\n"
        "        self.init(named: asset.rawValue)\n"
        "    }}\n"
        "}}\n"
    ),
    postamble="#endif\n",
)

SWIFTUI_WRAPPER = WrapperTemplate(
    kind="swiftui",
    filename=SWIFTUI_FILENAME,
    preamble="import SwiftUI\n\n",
    binding=(
        "extension Image {{\n"
        "    init(asset: {enum_path}) {{\n"
        "        self.init(asset.rawValue)\n"
        "    }}\n"
        "}}\n"
    ),
)

DEFAULT_WRAPPERS: Tuple[WrapperTemplate, ...] = (UIKIT_WRAPPER, SWIFTUI_WRAPPER)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_code(
        assets_path: str,
        *,
        policy: Optional[NamespacePolicy] = None,
        wrappers: Sequence[WrapperTemplate] = DEFAULT_WRAPPERS,
) -> GeneratedCode:
    """Collect a catalog and generate its Swift sources in one call."""
    tree = collect_image_assets(assets_path, policy=policy)
    return generate_enum_files(tree, wrappers=wrappers)


def generate_enum_files(
        tree: GroupTree,
        *,
        wrappers: Sequence[WrapperTemplate] = DEFAULT_WRAPPERS,
) -> GeneratedCode:
    """
    Generate the base enum and every wrapper source for `tree`.

    Args:
        tree: Collected group tree. It is only read.
        wrappers: Wrapper templates to render.

    Returns:
        GeneratedCode: Base enum source plus one source per wrapper kind.
    """
    base_enum = generate_base_enum(tree)

    enum_paths = [ROOT_ENUM_NAME] + [info.enum_path for info in collect_enum_types(tree)]
    rendered = {w.kind: w.render(enum_paths) for w in wrappers}
    filenames = {w.kind: w.filename for w in wrappers}

    logger.debug(f"Generated {len(enum_paths)} enum types for {len(rendered)} wrappers.")
    return GeneratedCode(base_enum=base_enum, wrappers=rendered, filenames=filenames)


def generate_base_enum(tree: GroupTree) -> str:
    """Render the `ImageAsset` enum with one nested enum per group."""
    lines: List[str] = [
        f"// Auto-generated by {GENERATOR_NAME}",
        "import Foundation",
        "",
        f"enum {ROOT_ENUM_NAME}: String {{",
    ]

    root = tree.root
    children = tree.sorted_children(root)

    lines.extend(_render_cases(root.images, INDENT, lambda image: image))
    if root.images and children:
        lines.append("")
    lines.extend(_render_child_enums(tree, root, INDENT, path_prefix=""))

    lines.append("}")
    return "\n".join(lines) + "\n"


def collect_enum_types(tree: GroupTree) -> List[EnumTypeInfo]:
    """
    List every nested enum type in sorted pre-order.

    Type names are claimed through the same IdentifierScope rules as the
    base enum, so the qualified paths always match the generated types.
    """
    enum_types: List[EnumTypeInfo] = []
    _collect_enum_types(tree, tree.root, ROOT_ENUM_NAME, enum_types)
    return enum_types

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (BASE ENUM)
# -----------------------------------------------------------------------------

def _render_child_enums(
        tree: GroupTree,
        node: GroupNode,
        indent: str,
        path_prefix: str,
) -> List[str]:
    """
    Render the nested enums of `node`'s children.

    `path_prefix` is the namespace path accumulated by the ancestors that
    provide a namespace. A group without a namespace passes it through
    unchanged to its own children.
    """
    lines: List[str] = []
    children = tree.sorted_children(node)
    type_names = _type_names(children)

    for index, (child, type_name) in enumerate(zip(children, type_names)):
        if index:
            lines.append("")

        lines.append(f"{indent}enum {type_name}: String {{")

        if child.provides_namespace:
            child_prefix = f"{path_prefix}/{child.name}" if path_prefix else child.name
            lines.extend(
                _render_cases(child.images, indent + INDENT, lambda image: f"{child_prefix}/{image}")
            )
        else:
            child_prefix = path_prefix
            lines.extend(_render_cases(child.images, indent + INDENT, lambda image: image))

        if child.images and child.children:
            lines.append("")
        lines.extend(_render_child_enums(tree, child, indent + INDENT, child_prefix))

        lines.append(f"{indent}}}")

    return lines


def _render_cases(
        images: List[str],
        indent: str,
        raw_value: Callable[[str], str],
) -> List[str]:
    """Render one `case` line per image, sorted by original image name."""
    scope = IdentifierScope(PLACEHOLDER_VALUE_IDENTIFIER)
    lines: List[str] = []
    for image in sorted(images):
        case_name = scope.claim(to_value_identifier(image), image)
        lines.append(f"{indent}case {case_name} = {swift_string_literal(raw_value(image))}")
    return lines


def _type_names(children: List[GroupNode]) -> List[str]:
    """Claim a unique type identifier for each (already sorted) child."""
    scope = IdentifierScope(PLACEHOLDER_TYPE_IDENTIFIER)
    return [scope.claim(to_type_identifier(child.name), child.name) for child in children]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS (WRAPPERS)
# -----------------------------------------------------------------------------

def _collect_enum_types(
        tree: GroupTree,
        node: GroupNode,
        parent_path: str,
        enum_types: List[EnumTypeInfo],
) -> None:
    children = tree.sorted_children(node)
    for child, type_name in zip(children, _type_names(children)):
        enum_path = f"{parent_path}.{type_name}"
        enum_types.append(EnumTypeInfo(enum_path=enum_path, enum_name=type_name))
        _collect_enum_types(tree, child, enum_path, enum_types)
