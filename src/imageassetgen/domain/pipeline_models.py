from __future__ import annotations

"""
Generation Domain Data Models.

Defines the generated source bundle and the result object exchanged between
the pipeline engine and the CLI.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from imageassetgen.domain.constants import (
    BASE_ENUM_FILENAME,
    SWIFTUI_FILENAME,
    UIKIT_FILENAME,
)

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class GeneratedCode:
    """
    Swift sources produced from one group tree.

    Attributes:
        base_enum: Source of the nested `ImageAsset` enum.
        wrappers: Wrapper sources keyed by wrapper kind ("uikit", "swiftui").
        filenames: Target filename per wrapper kind.
    """
    base_enum: str
    wrappers: Dict[str, str] = field(default_factory=dict)
    filenames: Dict[str, str] = field(default_factory=dict)

    @property
    def uikit_ext(self) -> str:
        return self.wrappers.get("uikit", "")

    @property
    def swiftui_ext(self) -> str:
        return self.wrappers.get("swiftui", "")

    def files(self) -> Dict[str, str]:
        """Return the ordered mapping of output filename to content."""
        out = {BASE_ENUM_FILENAME: self.base_enum}
        default_names = {"uikit": UIKIT_FILENAME, "swiftui": SWIFTUI_FILENAME}
        for kind, content in self.wrappers.items():
            name = self.filenames.get(kind) or default_names.get(kind) or f"{kind}.swift"
            out[name] = content
        return out


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of a complete generation run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        assets_path: Normalized catalog directory that was scanned.
        output_dir: Directory receiving the generated sources.
        image_count: Number of images found in the catalog.
        group_count: Number of groups (nested enums) found.
        dry_run: Whether files were only simulated.
        generated_files: Filename to absolute path of each artifact.
        existing_files: Artifacts that already existed before the run.
        tree_lines: ASCII preview of the collected structure.
        summary: Technical execution summary.
    """
    ok: bool
    error: str

    assets_path: str
    output_dir: str

    image_count: int = 0
    group_count: int = 0
    dry_run: bool = False

    generated_files: Dict[str, str] = field(default_factory=dict)
    existing_files: List[str] = field(default_factory=list)
    tree_lines: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        assets_path: str,
        output_dir: str = "",
        existing_files: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """
    Create a failed generation result.

    Args:
        error: Detailed error description.
        assets_path: The catalog path that was targeted.
        output_dir: Resolved output directory, if known.
        existing_files: Artifacts found in the output directory.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        GenerationResult: An immutable error result.
    """
    return GenerationResult(
        ok=False,
        error=error,
        assets_path=assets_path,
        output_dir=output_dir,
        existing_files=existing_files or [],
        summary=summary_extra or {},
    )


def create_success_result(
        assets_path: str,
        output_dir: str,
        image_count: int,
        group_count: int,
        generated_files: Dict[str, str],
        existing_files: Optional[List[str]] = None,
        tree_lines: Optional[List[str]] = None,
        dry_run: bool = False,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> GenerationResult:
    """Create a successful generation result."""
    return GenerationResult(
        ok=True,
        error="",
        assets_path=assets_path,
        output_dir=output_dir,
        image_count=image_count,
        group_count=group_count,
        dry_run=dry_run,
        generated_files=dict(generated_files),
        existing_files=existing_files or [],
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
