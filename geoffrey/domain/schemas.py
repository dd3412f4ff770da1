"""
Data schemas for geoff commands.

Rules:
- Specs are immutable and consumed once per invocation
- The filesystem is authoritative; ScaffoldResult is for reporting only
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

from geoffrey.domain.errors import ErrorCodes, GeoffError


def _base_name(path: Path) -> str:
    """Last path component ("./test_project/" -> "test_project")."""
    return path.name or path.resolve().name


# =============================================================================
# Input Specs
# =============================================================================

@dataclass(frozen=True)
class ProjectSpec:
    """Input for `geoff create`."""
    name: Path
    create_parents: bool = False

    @property
    def base_name(self) -> str:
        return _base_name(self.name)


class DataSourceKind(str, Enum):
    """Metadata template family for a data source."""
    DATABASE = "database"
    EXTRACT = "extract"
    WEB = "web"
    DEFAULT = "default"  # no flag given


@dataclass(frozen=True)
class DataSourceSpec:
    """Input for `geoff add data-source`."""
    name: Path
    kind: DataSourceKind = DataSourceKind.DEFAULT

    @property
    def base_name(self) -> str:
        return _base_name(self.name)

    @classmethod
    def from_flags(
        cls,
        name: Path,
        database: bool = False,
        extract: bool = False,
        web: bool = False,
    ) -> "DataSourceSpec":
        """
        Resolve the three selector flags into a DataSourceKind.

        Args:
            name: data source name
            database: --database given
            extract: --extract given
            web: --web given

        Returns:
            DataSourceSpec

        Raises:
            GeoffError: CONFLICTING_OPTIONS if more than one flag is set
        """
        selected = [
            kind
            for kind, flag in (
                (DataSourceKind.DATABASE, database),
                (DataSourceKind.EXTRACT, extract),
                (DataSourceKind.WEB, web),
            )
            if flag
        ]

        if len(selected) > 1:
            options = [f"--{kind.value}" for kind in selected]
            raise GeoffError(
                ErrorCodes.CONFLICTING_OPTIONS,
                f"Only one of --database, --extract or --web can be used, got {' '.join(options)}",
                options=options,
            )

        kind = selected[0] if selected else DataSourceKind.DEFAULT
        return cls(name=Path(name), kind=kind)


# =============================================================================
# Summary Tree
# =============================================================================

@dataclass
class TreeNode:
    """One line of the created-files summary."""
    text: str
    children: list["TreeNode"] = field(default_factory=list)

    def add_child(self, text: str) -> "TreeNode":
        """Append a child and return it (for nesting)."""
        child = TreeNode(text)
        self.children.append(child)
        return child

    def render(self) -> str:
        """
        Render as a box-drawing tree.

        🖿 data_sources
        └─ 🖿 test_data_source
           └─ 🗎 metadata.md
        """
        lines = [self.text]
        self._render_children("", lines)
        return "\n".join(lines)

    def _render_children(self, prefix: str, lines: list[str]) -> None:
        for i, child in enumerate(self.children):
            last = i == len(self.children) - 1
            lines.append(f"{prefix}{'└─ ' if last else '├─ '}{child.text}")
            child._render_children(prefix + ("   " if last else "│  "), lines)


@dataclass
class ScaffoldResult:
    """Outcome of a scaffolding command."""
    name: str  # base name shown in the banner
    root: Path
    tree: TreeNode
    created_paths: list[Path] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "root": str(self.root),
            "created_paths": [str(p) for p in self.created_paths],
            "tree": self.tree.render(),
        }
