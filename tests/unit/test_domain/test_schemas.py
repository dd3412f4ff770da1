"""
test_schemas.py - specs, flag resolution and summary tree tests
"""

from pathlib import Path

import pytest

from geoffrey.domain.errors import ErrorCodes, GeoffError
from geoffrey.domain.schemas import (
    DataSourceKind,
    DataSourceSpec,
    ProjectSpec,
    ScaffoldResult,
    TreeNode,
)

# =============================================================================
# Specs
# =============================================================================


class TestProjectSpec:
    """ProjectSpec tests."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("test_project", "test_project"),
            ("./test_project/", "test_project"),
            ("projects/2024/test_project", "test_project"),
        ],
    )
    def test_base_name(self, name: str, expected: str):
        assert ProjectSpec(Path(name)).base_name == expected

    def test_parents_default_off(self):
        assert ProjectSpec(Path("test_project")).create_parents is False

    def test_immutable(self):
        spec = ProjectSpec(Path("test_project"))

        with pytest.raises(AttributeError):
            spec.create_parents = True  # type: ignore[misc]


class TestDataSourceSpecFromFlags:
    """DataSourceSpec.from_flags tests."""

    @pytest.mark.parametrize(
        "flags, kind",
        [
            ({}, DataSourceKind.DEFAULT),
            ({"database": True}, DataSourceKind.DATABASE),
            ({"extract": True}, DataSourceKind.EXTRACT),
            ({"web": True}, DataSourceKind.WEB),
        ],
    )
    def test_single_flag(self, flags: dict, kind: DataSourceKind):
        spec = DataSourceSpec.from_flags(Path("sales"), **flags)

        assert spec.kind is kind
        assert spec.name == Path("sales")

    def test_accepts_str_name(self):
        spec = DataSourceSpec.from_flags("sales")  # type: ignore[arg-type]

        assert spec.name == Path("sales")
        assert spec.base_name == "sales"

    @pytest.mark.parametrize(
        "flags",
        [
            {"database": True, "web": True},
            {"extract": True, "web": True},
            {"database": True, "extract": True},
            {"database": True, "extract": True, "web": True},
        ],
    )
    def test_multiple_flags_rejected(self, flags: dict):
        with pytest.raises(GeoffError) as exc_info:
            DataSourceSpec.from_flags(Path("sales"), **flags)

        assert exc_info.value.code == ErrorCodes.CONFLICTING_OPTIONS
        assert len(exc_info.value.context["options"]) == len(flags)


# =============================================================================
# TreeNode
# =============================================================================


class TestTreeNode:
    """TreeNode.render tests."""

    def test_leaf_only(self):
        assert TreeNode("root").render() == "root"

    def test_flat_children(self):
        tree = TreeNode("root")
        tree.add_child("a")
        tree.add_child("b")

        assert tree.render() == "root\n├─ a\n└─ b"

    def test_nested_last_child(self):
        tree = TreeNode("data_sources")
        tree.add_child("sales").add_child("metadata.md")

        assert tree.render() == "data_sources\n└─ sales\n   └─ metadata.md"

    def test_nested_middle_child(self):
        tree = TreeNode("root")
        first = tree.add_child("first")
        first.add_child("inner")
        tree.add_child("second")

        assert tree.render() == "root\n├─ first\n│  └─ inner\n└─ second"


class TestScaffoldResult:
    """ScaffoldResult tests."""

    def test_to_dict(self):
        tree = TreeNode("test_project")
        tree.add_child("models")
        result = ScaffoldResult(
            name="test_project",
            root=Path("test_project"),
            tree=tree,
            created_paths=[Path("test_project"), Path("test_project/models")],
        )

        data = result.to_dict()

        assert data["name"] == "test_project"
        assert data["root"] == "test_project"
        assert data["created_paths"] == ["test_project", str(Path("test_project/models"))]
        assert data["tree"] == "test_project\n└─ models"
