"""Domain layer: constants, errors and schemas."""

from .errors import ErrorCodes, GeoffError
from .schemas import (
    DataSourceKind,
    DataSourceSpec,
    ProjectSpec,
    ScaffoldResult,
    TreeNode,
)

__all__ = [
    "GeoffError",
    "ErrorCodes",
    "ProjectSpec",
    "DataSourceKind",
    "DataSourceSpec",
    "TreeNode",
    "ScaffoldResult",
]
