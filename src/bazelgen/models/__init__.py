"""Data models for bazelgen."""

from bazelgen.models.expr import (
    EXPR_TYPES,
    Assign,
    BinOp,
    Call,
    Expr,
    List,
    Load,
    Str,
    Var,
    str_list,
)
from bazelgen.models.project import (
    MavenArtifact,
    ModuleSpec,
    ProjectSpec,
    WorkspaceSpec,
)

__all__ = [
    "EXPR_TYPES",
    "Assign",
    "BinOp",
    "Call",
    "Expr",
    "List",
    "Load",
    "Str",
    "Var",
    "str_list",
    "MavenArtifact",
    "ModuleSpec",
    "ProjectSpec",
    "WorkspaceSpec",
]
