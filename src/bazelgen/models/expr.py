"""Expression model for the subset of Starlark that bazelgen emits.

Nodes are frozen dataclasses. Sequence fields are stored as tuples, so a
tree cannot be mutated once built. The model performs no validation:
every combination of nodes is renderable, and deciding whether a tree is a
meaningful build rule is left to the builders.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Union


@dataclass(frozen=True)
class Call:
    """Invocation of a rule or function with ordered keyword arguments."""

    name: str
    args: tuple[tuple[str, Expr], ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple((key, value) for key, value in self.args))


@dataclass(frozen=True)
class Str:
    """String literal. Holds the raw, unescaped value."""

    value: str


@dataclass(frozen=True)
class List:
    """Bracketed list literal."""

    items: tuple[Expr, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class BinOp:
    """Infix operator expression, e.g. ``'rules_scala-%s' % version``."""

    op: str
    left: Expr
    right: Expr


@dataclass(frozen=True)
class Assign:
    """Top-level variable binding."""

    name: str
    value: Expr


@dataclass(frozen=True)
class Var:
    """Reference to a previously bound name."""

    name: str


@dataclass(frozen=True)
class Load:
    """``load()`` statement importing symbols from a module label."""

    module: Expr
    symbols: tuple[Expr, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "symbols", tuple(self.symbols))


Expr = Union[Call, Str, List, BinOp, Assign, Var, Load]

EXPR_TYPES = (Call, Str, List, BinOp, Assign, Var, Load)


def str_list(values: Iterable[str]) -> List:
    """Build a List of string literals, preserving order."""
    return List(tuple(Str(v) for v in values))
