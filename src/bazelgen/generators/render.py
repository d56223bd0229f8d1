"""Render expression trees into Starlark source text.

All formatting policy lives here: quoting, bracketing and where a
construct may break across lines. Width decisions are left to the layout
engine; this module only declares groups and separators.
"""

from __future__ import annotations

from typing import Iterable

from bazelgen.config import DEFAULT_INDENT, DEFAULT_WIDTH
from bazelgen.layout import HARD_LINE, LINE, SPACE, Doc, intercalate, text
from bazelgen.models.expr import Assign, BinOp, Call, Expr, List, Load, Str, Var

_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
}

_COMMA_LINE = text(",") + LINE


def quote(value: str) -> str:
    """Return `value` as a single-quoted Starlark string literal."""
    return "'" + "".join(_ESCAPES.get(c, c) for c in value) + "'"


def render_str(value: str) -> Doc:
    """Single-quoted string literal document."""
    return text(quote(value))


def render_list(items: list[Doc], indent: int = DEFAULT_INDENT) -> Doc:
    """`[]` when empty, otherwise items tight-bracketed by `[` and `]`."""
    if not items:
        return text("[]")
    return intercalate(_COMMA_LINE, items).tight_bracket_by(text("["), text("]"), indent)


def render_arg(key: str, value: Doc) -> Doc:
    """Keyword argument as `key = value`."""
    return text(key) + SPACE + text("=") + SPACE + value


def render_call(name: str, args: list[tuple[str, Doc]], indent: int = DEFAULT_INDENT) -> Doc:
    """Render a call; layout depends on the number of arguments.

    No arguments gives ``name()``. A single argument is never broken
    around, only inside its value. Two or more arguments form a group
    that goes one argument per line when it does not fit.
    """
    if not args:
        return text(f"{name}()")

    joined = intercalate(_COMMA_LINE, [render_arg(key, value) for key, value in args])
    if len(args) == 1:
        return text(f"{name}(") + joined + text(")")
    return joined.tight_bracket_by(text(f"{name}("), text(")"), indent)


def render_expr(expr: Expr, indent: int = DEFAULT_INDENT) -> Doc:
    """Convert an expression tree into a layout document.

    Raises:
        TypeError: If `expr` (or any node below it) is not an expression node
    """
    if isinstance(expr, Str):
        return render_str(expr.value)
    if isinstance(expr, List):
        return render_list([render_expr(item, indent) for item in expr.items], indent)
    if isinstance(expr, BinOp):
        # Kept on one line: a break outside brackets is a syntax error.
        return render_expr(expr.left, indent) + text(f" {expr.op} ") + render_expr(expr.right, indent)
    if isinstance(expr, Assign):
        return text(f"{expr.name} = ") + render_expr(expr.value, indent)
    if isinstance(expr, Var):
        return text(expr.name)
    if isinstance(expr, Load):
        parts = [render_expr(expr.module, indent)] + [render_expr(s, indent) for s in expr.symbols]
        return intercalate(_COMMA_LINE, parts).tight_bracket_by(text("load("), text(")"), indent)
    if isinstance(expr, Call):
        args = [(key, render_expr(value, indent)) for key, value in expr.args]
        return render_call(expr.name, args, indent)
    raise TypeError(f"Cannot render {type(expr).__name__}: {expr!r}")


def render_exprs(exprs: Iterable[Expr], indent: int = DEFAULT_INDENT) -> Doc:
    """Join top-level statements with hard line breaks."""
    return intercalate(HARD_LINE, [render_expr(e, indent) for e in exprs])


def render_text(expr: Expr, width: int = DEFAULT_WIDTH, indent: int = DEFAULT_INDENT) -> str:
    """Render a single expression to text, without a trailing newline."""
    return render_expr(expr, indent).render(width)


def render_file(
    exprs: Iterable[Expr], width: int = DEFAULT_WIDTH, indent: int = DEFAULT_INDENT
) -> str:
    """Render a sequence of statements as file content.

    Each statement ends with a newline; an empty sequence renders as "".
    """
    exprs = list(exprs)
    if not exprs:
        return ""
    return render_exprs(exprs, indent).render(width) + "\n"
