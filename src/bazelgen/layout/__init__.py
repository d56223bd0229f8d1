"""Document layout primitives used by the Starlark renderer."""

from bazelgen.layout.doc import (
    EMPTY,
    HARD_LINE,
    LINE,
    LINE_OR_EMPTY,
    SPACE,
    Doc,
    concat,
    intercalate,
    text,
)

__all__ = [
    "EMPTY",
    "HARD_LINE",
    "LINE",
    "LINE_OR_EMPTY",
    "SPACE",
    "Doc",
    "concat",
    "intercalate",
    "text",
]
