"""Width-aware document layout.

A small Wadler-style pretty printer. Documents are immutable trees built
from text, line breaks, nesting and groups. When rendered, each group is
laid out flat (its line breaks replaced by their flat text) if the flat
form, plus whatever follows it up to the next line break, fits in the
remaining width. Otherwise the group is broken and its own line breaks
become newlines at the current indentation. Nested groups decide
independently.

Example:
    >>> items = intercalate(text(",") + LINE, [text("'a'"), text("'b'")])
    >>> items.tight_bracket_by(text("["), text("]")).render(80)
    "['a', 'b']"
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from bazelgen.config import DEFAULT_INDENT, DEFAULT_WIDTH


class Doc:
    """Base class of all document nodes."""

    def __add__(self, other: Doc) -> Doc:
        return Concat(self, other)

    def nested(self, indent: int) -> Doc:
        """Indent every line break inside this document by `indent` columns."""
        return Nest(indent, self)

    def grouped(self) -> Doc:
        """Mark this document as one flat-or-broken layout unit."""
        return Group(self)

    def tight_bracket_by(self, left: Doc, right: Doc, indent: int = DEFAULT_INDENT) -> Doc:
        """Wrap this document in `left`/`right` with no padding.

        Flat: ``left`` + content + ``right``. Broken: ``left``, then the
        content starting on a new line indented by `indent`, then ``right``
        on its own line at the outer indentation.
        """
        body = (LINE_OR_EMPTY + self).nested(indent)
        return (left + body + LINE_OR_EMPTY + right).grouped()

    def render(self, width: int = DEFAULT_WIDTH) -> str:
        """Lay out the document within `width` columns and return the text."""
        return _layout(self, width)


@dataclass(frozen=True)
class Text(Doc):
    """Atomic text. Must not contain newlines."""

    value: str


@dataclass(frozen=True)
class Concat(Doc):
    left: Doc
    right: Doc


@dataclass(frozen=True)
class Line(Doc):
    """A line break that renders as `flat` when its group is flat.

    A `flat` of None makes a hard line: it always breaks, and any group
    containing it is always broken.
    """

    flat: str | None = " "


@dataclass(frozen=True)
class Nest(Doc):
    indent: int
    doc: Doc


@dataclass(frozen=True)
class Group(Doc):
    doc: Doc


EMPTY = Text("")
SPACE = Text(" ")
LINE = Line(" ")
LINE_OR_EMPTY = Line("")
HARD_LINE = Line(None)


def text(value: str) -> Doc:
    """Atomic text document."""
    return Text(value)


def concat(docs: Iterable[Doc]) -> Doc:
    """Concatenate documents left to right."""
    result: Doc | None = None
    for doc in docs:
        result = doc if result is None else result + doc
    return EMPTY if result is None else result


def intercalate(separator: Doc, docs: Iterable[Doc]) -> Doc:
    """Concatenate documents with `separator` between each pair."""
    result: Doc | None = None
    for doc in docs:
        result = doc if result is None else result + separator + doc
    return EMPTY if result is None else result


# (indent, flat, doc) triples; the end of the list is the next to emit
_Command = tuple[int, bool, Doc]


def _fits(remaining: int, pending: list[_Command], rest: list[_Command]) -> bool:
    """Check whether `pending` laid out flat, followed by `rest`, fits `remaining`.

    Measurement stops at the first line break reached in broken mode,
    which is where the current line ends.
    """
    rest_index = len(rest)
    while remaining >= 0:
        if not pending:
            if rest_index == 0:
                return True
            rest_index -= 1
            pending.append(rest[rest_index])
            continue

        indent, flat, doc = pending.pop()
        if isinstance(doc, Text):
            remaining -= len(doc.value)
        elif isinstance(doc, Concat):
            pending.append((indent, flat, doc.right))
            pending.append((indent, flat, doc.left))
        elif isinstance(doc, Nest):
            pending.append((indent + doc.indent, flat, doc.doc))
        elif isinstance(doc, Group):
            pending.append((indent, flat, doc.doc))
        elif isinstance(doc, Line):
            if not flat:
                return True
            if doc.flat is None:
                return False
            remaining -= len(doc.flat)
        else:
            raise TypeError(f"Unknown document node: {doc!r}")
    return False


def _layout(doc: Doc, width: int) -> str:
    out: list[str] = []
    column = 0
    stack: list[_Command] = [(0, False, doc)]

    while stack:
        indent, flat, node = stack.pop()
        if isinstance(node, Text):
            out.append(node.value)
            column += len(node.value)
        elif isinstance(node, Concat):
            stack.append((indent, flat, node.right))
            stack.append((indent, flat, node.left))
        elif isinstance(node, Nest):
            stack.append((indent + node.indent, flat, node.doc))
        elif isinstance(node, Group):
            if flat:
                stack.append((indent, True, node.doc))
            else:
                fits = _fits(width - column, [(indent, True, node.doc)], stack)
                stack.append((indent, fits, node.doc))
        elif isinstance(node, Line):
            if flat and node.flat is not None:
                out.append(node.flat)
                column += len(node.flat)
            else:
                out.append("\n" + " " * indent)
                column = indent
        else:
            raise TypeError(f"Unknown document node: {node!r}")

    return "".join(out)
