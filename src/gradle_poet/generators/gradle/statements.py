"""Statement grammar for Groovy build scripts.

A script is a sequence of statements. There are exactly three kinds:

    Line      already-formatted text, emitted verbatim
    KeyValue  "<left> <right>", e.g. ``minSdkVersion 21``
    Block     "<name> {", children one level deeper, "}"

Trees are built once and rendered once; nothing is mutated in between.
"""

from dataclasses import dataclass
from typing import Iterable, Union

from gradle_poet.config import INDENT


@dataclass(frozen=True)
class Line:
    """Opaque text rendered at the current indent."""

    text: str


@dataclass(frozen=True)
class KeyValue:
    """Method or property name followed by its value expression."""

    left: str
    right: str


@dataclass(frozen=True)
class Block:
    """Named brace-delimited closure holding ordered child statements."""

    name: str
    statements: tuple["Statement", ...] = ()

    def __post_init__(self):
        # Accept any iterable (lists, generators) but store a tuple
        object.__setattr__(self, "statements", tuple(self.statements))


Statement = Union[Line, KeyValue, Block]


def render_statement(statement: Statement, indent_level: int = 0) -> str:
    """Render a statement tree as Groovy text.

    Args:
        statement: Root of the tree to render
        indent_level: Nesting depth of ``statement`` itself

    Returns:
        Rendered text without a trailing newline

    Raises:
        TypeError: If ``statement`` is not a Line, KeyValue or Block
    """
    indent = INDENT * indent_level

    if isinstance(statement, Line):
        return f"{indent}{statement.text}"

    if isinstance(statement, KeyValue):
        return f"{indent}{statement.left} {statement.right}"

    if isinstance(statement, Block):
        body = "\n".join(render_statement(child, indent_level + 1) for child in statement.statements)
        return f"{indent}{statement.name} {{\n{body}\n{indent}}}"

    raise TypeError(f"Not a statement: {statement!r}")


def render_statements(statements: Iterable[Statement]) -> str:
    """Render top-level statements, one after another, at indent level 0."""
    return "\n".join(render_statement(statement) for statement in statements)
