"""
Provides `StatementRenderer`, which turns a parsed statement tree into output text.

Classes and Features:
    - Renderer (Protocol): Interface for output backends. Requires `emit` and `get_output`.
    - PrettyPrinter: BL source text (targets "bl" and "text").
    - JsonRenderer: JSON serialization of the tree (target "json").
    - StatementRenderer: Picks the backend for a target and renders a root statement.

Example:
    >>> StatementRenderer("bl").render(tree)
    'IF next-is-empty THEN\\n    move\\nEND IF\\n'

Raises:
    ValueError: If the target is not supported.
    TypeError: If asked to render something that is not a Statement.
"""

from typing import Protocol

from blparse.bl_ast import Statement
from blparse.renderers.json_renderer import JsonRenderer
from blparse.renderers.pretty_printer import PrettyPrinter


class Renderer(Protocol):  # pragma: no cover
    """Protocol for statement tree backends."""

    def emit(self, node: Statement) -> None: ...

    def get_output(self) -> str: ...


RENDERERS: dict[str, type[Renderer]] = {
    "bl": PrettyPrinter,
    "text": PrettyPrinter,
    "json": JsonRenderer,
}


class StatementRenderer:
    """Dispatches a statement tree to the backend for an output target.

    Attributes:
        target (str): Normalized target name.
    """

    def __init__(self, target: str = "bl") -> None:
        target = target.lower()
        if target not in RENDERERS:
            raise ValueError(f"Unknown output format: {target!r}")
        self.target = target

    def render(self, statement: Statement) -> str:
        """Renders `statement` with a fresh backend instance.

        Raises:
            TypeError: If `statement` is not a Statement.
        """
        if not isinstance(statement, Statement):
            raise TypeError("Only Statement instances can be rendered.")
        backend = RENDERERS[self.target]()
        backend.emit(statement)
        return backend.get_output()
