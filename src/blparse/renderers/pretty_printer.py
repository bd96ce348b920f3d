"""
Renders a BL statement tree back into BL source text.

This module defines the `PrettyPrinter` class, the text backend of
`StatementRenderer`. Its output tokenizes and parses back into a structurally
equal tree.

Layout:
    - Four spaces of indentation per nesting level.
    - `IF c THEN` / body / (`ELSE` / body) / `END IF`.
    - `WHILE c DO` / body / `END WHILE`.
    - A call is its procedure name on a line of its own.
    - A block renders its elements in order at the current level.

Raises:
    - `NotImplementedError`: If a statement kind has no emit method.
"""

from blparse.bl_ast import Statement


class PrettyPrinter:
    """Emits BL source from Statement nodes.

    Attributes:
        lines (list[str]): Accumulated output lines.
        indent (int): Current nesting level.
    """

    def __init__(self, indent: int = 0) -> None:
        self.lines: list[str] = []
        self.indent = indent

    def indent_str(self) -> str:
        return "    " * self.indent

    def get_output(self) -> str:
        return "".join(line + "\n" for line in self.lines)

    def emit(self, node: Statement) -> None:
        method_name = f"emit_{node.kind.value}"
        if not hasattr(self, method_name):
            raise NotImplementedError(
                f"No emit method for statement kind '{node.kind.name}'"
            )
        getattr(self, method_name)(node)

    def emit_line(self, text: str) -> None:
        self.lines.append(f"{self.indent_str()}{text}")

    def emit_body(self, body: Statement) -> None:
        self.indent += 1
        self.emit(body)
        self.indent -= 1

    def emit_block(self, node: Statement) -> None:
        for child in node.children:
            self.emit(child)

    def emit_call(self, node: Statement) -> None:
        self.emit_line(str(node.name))

    def emit_if(self, node: Statement) -> None:
        assert node.condition is not None  # for mypy
        self.emit_line(f"IF {node.condition.to_token()} THEN")
        self.emit_body(node.body)
        self.emit_line("END IF")

    def emit_if_else(self, node: Statement) -> None:
        assert node.condition is not None  # for mypy
        self.emit_line(f"IF {node.condition.to_token()} THEN")
        self.emit_body(node.then_body)
        self.emit_line("ELSE")
        self.emit_body(node.else_body)
        self.emit_line("END IF")

    def emit_while(self, node: Statement) -> None:
        assert node.condition is not None  # for mypy
        self.emit_line(f"WHILE {node.condition.to_token()} DO")
        self.emit_body(node.body)
        self.emit_line("END WHILE")
