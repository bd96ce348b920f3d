"""Renders a BL statement tree as JSON, using `Statement.to_dict()`."""

import json

from blparse.bl_ast import Statement, StatementDict


class JsonRenderer:
    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent
        self.root: StatementDict | None = None

    def emit(self, node: Statement) -> None:
        self.root = node.to_dict()

    def get_output(self) -> str:
        return json.dumps(self.root, indent=self.indent)
