"""
Defines the statement tree built by the BL parser.

Classes:
    StatementKind:
        Tag for the five statement variants: BLOCK, IF, IF_ELSE, WHILE, CALL.

    Statement:
        A single mutable node type carrying a kind tag. A fresh Statement is an
        empty BLOCK, which doubles as the unassembled placeholder. The parser
        drives it builder-style: `new_instance()` makes a fresh placeholder, one
        `assemble_*` call turns an empty node into its final variant, and
        `add_to_block` grows a BLOCK.

    StatementDict:
        TypedDict form of a Statement, for JSON output and test assertions.

Each Statement tracks:
    kind (StatementKind): The variant.
    condition (Condition | None): For IF, IF_ELSE and WHILE.
    name (str | None): Procedure name for CALL.
    children (list[Statement]): Block elements in execution order for BLOCK,
        [body] for IF and WHILE, [then_body, else_body] for IF_ELSE.

Ownership is strictly hierarchical: a child passed to `assemble_*` or
`add_to_block` belongs to the receiver from then on, and attaching it to a
second parent, or under one of its own descendants, raises `ValueError`.

Example:
    body = Statement()
    body.add_to_block(0, Statement().assemble_call("move"))
    node = Statement().assemble_while(Condition.TRUE, body)
"""

from enum import Enum
from typing import Any, TypedDict

from blparse.bl_condition import Condition
from blparse.bl_tokenizer import is_identifier


class StatementKind(Enum):
    BLOCK = "block"
    IF = "if"
    IF_ELSE = "if_else"
    WHILE = "while"
    CALL = "call"


class StatementDict(TypedDict):
    """
    Serialized Statement.

    Fields:
        kind (str): The StatementKind value ("block", "if", ...).
        condition (str | None): Raw condition token, e.g. "next-is-empty".
        name (str | None): Procedure name of a call.
        children (list[StatementDict]): Serialized children.
    """

    kind: str
    condition: str | None
    name: str | None
    children: list["StatementDict"]


class Statement:
    """
    A node of the BL statement tree.

    Args:
        kind (StatementKind): Variant tag, BLOCK by default.
        condition (Condition, optional): Condition of an IF, IF_ELSE or WHILE.
        name (str, optional): Procedure name of a CALL.
        children (list[Statement], optional): Child statements.

    The constructor does not validate its arguments; trees built by the parser
    go through the `assemble_*` and `add_to_block` methods, which do.
    """

    def __init__(
        self,
        kind: StatementKind = StatementKind.BLOCK,
        condition: Condition | None = None,
        name: str | None = None,
        children: list["Statement"] | None = None,
    ) -> None:
        self.kind = kind
        self.condition = condition
        self.name = name
        self.children: list["Statement"] = children or []
        self._owned = False
        for c in self.children:
            c._owned = True

    def new_instance(self) -> "Statement":
        """Returns a fresh, empty placeholder of the same type."""
        return type(self)()

    def is_empty(self) -> bool:
        """True for an unassembled node: a BLOCK with no elements."""
        return self.kind is StatementKind.BLOCK and not self.children

    def length_of_block(self) -> int:
        self._require_kind(StatementKind.BLOCK)
        return len(self.children)

    @property
    def body(self) -> "Statement":
        self._require_kind(StatementKind.IF, StatementKind.WHILE)
        return self.children[0]

    @property
    def then_body(self) -> "Statement":
        self._require_kind(StatementKind.IF_ELSE)
        return self.children[0]

    @property
    def else_body(self) -> "Statement":
        self._require_kind(StatementKind.IF_ELSE)
        return self.children[1]

    def assemble_if(self, condition: Condition, body: "Statement") -> "Statement":
        self._require_assemblable(body)
        self.kind = StatementKind.IF
        self.condition = condition
        self._adopt(body)
        self.children = [body]
        return self

    def assemble_if_else(
        self, condition: Condition, then_body: "Statement", else_body: "Statement"
    ) -> "Statement":
        self._require_assemblable(then_body, else_body)
        if then_body is else_body:
            raise ValueError("IF and ELSE bodies must be distinct statements")
        self.kind = StatementKind.IF_ELSE
        self.condition = condition
        self._adopt(then_body, else_body)
        self.children = [then_body, else_body]
        return self

    def assemble_while(self, condition: Condition, body: "Statement") -> "Statement":
        self._require_assemblable(body)
        self.kind = StatementKind.WHILE
        self.condition = condition
        self._adopt(body)
        self.children = [body]
        return self

    def assemble_call(self, name: str) -> "Statement":
        self._require_assemblable()
        if not is_identifier(name):
            raise ValueError(f"Invalid procedure name: {name!r}")
        self.kind = StatementKind.CALL
        self.name = name
        return self

    def add_to_block(self, index: int, statement: "Statement") -> None:
        """Inserts `statement` at position `index` of this block.

        Raises:
            ValueError: If this is not a BLOCK, `index` is out of range,
                `statement` is itself a BLOCK, or `statement` already belongs
                to a statement or contains this node.
        """
        self._require_kind(StatementKind.BLOCK)
        if not 0 <= index <= len(self.children):
            raise ValueError(
                f"Block index {index} out of range for length {len(self.children)}"
            )
        if statement.kind is StatementKind.BLOCK:
            raise ValueError("A block cannot be added as an element of a block")
        self._require_adoptable(statement)
        self._adopt(statement)
        self.children.insert(index, statement)

    def _require_kind(self, *kinds: StatementKind) -> None:
        if self.kind not in kinds:
            expected = ", ".join(k.name for k in kinds)
            raise ValueError(f"Expected a {expected} statement, got {self.kind.name}")

    def _require_assemblable(self, *bodies: "Statement") -> None:
        if not self.is_empty():
            raise ValueError(f"Statement already assembled as {self.kind.name}")
        for b in bodies:
            if b.kind is not StatementKind.BLOCK:
                raise ValueError(f"Body must be a BLOCK statement, got {b.kind.name}")
            self._require_adoptable(b)

    def _require_adoptable(self, child: "Statement") -> None:
        if child._owned:
            raise ValueError("Statement already belongs to another statement")
        if child is self or (self._owned and child._contains(self)):
            raise ValueError("A statement cannot contain itself")

    def _adopt(self, *children: "Statement") -> None:
        for c in children:
            c._owned = True

    def _contains(self, node: "Statement") -> bool:
        pending = list(self.children)
        while pending:
            current = pending.pop()
            if current is node:
                return True
            pending.extend(current.children)
        return False

    def __repr__(self) -> str:
        if self.kind is StatementKind.CALL:
            return f"Call({self.name!r})"
        if self.kind is StatementKind.BLOCK:
            return f"Block([{', '.join(repr(c) for c in self.children)}])"
        assert self.condition is not None  # for mypy
        parts = [self.condition.name] + [repr(c) for c in self.children]
        label = {
            StatementKind.IF: "If",
            StatementKind.IF_ELSE: "IfElse",
            StatementKind.WHILE: "While",
        }[self.kind]
        return f"{label}({', '.join(parts)})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Statement):
            return False
        return (
            self.kind == other.kind
            and self.condition == other.condition
            and self.name == other.name
            and self.children == other.children
        )

    def to_dict(self) -> StatementDict:
        return {
            "kind": self.kind.value,
            "condition": self.condition.to_token() if self.condition else None,
            "name": self.name,
            "children": [c.to_dict() for c in self.children],
        }
