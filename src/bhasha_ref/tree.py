"""AST node classes for the evaluator.

Nodes are frozen dataclasses forming a closed set; `Node` is their union.
Sequences handed to a constructor are frozen into tuples so a built tree
cannot be changed under the evaluator.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Mapping, Tuple, Union
from typing_extensions import TypeAlias, TypeGuard

from .types import Obj, TypeName


class InfixOp(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    MOD = "%"

    GREATER = ">"
    LESSER = "<"
    EQUAL = "=="
    NOTEQUAL = "!="

    AND = "and"
    OR = "or"


INT_OPERATORS = frozenset({
    InfixOp.ADD,
    InfixOp.SUBTRACT,
    InfixOp.MULTIPLY,
    InfixOp.DIVIDE,
    InfixOp.MOD,
    InfixOp.GREATER,
    InfixOp.LESSER,
})


@dataclass(frozen=True)
class Literal:
    value: Obj


@dataclass(frozen=True)
class Lookup:
    name: str


@dataclass(frozen=True)
class Concat:
    parts: Tuple[Node, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))


@dataclass(frozen=True)
class Assign:
    target: Node
    value: Node


@dataclass(frozen=True)
class BlockExpr:
    body: Tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", tuple(self.body))


@dataclass(frozen=True)
class If:
    condition: Node
    success: BlockExpr
    fail: BlockExpr = field(default_factory=BlockExpr)


@dataclass(frozen=True)
class Infix:
    op: InfixOp
    left: Node
    right: Node


@dataclass(frozen=True)
class Return:
    expr: Node


@dataclass(frozen=True)
class Lambda:
    """Single-call function: params are evaluated in the caller, body in a child scope."""
    params: Tuple[Tuple[str, Node], ...]
    body: BlockExpr

    def __post_init__(self) -> None:
        params = self.params
        if isinstance(params, Mapping):
            params = params.items()
        object.__setattr__(self, "params", tuple((str(k), v) for k, v in params))


Node: TypeAlias = Union[Literal, Lookup, Concat, Assign, BlockExpr, If, Infix, Return, Lambda]

NODE_TYPES: Tuple[type, ...] = (Literal, Lookup, Concat, Assign, BlockExpr, If, Infix, Return, Lambda)


def is_node(node: object) -> TypeGuard[Node]:
    return isinstance(node, NODE_TYPES)

def block(*body: Node) -> BlockExpr:
    return BlockExpr(body)

def node_children(node: Node) -> List[Node]:
    match node:
        case Literal() | Lookup():
            return []
        case Concat(parts=parts):
            return list(parts)
        case Assign(target=target, value=value):
            return [target, value]
        case BlockExpr(body=body):
            return list(body)
        case If(condition=cond, success=success, fail=fail):
            return [cond, success, fail]
        case Infix(left=left, right=right):
            return [left, right]
        case Return(expr=expr):
            return [expr]
        case Lambda(params=params, body=body):
            return [value for _, value in params] + [body]
    return []

def info(node: object) -> str:
    if is_node(node):
        name = type(node).__name__
        article = "an" if name[0] in "AEIOU" else "a"
        return f"I am {article} {name}"

    return f"I am not a node ({type(node).__name__})"

def _label(node: Node) -> str:
    match node:
        case Literal(value=value):
            head = f"Literal {TypeName[value.type]} {value.datum!r}"
            return head if value.name is None else f"{head} as {value.name}"
        case Lookup(name=name):
            return f"Lookup {name}"
        case Infix(op=op):
            return f"Infix {op.value}"
        case Lambda(params=params):
            return "Lambda (" + ", ".join(name for name, _ in params) + ")"
    return type(node).__name__

def pretty(node: Node, indent: str="  ") -> str:
    """Return pretty-printed tree representation."""
    def _pretty(n: Node, level: int, lines: List[str]) -> None:
        lines.append(f"{indent * level}{_label(n)}\n")
        for child in node_children(n):
            _pretty(child, level + 1, lines)

    out: List[str] = []
    _pretty(node, 0, out)
    return "".join(out)
