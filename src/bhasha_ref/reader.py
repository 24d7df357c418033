"""Text front end: reads a small s-expression notation into AST nodes.

    (do
      (set greeting "Yahan se ")
      (return (concat greeting 50 " kos door")))

The grammar only splits text into atoms and parenthesised forms; `lower`
then maps each form onto a node, so every syntax rule lives in one place.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import List, Optional, Union

from lark import Lark, Token, Transformer, UnexpectedInput, v_args
from lark.exceptions import VisitError

from .runtime import Obj, bool_obj, int_obj, nil, str_obj
from .tree import Assign, BlockExpr, Concat, If, Infix, InfixOp, Lambda, Literal, Lookup, Node, Return

logger = logging.getLogger("bhasha.reader")

GRAMMAR = r"""
    program: item*

    ?item: form | atom
    ?atom: INT -> int
         | STRING -> string
         | SYMBOL -> symbol
    form: "(" item* ")"

    INT.2: /-?[0-9]+/
    STRING: /"(\\.|[^"\\])*"/
    SYMBOL: /[^\s()";]+/

    COMMENT: /;[^\n]*/
    %import common.WS
    %ignore WS
    %ignore COMMENT
"""

_ESCAPES = {'"': '"', "\\": "\\", "n": "\n", "t": "\t"}

_OPERATORS = {op.value: op for op in InfixOp}


class ReadError(Exception):
    def __init__(self, message: str, line: Optional[int]=None, column: Optional[int]=None):
        super().__init__(message)
        self.line = line
        self.column = column

    def __str__(self) -> str:
        msg = super().__str__()

        if self.line is None:
            return msg

        if self.column is None:
            return f"{msg} (line {self.line})"

        return f"{msg} (line {self.line}, col {self.column})"


@dataclass(frozen=True)
class Symbol:
    name: str
    line: Optional[int] = None
    column: Optional[int] = None


@dataclass(frozen=True)
class Form:
    items: List[Datum]
    line: Optional[int] = None
    column: Optional[int] = None


Datum = Union[Node, Symbol, Form]


def _unescape(body: str, tok: Token) -> str:
    out: List[str] = []
    it = iter(body)

    for ch in it:
        if ch != "\\":
            out.append(ch)
            continue

        esc = next(it, "")
        if esc not in _ESCAPES:
            raise ReadError(f"Unknown escape '\\{esc}'", tok.line, tok.column)
        out.append(_ESCAPES[esc])

    return "".join(out)


class _ToData(Transformer):
    """Turns the parse tree into atoms, Symbols and Forms."""

    @v_args(inline=True)
    def int(self, tok: Token) -> Literal:
        return Literal(int_obj(int(tok)))

    @v_args(inline=True)
    def string(self, tok: Token) -> Literal:
        return Literal(str_obj(_unescape(tok[1:-1], tok)))

    @v_args(inline=True)
    def symbol(self, tok: Token) -> Union[Literal, Symbol]:
        match str(tok):
            case "true":
                return Literal(bool_obj(True))
            case "false":
                return Literal(bool_obj(False))
            case "nil":
                return Literal(nil())
        return Symbol(str(tok), tok.line, tok.column)

    @v_args(meta=True)
    def form(self, meta, items: List[Datum]) -> Form:
        return Form(list(items), getattr(meta, "line", None), getattr(meta, "column", None))

    def program(self, items: List[Datum]) -> List[Datum]:
        return list(items)


@lru_cache(maxsize=1)
def make_parser() -> Lark:
    return Lark(GRAMMAR, start="program", parser="lalr", propagate_positions=True)


def _fail(message: str, at: Union[Symbol, Form]) -> ReadError:
    return ReadError(message, at.line, at.column)

def _expect_arity(form: Form, head: str, count: int) -> None:
    got = len(form.items) - 1
    if got != count:
        raise _fail(f"'{head}' expects {count} argument(s); got {got}", form)

def _as_branch(node: Node) -> BlockExpr:
    if isinstance(node, BlockExpr):
        return node

    return BlockExpr((Return(node),))

def _lower_params(param_list: Datum, form: Form) -> List[tuple[str, Node]]:
    if not isinstance(param_list, Form):
        raise _fail("'lambda' expects a parameter list", form)

    params: List[tuple[str, Node]] = []
    for entry in param_list.items:
        if not (isinstance(entry, Form) and len(entry.items) == 2 and isinstance(entry.items[0], Symbol)):
            raise _fail("lambda parameter must look like (name expr)", entry if isinstance(entry, (Form, Symbol)) else param_list)
        params.append((entry.items[0].name, lower(entry.items[1])))

    return params

def lower(datum: Datum) -> Node:
    if isinstance(datum, Symbol):
        return Lookup(datum.name)

    if not isinstance(datum, Form):
        return datum

    if not datum.items:
        raise _fail("Empty form", datum)

    head, *args = datum.items
    if not isinstance(head, Symbol):
        raise _fail("Form must start with a name", datum)

    name = head.name

    if name in _OPERATORS:
        _expect_arity(datum, name, 2)
        return Infix(_OPERATORS[name], lower(args[0]), lower(args[1]))

    match name:
        case "concat":
            return Concat(lower(a) for a in args)
        case "do":
            return BlockExpr(lower(a) for a in args)
        case "return":
            _expect_arity(datum, name, 1)
            return Return(lower(args[0]))
        case "set":
            _expect_arity(datum, name, 2)
            target = args[0]
            if not isinstance(target, Symbol):
                raise _fail("'set' target must be a name", datum)
            return Assign(Literal(Obj(name=target.name)), lower(args[1]))
        case "if":
            if len(args) not in (2, 3):
                raise _fail(f"'if' expects 2 or 3 arguments; got {len(args)}", datum)
            fail = _as_branch(lower(args[2])) if len(args) == 3 else BlockExpr()
            return If(lower(args[0]), _as_branch(lower(args[1])), fail)
        case "lambda":
            if not args:
                raise _fail("'lambda' expects a parameter list", datum)
            params = _lower_params(args[0], datum)
            return Lambda(params, BlockExpr(lower(a) for a in args[1:]))

    raise _fail(f"Unknown form '{name}'", head)


def parse(src: str) -> Node:
    """Read `src` into a single node; several top-level forms become a BlockExpr."""
    try:
        tree = make_parser().parse(src)
    except UnexpectedInput as exc:
        raise ReadError("Syntax error: unexpected input", exc.line, exc.column) from exc

    try:
        data = _ToData().transform(tree)
        nodes = [lower(d) for d in data]
    except VisitError as exc:
        if isinstance(exc.orig_exc, ReadError):
            raise exc.orig_exc from None
        if isinstance(exc.orig_exc, RecursionError):
            raise ReadError("Program nested too deeply") from None
        raise
    except RecursionError:
        raise ReadError("Program nested too deeply") from None

    logger.debug("parsed %d top-level form(s)", len(nodes))

    if len(nodes) == 1:
        return nodes[0]

    return BlockExpr(nodes)
