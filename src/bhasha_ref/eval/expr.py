from __future__ import annotations

from ..tree import INT_OPERATORS, Infix, InfixOp
from ..types import DivisionByZero, InternalUnknownNode, Obj, Scope, bool_obj, int_obj
from ..utils import values_equal
from .common import EvalFunc, TruthyFunc, require_int, require_value

def _trunc_divmod(a: int, b: int) -> tuple[int, int]:
    # Quotient rounds toward zero; remainder takes the sign of the dividend.
    q = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        q = -q
    return q, a - b * q

def apply_binary_operator(op: InfixOp, lhs: Obj, rhs: Obj, truthy_fn: TruthyFunc) -> Obj:
    if op in INT_OPERATORS:
        a = require_int(lhs, "LHS")
        b = require_int(rhs, "RHS")

        match op:
            case InfixOp.ADD:
                return int_obj(a + b)
            case InfixOp.SUBTRACT:
                return int_obj(a - b)
            case InfixOp.MULTIPLY:
                return int_obj(a * b)
            case InfixOp.DIVIDE:
                if b == 0:
                    raise DivisionByZero("division")
                return int_obj(_trunc_divmod(a, b)[0])
            case InfixOp.MOD:
                if b == 0:
                    raise DivisionByZero("modulo")
                return int_obj(_trunc_divmod(a, b)[1])
            case InfixOp.GREATER:
                return bool_obj(a > b)
            case InfixOp.LESSER:
                return bool_obj(a < b)

    match op:
        case InfixOp.EQUAL:
            return bool_obj(values_equal(lhs, rhs))
        case InfixOp.NOTEQUAL:
            return bool_obj(not values_equal(lhs, rhs))
        case InfixOp.AND:
            # Both sides are already evaluated; no short-circuit.
            left, right = truthy_fn(lhs), truthy_fn(rhs)
            return bool_obj(left and right)
        case InfixOp.OR:
            left, right = truthy_fn(lhs), truthy_fn(rhs)
            return bool_obj(left or right)

    raise InternalUnknownNode(op)

def eval_infix(n: Infix, scope: Scope, eval_func: EvalFunc, truthy_fn: TruthyFunc) -> Obj:
    lhs = require_value(eval_func(n.left, scope), "infix LHS")
    rhs = require_value(eval_func(n.right, scope), "infix RHS")

    return apply_binary_operator(n.op, lhs, rhs, truthy_fn)
