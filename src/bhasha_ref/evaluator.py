from __future__ import annotations

import logging
from functools import partial
from typing import Optional

from .runtime import EvalConfig, EvalError, InternalUnknownNode, NilEvaluationResult, Obj, ResourceExhausted, Scope
from .tree import Assign, BlockExpr, Concat, If, Infix, Lambda, Literal, Lookup, Node, Return

from .eval.bind import eval_assign, eval_lookup
from .eval.blocks import eval_block
from .eval.control import eval_if, eval_return
from .eval.expr import eval_infix
from .eval.fn import eval_lambda
from .eval.helpers import is_truthy
from .eval.literals import eval_concat

logger = logging.getLogger("bhasha.evaluator")


def _maybe_attach_node(exc: EvalError, node: object) -> None:
    # The innermost node wins; outer frames see it already set.
    if exc.node is None:
        exc.node = node

# ---------------- Public API ----------------

def eval_expr(ast: Node, scope: Optional[Scope]=None, config: Optional[EvalConfig]=None) -> Obj:
    if scope is None:
        scope = Scope("root")
    if config is None:
        config = EvalConfig()

    logger.debug("eval_expr: %s in scope %r", type(ast).__name__, scope.name)

    try:
        return eval_node(ast, scope, config)
    except RecursionError:
        logger.debug("eval_expr: host stack exhausted")
        raise ResourceExhausted("evaluation exceeded the host recursion limit") from None
    except EvalError as e:
        logger.debug("eval_expr failed: %s: %s", type(e).__name__, e)
        raise

# ---------------- Core evaluator ----------------

def eval_node(n: Node, scope: Scope, config: EvalConfig) -> Obj:
    try:
        return _eval_node_inner(n, scope, config)
    except EvalError as e:
        _maybe_attach_node(e, n)
        raise


def _eval_node_inner(n: Node, scope: Scope, config: EvalConfig) -> Obj:
    eval_func = partial(eval_node, config=config)
    truthy_fn = partial(is_truthy, config=config)

    match n:
        case Literal(value=Obj() as value):
            return value
        case Literal(value=None):
            raise NilEvaluationResult("literal")
        case Literal(value=payload):
            raise InternalUnknownNode(payload)
        case Concat():
            return eval_concat(n, scope, eval_func)
        case Assign():
            return eval_assign(n, scope, eval_func)
        case If():
            return eval_if(n, scope, eval_func, truthy_fn)
        case BlockExpr():
            return eval_block(n, scope, eval_func)
        case Lookup():
            return eval_lookup(n, scope)
        case Return():
            return eval_return(n, scope, eval_func)
        case Lambda():
            return eval_lambda(n, scope, eval_func)
        case Infix():
            return eval_infix(n, scope, eval_func, truthy_fn)
        case _:
            raise InternalUnknownNode(n)
