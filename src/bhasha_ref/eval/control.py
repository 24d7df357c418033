from __future__ import annotations

from ..tree import If, Return
from ..types import Obj, Scope
from .common import EvalFunc, TruthyFunc

def eval_if(n: If, scope: Scope, eval_func: EvalFunc, truthy_fn: TruthyFunc) -> Obj:
    cond = eval_func(n.condition, scope)

    if truthy_fn(cond):
        return eval_func(n.success, scope)

    return eval_func(n.fail, scope)

def eval_return(n: Return, scope: Scope, eval_func: EvalFunc) -> Obj:
    return eval_func(n.expr, scope)
