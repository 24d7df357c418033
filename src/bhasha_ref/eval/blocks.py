from __future__ import annotations

from ..tree import BlockExpr, Return
from ..types import Obj, Scope, nil
from .common import EvalFunc

def eval_block(n: BlockExpr, scope: Scope, eval_func: EvalFunc) -> Obj:
    """Run the body in order; the first Return child ends the block with its value.

    Side effects of children that ran before a failure are kept.
    """
    for child in n.body:
        result = eval_func(child, scope)

        if isinstance(child, Return):
            return result

    return nil()
