from __future__ import annotations

import logging

from ..tree import Lambda
from ..types import Obj, Scope
from .common import EvalFunc

logger = logging.getLogger("bhasha.evaluator")

def eval_lambda(n: Lambda, scope: Scope, eval_func: EvalFunc) -> Obj:
    child = scope.child("child")
    logger.debug("lambda call: child scope of %r with params %s", scope.name, [name for name, _ in n.params])

    # Defaults see the caller's scope only, so params cannot refer to each other.
    for name, default in n.params:
        child.update(name, eval_func(default, scope))

    return eval_func(n.body, child)
