from __future__ import annotations

from ..tree import Assign, Literal, Lookup
from ..types import InvalidAssignTarget, NotFound, Obj, Scope
from .common import EvalFunc

def eval_assign(n: Assign, scope: Scope, eval_func: EvalFunc) -> Obj:
    rhs = eval_func(n.value, scope)

    # Only a named Literal may be assigned to; computed targets are rejected.
    match n.target:
        case Literal(value=Obj(name=str() as name)):
            return scope.update(name, rhs)
        case Literal():
            raise InvalidAssignTarget("an unnamed literal")
        case _:
            raise InvalidAssignTarget(type(n.target).__name__)

def eval_lookup(n: Lookup, scope: Scope) -> Obj:
    binding = scope.resolve(n.name)

    if binding is None or binding.is_nil():
        raise NotFound(n.name)

    return binding
