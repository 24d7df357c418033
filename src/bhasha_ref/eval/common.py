from __future__ import annotations

from typing import Callable, Optional

from ..tree import Node
from ..types import NilEvaluationResult, Obj, Scope, TypeMismatch, TypeName, ValueType

EvalFunc = Callable[[Node, Scope], Obj]
TruthyFunc = Callable[[Obj], bool]

def require_value(value: Optional[Obj], context: str) -> Obj:
    if value is None:
        raise NilEvaluationResult(context)

    return value

def require_int(value: Obj, side: str) -> int:
    if value.type is not ValueType.INT:
        raise TypeMismatch(f"{side} is not an integer", TypeName[ValueType.INT], TypeName[value.type])

    return value.datum
