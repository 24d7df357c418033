from __future__ import annotations

from .config import DEFAULT_TRUTHY_WORDS, EvalConfig
from .types import (
    Obj, ValueType, TypeName, HashKey, HashPair, Scope,
    nil, int_obj, str_obj, bool_obj,
    EvalError, NotFound, TypeMismatch, InvalidAssignTarget, DivisionByZero,
    NilEvaluationResult, InternalUnknownNode, ResourceExhausted,
)

__all__ = [
    "DEFAULT_TRUTHY_WORDS",
    "EvalConfig",
    "Obj",
    "ValueType",
    "TypeName",
    "HashKey",
    "HashPair",
    "Scope",
    "nil",
    "int_obj",
    "str_obj",
    "bool_obj",
    "EvalError",
    "NotFound",
    "TypeMismatch",
    "InvalidAssignTarget",
    "DivisionByZero",
    "NilEvaluationResult",
    "InternalUnknownNode",
    "ResourceExhausted",
]
