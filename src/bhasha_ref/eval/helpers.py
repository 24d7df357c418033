from __future__ import annotations

from typing import Optional

from ..config import EvalConfig
from ..types import Obj, TypeMismatch, TypeName, ValueType

_DEFAULT_CONFIG = EvalConfig()

def is_truthy(val: Obj, config: Optional[EvalConfig]=None) -> bool:
    cfg = config or _DEFAULT_CONFIG

    match val.type:
        case ValueType.STRING:
            return val.datum.lower() in cfg.truthy_words
        case ValueType.INT:
            return val.datum > 0
        case ValueType.BOOL:
            return val.datum
        case ValueType.NIL:
            return False
        case _:
            raise TypeMismatch("truthiness", "INT, STRING, BOOL or NIL", TypeName[val.type])
