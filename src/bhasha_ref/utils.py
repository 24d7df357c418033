from __future__ import annotations

from typing import Optional

from .types import Obj, TypeMismatch, TypeName, ValueType


def values_equal(lhs: Obj, rhs: Obj) -> bool:
    """Structural equality: type tag first, then datum by value kind."""
    if ValueType.HASH in (lhs.type, rhs.type):
        raise TypeMismatch("equality", "INT, STRING, BOOL or NIL", TypeName[ValueType.HASH])

    if lhs.type is not rhs.type:
        return False

    match lhs.type:
        case ValueType.NIL:
            return True
        case ValueType.INT | ValueType.STRING | ValueType.BOOL:
            return lhs.datum == rhs.datum
        case _:
            return False


def stringify(value: Optional[Obj]) -> str:
    if value is None:
        return ""

    match value.type:
        case ValueType.STRING:
            return value.datum
        case ValueType.INT:
            return str(value.datum)
        case ValueType.BOOL:
            return "true" if value.datum else "false"
        case ValueType.NIL:
            return ""
        case _:
            raise TypeMismatch("concat", "INT, STRING, BOOL or NIL", TypeName[value.type])
