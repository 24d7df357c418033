from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional
from typing_extensions import TypeAlias

# ---------- Value Model ----------

class ValueType(Enum):
    NIL = 0
    INT = 1
    STRING = 2
    BOOL = 3
    HASH = 4

TypeName: Dict[ValueType, str] = {
    ValueType.NIL: "NIL",
    ValueType.INT: "INT",
    ValueType.STRING: "STRING",
    ValueType.BOOL: "BOOL",
    ValueType.HASH: "HASH",
}

_FNV64_OFFSET = 0xCBF29CE484222325
_FNV64_PRIME = 0x100000001B3
_U64 = 0xFFFFFFFFFFFFFFFF

def _fnv1a64(data: bytes) -> int:
    h = _FNV64_OFFSET
    for byte in data:
        h ^= byte
        h = (h * _FNV64_PRIME) & _U64
    return h

def _datum_fits(type_: ValueType, datum: Any) -> bool:
    match type_:
        case ValueType.NIL:
            return datum is None
        case ValueType.INT:
            return isinstance(datum, int) and not isinstance(datum, bool)
        case ValueType.STRING:
            return isinstance(datum, str)
        case ValueType.BOOL:
            return isinstance(datum, bool)
        case ValueType.HASH:
            return isinstance(datum, dict)
    return False

@dataclass
class Obj:
    """A runtime value, and also the cell a scope binds a name to.

    `name` is only meaningful for bindings and for Literal assignment targets.
    """
    type: ValueType = ValueType.NIL
    datum: Any = None
    name: Optional[str] = None

    def __post_init__(self) -> None:
        if not _datum_fits(self.type, self.datum):
            raise TypeMismatch(
                "value construction",
                TypeName[self.type],
                type(self.datum).__name__,
            )

    def __repr__(self) -> str:
        label = TypeName[self.type]
        if self.name is not None:
            return f"<{label} {self.name}={self.datum!r}>"
        return f"<{label} {self.datum!r}>"

    def assign_from(self, other: Obj) -> None:
        self.type = other.type
        self.datum = other.datum

    def is_nil(self) -> bool:
        return self.type is ValueType.NIL

    def hash_key(self) -> HashKey:
        match self.type:
            case ValueType.INT:
                return HashKey(self.type, self.datum & _U64)
            case ValueType.BOOL:
                return HashKey(self.type, 1 if self.datum else 0)
            case ValueType.STRING:
                return HashKey(self.type, _fnv1a64(self.datum.encode("utf-8")))
            case _:
                raise TypeMismatch("hash key", "INT, STRING or BOOL", TypeName[self.type])

@dataclass(frozen=True)
class HashKey:
    type: ValueType
    key_hash: int

@dataclass
class HashPair:
    key: Obj
    value: Obj

def nil() -> Obj:
    return Obj()

def int_obj(value: int, name: Optional[str]=None) -> Obj:
    return Obj(ValueType.INT, value, name)

def str_obj(value: str, name: Optional[str]=None) -> Obj:
    return Obj(ValueType.STRING, value, name)

def bool_obj(value: bool, name: Optional[str]=None) -> Obj:
    return Obj(ValueType.BOOL, value, name)

Bindings: TypeAlias = Dict[str, Obj]

# ---------- Scope ----------

class Scope:
    def __init__(self, name: str="root", parent: Optional[Scope]=None):
        self.name = name
        self.parent = parent
        self.bindings: Bindings = {}

    def __repr__(self) -> str:
        return f"Scope({self.name!r}, names={sorted(self.bindings)!r})"

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.resolve(name) is not None

    def __len__(self) -> int:
        return len(self.bindings)

    def names(self) -> List[str]:
        return list(self.bindings)

    def chain(self) -> Iterator[Scope]:
        cur: Optional[Scope] = self
        while cur is not None:
            yield cur
            cur = cur.parent

    def child(self, name: str="child") -> Scope:
        return Scope(name, parent=self)

    def resolve(self, name: str) -> Optional[Obj]:
        """Find `name` in this scope or an enclosing one without creating it."""
        for scope in self.chain():
            binding = scope.bindings.get(name)
            if binding is not None:
                return binding

        return None

    def lookup(self, name: str) -> Obj:
        """Like `resolve`, but a miss creates a Nil binding in this scope."""
        binding = self.resolve(name)
        if binding is None:
            binding = Obj(name=name)
            self.bindings[name] = binding

        return binding

    def update(self, name: str, value: Obj) -> Obj:
        binding = self.bindings.get(name)
        if binding is None:
            binding = Obj(name=name)
            self.bindings[name] = binding

        binding.assign_from(value)
        return binding

# ---------- Exceptions ----------

class EvalError(Exception):
    node: Optional[object]

    def __init__(self, message: str):
        super().__init__(message)
        self.node = None

class NotFound(EvalError):
    def __init__(self, name: str):
        super().__init__(f"{name} not found")
        self.name = name

class TypeMismatch(EvalError):
    def __init__(self, context: str, expected: str, actual: str):
        super().__init__(f"{context}: expected {expected}, got {actual}")
        self.context = context
        self.expected = expected
        self.actual = actual

class InvalidAssignTarget(EvalError):
    def __init__(self, target: str):
        super().__init__(f"Can not assign to {target}")
        self.target = target

class DivisionByZero(EvalError):
    def __init__(self, op: str):
        super().__init__(f"{op} by zero")
        self.op = op

class NilEvaluationResult(EvalError):
    def __init__(self, context: str):
        super().__init__(f"Got nil from eval ({context})")
        self.context = context

class InternalUnknownNode(EvalError):
    def __init__(self, node: object):
        super().__init__(f"Unknown expression {type(node).__name__}")
        self.unknown = node

class ResourceExhausted(EvalError):
    pass
