from __future__ import annotations

from typing import List

from ..tree import Concat
from ..types import Obj, Scope, str_obj
from ..utils import stringify
from .common import EvalFunc, require_value

def eval_concat(n: Concat, scope: Scope, eval_func: EvalFunc) -> Obj:
    parts: List[str] = []

    for child in n.parts:
        value = require_value(eval_func(child, scope), "concat")
        parts.append(stringify(value))

    return str_obj("".join(parts))
