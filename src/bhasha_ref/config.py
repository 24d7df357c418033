from __future__ import annotations

import os as _os
from dataclasses import dataclass, replace
from typing import FrozenSet, Iterable, Mapping, Optional, Union

TRUTHY_WORDS_ENV = "BHASHA_TRUTHY_WORDS"
DEBUG_PY_TRACE_ENV = "BHASHA_DEBUG_PY_TRACE"

DEFAULT_TRUTHY_WORDS: FrozenSet[str] = frozenset({"true", "yes", "ok", "sure", "haan", "si"})


def _normalize_words(words: Union[str, Iterable[str]]) -> FrozenSet[str]:
    if isinstance(words, str):
        words = (words,)
    return frozenset(w.strip().lower() for w in words if w.strip())


@dataclass(frozen=True)
class EvalConfig:
    """Settings the evaluator consults while running a tree.

    `truthy_words` is the vocabulary of strings that count as true when a
    String is coerced to a boolean (compared case-insensitively).
    """
    truthy_words: FrozenSet[str] = DEFAULT_TRUTHY_WORDS

    def __post_init__(self) -> None:
        object.__setattr__(self, "truthy_words", _normalize_words(self.truthy_words))

    def with_truthy_words(self, words: Union[str, Iterable[str]]) -> EvalConfig:
        return replace(self, truthy_words=_normalize_words(words))

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]]=None) -> EvalConfig:
        env = _os.environ if environ is None else environ
        raw = env.get(TRUTHY_WORDS_ENV)

        if raw:
            words = _normalize_words(raw.split(","))
            if words:
                return cls(truthy_words=words)

        return cls()


def debug_py_trace_enabled(environ: Optional[Mapping[str, str]]=None) -> bool:
    env = _os.environ if environ is None else environ
    return env.get(DEBUG_PY_TRACE_ENV, "").lower() not in ("", "0", "false", "no", "off")
