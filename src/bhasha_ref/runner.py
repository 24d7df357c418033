from __future__ import annotations

import argparse
import logging
import sys
import traceback
from pathlib import Path
from typing import List, Optional

from .config import EvalConfig, debug_py_trace_enabled
from .evaluator import eval_expr
from .reader import ReadError, parse
from .runtime import EvalError, Obj, Scope
from .utils import stringify

logger = logging.getLogger("bhasha.runner")

def run(src: str, scope: Optional[Scope]=None, config: Optional[EvalConfig]=None) -> Obj:
    ast = parse(src)

    if scope is None:
        scope = Scope("root")
    if config is None:
        config = EvalConfig.from_env()

    return eval_expr(ast, scope, config)

def _load_source(arg: Optional[str]) -> str:
    """
    Resolve CLI input into source text.
    - None or "-" => read stdin.
    - Existing file => read its contents.
    - Otherwise treat the argument as literal source.
    """

    if arg is None or arg == "-":
        data = sys.stdin.read()
        if not data:
            raise SystemExit("No input provided on stdin")
        return data

    candidate = Path(arg)
    try:
        is_file = candidate.is_file()
    except OSError:
        # Too long or otherwise unusable as a path name.
        is_file = False

    if is_file:
        return candidate.read_text(encoding="utf-8")

    return arg

def _build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bhasha", description="Evaluate a bhasha program and print the result.")
    ap.add_argument("source", nargs="?", default="-", help="program text, a path to a file, or '-' for stdin")
    ap.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    ap.add_argument("--truthy", action="append", default=None, metavar="WORD",
                    help="replace the truthy word list (repeatable)")
    return ap

def main(argv: Optional[List[str]]=None) -> int:
    args = _build_arg_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(name)s: %(levelname)s: %(message)s")

    config = EvalConfig.from_env()
    if args.truthy:
        config = config.with_truthy_words(args.truthy)

    source = _load_source(args.source)

    try:
        result = run(source, config=config)
    except (ReadError, EvalError) as exc:
        logger.debug("run failed", exc_info=True)
        if debug_py_trace_enabled():
            traceback.print_exc()
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(stringify(result))
    return 0

if __name__ == "__main__":
    sys.exit(main())
