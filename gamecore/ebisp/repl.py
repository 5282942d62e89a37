"""Interactive read-eval-print loop and its runtime functions."""

from __future__ import annotations

import sys
from typing import TextIO

from gamecore.ebisp.expr import EvalError, Expr, Native, Symbol
from gamecore.ebisp.gc import Gc
from gamecore.ebisp.interpreter import evaluate, match_list
from gamecore.ebisp.parser import ParseError, format_parse_error, read_expr_from_string
from gamecore.ebisp.scope import Scope
from gamecore.ebisp.std import load_std_library
from gamecore.ebisp.tokenizer import next_token

REPL_BUFFER_MAX = 1024


def load_repl_runtime(scope: Scope, gc: Gc, output: TextIO | None = None) -> None:
    """Bind ``quit``, ``gc-inspect``, ``scope`` and ``print`` in ``scope``."""

    def stream() -> TextIO:
        return sys.stdout if output is None else output

    def quit_(scope: Scope, args: Expr) -> Expr:
        stream().flush()
        sys.exit(0)

    def gc_inspect(scope: Scope, args: Expr) -> Expr:
        stream().write(gc.inspect() + "\n")
        return Symbol("nil")

    def get_scope(scope: Scope, args: Expr) -> Expr:
        return scope.expr

    def print_(scope: Scope, args: Expr) -> Expr:
        (text,) = match_list("s", args)
        stream().write(f"{text}\n")
        return Symbol("nil")

    for name, fun in (
        ("quit", quit_),
        ("gc-inspect", gc_inspect),
        ("scope", get_scope),
        ("print", print_),
    ):
        scope.set_value(Symbol(name), Native(fun, name))


def eval_line(
    gc: Gc,
    scope: Scope,
    line: str,
    output: TextIO | None = None,
    errors: TextIO | None = None,
) -> None:
    """Evaluate every expression of ``line``, printing results or the first error."""
    out = sys.stdout if output is None else output
    err = sys.stderr if errors is None else errors

    position = 0
    while position < len(line):
        gc.collect(scope.expr)

        try:
            parsed = read_expr_from_string(line, position)
        except ParseError as exc:
            err.write(format_parse_error(line, exc))
            return

        try:
            result = evaluate(scope, parsed.expr)
        except EvalError as exc:
            err.write(f"Error:\t{exc.expr.to_sexpr()}\n")
            return

        out.write(f"{result.to_sexpr()}\n")
        position = next_token(line, parsed.end).begin


def main(argv: list[str] | None = None) -> int:
    """Run the loop on standard input until it is exhausted."""
    gc = Gc()
    scope = Scope()
    load_std_library(scope)
    load_repl_runtime(scope, gc)

    while True:
        sys.stdout.write("> ")
        sys.stdout.flush()
        line = sys.stdin.readline(REPL_BUFFER_MAX - 1)
        if not line:
            return 1
        eval_line(gc, scope, line)


if __name__ == "__main__":
    sys.exit(main())