"""The standard library of the embedded Lisp."""

from __future__ import annotations

from gamecore.ebisp.expr import (
    Cons,
    EvalError,
    Expr,
    Lambda,
    Native,
    Number,
    String,
    Symbol,
    assoc,
    bool_as_expr,
    equal,
    is_list_of_symbols,
    is_nil,
    make_list,
)
from gamecore.ebisp.interpreter import (
    car,
    eval_block,
    evaluate,
    match_list,
    read_error,
    wrong_argument_type,
)
from gamecore.ebisp.parser import ParseError, read_all_exprs_from_file
from gamecore.ebisp.scope import Scope


def _nil() -> Symbol:
    return Symbol("nil")


def _lambda(scope: Scope, args_list: Expr, body: Expr) -> Lambda:
    return Lambda(args_list, body, scope.expr)


def _quasiquote(scope: Scope, args: Expr) -> Expr:
    (expr,) = match_list("e", args)
    try:
        head, unquoted = match_list("qe", expr)
    except EvalError:
        head = None
    if head == "unquote":
        return evaluate(scope, unquoted)
    if isinstance(expr, Cons):
        left = _quasiquote(scope, make_list(expr.car))
        right = _quasiquote(scope, make_list(expr.cdr))
        return Cons(left, right)
    return expr


def _unquote(scope: Scope, args: Expr) -> Expr:
    raise EvalError(String("Using unquote outside of quasiquote."))


def _greater_than(scope: Scope, args: Expr) -> Expr:
    x1, rest = match_list("d*", args)
    ordered = True
    while ordered and not is_nil(rest):
        x2, tail = match_list("d*", rest)
        ordered = x1 > x2
        x1, rest = x2, tail
    return bool_as_expr(ordered)


def _list(scope: Scope, args: Expr) -> Expr:
    """Return the evaluated arguments as a fresh list with the same tail."""
    items = []
    tail = args
    while isinstance(tail, Cons):
        items.append(tail.car)
        tail = tail.cdr
    result = tail
    for item in reversed(items):
        result = Cons(item, result)
    return result


def _numbers(args: Expr):
    while not is_nil(args):
        if not isinstance(args, Cons):
            raise wrong_argument_type("consp", args)
        if not isinstance(args.car, Number):
            raise wrong_argument_type("numberp", args.car)
        yield args.car.value
        args = args.cdr


def _plus(scope: Scope, args: Expr) -> Expr:
    return Number(sum(_numbers(args)))


def _mul(scope: Scope, args: Expr) -> Expr:
    result = 1
    for value in _numbers(args):
        result *= value
    return Number(result)


def _assoc(scope: Scope, args: Expr) -> Expr:
    key, alist = match_list("ee", args)
    return assoc(key, alist)


def _set(scope: Scope, args: Expr) -> Expr:
    name, value_expr = match_list("qe", args)
    value = evaluate(scope, value_expr)
    scope.set_value(Symbol(name), value)
    return value


def _quote(scope: Scope, args: Expr) -> Expr:
    (expr,) = match_list("e", args)
    return expr


def _begin(scope: Scope, args: Expr) -> Expr:
    (block,) = match_list("*", args)
    return eval_block(scope, block)


def _defun(scope: Scope, args: Expr) -> Expr:
    name, args_list, body = match_list("ee*", args)
    if not is_list_of_symbols(args_list):
        raise wrong_argument_type("list-of-symbolsp", args_list)
    return evaluate(scope, make_list(Symbol("set"), name, _lambda(scope, args_list, body)))


def _when(scope: Scope, args: Expr) -> Expr:
    condition, body = match_list("e*", args)
    if not is_nil(evaluate(scope, condition)):
        return eval_block(scope, body)
    return _nil()


def _lambda_op(scope: Scope, args: Expr) -> Expr:
    args_list, body = match_list("e*", args)
    if not is_list_of_symbols(args_list):
        raise wrong_argument_type("list-of-symbolsp", args_list)
    return _lambda(scope, args_list, body)


def _equal(scope: Scope, args: Expr) -> Expr:
    obj1, obj2 = match_list("ee", args)
    return bool_as_expr(equal(obj1, obj2))


def _load(scope: Scope, args: Expr) -> Expr:
    (filename,) = match_list("s", args)
    try:
        parsed = read_all_exprs_from_file(filename)
    except ParseError as exc:
        raise read_error(exc.message, 0) from exc
    return eval_block(scope, parsed.expr)


def _append(scope: Scope, args: Expr) -> Expr:
    xs, ys = match_list("ee", args)
    items = []
    while not is_nil(xs):
        x, xs = match_list("e*", xs)
        items.append(x)
    result = ys
    for item in reversed(items):
        result = Cons(item, result)
    return result


_NATIVES = (
    ("car", car),
    (">", _greater_than),
    ("+", _plus),
    ("*", _mul),
    ("list", _list),
)

_MORE_NATIVES = (
    ("assoc", _assoc),
    ("quasiquote", _quasiquote),
    ("set", _set),
    ("quote", _quote),
    ("begin", _begin),
    ("defun", _defun),
    ("when", _when),
    ("lambda", _lambda_op),
    ("λ", _lambda_op),
    ("unquote", _unquote),
    ("load", _load),
    ("append", _append),
    ("equal", _equal),
)


def load_std_library(scope: Scope) -> None:
    """Bind the standard functions and constants in ``scope``."""
    for name, fun in _NATIVES:
        scope.set_value(Symbol(name), Native(fun, name))
    scope.set_value(Symbol("t"), Symbol("t"))
    scope.set_value(Symbol("nil"), Symbol("nil"))
    for name, fun in _MORE_NATIVES:
        scope.set_value(Symbol(name), Native(fun, name))