"""Evaluation of expressions of the embedded Lisp."""

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
    is_list,
    is_nil,
    is_special,
    length_of_list,
    make_list,
)
from gamecore.ebisp.scope import Scope


def _nil() -> Symbol:
    return Symbol("nil")


def wrong_argument_type(type_name: str, obj: Expr) -> EvalError:
    """Error for an argument that fails the predicate ``type_name``."""
    return EvalError(make_list(Symbol("wrong-argument-type"), Symbol(type_name), obj))


def wrong_number_of_arguments(count: int) -> EvalError:
    """Error for a call with the wrong number of arguments."""
    return EvalError(Cons(Symbol("wrong-number-of-arguments"), Number(count)))


def not_implemented() -> EvalError:
    return EvalError(Symbol("not-implemented"))


def read_error(message: str, character: int) -> EvalError:
    """Error for a failure to read source text."""
    return EvalError(make_list(Symbol("read-error"), String(message), Number(character)))


def match_list(fmt: str, xs: Expr) -> tuple:
    """Destructure the list ``xs`` according to ``fmt``.

    Format characters: ``d`` a number (its int value), ``s`` a string (its
    text), ``q`` a symbol (its name), ``e`` any expression, ``*`` the rest of
    the list (nil when nothing is left). Returns the matched values in order.
    """
    values: list = []
    pos = 0
    count = 0
    while pos < len(fmt) and not is_nil(xs):
        if not isinstance(xs, Cons):
            raise wrong_argument_type("consp", xs)
        x = xs.car
        spec = fmt[pos]
        if spec == "d":
            if not isinstance(x, Number):
                raise wrong_argument_type("numberp", x)
            values.append(x.value)
        elif spec == "s":
            if not isinstance(x, String):
                raise wrong_argument_type("stringp", x)
            values.append(x.value)
        elif spec == "q":
            if not isinstance(x, Symbol):
                raise wrong_argument_type("symbolp", x)
            values.append(x.name)
        elif spec == "e":
            values.append(x)
        elif spec == "*":
            values.append(xs)
            xs = _nil()
        else:
            raise ValueError(f"wrong format parameter: {spec!r}")
        pos += 1
        count += 1
        if not is_nil(xs):
            xs = xs.cdr

    if pos < len(fmt) and fmt[pos] == "*" and is_nil(xs):
        values.append(_nil())
        pos += 1

    if pos < len(fmt) or not is_nil(xs):
        raise wrong_number_of_arguments(count)

    return tuple(values)


def _eval_symbol(scope: Scope, symbol: Symbol) -> Expr:
    cell = scope.get_value(symbol)
    if is_nil(cell) or not isinstance(cell, Cons):
        raise EvalError(Cons(Symbol("void-variable"), symbol))
    return cell.cdr


def _eval_all_args(scope: Scope, args: Expr) -> Expr:
    items = []
    node = args
    while isinstance(node, Cons):
        items.append(evaluate(scope, node.car))
        node = node.cdr
    result = evaluate(scope, node)
    for item in reversed(items):
        result = Cons(item, result)
    return result


def _call_lambda(function: Expr, args: Expr) -> Expr:
    if not isinstance(function, Lambda):
        raise EvalError(Cons(Symbol("expected-callable"), function))
    if not is_list(args):
        raise EvalError(Cons(Symbol("expected-list"), args))

    variables = function.args_list
    if length_of_list(args) != length_of_list(variables):
        raise wrong_number_of_arguments(length_of_list(args))

    local = Scope(expr=function.envir)
    local.push_frame(variables, args)

    result: Expr = _nil()
    body = function.body
    while isinstance(body, Cons):
        result = evaluate(local, body.car)
        body = body.cdr
    return result


def _eval_funcall(scope: Scope, callable_expr: Expr, args_expr: Expr) -> Expr:
    function = evaluate(scope, callable_expr)
    if isinstance(callable_expr, Symbol) and is_special(callable_expr.name):
        args = args_expr
    else:
        args = _eval_all_args(scope, args_expr)

    if isinstance(function, Native):
        return function.fun(scope, args)
    return _call_lambda(function, args)


def evaluate(scope: Scope, expr: Expr) -> Expr:
    """Evaluate ``expr`` in ``scope``; raise :class:`EvalError` on failure."""
    if isinstance(expr, Cons):
        return _eval_funcall(scope, expr.car, expr.cdr)
    if isinstance(expr, Symbol):
        return _eval_symbol(scope, expr)
    if isinstance(expr, (Number, String, Lambda, Native)):
        return expr
    raise EvalError(Cons(Symbol("unexpected-expression"), expr))


def eval_block(scope: Scope, block: Expr) -> Expr:
    """Evaluate each expression of a list, returning the last value (nil if empty)."""
    if not is_list(block):
        raise wrong_argument_type("listp", block)
    result: Expr = _nil()
    node = block
    while isinstance(node, Cons):
        result = evaluate(scope, node.car)
        node = node.cdr
    return result


def car(scope: Scope, args: Expr) -> Expr:
    """First element of the single list argument; nil for nil."""
    (xs,) = match_list("e", args)
    if is_nil(xs):
        return xs
    if not isinstance(xs, Cons):
        raise wrong_argument_type("consp", xs)
    return xs.car