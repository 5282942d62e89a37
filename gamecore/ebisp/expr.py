"""Expression model of the embedded Lisp: atoms, cons cells and basic predicates."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

SPECIALS = frozenset(
    {"set", "quote", "begin", "defun", "lambda", "λ", "when", "quasiquote"}
)


class Expr:
    """Base of every expression value."""

    def to_sexpr(self) -> str:
        """Render the expression in s-expression notation."""
        if isinstance(self, Cons):
            parts = [self.car.to_sexpr()]
            node = self
            while isinstance(node.cdr, Cons):
                node = node.cdr
                parts.append(node.car.to_sexpr())
            text = " ".join(parts)
            if not is_nil(node.cdr):
                text += " . " + node.cdr.to_sexpr()
            return f"({text})"
        if isinstance(self, Symbol):
            return self.name
        if isinstance(self, Number):
            return str(self.value)
        if isinstance(self, String):
            return f'"{self.value}"'
        if isinstance(self, Lambda):
            return "<lambda>"
        if isinstance(self, Native):
            return "<native>"
        raise TypeError(f"unknown expression type {type(self).__name__}")

    def __str__(self) -> str:
        return self.to_sexpr()


@dataclass(eq=False)
class Symbol(Expr):
    name: str


@dataclass(eq=False)
class Number(Expr):
    value: int


@dataclass(eq=False)
class String(Expr):
    value: str


@dataclass(eq=False)
class Lambda(Expr):
    args_list: Expr
    body: Expr
    envir: Expr = field(repr=False)


@dataclass(eq=False)
class Native(Expr):
    """A function implemented in Python: ``fun(scope, args) -> Expr``."""

    fun: Callable[[Any, Expr], Expr]
    name: str = ""


@dataclass(eq=False)
class Cons(Expr):
    car: Expr
    cdr: Expr


class EvalError(Exception):
    """Evaluation failure carrying the error as an expression."""

    def __init__(self, expr: Expr) -> None:
        super().__init__(expr.to_sexpr())
        self.expr = expr


def equal(obj1: Expr, obj2: Expr) -> bool:
    """Structural equality of two expressions."""
    while True:
        if type(obj1) is not type(obj2):
            return False
        if isinstance(obj1, Cons):
            if not equal(obj1.car, obj2.car):
                return False
            obj1, obj2 = obj1.cdr, obj2.cdr
            continue
        if isinstance(obj1, Symbol):
            return obj1.name == obj2.name
        if isinstance(obj1, (Number, String)):
            return obj1.value == obj2.value
        if isinstance(obj1, Lambda):
            return obj1 is obj2
        if isinstance(obj1, Native):
            return obj1.fun == obj2.fun
        return False


def is_nil(obj: Expr) -> bool:
    return isinstance(obj, Symbol) and obj.name == "nil"


def is_symbol(obj: Expr) -> bool:
    return isinstance(obj, Symbol)


def is_number(obj: Expr) -> bool:
    return isinstance(obj, Number)


def is_string(obj: Expr) -> bool:
    return isinstance(obj, String)


def is_cons(obj: Expr) -> bool:
    return isinstance(obj, Cons)


def is_lambda(obj: Expr) -> bool:
    return isinstance(obj, Lambda)


def is_list(obj: Expr) -> bool:
    """True for nil or a chain of cons cells ending in nil."""
    while isinstance(obj, Cons):
        obj = obj.cdr
    return is_nil(obj)


def is_list_of_symbols(obj: Expr) -> bool:
    """True for a proper list whose every element is a symbol."""
    while isinstance(obj, Cons) and isinstance(obj.car, Symbol):
        obj = obj.cdr
    return is_nil(obj)


def is_special(name: str) -> bool:
    """Whether calls to ``name`` receive their arguments unevaluated."""
    return name in SPECIALS


def length_of_list(obj: Expr) -> int:
    """Number of elements in a proper list."""
    count = 0
    while not is_nil(obj):
        if not isinstance(obj, Cons):
            raise ValueError(f"not a proper list: {obj.to_sexpr()}")
        count += 1
        obj = obj.cdr
    return count


def assoc(key: Expr, alist: Expr) -> Expr:
    """Find the pair whose car equals ``key``; otherwise return the list's tail."""
    while isinstance(alist, Cons):
        pair = alist.car
        if isinstance(pair, Cons) and equal(pair.car, key):
            return pair
        alist = alist.cdr
    return alist


def make_list(*args: Expr) -> Expr:
    """Build a proper list out of the given expressions."""
    result: Expr = Symbol("nil")
    for item in reversed(args):
        if not isinstance(item, Expr):
            raise TypeError(f"not an expression: {item!r}")
        result = Cons(item, result)
    return result


def bool_as_expr(condition: bool) -> Expr:
    return Symbol("t") if condition else Symbol("nil")