"""Lexical environments: a stack of association-list frames."""

from __future__ import annotations

from dataclasses import dataclass, field

from gamecore.ebisp.expr import Cons, Expr, Symbol, assoc, is_nil


def _empty_scope() -> Expr:
    return Cons(Symbol("nil"), Symbol("nil"))


@dataclass
class Scope:
    """An environment held as a list of frames, innermost first.

    Each frame is an alist of ``(name . value)`` cells; the last frame is
    the global one.
    """

    expr: Expr = field(default_factory=_empty_scope)

    def get_value(self, name: Expr) -> Expr:
        """Return the ``(name . value)`` cell bound to ``name``, or nil."""
        node = self.expr
        while isinstance(node, Cons):
            cell = assoc(name, node.car)
            if not is_nil(cell):
                return cell
            node = node.cdr
        return node

    def set_value(self, name: Expr, value: Expr) -> None:
        """Rebind ``name`` where it is bound, or create a global binding."""
        node = self.expr
        if not isinstance(node, Cons):
            self.expr = Cons(Cons(Cons(name, value), Symbol("nil")), node)
            return

        while isinstance(node, Cons):
            cell = assoc(name, node.car)
            if not is_nil(cell):
                cell.cdr = value
                return
            if is_nil(node.cdr):
                # Mutate the global frame in place so closures sharing it see the binding.
                node.car = Cons(Cons(name, value), node.car)
                return
            node = node.cdr

    def push_frame(self, variables: Expr, arguments: Expr) -> None:
        """Push a frame binding each variable to the matching argument."""
        frame: Expr = Symbol("nil")
        while (
            isinstance(variables, Cons)
            and isinstance(arguments, Cons)
        ):
            frame = Cons(Cons(variables.car, arguments.car), frame)
            variables = variables.cdr
            arguments = arguments.cdr
        self.expr = Cons(frame, self.expr)

    def pop_frame(self) -> None:
        """Drop the innermost frame."""
        if isinstance(self.expr, Cons):
            self.expr = self.expr.cdr