"""Tracking of allocated expressions with mark-and-sweep bookkeeping."""

from __future__ import annotations

from gamecore.ebisp.expr import Cons, Expr, Lambda


class Gc:
    """Registry of expressions that can be swept relative to a root.

    Each registered expression occupies a slot. ``collect`` first drops the
    slots freed by the previous collection, then frees every registered
    expression that is not reachable from the root. Expressions reached
    while tracing that were never registered are followed but not tracked.
    """

    def __init__(self) -> None:
        self._slots: list[Expr | None] = []
        self._registered: set[int] = set()

    def __len__(self) -> int:
        return sum(1 for slot in self._slots if slot is not None)

    def __contains__(self, expr: object) -> bool:
        return id(expr) in self._registered

    def add(self, expr: Expr) -> Expr:
        """Register ``expr`` and return it."""
        if id(expr) not in self._registered:
            self._registered.add(id(expr))
            self._slots.append(expr)
        return expr

    def _reachable(self, root: Expr) -> set[int]:
        seen: set[int] = set()
        stack = [root]
        while stack:
            node = stack.pop()
            if id(node) in seen:
                continue
            seen.add(id(node))
            if isinstance(node, Cons):
                stack.extend((node.car, node.cdr))
            elif isinstance(node, Lambda):
                stack.extend((node.args_list, node.body, node.envir))
        return seen

    def collect(self, root: Expr) -> None:
        """Free every registered expression unreachable from ``root``."""
        self._slots = [slot for slot in self._slots if slot is not None]
        reachable = self._reachable(root)
        for index, slot in enumerate(self._slots):
            if slot is not None and id(slot) not in reachable:
                self._registered.discard(id(slot))
                self._slots[index] = None

    def inspect(self) -> str:
        """One character per slot: ``+`` for live, ``.`` for freed."""
        return "".join("." if slot is None else "+" for slot in self._slots)