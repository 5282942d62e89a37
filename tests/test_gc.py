from gamecore.ebisp.expr import Cons, Lambda, Number, Symbol
from gamecore.ebisp.gc import Gc


def test_add_and_inspect():
    gc = Gc()
    gc.add(Number(1))
    gc.add(Number(2))
    assert gc.inspect() == "++"
    assert len(gc) == 2


def test_add_returns_expr_and_ignores_duplicates():
    gc = Gc()
    n = Number(1)
    assert gc.add(n) is n
    gc.add(n)
    assert len(gc) == 1


def test_collect_frees_unreachable():
    gc = Gc()
    a = gc.add(Number(1))
    b = gc.add(Number(2))
    garbage = gc.add(Number(3))
    root = gc.add(Cons(a, b))
    gc.collect(root)
    assert gc.inspect() == "++.+"
    assert garbage not in gc
    assert a in gc and b in gc and root in gc


def test_second_collect_compacts_slots():
    gc = Gc()
    keep = gc.add(Number(1))
    gc.add(Number(2))
    gc.collect(keep)
    gc.collect(keep)
    assert gc.inspect() == "+"


def test_lambda_parts_are_reachable():
    gc = Gc()
    args = gc.add(Symbol("x"))
    body = gc.add(Symbol("y"))
    env = gc.add(Symbol("nil"))
    fn = gc.add(Lambda(args, body, env))
    gc.collect(fn)
    assert len(gc) == 4


def test_cycles_terminate():
    gc = Gc()
    cell = gc.add(Cons(Number(1), Symbol("nil")))
    cell.cdr = cell
    other = gc.add(Number(5))
    gc.collect(cell)
    assert cell in gc
    assert other not in gc


def test_unregistered_nodes_are_followed():
    gc = Gc()
    inner = gc.add(Number(7))
    root = Cons(inner, Symbol("nil"))
    gc.collect(root)
    assert inner in gc
    assert len(gc) == 1