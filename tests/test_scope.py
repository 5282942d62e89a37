from gamecore.ebisp.expr import Number, Symbol, is_nil, make_list
from gamecore.ebisp.scope import Scope


def lookup(scope, name):
    cell = scope.get_value(Symbol(name))
    return None if is_nil(cell) else cell.cdr.value


def test_unbound_is_nil():
    assert is_nil(Scope().get_value(Symbol("x")))


def test_set_and_get():
    scope = Scope()
    scope.set_value(Symbol("x"), Number(10))
    cell = scope.get_value(Symbol("x"))
    assert cell.car.name == "x"
    assert cell.cdr.value == 10


def test_set_existing_mutates_cell():
    scope = Scope()
    scope.set_value(Symbol("x"), Number(1))
    cell = scope.get_value(Symbol("x"))
    scope.set_value(Symbol("x"), Number(2))
    assert scope.get_value(Symbol("x")) is cell
    assert cell.cdr.value == 2


def test_frame_shadows_and_pops():
    scope = Scope()
    scope.set_value(Symbol("x"), Number(1))
    scope.push_frame(make_list(Symbol("x")), make_list(Number(5)))
    assert lookup(scope, "x") == 5
    scope.pop_frame()
    assert lookup(scope, "x") == 1


def test_set_inside_frame_updates_local_binding():
    scope = Scope()
    scope.set_value(Symbol("x"), Number(1))
    scope.push_frame(make_list(Symbol("x")), make_list(Number(5)))
    scope.set_value(Symbol("x"), Number(7))
    assert lookup(scope, "x") == 7
    scope.pop_frame()
    assert lookup(scope, "x") == 1


def test_new_binding_inside_frame_goes_global():
    scope = Scope()
    scope.push_frame(make_list(Symbol("a")), make_list(Number(3)))
    scope.set_value(Symbol("y"), Number(9))
    scope.pop_frame()
    assert lookup(scope, "y") == 9
    assert lookup(scope, "a") is None


def test_push_frame_stops_at_shorter_list():
    scope = Scope()
    scope.push_frame(make_list(Symbol("a"), Symbol("b")), make_list(Number(1)))
    assert lookup(scope, "a") == 1
    assert lookup(scope, "b") is None


def test_captured_environment_sees_new_globals():
    scope = Scope()
    scope.set_value(Symbol("x"), Number(1))
    captured = Scope(scope.expr)
    scope.set_value(Symbol("z"), Number(4))
    assert lookup(captured, "z") == 4


def test_pop_frame_on_nil_is_harmless():
    scope = Scope(Symbol("nil"))
    scope.pop_frame()
    assert is_nil(scope.expr)


def test_set_on_non_cons_scope_creates_frame():
    scope = Scope(Symbol("nil"))
    scope.set_value(Symbol("q"), Number(2))
    assert lookup(scope, "q") == 2