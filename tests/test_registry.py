import pytest

from eulerkit import registry


@pytest.fixture
def empty_registry(monkeypatch):
    monkeypatch.setattr(registry, "_PROBLEMS", {})


def test_register_records_solver(empty_registry):
    @registry.register("42")
    def solver():
        return 7

    assert registry.problems() == {"42": solver}


def test_register_returns_function_unchanged(empty_registry):
    def solver():
        return 11

    decorated = registry.register("x")(solver)
    assert decorated is solver
    assert decorated() == 11


def test_register_same_key_replaces(empty_registry):
    registry.register("1")(lambda: 1)

    def second():
        return 2

    registry.register("1")(second)
    table = registry.problems()
    assert list(table) == ["1"]
    assert table["1"] is second


def test_problems_returns_copy(empty_registry):
    registry.register("a")(lambda: 0)
    snapshot = registry.problems()
    snapshot["b"] = lambda: 1
    assert set(registry.problems()) == {"a"}


def test_problems_empty_when_nothing_registered(empty_registry):
    assert registry.problems() == {}


def test_problem_modules_register_their_solvers():
    from eulerkit import problems_early, problems_later

    table = registry.problems()
    assert table["1"] is problems_early.solve_001
    assert table["6"] is problems_early.solve_006
    assert table["7"] is problems_later.solve_007
    assert table["12"] is problems_later.solve_012
    assert {str(n) for n in range(1, 13)} <= set(table)