"""Registry mapping problem identifiers to their solver functions."""

from __future__ import annotations

from collections.abc import Callable

Solver = Callable[[], int]

_PROBLEMS: dict[str, Solver] = {}


def register(key: str) -> Callable[[Solver], Solver]:
    """Return a decorator that records a solver under ``key``.

    Registering a key a second time replaces the earlier solver.
    """

    def decorator(fn: Solver) -> Solver:
        _PROBLEMS[key] = fn
        return fn

    return decorator


def problems() -> dict[str, Solver]:
    """Return a snapshot of the registered solvers, keyed by identifier."""
    return dict(_PROBLEMS)