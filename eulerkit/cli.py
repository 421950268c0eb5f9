"""Command line entry point: run, benchmark and scaffold problem solutions."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable, Sequence
from pathlib import Path

from eulerkit import problems_early, problems_later  # noqa: F401  (registers solvers)
from eulerkit.registry import problems

PLACEHOLDER = "__PROBLEM_NUMBER__"
DEFAULT_TEMPLATE = "template.txt"
BENCHMARK_SAMPLES = 10

_USAGE = "Please input a valid problem number\n$ eulerkit <number>"
_BENCHMARK_USAGE = "Please input a valid problem number\n$ eulerkit benchmark <number>"


class TemplateError(Exception):
    """Raised when a solution file cannot be created from the template."""


def benchmark(function: Callable[[], object], samples: int) -> float:
    """Call ``function`` ``samples`` times and return the mean run time in seconds."""
    if samples < 1:
        raise ValueError("samples must be at least 1")
    total = 0.0
    for _ in range(samples):
        start = time.perf_counter()
        function()
        total += time.perf_counter() - start
    return total / samples


def create_from_template(
    number: int,
    template: str | Path = DEFAULT_TEMPLATE,
    root: str | Path = ".",
) -> Path:
    """Write ``problems/pNNN/NNN.py`` under ``root`` from ``template``.

    Every occurrence of the placeholder in the template is replaced with the
    zero-padded problem number. An existing output file is overwritten.
    Returns the path of the written file.
    """
    replacement = f"{number:03d}"
    template_path = Path(template)
    output = Path(root) / "problems" / f"p{replacement}" / f"{replacement}.py"

    try:
        content = template_path.read_text()
    except OSError as exc:
        raise TemplateError(
            f"failed to read template file '{template_path}': {exc}"
        ) from exc

    try:
        output.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise TemplateError(
            f"failed to create output directory '{output.parent}': {exc}"
        ) from exc

    try:
        output.write_text(content.replace(PLACEHOLDER, replacement))
    except OSError as exc:
        raise TemplateError(f"failed to write output file '{output}': {exc}") from exc

    return output


def _trim(value: float, places: int) -> str:
    return f"{value:.{places}f}".rstrip("0").rstrip(".")


def _format_duration(seconds: float) -> str:
    """Render a duration compactly, e.g. ``1.5ms`` or ``2m3.25s``."""
    ns = round(seconds * 1_000_000_000)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    ns = abs(ns)
    if ns < 1_000:
        return f"{sign}{ns}ns"
    if ns < 1_000_000:
        return f"{sign}{_trim(ns / 1_000, 3)}µs"
    if ns < 1_000_000_000:
        return f"{sign}{_trim(ns / 1_000_000, 6)}ms"
    minutes, rest = divmod(ns, 60 * 1_000_000_000)
    secs = _trim(rest / 1_000_000_000, 9) or "0"
    if minutes == 0:
        return f"{sign}{secs}s"
    hours, minutes = divmod(minutes, 60)
    head = f"{hours}h" if hours else ""
    return f"{sign}{head}{minutes}m{secs}s"


def _sort_key(key: str) -> tuple[int, int | str]:
    return (0, int(key)) if key.isdigit() else (1, key)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line interface and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    registered = problems()

    if not args:
        print(_USAGE)
        return 0

    if len(args) == 2 and args[0] == "create":
        try:
            number = int(args[1])
        except ValueError:
            print("Invalid problem number please try again.")
            return 0
        try:
            output = create_from_template(number)
        except TemplateError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(f"Successfully created '{output}' from template '{DEFAULT_TEMPLATE}'")
        return 0

    arg = args[0]
    if arg in registered:
        print(f"Problem [{arg}] : {registered[arg]()}")
    elif arg == "all":
        for key in sorted(registered, key=_sort_key):
            print(f"Problem [{key}] : {registered[key]()}")
    elif arg == "benchmark":
        if len(args) < 2:
            print(_BENCHMARK_USAGE)
            return 0
        solver = registered.get(args[1])
        if solver is not None:
            print(f"Sampling function {BENCHMARK_SAMPLES} times")
            average = benchmark(solver, BENCHMARK_SAMPLES)
            print(f"Problem [{args[1]}] : {_format_duration(average)}")
    else:
        print(f"Problem {arg} not implemented.")
    return 0


if __name__ == "__main__":
    sys.exit(main())