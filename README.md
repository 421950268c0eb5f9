# eulerkit

Solutions to Project Euler problems 1 to 12, with a command-line runner that
prints answers, times solutions and creates new problem files from a template.

## Installation

```
pip install .
```

## Command line

Solve one problem:

```
eulerkit 7
```

prints `Problem [7] : 104743`.

Solve every registered problem, in numeric order:

```
eulerkit all
```

Time a solution. The solver is run 10 times and the mean run time is printed
in a compact form such as `1.5ms` or `2.25s`:

```
eulerkit benchmark 10
```

Create a new problem file from `template.txt` in the current directory. Every
`__PROBLEM_NUMBER__` in the template is replaced by the zero-padded number, and
the result is written to `problems/p013/013.py` (an existing file is
overwritten):

```
eulerkit create 13
```

If the template cannot be read or the output cannot be written, the message
goes to standard error and the exit status is 1. An unknown problem prints
`Problem <name> not implemented.`

The created file is only written to disk; the runner does not pick it up.
Only solvers registered inside the package can be run from the command line.

## Library

```python
from eulerkit.registry import problems
from eulerkit.problems_early import solve_001, is_palindrome, largest_prime_factor
from eulerkit.problems_later import is_prime, triangle_numbers, count_divisors
import eulerkit.cli  # importing the solver modules registers problems 1 to 12

solve_001()                       # 233168
is_palindrome(9009)               # True
largest_prime_factor(13195)       # 29
is_prime(97)                      # True
count_divisors(28)                # 6

for key, solve in problems().items():
    print(key, solve())
```

`problems()` returns a copy of the registry. New solvers are added with the
`register` decorator; registering a key again replaces the earlier solver:

```python
from eulerkit.registry import register

@register("13")
def solve_013():
    ...
```

`eulerkit.cli` also provides `benchmark(function, samples)`, which returns the
mean run time in seconds, and `create_from_template(number, template, root)`,
which returns the path of the written file and raises `TemplateError` on
failure.

## Tests

```
pip install ".[test]"
pytest
```