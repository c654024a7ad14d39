# calcnum

A small set of textbook numerical methods. Each one can be used as a
library function or run as an interactive command. The interactive
prompts and reports are in Portuguese.

- **Secant method** (`calcnum.secant`): finds a root of
  `f(x) = exp(-x²) - cos(x)`, or of any function you pass in.
- **Gaussian elimination** (`calcnum.gauss`): solves `A x = b` by
  triangularization followed by back substitution.
- **Gauss-Jacobi** (`calcnum.jacobi`) and **Gauss-Seidel**
  (`calcnum.seidel`): iterative solvers for `A x = b` that start from an
  initial guess and stop when no component changes by more than a tolerance.
- **Sassenfeld criterion** (`calcnum.sassenfeld`): a convergence check.
  When a matrix fails it, row permutations are searched for one that passes.
- **Demonstration** (`calcnum.demo`): runs every method on fixed example data.

## Installation

```
pip install .
```

Nothing is needed beyond the Python standard library (Python 3.10 or later).

## Command-line use

Each command reads whitespace-separated values from standard input:

```
calcnum-secant       # x0, x1 and epsilon
calcnum-gauss        # n, the matrix A and the vector b
calcnum-jacobi       # n, A, b, the initial guess and the tolerance
calcnum-seidel       # same input as calcnum-jacobi
calcnum-sassenfeld   # the order and the matrix A
calcnum-demo         # no input; prints the worked examples
```

If the input runs out, is not a number, or the method fails (a zero pivot,
a secant that does not converge), the command prints `Erro: ...` to
standard error and exits with status 1.

## Library use

```python
from calcnum.secant import secant
from calcnum.gauss import gauss_elimination
from calcnum.jacobi import gauss_jacobi
from calcnum.seidel import gauss_seidel
from calcnum.sassenfeld import (
    sassenfeld_betas, satisfies_sassenfeld, find_row_permutation, format_matrix,
)

result = secant(1.5, 2.0, 1e-4)
print(result.root, result.iterations, len(result.steps))

x = gauss_elimination([[2, 1], [1, 3]], [3, 5])

sol = gauss_jacobi([[10, 2, 3], [1, 5, 1], [2, 3, 10]], [7, 8, 6],
                   [0.7, -1.6, 0.6], 0.5)
print(sol.report())

sol = gauss_seidel([[5, 1, 1], [3, 4, 1], [3, 3, 6]], [5, 6, 0],
                   [0, 0, 0], 0.1)
print(sol.x, sol.converged, sol.iterations)

matrix = [[2, 1, 3], [0, -1, 1], [1, 0, 3]]
if not satisfies_sassenfeld(matrix, weighted=True):
    permuted = find_row_permutation(matrix, weighted=True)
    if permuted is not None:
        print(format_matrix(permuted))
```

### Secant

`secant(x0, x1, epsilon, func=f, max_iterations=1000)` returns a
`SecantResult` with `root`, `iterations` and `steps`, a tuple of
`SecantStep(iteration, x, fx)`. It stops when `|f(x)| < epsilon` or when
successive estimates differ by less than `epsilon`. It raises `SecantError`
when the iteration limit is exceeded or when `|f(x1) - f(x0)|` falls below
`1e-12`. `format_step(step)` renders one step as a report line.

### Gaussian elimination

`gauss_elimination(a, b)` returns the solution as a list and leaves its
inputs unchanged. Rows are never exchanged, so a zero pivot raises
`ZeroDivisionError`. A non-square matrix or a vector of the wrong length
raises `ValueError`.

### Iterative solvers

`gauss_jacobi(a, b, x0, tolerance, max_iterations=100)` and
`gauss_seidel(...)` with the same arguments return an `IterativeSolution`
with `method`, `x`, `converged`, `iterations` and `max_iterations`;
`report()` renders it as text. For Gauss-Jacobi, `iterations` does not
count the final sweep that confirms convergence; for Gauss-Seidel it does.

### Sassenfeld

`sassenfeld_betas(a, weighted=False)` returns one coefficient per row. With
`weighted=False` each is the plain off-diagonal sum divided by the diagonal
entry; with `weighted=True` the coefficients of earlier rows scale their
columns, which is the Sassenfeld criterion proper. A diagonal entry below
`1e-12` in magnitude raises `ZeroDivisionError`.
`satisfies_sassenfeld(a, weighted=False)` is true when every coefficient is
below one (and false on a zero diagonal). `find_row_permutation(a,
weighted=False)` returns the first row order that satisfies the check,
trying orders lexicographically, or `None`. The `calcnum-sassenfeld`
command uses the unweighted check; `calcnum-demo` uses the weighted one.

## Limitations

- Gaussian elimination does no pivoting.
- The secant command always uses the built-in function
  `exp(-x²) - cos(x)`; other functions are available only through the
  library call.
- The commands take no options; all input comes from standard input.