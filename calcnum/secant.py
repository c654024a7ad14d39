"""Root finding with the secant method."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from calcnum.gauss import _fail, _reader

MAX_ITERATIONS = 1000
_MIN_DENOMINATOR = 1e-12


class SecantError(ArithmeticError):
    """Raised when the secant method cannot continue."""


@dataclass(frozen=True)
class SecantStep:
    """One iteration of the secant method."""

    iteration: int
    x: float
    fx: float


@dataclass(frozen=True)
class SecantResult:
    """Outcome of a converged secant run."""

    root: float
    iterations: int
    steps: tuple[SecantStep, ...]


def f(x: float) -> float:
    """Default function whose root is sought: exp(-x^2) - cos(x)."""
    return math.exp(-(x**2)) - math.cos(x)


def _secant_steps(x0, x1, epsilon, func, max_iterations) -> Iterator[SecantStep]:
    """Yield steps until convergence; the last step yielded is the converged one."""
    k = 0
    while True:
        if k > max_iterations:
            raise SecantError(
                "número máximo de iteracoes excedido. O método pode não estar convergindo."
            )
        fx0, fx1 = func(x0), func(x1)
        if abs(fx1 - fx0) < _MIN_DENOMINATOR:
            raise SecantError("divisão por zero na fórmula da secante.")
        x2 = x1 - fx1 * (x1 - x0) / (fx1 - fx0)
        k += 1
        fx2 = func(x2)
        yield SecantStep(k, x2, fx2)
        if abs(fx2) < epsilon or abs(x2 - x1) < epsilon:
            return
        x0, x1 = x1, x2


def secant(
    x0: float,
    x1: float,
    epsilon: float,
    func: Callable[[float], float] = f,
    max_iterations: int = MAX_ITERATIONS,
) -> SecantResult:
    """Find a root of ``func`` starting from ``x0`` and ``x1``."""
    steps = tuple(_secant_steps(x0, x1, epsilon, func, max_iterations))
    return SecantResult(root=steps[-1].x, iterations=steps[-1].iteration, steps=steps)


def format_step(step: SecantStep) -> str:
    """Render one iteration as a report line."""
    return f"Iteracao {step.iteration}: x = {step.x:.8f}, f(x) = {step.fx:.8f}"


def main(argv: list[str] | None = None) -> int:
    """Prompt for x0, x1 and epsilon on stdin and run the secant method."""
    read = _reader()
    print("\n\nMetodo da Secante (Recursivo, com limite de iteracoes)\n")
    try:
        print("Digite dois valores iniciais:\nDigite x0: ", end="", flush=True)
        x0 = read()
        print("Digite x1: ", end="", flush=True)
        x1 = read()
        print("Digite a precisao epsilon: ", end="", flush=True)
        epsilon = read()
        print()
        for step in _secant_steps(x0, x1, epsilon, f, MAX_ITERATIONS):
            print(format_step(step))
    except (ValueError, SecantError) as exc:
        return _fail(exc)

    print(f"\nTotal de iteracoes: {step.iteration}")
    print(f"\nRaiz aproximada: {step.x:.8f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())