"""Secant root finding, Gaussian elimination, Jacobi and Gauss-Seidel iteration, and the Sassenfeld criterion."""

__version__ = "0.1.0"
__all__ = ["__version__"]