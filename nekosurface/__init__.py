"""Vector, matrix and bounds math, a Gauss-Seidel solver, file helpers and frame timing."""

__version__ = "0.1.0"

__all__ = [
    "bounds",
    "fileio",
    "frameloop",
    "lcp",
    "matrix",
    "vector",
]