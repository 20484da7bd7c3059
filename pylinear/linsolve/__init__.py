"""
Square linear systems.

Public API:
    solve(coefficients, constants, ...) -> LinearSystemSolution

The solve() function is the only entry point. It handles:
    - Input validation
    - Design construction
    - Backend selection
    - Result wrapping

Example:
    >>> from pylinear.linsolve import solve
    >>> result = solve([[1, 1], [2, 2]], [2, 4])
    >>> result.has_infinite_solutions
    True
    >>> print(result.summary())
"""

from pylinear.linsolve.design import LinearSystemDesign
from pylinear.linsolve.solution import (
    LinearSystemParams,
    LinearSystemSolution,
    SolutionStatus,
)
from pylinear.linsolve.solvers import solve

__all__ = [
    "solve",
    "LinearSystemDesign",
    "LinearSystemSolution",
    "LinearSystemParams",
    "SolutionStatus",
]
