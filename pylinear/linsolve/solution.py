"""
Linear system solution types.

Contains the classification enum, the parameter payload produced by
backends, and the user-facing solution wrapper.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from pylinear.core.compute.formatting import format_fixed, format_scalar
from pylinear.core.result import Result
from pylinear.vector import Vector

if TYPE_CHECKING:
    from pylinear.linsolve.design import LinearSystemDesign


class SolutionStatus(Enum):
    """Classification of a square linear system."""
    UNIQUE = 'unique'
    INFINITE = 'infinite'
    NONE = 'none'


@dataclass(frozen=True)
class LinearSystemParams:
    """
    Parameter payload for a linear system solve.

    This is the immutable data computed by backends. `solution` is set
    only for UNIQUE systems; `reduced` is the augmented matrix after
    forward elimination, when the backend produces one.
    """
    status: SolutionStatus
    solution: NDArray[np.floating[Any]] | None
    steps: tuple[str, ...]
    reduced: NDArray[np.floating[Any]] | None = None


@dataclass
class LinearSystemSolution:
    """
    User-facing linear system results.

    Wraps the backend Result and exposes the classification, the solution
    (unique systems only) and the step trace.
    """
    _result: Result[LinearSystemParams]
    _design: 'LinearSystemDesign'

    @property
    def status(self) -> SolutionStatus:
        return self._result.params.status

    @property
    def is_unique(self) -> bool:
        return self.status is SolutionStatus.UNIQUE

    @property
    def has_infinite_solutions(self) -> bool:
        return self.status is SolutionStatus.INFINITE

    @property
    def has_no_solution(self) -> bool:
        return self.status is SolutionStatus.NONE

    @property
    def solution(self) -> Vector | None:
        """Solution vector for unique systems, None otherwise."""
        x = self._result.params.solution
        if x is None:
            return None
        return Vector(x)

    @property
    def steps(self) -> tuple[str, ...]:
        return self._result.params.steps

    @property
    def reduced(self) -> NDArray[np.floating[Any]] | None:
        reduced = self._result.params.reduced
        return None if reduced is None else reduced.copy()

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Human-readable classification, solution and trace."""
        lines = [
            "Linear System Results",
            "=" * 60,
            f"Equations: {self.n}",
            f"Classification: {self.status.value}",
        ]

        if self.is_unique:
            lines.append("")
            lines.append("Solution:")
            lines.append("-" * 60)
            for i, value in enumerate(self._result.params.solution):
                lines.append(f"  x{i + 1} = {format_scalar(value)}")

        lines.append("")
        lines.append(f"Steps ({len(self.steps)}):")
        lines.append("-" * 60)
        lines.extend(self.steps)

        if self.warnings:
            lines.append("")
            lines.append("Warnings:")
            lines.extend(f"  {w}" for w in self.warnings)

        lines.append("-" * 60)
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {format_fixed(self.timing.get('total_seconds', 0), 4)}s")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(n={self.n}, status={self.status.value}, "
            f"backend={self.backend_name!r})"
        )
