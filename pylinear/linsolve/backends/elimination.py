"""
Gaussian elimination backend for square linear systems.

Forward elimination with partial pivoting on the augmented matrix,
classification of degenerate rows, then back substitution. Every swap,
normalization and elimination is recorded as a text step.

A column whose pivot is below tolerance is skipped without elimination.
The final row scan is what detects inconsistent and under-determined
systems. Skipping does not re-order the remaining columns, so some
singular inputs can reach back substitution; that case is reported as a
RuntimeWarning.
"""

import warnings
from typing import Any

import numpy as np

from pylinear.core.compute.formatting import format_augmented, format_fixed, format_scalar
from pylinear.core.compute.timing import Timer
from pylinear.core.compute.tolerances import ZERO_TOLERANCE
from pylinear.core.result import Result
from pylinear.linsolve.design import LinearSystemDesign
from pylinear.linsolve.solution import LinearSystemParams, SolutionStatus


class EliminationBackend:
    """
    Gaussian elimination with partial pivoting.

    This is the reference implementation: its classification and step
    trace define the expected behavior of the solver.
    """

    def __init__(self, tolerance: float = ZERO_TOLERANCE):
        self._tolerance = tolerance

    @property
    def name(self) -> str:
        return 'elimination'

    def solve(self, design: LinearSystemDesign) -> Result[LinearSystemParams]:
        """
        Solve A x = b by Gaussian elimination.

        Algorithm, for each column i:
            1. Swap the row with the largest |value| in column i (rows i..n-1)
               into row i
            2. Skip the column if that pivot is below tolerance
            3. Divide the pivot row by the pivot and eliminate column i
               from every row below
        Then scan rows from the bottom for an all-zero coefficient row
        (0 = k: no solution, 0 = 0: infinite solutions), else back
        substitute.

        Args:
            design: Validated linear system design

        Returns:
            Result containing LinearSystemParams
        """
        timer = Timer()
        timer.start()

        tol = self._tolerance
        n = design.n
        aug = design.augmented()
        steps = [f"Initial augmented matrix:\n{format_augmented(aug)}"]
        swaps = 0
        null_pivots: list[int] = []
        notes: list[str] = []

        # === Forward Elimination ===
        with timer.section('forward_elimination'):
            for i in range(n):
                max_row = i + int(np.argmax(np.abs(aug[i:, i])))
                if max_row != i:
                    aug[[i, max_row]] = aug[[max_row, i]]
                    swaps += 1
                    steps.append(
                        f"Swap rows {i + 1} and {max_row + 1}:\n{format_augmented(aug)}"
                    )

                pivot = aug[i, i]
                if abs(pivot) < tol:
                    null_pivots.append(i)
                    notes.append(f"Null pivot in column {i + 1}; column skipped")
                    steps.append(f"Null pivot at position [{i + 1}, {i + 1}]")
                    continue

                aug[i] = aug[i] / pivot
                steps.append(
                    f"Normalize row {i + 1} (divide by {format_fixed(pivot)}):\n"
                    f"{format_augmented(aug)}"
                )

                for k in range(i + 1, n):
                    factor = aug[k, i]
                    if abs(factor) > tol:
                        aug[k] = aug[k] - factor * aug[i]
                        steps.append(
                            f"Eliminate: R{k + 1} = R{k + 1} - {format_fixed(factor)} "
                            f"* R{i + 1}:\n{format_augmented(aug)}"
                        )

        # === Classification ===
        status = SolutionStatus.UNIQUE
        with timer.section('classification'):
            for i in range(n - 1, -1, -1):
                if np.all(np.abs(aug[i, :n]) <= tol):
                    if abs(aug[i, n]) > tol:
                        status = SolutionStatus.NONE
                        steps.append(f"Inconsistent system: 0 = {format_fixed(aug[i, n])}")
                    else:
                        status = SolutionStatus.INFINITE
                        steps.append("Infinite solutions")
                    break

        # === Back Substitution ===
        solution = None
        if status is SolutionStatus.UNIQUE:
            with timer.section('back_substitution'):
                solution = np.zeros(n)
                for i in range(n - 1, -1, -1):
                    solution[i] = aug[i, n] - aug[i, i + 1:n] @ solution[i + 1:]
                    steps.append(f"x{i + 1} = {format_scalar(solution[i])}")

            if null_pivots:
                message = (
                    f"Back substitution ran after {len(null_pivots)} null pivot(s) "
                    f"in column(s) {[c + 1 for c in null_pivots]}; "
                    f"the unique classification may be unreliable"
                )
                notes.append(message)
                warnings.warn(message, RuntimeWarning, stacklevel=3)

        timer.stop()

        params = LinearSystemParams(
            status=status,
            solution=solution,
            steps=tuple(steps),
            reduced=aug,
        )

        info: dict[str, Any] = {
            'method': 'gaussian_elimination',
            'pivoting': 'partial',
            'swaps': swaps,
            'null_pivots': tuple(null_pivots),
            'tolerance': tol,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(notes),
        )
