"""
LAPACK cross-check backend for square linear systems.

Classifies the system by the Rouche-Capelli theorem, comparing the
numerical rank of A with that of [A | b], and solves unique systems with
scipy.linalg.solve (LAPACK gesv). Used to validate the elimination backend
against an independent implementation.
"""

from typing import Any

import numpy as np
from scipy import linalg as sp_linalg

from pylinear.core.compute.formatting import format_scalar
from pylinear.core.compute.timing import Timer
from pylinear.core.compute.tolerances import ZERO_TOLERANCE
from pylinear.core.result import Result
from pylinear.linsolve.design import LinearSystemDesign
from pylinear.linsolve.solution import LinearSystemParams, SolutionStatus


class LapackBackend:
    """
    Rank-based classification plus LAPACK solve.

    Ranks count singular values above the absolute tolerance. The step
    trace records both ranks and, for unique systems, each unknown.
    """

    def __init__(self, tolerance: float = ZERO_TOLERANCE):
        self._tolerance = tolerance

    @property
    def name(self) -> str:
        return 'lapack'

    def solve(self, design: LinearSystemDesign) -> Result[LinearSystemParams]:
        """
        Solve A x = b via rank classification and LAPACK.

        Args:
            design: Validated linear system design

        Returns:
            Result containing LinearSystemParams
        """
        timer = Timer()
        timer.start()

        tol = self._tolerance
        n = design.n
        A = design.coefficients

        with timer.section('rank'):
            rank_a = int(np.linalg.matrix_rank(A, tol=tol))
            rank_aug = int(np.linalg.matrix_rank(design.augmented(), tol=tol))

        steps = [f"rank(A) = {rank_a}", f"rank([A | b]) = {rank_aug}"]
        solution = None

        if rank_a < rank_aug:
            status = SolutionStatus.NONE
            steps.append(f"Inconsistent system: rank(A) = {rank_a} < rank([A | b]) = {rank_aug}")
        elif rank_a < n:
            status = SolutionStatus.INFINITE
            steps.append("Infinite solutions")
        else:
            status = SolutionStatus.UNIQUE
            with timer.section('solve'):
                solution = sp_linalg.solve(A, design.constants)
            steps.extend(f"x{i + 1} = {format_scalar(v)}" for i, v in enumerate(solution))

        timer.stop()

        params = LinearSystemParams(
            status=status,
            solution=solution,
            steps=tuple(steps),
        )

        info: dict[str, Any] = {
            'method': 'lapack',
            'rank': rank_a,
            'augmented_rank': rank_aug,
            'tolerance': tol,
        }

        return Result(
            params=params,
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=(),
        )
