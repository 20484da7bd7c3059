"""
Numerical tolerances and iteration limits.

Single source of truth for the thresholds below which a magnitude is
treated as zero, the power iteration cap, and the size up to which
determinants use cofactor expansion. Public functions accept keyword
overrides; these are the defaults.

The ToleranceTier records describe comparison precision for the different
kinds of results and are used by the test suite.
"""

from dataclasses import dataclass


# Magnitudes strictly below this are treated as zero (pivots, norms,
# determinants, dot products of orthogonal vectors).
ZERO_TOLERANCE = 1e-10

# Power iteration stops with ConvergenceError after this many steps.
DEFAULT_MAX_ITERATIONS = 1000

# Matrix.determinant(method='auto') uses cofactor expansion up to this size
# and partial-pivoting elimination above it.
COFACTOR_MAX_SIZE = 6


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Identical floating operations on both sides
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Bit-identical results (dot symmetry, literals)',
)

# Short chains of element-wise arithmetic
ROUNDTRIP = ToleranceTier(
    rtol=0.0,
    atol=1e-9,
    name='roundtrip',
    description='Element-wise round trips and unit norms',
)

# Results of elimination (inverse, solver, decompositions)
ELIMINATION = ToleranceTier(
    rtol=0.0,
    atol=1e-6,
    name='elimination',
    description='Products of elimination-based algorithms',
)


def is_zero(value: float, tolerance: float = ZERO_TOLERANCE) -> bool:
    """True if |value| is strictly below the tolerance."""
    return abs(value) < tolerance
