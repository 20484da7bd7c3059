"""
Generic result container for solver computations.

The Result class is the envelope that solver backends return. Domain-specific
solution wrappers (e.g. LinearSystemSolution) hold a Result and expose
convenient accessors over its payload, so timing, warnings and backend
metadata are handled the same way everywhere.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivoting, swap counts)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a returned result cannot drift
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for solver computations.

    Type Parameters:
        P: The domain-specific parameter payload type

    Attributes:
        params: Domain-specific payload (solution, classification, trace)
        info: Structured metadata (method, pivot statistics, ranks)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=LinearSystemParams(status=SolutionStatus.UNIQUE, ...),
        ...     info={'method': 'gaussian_elimination', 'swaps': 2},
        ...     timing={'total_seconds': 0.0004},
        ...     backend_name='elimination'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
