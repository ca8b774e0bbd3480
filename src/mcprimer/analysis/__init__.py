"""Monte Carlo estimation, exact counting and convergence analysis."""

from .convergence import convergence_table
from .estimator import Estimate, estimate, estimate_parallel

__all__ = ["Estimate", "convergence_table", "estimate", "estimate_parallel"]
