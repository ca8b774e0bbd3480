"""Monte Carlo estimation of probabilities and expectations for teaching."""

from .analysis import Estimate, estimate, estimate_parallel
from .errors import InvalidArgument
from .experiments import Distribution, Experiment, build_experiment

__version__ = "0.1.0"

__all__ = [
    "Distribution",
    "Estimate",
    "Experiment",
    "InvalidArgument",
    "build_experiment",
    "estimate",
    "estimate_parallel",
]
