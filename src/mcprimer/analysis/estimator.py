"""Monte Carlo estimator and aggregated estimates."""

import logging
import math
import threading
from collections.abc import Callable, Iterator
from concurrent.futures import ProcessPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass, field
from numbers import Real
from typing import Any

import numpy as np

from mcprimer.config import DEFAULT_WORKERS
from mcprimer.errors import InvalidArgument

logger = logging.getLogger(__name__)

TrialGenerator = Callable[[np.random.Generator], Any]
Scorer = Callable[[Any], Any]
Contribution = float | tuple[float, ...]

# Generators currently driving an estimate() call, keyed by id()
_generators_in_use: set[int] = set()
_generators_lock = threading.Lock()


@dataclass(frozen=True)
class Estimate:
    """Sample-mean aggregate of scorer contributions over one trial batch."""

    value: Contribution
    sample_count: int
    std: Contribution | None = None
    seed: int | None = None
    contributions: np.ndarray | None = field(default=None, repr=False, compare=False)

    @property
    def is_vector(self) -> bool:
        """Whether the scorer produced tuple contributions."""
        return isinstance(self.value, tuple)

    @property
    def standard_error(self) -> Contribution | None:
        """Standard error of the mean, if the standard deviation was requested."""
        if self.std is None:
            return None
        root_n = math.sqrt(self.sample_count)
        if isinstance(self.std, tuple):
            return tuple(s / root_n for s in self.std)
        return self.std / root_n

    def confidence_interval(self, z: float = 1.96) -> tuple:
        """Normal-approximation confidence interval around the estimate.

        Args:
            z: Critical value (1.96 for a two-sided 95% interval)

        Returns:
            ``(low, high)`` for scalar estimates, or one such pair per component
        """
        if self.std is None:
            raise InvalidArgument(
                "confidence interval needs the sample standard deviation; "
                "run estimate() with with_std=True"
            )
        se = self.standard_error
        if isinstance(self.value, tuple):
            return tuple((v - z * s, v + z * s) for v, s in zip(self.value, se))
        return (self.value - z * se, self.value + z * se)

    def component(self, index: int) -> float:
        """Return one component of a vector estimate (index 0 for scalars)."""
        if isinstance(self.value, tuple):
            return self.value[index]
        if index != 0:
            raise IndexError(f"scalar estimate has no component {index}")
        return self.value


def _check_sample_count(sample_count: Any) -> int:
    if isinstance(sample_count, (bool, np.bool_)) or not isinstance(sample_count, (int, np.integer)):
        raise InvalidArgument(f"sample_count must be an integer, got {sample_count!r}")
    if sample_count <= 0:
        raise InvalidArgument(f"sample_count must be positive, got {sample_count}")
    return int(sample_count)


def _to_number(value: Any) -> float:
    if isinstance(value, (Real, np.bool_)):
        return float(value)
    raise InvalidArgument(f"scorer returned non-numeric value {value!r}")


def _to_contribution(score: Any) -> Contribution:
    if isinstance(score, (tuple, list)):
        if not score:
            raise InvalidArgument("scorer returned an empty tuple")
        return tuple(_to_number(v) for v in score)
    return _to_number(score)


@contextmanager
def _claim(rng: np.random.Generator) -> Iterator[np.random.Generator]:
    """Mark a generator as in use for the duration of one run."""
    key = id(rng)
    with _generators_lock:
        if key in _generators_in_use:
            raise InvalidArgument(
                "random generator is already driving another estimate; "
                "give each concurrent run its own generator"
            )
        _generators_in_use.add(key)
    try:
        yield rng
    finally:
        with _generators_lock:
            _generators_in_use.discard(key)


def _collect(
    sample_count: int,
    trial_generator: TrialGenerator,
    scorer: Scorer,
    rng: np.random.Generator,
) -> np.ndarray:
    """Run the trials and return contributions as a (n,) or (n, k) array."""
    contributions: list[Contribution] = []
    width: int | None = None

    for _ in range(sample_count):
        contribution = _to_contribution(scorer(trial_generator(rng)))
        this_width = len(contribution) if isinstance(contribution, tuple) else 0
        if width is None:
            width = this_width
        elif this_width != width:
            raise InvalidArgument(
                f"scorer returned contributions of inconsistent shape "
                f"({width} then {this_width} components)"
            )
        contributions.append(contribution)

    return np.asarray(contributions, dtype=float)


def _summarize(
    values: np.ndarray,
    seed: int | None,
    with_std: bool,
    keep_contributions: bool,
) -> Estimate:
    sample_count = values.shape[0]
    mean = values.mean(axis=0)

    std = None
    if with_std:
        if sample_count > 1:
            spread = values.std(axis=0, ddof=1)
        else:
            spread = np.zeros_like(mean)
        std = float(spread) if values.ndim == 1 else tuple(float(s) for s in spread)

    value = float(mean) if values.ndim == 1 else tuple(float(m) for m in mean)

    return Estimate(
        value=value,
        sample_count=sample_count,
        std=std,
        seed=seed,
        contributions=values if keep_contributions else None,
    )


def estimate(
    sample_count: int,
    trial_generator: TrialGenerator,
    scorer: Scorer,
    seed: int | None = None,
    *,
    rng: np.random.Generator | None = None,
    with_std: bool = False,
    keep_contributions: bool = False,
) -> Estimate:
    """Estimate the expectation of ``scorer`` under the trial distribution.

    The trial generator is called exactly ``sample_count`` times with the
    run's random generator; each trial is scored and the contributions are
    averaged. Exceptions raised by the generator or the scorer propagate
    unchanged and no partial estimate is returned.

    Args:
        sample_count: Number of independent trials (must be positive)
        trial_generator: Callable taking a ``numpy.random.Generator`` and
            returning one trial outcome
        scorer: Maps a trial outcome to a number or a fixed-length tuple of numbers
        seed: Seed for a fresh generator; identical calls give identical estimates
        rng: Caller-owned generator to draw from instead of seeding a new one
        with_std: Also compute the sample standard deviation of contributions
        keep_contributions: Keep the per-trial contribution array on the result

    Returns:
        Estimate over all ``sample_count`` trials
    """
    sample_count = _check_sample_count(sample_count)
    if seed is not None and rng is not None:
        raise InvalidArgument("pass either seed or rng, not both")

    if rng is None:
        rng = np.random.default_rng(seed)

    logger.debug("Running %d trials (seed=%s)", sample_count, seed)
    with _claim(rng):
        values = _collect(sample_count, trial_generator, scorer, rng)

    result = _summarize(values, seed, with_std, keep_contributions)
    logger.debug("Estimate over %d trials: %s", sample_count, result.value)
    return result


def _run_chunk(args: tuple) -> np.ndarray:
    """Run one chunk of trials on its own generator (for multiprocessing).

    Args:
        args: Tuple of (sample_count, trial_generator, scorer, seed_sequence)

    Returns:
        Contribution array for the chunk
    """
    sample_count, trial_generator, scorer, seed_sequence = args
    rng = np.random.default_rng(seed_sequence)
    return _collect(sample_count, trial_generator, scorer, rng)


def estimate_parallel(
    sample_count: int,
    trial_generator: TrialGenerator,
    scorer: Scorer,
    seed: int | None = None,
    *,
    workers: int | None = None,
    with_std: bool = False,
    keep_contributions: bool = False,
    parallel: bool = True,
) -> Estimate:
    """Split an estimate across worker processes with independent generators.

    Each chunk draws from a generator spawned from ``SeedSequence(seed)``, so
    the result depends on ``seed`` and the worker count but not on whether
    the chunks ran in parallel. The generator and scorer must be picklable
    (module-level functions or methods of picklable objects).

    Args:
        sample_count: Total number of trials across all chunks
        trial_generator: Callable taking a generator and returning one trial
        scorer: Maps a trial outcome to its contribution
        seed: Root seed for the spawned generators
        workers: Number of chunks/processes (default: CPU count)
        with_std: Also compute the sample standard deviation
        keep_contributions: Keep the per-trial contribution array
        parallel: Run chunks in a process pool; False runs them in order here

    Returns:
        Estimate over all ``sample_count`` trials
    """
    sample_count = _check_sample_count(sample_count)
    if workers is None:
        workers = DEFAULT_WORKERS
    if isinstance(workers, (bool, np.bool_)) or not isinstance(workers, (int, np.integer)) or workers <= 0:
        raise InvalidArgument(f"workers must be a positive integer, got {workers!r}")
    workers = min(int(workers), sample_count)

    base, extra = divmod(sample_count, workers)
    chunk_sizes = [base + (1 if i < extra else 0) for i in range(workers)]
    seed_sequences = np.random.SeedSequence(seed).spawn(workers)

    args_list = [
        (size, trial_generator, scorer, seq)
        for size, seq in zip(chunk_sizes, seed_sequences)
    ]

    logger.debug("Running %d trials in %d chunks (seed=%s)", sample_count, workers, seed)
    if parallel and workers > 1:
        with ProcessPoolExecutor(max_workers=workers) as executor:
            chunks = list(executor.map(_run_chunk, args_list))
    else:
        chunks = [_run_chunk(args) for args in args_list]

    if len({chunk.ndim for chunk in chunks}) > 1 or len({chunk.shape[1:] for chunk in chunks}) > 1:
        raise InvalidArgument("scorer returned contributions of inconsistent shape")

    return _summarize(np.concatenate(chunks), seed, with_std, keep_contributions)
