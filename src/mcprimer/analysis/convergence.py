"""Convergence study: how an estimate tightens as the sample count grows."""

import logging
from collections.abc import Sequence

import numpy as np
import pandas as pd

from mcprimer.analysis.estimator import Scorer, TrialGenerator, estimate
from mcprimer.errors import InvalidArgument

logger = logging.getLogger(__name__)


def convergence_table(
    sample_sizes: Sequence[int],
    trial_generator: TrialGenerator,
    scorer: Scorer,
    seed: int | None = None,
    expected: float | None = None,
    component: int = 0,
) -> pd.DataFrame:
    """Run one independent seeded estimate per sample size.

    Args:
        sample_sizes: Sample counts to try, in order
        trial_generator: Trial generator passed to ``estimate``
        scorer: Scorer passed to ``estimate``
        seed: Root seed; each row gets its own child generator
        expected: True value, used to fill the ``abs_error`` column
        component: Which component to report for tuple-valued scorers

    Returns:
        DataFrame with columns sample_count, estimate, std_error, abs_error
    """
    if not sample_sizes:
        raise InvalidArgument("sample_sizes must not be empty")

    children = np.random.SeedSequence(seed).spawn(len(sample_sizes))
    rows = []
    for sample_count, child in zip(sample_sizes, children):
        result = estimate(
            sample_count,
            trial_generator,
            scorer,
            rng=np.random.default_rng(child),
            with_std=True,
        )
        value = result.component(component)
        se = result.standard_error
        std_error = se[component] if isinstance(se, tuple) else se
        rows.append({
            "sample_count": result.sample_count,
            "estimate": value,
            "std_error": std_error,
            "abs_error": abs(value - expected) if expected is not None else np.nan,
        })
        logger.debug("n=%d estimate=%.6f", result.sample_count, value)

    return pd.DataFrame(rows, columns=["sample_count", "estimate", "std_error", "abs_error"])
