"""Console output formatting."""

import pandas as pd

from mcprimer.analysis.estimator import Contribution, Estimate
from mcprimer.config import DEFAULT_CONFIDENCE_Z
from mcprimer.experiments import Experiment


def _components(value: Contribution) -> tuple[float, ...]:
    return value if isinstance(value, tuple) else (value,)


class ConsoleOutput:
    """Formats estimates for console display."""

    @staticmethod
    def print_estimate(experiment: Experiment, result: Estimate) -> None:
        """Print an estimate next to the exact value when one is known.

        Args:
            experiment: Experiment that produced the estimate
            result: Estimate to display
        """
        print("\n" + "=" * 60)
        print(f"MONTE CARLO ESTIMATE - {experiment.name}")
        seed = result.seed if result.seed is not None else "random"
        print(f"({result.sample_count} trials, seed: {seed})")
        print("=" * 60)

        values = _components(result.value)
        expected = _components(experiment.expected) if experiment.expected is not None else None
        errors = _components(result.standard_error) if result.std is not None else None
        intervals = None
        if result.std is not None:
            ci = result.confidence_interval(DEFAULT_CONFIDENCE_Z)
            intervals = ci if result.is_vector else (ci,)

        for i, label in enumerate(experiment.labels):
            print(f"\n{label}:")
            print(f"  Estimate:  {values[i]:.6f}")
            if expected is not None:
                print(f"  Exact:     {expected[i]:.6f}")
                print(f"  Error:     {abs(values[i] - expected[i]):.6f}")
            if errors is not None:
                low, high = intervals[i]
                print(f"  Std error: {errors[i]:.6f}")
                print(f"  95% CI:    [{low:.6f}, {high:.6f}]")

        print("=" * 60)

    @staticmethod
    def print_convergence(table: pd.DataFrame) -> None:
        """Print a convergence table produced by ``convergence_table``."""
        print("\n" + "=" * 60)
        print("CONVERGENCE")
        print("=" * 60)
        print(f"{'Trials':>10} {'Estimate':>12} {'Std error':>12} {'Abs error':>12}")
        print("-" * 60)
        for row in table.itertuples(index=False):
            abs_error = "" if pd.isna(row.abs_error) else f"{row.abs_error:.6f}"
            print(
                f"{row.sample_count:>10d} "
                f"{row.estimate:>12.6f} "
                f"{row.std_error:>12.6f} "
                f"{abs_error:>12}"
            )
        print("=" * 60)
