#!/usr/bin/env python3
"""Quick tour of the classroom experiments.

Runs each example from the lecture with a fixed seed and compares the
Monte Carlo estimate with the exact answer.

Usage:
    python examples/quick_estimates.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from mcprimer.analysis import convergence_table, estimate
from mcprimer.analysis.combinatorics import combinations, permutations
from mcprimer.experiments import Distribution, build_experiment
from mcprimer.output import ConsoleOutput, Exporter
from mcprimer.simulation import estimate_pi, value_at_risk


def main():
    print("Monte Carlo Primer - Quick Tour")
    print("=" * 50)

    # Counting
    print(f"Ways to seat 3 of 10 guests in a row:  {permutations(10, 3)}")
    print(f"Ways to choose a 5-card poker hand:    {combinations(52, 5)}")
    print(f"pi from 2000 random points (seed 42):  {estimate_pi(2000, seed=42):.4f}")

    runs = [
        (Distribution.COIN, {}),
        (Distribution.DICE, {"target_sum": 7}),
        (Distribution.CARD, {"event": "pair"}),
        (Distribution.GAMBLERS_RUIN, {"stake": 6, "target": 12}),
        (Distribution.OPTION, {"strike": 105}),
    ]
    for distribution, params in runs:
        experiment = build_experiment(distribution, params)
        result = estimate(20_000, experiment.trial, experiment.score, seed=123, with_std=True)
        ConsoleOutput.print_estimate(experiment, result)

    # Value at Risk needs the whole simulated P&L distribution
    var_experiment = build_experiment(Distribution.VAR)
    pnl = estimate(
        50_000, var_experiment.trial, var_experiment.score, seed=7, keep_contributions=True
    )
    level = var_experiment.source.config.level
    print(f"\n10-day {level:.0%} VaR (simulated):  {value_at_risk(pnl, level):,.0f}")
    print(f"10-day {level:.0%} VaR (parametric): {var_experiment.source.parametric_var():,.0f}")

    # Law of large numbers
    coin = build_experiment(Distribution.COIN)
    table = convergence_table(
        [100, 1_000, 10_000, 100_000], coin.trial, coin.score, seed=1, expected=coin.expected
    )
    ConsoleOutput.print_convergence(table)

    print("\nExporting results...")
    exporter = Exporter(output_dir="output")
    files = exporter.export_all(var_experiment, pnl, prefix="var")
    files["convergence_csv"] = exporter.export_convergence_csv(table, "coin_convergence.csv")
    for fmt, path in files.items():
        print(f"  {fmt}: {path}")

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
