"""Export estimates to CSV and JSON."""

import csv
import json
from pathlib import Path
from typing import Any

import pandas as pd

from mcprimer.analysis.estimator import Estimate
from mcprimer.errors import InvalidArgument
from mcprimer.experiments import Experiment


class Exporter:
    """Exports estimation results to various formats."""

    def __init__(self, output_dir: str | Path = "output"):
        """Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_estimate_json(
        self,
        experiment: Experiment,
        result: Estimate,
        filename: str = "estimate.json",
    ) -> Path:
        """Export the estimate and its metadata to JSON.

        Args:
            experiment: Experiment that produced the estimate
            result: Estimate to export
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        data: dict[str, Any] = {
            "metadata": {
                "experiment": experiment.name,
                "sample_count": result.sample_count,
                "seed": result.seed,
            },
            "labels": list(experiment.labels),
            "estimate": result.value,
            "expected": experiment.expected,
            "std": result.std,
            "standard_error": result.standard_error,
        }

        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)

        return filepath

    def export_contributions_csv(
        self,
        experiment: Experiment,
        result: Estimate,
        filename: str = "contributions.csv",
    ) -> Path:
        """Export per-trial contributions to CSV.

        Args:
            experiment: Experiment that produced the estimate
            result: Estimate run with ``keep_contributions=True``
            filename: Output filename

        Returns:
            Path to created file
        """
        if result.contributions is None:
            raise InvalidArgument("estimate has no stored contributions to export")

        filepath = self.output_dir / filename
        rows = result.contributions.reshape(result.sample_count, -1)

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["trial", *experiment.labels])
            for trial_idx, row in enumerate(rows, 1):
                writer.writerow([trial_idx, *(f"{v:.10g}" for v in row)])

        return filepath

    def export_convergence_csv(
        self,
        table: pd.DataFrame,
        filename: str = "convergence.csv",
    ) -> Path:
        """Export a convergence table to CSV."""
        filepath = self.output_dir / filename
        table.to_csv(filepath, index=False)
        return filepath

    def export_all(
        self,
        experiment: Experiment,
        result: Estimate,
        prefix: str = "",
    ) -> dict[str, Path]:
        """Export every format available for this estimate.

        Args:
            experiment: Experiment that produced the estimate
            result: Estimate to export
            prefix: Optional prefix for filenames

        Returns:
            Dictionary of format -> filepath
        """
        prefix = f"{prefix}_" if prefix else ""

        files = {
            "estimate_json": self.export_estimate_json(
                experiment, result, f"{prefix}estimate.json"
            ),
        }
        if result.contributions is not None:
            files["contributions_csv"] = self.export_contributions_csv(
                experiment, result, f"{prefix}contributions.csv"
            )
        return files
