"""Tests for console output and file export."""

import csv
import json
from pathlib import Path

import pytest

from mcprimer.analysis import convergence_table, estimate
from mcprimer.errors import InvalidArgument
from mcprimer.experiments import Distribution, build_experiment
from mcprimer.output import ConsoleOutput, Exporter


@pytest.fixture
def ruin_run():
    experiment = build_experiment(Distribution.GAMBLERS_RUIN)
    result = estimate(
        50, experiment.trial, experiment.score, seed=1, with_std=True, keep_contributions=True
    )
    return experiment, result


class TestExporter:
    """Tests for the Exporter."""

    def test_estimate_json(self, temp_dir: Path, ruin_run) -> None:
        experiment, result = ruin_run
        path = Exporter(temp_dir).export_estimate_json(experiment, result)

        data = json.loads(path.read_text())
        assert data["metadata"] == {
            "experiment": "gamblers_ruin",
            "sample_count": 50,
            "seed": 1,
        }
        assert data["estimate"] == list(result.value)
        assert data["expected"] == [0.5, 36.0]
        assert data["labels"] == list(experiment.labels)

    def test_contributions_csv(self, temp_dir: Path, ruin_run) -> None:
        experiment, result = ruin_run
        path = Exporter(temp_dir).export_contributions_csv(experiment, result)

        with open(path, newline="") as f:
            rows = list(csv.reader(f))
        assert rows[0] == ["trial", *experiment.labels]
        assert len(rows) == 51
        assert rows[1][1] in ("0", "1")

    def test_contributions_required(self, temp_dir: Path) -> None:
        experiment = build_experiment(Distribution.COIN)
        result = estimate(5, experiment.trial, experiment.score, seed=1)
        with pytest.raises(InvalidArgument):
            Exporter(temp_dir).export_contributions_csv(experiment, result)

    def test_export_all(self, temp_dir: Path, ruin_run) -> None:
        experiment, result = ruin_run
        files = Exporter(temp_dir / "out").export_all(experiment, result, prefix="ruin")

        assert set(files) == {"estimate_json", "contributions_csv"}
        assert files["estimate_json"].name == "ruin_estimate.json"
        assert all(path.exists() for path in files.values())

    def test_convergence_csv(self, temp_dir: Path) -> None:
        coin = build_experiment(Distribution.COIN)
        table = convergence_table([10, 20], coin.trial, coin.score, seed=1, expected=0.5)
        path = Exporter(temp_dir).export_convergence_csv(table)
        assert path.read_text().splitlines()[0] == "sample_count,estimate,std_error,abs_error"


class TestConsoleOutput:
    """Tests for ConsoleOutput."""

    def test_print_estimate(self, capsys, ruin_run) -> None:
        experiment, result = ruin_run
        ConsoleOutput.print_estimate(experiment, result)

        out = capsys.readouterr().out
        assert "MONTE CARLO ESTIMATE - gamblers_ruin" in out
        assert "P(reach target)" in out
        assert "Exact:     36.000000" in out
        assert "95% CI" in out

    def test_print_estimate_without_std(self, capsys) -> None:
        experiment = build_experiment(Distribution.PI)
        result = estimate(10, experiment.trial, experiment.score)
        ConsoleOutput.print_estimate(experiment, result)

        out = capsys.readouterr().out
        assert "seed: random" in out
        assert "95% CI" not in out
