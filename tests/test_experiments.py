"""Tests for the experiment registry and parameter loading."""

import json
from pathlib import Path

import pytest

from mcprimer.analysis import estimate
from mcprimer.config import load_params_from_json, parse_params
from mcprimer.errors import InvalidArgument
from mcprimer.experiments import EXPERIMENTS, Distribution, build_experiment


class TestBuildExperiment:
    """Tests for build_experiment."""

    @pytest.mark.parametrize("distribution", list(Distribution))
    def test_every_distribution_runs(self, distribution: Distribution) -> None:
        experiment = build_experiment(distribution)
        result = estimate(20, experiment.trial, experiment.score, seed=1)

        assert experiment.name == distribution.value
        components = result.value if isinstance(result.value, tuple) else (result.value,)
        assert len(components) == len(experiment.labels)

    def test_registry_covers_every_distribution(self) -> None:
        assert set(EXPERIMENTS) == set(Distribution)

    def test_accepts_string_names(self) -> None:
        assert build_experiment("gamblers_ruin").expected == (0.5, 36.0)

    def test_biased_ruin_with_far_target(self) -> None:
        experiment = build_experiment(
            Distribution.GAMBLERS_RUIN, {"stake": 1, "target": 200, "p_win": 0.01}
        )
        success, bets = experiment.expected
        assert success == pytest.approx(0.0, abs=1e-300)
        assert bets == pytest.approx(1 / 0.98)

        result = estimate(200, experiment.trial, experiment.score, seed=1)
        assert result.value[0] == 0.0

    def test_params_reach_config(self) -> None:
        experiment = build_experiment(Distribution.COIN, {"p_heads": 0.25})
        assert experiment.expected == 0.25
        assert experiment.source.config.p_heads == 0.25

    def test_unknown_distribution(self) -> None:
        with pytest.raises(InvalidArgument, match="unknown distribution"):
            build_experiment("roulette")

    @pytest.mark.parametrize(
        "distribution,params",
        [
            (Distribution.COIN, {"p_heads": 1.5}),
            (Distribution.DICE, {"target_sum": 1}),
            (Distribution.CARD, {"event": "straight"}),
            (Distribution.GAMBLERS_RUIN, {"stake": 12, "target": 6}),
            (Distribution.OPTION, {"volatility": -0.1}),
            (Distribution.PI, {"radius": 2}),
        ],
    )
    def test_invalid_params(self, distribution: Distribution, params: dict) -> None:
        with pytest.raises(InvalidArgument):
            build_experiment(distribution, params)


class TestParams:
    """Tests for parameter parsing."""

    def test_parse_params(self) -> None:
        assert parse_params('{"stake": 3}') == {"stake": 3}

    @pytest.mark.parametrize("text", ["{stake: 3", "[1, 2]", "7"])
    def test_parse_params_rejects(self, text: str) -> None:
        with pytest.raises(InvalidArgument):
            parse_params(text)

    def test_load_params_from_json(self, temp_dir: Path) -> None:
        path = temp_dir / "ruin.json"
        path.write_text(json.dumps({"stake": 2, "target": 4}))

        params = load_params_from_json(path)
        experiment = build_experiment(Distribution.GAMBLERS_RUIN, params)

        assert experiment.expected == (0.5, 4.0)
