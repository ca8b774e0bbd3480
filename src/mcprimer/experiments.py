"""Registry mapping distribution names to ready-to-run experiments."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from mcprimer.analysis.estimator import Scorer, TrialGenerator
from mcprimer.errors import InvalidArgument
from mcprimer.models import (
    BirthdayConfig,
    CardConfig,
    CoinConfig,
    DiceConfig,
    GaussianConfig,
    OptionConfig,
    RuinConfig,
    VaRConfig,
)
from mcprimer.simulation import (
    BirthdayRoom,
    CardDrawer,
    CoinFlipper,
    DiceRoller,
    EuropeanOption,
    GamblersRuin,
    GaussianSampler,
    PortfolioReturn,
    QuarterCircle,
)

logger = logging.getLogger(__name__)


class Distribution(str, Enum):
    """Experiments selectable by name."""

    COIN = "coin"
    DICE = "dice"
    CARD = "card"
    GAUSSIAN = "gaussian"
    GAMBLERS_RUIN = "gamblers_ruin"
    PI = "pi"
    OPTION = "option"
    VAR = "var"
    BIRTHDAY = "birthday"


class _NoParams(BaseModel):
    """Experiments without tunable parameters reject any that are given."""

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True)
class Experiment:
    """A trial generator and scorer, plus the exact answer when one is known."""

    name: str
    trial: TrialGenerator
    score: Scorer
    expected: float | tuple[float, ...] | None
    labels: tuple[str, ...]
    source: Any = None  # the simulation object, for experiment-specific helpers


# distribution -> (parameter model, simulation class)
EXPERIMENTS: dict[Distribution, tuple[type[BaseModel], type]] = {
    Distribution.COIN: (CoinConfig, CoinFlipper),
    Distribution.DICE: (DiceConfig, DiceRoller),
    Distribution.CARD: (CardConfig, CardDrawer),
    Distribution.GAUSSIAN: (GaussianConfig, GaussianSampler),
    Distribution.GAMBLERS_RUIN: (RuinConfig, GamblersRuin),
    Distribution.PI: (_NoParams, QuarterCircle),
    Distribution.OPTION: (OptionConfig, EuropeanOption),
    Distribution.VAR: (VaRConfig, PortfolioReturn),
    Distribution.BIRTHDAY: (BirthdayConfig, BirthdayRoom),
}


def build_experiment(
    distribution: Distribution | str,
    params: dict[str, Any] | None = None,
) -> Experiment:
    """Validate parameters and build the experiment for a distribution.

    Args:
        distribution: Distribution enum member or its name
        params: Parameters for the distribution's config model

    Returns:
        Experiment ready to pass to ``estimate``

    Raises:
        InvalidArgument: Unknown distribution or invalid parameters
    """
    try:
        distribution = Distribution(distribution)
    except ValueError as e:
        choices = ", ".join(d.value for d in Distribution)
        raise InvalidArgument(f"unknown distribution {distribution!r} (choose from {choices})") from e

    config_cls, sim_cls = EXPERIMENTS[distribution]
    try:
        config = config_cls.model_validate(params or {})
    except ValidationError as e:
        raise InvalidArgument(f"invalid {distribution.value} parameters: {e}") from e

    sim = sim_cls() if config_cls is _NoParams else sim_cls(config)
    logger.debug("Built %s experiment with %s", distribution.value, config)

    return Experiment(
        name=distribution.value,
        trial=sim.trial,
        score=sim.score,
        expected=sim.expected(),
        labels=tuple(sim.labels),
        source=sim,
    )
