"""Validated parameters for each experiment."""

from .birthday import BirthdayConfig
from .cards import CardConfig, CardEvent
from .coin import CoinConfig
from .dice import DiceConfig
from .finance import OptionConfig, OptionKind, VaRConfig
from .gaussian import GaussianConfig
from .ruin import RuinConfig

__all__ = [
    "BirthdayConfig",
    "CardConfig",
    "CardEvent",
    "CoinConfig",
    "DiceConfig",
    "GaussianConfig",
    "OptionConfig",
    "OptionKind",
    "RuinConfig",
    "VaRConfig",
]
