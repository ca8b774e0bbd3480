"""Trial generators for the teaching experiments."""

from .birthday import BirthdayRoom
from .cards import Card, CardDrawer
from .coin import CoinFlipper, is_heads
from .dice import DiceRoller
from .finance import EuropeanOption, PortfolioReturn, value_at_risk
from .gaussian import GaussianSampler
from .pi import QuarterCircle, estimate_pi
from .ruin import GamblersRuin, RuinOutcome

__all__ = [
    "BirthdayRoom",
    "Card",
    "CardDrawer",
    "CoinFlipper",
    "DiceRoller",
    "EuropeanOption",
    "GamblersRuin",
    "GaussianSampler",
    "PortfolioReturn",
    "QuarterCircle",
    "RuinOutcome",
    "estimate_pi",
    "is_heads",
    "value_at_risk",
]
