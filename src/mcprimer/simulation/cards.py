"""Drawing hands from a standard 52-card deck."""

from dataclasses import dataclass

import numpy as np

from mcprimer.analysis.combinatorics import combinations
from mcprimer.models import CardConfig, CardEvent

RANKS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
SUITS = ("clubs", "diamonds", "hearts", "spades")
DECK_SIZE = len(RANKS) * len(SUITS)


@dataclass(frozen=True)
class Card:
    """A playing card."""

    rank: str
    suit: str

    @classmethod
    def from_index(cls, index: int) -> "Card":
        """Map a deck position 0-51 to a card (suits in blocks of 13)."""
        return cls(rank=RANKS[index % len(RANKS)], suit=SUITS[index // len(RANKS)])

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"


class CardDrawer:
    """Draws ``config.hand_size`` cards without replacement per trial."""

    def __init__(self, config: CardConfig | None = None):
        self.config = config if config is not None else CardConfig()

    @property
    def labels(self) -> tuple[str, ...]:
        return (f"P({self.config.event.value})",)

    def trial(self, rng: np.random.Generator) -> tuple[Card, ...]:
        indices = rng.choice(DECK_SIZE, size=self.config.hand_size, replace=False)
        return tuple(Card.from_index(int(i)) for i in indices)

    def score(self, hand: tuple[Card, ...]) -> int:
        """Indicator of the configured event."""
        event = self.config.event
        if event == CardEvent.ACE:
            return int(any(card.rank == "A" for card in hand))
        if event == CardEvent.HEART:
            return int(hand[0].suit == "hearts")
        if event == CardEvent.PAIR:
            return int(len({card.rank for card in hand}) < len(hand))
        return int(len({card.suit for card in hand}) == 1)

    def expected(self) -> float:
        """Exact probability of the event by counting hands."""
        h = self.config.hand_size
        hands = combinations(DECK_SIZE, h)
        event = self.config.event

        if event == CardEvent.ACE:
            return 1.0 - combinations(DECK_SIZE - 4, h) / hands
        if event == CardEvent.HEART:
            return 13 / DECK_SIZE
        if event == CardEvent.PAIR:
            if h > len(RANKS):
                return 1.0
            return 1.0 - combinations(len(RANKS), h) * 4 ** h / hands
        if h > len(RANKS):
            return 0.0
        return len(SUITS) * combinations(len(RANKS), h) / hands
