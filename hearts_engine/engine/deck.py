import logging

import numpy as np

from .card import Card
from .constants import Rank, Suit

logger = logging.getLogger(__name__)


class Deck:
    """
    Standard 52 cards deck.
    Upon creating the object the deck is automatically shuffled.
    A deck is meant to be dealt once and then discarded.

    Args:
        random_state: Random seed or a numpy ``Generator`` to draw the
            shuffle from, for reproducibility
    """

    __slots__ = ['_rng', '_cards']

    def __init__(self, random_state: int | np.random.Generator | None = None):
        self._rng = np.random.default_rng(random_state)

        # standard deck of 52 cards
        self._cards = [
            Card(rank, suit)
            for suit in Suit
            for rank in Rank
        ]
        self._rng.shuffle(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    @property
    def cards(self) -> list[Card]:
        return self._cards.copy()

    def deal(self, hand_count: int, cards_per_player: int) -> list[list[Card]]:
        """
        Deals the cards round-robin from the end of the deck. Dealt cards
        are removed from the deck. If there are not enough cards left,
        all of the remaining cards are dealt.

        Returns:
            A list of ``hand_count`` hands
        """
        if hand_count < 1:
            raise ValueError('There should be at least one hand to deal to')

        hands: list[list[Card]] = [[] for _ in range(hand_count)]
        n_dealt = min(hand_count * cards_per_player, len(self._cards))
        for i in range(n_dealt):
            hands[i % hand_count].append(self._cards.pop())

        logger.debug('Dealt %d cards to %d hands, %d left in the deck',
                     n_dealt, hand_count, len(self._cards))
        return hands
