from dataclasses import dataclass

from .card import Card
from .constants import PlayerId, Suit
from .utils import get_winning_card_idx, points_for_card


@dataclass(frozen=True)
class PlayedCard:
    player_idx: PlayerId
    card: Card


@dataclass(frozen=True)
class Trick:
    """
    A completed trick

    Args:
        lead: Index of the player who led the trick
        played: All four plays, in the order they were made
    """
    lead: PlayerId
    played: tuple[PlayedCard, ...]

    @property
    def cards(self) -> list[Card]:
        return [p.card for p in self.played]

    @property
    def leading_suit(self) -> Suit:
        return self.played[0].card.suit

    @property
    def winner(self) -> PlayerId:
        return self.played[get_winning_card_idx(self.cards)].player_idx

    @property
    def points(self) -> int:
        return sum(points_for_card(card) for card in self.cards)
