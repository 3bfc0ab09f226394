from dataclasses import dataclass

from .constants import Rank, Suit


@dataclass(frozen=True)
class Card:
    """
    Args:
        rank: Rank of the card. Ranks are ordered from Two up to Ace and are
            only compared between cards following the suit led in a trick
        suit: Suit of the card
    """
    rank: Rank
    suit: Suit

    @classmethod
    def of(cls, rank: str, suit: Suit) -> 'Card':
        return cls(Rank.from_symbol(rank), suit)

    @classmethod
    def parse(cls, card_str: str) -> 'Card':
        """
        Parses a card from its string representation, e.g. "10♥"
        """
        rank_str = card_str[:-1]
        suit_str = card_str[-1:]
        for suit in Suit:
            if suit.value == suit_str:
                return cls.of(rank_str, suit)
        raise ValueError(f'Unknown suit in {card_str!r}')

    def is_suit(self, suit: Suit) -> bool:
        return self.suit == suit

    def has_rank(self, rank: Rank) -> bool:
        return self.rank == rank

    def __str__(self) -> str:
        return f'{self.rank.symbol}{self.suit.value}'

    def __repr__(self) -> str:
        return str(self)


TWO_OF_CLUBS = Card(Rank.TWO, Suit.CLUB)
QUEEN_OF_SPADES = Card(Rank.QUEEN, Suit.SPADE)
