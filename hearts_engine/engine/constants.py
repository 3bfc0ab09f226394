from enum import Enum, IntEnum

PlayerId = int

PLAYER_COUNT = 4
CARDS_IN_DECK_COUNT = 52
CARDS_PER_PLAYER_COUNT = CARDS_IN_DECK_COUNT // PLAYER_COUNT

HEART_POINTS = 1
Q_SPADES_POINTS = 13
MAX_POINTS = 26


class Suit(Enum):
    CLUB = '♣'
    SPADE = '♠'
    HEART = '♥'
    DIAMOND = '♦'


class Rank(IntEnum):
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def symbol(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {11: 'J', 12: 'Q', 13: 'K', 14: 'A'}[self.value]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Rank':
        for rank in cls:
            if rank.symbol == symbol:
                return rank
        raise ValueError(f'Unknown rank: {symbol!r}')
