"""
This module contains the rules engine for Hearts, in the form of the
:class:`HeartsRound` class, together with the card and deck model it uses.
"""

from .card import Card, TWO_OF_CLUBS, QUEEN_OF_SPADES
from .constants import Suit, Rank, PlayerId
from .deck import Deck
from .exceptions import HeartsRuleViolation, OutOfTurnError, IllegalCardError
from .round import HeartsRound
from .rules import HeartsRules
from .trick import PlayedCard, Trick
