"""
Errors raised by the engine when a player breaks the rules.

Both errors are recoverable: a rejected play never changes the state of the
round, so the caller may simply try again with another card.
"""
from .card import Card
from .constants import PlayerId


class HeartsRuleViolation(Exception):
    """Base class for plays rejected by the engine"""

    def __init__(self, player_idx: PlayerId, message: str):
        super().__init__(message)
        self.player_idx = player_idx


class OutOfTurnError(HeartsRuleViolation):
    """Raised when a player tries to play when it is not their turn"""

    def __init__(self, player_idx: PlayerId):
        super().__init__(player_idx, f'Player {player_idx} played out of turn.')


class IllegalCardError(HeartsRuleViolation):
    """Raised when the card is not among the player's legal plays"""

    def __init__(self, player_idx: PlayerId, card: Card):
        super().__init__(player_idx, f'Player {player_idx} violated rules by playing {card}.')
        self.card = card
