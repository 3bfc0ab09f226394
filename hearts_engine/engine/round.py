import logging
from typing import Sequence

import numpy as np

from .card import Card
from .constants import (
    MAX_POINTS, PLAYER_COUNT, CARDS_PER_PLAYER_COUNT, PlayerId, Suit,
)
from .deck import Deck
from .exceptions import OutOfTurnError, IllegalCardError
from .rules import HeartsRules
from .trick import PlayedCard, Trick
from .utils import is_heart, is_starting_card, get_valid_plays

logger = logging.getLogger(__name__)


class HeartsRound:
    """
    Engine for a single round (one deal) of the standard 4-player game of Hearts

    The round is driven from the outside: query whose turn it is with
    ``whose_turn()``, check the allowed cards with ``legal_plays()`` and
    submit a card with ``play()``. A trick is resolved automatically when
    its fourth card is played. Once all hands are empty, ``whose_turn()``
    returns ``None`` and ``score()`` gives the final result of the round.

    A round is not reusable. Start a new one for the next deal.

    Args:
        hands: Exactly 4 hands of equal size. The player holding the two of
            clubs leads the first trick
        rules: Toggleable rules of the engine. See :class:`HeartsRules`
            for defaults
    """

    def __init__(self,
                 hands: Sequence[Sequence[Card]],
                 rules: HeartsRules = HeartsRules()):

        if len(hands) != PLAYER_COUNT:
            raise ValueError(f'There should be exactly {PLAYER_COUNT} hands')
        if len({len(hand) for hand in hands}) != 1:
            raise ValueError('All hands should have the same number of cards')

        all_cards = [card for hand in hands for card in hand]
        if len(set(all_cards)) != len(all_cards):
            raise ValueError('A card cannot appear more than once across the hands')

        self.rules = rules

        self._hands: list[list[Card]] = [list(hand) for hand in hands]
        self._tricks: list[list[Trick]] = [[] for _ in range(PLAYER_COUNT)]
        self._in_play: list[PlayedCard] = []
        self._last_trick: Trick | None = None
        self._is_first_trick = True
        self._are_hearts_broken = False
        self._trick_no = 1

        self._lead = self._find_starting_player()

    @classmethod
    def deal(cls,
             rules: HeartsRules = HeartsRules(),
             random_state: int | np.random.Generator | None = None) -> 'HeartsRound':
        """
        Creates a round from a freshly shuffled deck

        Args:
            rules: Toggleable rules of the engine
            random_state: Random seed or a numpy ``Generator`` for reproducibility
        """
        hands = Deck(random_state=random_state).deal(PLAYER_COUNT, CARDS_PER_PLAYER_COUNT)
        return cls(hands, rules=rules)

    def _find_starting_player(self) -> PlayerId:
        """
        Finds the player with 2 of clubs on hand
        """
        for player_idx in range(PLAYER_COUNT):
            if any(is_starting_card(card) for card in self._hands[player_idx]):
                return player_idx
        raise ValueError('No hand contains the two of clubs')

    @property
    def hands(self) -> list[tuple[Card, ...]]:
        return [tuple(hand) for hand in self._hands]

    def hand(self, player_idx: PlayerId) -> tuple[Card, ...]:
        return tuple(self._hands[player_idx])

    @property
    def in_play(self) -> tuple[PlayedCard, ...]:
        """Cards played so far in the current, unfinished trick"""
        return tuple(self._in_play)

    @property
    def lead(self) -> PlayerId:
        """Index of the player leading the current trick"""
        return self._lead

    @property
    def leading_suit(self) -> Suit | None:
        """Leading suit in the current trick, or None if the trick is empty"""
        if len(self._in_play) == 0:
            return None
        return self._in_play[0].card.suit

    @property
    def is_first_trick(self) -> bool:
        return self._is_first_trick

    @property
    def are_hearts_broken(self) -> bool:
        return self._are_hearts_broken

    @property
    def trick_no(self) -> int:
        """Number of the trick being played, starting from 1"""
        return self._trick_no

    @property
    def is_finished(self) -> bool:
        return all(len(hand) == 0 for hand in self._hands)

    @property
    def last_trick(self) -> Trick | None:
        """The most recently completed trick, or None before the first one"""
        return self._last_trick

    def tricks(self, player_idx: PlayerId) -> tuple[Trick, ...]:
        """Tricks taken so far by the player"""
        return tuple(self._tricks[player_idx])

    @property
    def points_collected(self) -> list[int]:
        """
        The number of points collected by each player in the round.
        Does not take the moon shot into account.
        """
        return [sum(trick.points for trick in self._tricks[player_idx])
                for player_idx in range(PLAYER_COUNT)]

    def score(self) -> list[int]:
        """
        The score of each player in the round.
        Takes the moon shot into account: a player who collected all the
        points gets a negative score instead. Other scores are unaffected.
        """
        round_scores = self.points_collected
        if not self.rules.moon_shot:
            return round_scores
        return [-MAX_POINTS if points == MAX_POINTS else points for points in round_scores]

    def whose_turn(self) -> PlayerId | None:
        """
        Returns:
            Index of the player that is expected to play the next card,
            or ``None`` if the round is over
        """
        if self.is_finished:
            return None
        return (self._lead + len(self._in_play)) % PLAYER_COUNT

    def legal_plays(self, player_idx: PlayerId) -> list[Card]:
        """
        Returns:
            Cards which the player is allowed to play right now
        """
        return get_valid_plays(
            hand=self._hands[player_idx],
            leading_suit=self.leading_suit,
            are_hearts_broken=self._are_hearts_broken,
            is_first_trick=self._is_first_trick,
        )

    def play(self, player_idx: PlayerId, card: Card) -> None:
        """
        Play a card in the current trick. The trick is completed
        automatically after the fourth card.

        Raises:
            OutOfTurnError: It is not the player's turn
            IllegalCardError: The card is not among the player's legal plays
        """
        if self.whose_turn() != player_idx:
            logger.debug('Rejected %s from player %s: out of turn', card, player_idx)
            raise OutOfTurnError(player_idx)

        if card not in self.legal_plays(player_idx):
            logger.debug('Rejected %s from player %s: illegal card', card, player_idx)
            raise IllegalCardError(player_idx, card)

        self._in_play.append(PlayedCard(player_idx, card))
        logger.debug('Trick %d: player %s played %s', self._trick_no, player_idx, card)

        if len(self._in_play) == PLAYER_COUNT:
            self._complete_trick()

    def _complete_trick(self):
        trick = Trick(lead=self._lead, played=tuple(self._in_play))
        winner_idx = trick.winner

        for played in trick.played:
            self._hands[played.player_idx].remove(played.card)
            if is_heart(played.card):
                self._are_hearts_broken = True

        self._tricks[winner_idx].append(trick)
        self._last_trick = trick
        self._lead = winner_idx
        self._is_first_trick = False
        self._in_play = []
        self._trick_no += 1

        logger.debug('Player %s took the trick %s (%d pts)', winner_idx, trick.cards, trick.points)
        if self.is_finished:
            logger.info('Round finished with scores %s', self.score())
