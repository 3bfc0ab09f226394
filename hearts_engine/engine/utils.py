from typing import Callable, Sequence

from .card import Card, QUEEN_OF_SPADES, TWO_OF_CLUBS
from .constants import HEART_POINTS, Q_SPADES_POINTS, Suit


def is_heart(card: Card) -> bool:
    return card.is_suit(Suit.HEART)


def is_starting_card(card: Card) -> bool:
    return card == TWO_OF_CLUBS


def is_point_card(card: Card) -> bool:
    return is_heart(card) or card == QUEEN_OF_SPADES


def points_for_card(card: Card) -> int:
    if is_heart(card):
        return HEART_POINTS
    if card == QUEEN_OF_SPADES:
        return Q_SPADES_POINTS
    return 0


def restrict(hand: Sequence[Card], predicate: Callable[[Card], bool]) -> list[Card]:
    """
    Keeps only the cards matching the predicate. If no card matches,
    the restriction does not apply and the whole hand is returned, because
    a player must always have something to play.
    """
    restricted = [card for card in hand if predicate(card)]
    if len(restricted) > 0:
        return restricted
    return list(hand)


def get_valid_plays(hand: Sequence[Card],
                    leading_suit: Suit | None,
                    are_hearts_broken: bool,
                    is_first_trick: bool) -> list[Card]:
    """
    Args:
        hand: Cards currently held by the player
        leading_suit: Suit of the first card in the current trick,
            or ``None`` if the player is leading
        are_hearts_broken: Whether a heart has been played in this round
        is_first_trick: Whether this is the first trick of the round

    Returns:
        Cards from the hand that may be played now, in the order of the hand
    """
    if leading_suit is None:
        if any(is_starting_card(card) for card in hand):
            return [TWO_OF_CLUBS]
        if are_hearts_broken:
            return list(hand)
        return restrict(hand, lambda card: not is_heart(card))

    if is_first_trick:
        hand = restrict(hand, lambda card: not is_point_card(card))
    return restrict(hand, lambda card: card.is_suit(leading_suit))


def get_winning_card_idx(cards: Sequence[Card]) -> int:
    """
    Returns:
        Position of the highest card of the leading suit (the suit of the
        first card). Cards of other suits never win.
    """
    leading_suit = cards[0].suit
    winning_idx = 0
    for i, card in enumerate(cards):
        if card.is_suit(leading_suit) and card.rank > cards[winning_idx].rank:
            winning_idx = i
    return winning_idx
