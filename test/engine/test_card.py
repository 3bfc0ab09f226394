import unittest

from hearts_engine.engine import Card, Rank, Suit, TWO_OF_CLUBS, QUEEN_OF_SPADES


class TestCard(unittest.TestCase):
    def test_equality_is_structural(self):
        self.assertEqual(Card(Rank.TEN, Suit.HEART), Card(Rank.TEN, Suit.HEART))
        self.assertNotEqual(Card(Rank.TEN, Suit.HEART), Card(Rank.TEN, Suit.SPADE))
        self.assertNotEqual(Card(Rank.TEN, Suit.HEART), Card(Rank.JACK, Suit.HEART))

    def test_hashable(self):
        cards = {Card(Rank.ACE, Suit.CLUB), Card(Rank.ACE, Suit.CLUB), TWO_OF_CLUBS}
        self.assertEqual(2, len(cards))

    def test_rank_order(self):
        self.assertTrue(Rank.ACE > Rank.KING > Rank.QUEEN > Rank.JACK > Rank.TEN)
        self.assertTrue(Rank.THREE > Rank.TWO)
        self.assertEqual(13, len(list(Rank)))

    def test_membership(self):
        card = Card(Rank.QUEEN, Suit.SPADE)
        self.assertTrue(card.is_suit(Suit.SPADE))
        self.assertFalse(card.is_suit(Suit.HEART))
        self.assertTrue(card.has_rank(Rank.QUEEN))
        self.assertFalse(card.has_rank(Rank.KING))
        self.assertEqual(QUEEN_OF_SPADES, card)

    def test_str(self):
        self.assertEqual('A♣', str(Card(Rank.ACE, Suit.CLUB)))
        self.assertEqual('10♥', str(Card(Rank.TEN, Suit.HEART)))
        self.assertEqual('[Q♠]', str([QUEEN_OF_SPADES]))

    def test_parse(self):
        self.assertEqual(Card(Rank.TEN, Suit.HEART), Card.parse('10♥'))
        self.assertEqual(TWO_OF_CLUBS, Card.of('2', Suit.CLUB))
        for card_str in ['A♦', 'K♠', 'J♣', '7♥']:
            self.assertEqual(card_str, str(Card.parse(card_str)))

    def test_parse_invalid(self):
        with self.assertRaises(ValueError):
            Card.parse('1♥')
        with self.assertRaises(ValueError):
            Card.parse('10x')
