import unittest

from game import Card, InvalidGuessError, guess_tokens, is_correct


class TestGuessTokens(unittest.TestCase):
    def test_alphabet_depends_on_role_and_window(self):
        self.assertEqual(guess_tokens('outer', (3, 9)), ('inside', 'outside'))
        self.assertEqual(guess_tokens('outer', None), ('higher', 'lower'))
        self.assertEqual(guess_tokens('inner', None), ('red', 'black'))
        self.assertEqual(set(guess_tokens('center', None)), {'spades', 'hearts', 'clubs', 'diamonds'})
        with self.assertRaises(ValueError):
            guess_tokens('corner', None)


class TestIsCorrect(unittest.TestCase):
    def test_given_window_when_guessing_inside_or_outside_then_inclusive_bounds(self):
        window = (5, 10)
        self.assertTrue(is_correct(Card('7', 'clubs'), 'outer', 'inside', window))
        self.assertTrue(is_correct(Card('5', 'clubs'), 'outer', 'inside', window))
        self.assertTrue(is_correct(Card('10', 'clubs'), 'outer', 'inside', window))
        self.assertFalse(is_correct(Card('3', 'clubs'), 'outer', 'inside', window))
        self.assertTrue(is_correct(Card('3', 'clubs'), 'outer', 'outside', window))
        self.assertTrue(is_correct(Card('A', 'clubs'), 'outer', 'outside', window))
        self.assertFalse(is_correct(Card('10', 'clubs'), 'outer', 'outside', window))

    def test_given_anchor_when_guessing_higher_or_lower_then_strict(self):
        anchor = Card('K', 'hearts')
        self.assertTrue(is_correct(Card('A', 'spades'), 'outer', 'higher', None, anchor))
        self.assertFalse(is_correct(Card('A', 'spades'), 'outer', 'lower', None, anchor))
        self.assertFalse(is_correct(Card('K', 'spades'), 'outer', 'higher', None, anchor))
        self.assertFalse(is_correct(Card('K', 'spades'), 'outer', 'lower', None, anchor))
        self.assertTrue(is_correct(Card('2', 'spades'), 'outer', 'lower', None, Card('A', 'hearts')))

    def test_given_no_anchor_and_no_window_when_guessing_then_invalid(self):
        with self.assertRaises(InvalidGuessError):
            is_correct(Card('4', 'spades'), 'outer', 'higher', None, None)

    def test_given_wrong_alphabet_when_guessing_then_invalid(self):
        with self.assertRaises(InvalidGuessError):
            is_correct(Card('4', 'spades'), 'outer', 'red', None, Card('2', 'clubs'))
        with self.assertRaises(InvalidGuessError):
            is_correct(Card('4', 'spades'), 'outer', 'higher', (2, 9))
        with self.assertRaises(InvalidGuessError):
            is_correct(Card('4', 'spades'), 'inner', 'spades')
        with self.assertRaises(InvalidGuessError):
            is_correct(Card('4', 'spades'), 'center', 'black')

    def test_colour_and_suit_guesses(self):
        self.assertTrue(is_correct(Card('4', 'hearts'), 'inner', 'red'))
        self.assertTrue(is_correct(Card('4', 'diamonds'), 'inner', 'red'))
        self.assertTrue(is_correct(Card('4', 'clubs'), 'inner', 'black'))
        self.assertFalse(is_correct(Card('4', 'spades'), 'inner', 'red'))
        self.assertTrue(is_correct(Card('Q', 'clubs'), 'center', 'clubs'))
        self.assertFalse(is_correct(Card('Q', 'clubs'), 'center', 'spades'))


if __name__ == '__main__':
    unittest.main(verbosity=2)
