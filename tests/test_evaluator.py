import unittest

from wordle_engine.models.game import (
    BoardState,
    BoardStateCharacter,
    CharacterState,
    state_sort_key,
)
from wordle_engine.services.evaluator import (
    DuplicateLetterPolicy,
    aggregate_key_state,
    build_board_state,
    evaluate_guess,
)

C = CharacterState.CORRECT
W = CharacterState.WRONG_POSITION
N = CharacterState.NOT_FOUND


def _states(guess, secret, policy=DuplicateLetterPolicy.FIRST_MATCH):
    return [cell.state for cell in evaluate_guess(guess, secret, policy)]


class TestEvaluator(unittest.TestCase):
    def test_given_crane_when_guessing_crate_then_only_t_missing(self):
        self.assertEqual(_states("crate", "crane"), [C, C, C, N, C])

    def test_given_repeated_letters_when_first_match_then_no_consumption(self):
        # Second 'a' still reported as misplaced even though allot has one 'a'
        self.assertEqual(_states("llama", "allot"), [W, C, W, N, W])

    def test_given_repeated_letters_when_consume_then_standard_scoring(self):
        self.assertEqual(_states("llama", "allot", DuplicateLetterPolicy.CONSUME), [W, C, W, N, N])
        self.assertEqual(_states("geese", "those", DuplicateLetterPolicy.CONSUME), [N, N, N, C, C])

    def test_given_later_duplicate_in_secret_when_evaluating_then_exact_slot_correct(self):
        for policy in DuplicateLetterPolicy:
            self.assertEqual(_states("bolts", "allot", policy)[2], C)
            self.assertEqual(_states("allot", "allot", policy), [C] * 5)

    def test_given_any_secret_when_evaluating_then_correct_iff_same_letter(self):
        pairs = [
            ("slate", "close"), ("crane", "react"), ("plumb", "crumb"), ("tiger", "ruler"),
            ("allot", "llama"), ("allot", "bolts"), ("geese", "eerie"), ("llama", "allot"),
        ]
        for secret, guess in pairs:
            for policy in DuplicateLetterPolicy:
                states = _states(guess, secret, policy)
                self.assertEqual(len(states), len(guess))
                for i, state in enumerate(states):
                    self.assertEqual(state == C, guess[i] == secret[i], (secret, guess, policy, i))

    def test_given_any_secret_when_consume_then_correct_iff_same_letter(self):
        pairs = [("allot", "llama"), ("geese", "eerie"), ("robot", "boots"), ("sassy", "asses")]
        for secret, guess in pairs:
            states = _states(guess, secret, DuplicateLetterPolicy.CONSUME)
            for i, state in enumerate(states):
                self.assertEqual(state == C, guess[i] == secret[i], (secret, guess, i))

    def test_given_exact_guess_when_evaluating_then_all_correct(self):
        for policy in DuplicateLetterPolicy:
            self.assertEqual(_states("allot", "allot", policy), [C] * 5)

    def test_given_length_mismatch_when_evaluating_then_value_error(self):
        with self.assertRaises(ValueError):
            evaluate_guess("cranes", "crane")

    def test_given_slate_and_close_when_aggregating_then_key_states_match(self):
        state = build_board_state("slate", ["close"])
        self.assertEqual(aggregate_key_state(state, "s"), W)
        self.assertEqual(aggregate_key_state(state, "L"), C)
        self.assertEqual(aggregate_key_state(state, "c"), N)
        self.assertEqual(aggregate_key_state(state, "e"), C)
        # 'a' is in the secret but was never guessed
        self.assertIsNone(aggregate_key_state(state, "a"))

    def test_given_correct_after_misplaced_when_aggregating_then_correct_wins(self):
        state = build_board_state("allot", ["llama"])
        self.assertEqual(aggregate_key_state(state, "l"), C)
        self.assertEqual(aggregate_key_state(state, "a"), W)
        self.assertEqual(aggregate_key_state(state, "m"), N)

    def test_given_consumed_letter_missing_in_one_slot_when_aggregating_then_best_state_wins(self):
        state = build_board_state("crane", ["eerie"], DuplicateLetterPolicy.CONSUME)
        self.assertEqual([cell.state for cell in state.rows[0]], [N, N, W, N, C])
        self.assertEqual(aggregate_key_state(state, "e"), C)
        self.assertEqual(aggregate_key_state(state, "r"), W)
        self.assertEqual(aggregate_key_state(state, "i"), N)

        state = build_board_state("allot", ["llama"], DuplicateLetterPolicy.CONSUME)
        self.assertEqual(aggregate_key_state(state, "a"), W)

        state = BoardState([[BoardStateCharacter("a", N), BoardStateCharacter("a", W)]])
        self.assertEqual(aggregate_key_state(state, "a"), W)

    def test_given_unevaluated_cells_when_aggregating_then_ignored(self):
        state = BoardState([[BoardStateCharacter("a"), BoardStateCharacter("b", W)]])
        self.assertIsNone(aggregate_key_state(state, "a"))
        self.assertEqual(aggregate_key_state(state, "b"), W)

    def test_given_board_state_when_checking_win_then_any_all_correct_row_wins(self):
        state = build_board_state("crane", ["crate", "crane"])
        self.assertEqual(len(state), 2)
        self.assertTrue(state.has_won())
        self.assertFalse(build_board_state("crane", ["crate"]).has_won())
        self.assertFalse(BoardState().has_won())
        self.assertFalse(BoardState([[]]).has_won())

    def test_given_board_state_when_serialising_then_strings_returned(self):
        results = build_board_state("crane", ["crate"]).as_results()
        self.assertEqual(results[0][3], ("t", "NOT_FOUND"))
        self.assertEqual(BoardState([[BoardStateCharacter("a")]]).as_results(), [[("a", None)]])

    def test_given_states_when_sorting_then_explicit_order_used(self):
        ordered = sorted([N, None, W, C], key=state_sort_key)
        self.assertEqual(ordered, [C, W, N, None])


if __name__ == "__main__":
    unittest.main()
