import unittest

from levels.checks import to_morse
from levels.definitions import load_levels
from levels.errors import LevelError, SessionClosedError
from levels.session import LevelSession, SessionState

LEVELS = load_levels()


class SequentialSessionTestCase(unittest.TestCase):
    def test_weak_password_is_a_mistake_and_does_not_complete(self):
        s = LevelSession(LEVELS[1])
        outcome = s.answer("Secur3!")
        self.assertFalse(outcome.correct)
        self.assertFalse(outcome.completed)
        self.assertIsNone(s.state.score)
        self.assertEqual(s.state.mistakes, 1)

        outcome = s.answer("Secur3!x")
        self.assertTrue(outcome.completed)
        self.assertEqual(outcome.score, 9)
        self.assertEqual(s.state.attempts, 2)

    def test_password_score_never_drops_below_one(self):
        s = LevelSession(LEVELS[1])
        for _ in range(15):
            s.answer("weak")
        self.assertEqual(s.answer("Secur3!x").score, 1)

    def test_morse_first_try(self):
        s = LevelSession(LEVELS[4])
        self.assertEqual(s.answer(to_morse("HOW ARE YOU")).score, 10)

    def test_cipher_advances_only_on_correct(self):
        s = LevelSession(LEVELS[7])
        s.answer("wrong")
        self.assertEqual(s.state.index, 0)
        s.answer("Transfer $500 to Account 12345")
        self.assertEqual(s.state.index, 1)
        s.answer("Meeting at 3 PM tomorrow")
        s.answer(None)
        outcome = s.answer("Password is SecurePass123")
        self.assertTrue(outcome.completed)
        self.assertEqual(outcome.score, 6)  # two wrong attempts, two points each

    def test_index_never_goes_backwards(self):
        s = LevelSession(LEVELS[10])
        answers = ["1a", "1b", "2b", "3a", "3d", "3c", "4b", "5a"]
        seen = [s.state.index]
        for a in answers:
            s.answer(a)
            seen.append(s.state.index)
        self.assertEqual(seen, sorted(seen))
        self.assertFalse(s.state.completed)
        self.assertEqual(s.state.index, len(LEVELS[10].items) - 1)

    def test_decision_tree_counts_first_try_steps(self):
        s = LevelSession(LEVELS[10])
        for a in ["1b", "2a", "2b", "3c", "4b"]:
            s.answer(a)
        outcome = s.answer("5c")
        self.assertTrue(outcome.completed)
        self.assertEqual(outcome.score, 8)  # 4 of 5 steps right first time

    def test_perfect_decision_tree_scores_ten(self):
        s = LevelSession(LEVELS[9])
        for a in ["1b", "2c", "3a"]:
            s.answer(a)
        self.assertEqual(s.answer("4c").score, 10)

    def test_no_answers_after_completion(self):
        s = LevelSession(LEVELS[4])
        s.answer(to_morse("HOW ARE YOU"))
        with self.assertRaises(SessionClosedError):
            s.answer("anything")

    def test_batch_operations_rejected(self):
        s = LevelSession(LEVELS[1])
        with self.assertRaises(LevelError):
            s.toggle("password")
        with self.assertRaises(LevelError):
            s.submit([])


class QuizSessionTestCase(unittest.TestCase):
    def test_every_answer_advances_and_counts_correct(self):
        s = LevelSession(LEVELS[2])
        # truth: phishing, safe, phishing, phishing, safe
        for answer in [True, True, True, False]:
            outcome = s.answer(answer)
            self.assertFalse(outcome.completed)
        outcome = s.answer(False)
        self.assertTrue(outcome.completed)
        self.assertEqual(outcome.score, 3)
        self.assertEqual(s.state.mistakes, 2)

    def test_explanation_is_returned(self):
        s = LevelSession(LEVELS[5])
        outcome = s.answer(True)
        self.assertFalse(outcome.correct)
        self.assertIn("Never share login credentials", outcome.explanation)


class BatchSessionTestCase(unittest.TestCase):
    def test_blocking_exactly_the_risky_rules_scores_ten(self):
        s = LevelSession(LEVELS[6])
        outcome = s.submit(["2", "3", "4"])
        self.assertEqual(outcome.score, 10)
        self.assertTrue(outcome.correct)

    def test_toggle_then_submit(self):
        s = LevelSession(LEVELS[6])
        for item_id in ["2", "3", "4", "1", "5", "5"]:
            s.toggle(item_id)
        self.assertEqual(s.state.selected, {"1", "2", "3", "4"})
        outcome = s.submit()
        self.assertEqual(outcome.score, 9)
        self.assertEqual(outcome.mistakes, 1)

    def test_empty_privacy_selection(self):
        s = LevelSession(LEVELS[8])
        self.assertEqual(s.submit().score, 5)  # five items should have been private

    def test_unknown_item_rejected(self):
        s = LevelSession(LEVELS[6])
        with self.assertRaises(LevelError):
            s.toggle("42")
        with self.assertRaises(LevelError):
            s.submit(["1", "42"])
        self.assertFalse(s.state.completed)

    def test_single_submission(self):
        s = LevelSession(LEVELS[3])
        s.submit(["1", "3", "5", "6"])
        with self.assertRaises(SessionClosedError):
            s.submit([])
        with self.assertRaises(SessionClosedError):
            s.toggle("1")

    def test_answer_rejected(self):
        with self.assertRaises(LevelError):
            LevelSession(LEVELS[8]).answer("1")


class SessionStateTestCase(unittest.TestCase):
    def test_round_trip_through_dict(self):
        state = SessionState(level_id=6, attempts=1, selected={"3", "1"})
        payload = state.to_dict()
        self.assertEqual(payload["selected"], ["1", "3"])
        self.assertEqual(SessionState.from_dict(payload), state)

    def test_restore_rolls_back(self):
        s = LevelSession(LEVELS[6])
        before = s.snapshot()
        s.submit(["2"])
        s.restore(before)
        self.assertFalse(s.state.completed)
        self.assertIsNone(s.state.score)

    def test_state_must_match_level(self):
        with self.assertRaises(LevelError):
            LevelSession(LEVELS[1], SessionState(level_id=2))


if __name__ == "__main__":
    unittest.main()
