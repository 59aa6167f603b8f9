import threading
import unittest

from game import (
    ManualScheduler,
    PenaltyHandle,
    PlayerRegistrationError,
    ThreadingScheduler,
    TurnController,
    TurnError,
)


class TestTurnController(unittest.TestCase):
    def test_given_names_when_registering_then_trimmed_and_ordered(self):
        turns = TurnController([' Ann ', 'Bo', 'Cy'])
        self.assertEqual(turns.players, ('Ann', 'Bo', 'Cy'))
        self.assertEqual(turns.current, 'Ann')
        self.assertEqual(turns.streak, 0)

    def test_given_bad_lists_when_registering_then_rejected(self):
        for bad in ([], ['Ann', 'Ann'], ['Ann', '  '], ['Ann', 3]):
            with self.assertRaises(PlayerRegistrationError):
                TurnController(bad)

    def test_given_short_streak_when_advancing_then_turn_error(self):
        turns = TurnController(['Ann', 'Bo'])
        turns.record_correct()
        with self.assertRaises(TurnError):
            turns.advance(locked=False, finished=False)
        self.assertEqual(turns.current, 'Ann')
        self.assertEqual(turns.streak, 1)

    def test_given_locked_or_finished_when_advancing_then_turn_error(self):
        turns = TurnController(['Ann', 'Bo'])
        turns.record_correct()
        turns.record_correct()
        self.assertFalse(turns.can_advance(locked=True, finished=False))
        self.assertFalse(turns.can_advance(locked=False, finished=True))
        with self.assertRaises(TurnError):
            turns.advance(locked=False, finished=True)

    def test_given_streak_when_advancing_then_cycles_and_resets(self):
        turns = TurnController(['Ann', 'Bo'])
        for expected in ('Bo', 'Ann', 'Bo'):
            turns.record_correct()
            turns.record_correct()
            self.assertEqual(turns.advance(locked=False, finished=False), expected)
            self.assertEqual(turns.streak, 0)

    def test_wrong_guess_resets_streak(self):
        turns = TurnController(['Ann'])
        turns.record_correct()
        turns.record_correct()
        turns.record_wrong()
        self.assertEqual(turns.streak, 0)
        self.assertFalse(turns.can_advance(locked=False, finished=False))


class TestPenaltyHandle(unittest.TestCase):
    def test_given_handle_when_fired_twice_then_runs_once(self):
        calls = []
        handle = PenaltyHandle(lambda: calls.append(1), 2.0)
        self.assertTrue(handle.pending)
        self.assertTrue(handle.fire())
        self.assertFalse(handle.fire())
        self.assertEqual(calls, [1])
        self.assertFalse(handle.pending)
        self.assertTrue(handle.wait(0))
        self.assertFalse(handle.cancel())

    def test_given_cancelled_handle_when_fired_then_never_runs(self):
        calls = []
        handle = PenaltyHandle(lambda: calls.append(1), 2.0)
        self.assertTrue(handle.cancel())
        self.assertTrue(handle.cancelled)
        self.assertFalse(handle.fire())
        self.assertEqual(calls, [])

    def test_manual_scheduler_runs_pending_in_order(self):
        sched = ManualScheduler()
        calls = []
        sched.schedule(1.0, lambda: calls.append('a'))
        h2 = sched.schedule(1.0, lambda: calls.append('b'))
        sched.schedule(1.0, lambda: calls.append('c'))
        h2.cancel()
        self.assertEqual(len(sched.pending()), 2)
        self.assertEqual(sched.run_pending(), 2)
        self.assertEqual(calls, ['a', 'c'])
        self.assertEqual(sched.pending(), [])

    def test_threading_scheduler_fires_after_delay(self):
        done = threading.Event()
        handle = ThreadingScheduler().schedule(0.01, done.set)
        self.assertTrue(handle.wait(5))
        self.assertTrue(done.is_set())

    def test_threading_scheduler_cancel_stops_timer(self):
        done = threading.Event()
        handle = ThreadingScheduler().schedule(30.0, done.set)
        self.assertTrue(handle.cancel())
        self.assertTrue(handle.wait(0))
        self.assertFalse(done.is_set())


if __name__ == '__main__':
    unittest.main(verbosity=2)
