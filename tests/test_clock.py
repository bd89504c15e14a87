import unittest

from wordsearch.engine.clock import VirtualClock


class VirtualClockTests(unittest.TestCase):
    def test_callbacks_fire_in_due_order(self) -> None:
        clock = VirtualClock()
        fired = []
        clock.call_later(3.0, lambda: fired.append(("late", clock.now)))
        clock.call_later(1.0, lambda: fired.append(("early", clock.now)))
        self.assertEqual(clock.advance(2.0), 1)
        self.assertEqual(fired, [("early", 1.0)])
        self.assertEqual(clock.now, 2.0)
        clock.advance(1.0)
        self.assertEqual(fired, [("early", 1.0), ("late", 3.0)])

    def test_cancelled_calls_never_fire(self) -> None:
        clock = VirtualClock()
        fired = []
        handle = clock.call_later(1.0, lambda: fired.append(1))
        self.assertEqual(clock.pending, 1)
        handle.cancel()
        self.assertEqual(clock.pending, 0)
        clock.advance(5.0)
        self.assertEqual(fired, [])

    def test_negative_advance_keeps_time(self) -> None:
        clock = VirtualClock(start=5.0)
        fired = []
        clock.call_later(0.0, lambda: fired.append(clock.now))
        self.assertEqual(clock.advance(-3.0), 1)
        self.assertEqual(clock.now, 5.0)
        self.assertEqual(fired, [5.0])

    def test_callbacks_may_schedule_more_work(self) -> None:
        clock = VirtualClock()
        fired = []

        def tick() -> None:
            fired.append(clock.now)
            if len(fired) < 3:
                clock.call_later(1.0, tick)

        clock.call_later(1.0, tick)
        self.assertEqual(clock.run_until_idle(), 3)
        self.assertEqual(fired, [1.0, 2.0, 3.0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
