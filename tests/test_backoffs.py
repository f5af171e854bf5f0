from datetime import timedelta

from twitterrest.backoffs import (
    ExponentialBackOff,
    new_aggressive_exponential_backoff,
    new_exponential_backoff,
)


def test_new_exponential_backoff():
    b = new_exponential_backoff()
    assert b.initial_interval == timedelta(seconds=5)
    assert b.multiplier == 2.0
    assert b.max_interval == timedelta(seconds=320)


def test_new_aggressive_exponential_backoff():
    b = new_aggressive_exponential_backoff()
    assert b.initial_interval == timedelta(minutes=1)
    assert b.multiplier == 2.0
    assert b.max_interval == timedelta(minutes=16)


def test_without_randomization_first_wait_is_initial_and_grows_to_max():
    b = new_exponential_backoff()
    b.randomization_factor = 0.0
    waits = [b.next_backoff() for _ in range(12)]
    assert waits[0] == b.initial_interval
    assert all(later >= earlier for earlier, later in zip(waits, waits[1:]))
    assert max(waits) == b.max_interval
    assert waits[-1] == b.max_interval


def test_randomized_waits_stay_within_bounds():
    b = new_exponential_backoff()
    for _ in range(20):
        current = b.current_interval
        wait = b.next_backoff()
        assert current * 0.5 <= wait <= current * 1.5


def test_reset_returns_to_initial_interval():
    b = new_aggressive_exponential_backoff()
    for _ in range(5):
        b.next_backoff()
    assert b.current_interval > b.initial_interval
    b.reset()
    assert b.current_interval == b.initial_interval


def test_stops_after_max_elapsed_time():
    now = [0.0]
    b = ExponentialBackOff(max_elapsed_time=timedelta(minutes=15), clock=lambda: now[0])
    assert b.next_backoff() is not None
    now[0] = timedelta(minutes=16).total_seconds()
    assert b.next_backoff() is None
    b.reset()
    assert b.next_backoff() == b.initial_interval * 1 or b.current_interval > b.initial_interval