from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

from storefront.infrastructure.auth.login_attempts import InMemoryLoginThrottle
from storefront.tests.fakes import FakeMonotonic


def _throttle(monotonic: FakeMonotonic) -> InMemoryLoginThrottle:
    return InMemoryLoginThrottle(max_attempts=5, lockout_window=900, clock=monotonic)


def test_counts_up_to_limit_then_reports_overflow(monotonic: FakeMonotonic) -> None:
    throttle = _throttle(monotonic)

    counts = [throttle.increment("admin") for _ in range(7)]

    assert counts == [1, 2, 3, 4, 5, 6, 6]


def test_keys_are_tracked_independently(monotonic: FakeMonotonic) -> None:
    throttle = _throttle(monotonic)
    for _ in range(5):
        throttle.increment("alice")

    assert throttle.increment("bob") == 1
    assert throttle.increment("alice") == 6


def test_reset_forgets_key(monotonic: FakeMonotonic) -> None:
    throttle = _throttle(monotonic)
    for _ in range(5):
        throttle.increment("admin")

    throttle.reset("admin")
    throttle.reset("never-seen")

    assert throttle.increment("admin") == 1


def test_stale_counter_restarts_after_window(monotonic: FakeMonotonic) -> None:
    throttle = _throttle(monotonic)
    throttle.increment("admin")
    throttle.increment("admin")

    monotonic.advance(901)

    assert throttle.increment("admin") == 1


def test_window_is_measured_from_last_counted_attempt(monotonic: FakeMonotonic) -> None:
    throttle = _throttle(monotonic)
    for _ in range(4):
        throttle.increment("admin")
    monotonic.advance(600)
    assert throttle.increment("admin") == 5

    monotonic.advance(600)
    assert throttle.increment("admin") == 6

    monotonic.advance(301)
    assert throttle.increment("admin") == 1


def test_locked_attempts_do_not_extend_lockout(monotonic: FakeMonotonic) -> None:
    throttle = _throttle(monotonic)
    for _ in range(5):
        throttle.increment("admin")

    for _ in range(10):
        monotonic.advance(60)
        assert throttle.increment("admin") == 6

    monotonic.advance(301)
    assert throttle.increment("admin") == 1


def test_defaults_match_class_constants() -> None:
    throttle = InMemoryLoginThrottle()

    assert throttle.max_attempts == InMemoryLoginThrottle.MAX_ATTEMPTS == 5
    assert InMemoryLoginThrottle.LOCKOUT_WINDOW == 900


def test_concurrent_increments_are_not_lost() -> None:
    throttle = InMemoryLoginThrottle(max_attempts=1000, lockout_window=900)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(lambda _: throttle.increment("admin"), range(200)))

    assert sorted(results) == list(range(1, 201))


def test_stale_counters_are_evicted(monotonic: FakeMonotonic) -> None:
    throttle = InMemoryLoginThrottle(max_attempts=5, lockout_window=60, clock=monotonic)
    for i in range(10_000):
        throttle.increment(f"spray-{i}")
    assert throttle.tracked_keys == 10_000

    monotonic.advance(61)
    throttle.increment("late")

    assert throttle.tracked_keys == 1


def test_live_counters_survive_eviction(monotonic: FakeMonotonic) -> None:
    throttle = _throttle(monotonic)
    throttle.increment("old")
    monotonic.advance(600)
    for _ in range(5):
        throttle.increment("recent")

    monotonic.advance(301)
    throttle.increment("other")

    assert throttle.tracked_keys == 2
    assert throttle.increment("recent") == 6
    assert throttle.increment("old") == 1
