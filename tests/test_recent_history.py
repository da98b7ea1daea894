import pytest

from vinacore.recent_history import RecentHistory


def test_initial_state():
    h = RecentHistory(2.0, 3.0, 10.0)
    assert h.x_estimate == 2.0
    assert h.error_estimate_sqr == 9.0


def test_estimate_above_is_possibly_smaller():
    h = RecentHistory(0.0, 0.0, 10.0)
    assert h.possibly_smaller_than(0.5)


def test_within_two_errors():
    h = RecentHistory(0.0, 1.0, 10.0)
    assert h.possibly_smaller_than(-1.0)
    assert not h.possibly_smaller_than(-3.0)


def test_short_lifetime_clamped():
    a = RecentHistory(0.0, 1.0, 0.1)
    b = RecentHistory(0.0, 1.0, 1.5)
    a.add(3.0)
    b.add(3.0)
    assert a.x_estimate == pytest.approx(b.x_estimate)
    assert a.error_estimate_sqr == pytest.approx(b.error_estimate_sqr)


def test_converges_to_repeated_value():
    h = RecentHistory(0.0, 5.0, 2.0)
    for _ in range(200):
        h.add(4.0)
    assert h.x_estimate == pytest.approx(4.0)
    assert h.error_estimate_sqr == pytest.approx(0.0, abs=1e-9)
    assert not h.possibly_smaller_than(3.0)


def test_add_moves_estimate_towards_value():
    h = RecentHistory(0.0, 1.0, 4.0)
    h.add(8.0)
    assert 0.0 < h.x_estimate < 8.0