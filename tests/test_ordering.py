from datetime import datetime, timedelta, timezone

import pytest

from exprlang.ordering import (
    less,
    less_or_equal,
    make_range,
    more,
    more_or_equal,
)
from exprlang.values import RuntimeFault

TEST_TIME = datetime(2000, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
TEST_DURATION = timedelta(microseconds=1)


@pytest.mark.parametrize(
    "func, want",
    [(less, False), (more, False), (less_or_equal, True), (more_or_equal, True)],
)
def test_same_time(func, want):
    assert func(TEST_TIME, TEST_TIME) is want


@pytest.mark.parametrize("func", [less, more, less_or_equal, more_or_equal])
@pytest.mark.parametrize("other", [1, 1.0, TEST_DURATION])
def test_time_against_other_types_fails(func, other):
    with pytest.raises(RuntimeFault):
        func(TEST_TIME, other)


def test_time_order():
    later = TEST_TIME + timedelta(seconds=1)
    assert less(TEST_TIME, later) is True
    assert more(later, TEST_TIME) is True
    assert less_or_equal(later, TEST_TIME) is False


def test_naive_and_aware_times_compare_as_utc():
    naive = datetime(2000, 1, 1)
    assert less_or_equal(naive, TEST_TIME) is True
    assert more_or_equal(naive, TEST_TIME) is True


@pytest.mark.parametrize("a", [1, 1.0])
@pytest.mark.parametrize("b", [1, 1.0])
def test_equal_numbers_mixed(a, b):
    assert less(a, b) is False
    assert more(a, b) is False
    assert less_or_equal(a, b) is True
    assert more_or_equal(a, b) is True


def test_int_and_float_order():
    assert less(1, 1.5) is True
    assert more(2, 1.5) is True
    assert less(-3, 2) is True


def test_strings():
    assert less("a", "b") is True
    assert more("b", "a") is True
    assert less_or_equal("a", "a") is True
    assert more_or_equal("a", "b") is False


def test_error_message_names_types():
    with pytest.raises(RuntimeFault) as info:
        less(TEST_TIME, 1)
    assert str(info.value) == "invalid operation: time.Time < int"


def test_error_message_for_more_or_equal():
    with pytest.raises(RuntimeFault) as info:
        more_or_equal("a", 1)
    assert str(info.value) == "invalid operation: string >= int"


@pytest.mark.parametrize("func", [less, more, less_or_equal, more_or_equal])
def test_bool_and_nil_are_not_ordered(func):
    with pytest.raises(RuntimeFault):
        func(True, 1)
    with pytest.raises(RuntimeFault):
        func(None, None)


def test_antisymmetry():
    values = [-2, 0, 0.5, 3, 7.25]
    for a in values:
        for b in values:
            assert less(a, b) == more(b, a)
            assert less_or_equal(a, b) == more_or_equal(b, a)
            assert less_or_equal(a, b) == (not more(a, b))


def test_make_range_inclusive():
    rng = make_range(1, 5)
    assert rng == [1, 2, 3, 4, 5]
    assert len(rng) == 5


def test_make_range_single():
    assert make_range(3, 3) == [3]


def test_make_range_empty_when_reversed():
    assert make_range(5, 1) == []


def test_make_range_size_invariant():
    for low in range(-3, 4):
        for high in range(-3, 4):
            rng = make_range(low, high)
            assert len(rng) == max(0, high - low + 1)
            assert all(y - x == 1 for x, y in zip(rng, rng[1:]))