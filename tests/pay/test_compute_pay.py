import pytest

from src.shift_pay.shift_pay.core.enums import PayFailure
from src.shift_pay.shift_pay.core.exceptions import InvalidTimeFormat, NoWorkableTime
from src.shift_pay.shift_pay.pay.service import compute_pay, compute_pay_or_raise


@pytest.mark.parametrize(
    "start,end",
    [("08:00", "15:30"), ("06:15", "12:00"), ("00:00", "01:00"), ("10:00", "10:31")],
)
def test_same_day_before_cutoff_has_no_overtime(start, end):
    result = compute_pay(start, end, 18)
    assert result.ok

    sh, sm = map(int, start.split(":"))
    eh, em = map(int, end.split(":"))
    worked = (eh * 60 + em) - (sh * 60 + sm)
    assert result.summary.overtime_hours == 0
    assert result.summary.regular_hours == pytest.approx(worked / 60 - 0.5)


def test_threshold_straddling_shift():
    rate = 20.0
    result = compute_pay("14:00", "17:00", rate)

    s = result.summary
    assert (s.regular_minutes, s.overtime_minutes) == (60, 90)
    assert s.total_pay == pytest.approx(1.0 * rate + 1.5 * rate * 1.5)


def test_midnight_crossing_pays_ninety_minutes():
    s = compute_pay("23:00", "01:00", 10).summary

    assert s.regular_minutes + s.overtime_minutes == 90
    assert s.total_hours == pytest.approx(1.5)
    # Split follows the per-day 15:30 cutoff, not an all-regular reading of this shift:
    # 23:00-00:00 is past the cutoff, lunch comes out of the 00:00-01:00 hour.
    assert s.regular_minutes == 30
    assert s.overtime_minutes == 60


def test_start_equal_end_is_paid_as_full_day():
    s = compute_pay("09:00", "09:00", 10).summary
    assert s.regular_minutes + s.overtime_minutes == 24 * 60 - 30


def test_short_shift_has_no_workable_time():
    result = compute_pay("09:00", "09:15", 20)

    assert not result.ok
    assert result.summary is None
    assert result.failure == PayFailure.NO_WORKABLE_TIME


def test_shift_of_exactly_lunch_length_fails():
    assert compute_pay("12:00", "12:30", 20).failure == PayFailure.NO_WORKABLE_TIME


def test_malformed_time():
    result = compute_pay("9am", "17:00", 20)
    assert result.failure == PayFailure.INVALID_TIME_FORMAT
    assert "9am" in result.message


@pytest.mark.parametrize("rate", [-1, "abc", None, float("nan"), float("inf"), True, 10 ** 400])
def test_invalid_rate(rate):
    assert compute_pay("08:00", "12:00", rate).failure == PayFailure.INVALID_RATE


def test_rate_may_be_numeric_string_or_zero():
    assert compute_pay("08:00", "12:00", "12.5").summary.total_pay == pytest.approx(3.5 * 12.5)
    assert compute_pay("08:00", "12:00", 0).summary.total_pay == 0


def test_repeated_calls_are_identical():
    assert compute_pay("07:45", "18:10", 23.4) == compute_pay("07:45", "18:10", 23.4)


@pytest.mark.parametrize("start,end", [("08:00", "17:00"), ("22:00", "06:00"), ("15:00", "15:45")])
def test_higher_rate_means_higher_pay(start, end):
    totals = [compute_pay(start, end, rate).summary.total_pay for rate in (1, 1.5, 10, 100)]
    assert totals == sorted(totals)
    assert len(set(totals)) == len(totals)


def test_or_raise_variant_raises_typed_errors():
    with pytest.raises(InvalidTimeFormat):
        compute_pay_or_raise("17", "18:00", 10)
    with pytest.raises(NoWorkableTime):
        compute_pay_or_raise("09:00", "09:15", 10)
