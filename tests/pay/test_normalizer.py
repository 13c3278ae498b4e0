from src.shift_pay.shift_pay.pay.model import ShiftInterval, TimeOfDay
from src.shift_pay.shift_pay.pay.normalizer import normalize_shift


def test_same_day_shift():
    interval = normalize_shift(TimeOfDay(8, 0), TimeOfDay(17, 0))
    assert interval == ShiftInterval(start=480, end=1020)
    assert interval.duration == 540


def test_end_before_start_rolls_into_next_day():
    interval = normalize_shift(TimeOfDay(23, 0), TimeOfDay(1, 0))
    assert interval == ShiftInterval(start=1380, end=1500)


def test_start_equal_end_is_full_day():
    interval = normalize_shift(TimeOfDay(9, 0), TimeOfDay(9, 0))
    assert interval.duration == 24 * 60
