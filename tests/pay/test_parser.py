import pytest

from src.shift_pay.shift_pay.core.exceptions import InvalidTimeFormat, ValidationError
from src.shift_pay.shift_pay.pay.model import TimeOfDay
from src.shift_pay.shift_pay.pay.parser import parse_time


def test_parse_time_valid():
    assert parse_time("09:05") == TimeOfDay(hour=9, minute=5)
    assert parse_time("0:00").minutes == 0
    assert parse_time("23:59").minutes == 23 * 60 + 59


def test_parse_time_strips_whitespace():
    assert parse_time(" 7:30 ") == TimeOfDay(hour=7, minute=30)


@pytest.mark.parametrize(
    "text",
    ["9am", "0900", "", ":30", "12:", "24:00", "12:60", "-1:30", "12:3x", "1:2:3", "１２:00", None],
)
def test_parse_time_rejects_malformed(text):
    with pytest.raises(InvalidTimeFormat):
        parse_time(text)


def test_invalid_time_is_a_validation_error():
    with pytest.raises(ValidationError):
        parse_time("25:00")
