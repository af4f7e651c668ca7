import pytest

from simlog_app.utils import build_session_name, calculate_duration, is_valid_time


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("09:00", "11:30", 2.5),
        ("10:00", "13:00", 3.0),
        ("08:15", "08:35", 0.33),
        ("14:00", "14:00", 0.0),
    ],
)
def test_duration_same_day(start, end, expected):
    assert calculate_duration(start, end) == expected


def test_duration_crosses_midnight():
    assert calculate_duration("23:00", "01:00") == 2.0
    assert calculate_duration("22:30", "00:15") == 1.75


@pytest.mark.parametrize("start,end", [("", "10:00"), ("09:00", ""), (None, None)])
def test_duration_missing_time_is_zero(start, end):
    assert calculate_duration(start, end) == 0


def test_session_name():
    assert build_session_name("Airbus A320", "2024-05-18") == "Airbus A320_2024-05-18"


def test_time_format():
    assert is_valid_time("00:00")
    assert is_valid_time("23:59")
    assert not is_valid_time("24:00")
    assert not is_valid_time("9:00")
    assert not is_valid_time("")
