import re
import time

import pytest

from acmsim.timing import RunTimer, cube, format_elapsed, square

_PATTERN = re.compile(r"^(.*)-ctime=(?:(\d+)d)?(\d{2})h(\d{2})m(\d{2})s$")


def _parse(text):
    match = _PATTERN.match(text)
    assert match is not None, text
    prefix, days, hours, minutes, secs = match.groups()
    return prefix, int(days or 0) * 86400 + int(hours) * 3600 + int(minutes) * 60 + int(secs)


def test_pinned_formats():
    assert format_elapsed(0) == "-ctime=00h00m00s"
    assert format_elapsed(3661, " ") == " -ctime=01h01m01s"
    assert format_elapsed(90061) == "-ctime=1d01h01m01s"


@pytest.mark.parametrize("seconds", [0, 5, 59, 60, 61, 3599, 3600, 86399, 86400, 987654])
def test_format_round_trip(seconds):
    prefix, parsed = _parse(format_elapsed(seconds, "run"))
    assert prefix == "run"
    assert parsed == seconds


def test_days_absent_below_one_day():
    assert "d" not in format_elapsed(86399).split("=")[1]


class _FakeClock:
    def __init__(self, values):
        self._values = iter(values)

    def __call__(self):
        return next(self._values)


def test_elapsed_floors_seconds():
    timer = RunTimer(_FakeClock([1000.0, 1065.7]))
    assert timer.elapsed() == 65


def test_format_uses_elapsed():
    timer = RunTimer(_FakeClock([0.0, 125.0]))
    assert timer.format(" ") == format_elapsed(125, " ")


def test_since_2015():
    start = time.mktime((2015, 1, 1, 0, 0, 0, 0, 0, -1)) + 100
    timer = RunTimer(lambda: start)
    assert timer.since_2015() == 100


def test_default_clock_starts_near_zero():
    timer = RunTimer()
    assert 0 <= timer.elapsed() <= 1


def test_square_and_cube():
    assert square(3.0) == 3.0 * 3.0
    assert cube(-2.0) == -2.0 * -2.0 * -2.0
    assert square(-1.5) == cube(-1.5) / -1.5