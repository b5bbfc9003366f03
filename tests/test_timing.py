import datetime
import time

from countryguess.timing import Date, Timer, get_interval, sleep, wait


class FakeClock:
    def __init__(self, value=0.0):
        self.value = value

    def __call__(self):
        return self.value


def test_timer_starts_with_zero_interval_and_elapsed():
    clock = FakeClock(4.0)
    timer = Timer(clock)
    assert timer.interval() == 0.0
    assert timer.elapsed() == 0.0


def test_timer_interval_between_updates():
    clock = FakeClock(1.0)
    timer = Timer(clock)
    clock.value = 3.5
    timer.update_interval()
    assert timer.interval() == 3.5 - 1.0
    clock.value = 4.0
    timer.update_interval()
    assert timer.interval() == 4.0 - 3.5


def test_timer_elapsed_and_update():
    clock = FakeClock(2.0)
    timer = Timer(clock)
    clock.value = 7.0
    assert timer.elapsed() == 7.0 - 2.0
    timer.update_elapsed()
    clock.value = 9.0
    assert timer.elapsed() == 9.0 - 7.0


def test_timer_reset():
    clock = FakeClock(0.0)
    timer = Timer(clock)
    clock.value = 6.0
    timer.reset()
    assert timer.elapsed() == 0.0
    assert timer.interval() == 6.0


def test_timer_with_real_clock_is_monotonic():
    timer = Timer()
    time.sleep(0.01)
    assert timer.elapsed() >= 0.01


def test_date_format():
    assert str(Date(2024, 1, 2, 3, 4, 5)) == "2024.1.2 3:4:5"


def test_date_now_matches_clock():
    before = datetime.datetime.now()
    now = Date.now()
    after = datetime.datetime.now()
    assert before.year <= now.year <= after.year
    assert 1 <= now.month <= 12
    assert 0 <= now.second <= 60


def test_wait_blocks_at_least_duration():
    timer = Timer()
    wait(0.02)
    assert timer.elapsed() >= 0.02


def test_sleep_blocks_and_reports_success():
    start = time.perf_counter()
    assert sleep(0.02) is True
    assert time.perf_counter() - start >= 0.015


def test_get_interval_measures_gap():
    get_interval()
    time.sleep(0.02)
    assert get_interval() >= 0.02