import itertools

from pnmkit.timer import Timer


def _clock(*values):
    it = iter(values)
    return lambda: next(it)


def test_fresh_timer_is_not_running():
    assert Timer().is_running() is False


def test_start_stop_measures_interval():
    timer = Timer(_clock(1_000_000, 2_500_000))
    timer.start()
    assert timer.is_running() is True
    timer.stop()
    assert timer.is_running() is False
    assert timer.elapsed_microseconds() == 1500


def test_unit_conversions_are_consistent():
    timer = Timer(_clock(3_000, 7_654_321))
    timer.start()
    timer.stop()
    micros = timer.elapsed_microseconds()
    assert timer.elapsed_milliseconds() == micros / 1000.0
    assert timer.elapsed_seconds() == timer.elapsed_milliseconds() / 1000.0


def test_microseconds_are_truncated():
    timer = Timer(_clock(0, 1_999))
    timer.start()
    timer.stop()
    assert timer.elapsed_microseconds() == 1


def test_second_stop_is_ignored():
    timer = Timer(_clock(0, 5_000_000, 9_000_000))
    timer.start()
    timer.stop()
    before = timer.elapsed_microseconds()
    timer.stop()
    assert timer.elapsed_microseconds() == before


def test_running_timer_reads_the_clock():
    clock_values = itertools.chain([0], itertools.repeat(4_000_000))
    timer = Timer(lambda: next(clock_values))
    timer.start()
    assert timer.is_running() is True
    assert timer.current_elapsed_milliseconds() == timer.elapsed_milliseconds()
    assert timer.current_elapsed_seconds() == timer.elapsed_seconds()
    assert timer.elapsed_microseconds() > 0


def test_current_elapsed_is_zero_when_stopped():
    timer = Timer(_clock(0, 8_000_000))
    timer.start()
    timer.stop()
    assert timer.current_elapsed_milliseconds() == 0.0
    assert timer.current_elapsed_seconds() == timer.current_elapsed_milliseconds()


def test_reset_stops_running():
    timer = Timer(_clock(100))
    timer.start()
    timer.reset()
    assert timer.is_running() is False


def test_context_manager_matches_manual_use():
    manual = Timer(_clock(10_000, 40_000))
    manual.start()
    manual.stop()
    with Timer(_clock(10_000, 40_000)) as timed:
        assert timed.is_running() is True
    assert timed.is_running() is False
    assert timed.elapsed_microseconds() == manual.elapsed_microseconds()


def test_real_clock_is_non_negative():
    with Timer() as timer:
        sum(range(1000))
    assert timer.elapsed_microseconds() >= 0