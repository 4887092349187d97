"""
Unit tests for src/board/carousel.py - Carousel Controller

The transition is tested directly; the ticker is driven through a fake
timer so no test waits on the clock.
"""

import pytest

from src.board.carousel import (
    SLIDES,
    CarouselState,
    CarouselTicker,
    Direction,
    advance,
    visible_count,
    visible_slides,
)


class FakeTimer:
    """Stands in for threading.Timer; fires only when the test says so."""

    created = []

    def __init__(self, interval, function):
        self.interval = interval
        self.function = function
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        self.function()


@pytest.fixture(autouse=True)
def reset_timers():
    FakeTimer.created = []
    yield


class TestTransition:
    @pytest.mark.parametrize("count", [1, 2, 5, 7])
    def test_next_n_times_returns_to_start(self, count):
        for start in range(count):
            state = CarouselState(index=start, count=count)
            for _ in range(count):
                state = advance(state, Direction.NEXT)
            assert state.index == start

    def test_prev_from_zero_wraps_to_last(self):
        state = advance(CarouselState(index=0, count=5), Direction.PREV)

        assert state.index == 4

    def test_next_from_last_wraps_to_zero(self):
        assert advance(CarouselState(index=4, count=5)).index == 0

    def test_direction_accepts_plain_strings(self):
        assert advance(CarouselState(index=2, count=5), "prev").index == 1

    def test_invalid_state_is_rejected(self):
        with pytest.raises(ValueError):
            CarouselState(index=5, count=5)
        with pytest.raises(ValueError):
            CarouselState(index=0, count=0)


class TestVisibleSlides:
    @pytest.mark.parametrize(
        "width,expected",
        [(None, 1), (375, 1), (639, 1), (640, 2), (1023, 2), (1024, 3), (1279, 3), (1280, 4), (2560, 4)],
    )
    def test_visible_count_breakpoints(self, width, expected):
        assert visible_count(width) == expected

    def test_window_wraps_from_current_index(self):
        state = CarouselState(index=len(SLIDES) - 1)

        cards = visible_slides(state, 1280)

        assert [index for index, _ in cards] == [len(SLIDES) - 1, 0, 1, 2]
        assert cards[1][1] == SLIDES[0]

    def test_window_never_repeats_slides(self):
        slides = SLIDES[:2]

        cards = visible_slides(CarouselState(index=1, count=2), 2000, slides)

        assert [index for index, _ in cards] == [1, 0]


class TestTicker:
    def test_start_schedules_interval(self):
        ticker = CarouselTicker(CarouselState(), interval_ms=3000, timer_factory=FakeTimer)

        ticker.start()

        assert ticker.running
        assert len(FakeTimer.created) == 1
        timer = FakeTimer.created[0]
        assert timer.interval == 3.0
        assert timer.started
        assert timer.daemon

    def test_tick_advances_and_reschedules(self):
        seen = []
        ticker = CarouselTicker(CarouselState(), on_change=seen.append, timer_factory=FakeTimer).start()

        FakeTimer.created[0].fire()
        FakeTimer.created[1].fire()

        assert ticker.state.index == 2
        assert [state.index for state in seen] == [1, 2]
        assert len(FakeTimer.created) == 3

    def test_nudge_applies_now_and_reschedules_from_click(self):
        ticker = CarouselTicker(CarouselState(), timer_factory=FakeTimer).start()
        first = FakeTimer.created[0]

        state = ticker.nudge(Direction.PREV)

        assert state.index == len(SLIDES) - 1
        assert first.cancelled
        assert len(FakeTimer.created) == 2
        assert FakeTimer.created[1].started

    def test_nudge_then_tick_advances_once(self):
        ticker = CarouselTicker(CarouselState(), timer_factory=FakeTimer).start()

        ticker.nudge(Direction.NEXT)
        FakeTimer.created[-1].fire()

        assert ticker.state.index == 2

    def test_nudge_when_stopped_does_not_schedule(self):
        ticker = CarouselTicker(CarouselState(), timer_factory=FakeTimer)

        ticker.nudge(Direction.NEXT)

        assert ticker.state.index == 1
        assert FakeTimer.created == []

    def test_stop_cancels_and_late_tick_is_ignored(self):
        ticker = CarouselTicker(CarouselState(), timer_factory=FakeTimer).start()
        timer = FakeTimer.created[0]

        ticker.stop()
        timer.fire()

        assert timer.cancelled
        assert not ticker.running
        assert ticker.state.index == 0
        assert len(FakeTimer.created) == 1

    def test_context_manager_stops_on_exit(self):
        with CarouselTicker(CarouselState(), timer_factory=FakeTimer) as ticker:
            assert ticker.running

        assert not ticker.running
        assert FakeTimer.created[0].cancelled

    def test_context_manager_stops_on_error(self):
        with pytest.raises(RuntimeError):
            with CarouselTicker(CarouselState(), timer_factory=FakeTimer):
                raise RuntimeError("view crashed")

        assert FakeTimer.created[0].cancelled

    def test_non_positive_interval_rejected(self):
        with pytest.raises(ValueError):
            CarouselTicker(CarouselState(), interval_ms=0)
