"""
Carousel Controller for the home page.

The slide index moves through a fixed sequence and wraps at both ends.
`advance` is the single transition; the timer and the next/prev buttons
both go through it.

The Flask UI does not run a ticker: in the browser the carousel partial
polls `/carousel` through HTMX, and a click swaps the element, which restarts
the polling. CarouselTicker is the same timing for Python hosts without a
browser (a kiosk renderer, a terminal client): a cancellable scheduled task
that applies `advance` on an interval and reschedules from any manual move.
"""

import logging
import threading
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL_MS = 3000

# (max viewport width exclusive, cards shown); widest screens show 4
VIEWPORT_BREAKPOINTS: Tuple[Tuple[int, int], ...] = ((640, 1), (1024, 2), (1280, 3))
MAX_VISIBLE_CARDS = 4


@dataclass(frozen=True)
class Slide:
    image_url: str
    title: str
    message: str
    link: Optional[str] = None


SLIDES: Tuple[Slide, ...] = (
    Slide(
        image_url="https://picsum.photos/seed/community-hiring/800/450",
        title="Local jobs, local people",
        message="Post a job or find work from neighbours who need a hand.",
        link="/hiring",
    ),
    Slide(
        image_url="https://picsum.photos/seed/community-alerts/800/450",
        title="Stay in the loop",
        message="Road closures, water cuts and safety notices for your area.",
        link="/alerts",
    ),
    Slide(
        image_url="https://picsum.photos/seed/community-events/800/450",
        title="Meet your community",
        message="Markets, clean-up drives and festivals happening nearby.",
        link="/events",
    ),
    Slide(
        image_url="https://picsum.photos/seed/community-volunteer/800/450",
        title="Lend a hand",
        message="Volunteer for events and help organisers get things done.",
        link="/events",
    ),
    Slide(
        image_url="https://picsum.photos/seed/community-services/800/450",
        title="Skilled help on call",
        message="Plumbers, electricians and tutors posting openings every day.",
        link="/hiring",
    ),
)


class Direction(str, Enum):
    NEXT = "next"
    PREV = "prev"


@dataclass(frozen=True)
class CarouselState:
    index: int = 0
    count: int = len(SLIDES)

    def __post_init__(self):
        if self.count <= 0:
            raise ValueError("carousel needs at least one slide")
        if not 0 <= self.index < self.count:
            raise ValueError(f"index {self.index} out of range for {self.count} slides")


def next_index(index: int, count: int) -> int:
    return (index + 1) % count


def prev_index(index: int, count: int) -> int:
    return (index - 1 + count) % count


def advance(state: CarouselState, direction: Direction = Direction.NEXT) -> CarouselState:
    """Move one slide in `direction`, wrapping at both ends."""
    if Direction(direction) == Direction.PREV:
        return replace(state, index=prev_index(state.index, state.count))
    return replace(state, index=next_index(state.index, state.count))


def visible_count(viewport_width: Optional[int]) -> int:
    """Number of slide cards shown side by side for a viewport width in px."""
    if viewport_width is None:
        return 1
    for max_width, cards in VIEWPORT_BREAKPOINTS:
        if viewport_width < max_width:
            return cards
    return MAX_VISIBLE_CARDS


def visible_slides(
    state: CarouselState,
    viewport_width: Optional[int] = None,
    slides: Sequence[Slide] = SLIDES,
) -> List[Tuple[int, Slide]]:
    """(index, slide) pairs shown from the current index, wrapping, never repeating."""
    shown = min(visible_count(viewport_width), state.count)
    return [
        ((state.index + offset) % state.count, slides[(state.index + offset) % state.count])
        for offset in range(shown)
    ]


class CarouselTicker:
    """
    Auto-advances a carousel every `interval_ms` until stopped.

    Use as a context manager to tie the timer to a view's lifetime:

        with CarouselTicker(CarouselState(), on_change=render) as ticker:
            ...
            ticker.nudge(Direction.PREV)

    A manual nudge applies the transition immediately and restarts the
    interval from that moment.
    """

    def __init__(
        self,
        state: CarouselState,
        interval_ms: int = DEFAULT_INTERVAL_MS,
        on_change: Optional[Callable[[CarouselState], None]] = None,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._state = state
        self.interval_ms = interval_ms
        self.on_change = on_change
        self._timer_factory = timer_factory
        self._timer: Optional[threading.Timer] = None
        self._running = False
        self._lock = threading.RLock()

    @property
    def state(self) -> CarouselState:
        return self._state

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> "CarouselTicker":
        with self._lock:
            if not self._running:
                self._running = True
                self._schedule()
                logger.debug(f"Carousel ticker started ({self.interval_ms}ms)")
        return self

    def stop(self) -> None:
        with self._lock:
            self._running = False
            self._cancel()
            logger.debug("Carousel ticker stopped")

    def nudge(self, direction: Direction) -> CarouselState:
        """Manual next/prev: transition now, then reschedule the timer."""
        with self._lock:
            self._apply(direction)
            if self._running:
                self._cancel()
                self._schedule()
            return self._state

    def __enter__(self) -> "CarouselTicker":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _tick(self) -> None:
        with self._lock:
            if not self._running:
                return
            self._apply(Direction.NEXT)
            self._schedule()

    def _apply(self, direction: Direction) -> None:
        self._state = advance(self._state, direction)
        if self.on_change:
            self.on_change(self._state)

    def _schedule(self) -> None:
        self._timer = self._timer_factory(self.interval_ms / 1000.0, self._tick)
        self._timer.daemon = True
        self._timer.start()

    def _cancel(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
