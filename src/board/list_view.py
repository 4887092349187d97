"""
List View state machine.

    Idle -> Loading -> Loaded | Failed

Transitions are pure functions over an immutable ListState. The list is
only ever replaced wholesale by what the server returns; there is no local
merge after a mutation.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence, Tuple

from src.board.records import BoardRecord


class ListStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass(frozen=True)
class ListState:
    """Displayed collection, load status and the page-level error banner."""
    status: ListStatus = ListStatus.IDLE
    items: Tuple[BoardRecord, ...] = ()
    error: Optional[str] = None

    @property
    def is_loading(self) -> bool:
        return self.status == ListStatus.LOADING

    @property
    def is_empty(self) -> bool:
        """Loaded with nothing to show ("no items" state)."""
        return self.status == ListStatus.LOADED and not self.items


def begin_loading(state: ListState) -> ListState:
    return replace(state, status=ListStatus.LOADING, error=None)


def load_succeeded(state: ListState, items: Sequence[BoardRecord]) -> ListState:
    return ListState(status=ListStatus.LOADED, items=tuple(items), error=None)


def load_failed(state: ListState, message: str) -> ListState:
    """Enter Failed with a fixed user-facing message. Previous items are kept."""
    return replace(state, status=ListStatus.FAILED, error=message)


def delete_failed(state: ListState, message: str) -> ListState:
    """Surface a delete error without touching the displayed items."""
    return replace(state, error=message)


def dismiss_error(state: ListState) -> ListState:
    return replace(state, error=None)
