"""Open windows collection, rebuilt from each successful enumeration."""

from typing import Iterable, List, Optional, Sequence, Tuple

from ..models.window import OpenWindow
from .ranking import rank


TITLE_WEIGHT = 2
APP_NAME_WEIGHT = 1


def _window_fields(window: OpenWindow) -> Iterable[Tuple[str, int]]:
    yield window.title_lower, TITLE_WEIGHT
    yield window.app_name_lower, APP_NAME_WEIGHT


class WindowIndex:
    """Searchable snapshot of open windows, ordered by title."""

    def __init__(self, windows: Sequence[OpenWindow]):
        self._windows: Tuple[OpenWindow, ...] = tuple(
            sorted(windows, key=lambda w: (w.title_lower, w.title))
        )

    def __len__(self) -> int:
        return len(self._windows)

    @property
    def windows(self) -> Tuple[OpenWindow, ...]:
        return self._windows

    def search(self, query: str, limit: Optional[int] = None) -> List[Tuple[OpenWindow, int]]:
        """Rank windows; a title match counts double an app name match.

        Window search is uncapped unless ``limit`` is given.
        """
        return rank(self._windows, query.strip(), _window_fields, limit)
