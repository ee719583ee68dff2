"""Emoji collection: the bundled dataset as a rankable index."""

from typing import Iterable, List, Optional, Sequence, Tuple

from ..models.emoji import Emoji
from .emoji_data import EMOJI_ROWS
from .ranking import rank


LIST_LIMIT = 20
GRID_LIMIT = 24


def load_bundled_emoji() -> List[Emoji]:
    """Build Emoji records from the bundled dataset, in declaration order."""
    return [
        Emoji.build(glyph, name, keywords, shortcodes)
        for glyph, name, keywords, shortcodes in EMOJI_ROWS
    ]


def _emoji_fields(emoji: Emoji) -> Iterable[Tuple[str, int]]:
    yield emoji.name_lower, 1
    for keyword in emoji.keywords:
        yield keyword, 1


class EmojiIndex:
    """Searchable emoji collection, immutable after construction."""

    def __init__(self, emoji: Optional[Sequence[Emoji]] = None):
        self._emoji: Tuple[Emoji, ...] = tuple(load_bundled_emoji() if emoji is None else emoji)

    def __len__(self) -> int:
        return len(self._emoji)

    @property
    def emoji(self) -> Tuple[Emoji, ...]:
        return self._emoji

    def search(self, query: str, limit: int = LIST_LIMIT) -> List[Tuple[Emoji, int]]:
        """Rank emoji by the best score across name and keywords.

        Args:
            query: Search text; empty returns the first ``limit`` emoji
            limit: LIST_LIMIT for list display, GRID_LIMIT for the grid

        Returns:
            (emoji, score) pairs, best first
        """
        return rank(self._emoji, query.strip(), _emoji_fields, limit)
