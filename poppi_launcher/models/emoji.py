"""Emoji records for the bundled emoji dataset."""

from dataclasses import dataclass, field
from typing import Iterable, Tuple


@dataclass(frozen=True)
class Emoji:
    """A single emoji glyph with its searchable name and keywords."""

    glyph: str
    name: str
    keywords: Tuple[str, ...] = ()
    name_lower: str = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "name_lower", self.name.lower())

    @classmethod
    def build(
        cls,
        glyph: str,
        name: str,
        keywords: Iterable[str] = (),
        shortcodes: Iterable[str] = (),
    ) -> "Emoji":
        """Build an emoji whose keywords combine name tokens, keywords and shortcodes.

        Keywords are lowercased and deduplicated in first-seen order.

        Args:
            glyph: The emoji character(s)
            name: Human-readable name (e.g. "thumbs up")
            keywords: Extra search terms
            shortcodes: Shortcodes such as ":+1:" (colons are stripped)

        Returns:
            Emoji instance
        """
        seen = []
        candidates = list(name.lower().split())
        candidates.extend(k.lower() for k in keywords)
        candidates.extend(s.strip(":").lower() for s in shortcodes)
        for keyword in candidates:
            if keyword and keyword not in seen:
                seen.append(keyword)
        return cls(glyph=glyph, name=name, keywords=tuple(seen))
