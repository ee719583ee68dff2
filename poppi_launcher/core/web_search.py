"""Web search engines: query prefixes and result URLs."""

from enum import Enum
from typing import Optional, Tuple
from urllib.parse import quote_plus


class SearchEngine(str, Enum):
    YOUTUBE = "youtube"
    GOOGLE = "google"
    CHATGPT = "chatgpt"


# Longest prefixes first so "youtube " is not read as something shorter
SEARCH_PREFIXES: Tuple[Tuple[str, SearchEngine], ...] = (
    ("youtube ", SearchEngine.YOUTUBE),
    ("chatgpt ", SearchEngine.CHATGPT),
    ("google ", SearchEngine.GOOGLE),
    ("gpt ", SearchEngine.CHATGPT),
    ("yt ", SearchEngine.YOUTUBE),
)

# Order of the "nothing found" suggestions
FALLBACK_ENGINES: Tuple[SearchEngine, ...] = (
    SearchEngine.YOUTUBE,
    SearchEngine.GOOGLE,
    SearchEngine.CHATGPT,
)

_URL_TEMPLATES = {
    SearchEngine.YOUTUBE: "https://www.youtube.com/results?search_query={}",
    SearchEngine.GOOGLE: "https://www.google.com/search?q={}",
    SearchEngine.CHATGPT: "https://chatgpt.com/?q={}",
}


def match_search_prefix(query: str) -> Optional[Tuple[SearchEngine, str]]:
    """Split a query into (engine, search text) when it has an engine prefix."""
    lowered = query.lower()
    for prefix, engine in SEARCH_PREFIXES:
        if lowered.startswith(prefix):
            return engine, query[len(prefix):].strip()
    return None


def build_search_url(engine: str, text: str) -> str:
    """Build the URL that runs ``text`` on ``engine``.

    Raises:
        ValueError: For an unknown engine name
    """
    template = _URL_TEMPLATES[SearchEngine(engine)]
    return template.format(quote_plus(text))


def fallback_engines(first: Optional[str] = None) -> Tuple[SearchEngine, ...]:
    """Return FALLBACK_ENGINES with ``first`` moved to the front.

    Raises:
        ValueError: For an unknown engine name
    """
    if first is None:
        return FALLBACK_ENGINES
    lead = SearchEngine(first)
    return (lead,) + tuple(engine for engine in FALLBACK_ENGINES if engine is not lead)
