"""
Shared ranking for the searchable collections.

Every collection ranks the same way: score each item on each of its
fields, keep the maximum (fields are never summed), drop items without a
positive score, sort by score descending keeping the collection's natural
order for ties, and cap.
"""

from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

from .scoring import fuzzy_score


T = TypeVar("T")

# (lowercased field text, weight)
FieldExtractor = Callable[[T], Iterable[Tuple[str, int]]]


def best_field_score(query: str, fields: Iterable[Tuple[str, int]]) -> Optional[int]:
    """Return the best weighted score across fields, or None if none match."""
    best = None
    for text, weight in fields:
        if not text:
            continue
        score = fuzzy_score(query, text)
        if score is None:
            continue
        score *= weight
        if best is None or score > best:
            best = score
    return best


def rank(
    items: Sequence[T],
    query: str,
    fields: FieldExtractor,
    limit: Optional[int] = None,
) -> List[Tuple[T, int]]:
    """Rank items against a query.

    Args:
        items: Collection in its natural order
        query: Raw query text (lowercased here)
        fields: Returns the (lowercase text, weight) pairs to score for an item
        limit: Maximum number of results, or None for no cap

    Returns:
        List of (item, score) pairs, best first. For an empty query the
        first ``limit`` items in natural order with score 0.
    """
    if not query:
        head = items if limit is None else items[:limit]
        return [(item, 0) for item in head]

    q = query.lower()
    scored: List[Tuple[T, int]] = []
    for item in items:
        score = best_field_score(q, fields(item))
        if score is not None and score > 0:
            scored.append((item, score))

    # list.sort is stable, so ties keep natural order
    scored.sort(key=lambda pair: pair[1], reverse=True)
    if limit is not None:
        del scored[limit:]
    return scored
