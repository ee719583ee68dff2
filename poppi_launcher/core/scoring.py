"""
Fuzzy subsequence scoring.

Scores how well a typed query matches a candidate string. A query matches
when its characters appear in the candidate in order, not necessarily
adjacent. Among all such alignments the best-scoring one is found with a
dynamic program over (query position, candidate position).

Scoring rules:
- every matched character earns MATCH_SCORE
- a match on a word boundary (start, after a separator or any non
  alphanumeric character, or a letter after a digit) earns BOUNDARY_BONUS,
  doubled for the first query character
- a match directly after the previous match earns CONSECUTIVE_BONUS
  (or the boundary bonus, whichever is larger)
- skipping candidate characters between matches costs GAP_START for the
  first skipped character and GAP_EXTENSION for each further one
- characters before the first match cost LEADING_PENALTY each, capped
  at MAX_LEADING_PENALTY
- a query found verbatim in the candidate earns SUBSTRING_BONUS

Both arguments are expected to be lowercased already; callers precompute
the lowercase forms of their candidates once.
"""

from typing import Optional


MATCH_SCORE = 16
BOUNDARY_BONUS = 8
FIRST_CHAR_MULTIPLIER = 2
CONSECUTIVE_BONUS = 10
GAP_START = -3
GAP_EXTENSION = -1
LEADING_PENALTY = -1
MAX_LEADING_PENALTY = -6
# Larger than the best first-character advantage a scattered alignment
# can gain, so verbatim substrings always outrank scattered matches.
SUBSTRING_BONUS = 24

SEPARATORS = frozenset(" -_./\\:()[]")

_NEG = float("-inf")


def _boundary_bonus(candidate: str, index: int) -> int:
    if index == 0:
        return BOUNDARY_BONUS
    prev = candidate[index - 1]
    if prev in SEPARATORS or not prev.isalnum():
        return BOUNDARY_BONUS
    if prev.isdigit() and candidate[index].isalpha():
        return BOUNDARY_BONUS
    return 0


def is_subsequence(query: str, candidate: str) -> bool:
    """Return True when every query char appears in candidate, in order."""
    it = iter(candidate)
    return all(ch in it for ch in query)


def fuzzy_score(query: str, candidate: str) -> Optional[int]:
    """Score a lowercased query against a lowercased candidate.

    Args:
        query: Search text (lowercase)
        candidate: Text to match against (lowercase)

    Returns:
        Integer score (higher is better), 0 for an empty query, or None
        when query is not a subsequence of candidate

    Examples:
        >>> fuzzy_score("fire", "firefox") > fuzzy_score("fire", "fine ware")
        True
        >>> fuzzy_score("xyz", "firefox") is None
        True
    """
    if not query:
        return 0
    n, m = len(query), len(candidate)
    if n > m or not is_subsequence(query, candidate):
        return None

    bonuses = [_boundary_bonus(candidate, j) for j in range(m)]

    # Row for query[0]
    first = query[0]
    prev = [_NEG] * m
    for j, ch in enumerate(candidate):
        if ch == first:
            leading = max(LEADING_PENALTY * j, MAX_LEADING_PENALTY)
            prev[j] = MATCH_SCORE + bonuses[j] * FIRST_CHAR_MULTIPLIER + leading

    for i in range(1, n):
        qc = query[i]
        cur = [_NEG] * m
        # Best prev[k] for k <= j - 2, already charged for the gap up to j
        gap_best = _NEG
        for j in range(i, m):
            if j >= 2:
                extended = gap_best + GAP_EXTENSION
                opened = prev[j - 2] + GAP_START
                gap_best = max(extended, opened)
            if candidate[j] != qc:
                continue
            best = _NEG
            if prev[j - 1] > _NEG:
                best = prev[j - 1] + max(CONSECUTIVE_BONUS, bonuses[j])
            if gap_best > _NEG:
                best = max(best, gap_best + bonuses[j])
            if best > _NEG:
                cur[j] = best + MATCH_SCORE
        prev = cur

    score = max(prev)
    if score == _NEG:
        return None
    if query in candidate:
        score += SUBSTRING_BONUS
    return int(score)
