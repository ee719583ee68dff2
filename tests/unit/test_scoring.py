"""
Unit tests for the fuzzy subsequence scorer and shared ranking.
"""

import pytest

from poppi_launcher.core.ranking import best_field_score, rank
from poppi_launcher.core.scoring import fuzzy_score, is_subsequence


class TestFuzzyScore:
    """Test subsequence matching and relative scores."""

    def test_non_subsequence_returns_none(self):
        """Test characters out of order do not match."""
        assert fuzzy_score("fx", "firefox") is not None
        assert fuzzy_score("xf", "firefox") is None
        assert fuzzy_score("zz", "firefox") is None
        assert fuzzy_score("oxf", "fox") is None

    def test_query_longer_than_candidate(self):
        """Test a query longer than the candidate never matches."""
        assert fuzzy_score("firefoxes", "firefox") is None

    def test_empty_query_scores_zero(self):
        """Test empty query is a neutral match."""
        assert fuzzy_score("", "anything") == 0

    def test_match_is_positive(self):
        """Test every real match scores above zero."""
        for query, candidate in [("f", "firefox"), ("ffx", "firefox"), ("code", "visual studio code")]:
            assert fuzzy_score(query, candidate) > 0

    def test_exact_substring_beats_scattered_match(self):
        """Test a verbatim substring outranks a scattered subsequence of equal length."""
        assert fuzzy_score("abc", "zzabcz") > fuzzy_score("abc", "azbzcz")
        assert fuzzy_score("ter", "a term") > fuzzy_score("ter", "t-e-r-")

    def test_substring_beats_boundary_scattered_match(self):
        """Test substring in the middle still beats boundary-aligned scattered letters."""
        # "vsc" hits three word starts in the second candidate
        assert fuzzy_score("vsc", "xxxxvscx") > fuzzy_score("vsc", "v s code")

    def test_prefix_beats_middle_match(self):
        """Test a match at the start outranks the same text later on."""
        assert fuzzy_score("fire", "firefox") > fuzzy_score("fire", "campfire")

    def test_consecutive_beats_gapped(self):
        """Test adjacent characters score higher than spread ones."""
        assert fuzzy_score("fi", "file") > fuzzy_score("fi", "f-x-i")

    def test_word_boundary_bonus(self):
        """Test matches on word starts beat matches inside words."""
        assert fuzzy_score("sc", "studio code") > fuzzy_score("sc", "xstudioxcode")

    def test_letter_after_digit_is_boundary(self):
        """Test a letter following a digit starts a word, as in "mp3player"."""
        assert fuzzy_score("player", "mp3player") > fuzzy_score("player", "mpxplayer")
        assert fuzzy_score("2", "x12") == fuzzy_score("2", "xa2")

    def test_scores_are_deterministic(self):
        """Test the same inputs always produce the same score."""
        assert fuzzy_score("vsc", "visual studio code") == fuzzy_score("vsc", "visual studio code")

    def test_is_subsequence(self):
        """Test the subsequence pre-check."""
        assert is_subsequence("fox", "firefox")
        assert is_subsequence("", "abc")
        assert not is_subsequence("xof", "firefox")


class TestRanking:
    """Test max-across-fields ranking, filtering and caps."""

    @staticmethod
    def _fields(item):
        name, comment = item
        return [(name.lower(), 1), (comment.lower(), 1)]

    def test_best_field_score_takes_maximum(self):
        """Test the best field wins and fields are never summed."""
        name_only = best_field_score("fire", [("firefox", 1)])
        both = best_field_score("fire", [("firefox", 1), ("firefox", 1)])
        assert both == name_only

    def test_best_field_score_applies_weight(self):
        """Test weights multiply field scores."""
        single = best_field_score("fire", [("firefox", 1)])
        assert best_field_score("fire", [("firefox", 2)]) == single * 2

    def test_best_field_score_no_match(self):
        """Test None when no field matches."""
        assert best_field_score("zzz", [("firefox", 1), ("", 1)]) is None

    def test_empty_query_returns_natural_order(self):
        """Test empty query keeps natural order with score 0 and applies cap."""
        items = [(f"app{i}", "") for i in range(30)]
        ranked = rank(items, "", self._fields, limit=20)

        assert len(ranked) == 20
        assert [item for item, _ in ranked] == items[:20]
        assert all(score == 0 for _, score in ranked)

    def test_non_matching_items_dropped(self):
        """Test items without a match are excluded."""
        items = [("Firefox", "Web browser"), ("Files", "File manager"), ("GIMP", "Image editor")]
        ranked = rank(items, "fire", self._fields)
        assert [item[0] for item, _ in ranked] == ["Firefox"]

    def test_comment_field_matches(self):
        """Test a match in the second field is enough."""
        items = [("Firefox", "Web browser"), ("GIMP", "Image editor")]
        ranked = rank(items, "editor", self._fields)
        assert [item[0] for item, _ in ranked] == ["GIMP"]

    def test_ties_keep_natural_order(self):
        """Test equal scores keep the collection order."""
        items = [("alpha tool", ""), ("bravo tool", ""), ("gamma tool", "")]
        ranked = rank(items, "tool", self._fields)
        assert [item[0] for item, _ in ranked] == ["alpha tool", "bravo tool", "gamma tool"]

    def test_sorted_by_score_descending(self):
        """Test results come best first."""
        items = [("campfire", ""), ("firefox", ""), ("f-i-r-e", "")]
        ranked = rank(items, "fire", self._fields)
        scores = [score for _, score in ranked]
        assert scores == sorted(scores, reverse=True)
        assert ranked[0][0][0] == "firefox"

    def test_limit_applies_after_sorting(self):
        """Test the cap keeps the best results."""
        items = [(f"x{i} fire", "") for i in range(5)] + [("fire", "")]
        ranked = rank(items, "fire", self._fields, limit=1)
        assert ranked[0][0][0] == "fire"

    def test_query_case_is_ignored(self):
        """Test the query is lowercased before scoring."""
        items = [("Firefox", "")]
        assert rank(items, "FIRE", self._fields) == rank(items, "fire", self._fields)

    @pytest.mark.parametrize("query", ["f", "fi", "fire", "code", "e"])
    def test_ranking_is_idempotent(self, query):
        """Test repeated searches return identical ordered results."""
        items = [("Firefox", "Web"), ("Files", "Manager"), ("Code", "Editor"), ("Feh", "Image viewer")]
        assert rank(items, query, self._fields) == rank(items, query, self._fields)
