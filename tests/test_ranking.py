"""Tests for closest-match selection and similarity sorting."""

from functools import cmp_to_key

import pytest

import fuzzyrank as fz
from fuzzyrank.ranking import EMPTY_CANDIDATES_MESSAGE

WORDS = ["length", "size", "help", "world"]


def constant(a, b):
    return 7


class TestClosestString:
    """Tests for closest_string and closest_string_simple."""

    def test_basic(self):
        assert fz.closest_string("hep", WORDS) == "help"

    def test_simple_variant(self):
        assert fz.closest_string_simple("hep", WORDS) == "help"

    def test_exact_match_wins(self):
        assert fz.closest_string("world", WORDS) == "world"

    def test_tie_goes_to_first(self):
        # "bat" and "cat" are both 1 edit from "hat"
        assert fz.closest_string("hat", ["bat", "cat"]) == "bat"
        assert fz.closest_string("hat", ["cat", "bat"]) == "cat"

    def test_case_insensitive_by_default(self):
        assert fz.closest_string("HELP", ["helper", "help"]) == "help"

    def test_case_sensitive(self):
        opts = fz.case_sensitive_closest_string_options()
        # "Help" is 1 edit from "help", "HELP" is 4
        assert fz.closest_string("help", ["HELP", "Help"], opts) == "Help"

    def test_returns_original_candidate_text(self):
        assert fz.closest_string("hello", ["WORLD", "HELLO"]) == "HELLO"

    def test_accepts_iterables(self):
        assert fz.closest_string("hep", iter(WORDS)) == "help"
        assert fz.closest_string("hep", tuple(WORDS)) == "help"

    def test_single_candidate(self):
        assert fz.closest_string("anything", ["only"]) == "only"

    def test_empty_candidates_raises(self):
        with pytest.raises(fz.StringMatchingError) as excinfo:
            fz.closest_string("hello", [])
        assert str(excinfo.value) == (
            "When using closest_string(), the possible_words array must contain at least one word"
        )
        assert excinfo.value.message == EMPTY_CANDIDATES_MESSAGE

    def test_empty_candidates_simple_raises(self):
        with pytest.raises(fz.StringMatchingError):
            fz.closest_string_simple("hello", [])

    def test_error_is_library_error(self):
        with pytest.raises(fz.FuzzyRankError):
            fz.closest_string("hello", [])

    def test_empty_query(self):
        # Distance from "" is the candidate length; shortest wins
        assert fz.closest_string("", ["abc", "a", "ab"]) == "a"


class TestClosestStrings:
    """Tests for closest_strings (top-N)."""

    def test_basic(self):
        assert fz.closest_strings("hep", WORDS, 2) == ["help", "size"]

    def test_tie_preserves_input_order(self):
        opts = fz.MatchingOptions(compare_fn=constant)
        assert fz.closest_strings("ab", ["ab", "ba"], 2, opts) == ["ab", "ba"]

    def test_equal_distance_stable(self):
        # "aa" and "bb" are 1 edit from "ab", "ba" is 2
        assert fz.closest_strings("ab", ["ba", "aa", "bb"], 3) == ["aa", "bb", "ba"]

    def test_n_saturation(self):
        result = fz.closest_strings("hep", ["world", "help"], 10)
        assert result == ["help", "world"]

    def test_n_zero_and_negative(self):
        assert fz.closest_strings("hep", WORDS, 0) == []
        assert fz.closest_strings("hep", WORDS, -1) == []

    def test_empty_candidates(self):
        assert fz.closest_strings("hello", [], 3) == []

    def test_duplicates_kept(self):
        assert fz.closest_strings("help", ["help", "world", "help"], 3) == ["help", "help", "world"]


class TestSortBySimilarity:
    """Tests for sort_by_similarity."""

    def test_end_to_end(self):
        result = fz.sort_by_similarity(["world", "help", "hello", "test"], "hep")
        assert result[0] == "help"
        assert sorted(result) == sorted(["world", "help", "hello", "test"])

    def test_full_order(self):
        assert fz.sort_by_similarity(["abc", "a", "ab", ""], "") == ["", "a", "ab", "abc"]

    def test_empty(self):
        assert fz.sort_by_similarity([], "target") == []

    def test_custom_constant_comparator_keeps_input_order(self):
        opts = fz.MatchingOptions(compare_fn=constant)
        candidates = ["zzz", "hep", "help", "a"]
        assert fz.sort_by_similarity(candidates, "hep", opts) == candidates

    def test_does_not_mutate_input(self):
        candidates = ["world", "help"]
        fz.sort_by_similarity(candidates, "hep")
        assert candidates == ["world", "help"]

    def test_equivalent_to_closest_strings_with_full_n(self):
        candidates = ["world", "help", "hello", "test", "hep"]
        assert fz.sort_by_similarity(candidates, "hep") == fz.closest_strings(
            "hep", candidates, len(candidates)
        )


class TestCompareSimilarity:
    """Tests for the sort comparator built by compare_similarity."""

    def test_sign(self):
        cmp = fz.compare_similarity("hep")
        assert cmp("help", "world") < 0
        assert cmp("world", "help") > 0
        assert cmp("help", "help") == 0

    def test_sorting_with_cmp_to_key(self):
        cmp = fz.compare_similarity_simple("hep")
        ordered = sorted(["world", "help", "hello", "test"], key=cmp_to_key(cmp))
        assert ordered[0] == "help"

    def test_value_is_distance_difference(self):
        cmp = fz.compare_similarity("kitten")
        assert cmp("sitting", "kitten") == 3

    def test_case_sensitivity_options(self):
        cmp_ci = fz.compare_similarity("abc", fz.default_compare_similarity_options())
        cmp_cs = fz.compare_similarity("abc", fz.case_sensitive_compare_similarity_options())
        assert cmp_ci("ABC", "abc") == 0
        assert cmp_cs("ABC", "abc") == 3


class TestRank:
    """Tests for rank, the distance-carrying ranking."""

    def test_results_carry_distance_and_index(self):
        results = fz.rank("hep", WORDS)
        assert results[0] == fz.MatchResult("help", 1, 2)
        assert [r.text for r in results] == fz.sort_by_similarity(WORDS, "hep")
        assert [r.distance for r in results] == sorted(r.distance for r in results)

    def test_limit(self):
        assert len(fz.rank("hep", WORDS, limit=2)) == 2
        assert fz.rank("hep", WORDS, limit=0) == []
        assert fz.rank("hep", WORDS, limit=-5) == []

    def test_workers_same_result(self):
        candidates = [f"word{i}" for i in range(50)] + ["hep"]
        assert fz.rank("hep", candidates, workers=4) == fz.rank("hep", candidates)

    def test_invalid_workers(self):
        with pytest.raises(fz.ValidationError):
            fz.rank("hep", WORDS, workers=0)

    def test_builds_comparator_once(self, monkeypatch):
        import fuzzyrank.ranking as ranking

        calls = []
        real_build = ranking.build_comparator

        def counting_build(options=None):
            calls.append(options)
            return real_build(options)

        monkeypatch.setattr(ranking, "build_comparator", counting_build)
        ranking.sort_by_similarity(["a", "b", "c", "d"], "a")
        ranking.closest_string("a", ["a", "b", "c", "d"])
        assert len(calls) == 2
