"""
Tests for the repeated-pattern detector.
"""
import itertools

import pytest

from passguard.analyzers.patterns import PatternDetector


@pytest.fixture
def detector():
    return PatternDetector()


class TestHasRepeatedPatterns:
    """Boolean detection of runs and repeated pairs."""

    @pytest.mark.parametrize(
        "password",
        ["aaab", "xaaay", "111", "abcabc", "abab", "1212", "aabaab", "Abc!Abc!"],
    )
    def test_detects_repeats(self, detector, password):
        assert detector.has_repeated_patterns(password) is True

    @pytest.mark.parametrize(
        "password",
        ["", "a", "ab", "aab", "abcdef", "xyxz", "Aa0@Bc1#De3%", "abcdefgh"],
    )
    def test_clean_passwords(self, detector, password):
        assert detector.has_repeated_patterns(password) is False

    def test_pair_may_repeat_in_final_two_characters(self, detector):
        # Source pair at the last searchable index, duplicate at the very end.
        assert detector.has_repeated_patterns("qrabab") is True

    def test_adjacent_pair_overlap_is_not_a_repeat(self, detector):
        # "xy" then "yx": overlapping pairs share a character but differ.
        assert detector.has_repeated_patterns("xyx") is False

    def test_case_sensitive(self, detector):
        assert detector.has_repeated_patterns("aAa") is False
        assert detector.has_repeated_patterns("abAB") is False


class TestFindRepeatedPatterns:
    """Evidence returned alongside the boolean."""

    def test_run_is_reported_with_position(self, detector):
        matches = detector.find_repeated_patterns("xx1111yz")
        runs = [m for m in matches if m.kind == "repeated_char"]
        assert len(runs) == 1
        assert runs[0].value == "1111"
        assert runs[0].position == 2

    def test_first_pair_is_reported(self, detector):
        matches = detector.find_repeated_patterns("abcabc")
        assert len(matches) == 1
        pair = matches[0]
        assert pair.kind == "repeated_pair"
        assert pair.value == "ab"
        assert pair.position == 0
        assert pair.repeat_position == 3

    def test_run_without_pair(self, detector):
        matches = detector.find_repeated_patterns("aaab")
        assert [m.kind for m in matches] == ["repeated_char"]

    def test_empty_list_when_clean(self, detector):
        assert detector.find_repeated_patterns("abcdef") == []

    @pytest.mark.parametrize("password", ["aaab", "abab", "Abcdefgh", "zz", ""])
    def test_agrees_with_boolean(self, detector, password):
        assert bool(detector.find_repeated_patterns(password)) == (
            detector.has_repeated_patterns(password)
        )


def _has_separated_pair(password):
    """Any two-character sequence that occurs again without overlapping."""
    last = len(password) - 2
    return any(
        password[i : i + 2] == password[j : j + 2]
        for i in range(last + 1)
        for j in range(i + 2, last + 1)
    )


class TestPairWindow:
    """The pair search covers every non-overlapping repeat, up to the last two characters."""

    @pytest.mark.parametrize("length", range(0, 9))
    def test_matches_exhaustive_search(self, detector, length):
        for chars in itertools.product("abc", repeat=length):
            password = "".join(chars)
            found = any(
                m.kind == "repeated_pair"
                for m in detector.find_repeated_patterns(password)
            )
            assert found == _has_separated_pair(password), password

    @pytest.mark.parametrize(
        "password, position, repeat_position",
        [("abab", 0, 2), ("qrabab", 2, 4), ("xyzwvxy", 0, 5)],
    )
    def test_repeat_in_final_two_characters(
        self, detector, password, position, repeat_position
    ):
        (pair,) = [
            m for m in detector.find_repeated_patterns(password)
            if m.kind == "repeated_pair"
        ]
        assert pair.position == position
        assert pair.repeat_position == repeat_position

    @pytest.mark.parametrize("password", ["xyzab", "abcdea", "wxyzy"])
    def test_overlapping_tail_is_not_a_repeat(self, detector, password):
        assert not detector.has_repeated_patterns(password)
