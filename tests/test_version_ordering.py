"""Tests for auto-discovery orderings."""

import random

from versioning.models import Version
from versioning.ordering import NameLengthOrdering, PrecedenceOrdering


def _names(versions):
    return [v.name for v in versions]


class TestPrecedenceOrdering:
    """Highest precedence first, total and stable."""

    def test_numeric_aware(self):
        """1.10 outranks 1.9 and 1.2."""
        ordering = PrecedenceOrdering()
        versions = [Version("1.2"), Version("1.10"), Version("1.9")]
        assert _names(ordering.sorted(versions)) == ["1.10", "1.9", "1.2"]

    def test_prerelease_below_final(self):
        """A release candidate ranks below its final release."""
        ordering = PrecedenceOrdering()
        versions = [Version("2.0rc1"), Version("2.0"), Version("1.5")]
        assert _names(ordering.sorted(versions)) == ["2.0", "2.0rc1", "1.5"]

    def test_equal_precedence_longer_name_first(self):
        """1.0.0 and 1.0 are equal versions; the longer name wins the tie."""
        ordering = PrecedenceOrdering()
        assert _names(ordering.sorted([Version("1.0"), Version("1.0.0")])) == ["1.0.0", "1.0"]

    def test_non_pep440_names_rank_last(self):
        """Free-form names sort after parseable versions, numbers first."""
        ordering = PrecedenceOrdering()
        versions = [Version("Sprint 3"), Version("0.1"), Version("Sprint 12"), Version("Backlog")]
        assert _names(ordering.sorted(versions)) == ["0.1", "Sprint 12", "Sprint 3", "Backlog"]

    def test_total_for_case_variants(self):
        """Names equal ignoring case still get a fixed order."""
        ordering = PrecedenceOrdering()
        versions = [Version("Alpha"), Version("alpha")]
        assert ordering.sort_key(versions[0]) != ordering.sort_key(versions[1])
        assert _names(ordering.sorted(versions)) == _names(ordering.sorted(list(reversed(versions))))

    def test_deterministic_across_input_orders(self):
        """Sorting any permutation yields the same sequence."""
        ordering = PrecedenceOrdering()
        names = ["1.0", "1.0.0", "1.1", "1.2-beta", "2.0rc1", "Sprint 4", "v3", "1.10"]
        expected = _names(ordering.sorted([Version(n) for n in names]))
        rng = random.Random(7)
        for _ in range(10):
            shuffled = [Version(n) for n in names]
            rng.shuffle(shuffled)
            assert _names(ordering.sorted(shuffled)) == expected

    def test_input_not_reordered(self):
        """The caller's snapshot keeps its order."""
        versions = [Version("1.0"), Version("3.0"), Version("2.0")]
        PrecedenceOrdering().sorted(versions)
        assert _names(versions) == ["1.0", "3.0", "2.0"]


class TestNameLengthOrdering:
    """Longest name first, then reverse name order."""

    def test_longer_names_first(self):
        """Length dominates numeric value."""
        ordering = NameLengthOrdering()
        versions = [Version("9.0"), Version("1.0.1"), Version("2.0")]
        assert _names(ordering.sorted(versions)) == ["1.0.1", "9.0", "2.0"]

    def test_same_length_reverse_name(self):
        """Equal lengths fall back to descending case-insensitive name."""
        ordering = NameLengthOrdering()
        versions = [Version("1.1"), Version("1.3"), Version("1.2")]
        assert _names(ordering.sorted(versions)) == ["1.3", "1.2", "1.1"]
