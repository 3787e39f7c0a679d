"""Tests for ReleaseExecutor."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from release.executor import ReleaseExecutor
from versioning.models import InvalidInputError, ReleaseOutcome, Version

TODAY = date(2026, 10, 18)


@pytest.fixture
def sink():
    """Release sink recording persist calls."""
    return MagicMock()


class TestReleaseExecutor:
    """Release exactly one unreleased match per call."""

    def test_releases_matching_version(self, sink):
        """The match is flipped, dated and persisted once."""
        versions = [Version("1.0", released=True), Version("1.1", id="11"), Version("1.2", id="12")]
        result = ReleaseExecutor().release(versions, "1.2", TODAY, sink)

        assert result.outcome is ReleaseOutcome.RELEASED
        assert result.released
        assert result.version is versions[2]
        assert versions[2].released is True
        assert versions[2].release_date == TODAY
        sink.persist.assert_called_once_with(versions[2])
        assert versions[1].released is False
        assert versions[1].release_date is None

    def test_case_insensitive(self, sink):
        """Target name matches ignoring case."""
        versions = [Version("Release-A")]
        result = ReleaseExecutor().release(versions, "release-a", TODAY, sink)
        assert result.released
        assert versions[0].released

    def test_second_call_is_noop(self, sink):
        """Releasing twice persists once; the second call reports already released."""
        versions = [Version("2.0")]
        executor = ReleaseExecutor()
        first = executor.release(versions, "2.0", TODAY, sink)
        second = executor.release(versions, "2.0", date(2026, 10, 19), sink)

        assert first.released
        assert second.outcome is ReleaseOutcome.ALREADY_RELEASED
        assert not second.released
        assert sink.persist.call_count == 1
        assert versions[0].release_date == TODAY

    def test_not_found(self, sink):
        """No name match: nothing is touched or persisted."""
        versions = [Version("1.0"), Version("1.1")]
        result = ReleaseExecutor().release(versions, "3.0", TODAY, sink)
        assert result.outcome is ReleaseOutcome.NOT_FOUND
        assert result.version is None
        assert not any(v.released for v in versions)
        sink.persist.assert_not_called()

    def test_only_one_record_mutated(self, sink):
        """Duplicate names: only the first unreleased one changes."""
        versions = [Version("v1", released=True), Version("V1"), Version("v1")]
        ReleaseExecutor().release(versions, "v1", TODAY, sink)
        assert [v.released for v in versions] == [True, True, False]
        assert sink.persist.call_count == 1

    def test_sink_failure_propagates(self, sink):
        """A failing persist call is not swallowed."""
        sink.persist.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            ReleaseExecutor().release([Version("1.0")], "1.0", TODAY, sink)

    def test_case_rule_is_per_character(self, sink):
        """Names differing only by a multi-letter case mapping do not match."""
        versions = [Version("STRASSE")]
        result = ReleaseExecutor().release(versions, "straße", TODAY, sink)
        assert result.outcome is ReleaseOutcome.NOT_FOUND
        assert versions[0].released is False
        sink.persist.assert_not_called()

    def test_missing_inputs(self, sink):
        """Absent versions or target name fail fast."""
        with pytest.raises(InvalidInputError):
            ReleaseExecutor().release(None, "1.0", TODAY, sink)
        with pytest.raises(InvalidInputError):
            ReleaseExecutor().release([Version("1.0")], None, TODAY, sink)
        sink.persist.assert_not_called()
