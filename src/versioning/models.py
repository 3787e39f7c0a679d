"""Data models for version resolution and release."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol, Sequence

from constants import Constants


class InvalidInputError(ValueError):
    """Raised when the version set or resolution hints are absent or malformed."""


@dataclass
class Version:
    """Local snapshot of a Jira project version.

    ``released`` and ``release_date`` only change together, through
    ``mark_released``.
    """
    name: str
    released: bool = False
    release_date: Optional[date] = None
    id: Optional[str] = None
    project_id: Optional[int] = None
    archived: bool = False
    description: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Version":
        """Build a Version from a Jira REST version object."""
        if not isinstance(data, dict) or not data.get("name"):
            raise InvalidInputError(f"Malformed version record: {data!r}")
        raw_date = data.get("releaseDate")
        release_date = None
        if raw_date:
            try:
                release_date = datetime.strptime(raw_date, Constants.JIRA_DATE_FORMAT).date()
            except ValueError as exc:
                raise InvalidInputError(
                    f"Malformed releaseDate {raw_date!r} on version {data.get('name')!r}"
                ) from exc
        raw_id = data.get("id")
        return cls(
            name=str(data["name"]),
            released=bool(data.get("released", False)),
            release_date=release_date,
            id=str(raw_id) if raw_id is not None else None,
            project_id=data.get("projectId"),
            archived=bool(data.get("archived", False)),
            description=data.get("description"),
        )

    def mark_released(self, when: date) -> None:
        """Flip this version to released on ``when``."""
        if isinstance(when, datetime):
            when = when.date()
        self.released = True
        self.release_date = when

    def to_release_payload(self) -> Dict[str, Any]:
        """Jira REST body persisting the release state of this version."""
        payload: Dict[str, Any] = {"released": self.released}
        if self.release_date is not None:
            payload["releaseDate"] = self.release_date.strftime(Constants.JIRA_DATE_FORMAT)
        return payload


# Versions of one project as returned by Jira, in Jira's order.
VersionSet = Sequence[Version]


@dataclass(frozen=True)
class ResolutionHints:
    """Inputs steering which version name gets released."""
    development_version: str
    release_version: str
    auto_discover_latest_release: bool = True


@dataclass
class ResolutionResult:
    """Resolution outcome; ``resolved_name`` is None when nothing matched."""
    resolved_name: Optional[str]
    strategy: Optional[str]
    candidate_count: int
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.resolved_name is not None


class ReleaseOutcome(Enum):
    """What ReleaseExecutor did with the target name."""
    RELEASED = "released"
    ALREADY_RELEASED = "already_released"
    NOT_FOUND = "not_found"


@dataclass
class ReleaseResult:
    """Release outcome; ``version`` is the mutated record when released."""
    outcome: ReleaseOutcome
    target_name: str
    version: Optional[Version] = None

    @property
    def released(self) -> bool:
        return self.outcome is ReleaseOutcome.RELEASED


class VersionSource(Protocol):
    """Supplies the version snapshot of a project."""

    def fetch_versions(self, project_key: str) -> List[Version]:
        ...


class ReleaseSink(Protocol):
    """Commits a release mutation to the remote service."""

    def persist(self, version: Version) -> None:
        ...
