"""Compose fetch, resolution and release into one operation."""
from __future__ import annotations

import logging
from datetime import date
from typing import Callable, Optional

from versioning.models import (
    ReleaseOutcome,
    ReleaseResult,
    ReleaseSink,
    ResolutionHints,
    VersionSource,
)
from versioning.service import VersionResolver
from .executor import ReleaseExecutor

logger = logging.getLogger(__name__)


class VersionNotFoundError(Exception):
    """No version could be released.

    ``stage`` is "resolution" when no name was resolved and "release" when
    the resolved name has no matching record.
    """

    def __init__(self, message: str, stage: str, target_name: Optional[str] = None):
        super().__init__(message)
        self.stage = stage
        self.target_name = target_name


class ReleaseService:
    """Fetch a project's versions, resolve the target and release it."""

    def __init__(
        self,
        source: VersionSource,
        sink: ReleaseSink,
        resolver: Optional[VersionResolver] = None,
        executor: Optional[ReleaseExecutor] = None,
        clock: Optional[Callable[[], date]] = None,
    ):
        self.source = source
        self.sink = sink
        self.resolver = resolver or VersionResolver()
        self.executor = executor or ReleaseExecutor()
        self.clock = clock or date.today

    def resolve_and_release(self, project_key: str, hints: ResolutionHints) -> ReleaseResult:
        """Release the resolved version of ``project_key``.

        Returns:
            ReleaseResult with outcome RELEASED or ALREADY_RELEASED

        Raises:
            VersionNotFoundError: if nothing could be resolved or released
            InvalidInputError: on missing inputs
        """
        versions = self.source.fetch_versions(project_key)
        logger.debug("Fetched %d versions for project %s", len(versions), project_key)

        resolution = self.resolver.resolve(versions, hints)
        if not resolution.found:
            raise VersionNotFoundError("Could not find version to release.", stage="resolution")
        logger.info(
            "Releasing Version %s (matched by %s)",
            resolution.resolved_name,
            resolution.strategy,
        )

        result = self.executor.release(versions, resolution.resolved_name, self.clock(), self.sink)
        if result.outcome is ReleaseOutcome.NOT_FOUND:
            raise VersionNotFoundError(
                f"Version {resolution.resolved_name} does not exist in project {project_key}.",
                stage="release",
                target_name=resolution.resolved_name,
            )
        if result.outcome is ReleaseOutcome.ALREADY_RELEASED:
            logger.warning("Version %s is already released; nothing to do.", resolution.resolved_name)
        return result
