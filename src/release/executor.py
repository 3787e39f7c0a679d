"""Flip a resolved version to released and persist the change."""
from __future__ import annotations

import logging
from datetime import date

from common.logging_utils import extra_context, is_debug_enabled
from versioning.models import (
    InvalidInputError,
    ReleaseOutcome,
    ReleaseResult,
    ReleaseSink,
    VersionSet,
)

logger = logging.getLogger(__name__)


class ReleaseExecutor:
    """Release exactly one unreleased version per call."""

    def release(
        self,
        versions: VersionSet,
        target_name: str,
        now: date,
        sink: ReleaseSink,
    ) -> ReleaseResult:
        """Mark the first unreleased version named ``target_name`` as released.

        Matching ignores case and follows input order. The record is mutated
        and handed to ``sink.persist``; an exception from the sink propagates
        and the operation counts as failed.

        Args:
            versions: Snapshot of the project's versions
            target_name: Version name returned by resolution
            now: Release date to record
            sink: Where the mutation is committed

        Returns:
            ReleaseResult with outcome RELEASED, ALREADY_RELEASED or NOT_FOUND

        Raises:
            InvalidInputError: if ``versions`` or ``target_name`` is missing
        """
        if versions is None:
            raise InvalidInputError("Version set is required")
        if not target_name:
            raise InvalidInputError("Target version name is required")

        wanted = target_name.lower()
        already_released = None
        for version in versions:
            if version.name.lower() != wanted:
                continue
            if version.released:
                if already_released is None:
                    already_released = version
                continue
            version.mark_released(now)
            sink.persist(version)
            logger.info("Version %s was released in JIRA.", version.name)
            return ReleaseResult(ReleaseOutcome.RELEASED, target_name, version)

        if already_released is not None:
            if is_debug_enabled(logger):
                logger.debug(
                    "Version already released",
                    extra=extra_context(
                        event="decision",
                        component="release_executor",
                        action="release",
                        outcome="already_released",
                        target=target_name,
                    )
                )
            return ReleaseResult(ReleaseOutcome.ALREADY_RELEASED, target_name, already_released)
        return ReleaseResult(ReleaseOutcome.NOT_FOUND, target_name)
