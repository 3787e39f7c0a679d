"""Version resolution: run the strategy chain over a version snapshot."""

import logging
from typing import List, Optional, Sequence

from common.logging_utils import extra_context, is_debug_enabled
from .models import InvalidInputError, ResolutionHints, ResolutionResult, VersionSet
from .ordering import VersionOrdering
from .resolvers import (
    DevelopmentVersionStrategy,
    LatestUnreleasedStrategy,
    ReleaseVersionStrategy,
    ResolutionStrategy,
)

logger = logging.getLogger(__name__)


def default_strategies(
    ordering: Optional[VersionOrdering] = None,
    prefix: str = "",
) -> List[ResolutionStrategy]:
    """The standard chain: development version, release version, auto-discovery."""
    return [
        DevelopmentVersionStrategy(prefix=prefix),
        ReleaseVersionStrategy(),
        LatestUnreleasedStrategy(ordering),
    ]


class VersionResolver:
    """Determine the single version name that should be released.

    Strategies are evaluated in order and the first match wins. "Nothing
    matched" is a regular ResolutionResult with ``resolved_name`` None.
    """

    def __init__(self, strategies: Optional[Sequence[ResolutionStrategy]] = None):
        self.strategies = list(strategies) if strategies is not None else default_strategies()

    def resolve(self, versions: Optional[VersionSet], hints: Optional[ResolutionHints]) -> ResolutionResult:
        """Resolve the release target.

        Args:
            versions: Snapshot of the project's versions
            hints: Resolution hints

        Returns:
            ResolutionResult naming the matched version (in Jira's casing)

        Raises:
            InvalidInputError: if ``versions`` or ``hints`` is missing
        """
        if versions is None:
            raise InvalidInputError("Version set is required")
        if hints is None:
            raise InvalidInputError("Resolution hints are required")

        for strategy in self.strategies:
            match = strategy.find(versions, hints)
            if is_debug_enabled(logger):
                logger.debug(
                    "Resolution step evaluated",
                    extra=extra_context(
                        event="decision",
                        component="resolver",
                        action=strategy.name,
                        outcome="match" if match is not None else "no_match",
                        count=len(versions),
                    )
                )
            if match is not None:
                return ResolutionResult(
                    resolved_name=match.name,
                    strategy=strategy.name,
                    candidate_count=len(versions),
                )

        return ResolutionResult(
            resolved_name=None,
            strategy=None,
            candidate_count=len(versions),
            error="Could not find version to release.",
        )
