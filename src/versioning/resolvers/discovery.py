"""Auto-discovery of the latest unreleased version."""

from typing import Optional

from ..models import ResolutionHints, Version, VersionSet
from ..ordering import PrecedenceOrdering, VersionOrdering
from .base import ResolutionStrategy


class LatestUnreleasedStrategy(ResolutionStrategy):
    """Pick the first unreleased version according to ``ordering``.

    Only active when ``hints.auto_discover_latest_release`` is set. The
    snapshot is sorted into a copy; the caller's order is preserved.
    """

    def __init__(self, ordering: Optional[VersionOrdering] = None):
        self.ordering = ordering or PrecedenceOrdering()

    @property
    def name(self) -> str:
        return "auto_discovery"

    def find(self, versions: VersionSet, hints: ResolutionHints) -> Optional[Version]:
        if not hints.auto_discover_latest_release:
            return None
        for version in self.ordering.sorted(versions):
            if not version.released:
                return version
        return None
