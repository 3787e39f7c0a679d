"""Base class for the steps of the version resolution chain."""

from abc import ABC, abstractmethod
from typing import Optional

from ..models import ResolutionHints, Version, VersionSet


class ResolutionStrategy(ABC):
    """One step of the fallback chain.

    A strategy either returns the matching version record or None so the
    next step gets a chance.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier reported in ResolutionResult.strategy."""

    @abstractmethod
    def find(self, versions: VersionSet, hints: ResolutionHints) -> Optional[Version]:
        """Return the version this step selects, or None.

        Args:
            versions: Snapshot of the project's versions (never reordered)
            hints: Resolution hints

        Returns:
            Matching Version or None
        """
