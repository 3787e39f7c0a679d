"""Resolve the release from the explicitly configured release version."""

from typing import Optional

from ..models import ResolutionHints, Version, VersionSet
from ..parser import find_version
from .base import ResolutionStrategy


class ReleaseVersionStrategy(ResolutionStrategy):
    """Match ``hints.release_version`` as-is, ignoring case."""

    @property
    def name(self) -> str:
        return "release_version"

    def find(self, versions: VersionSet, hints: ResolutionHints) -> Optional[Version]:
        return find_version(versions, hints.release_version)
