"""Resolve the release from the current development version."""

from typing import Iterable, Optional

from ..models import ResolutionHints, Version, VersionSet
from ..parser import compose_release_name, find_version
from .base import ResolutionStrategy


class DevelopmentVersionStrategy(ResolutionStrategy):
    """Match the release form of the development version, e.g. "2.0-dev" -> "2.0"."""

    def __init__(self, prefix: str = "", qualifiers: Optional[Iterable[str]] = None):
        self.prefix = prefix
        self.qualifiers = list(qualifiers) if qualifiers is not None else None

    @property
    def name(self) -> str:
        return "development_version"

    def find(self, versions: VersionSet, hints: ResolutionHints) -> Optional[Version]:
        if not hints.development_version:
            return None
        candidate = compose_release_name(hints.development_version, self.qualifiers, self.prefix)
        return find_version(versions, candidate)
