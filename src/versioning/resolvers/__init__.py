"""Strategies making up the version resolution chain."""

from .base import ResolutionStrategy
from .development import DevelopmentVersionStrategy
from .explicit import ReleaseVersionStrategy
from .discovery import LatestUnreleasedStrategy

__all__ = [
    "ResolutionStrategy",
    "DevelopmentVersionStrategy",
    "ReleaseVersionStrategy",
    "LatestUnreleasedStrategy",
]
