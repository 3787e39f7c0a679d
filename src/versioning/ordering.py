"""Orderings used to rank versions for auto-discovery.

An ordering is a strategy object handed to the resolver, so alternative
release-precedence rules can be swapped in without touching resolution.
Every ordering is total: two versions only tie when their names are identical.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Tuple

from packaging.version import InvalidVersion, Version as Pep440Version

from .models import Version

_TOKEN_RE = re.compile(r"\d+|[^\W\d_]+")


class VersionOrdering(ABC):
    """Sort strategy; first element of ``sorted`` is the preferred release."""

    name = "abstract"

    @abstractmethod
    def sort_key(self, version: Version) -> Any:
        """Key where larger sorts first."""

    def sorted(self, versions: Sequence[Version]) -> List[Version]:
        """Return a new list in preference order; ``versions`` is left untouched."""
        return sorted(versions, key=self.sort_key, reverse=True)


def _tokenize(name: str) -> Tuple[Tuple[int, Any], ...]:
    """Numeric-aware key for names that are not PEP 440 versions.

    Numbers outrank text at the same position, so "1.10" > "1.9" > "1.x".
    """
    tokens = []
    for token in _TOKEN_RE.findall(name):
        if token.isdigit():
            tokens.append((1, int(token)))
        else:
            tokens.append((0, token.casefold()))
    return tuple(tokens)


class PrecedenceOrdering(VersionOrdering):
    """Highest release precedence first.

    Names packaging accepts compare as PEP 440 versions and rank above all
    other names, which compare by numeric-aware tokens. Equal precedence
    ("1.0" vs "1.0.0") puts the longer name first, then the raw name decides.
    """

    name = "precedence"

    def sort_key(self, version: Version) -> Any:
        try:
            parsed: Any = (1, Pep440Version(version.name))
        except InvalidVersion:
            parsed = (0, _tokenize(version.name))
        return (parsed, len(version.name), version.name)


class NameLengthOrdering(VersionOrdering):
    """Longest name first, then reverse case-insensitive name order."""

    name = "name-length"

    def sort_key(self, version: Version) -> Any:
        return (len(version.name), version.name.casefold(), version.name)
