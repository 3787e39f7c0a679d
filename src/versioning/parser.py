"""Version name helpers: composing release names and case-insensitive lookup."""

import re
from typing import Iterable, Optional, Sequence

from constants import Constants
from .models import Version

# Trailing numeric counter some tools put after a dev qualifier, e.g. "1.0.dev3".
_DEV_COUNTER_RE = r"\d*"


def strip_development_qualifier(version: str, qualifiers: Optional[Iterable[str]] = None) -> str:
    """Remove a trailing development qualifier (case-insensitive).

    Only one qualifier is stripped; the first one in ``qualifiers`` that
    matches the end of the string wins.
    """
    s = version.strip()
    for qualifier in (qualifiers if qualifiers is not None else Constants.DEVELOPMENT_QUALIFIERS):
        m = re.search(re.escape(qualifier) + _DEV_COUNTER_RE + r"$", s, flags=re.IGNORECASE)
        if m:
            return s[:m.start()]
    return s


def compose_release_name(
    development_version: str,
    qualifiers: Optional[Iterable[str]] = None,
    prefix: str = "",
) -> str:
    """Return the Jira version name a development version will be released as.

    "2.0-dev" -> "2.0", "1.4-SNAPSHOT" with prefix "core-" -> "core-1.4".
    """
    return f"{prefix}{strip_development_qualifier(development_version, qualifiers)}"


def find_version(versions: Sequence[Version], name: Optional[str]) -> Optional[Version]:
    """First version whose name equals ``name`` ignoring case, in input order."""
    if not name:
        return None
    wanted = name.lower()
    for version in versions:
        if version.name.lower() == wanted:
            return version
    return None
