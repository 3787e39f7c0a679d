"""Runtime configuration for jira-release.

Merges CLI arguments, environment variables and an optional YAML config
file into ReleaseSettings. Precedence: CLI > environment > config file >
defaults. Missing required values raise InvalidInputError.
"""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

import yaml

from constants import Constants, Orderings
from versioning.models import InvalidInputError, ResolutionHints
from versioning.ordering import NameLengthOrdering, PrecedenceOrdering, VersionOrdering

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReleaseSettings:
    """Everything one jira-release invocation needs."""
    jira_url: str
    project_key: str
    hints: ResolutionHints
    username: Optional[str] = None
    token: Optional[str] = None
    version_prefix: str = ""
    ordering: str = Orderings.PRECEDENCE.value
    verify: bool = True


def load_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Load the ``jira`` section of a YAML/JSON config file.

    A file without a ``jira`` key is used as the section itself.

    Raises:
        InvalidInputError: if the file is missing or not a mapping
    """
    if not config_path:
        return {}
    if not os.path.isfile(config_path):
        raise InvalidInputError(f"Config file not found: {config_path}")
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise InvalidInputError(f"Failed to parse config {config_path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInputError(f"Config {config_path} must contain a mapping")
    section = data.get("jira", data)
    if not isinstance(section, dict):
        raise InvalidInputError(f"'jira' section of {config_path} must be a mapping")
    return section


def read_pom_version(pom_path: str) -> str:
    """Return the project version declared in a Maven POM.

    Uses ``project/version`` and falls back to ``project/parent/version``.

    Raises:
        InvalidInputError: if the file is unreadable or declares no version
    """
    try:
        tree = ET.parse(pom_path)
    except (OSError, ET.ParseError) as exc:
        raise InvalidInputError(f"Cannot read {pom_path}: {exc}") from exc
    root = tree.getroot()
    ns = ""
    if root.tag.startswith("{"):
        ns = root.tag[:root.tag.index("}") + 1]
    for path in (f"{ns}version", f"{ns}parent/{ns}version"):
        node = root.find(path)
        if node is not None and node.text and node.text.strip():
            return node.text.strip()
    raise InvalidInputError(f"No project version declared in {pom_path}")


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _first(*values: Any) -> Any:
    for value in values:
        if value is not None and value != "":
            return value
    return None


def resolve_project_version(args: Any, file_cfg: Mapping[str, Any]) -> Optional[str]:
    """Project version from the CLI, the config file or the POM.

    Only an explicitly named POM is an error when unreadable; a missing
    ./pom.xml just means there is no project version.
    """
    explicit = _first(getattr(args, "PROJECT_VERSION", None), file_cfg.get("project_version"))
    if explicit is not None:
        return str(explicit)
    pom = _first(getattr(args, "POM", None), file_cfg.get("pom"))
    if pom is not None:
        return read_pom_version(str(pom))
    if os.path.isfile(Constants.POM_XML_FILE):
        return read_pom_version(Constants.POM_XML_FILE)
    return None


def build_settings(args: Any, environ: Optional[Mapping[str, str]] = None) -> ReleaseSettings:
    """Merge CLI args, environment and config file into ReleaseSettings.

    Raises:
        InvalidInputError: on missing Jira URL, project key or versions
    """
    env = os.environ if environ is None else environ
    file_cfg = load_config_file(getattr(args, "CONFIG", None))

    jira_url = _first(getattr(args, "JIRA_URL", None), env.get(Constants.ENV_JIRA_URL), file_cfg.get("url"))
    if not jira_url:
        raise InvalidInputError("Jira URL is required (--jira-url or $JIRA_URL)")
    project_key = _first(
        getattr(args, "PROJECT_KEY", None),
        env.get(Constants.ENV_JIRA_PROJECT_KEY),
        file_cfg.get("project_key"),
    )
    if not project_key:
        raise InvalidInputError("Jira project key is required (--project-key or $JIRA_PROJECT_KEY)")

    username = _first(getattr(args, "USERNAME", None), env.get(Constants.ENV_JIRA_USERNAME), file_cfg.get("username"))
    token = _first(env.get(Constants.ENV_JIRA_TOKEN))

    project_version = resolve_project_version(args, file_cfg)
    development_version = _first(
        getattr(args, "DEVELOPMENT_VERSION", None), file_cfg.get("development_version"), project_version
    )
    release_version = _first(
        getattr(args, "RELEASE_VERSION", None), file_cfg.get("release_version"), project_version
    )
    if development_version is None and release_version is None:
        raise InvalidInputError(
            "No project version: pass --project-version, --pom, or the development/release versions"
        )

    auto_discover = _first(getattr(args, "AUTO_DISCOVER", None), file_cfg.get("auto_discover_latest_release"))
    hints = ResolutionHints(
        development_version=str(development_version or ""),
        release_version=str(release_version or ""),
        auto_discover_latest_release=True if auto_discover is None else _to_bool(auto_discover),
    )

    ordering = _first(getattr(args, "ORDERING", None), file_cfg.get("ordering"), Orderings.PRECEDENCE.value)
    if ordering not in Constants.SUPPORTED_ORDERINGS:
        raise InvalidInputError(f"Unknown ordering '{ordering}'")

    settings = ReleaseSettings(
        jira_url=str(jira_url),
        project_key=str(project_key),
        hints=hints,
        username=username,
        token=token,
        version_prefix=str(_first(getattr(args, "VERSION_PREFIX", None), file_cfg.get("version_prefix")) or ""),
        ordering=str(ordering),
        verify=not getattr(args, "INSECURE", False),
    )
    logger.debug(
        "Settings: project=%s development=%s release=%s auto_discover=%s ordering=%s",
        settings.project_key,
        hints.development_version,
        hints.release_version,
        hints.auto_discover_latest_release,
        settings.ordering,
    )
    return settings


def make_ordering(name: str) -> VersionOrdering:
    """Instantiate the ordering registered under ``name``."""
    if name == Orderings.NAME_LENGTH.value:
        return NameLengthOrdering()
    if name == Orderings.PRECEDENCE.value:
        return PrecedenceOrdering()
    raise InvalidInputError(f"Unknown ordering '{name}'")
