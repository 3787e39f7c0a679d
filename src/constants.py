"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    INPUT_ERROR = 1
    CONNECTION_ERROR = 2
    VERSION_NOT_FOUND = 3


class Orderings(Enum):
    """Version orderings selectable for auto-discovery.

    Args:
        Enum (string): Ordering names accepted on the command line.
    """

    PRECEDENCE = "precedence"
    NAME_LENGTH = "name-length"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    JIRA_API_BASE_PATH = "/rest/api/2"
    JIRA_PROJECT_VERSIONS_PATH = "/project/{key}/versions"
    JIRA_VERSION_PATH = "/version/{id}"
    JIRA_DATE_FORMAT = "%Y-%m-%d"

    ENV_JIRA_URL = "JIRA_URL"
    ENV_JIRA_PROJECT_KEY = "JIRA_PROJECT_KEY"
    ENV_JIRA_USERNAME = "JIRA_USERNAME"
    ENV_JIRA_TOKEN = "JIRA_TOKEN"
    ENV_LOG_LEVEL = "JIRA_RELEASE_LOG_LEVEL"

    SUPPORTED_ORDERINGS = [
        Orderings.PRECEDENCE.value,
        Orderings.NAME_LENGTH.value,
    ]
    DEVELOPMENT_QUALIFIERS = ["-SNAPSHOT", "-dev", ".dev"]
    POM_XML_FILE = "pom.xml"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3
