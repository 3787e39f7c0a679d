"""Argument parsing functionality for jira-release."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="jira-release",
        description=(
            "Release the current project version in a Jira project"
        ),
        add_help=True,
    )

    parser.add_argument("-k", "--project-key",
                        dest="PROJECT_KEY",
                        help="Jira project key (default: $JIRA_PROJECT_KEY)",
                        action="store", type=str)
    parser.add_argument("-u", "--jira-url",
                        dest="JIRA_URL",
                        help="Jira base URL (default: $JIRA_URL)",
                        action="store", type=str)
    parser.add_argument("--username",
                        dest="USERNAME",
                        help="Jira user for basic auth; the token is read from $JIRA_TOKEN",
                        action="store", type=str)

    parser.add_argument("--development-version",
                        dest="DEVELOPMENT_VERSION",
                        help="Development version, released as its non-development form (default: project version)",
                        action="store", type=str)
    parser.add_argument("--release-version",
                        dest="RELEASE_VERSION",
                        help="Explicit version name to release (default: project version)",
                        action="store", type=str)
    parser.add_argument("--no-auto-discover",
                        dest="AUTO_DISCOVER",
                        help="Do not fall back to the latest unreleased version",
                        action="store_false",
                        default=None)
    parser.add_argument("--version-prefix",
                        dest="VERSION_PREFIX",
                        help="Prefix of Jira version names, e.g. 'core-'",
                        action="store", type=str)
    parser.add_argument("--ordering",
                        dest="ORDERING",
                        help="Ordering used to discover the latest release (default: precedence)",
                        action="store", type=str,
                        choices=Constants.SUPPORTED_ORDERINGS)

    version_group = parser.add_mutually_exclusive_group()
    version_group.add_argument("--project-version",
                               dest="PROJECT_VERSION",
                               help="Current project version",
                               action="store", type=str)
    version_group.add_argument("--pom",
                               dest="POM",
                               help="Read the project version from this pom.xml (default: ./pom.xml)",
                               action="store", type=str)

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to configuration file (YAML or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--insecure",
                        dest="INSECURE",
                        help="Skip TLS certificate verification.",
                        action="store_true")
    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level (default: $JIRA_RELEASE_LOG_LEVEL or INFO)",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default=None)
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)

    return parser.parse_args(argv)
