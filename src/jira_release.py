"""jira-release - mark the current project version as released in Jira.

    Returns:
        int: Exit code
"""
import logging
import os
import sys

from constants import Constants, ExitCodes
from common.logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
from args import parse_args
from cli_config import build_settings, make_ordering
from jira_rest.client import JiraClient, JiraError
from release.service import ReleaseService, VersionNotFoundError
from versioning.models import InvalidInputError
from versioning.service import VersionResolver, default_strategies

logger = logging.getLogger(__name__)


def _setup_logging(args) -> None:
    """Configure logging based on CLI arguments."""
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()
    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        add_file_handler(log_file)
        logger.info("Logging to file: %s", log_file)


def run(args) -> ExitCodes:
    """Resolve and release the version described by ``args``.

    Returns:
        ExitCodes: outcome of the run
    """
    try:
        settings = build_settings(args)
        client = JiraClient(
            settings.jira_url,
            username=settings.username,
            token=settings.token,
            verify=settings.verify,
        )
        resolver = VersionResolver(
            default_strategies(make_ordering(settings.ordering), prefix=settings.version_prefix)
        )
        service = ReleaseService(client, client, resolver=resolver)
        result = service.resolve_and_release(settings.project_key, settings.hints)
    except InvalidInputError as exc:
        logger.error("Invalid input: %s", exc)
        return ExitCodes.INPUT_ERROR
    except VersionNotFoundError as exc:
        logger.error("%s", exc)
        return ExitCodes.VERSION_NOT_FOUND
    except JiraError as exc:
        logger.error("Jira request failed: %s", exc)
        return ExitCodes.CONNECTION_ERROR

    if is_debug_enabled(logger):
        logger.debug(
            "Release finished",
            extra=extra_context(
                event="function_exit",
                component="cli",
                action="run",
                outcome=result.outcome.value,
                target=result.target_name,
            )
        )
    return ExitCodes.SUCCESS


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)
    sys.exit(run(args).value)


if __name__ == "__main__":
    main()
