"""Jira REST access."""

from .client import JiraAuthError, JiraClient, JiraError

__all__ = ["JiraAuthError", "JiraClient", "JiraError"]
