"""Releasing a resolved Jira version."""
