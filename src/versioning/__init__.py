"""Version resolution for Jira releases."""
