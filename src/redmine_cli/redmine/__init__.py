"""Redmine REST API wrapper used by the CLI commands."""

from redmine_cli.redmine.client import RedmineClient

__all__ = ["RedmineClient"]
