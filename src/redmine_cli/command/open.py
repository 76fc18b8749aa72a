"""``open`` command: show an issue in the default web browser."""

from __future__ import annotations

import webbrowser
from collections.abc import Sequence

from redmine_cli.command.base import Argument
from redmine_cli.command.redmine import RedmineCommand
from redmine_cli.common.errors import RedmineCliError

NO_BROWSER_SUPPORT_MESSAGE = "Cannot open issue #%d in default browser."
SUCCESS_MESSAGE = "Opened issue #%d in default browser."


class Browser:
    """Thin wrapper around :mod:`webbrowser` so tests can replace it."""

    @property
    def is_supported(self) -> bool:
        try:
            webbrowser.get()
        except webbrowser.Error:
            return False
        return True

    def browse(self, url: str) -> bool:
        return webbrowser.open(url)


class OpenCommand(RedmineCommand):
    def __init__(self, browser: Browser | None = None, **kwargs):
        super().__init__(
            "open",
            "Open issue in default browser.",
            "",
            [Argument.number("id", "The ID of the issue to open.")],
            **kwargs,
        )
        self.browser = browser or Browser()

    def process(self, tokens: Sequence[str]) -> None:
        super().process(tokens)

        issue_id = self.arguments[0].value
        if not self.browser.is_supported:
            raise RedmineCliError(NO_BROWSER_SUPPORT_MESSAGE % issue_id)

        if not self.browser.browse(self.client.issue_url(issue_id)):
            raise RedmineCliError(NO_BROWSER_SUPPORT_MESSAGE % issue_id)

        self.println(SUCCESS_MESSAGE, issue_id)
