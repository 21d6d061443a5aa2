"""click-backed Terminal: prompts on stdin, status lines on stdout."""

from __future__ import annotations

import click

from orderentry.application.terminal import Terminal


class ClickTerminal(Terminal):

    def ask(self, prompt: str) -> str:
        # An empty default lets blank lines reach the caller's validation
        # instead of click re-prompting on its own.
        return click.prompt(prompt, default="", show_default=False)

    def say(self, message: str = "") -> None:
        click.echo(message)
