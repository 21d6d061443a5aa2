"""Abstract line-oriented input/output surface.

The session talks to the user only through this interface.  The CLI
provides a click-backed implementation; tests use a scripted fake.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Terminal(ABC):

    @abstractmethod
    def ask(self, prompt: str) -> str:
        """Show *prompt* and block until one line of input is available."""

    @abstractmethod
    def say(self, message: str = "") -> None:
        """Write one status line."""
