"""Retry-until-valid prompting.

Each prompt pairs a question with a parse function.  The parse function
turns the raw line into a typed value or raises a recoverable
DomainException (ValidationError or EntityNotFoundError); the loop
reports the problem and asks again.

By default the loop never gives up.  ``PromptPolicy`` can bound the
number of attempts or name a token that cancels the whole session.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeVar

from orderentry.application.terminal import Terminal
from orderentry.domain.exceptions import (
    EntityNotFoundError,
    InvalidResponseError,
    RetriesExhaustedError,
    SessionCancelledError,
    ValidationError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

YES = "Y"
NO = "N"
_ANSWERS = {"Y": True, "YES": True, "N": False, "NO": False}


@dataclass(frozen=True)
class PromptPolicy:
    max_attempts: int | None = None
    cancel_token: str | None = None

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

    def is_cancel(self, raw: str) -> bool:
        if not self.cancel_token:
            return False
        return raw.strip().lower() == self.cancel_token.strip().lower()


UNBOUNDED = PromptPolicy()


def parse_yes_no(raw: str) -> bool:
    """Map Y/YES to True and N/NO to False, ignoring case and whitespace."""
    token = raw.strip().upper()
    if token not in _ANSWERS:
        raise InvalidResponseError("Please enter a valid response! (Y/N)")
    return _ANSWERS[token]


def prompt_until_valid(
    terminal: Terminal,
    prompt: str,
    parse: Callable[[str], T],
    policy: PromptPolicy = UNBOUNDED,
) -> T:
    attempts = 0
    while True:
        raw = terminal.ask(prompt)
        if policy.is_cancel(raw):
            logger.info("Session cancelled at prompt %r", prompt)
            raise SessionCancelledError("Order entry cancelled")
        attempts += 1
        try:
            return parse(raw)
        except (ValidationError, EntityNotFoundError) as exc:
            logger.warning("Rejected input %r: %s", raw, exc)
            terminal.say(str(exc))
            if policy.max_attempts is not None and attempts >= policy.max_attempts:
                raise RetriesExhaustedError(
                    f"No valid answer after {attempts} attempts"
                ) from exc


def ask_yes_no(
    terminal: Terminal,
    question: str,
    policy: PromptPolicy = UNBOUNDED,
) -> bool:
    return prompt_until_valid(terminal, f"{question} ({YES}/{NO})", parse_yes_no, policy)
