"""Application service: resolve the customer an order is placed for."""

from __future__ import annotations

import logging

from orderentry.application.prompting import UNBOUNDED, PromptPolicy, prompt_until_valid
from orderentry.application.terminal import Terminal
from orderentry.domain.exceptions import ValidationError
from orderentry.domain.model.catalog import CustomerDirectory
from orderentry.domain.model.customer import Customer

logger = logging.getLogger(__name__)


class CustomerSelector:

    def __init__(self, terminal: Terminal, policy: PromptPolicy = UNBOUNDED) -> None:
        self._terminal = terminal
        self._policy = policy

    def select_customer(self, directory: CustomerDirectory) -> Customer:
        """List the customers and ask until an ID matches one of them."""
        if len(directory) == 0:
            raise ValidationError("There are no customers to place an order for")

        for customer in directory.list_all():
            self._terminal.say(str(customer))

        customer = prompt_until_valid(
            self._terminal,
            "Please enter your customer ID",
            directory.get,
            self._policy,
        )
        logger.debug("Selected customer %s (%s)", customer.id, customer.name)
        return customer
