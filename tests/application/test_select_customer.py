"""Tests for the CustomerSelector use case."""

import pytest

from orderentry.application.prompting import PromptPolicy
from orderentry.application.select_customer import CustomerSelector
from orderentry.domain.exceptions import RetriesExhaustedError, ValidationError
from orderentry.domain.model.catalog import CustomerDirectory
from orderentry.domain.model.customer import Customer
from tests.fakes import ScriptedTerminal


def _directory() -> CustomerDirectory:
    return CustomerDirectory([
        Customer("1", "Smith", "Bob", "123 Street", "12345", "012-345-6789"),
        Customer("2", "Akhras", "Walid", "124 Street", "90621", "741-532-1111"),
    ])


class TestSelectCustomer:

    def test_selects_matching_customer(self):
        terminal = ScriptedTerminal(["2"])
        customer = CustomerSelector(terminal).select_customer(_directory())
        assert customer.name == "Walid Akhras"

    def test_lists_customers_before_prompting(self):
        terminal = ScriptedTerminal(["1"])
        CustomerSelector(terminal).select_customer(_directory())
        assert "Bob Smith" in terminal.output
        assert "Walid Akhras" in terminal.output

    def test_unknown_id_reprompts(self):
        terminal = ScriptedTerminal(["9", "abc", "1"])
        customer = CustomerSelector(terminal).select_customer(_directory())
        assert customer.id == "1"
        assert len(terminal.prompts) == 3
        assert "No customer with ID '9'" in terminal.output

    def test_bounded_retries(self):
        terminal = ScriptedTerminal(["9", "8"])
        selector = CustomerSelector(terminal, PromptPolicy(max_attempts=2))
        with pytest.raises(RetriesExhaustedError):
            selector.select_customer(_directory())

    def test_empty_directory_rejected(self):
        with pytest.raises(ValidationError, match="no customers"):
            CustomerSelector(ScriptedTerminal([])).select_customer(CustomerDirectory([]))
