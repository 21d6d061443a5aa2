"""Application service: build a draft order one line at a time.

The builder walks the user through the following states, once per line:

    AWAITING_PRODUCT -> AWAITING_QUANTITY -> AWAITING_LINE_CONFIRMATION
        -> AWAITING_CONTINUE_DECISION -> AWAITING_PRODUCT | AWAITING_FINAL_CONFIRMATION

Stock is only taken from the catalog when the user confirms a line.
Declining a line leaves the order, its total and the stock exactly as
they were.  There is no limit on the number of lines; the loop ends only
when the user says they are done.
"""

from __future__ import annotations

import logging
from enum import Enum

from orderentry.application.prompting import (
    UNBOUNDED,
    PromptPolicy,
    ask_yes_no,
    prompt_until_valid,
)
from orderentry.application.terminal import Terminal
from orderentry.domain.exceptions import ValidationError
from orderentry.domain.model.catalog import Catalog
from orderentry.domain.model.order import Order
from orderentry.domain.model.product import Product
from orderentry.domain.model.value_objects import Money, Quantity

logger = logging.getLogger(__name__)


class BuilderState(Enum):
    AWAITING_PRODUCT = "AWAITING_PRODUCT"
    AWAITING_QUANTITY = "AWAITING_QUANTITY"
    AWAITING_LINE_CONFIRMATION = "AWAITING_LINE_CONFIRMATION"
    AWAITING_CONTINUE_DECISION = "AWAITING_CONTINUE_DECISION"
    AWAITING_FINAL_CONFIRMATION = "AWAITING_FINAL_CONFIRMATION"


class OrderBuilder:

    def __init__(self, terminal: Terminal, policy: PromptPolicy = UNBOUNDED) -> None:
        self._terminal = terminal
        self._policy = policy
        self.state = BuilderState.AWAITING_PRODUCT

    # --- Main loop ------------------------------------------------------------

    def build(self, order: Order, catalog: Catalog) -> Order:
        """Add lines to *order* until the user stops shopping."""
        self._move_to(BuilderState.AWAITING_PRODUCT)
        while True:
            product = self.select_product(catalog)
            quantity = self.select_quantity(product)
            price = self.price_line(product, quantity)
            self.confirm_line(order, product, quantity, price)
            if not self.continue_shopping():
                return order

    # --- Transitions ----------------------------------------------------------

    def select_product(self, catalog: Catalog) -> Product:
        self._terminal.say("Please enter the UPC of the product you would like to purchase.")
        for product in catalog.list_all():
            self._terminal.say(str(product))

        def parse(raw: str) -> Product:
            product = catalog.get(raw)
            if product.units_in_stock == 0:
                raise ValidationError(f"{product.name} is out of stock")
            return product

        product = prompt_until_valid(self._terminal, "UPC", parse, self._policy)
        self._terminal.say(str(product))
        self._move_to(BuilderState.AWAITING_QUANTITY)
        return product

    def select_quantity(self, product: Product) -> Quantity:
        def parse(raw: str) -> Quantity:
            quantity = Quantity.parse(raw)
            product.check_available(quantity)
            return quantity

        quantity = prompt_until_valid(
            self._terminal,
            "Please enter the quantity of this product you would like to purchase",
            parse,
            self._policy,
        )
        self._move_to(BuilderState.AWAITING_LINE_CONFIRMATION)
        return quantity

    @staticmethod
    def price_line(product: Product, quantity: Quantity) -> Money:
        return product.unit_list_price * quantity.value

    def confirm_line(
        self,
        order: Order,
        product: Product,
        quantity: Quantity,
        price: Money,
    ) -> bool:
        """Ask whether to add the priced line; add it and take the stock on yes."""
        self._terminal.say(f"Total price: {price}")
        accepted = ask_yes_no(self._terminal, "Add product?", self._policy)
        if accepted:
            order.add_line(product, quantity)
            logger.debug(
                "Added %s x %s; %s left in stock; order total %s",
                quantity, product.upc, product.units_in_stock, order.total,
            )
            self._terminal.say("Product added")
        else:
            self._terminal.say("Product not added")
        self._move_to(BuilderState.AWAITING_CONTINUE_DECISION)
        return accepted

    def continue_shopping(self) -> bool:
        more = ask_yes_no(self._terminal, "Add another product to the order?", self._policy)
        self._move_to(
            BuilderState.AWAITING_PRODUCT if more
            else BuilderState.AWAITING_FINAL_CONFIRMATION
        )
        return more

    # --- Internal helpers -----------------------------------------------------

    def _move_to(self, state: BuilderState) -> None:
        logger.debug("%s -> %s", self.state.value, state.value)
        self.state = state
