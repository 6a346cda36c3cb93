"""
Cupcake ordering — order form state, pricing, and checkout.

The order is posted as JSON; the server echoes it back and the echoed order
drives the confirmation message.  A failed checkout is reported through the
confirmation title/message, never raised.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from appsui.config import AppConfig
from appsui.exceptions import FetchError
from appsui.net.orders import submit_order

__all__ = ["OrderData", "CheckoutViewModel", "CAKE_TYPES"]

logger = logging.getLogger(__name__)

CAKE_TYPES = ["Vanilla", "Strawberry", "Chocolate", "Rainbow"]

# Python attribute → JSON key; special_request_enabled is form-only state
_JSON_KEYS = {
    "type":           "type",
    "quantity":       "quantity",
    "extra_frosting": "extraFrosting",
    "add_sprinkles":  "addSprinkles",
    "name":           "name",
    "street_address": "streetAddress",
    "city":           "city",
    "zip":            "zip",
}


@dataclass
class OrderData:
    type:           int  = 0
    quantity:       int  = 3
    extra_frosting: bool = False
    add_sprinkles:  bool = False
    name:           str  = ""
    street_address: str  = ""
    city:           str  = ""
    zip:            str  = ""
    _special_request_enabled: bool = False

    @property
    def special_request_enabled(self) -> bool:
        return self._special_request_enabled

    @special_request_enabled.setter
    def special_request_enabled(self, enabled: bool) -> None:
        """Turning special requests off also clears both extras."""
        self._special_request_enabled = enabled
        if not enabled:
            self.extra_frosting = False
            self.add_sprinkles = False

    @property
    def cake_type(self) -> str:
        return CAKE_TYPES[self.type]

    @property
    def has_valid_address(self) -> bool:
        """False if any address field is empty or only whitespace."""
        return all(
            value.strip()
            for value in (self.name, self.street_address, self.city, self.zip)
        )

    @property
    def cost(self) -> float:
        # $2 per cake
        cost = self.quantity * 2.0
        # complicated cakes cost more
        cost += self.type / 2
        # $1/cake for extra frosting
        if self.extra_frosting:
            cost += self.quantity
        # $0.50/cake for sprinkles
        if self.add_sprinkles:
            cost += self.quantity / 2
        return cost

    def to_dict(self) -> dict:
        return {key: getattr(self, attr) for attr, key in _JSON_KEYS.items()}

    @classmethod
    def from_dict(cls, data: dict) -> "OrderData":
        order = cls(**{attr: data[key] for attr, key in _JSON_KEYS.items()})
        if not 0 <= order.type < len(CAKE_TYPES):
            raise ValueError(f"Unknown cake type index {order.type}")
        return order


class CheckoutViewModel:
    """
    Attributes
    ──────────
    order                 — the OrderData being edited
    confirmation_title    — set after place_order()
    confirmation_message  — set after place_order()
    showing_confirmation  — True once a result is ready to show
    """

    def __init__(
        self,
        order: Optional[OrderData] = None,
        config: Optional[AppConfig] = None,
        submit: Optional[Callable[[dict], dict]] = None,
    ) -> None:
        self.config = config or AppConfig.from_env()
        self.order = order or OrderData()
        self.confirmation_title = ""
        self.confirmation_message = ""
        self.showing_confirmation = False
        self._submit = submit or self._default_submit

    def _default_submit(self, payload: dict) -> dict:
        return submit_order(payload, url=self.config.orders_url, timeout=self.config.http_timeout)

    def place_order(self) -> bool:
        """Post the order once; returns True on success."""
        try:
            echoed = OrderData.from_dict(self._submit(self.order.to_dict()))
        except (FetchError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Checkout failed: %s", exc)
            self.confirmation_title = "Sorry :("
            self.confirmation_message = "Couldn't post your order, something went wrong!"
            self.showing_confirmation = True
            return False
        self.confirmation_title = "Thank you!"
        self.confirmation_message = (
            f"Your order for {echoed.quantity}x {echoed.cake_type.lower()} cupcakes is on its way!"
        )
        self.showing_confirmation = True
        return True
