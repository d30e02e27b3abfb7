"""
The in-progress cupcake order and its pricing.

One OrderState per customer session. Each wizard step mutates it in place and
cancel/send calls reset_order(). The price is never stored incrementally; it
is recomputed from quantity and pickup date after every change.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from dateutil.relativedelta import relativedelta

from utils import get_local_now, format_money

PRICE_PER_CUPCAKE = 2.00
PRICE_FOR_SAME_DAY_PICKUP = 3.00
PICKUP_DAYS = 4

log = logging.getLogger("cupcake.order_state")


def format_pickup_date(day: datetime) -> str:
    # e.g. "Mon Oct 19"
    return f"{day:%a %b} {day.day}"


def pickup_options(now: datetime, days: int = PICKUP_DAYS) -> list[str]:
    """Return `days` consecutive pickup dates starting with `now` (same-day first)."""
    return [format_pickup_date(now + relativedelta(days=+i)) for i in range(days)]


class OrderState:
    def __init__(
        self,
        unit_price: float = PRICE_PER_CUPCAKE,
        same_day_surcharge: float = PRICE_FOR_SAME_DAY_PICKUP,
        pickup_days: int = PICKUP_DAYS,
        currency_symbol: str = "£",
        clock: Callable[[], datetime] = get_local_now,
    ):
        self.unit_price = unit_price
        self.same_day_surcharge = same_day_surcharge
        self.pickup_days = pickup_days
        self.currency_symbol = currency_symbol
        self._clock = clock

        self.quantity: int = 0
        self.flavor: str = ""
        self.pickup_date: str = ""
        self.price: float = 0.0
        self.pickup_options: list[str] = []
        self.reset_order()

    # --- mutations used by the wizard steps ---

    def set_quantity(self, n: int) -> None:
        # bool is an int subclass; True must not count as one cupcake
        if not isinstance(n, int) or isinstance(n, bool) or n <= 0:
            raise ValueError(f"Quantity must be a positive whole number, got {n!r}")
        self.quantity = n
        self._update_price()
        log.debug("quantity=%s price=%s", self.quantity, self.price)

    def set_flavor(self, name: str) -> None:
        self.flavor = name
        log.debug("flavor=%s", name)

    def set_date(self, date: str) -> None:
        if date not in self.pickup_options:
            raise ValueError(f"Pickup date {date!r} is not one of {self.pickup_options}")
        self.pickup_date = date
        self._update_price()
        log.debug("pickup_date=%s price=%s", self.pickup_date, self.price)

    def reset_order(self) -> None:
        self.quantity = 0
        self.flavor = ""
        self.pickup_date = ""
        self.pickup_options = pickup_options(self._clock(), self.pickup_days)
        self._update_price()
        log.info("Order reset; pickup options %s", self.pickup_options)

    # --- derived reads ---

    @property
    def display_price(self) -> str:
        return format_money(self.price, self.currency_symbol)

    @property
    def is_same_day(self) -> bool:
        return bool(self.pickup_options) and self.pickup_date == self.pickup_options[0]

    def summary(self) -> dict:
        return {
            "quantity": self.quantity,
            "flavor": self.flavor,
            "pickup_date": self.pickup_date,
            "price": self.price,
            "display_price": self.display_price,
        }

    def _update_price(self) -> None:
        price = self.quantity * self.unit_price
        if self.is_same_day:
            price += self.same_day_surcharge
        self.price = round(price, 2)
