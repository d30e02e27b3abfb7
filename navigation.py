from __future__ import annotations

from enum import Enum


class CupcakeScreen(str, Enum):
    START = "Start"
    FLAVOR = "Flavor"
    PICKUP = "Pickup"
    SUMMARY = "Summary"


class Navigator:
    """Back stack for the wizard. Start is always at the bottom."""

    def __init__(self) -> None:
        self.back_stack: list[CupcakeScreen] = [CupcakeScreen.START]

    @property
    def current(self) -> CupcakeScreen:
        return self.back_stack[-1]

    @property
    def can_navigate_back(self) -> bool:
        return len(self.back_stack) > 1

    def navigate(self, screen: CupcakeScreen) -> None:
        self.back_stack.append(CupcakeScreen(screen))

    def navigate_up(self) -> None:
        if self.can_navigate_back:
            self.back_stack.pop()

    def pop_to_start(self) -> None:
        del self.back_stack[1:]


def cancel_order_and_navigate_to_start(order, nav: Navigator) -> None:
    order.reset_order()
    nav.pop_to_start()
