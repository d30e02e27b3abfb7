from datetime import datetime

import pytest
from dateutil import tz

from order_state import OrderState, pickup_options


def test_pickup_options_start_today_one_day_apart(monday):
    assert pickup_options(monday, 4) == ["Mon Oct 19", "Tue Oct 20", "Wed Oct 21", "Thu Oct 22"]


def test_pickup_options_cross_month_end():
    friday = datetime(2026, 10, 30, 18, 0, tzinfo=tz.gettz("Europe/London"))
    assert pickup_options(friday, 4) == ["Fri Oct 30", "Sat Oct 31", "Sun Nov 1", "Mon Nov 2"]


def test_new_order_is_empty(order):
    assert order.quantity == 0
    assert order.flavor == ""
    assert order.pickup_date == ""
    assert order.price == 0
    assert order.display_price == "£0.00"
    assert len(order.pickup_options) == 4


@pytest.mark.parametrize("n", [1, 6, 12, 7])
def test_price_without_same_day_pickup(order, n):
    order.set_quantity(n)
    order.set_date(order.pickup_options[1])
    assert order.price == pytest.approx(n * 2.00)


@pytest.mark.parametrize("n", [1, 6, 12])
def test_price_with_same_day_pickup(order, n):
    order.set_quantity(n)
    order.set_date(order.pickup_options[0])
    assert order.price == pytest.approx(n * 2.00 + 3.00)


def test_price_tracks_changes_in_either_order(order):
    order.set_date(order.pickup_options[0])
    assert order.price == pytest.approx(3.00)
    order.set_quantity(12)
    assert order.price == pytest.approx(27.00)
    order.set_quantity(1)
    assert order.price == pytest.approx(5.00)


def test_six_cupcakes_today_then_later(order):
    order.set_quantity(6)
    order.set_date(order.pickup_options[0])
    assert order.price == pytest.approx(15.00)
    assert order.display_price == "£15.00"

    order.set_date(order.pickup_options[2])
    assert order.price == pytest.approx(12.00)
    assert order.display_price == "£12.00"


def test_flavor_does_not_touch_price(order):
    order.set_quantity(6)
    order.set_flavor("Coffee")
    assert order.flavor == "Coffee"
    assert order.price == pytest.approx(12.00)


@pytest.mark.parametrize("n", [0, -1])
def test_set_quantity_rejects_non_positive(order, n):
    order.set_quantity(6)
    with pytest.raises(ValueError):
        order.set_quantity(n)
    assert order.quantity == 6
    assert order.price == pytest.approx(12.00)


@pytest.mark.parametrize("n", [2.7, "6", True, 6.0])
def test_set_quantity_rejects_non_integers(order, n):
    order.set_quantity(6)
    with pytest.raises(ValueError):
        order.set_quantity(n)
    assert order.quantity == 6
    assert type(order.quantity) is int
    assert order.price == pytest.approx(12.00)


def test_set_date_rejects_unknown_date(order):
    order.set_quantity(1)
    with pytest.raises(ValueError):
        order.set_date("Sun Oct 25")
    assert order.pickup_date == ""
    assert order.price == pytest.approx(2.00)


def test_reset_order_clears_selections(order):
    order.set_quantity(12)
    order.set_flavor("Red Velvet")
    order.set_date(order.pickup_options[0])

    order.reset_order()

    assert order.quantity == 0
    assert order.flavor == ""
    assert order.pickup_date == ""
    assert order.price == 0
    assert order.pickup_options[0] == "Mon Oct 19"


def test_reset_order_is_idempotent(order):
    order.set_quantity(6)
    order.reset_order()
    once = order.summary(), list(order.pickup_options)
    order.reset_order()
    assert (order.summary(), order.pickup_options) == once


def test_reset_order_regenerates_options_from_current_clock():
    now = {"value": datetime(2026, 10, 19, 23, 0, tzinfo=tz.gettz("Europe/London"))}
    order = OrderState(clock=lambda: now["value"])
    assert order.pickup_options[0] == "Mon Oct 19"

    now["value"] = datetime(2026, 10, 20, 8, 0, tzinfo=tz.gettz("Europe/London"))
    order.reset_order()
    assert order.pickup_options == ["Tue Oct 20", "Wed Oct 21", "Thu Oct 22", "Fri Oct 23"]


def test_custom_pricing_and_currency(monday):
    order = OrderState(unit_price=2.50, same_day_surcharge=4.00, pickup_days=6, currency_symbol="$", clock=lambda: monday)
    assert len(order.pickup_options) == 6
    order.set_quantity(12)
    order.set_date(order.pickup_options[0])
    assert order.display_price == "$34.00"


def test_summary(order):
    order.set_quantity(6)
    order.set_flavor("Vanilla")
    order.set_date(order.pickup_options[3])
    assert order.summary() == {
        "quantity": 6,
        "flavor": "Vanilla",
        "pickup_date": "Thu Oct 22",
        "price": 12.00,
        "display_price": "£12.00",
    }
