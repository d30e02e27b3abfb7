from datetime import datetime

import pytest
from dateutil import tz

from order_state import OrderState

CFG_KEYS = (
    "CUPCAKE_UNIT_PRICE",
    "CUPCAKE_SAME_DAY_SURCHARGE",
    "CUPCAKE_PICKUP_DAYS",
    "CUPCAKE_CURRENCY_SYMBOL",
    "CUPCAKE_TIMEZONE",
    "CUPCAKE_LOG_LEVEL",
    "CUPCAKE_LOG_DIR",
    "SUPABASE_URL",
    "SUPABASE_ANON_KEY",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in CFG_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def monday():
    # Mon Oct 19 2026, mid-morning in London
    return datetime(2026, 10, 19, 9, 30, tzinfo=tz.gettz("Europe/London"))


@pytest.fixture
def order(monday):
    return OrderState(unit_price=2.00, same_day_surcharge=3.00, pickup_days=4, clock=lambda: monday)
