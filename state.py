import streamlit as st

import settings
from navigation import Navigator
from order_state import OrderState
from utils import get_local_now


def new_order() -> OrderState:
    tz_name = settings.timezone_name()
    return OrderState(
        unit_price=settings.unit_price(),
        same_day_surcharge=settings.same_day_surcharge(),
        pickup_days=settings.pickup_days(),
        currency_symbol=settings.currency_symbol(),
        clock=lambda: get_local_now(tz_name),
    )


def init_state():
    if "order" not in st.session_state:
        st.session_state.order = new_order()
    if "nav" not in st.session_state:
        st.session_state.nav = Navigator()
    if "last_order" not in st.session_state:
        st.session_state.last_order = None  # dict returned by send_order
