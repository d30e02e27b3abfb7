import streamlit as st

from state import init_state
from logger import setup_logger
from ui_text import APP_NAME
from data_source import FLAVORS
from navigation import CupcakeScreen, cancel_order_and_navigate_to_start
from start_order import page_start_order
from select_option import page_select_option
from order_summary import page_order_summary


def _app_bar(nav):
    left, right = st.columns([1, 5])
    with left:
        if nav.can_navigate_back:
            if st.button("← Back", key="nav_back"):
                nav.navigate_up()
                st.rerun()
    with right:
        st.title(APP_NAME)


def run_app():
    setup_logger()
    init_state()

    order = st.session_state.order
    nav = st.session_state.nav

    _app_bar(nav)

    def cancel():
        cancel_order_and_navigate_to_start(order, nav)

    screen = nav.current
    if screen == CupcakeScreen.START:
        page_start_order(order, nav)
    elif screen == CupcakeScreen.FLAVOR:
        page_select_option(
            "Choose Flavor",
            subtotal=lambda: order.display_price,
            options=FLAVORS,
            selected=order.flavor,
            on_selection_changed=order.set_flavor,
            on_next=lambda: nav.navigate(CupcakeScreen.PICKUP),
            on_cancel=cancel,
            key="flavor",
        )
    elif screen == CupcakeScreen.PICKUP:
        page_select_option(
            "Choose Pickup Date",
            subtotal=lambda: order.display_price,
            options=order.pickup_options,
            selected=order.pickup_date,
            on_selection_changed=order.set_date,
            on_next=lambda: nav.navigate(CupcakeScreen.SUMMARY),
            on_cancel=cancel,
            key="pickup",
        )
    else:
        page_order_summary(order, nav)
