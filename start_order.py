import streamlit as st
from data_source import QUANTITY_OPTIONS
from navigation import CupcakeScreen


def page_start_order(order, nav, quantity_options=QUANTITY_OPTIONS):
    st.header("🧁 Order Cupcakes")

    last = st.session_state.get("last_order")
    if last:
        code = last.get("order_code")
        st.success(f"Order sent! Your order code is: {code}" if code else "Order sent!")

    for label, qty in quantity_options:
        if st.button(label, key=f"qty_{qty}", use_container_width=True):
            order.set_quantity(qty)
            st.session_state.last_order = None
            nav.navigate(CupcakeScreen.FLAVOR)
            st.rerun()
