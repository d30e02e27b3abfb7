import logging
import streamlit as st

import order_client
from navigation import cancel_order_and_navigate_to_start
from ui_text import NEW_CUPCAKE_ORDER, cupcakes

log = logging.getLogger("cupcake.order_summary")


def page_order_summary(order, nav):
    st.header("🧾 Order Summary")

    rows = [
        ("Quantity", cupcakes(order.quantity)),
        ("Flavor", order.flavor),
        ("Pickup date", order.pickup_date),
    ]
    for label, value in rows:
        st.caption(label.upper())
        st.write(f"**{value}**")
        st.divider()

    st.markdown(f"### Total {order.display_price}")

    with st.expander(NEW_CUPCAKE_ORDER):
        st.text(order_client.order_details(order))

    if st.button("Send order", key="summary_send", type="primary", use_container_width=True):
        sent = False
        try:
            data = order_client.send_order(order)
            st.session_state.last_order = data or {"order_code": None}
            sent = True
        except Exception as e:
            log.exception("Sending order failed")
            st.error("Order could not be sent.")
            st.exception(e)
        if sent:
            cancel_order_and_navigate_to_start(order, nav)
            st.rerun()

    if st.button("Cancel", key="summary_cancel", use_container_width=True):
        cancel_order_and_navigate_to_start(order, nav)
        st.rerun()
