import streamlit as st


def page_select_option(title, subtotal, options, selected, on_selection_changed, on_next, on_cancel, key):
    """Shared layout for the flavor and pickup steps.

    `selected` preselects the radio when the customer comes back to this step.
    """
    st.header(title)

    index = options.index(selected) if selected in options else None
    choice = st.radio(title, options, index=index, key=f"{key}_choice", label_visibility="collapsed")
    if choice is not None and choice != selected:
        on_selection_changed(choice)

    st.divider()
    st.markdown(f"**Subtotal {subtotal()}**")

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Cancel", key=f"{key}_cancel", use_container_width=True):
            on_cancel()
            st.rerun()
    with c2:
        if st.button("Next", key=f"{key}_next", type="primary", disabled=choice is None, use_container_width=True):
            on_next()
            st.rerun()
