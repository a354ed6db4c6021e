import streamlit as st

from apps.ui.state import get_or_create
from core.logging import configure_logging
from domain.models import Tab
from services.demos.tabs import tab_view

configure_logging()

st.set_page_config(page_title="Mortgage Workflow Demos", layout="wide")

st.title("Mortgage Workflow Demos")
st.caption("Use the sidebar to open a demo page.")

get_or_create("active_tab", lambda: Tab.HOME)

st.radio(
    "Tab",
    options=list(Tab),
    format_func=lambda t: tab_view(t)[0],
    horizontal=True,
    key="active_tab",
    label_visibility="collapsed",
)

title, body = tab_view(st.session_state.active_tab)
st.header(title)
st.write(body)
