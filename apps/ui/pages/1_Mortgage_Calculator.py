import streamlit as st

from apps.ui.state import workflow_state
from apps.ui.views import render
from core.logging import configure_logging
from services.orchestration.policies import MORTGAGE_CALCULATOR

configure_logging()

st.set_page_config(page_title="Mortgage application", layout="centered")

st.title(MORTGAGE_CALCULATOR.title)
st.caption("Submit your information to find out if you qualify for a mortgage.")

render(MORTGAGE_CALCULATOR, workflow_state(MORTGAGE_CALCULATOR.name))
