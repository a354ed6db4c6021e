import streamlit as st

from apps.ui.state import workflow_state
from apps.ui.views import render
from core.logging import configure_logging
from services.orchestration.policies import REVIEW_CHAIN

configure_logging()

st.set_page_config(page_title="Review workflow", layout="wide")

st.title(REVIEW_CHAIN.title)

state = workflow_state(REVIEW_CHAIN.name)
render(REVIEW_CHAIN, state)

with st.expander("Debug section"):
    st.json(state.model_dump(mode="json"))
