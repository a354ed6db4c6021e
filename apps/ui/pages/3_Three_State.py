import streamlit as st

from apps.ui.state import get_or_create
from core.logging import configure_logging
from domain.models import CounterState
from services.demos.counter import (
    Decrement,
    Increment,
    SetName,
    ToggleFlag,
    badge,
    run_effect,
    update_counter,
)

configure_logging()

st.set_page_config(page_title="Three-State Example")
st.title("Three-State Example")

get_or_create("counter", CounterState)


def _apply(action) -> None:
    st.session_state.counter = update_counter(st.session_state.counter, action)


state: CounterState = st.session_state.counter

col1, col2, col3 = st.columns(3)
with col1:
    st.write(f"Count: {state.count}")
    st.button("+", on_click=_apply, args=(Increment(),))
    st.button("-", on_click=_apply, args=(Decrement(),))
with col2:
    st.write(f"Name: {state.name}")
    st.button("Set Bob", on_click=_apply, args=(SetName("Bob"),))
    st.button("Set Carol", on_click=_apply, args=(SetName("Carol"),))
with col3:
    st.write(f"Flag: {state.flag}")
    st.button("Toggle", on_click=_apply, args=(ToggleFlag(),))

st.write(badge(state.count))

# effect: runs on first render and whenever the state changed since the last one
run_effect(st.session_state.get("counter_rendered"), state)
st.session_state.counter_rendered = state
