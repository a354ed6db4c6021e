from __future__ import annotations

import asyncio
from typing import Callable

import streamlit as st

from apps.ui.state import bind_field, dispatch, widget_key
from domain.models import Screen, WorkflowState
from domain.value_objects import WorkflowVariant
from services.eligibility.rules import can_advance, missing_fields
from services.orchestration.controller import Process, Restart, Send, Submit, run_pending

FIELD_LABELS = {
    "name": ("Name:", "Enter your name"),
    "age": ("Age:", "Enter your age"),
    "income": ("Annual Income ($):", "Enter your income"),
    "mortgage": ("Mortgage amount ($):", "Enter the mortgage amount"),
}


def render_input(variant: WorkflowVariant, state: WorkflowState) -> None:
    st.caption(f"Step {Screen.INPUT.step} of {len(Screen)}")
    st.subheader("Client Information")
    for field in variant.required_fields:
        label, placeholder = FIELD_LABELS[field]
        st.text_input(
            label,
            value=getattr(state.fields, field),
            placeholder=placeholder,
            key=widget_key(variant.name, field),
            on_change=bind_field(variant.name, field),
        )

    missing = missing_fields(state.fields, variant.required_fields)
    if missing:
        st.caption("Still needed: " + ", ".join(missing))
    st.button(
        "Submit",
        type="primary",
        disabled=not can_advance(state.fields, variant.required_fields),
        on_click=dispatch,
        args=(variant.name, Submit()),
    )


def render_processing(variant: WorkflowVariant, state: WorkflowState) -> None:
    st.caption(f"Step {Screen.PROCESSING.step} of {len(Screen)}")
    st.subheader("Bank Processing")
    if state.pending:
        with st.spinner("Processing application..."):
            complete = asyncio.run(run_pending(state))
        dispatch(variant.name, complete)
        st.rerun()

    if state.result is None:
        st.write("Analyzing submitted data...")
        st.button("Process", type="primary", on_click=dispatch, args=(variant.name, Process()))
        return

    st.success("Processing Complete!")
    st.write(f"Name: {state.result.fields.name}")
    st.write(f"Score: {state.result.score:.2f}")
    st.write(f"Status: {state.result.status}")
    st.button(
        "Send to Regulator →", type="primary", on_click=dispatch, args=(variant.name, Send())
    )


def render_review(variant: WorkflowVariant, state: WorkflowState) -> None:
    st.caption(f"Step {Screen.REVIEW.step} of {len(Screen)}")
    st.subheader("Review")
    res = state.result
    if res is None:
        st.info("Awaiting results")
    elif variant.auto_complete:
        advice = "qualify" if res.approved else "do not qualify"
        st.write(f"Based on our model, you {advice} for a mortgage.")
    else:
        cols = st.columns(3)
        cols[0].metric("Score", f"{res.score:.2f}")
        cols[1].metric("Status", res.status)
        cols[2].metric("Approved", "yes" if res.approved else "no")
        # show what was actually scored; bad numbers were read as zero
        st.caption(f"Scored with age={res.age}, income={res.income:.2f}")
    st.button("← Start New Review", on_click=dispatch, args=(variant.name, Restart()))


SCREEN_VIEWS: dict[Screen, Callable[[WorkflowVariant, WorkflowState], None]] = {
    Screen.INPUT: render_input,
    Screen.PROCESSING: render_processing,
    Screen.REVIEW: render_review,
}


def render(variant: WorkflowVariant, state: WorkflowState) -> None:
    SCREEN_VIEWS[state.screen](variant, state)
