"""
Session-state glue between Streamlit and the pure update functions.

Each page keeps exactly one state object in ``st.session_state`` and changes
it only by dispatching actions through ``update``; Streamlit's rerun then
renders the new state.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

import streamlit as st

from domain.models import FormFields, WorkflowState
from services.orchestration.controller import Action, EditField, Restart, initial_state, update

logger = logging.getLogger(__name__)


def get_or_create(key: str, factory: Callable[[], Any]) -> Any:
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]


def workflow_state(variant: str) -> WorkflowState:
    return get_or_create(f"workflow.{variant}", lambda: initial_state(variant))


def widget_key(variant: str, field: str) -> str:
    return f"workflow.{variant}.field.{field}"


def dispatch(variant: str, action: Action) -> WorkflowState:
    key = f"workflow.{variant}"
    new = update(st.session_state[key], action)
    st.session_state[key] = new
    if isinstance(action, Restart):
        # input widgets keep their own copy of the text
        for field in FormFields.field_names():
            st.session_state.pop(widget_key(variant, field), None)
    return new


def bind_field(variant: str, field: str) -> Callable[[], None]:
    """on_change callback copying a widget's text into the form model."""

    def _on_change() -> None:
        dispatch(variant, EditField(field, st.session_state[widget_key(variant, field)]))

    return _on_change
