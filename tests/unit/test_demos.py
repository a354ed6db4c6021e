"""Tests for the three-state demo, the multiplier and the tab shell."""

import logging

import pytest

from domain.models import CounterState, Tab
from services.demos.calculator import multiply
from services.demos.counter import (
    Decrement,
    Increment,
    SetName,
    ToggleFlag,
    badge,
    run_effect,
    update_counter,
)
from services.demos.tabs import TAB_CONTENT, tab_view


class TestCounter:
    def test_defaults(self):
        assert CounterState() == CounterState(count=0, name="Alice", flag=False)

    def test_actions(self):
        state = CounterState()
        state = update_counter(state, Increment())
        state = update_counter(state, Increment())
        state = update_counter(state, Decrement())
        state = update_counter(state, SetName("Carol"))
        state = update_counter(state, ToggleFlag())
        assert state == CounterState(count=1, name="Carol", flag=True)

    def test_count_can_go_negative(self):
        assert update_counter(CounterState(), Decrement()).count == -1

    def test_unknown_action(self):
        with pytest.raises(TypeError):
            update_counter(CounterState(), object())

    def test_badge(self):
        assert badge(0) == "hi 1"


class TestEffect:
    def test_runs_on_first_render(self, caplog):
        with caplog.at_level(logging.INFO):
            assert run_effect(None, CounterState()) is True
        assert "Effect ran: count=0, name=Alice, flag=False" in caplog.text

    def test_skips_when_unchanged(self):
        assert run_effect(CounterState(), CounterState()) is False

    def test_runs_on_change(self):
        prev = CounterState()
        assert run_effect(prev, update_counter(prev, ToggleFlag())) is True


class TestMultiply:
    def test_product(self):
        assert multiply("6", "7") == 42.0
        assert multiply("1.5", "-2") == -3.0

    def test_overflow_is_zero(self):
        assert multiply("1e200", "1e200") == 0.0
        assert multiply("-1e200", "1e200") == 0.0

    def test_bad_operand_is_zero(self):
        assert multiply("abc", "7") == 0.0
        assert multiply("", "") == 0.0


def test_every_tab_has_a_view():
    assert set(TAB_CONTENT) == set(Tab)
    assert tab_view(Tab.SETTINGS)[0] == "Settings"
