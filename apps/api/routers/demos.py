from fastapi import APIRouter

from apps.api.schemas import CounterIn, CounterOut, MultiplyIn, MultiplyOut
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

router = APIRouter(prefix="/demos", tags=["demos"])


@router.post("/multiply", response_model=MultiplyOut)
def multiply_numbers(payload: MultiplyIn):
    return MultiplyOut(product=multiply(payload.a, payload.b))


def _to_action(item):
    if item.type == "increment":
        return Increment()
    if item.type == "decrement":
        return Decrement()
    if item.type == "set_name":
        return SetName(item.name)
    return ToggleFlag()


@router.post("/counter", response_model=CounterOut)
def counter(payload: CounterIn):
    """Apply the actions in order; the effect fires once per actual change."""
    state = payload.state
    effects = 0
    for item in payload.actions:
        new = update_counter(state, _to_action(item))
        if run_effect(state, new):
            effects += 1
        state = new
    return CounterOut(state=state, effects=effects, badge=badge(state.count))
