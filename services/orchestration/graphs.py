from __future__ import annotations

import asyncio
import logging

from langgraph.graph import END, START, StateGraph

from domain.models import FormFields, ProcessingResult
from domain.value_objects import ScoringPolicy
from services.observability.metrics import timing_metric
from services.orchestration.nodes import decide, parse, score
from services.orchestration.types import State

logger = logging.getLogger(__name__)


def build_graph():
    """
    Linear flow:
        START -> parse -> score -> decide -> END
    """
    builder = StateGraph(State)
    builder.add_node("parse", parse)
    builder.add_node("score", score)
    builder.add_node("decide", decide)

    builder.add_edge(START, "parse")
    builder.add_edge("parse", "score")
    builder.add_edge("score", "decide")
    builder.add_edge("decide", END)

    return builder.compile()


graph = build_graph()


def _initial(fields: FormFields, policy: ScoringPolicy) -> State:
    return {"fields": fields.model_dump(), "policy": policy, "steps": []}


def _to_result(fields: FormFields, final: State) -> ProcessingResult:
    feats = final["features"]
    return ProcessingResult(
        fields=fields,
        age=feats["age"],
        income=feats["income"],
        score=final["score"],
        status=final["status"],
        approved=final["approved"],
    )


def process_input(fields: FormFields, policy: ScoringPolicy) -> ProcessingResult:
    """Run the scoring pipeline synchronously."""
    with timing_metric("process_input"):
        final: State = graph.invoke(_initial(fields, policy))
    logger.info("Processing complete: score=%s", final["score"])
    return _to_result(fields, final)


async def process_input_delayed(
    fields: FormFields, policy: ScoringPolicy, delay_s: float
) -> ProcessingResult:
    """Simulated background computation: sleep, then score. No cancellation path."""
    await asyncio.sleep(delay_s)
    with timing_metric("process_input_delayed"):
        final: State = await graph.ainvoke(_initial(fields, policy))
    logger.info("Delayed processing complete: score=%s", final["score"])
    return _to_result(fields, final)
