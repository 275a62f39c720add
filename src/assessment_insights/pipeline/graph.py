"""
Per-record workflow built on LangGraph.

    START -> extract -> END

The extract node runs the retrying extraction element for one record. Any
unexpected exception is contained in the state's ``error`` key so one record
never aborts the batch.
"""

import logging
from typing import Any, Callable, Dict, Optional, TypedDict

from langgraph.graph import END, StateGraph

from ..extraction.extractor import Emit, InsightsExtractor
from ..extraction.schemas import AssessmentRecord, InsightsResult

logger = logging.getLogger(__name__)


class InsightsState(TypedDict, total=False):
    """State for the insights workflow."""
    record: AssessmentRecord
    insights: Optional[InsightsResult]
    error: str


def extraction_node(
    extractor: InsightsExtractor,
    emit: Emit,
) -> Callable[[InsightsState], Any]:
    """Wrap the extractor as a graph node."""

    async def extract(state: InsightsState) -> Dict[str, Any]:
        record = state["record"]
        try:
            insights = await extractor.process_element(record, emit)
        except Exception as e:
            logger.exception(f"[{extractor.name}] Error: {e}")
            return {"insights": None, "error": str(e)}

        if insights is None:
            return {"insights": None, "error": "record dropped after failed attempts"}
        return {"insights": insights}

    return extract


def create_insights_graph(extractor: InsightsExtractor, emit: Emit):
    """
    Create the compiled per-record workflow.

    Args:
        extractor: Extraction element shared by every record
        emit: Sink callback receiving each successful InsightsResult

    Returns:
        Compiled graph; ``await graph.ainvoke({"record": record})``
    """
    graph = StateGraph(InsightsState)
    graph.add_node("extract", extraction_node(extractor, emit))
    graph.set_entry_point("extract")
    graph.add_edge("extract", END)
    return graph.compile()
