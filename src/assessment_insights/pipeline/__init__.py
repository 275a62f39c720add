"""Batch pipeline around the extraction element: reader, workflow, runner, sink."""

from .graph import InsightsState, create_insights_graph
from .io import JsonlSink, insights_to_json, read_assessments, write_insights
from .runner import PipelineReport, run_pipeline
from .settings import PipelineSettings

__all__ = [
    "InsightsState",
    "create_insights_graph",
    "JsonlSink",
    "insights_to_json",
    "read_assessments",
    "write_insights",
    "PipelineReport",
    "run_pipeline",
    "PipelineSettings",
]
