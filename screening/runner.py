"""Screening pipeline: LangGraph graph builder and runner.

Graph: START → segment_text → screen_segments → combine_findings → END
"""

import json
import os

import structlog
from langgraph.graph import StateGraph, START, END

from models.screening_output import DocumentScreening
from screening.aggregator import combine_results
from screening.screener import ComplianceScreener
from screening.state import ScreeningState

logger = structlog.get_logger(__name__)


def segment_text(state: ScreeningState, screener: ComplianceScreener) -> dict:
    """Split the ad copy into typed segments."""
    segmentation = screener.segmenter.run(state["text"])
    return {"segments": segmentation}


def screen_segments(state: ScreeningState, screener: ComplianceScreener) -> dict:
    """Screen each non-blank segment, with the full ad as footnote context."""
    text = state["text"]
    screenings = [
        screener.screen_segment(s.text, text, state.get("product_id"), segment=s)
        for s in state["segments"].segments
        if s.text.strip()
    ]
    return {"screenings": screenings}


def combine_findings(state: ScreeningState) -> dict:
    """Merge per-segment results into the document result."""
    screenings = state["screenings"] or []
    result = DocumentScreening(
        product_id=state.get("product_id"),
        segments=state["segments"].segments,
        screenings=screenings,
        result=combine_results(sc.result for sc in screenings),
    )
    logger.info(
        "runner.combined",
        segments=len(result.segments),
        violations=result.result.summary.total,
        suppressed=len(result.result.suppressed_matches),
    )
    return {"result": result}


def build_screening_pipeline(screener: ComplianceScreener | None = None):
    """Build the 3-node screening pipeline around one screener."""
    screener = screener or ComplianceScreener()
    workflow = StateGraph(ScreeningState)

    workflow.add_node("segment_text", lambda state: segment_text(state, screener))
    workflow.add_node("screen_segments", lambda state: screen_segments(state, screener))
    workflow.add_node("combine_findings", combine_findings)

    workflow.add_edge(START, "segment_text")
    workflow.add_edge("segment_text", "screen_segments")
    workflow.add_edge("screen_segments", "combine_findings")
    workflow.add_edge("combine_findings", END)

    return workflow.compile()


def run_screening(
    text: str,
    product_id: str | None = None,
    screener: ComplianceScreener | None = None,
) -> DocumentScreening:
    """Run the graph on one ad and return the document screening."""
    screener = screener or ComplianceScreener()
    screener.segmenter.validate(text)
    app = build_screening_pipeline(screener)

    initial_state = ScreeningState(
        text=text,
        product_id=product_id if product_id is not None else screener.config.product_id,
        segments=None,
        screenings=None,
        result=None,
    )
    final_state = app.invoke(initial_state)
    return final_state["result"]


def save_outputs(screening: DocumentScreening, output_dir: str) -> list[str]:
    """Write segments.json and screening.json; returns the written paths."""
    os.makedirs(output_dir, exist_ok=True)

    segments_path = os.path.join(output_dir, "segments.json")
    with open(segments_path, "w", encoding="utf-8") as f:
        json.dump([s.model_dump(mode="json") for s in screening.segments], f, ensure_ascii=False, indent=2)

    screening_path = os.path.join(output_dir, "screening.json")
    with open(screening_path, "w", encoding="utf-8") as f:
        json.dump(screening.model_dump(mode="json"), f, ensure_ascii=False, indent=2)

    return [segments_path, screening_path]
