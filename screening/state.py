"""LangGraph state definition for the screening pipeline."""

from typing import TypedDict, Any, Annotated


def _replace(current: str, new: str) -> str:
    return new or current


def _replace_any(current: Any, new: Any) -> Any:
    return new if new is not None else current


class ScreeningState(TypedDict):
    text: Annotated[str, _replace]                  # Full ad copy
    product_id: Annotated[Any, _replace_any]        # Product selecting the rule variant (None = all rules)
    segments: Annotated[Any, _replace_any]          # SegmentationResult
    screenings: Annotated[Any, _replace_any]        # list[SegmentScreening], one per non-blank segment
    result: Annotated[Any, _replace_any]            # DocumentScreening
