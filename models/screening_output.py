from typing import Dict, List, Optional
from pydantic import BaseModel, Field, ConfigDict
from enum import Enum

from models.rule_catalog import RegulatoryClass, Severity, Tier


class SegmentType(str, Enum):
    CLAIM = "claim"
    EXPLANATION = "explanation"
    EVIDENCE = "evidence"
    CTA = "cta"
    DISCLAIMER = "disclaimer"
    UNKNOWN = "unknown"


class Position(BaseModel):
    start: int = Field(..., ge=0, description="Inclusive character offset.")
    end: int = Field(..., ge=0, description="Exclusive character offset.")
    model_config = ConfigDict(extra="forbid", frozen=True)


class Segment(BaseModel):
    id: str = Field(..., description="Sequential id: seg_001, seg_002, ...")
    text: str = Field(..., description="Verbatim substring of the input.")
    type: SegmentType = Field(..., description="Cue-based classification.")
    position: Position
    model_config = ConfigDict(extra="forbid", frozen=True)


class SegmentationResult(BaseModel):
    segments: List[Segment]
    processing_time_ms: float = Field(..., ge=0)
    coverage: float = Field(..., description="Share of input characters covered by segments (1.0 when lossless).")
    model_config = ConfigDict(extra="forbid", frozen=True)


class AnnotationScope(str, Enum):
    SEGMENT = "segment"
    FULL_TEXT = "fullText"


class MarkerOccurrence(BaseModel):
    keyword: str = Field(..., description="Same-script run immediately before the marker.")
    marker: str = Field(..., description="Normalised marker, e.g. '※1', '*2', '注1', bare '※'.")
    position: int = Field(..., ge=0, description="Offset of the keyword candidate in the segment text.")
    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def end(self) -> int:
        return self.position + len(self.keyword)


class Footnote(BaseModel):
    marker: str
    footnote_text: str
    position: int = Field(..., ge=0, description="Offset of the footnote (marker or opening bracket).")
    end: int = Field(..., ge=0, description="Exclusive end of the footnote span.")
    scope: AnnotationScope
    model_config = ConfigDict(extra="forbid", frozen=True)


class AnnotationBinding(BaseModel):
    keyword: str
    marker: str
    footnote_text: Optional[str] = None
    scope: Optional[AnnotationScope] = None
    is_valid: bool
    position: Optional[int] = Field(None, description="Offset of the bound keyword candidate in the segment text.")
    model_config = ConfigDict(extra="forbid", frozen=True)


class AnnotationAnalysis(BaseModel):
    marker_occurrences: List[MarkerOccurrence] = Field(default_factory=list)
    footnotes: List[Footnote] = Field(default_factory=list)
    bindings: List[AnnotationBinding] = Field(default_factory=list)
    has_annotated_keywords: bool = False
    model_config = ConfigDict(extra="forbid", frozen=True)


class KeywordMatch(BaseModel):
    keyword: str = Field(..., description="Primary keyword of the rule that fired.")
    matched_text: str = Field(..., description="The synonym actually found in the text.")
    tier: Tier
    category: str
    severity: Severity
    regulatory_class: RegulatoryClass
    rationale: str
    reference_hint: Optional[str] = None
    acceptable_rewrite: Optional[str] = None
    required_annotation: Optional[str] = None
    rule_id: str
    position: Position = Field(..., description="Span of matched_text within the screened text (the segment, not the whole ad).")
    marker: Optional[str] = Field(None, description="Footnote marker written directly after the occurrence, if any.")
    footnote_text: Optional[str] = Field(None, description="Explanation found for that marker, if any.")
    context_reason: Optional[str] = Field(None, description="Context-dependent tier: why the surrounding phrasing qualified.")
    model_config = ConfigDict(extra="forbid", frozen=True)


class ScreeningSummary(BaseModel):
    by_tier: Dict[str, int] = Field(..., description="Match count per tier, every tier present.")
    by_severity: Dict[str, int] = Field(..., description="Match count per severity, every severity present.")
    total: int = Field(..., ge=0)
    model_config = ConfigDict(extra="forbid", frozen=True)


class ValidationResult(BaseModel):
    has_violations: bool
    matches: List[KeywordMatch] = Field(default_factory=list)
    summary: ScreeningSummary
    unique_flagged_keywords: List[str] = Field(default_factory=list)
    suppressed_matches: List[KeywordMatch] = Field(
        default_factory=list,
        description="Conditional matches dropped because a valid footnote was attached.",
    )
    model_config = ConfigDict(extra="forbid", frozen=True)


class SegmentScreening(BaseModel):
    segment: Optional[Segment] = None
    annotations: AnnotationAnalysis
    result: ValidationResult
    model_config = ConfigDict(extra="forbid", frozen=True)


class DocumentScreening(BaseModel):
    product_id: Optional[str] = None
    segments: List[Segment]
    screenings: List[SegmentScreening]
    result: ValidationResult
    model_config = ConfigDict(extra="forbid", frozen=True)
