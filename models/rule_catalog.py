import re
from typing import Dict, Optional, Tuple
from pydantic import BaseModel, Field, ConfigDict, field_validator, model_validator
from enum import Enum


class Tier(str, Enum):
    ABSOLUTE = "absolute"
    CONDITIONAL = "conditional"
    CONTEXT_DEPENDENT = "context-dependent"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class RegulatoryClass(str, Enum):
    PHARMACEUTICAL_AFFAIRS = "pharmaceutical-affairs"
    FAIR_DISPLAY = "fair-display"
    SPECIFIED_COMMERCIAL_TRANSACTIONS = "specified-commercial-transactions"
    INTERNAL_POLICY = "internal-policy"

    @property
    def label(self) -> str:
        return REGULATORY_CLASS_LABELS[self]


REGULATORY_CLASS_LABELS = {
    RegulatoryClass.PHARMACEUTICAL_AFFAIRS: "薬機法違反",
    RegulatoryClass.FAIR_DISPLAY: "景表法違反",
    RegulatoryClass.SPECIFIED_COMMERCIAL_TRANSACTIONS: "特商法違反",
    RegulatoryClass.INTERNAL_POLICY: "社内基準違反",
}


class ContextPattern(BaseModel):
    """A surrounding-phrasing pattern that turns a context-dependent keyword into a violation."""
    pattern: re.Pattern = Field(..., description="Regex searched in the text window around the keyword.")
    reason: str = Field(..., description="Why this framing is disallowed (reported with the match).")
    severity: Severity = Field(Severity.HIGH, description="Severity reported when this pattern qualifies the keyword.")
    example: Optional[str] = Field(None, description="Sample copy that trips this pattern.")
    model_config = ConfigDict(extra="forbid", frozen=True)


class AllowedPattern(BaseModel):
    """A phrasing that keeps a context-dependent keyword acceptable even when an NG pattern matched."""
    pattern: re.Pattern = Field(..., description="Regex searched in the same text window.")
    example: Optional[str] = Field(None, description="Sample copy that is acceptable.")
    model_config = ConfigDict(extra="forbid", frozen=True)


class RuleException(BaseModel):
    """A usage in which a conditional keyword needs no footnote, e.g. a general explanation."""
    condition: str = Field(..., description="When the exception applies (一般知識の説明, 他社商品の説明, ...).")
    allowed_pattern: re.Pattern = Field(..., description="Regex searched in the screened text.")
    model_config = ConfigDict(extra="forbid", frozen=True)


class KeywordRule(BaseModel):
    id: str = Field(..., min_length=1, description="Stable, unique rule identifier.")
    keyword: Tuple[str, ...] = Field(
        ...,
        description="The regulated term and its listed synonyms. A single string is accepted and stored as a one-item tuple.",
    )
    tier: Tier = Field(..., description="Evaluation policy: absolute, conditional or context-dependent.")
    category: str = Field(..., min_length=1, description="Topic grouping, e.g. 'rejuvenation', 'penetration', 'kuma'.")
    severity: Severity = Field(..., description="Default severity of a match.")
    regulatory_class: RegulatoryClass = Field(..., description="Which law or internal policy the rule enforces.")
    rationale: str = Field(..., min_length=1, description="Why the term is regulated.")
    reference_hint: Optional[str] = Field(None, description="Knowledge-base file or section backing the rule.")
    acceptable_rewrite: Optional[str] = Field(None, description="A compliant alternative phrasing.")
    products: Optional[Tuple[str, ...]] = Field(
        None,
        description="Product ids the rule is restricted to. None applies the rule to every product.",
    )
    required_annotation: Optional[str] = Field(
        None,
        description="Conditional tier: what the attached footnote is expected to say (e.g. '※角質層まで').",
    )
    exceptions: Tuple[RuleException, ...] = Field(
        (),
        description="Conditional tier: usages that need no footnote. Any match skips the rule for that text.",
    )
    ok_examples: Tuple[str, ...] = Field((), description="Compliant usages.")
    ng_examples: Tuple[str, ...] = Field((), description="Non-compliant usages.")
    ng_patterns: Tuple[ContextPattern, ...] = Field(
        (),
        description="Context-dependent tier: framings that make the keyword a violation, evaluated in order.",
    )
    ok_patterns: Tuple[AllowedPattern, ...] = Field(
        (),
        description="Context-dependent tier: framings that override a matching NG pattern.",
    )
    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("keyword", mode="before")
    @classmethod
    def accept_single_keyword(cls, value):
        if isinstance(value, str):
            return (value,)
        return value

    @field_validator("keyword")
    @classmethod
    def reject_blank_keywords(cls, value: Tuple[str, ...]) -> Tuple[str, ...]:
        if not value:
            raise ValueError("keyword must list at least one term")
        if any(not term or not term.strip() for term in value):
            raise ValueError("keyword terms must be non-blank strings")
        # Keep the declared order; synonyms listed twice count once.
        return tuple(dict.fromkeys(value))

    @field_validator("products", mode="before")
    @classmethod
    def accept_single_product(cls, value):
        if isinstance(value, str):
            return (value,)
        return value

    @model_validator(mode="after")
    def check_tier_fields(self) -> "KeywordRule":
        if self.tier is Tier.CONTEXT_DEPENDENT and not self.ng_patterns:
            raise ValueError(f"context-dependent rule {self.id!r} needs at least one ng_pattern")
        if self.tier is not Tier.CONTEXT_DEPENDENT and (self.ng_patterns or self.ok_patterns):
            raise ValueError(f"rule {self.id!r} declares context patterns but is {self.tier.value}")
        if self.tier is not Tier.CONDITIONAL and self.exceptions:
            raise ValueError(f"rule {self.id!r} declares exceptions but is {self.tier.value}")
        return self

    @property
    def primary_keyword(self) -> str:
        return self.keyword[0]


class ProductAnnotationRule(BaseModel):
    required: bool = Field(..., description="Whether the keyword must carry a footnote for this product.")
    template: str = Field(..., description="Footnote wording expected for the keyword (e.g. '※角質層まで').")
    severity: Severity = Field(Severity.HIGH, description="Severity of the generated conditional rule.")
    reference_hint: Optional[str] = Field(None, description="Knowledge-base file backing the product rule.")
    model_config = ConfigDict(extra="forbid", frozen=True)


class ProductProfile(BaseModel):
    id: str = Field(..., min_length=1, description="Short product identifier, e.g. 'HA'.")
    name: str = Field(..., description="Human-readable product name.")
    category: str = Field(..., description="Regulatory product category (化粧品, 新指定医薬部外品, ...).")
    approved_effects: Optional[str] = Field(None, description="Approved efficacy claims for the product.")
    regulatory_class: RegulatoryClass = Field(
        RegulatoryClass.PHARMACEUTICAL_AFFAIRS,
        description="Class assigned to rules generated from this product's annotation rules.",
    )
    annotation_rules: Dict[str, ProductAnnotationRule] = Field(
        default_factory=dict,
        description="Keyword → footnote requirement specific to this product.",
    )
    model_config = ConfigDict(extra="forbid", frozen=True)
