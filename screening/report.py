"""Plain-text renderings of screening results for logs, the CLI and the reviewer hand-off."""

from models.rule_catalog import Tier
from models.screening_output import KeywordMatch, ValidationResult
from screening.prompts.review_hints import NO_FINDINGS, REVIEW_HINTS_TEMPLATE

TIER_LABELS = {
    Tier.ABSOLUTE: "absolute",
    Tier.CONDITIONAL: "conditional (footnote missing)",
    Tier.CONTEXT_DEPENDENT: "context-dependent",
}


def summary_text(result: ValidationResult) -> str:
    if not result.has_violations:
        return "No violations found."

    tiers = result.summary.by_tier
    parts = [
        f"{tiers[Tier.ABSOLUTE.value]} absolute",
        f"{tiers[Tier.CONDITIONAL.value]} conditional",
        f"{tiers[Tier.CONTEXT_DEPENDENT.value]} context-dependent",
    ]
    return f"{result.summary.total} violation(s): {', '.join(parts)}. Flagged: {'、'.join(result.unique_flagged_keywords)}"


def _describe(m: KeywordMatch) -> str:
    line = f"「{m.matched_text}」 [{m.severity.value}] {m.regulatory_class.label} / {m.category}: {m.rationale}"
    if m.context_reason:
        line += f" ({m.context_reason})"
    return line


def detailed_list(result: ValidationResult) -> str:
    if not result.has_violations:
        return "No violations found."

    lines = []
    for tier in Tier:
        tier_matches = [m for m in result.matches if m.tier is tier]
        if not tier_matches:
            continue
        lines.append(f"[{TIER_LABELS[tier]}]")
        for i, m in enumerate(tier_matches, 1):
            lines.append(f"  {i}. {_describe(m)}")
            if m.required_annotation:
                lines.append(f"     expected footnote: {m.required_annotation}")
            if m.acceptable_rewrite:
                lines.append(f"     suggestion: {m.acceptable_rewrite}")
            if m.reference_hint:
                lines.append(f"     reference: {m.reference_hint}")
    return "\n".join(lines)


def _bullets(matches: list[KeywordMatch], with_annotation: bool = False) -> str:
    if not matches:
        return NO_FINDINGS
    lines = []
    for m in matches:
        line = f"  - {_describe(m)}"
        if with_annotation and m.required_annotation:
            line += f" → expected footnote: {m.required_annotation}"
        lines.append(line)
    return "\n".join(lines)


def build_review_hints(result: ValidationResult) -> str:
    by_tier = {tier: [m for m in result.matches if m.tier is tier] for tier in Tier}
    if result.has_violations:
        verdict = f"{result.summary.total} rule-based violation(s) detected."
    else:
        verdict = "No rule-based violations detected."

    accepted = [
        f"  - 「{m.matched_text}」{m.marker or ''} → {m.footnote_text or 'footnote found'}"
        for m in result.suppressed_matches
    ]
    return REVIEW_HINTS_TEMPLATE.format(
        verdict=verdict,
        absolute=_bullets(by_tier[Tier.ABSOLUTE]),
        conditional=_bullets(by_tier[Tier.CONDITIONAL], with_annotation=True),
        context=_bullets(by_tier[Tier.CONTEXT_DEPENDENT]),
        suppressed="\n".join(accepted) or NO_FINDINGS,
    )
