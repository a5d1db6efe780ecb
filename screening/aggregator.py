"""
Violation Aggregator: turns raw matches plus annotation bindings into the
final ValidationResult. Only conditional matches can be suppressed.
"""

from typing import Iterable

import structlog

from models.rule_catalog import Severity, Tier
from models.screening_output import AnnotationBinding, KeywordMatch, ScreeningSummary, ValidationResult

logger = structlog.get_logger(__name__)


def _is_annotated(match: KeywordMatch, bindings: list[AnnotationBinding]) -> bool:
    """A valid binding names this exact text, or its marker sits right after this occurrence."""
    for binding in bindings:
        if not binding.is_valid:
            continue
        if binding.keyword == match.matched_text:
            return True
        if match.marker is None or binding.marker != match.marker:
            continue
        if binding.position is None or binding.position + len(binding.keyword) == match.position.end:
            return True
    return False


def summarize(matches: Iterable[KeywordMatch]) -> ScreeningSummary:
    by_tier = {tier.value: 0 for tier in Tier}
    by_severity = {severity.value: 0 for severity in Severity}
    total = 0
    for m in matches:
        by_tier[m.tier.value] += 1
        by_severity[m.severity.value] += 1
        total += 1
    return ScreeningSummary(by_tier=by_tier, by_severity=by_severity, total=total)


def unique_keywords(matches: Iterable[KeywordMatch]) -> list[str]:
    return list(dict.fromkeys(m.matched_text for m in matches))


def _result(matches: list[KeywordMatch], suppressed: list[KeywordMatch]) -> ValidationResult:
    return ValidationResult(
        has_violations=bool(matches),
        matches=matches,
        summary=summarize(matches),
        unique_flagged_keywords=unique_keywords(matches),
        suppressed_matches=suppressed,
    )


class ViolationAggregator:
    def aggregate(self, raw_matches: Iterable[KeywordMatch], bindings: Iterable[AnnotationBinding]) -> ValidationResult:
        bindings = list(bindings)
        kept, suppressed = [], []
        for m in raw_matches:
            if m.tier is Tier.CONDITIONAL and _is_annotated(m, bindings):
                logger.debug("aggregator.suppressed", keyword=m.matched_text, rule_id=m.rule_id, marker=m.marker)
                suppressed.append(m)
            else:
                kept.append(m)
        return _result(kept, suppressed)


def aggregate(raw_matches: Iterable[KeywordMatch], bindings: Iterable[AnnotationBinding]) -> ValidationResult:
    return ViolationAggregator().aggregate(raw_matches, bindings)


def combine_results(results: Iterable[ValidationResult]) -> ValidationResult:
    """Merge per-segment results into one document-level result."""
    matches, suppressed = [], []
    for result in results:
        matches.extend(result.matches)
        suppressed.extend(result.suppressed_matches)
    return _result(matches, suppressed)
