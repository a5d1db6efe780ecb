"""
Keyword Matcher.

Scans a text against the three rule tiers and returns every raw match.
Matching is literal substring search over each rule's keyword and synonyms;
no stemming, no fuzzy matching. Suppression of annotated conditional
matches is left to the aggregator.
"""

import re
import warnings
from typing import NamedTuple

import structlog

from models.rule_catalog import ContextPattern, KeywordRule, Tier
from models.screening_output import AnnotationScope, KeywordMatch, Position
from screening.annotations import find_footnotes, marker_at, resolve_footnote
from screening.errors import PatternEvaluationWarning
from screening.rule_tables import TIER_ORDER, RuleTables

logger = structlog.get_logger(__name__)

# Tiers whose occurrences are ignored inside a footnote body.
MASKED_TIERS = (Tier.CONDITIONAL, Tier.CONTEXT_DEPENDENT)


class _Hit(NamedTuple):
    start: int
    end: int
    matched_text: str
    rule: KeywordRule
    order: int
    qualifier: ContextPattern | None


def find_all(text: str, term: str) -> list[int]:
    """Start offsets of every non-overlapping occurrence of term."""
    positions = []
    start = text.find(term)
    while start != -1:
        positions.append(start)
        start = text.find(term, start + len(term))
    return positions


def qualifying_pattern(rule: KeywordRule, window: str) -> ContextPattern | None:
    """First NG pattern found in the window, unless an OK pattern is also there."""
    for ng in rule.ng_patterns:
        if ng.pattern.search(window):
            if any(ok.pattern.search(window) for ok in rule.ok_patterns):
                return None
            return ng
    return None


def excepted_usage(rule: KeywordRule, window: str) -> str | None:
    """Condition of the first exception whose pattern is found in the window."""
    for exception in rule.exceptions:
        if exception.allowed_pattern.search(window):
            return exception.condition
    return None


def _inside(start: int, end: int, spans: list[tuple[int, int]]) -> bool:
    return any(s <= start and end <= e for s, e in spans)


def _evaluate_rule(rule: KeywordRule, order: int, text: str) -> list[_Hit]:
    qualifier = None
    if rule.tier is Tier.CONTEXT_DEPENDENT:
        if not any(term in text for term in rule.keyword):
            return []
        qualifier = qualifying_pattern(rule, text)
        if qualifier is None:
            return []
    elif rule.exceptions and any(term in text for term in rule.keyword):
        condition = excepted_usage(rule, text)
        if condition is not None:
            logger.debug("keyword_matcher.excepted", rule_id=rule.id, condition=condition)
            return []

    hits = []
    for term in rule.keyword:
        for start in find_all(text, term):
            hits.append(_Hit(start, start + len(term), term, rule, order, qualifier))
    return hits


def longest_hits(hits: list[_Hit]) -> list[_Hit]:
    """Drop hits contained in an earlier, longer hit of the same tier."""
    kept: list[_Hit] = []
    for hit in sorted(hits, key=lambda h: (h.start, -(h.end - h.start), h.order)):
        if any(k.start <= hit.start and hit.end <= k.end for k in kept):
            continue
        kept.append(hit)
    return kept


class KeywordMatcher:
    """Evaluates a RuleTables instance against text. Holds no per-call state."""

    def __init__(self, rule_tables: RuleTables):
        self.rule_tables = rule_tables

    def match(self, text: str, full_context: str | None = None, product_id: str | None = None) -> list[KeywordMatch]:
        """
        Raw matches for every tier, in tier order then text order.

        full_context is only used to look up the footnote of a marker written
        right after a conditional keyword when the segment itself lacks it.
        """
        if not text:
            return []

        tables = self.rule_tables.for_product(product_id)
        footnotes = find_footnotes(text, AnnotationScope.SEGMENT)
        masked = [(f.position, f.end) for f in footnotes]
        if full_context is not None and full_context != text:
            footnotes = footnotes + find_footnotes(full_context, AnnotationScope.FULL_TEXT)

        matches = []
        for tier in TIER_ORDER:
            hits = []
            for order, rule in enumerate(tables.rules_for(tier)):
                try:
                    hits.extend(_evaluate_rule(rule, order, text))
                except (re.error, TypeError, ValueError, RecursionError) as exc:
                    self._skip_rule(rule, exc)

            if tier in MASKED_TIERS:
                hits = [h for h in hits if not _inside(h.start, h.end, masked)]

            for hit in longest_hits(hits):
                matches.append(self._to_match(hit, text, footnotes))
        return matches

    def _skip_rule(self, rule: KeywordRule, exc: Exception) -> None:
        message = f"rule {rule.id} skipped: {exc}"
        logger.warning("keyword_matcher.rule_skipped", rule_id=rule.id, error=str(exc))
        warnings.warn(message, PatternEvaluationWarning, stacklevel=3)

    def _to_match(self, hit: _Hit, text: str, footnotes) -> KeywordMatch:
        rule = hit.rule
        marker = footnote = None
        if rule.tier is Tier.CONDITIONAL:
            span = marker_at(text, hit.end)
            if span is not None:
                marker = span.marker
                footnote = resolve_footnote(marker, footnotes)

        qualifier = hit.qualifier
        return KeywordMatch(
            keyword=rule.primary_keyword,
            matched_text=hit.matched_text,
            tier=rule.tier,
            category=rule.category,
            severity=qualifier.severity if qualifier else rule.severity,
            regulatory_class=rule.regulatory_class,
            rationale=rule.rationale,
            reference_hint=rule.reference_hint,
            acceptable_rewrite=rule.acceptable_rewrite,
            required_annotation=rule.required_annotation,
            rule_id=rule.id,
            position=Position(start=hit.start, end=hit.end),
            marker=marker,
            footnote_text=footnote.footnote_text if footnote else None,
            context_reason=qualifier.reason if qualifier else None,
        )


def match(
    text: str,
    rule_tables: RuleTables,
    full_context: str | None = None,
    product_id: str | None = None,
) -> list[KeywordMatch]:
    return KeywordMatcher(rule_tables).match(text, full_context, product_id)
