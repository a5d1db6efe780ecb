"""
Annotation Analyzer.

Finds keyword+marker occurrences (ヒアルロン酸※1), marker+footnote
occurrences (※1保湿成分), and binds each marker to its footnote. Footnotes in
the segment itself take precedence over footnotes elsewhere in the ad.
"""

import re
from typing import Iterable, NamedTuple

import structlog

from models.screening_output import (
    AnnotationAnalysis,
    AnnotationBinding,
    AnnotationScope,
    Footnote,
    MarkerOccurrence,
)

logger = structlog.get_logger(__name__)

# Marker families. Only ※ may appear without a numeral.
MARKER_SYMBOLS = {"※": "※", "*": "*", "＊": "*", "注": "注"}
_MARKER = re.compile(r"(?P<symbol>※|[*＊]|注)(?P<number>[0-9０-９]*)(?![0-9０-９])")

# Ordered footnote shapes; all are applied and merged by (marker, position).
FOOTNOTE_PATTERNS = [
    # （※1 保湿成分） / (*1: 角質層まで)
    re.compile(r"[（(]\s*(?P<symbol>※|[*＊]|注)(?P<number>[0-9０-９]*)(?![0-9０-９])[\s:：]*(?P<body>[^）)]+)[）)]"),
    # ※1：角質層まで / ※1 角質層まで at the start of a line
    re.compile(r"^(?P<symbol>※|[*＊]|注)(?P<number>[0-9０-９]*)(?![0-9０-９])[ \t　:：]+(?P<body>.+)$", re.MULTILINE),
    # ※1角質層まで at the start of a line
    re.compile(r"^(?P<symbol>※|[*＊])(?P<number>[0-9０-９]*)(?![0-9０-９])(?P<body>[^\s※:：][^\n※]*)", re.MULTILINE),
    # ... ※1保湿成分  (marker after whitespace, explanation up to the next whitespace)
    re.compile(r"(?<=\s)(?P<symbol>※|[*＊]|注)(?P<number>[0-9０-９]*)(?![0-9０-９])[:：]?(?P<body>[^※\s:：]\S*)"),
]

# Scripts a keyword candidate may be made of; the run must be a single script.
_SCRIPTS = (
    re.compile(r"[ァ-ヶー]"),
    re.compile(r"[一-龠々]"),
    re.compile(r"[ぁ-ん]"),
    re.compile(r"[A-Za-z0-9Ａ-Ｚａ-ｚ０-９]"),
)


class MarkerSpan(NamedTuple):
    marker: str
    start: int
    end: int


def normalize_marker(symbol: str, number: str) -> str | None:
    """Canonical marker text ('※１' → '※1'); None for a word/ASCII marker without a numeral."""
    symbol = MARKER_SYMBOLS[symbol]
    if not number:
        return symbol if symbol == "※" else None
    return f"{symbol}{int(number)}"


def marker_at(text: str, pos: int) -> MarkerSpan | None:
    """The marker starting exactly at pos, if any."""
    m = _MARKER.match(text, pos)
    if not m:
        return None
    marker = normalize_marker(m.group("symbol"), m.group("number"))
    if marker is None:
        return None
    return MarkerSpan(marker, m.start(), m.end())


def keyword_candidate(text: str, end: int) -> tuple[int, str] | None:
    """Same-script run ending right before `end`, as (start, run)."""
    if end <= 0:
        return None
    script = next((s for s in _SCRIPTS if s.match(text[end - 1])), None)
    if script is None:
        return None
    start = end - 1
    while start > 0 and script.match(text[start - 1]):
        start -= 1
    return start, text[start:end]


def find_marker_occurrences(text: str) -> list[MarkerOccurrence]:
    occurrences = []
    for m in _MARKER.finditer(text):
        marker = normalize_marker(m.group("symbol"), m.group("number"))
        if marker is None:
            continue
        candidate = keyword_candidate(text, m.start())
        if candidate is None:
            continue
        start, keyword = candidate
        occurrences.append(MarkerOccurrence(keyword=keyword, marker=marker, position=start))
    return occurrences


def find_footnotes(text: str, scope: AnnotationScope = AnnotationScope.SEGMENT) -> list[Footnote]:
    """Every footnote shape, merged; the first pattern to claim a (marker, position) wins."""
    found: dict[tuple[str, int], Footnote] = {}
    for pattern in FOOTNOTE_PATTERNS:
        for m in pattern.finditer(text):
            marker = normalize_marker(m.group("symbol"), m.group("number"))
            body = m.group("body").strip()
            if marker is None or not body:
                continue
            key = (marker, m.start())
            if key in found:
                continue
            found[key] = Footnote(
                marker=marker,
                footnote_text=body,
                position=m.start(),
                end=m.end(),
                scope=scope,
            )
    return sorted(found.values(), key=lambda f: f.position)


def resolve_footnote(marker: str, footnotes: Iterable[Footnote]) -> Footnote | None:
    """First footnote for the marker, segment scope before full-text scope."""
    fallback = None
    for footnote in footnotes:
        if footnote.marker != marker:
            continue
        if footnote.scope is AnnotationScope.SEGMENT:
            return footnote
        if fallback is None:
            fallback = footnote
    return fallback


def bind(occurrences: Iterable[MarkerOccurrence], footnotes: list[Footnote]) -> list[AnnotationBinding]:
    bindings = []
    for occurrence in occurrences:
        footnote = resolve_footnote(occurrence.marker, footnotes)
        if footnote is None:
            logger.debug("annotations.unbound_marker", keyword=occurrence.keyword, marker=occurrence.marker)
        bindings.append(
            AnnotationBinding(
                keyword=occurrence.keyword,
                marker=occurrence.marker,
                footnote_text=footnote.footnote_text if footnote else None,
                scope=footnote.scope if footnote else None,
                is_valid=footnote is not None,
                position=occurrence.position,
            )
        )
    return bindings


class AnnotationAnalyzer:
    """Stateless; one instance can serve any number of segments concurrently."""

    def analyze(self, segment_text: str, full_text: str | None = None) -> AnnotationAnalysis:
        occurrences = find_marker_occurrences(segment_text)
        if not occurrences:
            return AnnotationAnalysis()

        footnotes = find_footnotes(segment_text, AnnotationScope.SEGMENT)
        if full_text is not None and full_text != segment_text:
            footnotes += find_footnotes(full_text, AnnotationScope.FULL_TEXT)

        return AnnotationAnalysis(
            marker_occurrences=occurrences,
            footnotes=footnotes,
            bindings=bind(occurrences, footnotes),
            has_annotated_keywords=True,
        )


def analyze(segment_text: str, full_text: str | None = None) -> AnnotationAnalysis:
    return AnnotationAnalyzer().analyze(segment_text, full_text)


def format_annotation_analysis(analysis: AnnotationAnalysis) -> str:
    if not analysis.has_annotated_keywords:
        return "No annotated keywords."

    lines = [f"Annotated keywords: {len(analysis.marker_occurrences)}"]
    for binding in analysis.bindings:
        status = "OK" if binding.is_valid else "MISSING"
        lines.append(f"  [{status}] {binding.keyword}{binding.marker}")
        if binding.footnote_text:
            lines.append(f"        → {binding.marker} {binding.footnote_text} ({binding.scope.value})")
    return "\n".join(lines)
