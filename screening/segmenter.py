"""
Segmenter: splits ad copy into ordered, contiguous, typed segments.

Boundaries, strongest first:
  1. structural lead-ins: a 【…】 block is a segment of its own
  2. line breaks (the newline stays with the line it ends)
  3. sentence-final punctuation (。！？ and closing brackets right after)
  4. otherwise the remainder is one segment

Every character of the input belongs to exactly one segment, so joining the
segment texts in order gives back the input.
"""

import re
import time

import structlog

from models.screening_output import Position, Segment, SegmentationResult, SegmentType
from screening.config import DEFAULT_MAX_TEXT_LENGTH, ScreeningConfig
from screening.errors import InvalidInputError

logger = structlog.get_logger(__name__)

_LEAD_IN = re.compile(r"【[^【】\n]*】")
_LINE_BREAK = re.compile(r"(?:\r\n|\r|\n)[ \t　]*")
_SENTENCE_END = re.compile(r"[。．！？!?]+[」』）)]*[ \t　]*")
# A marker closing a sentence (世界一。※1) belongs to that sentence.
_TRAILING_MARKER = re.compile(r"(?:※[0-9０-９]*|[*＊注][0-9０-９]+)[ \t　]*(?=[\r\n]|$)")
_FOOTNOTE_LINE = re.compile(r"^\s*(?:※|[*＊][0-9０-９]|注[0-9０-９])")

# Ordered cue lists; the first type with a matching cue wins.
SEGMENT_TYPE_CUES = [
    (SegmentType.DISCLAIMER, [
        _FOOTNOTE_LINE.pattern,
        r"個人差があります",
        r"効果.{0,10}(?:保証|約束)するものではありません",
        r"効果・効能を示すものではありません",
        r"画像はイメージです",
        r"(?:自社|当社)調べ",
    ]),
    (SegmentType.CTA, [
        r"[0-9０-９][0-9０-９,，]*円",
        r"税込",
        r"送料無料",
        r"今なら|いまなら|今だけ|いまだけ",
        r"(?:期間|数量)限定",
        r"先着",
        r"実質(?:無料|0円)",
        r"返金保証",
        r"OFF|オフ|割引|半額",
        r"お申し?込み|ご購入|ご注文",
        r"今すぐ|こちらから|クリック|タップ",
    ]),
    (SegmentType.EVIDENCE, [
        r"[0-9０-９]+(?:\.[0-9０-９]+)?\s*[%％]",
        r"[0-9０-９][0-9０-９,，]*\s*(?:人|名|件|万個|万本|万枚)",
        r"満足度",
        r"調査",
        r"試験",
        r"臨床",
        r"データ",
        r"ランキング",
        r"(?:No|NO|Ｎｏ)\.?\s*[1１]|第?[1１一]位",
        r"[0-9０-９]+年連続",
        r"[0-9０-９.]+\s*(?:mg|ｍｇ|本の)",
    ]),
    (SegmentType.EXPLANATION, [
        r"なぜなら|というのも",
        r"だから|そのため|それで",
        r"ため[、,]|ので[、,]?|から[、,]",
        r"によって|により",
        r"つまり",
        r"ことで",
        r"理由",
    ]),
    (SegmentType.CLAIM, [
        r"^【[^】]*】",
        r"[！!]\s*$",
        r"(?:ます|です|でした|ました)[。．！!]?\s*$",
        r"導きます|叶えます|実現|配合|誕生|登場|新発売",
        r"(?:ケア|対策|習慣|肌|目元)[。．！!]?\s*$",
        r"(?:に|へ)[。．！!]?\s*$",
    ]),
]

# One alternation per type, so classifying a segment costs one search per type.
_COMPILED_CUES = [
    (seg_type, re.compile("|".join(f"(?:{cue})" for cue in cues)))
    for seg_type, cues in SEGMENT_TYPE_CUES
]


def classify(text: str) -> SegmentType:
    """First segment type whose cues match the text; unknown otherwise."""
    if not text.strip():
        return SegmentType.UNKNOWN
    for seg_type, cue in _COMPILED_CUES:
        if cue.search(text):
            return seg_type
    return SegmentType.UNKNOWN


def _cut_points(text: str) -> list[int]:
    cuts = set()

    for m in _LEAD_IN.finditer(text):
        cuts.add(m.start())
        cuts.add(m.end())

    for m in _LINE_BREAK.finditer(text):
        cuts.add(m.end())

    for m in _SENTENCE_END.finditer(text):
        end = m.end()
        trailing = _TRAILING_MARKER.match(text, end)
        if trailing:
            end = trailing.end()
        cuts.add(end)

    return sorted(c for c in cuts if 0 < c < len(text))


def _spans(text: str) -> list[tuple[int, int]]:
    bounds = [0] + _cut_points(text) + [len(text)]
    spans = [(a, b) for a, b in zip(bounds, bounds[1:]) if a < b]

    # Whitespace-only spans join the previous span (the next one when leading).
    merged: list[tuple[int, int]] = []
    pending_start = None
    for start, end in spans:
        if not text[start:end].strip():
            if merged:
                merged[-1] = (merged[-1][0], end)
            elif pending_start is None:
                pending_start = start
            continue
        if pending_start is not None:
            start, pending_start = pending_start, None
        merged.append((start, end))

    if pending_start is not None:
        # The whole input is whitespace.
        merged.append((pending_start, len(text)))
    return merged


class Segmenter:
    def __init__(self, config: ScreeningConfig | None = None):
        self.max_text_length = config.max_text_length if config else DEFAULT_MAX_TEXT_LENGTH

    def validate(self, text) -> str:
        if not isinstance(text, str):
            raise InvalidInputError(f"Ad copy must be a string, got {type(text).__name__}")
        if not text:
            raise InvalidInputError("Ad copy is empty")
        if len(text) > self.max_text_length:
            raise InvalidInputError(
                f"Ad copy is {len(text)} characters; the maximum is {self.max_text_length}"
            )
        return text

    def segment(self, text: str) -> list[Segment]:
        text = self.validate(text)
        return [
            Segment(
                id=f"seg_{index:03d}",
                text=text[start:end],
                type=classify(text[start:end]),
                position=Position(start=start, end=end),
            )
            for index, (start, end) in enumerate(_spans(text), start=1)
        ]

    def run(self, text: str) -> SegmentationResult:
        started = time.perf_counter()
        segments = self.segment(text)
        elapsed_ms = (time.perf_counter() - started) * 1000

        covered = sum(s.position.end - s.position.start for s in segments)
        coverage = covered / len(text)
        logger.info(
            "segmenter.completed",
            segments=len(segments),
            characters=len(text),
            elapsed_ms=round(elapsed_ms, 3),
            coverage=coverage,
        )
        return SegmentationResult(segments=segments, processing_time_ms=elapsed_ms, coverage=coverage)


def segment(text: str, config: ScreeningConfig | None = None) -> list[Segment]:
    return Segmenter(config).segment(text)


def format_segments(segments: list[Segment]) -> str:
    lines = []
    for s in segments:
        preview = s.text.replace("\n", "\\n")
        lines.append(f"[{s.id}] {s.type.value:<11} {s.position.start:>5}-{s.position.end:<5} {preview}")
    return "\n".join(lines)
