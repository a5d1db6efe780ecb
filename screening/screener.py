"""
ComplianceScreener: wires Segmenter, Annotation Analyzer, Keyword Matcher
and Violation Aggregator around one RuleTables / ScreeningConfig pair.
"""

import structlog

from models.screening_output import DocumentScreening, Segment, SegmentScreening, ValidationResult
from screening.aggregator import ViolationAggregator, combine_results
from screening.annotations import AnnotationAnalyzer
from screening.config import ScreeningConfig, load_config
from screening.keyword_matcher import KeywordMatcher
from screening.rule_tables import RuleTables
from screening.segmenter import Segmenter

logger = structlog.get_logger(__name__)


class ComplianceScreener:
    def __init__(self, rule_tables: RuleTables | None = None, config: ScreeningConfig | None = None):
        self.config = config or load_config()
        self.rule_tables = rule_tables or RuleTables.load(self.config)
        self.segmenter = Segmenter(self.config)
        self.analyzer = AnnotationAnalyzer()
        self.matcher = KeywordMatcher(self.rule_tables)
        self.aggregator = ViolationAggregator()

    def _product(self, product_id: str | None) -> str | None:
        return product_id if product_id is not None else self.config.product_id

    def validate(self, text: str, full_context: str | None = None, product_id: str | None = None) -> ValidationResult:
        """Analyze, match and aggregate one piece of text (usually a segment)."""
        return self.screen_segment(text, full_context, product_id).result

    def screen_segment(
        self,
        text: str,
        full_text: str | None = None,
        product_id: str | None = None,
        segment: Segment | None = None,
    ) -> SegmentScreening:
        self.segmenter.validate(text)
        product_id = self._product(product_id)
        analysis = self.analyzer.analyze(text, full_text)
        raw_matches = self.matcher.match(text, full_text, product_id)
        result = self.aggregator.aggregate(raw_matches, analysis.bindings)
        return SegmentScreening(segment=segment, annotations=analysis, result=result)

    def screen_document(self, text: str, product_id: str | None = None) -> DocumentScreening:
        """Segment the ad, screen every segment against the full text, and merge."""
        product_id = self._product(product_id)
        segments = self.segmenter.run(text).segments
        screenings = [
            self.screen_segment(s.text, text, product_id, segment=s)
            for s in segments
            if s.text.strip()
        ]
        result = combine_results(sc.result for sc in screenings)
        logger.info(
            "screener.document_screened",
            product_id=product_id,
            segments=len(segments),
            violations=result.summary.total,
            suppressed=len(result.suppressed_matches),
        )
        return DocumentScreening(product_id=product_id, segments=segments, screenings=screenings, result=result)
