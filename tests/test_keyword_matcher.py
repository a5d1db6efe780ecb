"""Tests for screening.keyword_matcher."""
import re

import pytest

from models.rule_catalog import Severity, Tier
from screening import keyword_matcher
from screening.errors import PatternEvaluationWarning
from screening.keyword_matcher import KeywordMatcher, excepted_usage, find_all, match, qualifying_pattern


def _found(matches, tier):
    return [m.matched_text for m in matches if m.tier is tier]


class TestFindAll:
    def test_non_overlapping(self) -> None:
        assert find_all("ababab", "aba") == [0]
        assert find_all("クマとクマ", "クマ") == [0, 3]

    def test_absent(self) -> None:
        assert find_all("目元ケア", "クマ") == []


class TestAbsoluteTier:
    def test_detects_fukemie(self, tables) -> None:
        matches = match("老け見え印象対策", tables)
        assert _found(matches, Tier.ABSOLUTE) == ["老け見え"]

    def test_reported_inside_footnotes(self, tables) -> None:
        matches = match("目元ケア\n※1治療を目的としたものではありません", tables)
        assert "治療" in _found(matches, Tier.ABSOLUTE)

    def test_synonyms(self, tables) -> None:
        matches = match("肌が蘇る", tables)
        assert _found(matches, Tier.ABSOLUTE) == ["蘇る"]
        assert matches[0].keyword == "よみがえる"

    def test_longest_keyword_wins_within_tier(self, tables) -> None:
        matches = match("シワ改善クリーム", tables)
        assert _found(matches, Tier.ABSOLUTE) == ["シワ改善"]


class TestConditionalTier:
    def test_flags_unannotated_terms(self, tables) -> None:
        matches = match("ヒアルロン酸直注入で目元ケア", tables)
        assert _found(matches, Tier.CONDITIONAL) == ["ヒアルロン酸", "注入"]

    def test_no_false_positive_for_unlisted_synonym(self, tables) -> None:
        matches = match("刺すヒアルロン酸でクマ対策", tables)
        assert "刺す" not in [m.matched_text for m in matches]
        assert _found(matches, Tier.CONDITIONAL) == ["ヒアルロン酸", "クマ"]

    def test_records_marker_and_footnote(self, tables) -> None:
        matches = match("ヒアルロン酸※1配合 ※1保湿成分", tables)
        hit = [m for m in matches if m.matched_text == "ヒアルロン酸"][0]
        assert hit.marker == "※1"
        assert hit.footnote_text == "保湿成分"
        assert hit.required_annotation == "※保湿成分"

    def test_footnote_from_full_context(self, tables) -> None:
        matches = match("ヒアルロン酸※1配合", tables, full_context="ヒアルロン酸※1配合\n※1保湿成分")
        assert matches[0].marker == "※1"
        assert matches[0].footnote_text == "保湿成分"

    def test_ignored_inside_footnote_body(self, tables) -> None:
        matches = match("目元ケア\n※1ヒアルロン酸は保湿成分です", tables)
        assert _found(matches, Tier.CONDITIONAL) == []

    def test_position(self, tables) -> None:
        text = "刺すヒアルロン酸"
        hit = match(text, tables)[0]
        assert text[hit.position.start:hit.position.end] == "ヒアルロン酸"

    def test_general_explanation_is_excepted(self, tables) -> None:
        matches = match("一般的にヒアルロン酸は分子が大きいと言われています", tables)
        assert _found(matches, Tier.CONDITIONAL) == []

    def test_exception_only_covers_its_rule(self, tables) -> None:
        matches = match("従来のコラーゲンとヒアルロン酸", tables)
        assert _found(matches, Tier.CONDITIONAL) == ["コラーゲン"]

    def test_excepted_usage_helper(self, tables) -> None:
        rule = tables.get("conditional.ingredient.hyaluronic-acid")
        assert excepted_usage(rule, "一般的にヒアルロン酸は分子が大きい") == "一般知識の説明"
        assert excepted_usage(rule, "ヒアルロン酸たっぷり配合") is None

    def test_product_variant_exception(self, tables) -> None:
        assert match("表皮まで浸透", tables, product_id="HA") == []
        assert _found(match("肌の奥まで浸透", tables, product_id="HA"), Tier.CONDITIONAL) == ["浸透"]


class TestContextDependentTier:
    def test_qualifying_phrase_flags(self, tables) -> None:
        matches = match("週に1回貼って寝るだけで若々しい肌があなたのものに", tables)
        context = [m for m in matches if m.tier is Tier.CONTEXT_DEPENDENT]
        assert [m.matched_text for m in context] == ["若々しい"]
        assert context[0].severity is Severity.HIGH
        assert context[0].context_reason

    def test_allowed_phrase_is_not_flagged(self, tables) -> None:
        assert match("ハリやツヤが出て、若々しい印象の目の下に導きます", tables) == []

    def test_keyword_alone_is_not_flagged(self, tables) -> None:
        assert _found(match("若々しい毎日を", tables), Tier.CONTEXT_DEPENDENT) == []

    def test_severity_from_pattern(self, tables) -> None:
        matches = match("若々しい肌を約束", tables)
        context = [m for m in matches if m.tier is Tier.CONTEXT_DEPENDENT]
        assert context[0].severity is Severity.CRITICAL

    def test_qualifying_pattern_helper(self, tables) -> None:
        rule = tables.get("context.limited-time.imanara")
        assert qualifying_pattern(rule, "今なら半額") is not None
        assert qualifying_pattern(rule, "今は割引、今ならお得") is None


class TestTierIndependence:
    def test_absolute_and_conditional_both_fire(self, tables) -> None:
        matches = match("クマ専用クリーム", tables)
        assert _found(matches, Tier.ABSOLUTE) == ["クマ専用"]
        assert _found(matches, Tier.CONDITIONAL) == ["クマ"]

    def test_refund_guarantee_double_fires(self, tables) -> None:
        matches = match("全額返金保証付き", tables)
        assert _found(matches, Tier.CONDITIONAL) == ["全額返金保証"]
        assert _found(matches, Tier.ABSOLUTE) == ["保証"]


class TestProducts:
    def test_no_product_uses_first_variant_once(self, tables) -> None:
        matches = match("角質層まで浸透", tables)
        assert [m.rule_id for m in matches] == ["conditional.penetration.shinto.ha"]

    def test_product_variant(self, tables) -> None:
        matches = match("爪の奥まで浸透", tables, product_id="SH")
        assert {m.rule_id for m in matches} == {"conditional.penetration.shinto.sh", "product.SH.爪の奥"}

    def test_unknown_product_uses_unrestricted_rules(self, tables) -> None:
        assert match("角質層まで浸透", tables, product_id="ZZ") == []


class TestRobustness:
    def test_empty_text(self, tables) -> None:
        assert match("", tables) == []

    def test_failing_rule_is_skipped(self, tables, monkeypatch) -> None:
        evaluate = keyword_matcher._evaluate_rule

        def flaky(rule, order, text):
            if rule.id == "absolute.rejuvenation.fukemie":
                raise re.error("broken pattern")
            return evaluate(rule, order, text)

        monkeypatch.setattr(keyword_matcher, "_evaluate_rule", flaky)
        with pytest.warns(PatternEvaluationWarning):
            matches = KeywordMatcher(tables).match("老け見えを治す")
        assert _found(matches, Tier.ABSOLUTE) == ["治す"]
