"""Tests for screening.rule_tables and the rule catalog schema."""
import json

import pytest
from pydantic import ValidationError

from models.rule_catalog import KeywordRule, RegulatoryClass, Tier
from screening.config import ScreeningConfig
from screening.errors import RuleTableLoadError
from screening.rule_tables import RuleTables
from screening.rules.absolute import ABSOLUTE_RULES
from screening.rules.conditional import CONDITIONAL_RULES
from screening.rules.context_dependent import CONTEXT_DEPENDENT_RULES


def _rule(**overrides) -> dict:
    record = {
        "id": "absolute.test",
        "keyword": "若返る",
        "tier": "absolute",
        "category": "rejuvenation",
        "severity": "critical",
        "regulatory_class": "pharmaceutical-affairs",
        "rationale": "test",
    }
    record.update(overrides)
    return record


def _context_rule(**overrides) -> dict:
    record = _rule(
        id="context.test",
        keyword="若見え",
        tier="context-dependent",
        severity="high",
        ng_patterns=[{"pattern": "だけで.{0,20}若見え", "reason": "test"}],
    )
    record.update(overrides)
    return record


class TestDefaultCatalog:
    def test_every_tier_is_populated(self, tables) -> None:
        assert tables.absolute
        assert tables.conditional
        assert tables.context_dependent

    def test_stats(self, tables) -> None:
        stats = tables.stats()
        assert stats["total"] == len(tables)
        assert stats["absolute"] + stats["conditional"] + stats["context-dependent"] == stats["total"]

    def test_ids_are_unique(self, tables) -> None:
        ids = [r.id for r in tables]
        assert len(ids) == len(set(ids))

    def test_groupings(self, tables) -> None:
        assert "kuma" in tables.by_category()
        assert set(tables.by_severity()) == {"low", "medium", "high", "critical"}
        assert sum(len(v) for v in tables.by_severity().values()) == len(tables)

    def test_products(self, tables) -> None:
        assert set(tables.products) == {"HA", "SH"}

    def test_regulatory_labels(self) -> None:
        assert RegulatoryClass.FAIR_DISPLAY.label == "景表法違反"

    def test_bundled_catalog_loads(self) -> None:
        assert RuleTables.default().stats() == {"absolute": 26, "conditional": 19, "context-dependent": 6, "total": 51}

    def test_bundled_records_declare_their_tier(self) -> None:
        for records, tier in (
            (ABSOLUTE_RULES, "absolute"),
            (CONDITIONAL_RULES, "conditional"),
            (CONTEXT_DEPENDENT_RULES, "context-dependent"),
        ):
            assert {r["tier"] for r in records} == {tier}


class TestRuleSchema:
    def test_single_keyword_becomes_tuple(self) -> None:
        assert KeywordRule.model_validate(_rule()).keyword == ("若返る",)

    def test_duplicate_synonyms_collapse(self) -> None:
        rule = KeywordRule.model_validate(_rule(keyword=["若返る", "若返り", "若返る"]))
        assert rule.keyword == ("若返る", "若返り")
        assert rule.primary_keyword == "若返る"

    def test_rules_are_frozen(self) -> None:
        rule = KeywordRule.model_validate(_rule())
        with pytest.raises(ValidationError):
            rule.severity = "low"

    def test_context_rule_compiles_patterns(self) -> None:
        rule = KeywordRule.model_validate(_context_rule())
        assert rule.ng_patterns[0].pattern.search("貼るだけで若見え")

    def test_conditional_rule_compiles_exceptions(self) -> None:
        exception = {"condition": "他社商品の説明", "allowed_pattern": "従来の"}
        rule = KeywordRule.model_validate(_rule(tier="conditional", exceptions=[exception]))
        assert rule.exceptions[0].allowed_pattern.search("従来のクリーム")


class TestLoadErrors:
    def test_missing_field(self) -> None:
        record = _rule()
        del record["tier"]
        with pytest.raises(RuleTableLoadError, match="absolute.test"):
            RuleTables.from_records([record])

    def test_blank_keyword(self) -> None:
        with pytest.raises(RuleTableLoadError):
            RuleTables.from_records([_rule(keyword=["若返る", " "])])

    def test_bad_regex(self) -> None:
        bad = _context_rule(ng_patterns=[{"pattern": "(unclosed", "reason": "test"}])
        with pytest.raises(RuleTableLoadError):
            RuleTables.from_records([bad])

    def test_context_rule_without_ng_patterns(self) -> None:
        with pytest.raises(RuleTableLoadError):
            RuleTables.from_records([_context_rule(ng_patterns=[])])

    def test_patterns_on_absolute_rule(self) -> None:
        with pytest.raises(RuleTableLoadError):
            RuleTables.from_records([_rule(ng_patterns=[{"pattern": "x", "reason": "y"}])])

    def test_exceptions_on_absolute_rule(self) -> None:
        exception = {"condition": "一般知識の説明", "allowed_pattern": "一般的"}
        with pytest.raises(RuleTableLoadError):
            RuleTables.from_records([_rule(exceptions=[exception])])

    def test_duplicate_ids(self) -> None:
        with pytest.raises(RuleTableLoadError, match="Duplicate rule ids"):
            RuleTables.from_records([_rule(), _rule(keyword="蘇る")])

    def test_unknown_field(self) -> None:
        with pytest.raises(RuleTableLoadError):
            RuleTables.from_records([_rule(weight=3)])

    def test_non_mapping_record(self) -> None:
        with pytest.raises(RuleTableLoadError):
            RuleTables.from_records(["若返る"])


class TestJson:
    def test_from_json(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"rules": [_rule(), _context_rule()]}, ensure_ascii=False), encoding="utf-8")
        tables = RuleTables.from_json(path)
        assert tables.stats() == {"absolute": 1, "conditional": 0, "context-dependent": 1, "total": 2}

    def test_plain_list(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps([_rule()]), encoding="utf-8")
        assert len(RuleTables.from_json(path)) == 1

    def test_invalid_json(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RuleTableLoadError):
            RuleTables.from_json(path)

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(RuleTableLoadError):
            RuleTables.from_json(tmp_path / "absent.json")

    def test_load_uses_config_path(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps([_rule()]), encoding="utf-8")
        assert len(RuleTables.load(ScreeningConfig(rules_path=str(path)))) == 1


class TestForProduct:
    def test_none_returns_same_table(self, tables) -> None:
        assert tables.for_product(None) is tables

    def test_product_rules_are_generated(self, tables) -> None:
        ha = tables.for_product("HA")
        generated = ha.get("product.HA.マイクロニードル")
        assert generated is not None
        assert generated.tier is Tier.CONDITIONAL
        assert generated.required_annotation == "※ヒアルロン酸を固めて作った微細な針"

    def test_optional_annotations_are_not_generated(self, tables) -> None:
        assert tables.for_product("HA").get("product.HA.ハリ") is None

    def test_other_product_variants_are_excluded(self, tables) -> None:
        ha_ids = {r.id for r in tables.for_product("HA")}
        assert "conditional.penetration.shinto.ha" in ha_ids
        assert "conditional.penetration.shinto.sh" not in ha_ids

    def test_unknown_product(self, tables) -> None:
        ids = {r.id for r in tables.for_product("ZZ")}
        assert "conditional.penetration.shinto.ha" not in ids
        assert "absolute.rejuvenation.fukemie" in ids

    def test_source_table_is_untouched(self, tables) -> None:
        before = len(tables)
        tables.for_product("SH")
        assert len(tables) == before
        assert tables.get("product.SH.トッププレート") is None
