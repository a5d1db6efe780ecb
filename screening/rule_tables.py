"""
Rule Tables: the validated, read-only catalog every component reads from.

Built once (from the bundled rule modules, a list of records, or a JSON
file) and never mutated afterwards. Construction is all-or-nothing: any
malformed record raises RuleTableLoadError and no table is returned.
"""

import json
from collections import Counter
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

import structlog
from pydantic import ValidationError

from models.rule_catalog import KeywordRule, ProductProfile, Severity, Tier
from screening.config import ScreeningConfig
from screening.errors import RuleTableLoadError
from screening.rules.absolute import ABSOLUTE_RULES
from screening.rules.conditional import CONDITIONAL_RULES
from screening.rules.context_dependent import CONTEXT_DEPENDENT_RULES
from screening.rules.products import PRODUCT_PROFILES

logger = structlog.get_logger(__name__)

TIER_ORDER = (Tier.ABSOLUTE, Tier.CONDITIONAL, Tier.CONTEXT_DEPENDENT)


def _record_label(index: int, record) -> str:
    """Human-readable pointer to a raw record for error messages."""
    rule_id = record.get("id") if isinstance(record, Mapping) else None
    return f"#{index} ({rule_id})" if rule_id else f"#{index}"


def _validate_rules(records: Iterable) -> list[KeywordRule]:
    rules = []
    for index, record in enumerate(records):
        if isinstance(record, KeywordRule):
            rules.append(record)
            continue
        try:
            rules.append(KeywordRule.model_validate(record))
        except ValidationError as exc:
            raise RuleTableLoadError(f"Rule {_record_label(index, record)} is malformed: {exc}") from exc
    return rules


def _validate_products(records: Iterable) -> list[ProductProfile]:
    products = []
    for index, record in enumerate(records):
        if isinstance(record, ProductProfile):
            products.append(record)
            continue
        try:
            products.append(ProductProfile.model_validate(record))
        except ValidationError as exc:
            raise RuleTableLoadError(f"Product {_record_label(index, record)} is malformed: {exc}") from exc
    return products


class RuleTables:
    """Immutable catalog of keyword rules grouped by tier, plus product profiles."""

    def __init__(self, rules: Iterable[KeywordRule], products: Iterable[ProductProfile] = ()):
        rules = tuple(rules)
        products = tuple(products)

        duplicate_rules = [rule_id for rule_id, n in Counter(r.id for r in rules).items() if n > 1]
        if duplicate_rules:
            raise RuleTableLoadError(f"Duplicate rule ids: {', '.join(sorted(duplicate_rules))}")
        duplicate_products = [pid for pid, n in Counter(p.id for p in products).items() if n > 1]
        if duplicate_products:
            raise RuleTableLoadError(f"Duplicate product ids: {', '.join(sorted(duplicate_products))}")

        self._rules = rules
        self._by_tier = MappingProxyType({tier: tuple(r for r in rules if r.tier is tier) for tier in TIER_ORDER})
        self._products = MappingProxyType({p.id: p for p in products})

    # ── Construction ─────────────────────────────────────────────

    @classmethod
    def from_records(cls, rule_records: Iterable, product_records: Iterable = ()) -> "RuleTables":
        """Validate raw dict records (as written in screening/rules/) into a table."""
        tables = cls(_validate_rules(rule_records), _validate_products(product_records))
        logger.debug("rule_tables.loaded", **tables.stats(), products=len(tables.products))
        return tables

    @classmethod
    def from_json(cls, path: str | Path) -> "RuleTables":
        """Load {"rules": [...], "products": [...]} from a JSON file."""
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                payload = json.load(f)
        except (OSError, json.JSONDecodeError) as exc:
            raise RuleTableLoadError(f"Cannot read rule catalog {path}: {exc}") from exc

        if isinstance(payload, list):
            payload = {"rules": payload}
        if not isinstance(payload, dict) or not isinstance(payload.get("rules"), list):
            raise RuleTableLoadError(f"Rule catalog {path} must contain a 'rules' list")
        return cls.from_records(payload["rules"], payload.get("products") or [])

    @classmethod
    def default(cls) -> "RuleTables":
        """The bundled catalog."""
        return cls.from_records(
            ABSOLUTE_RULES + CONDITIONAL_RULES + CONTEXT_DEPENDENT_RULES,
            PRODUCT_PROFILES,
        )

    @classmethod
    def load(cls, config: ScreeningConfig) -> "RuleTables":
        """The JSON catalog named by the config, or the bundled one."""
        if config.rules_path:
            return cls.from_json(config.rules_path)
        return cls.default()

    # ── Read access ──────────────────────────────────────────────

    @property
    def rules(self) -> tuple[KeywordRule, ...]:
        return self._rules

    @property
    def absolute(self) -> tuple[KeywordRule, ...]:
        return self._by_tier[Tier.ABSOLUTE]

    @property
    def conditional(self) -> tuple[KeywordRule, ...]:
        return self._by_tier[Tier.CONDITIONAL]

    @property
    def context_dependent(self) -> tuple[KeywordRule, ...]:
        return self._by_tier[Tier.CONTEXT_DEPENDENT]

    @property
    def products(self) -> Mapping[str, ProductProfile]:
        return self._products

    def rules_for(self, tier: Tier) -> tuple[KeywordRule, ...]:
        return self._by_tier[tier]

    def get(self, rule_id: str) -> KeywordRule | None:
        return next((r for r in self._rules if r.id == rule_id), None)

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    # ── Product variants ─────────────────────────────────────────

    def for_product(self, product_id: str | None) -> "RuleTables":
        """
        Rules applicable to one product.

        Keeps unrestricted rules and rules listing the product, then adds a
        conditional rule for each required product annotation keyword that no
        kept conditional rule already covers. None returns this table as is.
        """
        if product_id is None:
            return self

        profile = self._products.get(product_id)
        if profile is None:
            logger.warning("rule_tables.unknown_product", product_id=product_id, known=sorted(self._products))
            return RuleTables([r for r in self._rules if r.products is None], self._products.values())

        selected = [r for r in self._rules if r.products is None or product_id in r.products]
        covered = {kw for r in selected if r.tier is Tier.CONDITIONAL for kw in r.keyword}

        for keyword, annotation in profile.annotation_rules.items():
            if not annotation.required or keyword in covered:
                continue
            selected.append(
                KeywordRule(
                    id=f"product.{profile.id}.{keyword}",
                    keyword=keyword,
                    tier=Tier.CONDITIONAL,
                    category="product-annotation",
                    severity=annotation.severity,
                    regulatory_class=profile.regulatory_class,
                    rationale=f"{profile.name}（{profile.category}）では「{keyword}」に注釈が必要です。",
                    reference_hint=annotation.reference_hint,
                    required_annotation=annotation.template,
                    products=(profile.id,),
                    ok_examples=(f"{keyword}※1 {annotation.template.replace('※', '※1', 1)}",),
                    ng_examples=(keyword,),
                )
            )

        return RuleTables(selected, self._products.values())

    # ── Statistics ───────────────────────────────────────────────

    def stats(self) -> dict[str, int]:
        counts = {tier.value: len(self._by_tier[tier]) for tier in TIER_ORDER}
        counts["total"] = len(self._rules)
        return counts

    def by_category(self) -> dict[str, list[KeywordRule]]:
        grouped: dict[str, list[KeywordRule]] = {}
        for rule in self._rules:
            grouped.setdefault(rule.category, []).append(rule)
        return grouped

    def by_severity(self) -> dict[str, list[KeywordRule]]:
        grouped: dict[str, list[KeywordRule]] = {s.value: [] for s in Severity}
        for rule in self._rules:
            grouped[rule.severity.value].append(rule)
        return grouped
