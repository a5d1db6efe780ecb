"""Shared fixtures: the bundled rule tables and a screener that ignores the local environment."""
import pytest

from screening.config import ScreeningConfig
from screening.rule_tables import RuleTables
from screening.screener import ComplianceScreener


@pytest.fixture(scope="session")
def tables() -> RuleTables:
    return RuleTables.default()


@pytest.fixture(scope="session")
def config() -> ScreeningConfig:
    return ScreeningConfig()


@pytest.fixture
def screener(tables: RuleTables, config: ScreeningConfig) -> ComplianceScreener:
    return ComplianceScreener(tables, config)
