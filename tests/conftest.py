import pytest

from growth_engine.models.interpreter import ClinicalInterpreter
from growth_engine.models.lms_engine import GrowthStandardsEngine
from growth_engine.models.trend import TrendAnalyzer


@pytest.fixture(scope="session")
def engine() -> GrowthStandardsEngine:
    """Engine over the bundled WHO/CDC tables."""
    return GrowthStandardsEngine()


@pytest.fixture
def interpreter(engine) -> ClinicalInterpreter:
    return ClinicalInterpreter(engine)


@pytest.fixture
def analyzer(engine) -> TrendAnalyzer:
    return TrendAnalyzer(engine)
