"""
Function-call surface of the growth standards engine.

All functions share one engine built lazily from the bundled reference tables.
"""
import functools
from typing import List, Optional, Sequence, Tuple, Union

from growth_engine.models import age
from growth_engine.models.age import DateLike
from growth_engine.models.data_structures import (
    Metric, Sex, Measurement, Visit, ReferencePoint, InterpretationResult,
    TrendResult, WaterlowSummary, SeriesPoint,
)
from growth_engine.models.interpreter import ClinicalInterpreter
from growth_engine.models.lms_engine import GrowthStandardsEngine
from growth_engine.models.trend import TrendAnalyzer

MetricLike = Union[Metric, str]
SexLike = Union[Sex, str]


@functools.lru_cache(maxsize=1)
def default_engine() -> GrowthStandardsEngine:
    return GrowthStandardsEngine()


def _interpreter() -> ClinicalInterpreter:
    return ClinicalInterpreter(default_engine())


def get_standard_data(metric: MetricLike, sex: SexLike,
                      age_months: float = 0) -> Sequence[ReferencePoint]:
    return default_engine().select_table(metric, sex, age_months)


def calculate_z_score(value: float, age_months: float, sex: SexLike,
                      metric: MetricLike) -> float:
    return default_engine().compute_zscore(metric, sex, age_months, value)


def get_measurement_for_z_score(z: float, age_months: float, sex: SexLike,
                                metric: MetricLike = Metric.WEIGHT) -> float:
    return default_engine().zscore_to_value(metric, sex, age_months, z)


def calculate_height_age(height_cm: float, sex: SexLike) -> float:
    return _interpreter().height_age(height_cm, sex)


def calculate_ideal_body_weight(height_cm: float, sex: SexLike) -> float:
    return _interpreter().ideal_body_weight(height_cm, sex)


def get_interpretation(weight_kg: float, height_cm: float, age_months: float,
                       sex: SexLike) -> InterpretationResult:
    return _interpreter().interpret(weight_kg, height_cm, age_months, sex)


def interpret_measurement(measurement: Measurement) -> Optional[InterpretationResult]:
    return _interpreter().interpret_measurement(measurement)


def get_waterlow_classification(weight_kg: float, height_cm: float,
                                age_months: float, sex: SexLike) -> WaterlowSummary:
    return _interpreter().waterlow_summary(weight_kg, height_cm, age_months, sex)


def get_growth_trend(history: Sequence[Visit], sex: SexLike) -> TrendResult:
    return TrendAnalyzer(default_engine()).analyze(history, sex)


def score_series(visits: Sequence[Visit], sex: SexLike,
                 metric: MetricLike) -> List[SeriesPoint]:
    return _interpreter().score_series(visits, sex, metric)


def age_in_months(birth_date: DateLike, measured_on: DateLike) -> float:
    return age.age_in_months(birth_date, measured_on)


def detailed_age(birth_date: DateLike,
                 reference_date: Optional[DateLike] = None) -> Tuple[int, int, int]:
    return age.detailed_age(birth_date, reference_date)
