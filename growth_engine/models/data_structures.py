"""
Data structures for the Growth Standards Interpretation Engine.
"""
from dataclasses import dataclass, asdict
from enum import Enum
from typing import Optional


class Metric(str, Enum):
    WEIGHT = "weight"
    HEIGHT = "height"
    BMI = "bmi"


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Standard(str, Enum):
    WHO = "WHO"
    CDC = "CDC"


class TrendStatus(str, Enum):
    IMPROVING = "improving"
    STABLE = "stable"
    FALTERING = "faltering"
    CONCERNING = "concerning"
    NEUTRAL = "neutral"


@dataclass(frozen=True)
class ReferencePoint:
    age_months: float
    L: float
    M: float
    S: float

    @property
    def lms(self):
        return self.L, self.M, self.S


@dataclass(frozen=True)
class WeightForLengthPoint:
    length_cm: float
    L: float
    M: float
    S: float

    @property
    def lms(self):
        return self.L, self.M, self.S


@dataclass
class Visit:
    """One row of a child's measurement history."""
    age_months: float
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None

    @property
    def bmi(self) -> Optional[float]:
        if not self.weight_kg or not self.height_cm:
            return None
        if self.weight_kg <= 0 or self.height_cm <= 0:
            return None
        height_m = self.height_cm / 100
        return self.weight_kg / (height_m * height_m)

    def value_for(self, metric: Metric) -> Optional[float]:
        if metric == Metric.WEIGHT:
            return self.weight_kg
        if metric == Metric.HEIGHT:
            return self.height_cm
        return self.bmi


@dataclass
class Measurement:
    """A single visit together with the child's sex, as supplied by callers."""
    sex: Sex
    age_months: float
    weight_kg: Optional[float] = None
    height_cm: Optional[float] = None


@dataclass
class IndicatorResult:
    status: str
    z_score: float
    reason: str


@dataclass
class WaterlowResult:
    status: str
    percent: float
    reason: str


@dataclass
class InterpretationResult:
    height_for_age: IndicatorResult
    weight_for_age: IndicatorResult
    weight_for_height: IndicatorResult
    bmi_for_age: IndicatorResult
    waterlow: WaterlowResult
    ibw: float
    height_age: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class WaterlowSummary:
    wasting: str
    wasting_reason: str
    stunting: str
    stunting_reason: str
    ibw: float
    height_age: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class TrendResult:
    status: TrendStatus
    message: str
    description: str
    velocity_kg_per_month: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            'status': self.status.value,
            'message': self.message,
            'description': self.description,
            'velocity_kg_per_month': (
                round(self.velocity_kg_per_month, 3)
                if self.velocity_kg_per_month is not None else None
            ),
        }


@dataclass
class SeriesPoint:
    age_months: float
    value: float
    z_score: float
    percentile: float

    def to_dict(self) -> dict:
        return {
            'age_months': self.age_months,
            'value': round(self.value, 3),
            'z_score': round(self.z_score, 3),
            'percentile': round(self.percentile, 1),
        }
