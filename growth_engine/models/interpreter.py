"""
Clinical interpretation of a single visit:
- WHO z-score classifications (height-for-age, weight-for-age, BMI-for-age)
- Waterlow percentage of ideal body weight (IBW at height-age)
- Weight-for-height, approximated from the Waterlow percentage

Weight-for-height here is not an LMS z-score against a weight-for-height
table. The percent of IBW is mapped onto a fixed z value and then classified
with the BMI cut points. Replacing it would change clinical output.
"""
import logging
from typing import List, Optional, Sequence, Union

from config.settings import WFL_MAX_LENGTH_CM
from growth_engine.models.data_structures import (
    Metric, Sex, Standard, Measurement, Visit, IndicatorResult, WaterlowResult,
    InterpretationResult, WaterlowSummary, SeriesPoint,
)
from growth_engine.models.errors import DomainError
from growth_engine.models.lms_engine import (
    GrowthStandardsEngine, interpolate_lms, zscore_band,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Threshold tables
# =============================================================================

def classify_height_for_age(z: float) -> str:
    if z > 3:
        return "Very Tall"
    if z >= -2:
        return "Normal"
    if z >= -3:
        return "Stunted"
    return "Severely Stunted"


def classify_weight_for_age(z: float) -> str:
    if z > 1:
        return "Risk of Overweight"
    if z >= -2:
        return "Normal"
    if z >= -3:
        return "Underweight"
    return "Severely Underweight"


def classify_bmi_for_age(z: float) -> str:
    if z > 3:
        return "Obese"
    if z > 2:
        return "Overweight"
    if z > 1:
        return "Possible Risk of Overweight"
    if z >= -2:
        return "Normal"
    if z >= -3:
        return "Wasted"
    return "Severely Wasted"


# Same cut points as BMI-for-age.
classify_weight_for_height = classify_bmi_for_age


def classify_waterlow(percent: float) -> str:
    if percent > 120:
        return "Obese"
    if percent > 110:
        return "Overweight"
    if percent >= 90:
        return "Well Nourished"
    if percent >= 70:
        return "Undernourished"
    return "Severely Undernourished"


def approximate_wfh_zscore(percent: float) -> float:
    if percent > 120:
        return 3.5
    if percent > 110:
        return 2.5
    if percent > 100:
        return 0.5
    if percent >= 90:
        return -0.5
    if percent >= 80:
        return -1.5
    if percent >= 70:
        return -2.5
    return -3.5


# =============================================================================
# Interpreter
# =============================================================================

class ClinicalInterpreter:
    """Height-age, ideal body weight and per-visit clinical classification."""

    def __init__(self, engine: GrowthStandardsEngine):
        self.engine = engine

    def height_age(self, height_cm: float, sex: Union[Sex, str]) -> float:
        """Age (months) at which the reference median height equals height_cm.

        WHO is searched while the height is within its medians, CDC beyond.
        The two tables are never blended.
        """
        sex = Sex(sex)
        who = self.engine.store.table(Standard.WHO, Metric.HEIGHT, sex)
        tallest_who = max(row.M for row in who)
        if height_cm <= tallest_who:
            return _age_for_median(height_cm, who)
        cdc = self.engine.store.table(Standard.CDC, Metric.HEIGHT, sex)
        return _age_for_median(height_cm, cdc)

    def ideal_body_weight(self, height_cm: float, sex: Union[Sex, str]) -> float:
        """Median weight for a child of the same length (<= 110 cm) or height-age."""
        sex = Sex(sex)
        if height_cm <= WFL_MAX_LENGTH_CM:
            _, M, _ = interpolate_lms(
                height_cm, self.engine.store.weight_for_length(sex), key="length_cm"
            )
            return M
        h_age = self.height_age(height_cm, sex)
        return self.engine.get_median(Metric.WEIGHT, sex, h_age)

    def interpret(self, weight_kg: float, height_cm: float, age_months: float,
                  sex: Union[Sex, str]) -> InterpretationResult:
        sex = Sex(sex)
        if weight_kg <= 0 or height_cm <= 0:
            raise DomainError(
                f"Weight and height must be positive, got {weight_kg} kg / {height_cm} cm"
            )

        height_z = self.engine.compute_zscore(Metric.HEIGHT, sex, age_months, height_cm)
        weight_z = self.engine.compute_zscore(Metric.WEIGHT, sex, age_months, weight_kg)

        height_m = height_cm / 100
        bmi = weight_kg / (height_m * height_m)
        bmi_z = self.engine.compute_zscore(Metric.BMI, sex, age_months, bmi)

        ibw = self.ideal_body_weight(height_cm, sex)
        percent = weight_kg / ibw * 100
        wfh_z = approximate_wfh_zscore(percent)

        median_height = self.engine.get_median(Metric.HEIGHT, sex, age_months)
        median_weight = self.engine.get_median(Metric.WEIGHT, sex, age_months)
        h_age = self.height_age(height_cm, sex)

        return InterpretationResult(
            height_for_age=IndicatorResult(
                status=classify_height_for_age(height_z),
                z_score=round(height_z, 2),
                reason=(f"Height: {height_cm:.1f} cm, median: {median_height:.1f} cm, "
                        f"Z-score: {height_z:.2f} ({zscore_band(height_z)})"),
            ),
            weight_for_age=IndicatorResult(
                status=classify_weight_for_age(weight_z),
                z_score=round(weight_z, 2),
                reason=(f"Weight: {weight_kg:.1f} kg, median: {median_weight:.1f} kg, "
                        f"Z-score: {weight_z:.2f} ({zscore_band(weight_z)})"),
            ),
            weight_for_height=IndicatorResult(
                status=classify_weight_for_height(wfh_z),
                z_score=round(wfh_z, 2),
                reason=(f"Weight: {weight_kg:.1f} kg / IBW: {ibw:.1f} kg "
                        f"= {percent:.1f}%"),
            ),
            bmi_for_age=IndicatorResult(
                status=classify_bmi_for_age(bmi_z),
                z_score=round(bmi_z, 2),
                reason=(f"BMI: {bmi:.1f} kg/m², Z-score: {bmi_z:.2f} "
                        f"({zscore_band(bmi_z)})"),
            ),
            waterlow=WaterlowResult(
                status=classify_waterlow(percent),
                percent=round(percent, 1),
                reason=(f"Actual weight: {weight_kg:.1f} kg / ideal weight (height-age): "
                        f"{ibw:.1f} kg × 100 = {percent:.1f}%"),
            ),
            ibw=round(ibw, 2),
            height_age=round(h_age, 1),
        )

    def waterlow_summary(self, weight_kg: float, height_cm: float,
                         age_months: float, sex: Union[Sex, str]) -> WaterlowSummary:
        result = self.interpret(weight_kg, height_cm, age_months, sex)
        return WaterlowSummary(
            wasting=result.waterlow.status,
            wasting_reason=result.waterlow.reason,
            stunting=result.height_for_age.status,
            stunting_reason=result.height_for_age.reason,
            ibw=result.ibw,
            height_age=result.height_age,
        )

    def interpret_measurement(self, measurement: Measurement) -> Optional[InterpretationResult]:
        """Interpret one visit, or None when weight or height is missing."""
        if not measurement.weight_kg or not measurement.height_cm \
                or measurement.weight_kg <= 0 or measurement.height_cm <= 0:
            logger.warning("No interpretation at %.1f months: weight or height missing",
                           measurement.age_months)
            return None
        return self.interpret(measurement.weight_kg, measurement.height_cm,
                              measurement.age_months, measurement.sex)

    def score_series(self, visits: Sequence[Visit], sex: Union[Sex, str],
                     metric: Union[Metric, str]) -> List[SeriesPoint]:
        """Per-visit z-scores for one metric, skipping visits without a value."""
        sex, metric = Sex(sex), Metric(metric)
        points = []
        for visit in sorted(visits, key=lambda v: v.age_months):
            value = visit.value_for(metric)
            if value is None or value <= 0:
                continue
            z = self.engine.compute_zscore(metric, sex, visit.age_months, value)
            points.append(SeriesPoint(
                age_months=visit.age_months, value=value, z_score=z,
                percentile=self.engine.zscore_to_percentile(z),
            ))
        return points


def _age_for_median(value: float, table) -> float:
    rows = sorted(table, key=lambda r: r.M)
    if value <= rows[0].M:
        return rows[0].age_months
    if value >= rows[-1].M:
        return rows[-1].age_months
    for a, b in zip(rows, rows[1:]):
        if a.M <= value <= b.M:
            if b.M == a.M:
                return a.age_months
            fraction = (value - a.M) / (b.M - a.M)
            return a.age_months + fraction * (b.age_months - a.age_months)
    return 0.0
