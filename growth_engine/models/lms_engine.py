"""
WHO / CDC growth standards — LMS z-score computation engine.
Sources: WHO Multicentre Growth Reference Study (MGRS, 2006), CDC 2000.

The WHO standard applies up to and including 60 months, CDC above it. The
standard is re-derived from the age on every call, so a series of visits may
cross the boundary.
"""
import logging
import math
from typing import Sequence, Tuple, Union

from scipy import stats

from config.settings import (
    STANDARD_SWITCH_AGE_MONTHS, L_ZERO_THRESHOLD, CURVE_MAX_MEDIAN_MULTIPLE,
    CURVE_Z_SCORES, DEFAULT_PERCENTILES,
)
from growth_engine.models.data_structures import Metric, Sex, Standard
from growth_engine.models.errors import DomainError
from growth_engine.models.reference_tables import ReferenceTableStore

logger = logging.getLogger(__name__)

LMS = Tuple[float, float, float]


# =============================================================================
# LMS primitives
# =============================================================================

def interpolate_lms(target: float, table: Sequence, key: str = "age_months") -> LMS:
    """Linearly interpolate (L, M, S) at `target` along `key`.

    Clamps to the first/last row outside the table; never extrapolates.
    """
    rows = sorted(table, key=lambda r: getattr(r, key))

    if target <= getattr(rows[0], key):
        return rows[0].lms
    if target >= getattr(rows[-1], key):
        return rows[-1].lms

    lower, upper = rows[0], rows[-1]
    for a, b in zip(rows, rows[1:]):
        if getattr(a, key) <= target <= getattr(b, key):
            lower, upper = a, b
            break

    span = getattr(upper, key) - getattr(lower, key)
    if span == 0:
        return lower.lms

    ratio = (target - getattr(lower, key)) / span
    return (lower.L + (upper.L - lower.L) * ratio,
            lower.M + (upper.M - lower.M) * ratio,
            lower.S + (upper.S - lower.S) * ratio)


def lms_zscore(value: float, L: float, M: float, S: float) -> float:
    """
    Cole's LMS transform:
      |L| <  0.01: z = ln(value/M) / S
      otherwise:   z = ((value/M)^L - 1) / (L*S)
    """
    if value <= 0:
        raise DomainError(f"Measurement must be positive, got {value}")
    if M <= 0:
        raise DomainError(f"Reference median must be positive, got {M}")
    if abs(L) < L_ZERO_THRESHOLD:
        return math.log(value / M) / S
    return ((value / M) ** L - 1) / (L * S)


def lms_value(z: float, L: float, M: float, S: float) -> float:
    """Inverse LMS transform: the measurement sitting at z.

    A non-positive base 1 + L*S*z falls back to the log-normal form.
    """
    if abs(L) < L_ZERO_THRESHOLD:
        return M * math.exp(S * z)
    base = 1 + L * S * z
    if base <= 0:
        return M * math.exp(S * z)
    return M * base ** (1 / L)


def curve_value(z: float, L: float, M: float, S: float) -> float:
    """Chart-safe inverse; also rejects non-positive or runaway power results."""
    value = lms_value(z, L, M, S)
    if value <= 0 or value > M * CURVE_MAX_MEDIAN_MULTIPLE:
        return M * math.exp(S * z)
    return value


def zscore_band(z: float) -> str:
    if z > 3:
        return "> 3 SD"
    if z > 2:
        return "2-3 SD"
    if z > 1:
        return "1-2 SD"
    if z >= -1:
        return "-1 to 1 SD"
    if z >= -2:
        return "-2 to -1 SD"
    if z >= -3:
        return "-3 to -2 SD"
    return "< -3 SD"


def standard_for_age(age_months: float) -> Standard:
    return Standard.CDC if age_months > STANDARD_SWITCH_AGE_MONTHS else Standard.WHO


# =============================================================================
# Engine
# =============================================================================

class GrowthStandardsEngine:
    """WHO/CDC growth standards z-score computation engine using the LMS method."""

    def __init__(self, store: ReferenceTableStore = None):
        self.store = store or ReferenceTableStore()
        self.store.validate()
        logger.info("Growth standards engine ready (%d tables)",
                    len(self.store.available))

    def select_table(self, metric: Union[Metric, str], sex: Union[Sex, str],
                     age_months: float):
        metric, sex = Metric(metric), Sex(sex)
        standard = standard_for_age(age_months)
        logger.debug("Using %s %s table for %s at %.2f months",
                     standard.value, metric.value, sex.value, age_months)
        return self.store.table(standard, metric, sex)

    def get_lms(self, metric: Union[Metric, str], sex: Union[Sex, str],
                age_months: float) -> LMS:
        return interpolate_lms(age_months, self.select_table(metric, sex, age_months))

    def compute_zscore(self, metric: Union[Metric, str], sex: Union[Sex, str],
                       age_months: float, value: float) -> float:
        L, M, S = self.get_lms(metric, sex, age_months)
        return lms_zscore(value, L, M, S)

    def zscore_to_value(self, metric: Union[Metric, str], sex: Union[Sex, str],
                        age_months: float, z: float) -> float:
        L, M, S = self.get_lms(metric, sex, age_months)
        return lms_value(z, L, M, S)

    def zscore_to_percentile(self, z: float) -> float:
        return float(stats.norm.cdf(z) * 100)

    def percentile_to_zscore(self, percentile: float) -> float:
        if not 0 < percentile < 100:
            raise DomainError(f"Percentile must be within (0, 100), got {percentile}")
        return float(stats.norm.ppf(percentile / 100.0))

    def get_percentile_value(self, metric: Union[Metric, str], sex: Union[Sex, str],
                             age_months: float, percentile: float) -> float:
        z = self.percentile_to_zscore(percentile)
        return self.zscore_to_value(metric, sex, age_months, z)

    def get_median(self, metric: Union[Metric, str], sex: Union[Sex, str],
                   age_months: float) -> float:
        _, M, _ = self.get_lms(metric, sex, age_months)
        return float(M)

    # ── Chart reference lines ─────────────────────────────────

    def reference_curves(self, metric: Union[Metric, str], sex: Union[Sex, str],
                         standard: Union[Standard, str] = Standard.WHO,
                         z_scores: Sequence[int] = CURVE_Z_SCORES) -> list:
        """SD curves (value at each z) for every row of the chosen table."""
        table = self.store.table(Standard(standard), Metric(metric), Sex(sex))
        curves = []
        for row in table:
            point = {'age_months': row.age_months, 'median': row.M}
            for z in z_scores:
                point[_curve_label(z)] = curve_value(z, row.L, row.M, row.S)
            curves.append(point)
        return curves

    def percentile_lines(self, metric: Union[Metric, str], sex: Union[Sex, str],
                         standard: Union[Standard, str] = Standard.WHO,
                         percentiles: Sequence[float] = DEFAULT_PERCENTILES) -> list:
        """One line per percentile, each a list of (age, value) points."""
        table = self.store.table(Standard(standard), Metric(metric), Sex(sex))
        lines = []
        for pct in percentiles:
            z = self.percentile_to_zscore(pct)
            lines.append({
                'percentile': pct,
                'points': [
                    {'age_months': row.age_months,
                     'value': lms_value(z, row.L, row.M, row.S)}
                    for row in table
                ],
            })
        return lines

    @property
    def available_metrics(self) -> list:
        return [m.value for m in Metric]


def _curve_label(z: int) -> str:
    if z == 0:
        return "z0"
    return f"z{'pos' if z > 0 else 'neg'}{abs(z)}"
