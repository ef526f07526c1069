"""
Growth trend analysis across visits.

Compares the weight-for-age z-scores of the two most recent visits. Stateless:
the whole history is passed in on every call.
"""
import logging
from typing import Sequence, Union

from config.settings import (
    TREND_FALTERING_DROP, TREND_RAPID_GAIN, TREND_STABLE_BAND, TREND_CATCH_UP_BELOW,
)
from growth_engine.models.data_structures import Metric, Sex, Visit, TrendStatus, TrendResult
from growth_engine.models.lms_engine import GrowthStandardsEngine

logger = logging.getLogger(__name__)


class TrendAnalyzer:

    def __init__(self, engine: GrowthStandardsEngine):
        self.engine = engine

    def analyze(self, history: Sequence[Visit], sex: Union[Sex, str]) -> TrendResult:
        sex = Sex(sex)
        weighed = [v for v in history if v.weight_kg is not None and v.weight_kg > 0]
        if len(weighed) < len(history):
            logger.warning("Skipping %d visit(s) without a weight",
                           len(history) - len(weighed))

        if len(weighed) < 2:
            return TrendResult(
                status=TrendStatus.NEUTRAL,
                message="Insufficient data",
                description="At least 2 measurements are needed to analyse the growth trend.",
            )

        ordered = sorted(weighed, key=lambda v: v.age_months)
        previous, latest = ordered[-2], ordered[-1]

        age_diff = latest.age_months - previous.age_months
        if age_diff <= 0:
            logger.warning("Invalid age difference between the last two visits: %s",
                           age_diff)
            return TrendResult(
                status=TrendStatus.NEUTRAL,
                message="Invalid data",
                description="Invalid age difference between the last two visits.",
            )

        z_latest = self.engine.compute_zscore(
            Metric.WEIGHT, sex, latest.age_months, latest.weight_kg
        )
        z_previous = self.engine.compute_zscore(
            Metric.WEIGHT, sex, previous.age_months, previous.weight_kg
        )
        z_diff = z_latest - z_previous
        velocity = (latest.weight_kg - previous.weight_kg) / age_diff

        if z_diff < TREND_FALTERING_DROP:
            return TrendResult(
                status=TrendStatus.FALTERING,
                message="Warning: growth slowing",
                description=(f"Weight Z-score dropped by {abs(z_diff):.2f} SD since the "
                             "previous visit. Risk of growth faltering."),
                velocity_kg_per_month=velocity,
            )
        if z_diff > TREND_RAPID_GAIN:
            return TrendResult(
                status=TrendStatus.CONCERNING,
                message="Warning: gaining too fast",
                description=(f"Weight Z-score rose by {z_diff:.2f} SD. Review diet to "
                             "prevent obesity."),
                velocity_kg_per_month=velocity,
            )
        if abs(z_diff) < TREND_STABLE_BAND:
            return TrendResult(
                status=TrendStatus.STABLE,
                message="Stable growth",
                description="Following the growth curve well.",
                velocity_kg_per_month=velocity,
            )
        if z_diff > 0 and z_previous < TREND_CATCH_UP_BELOW:
            return TrendResult(
                status=TrendStatus.IMPROVING,
                message="Good news: improving",
                description=("Catch-up growth has started. Continue the nutritional "
                             "intervention."),
                velocity_kg_per_month=velocity,
            )
        return TrendResult(
            status=TrendStatus.NEUTRAL,
            message="Normal trend",
            description="The child is growing along their own growth channel.",
            velocity_kg_per_month=velocity,
        )
