"""
Tests for the growth trend analyzer.
Run: pytest tests/test_trend.py -v
"""
import pytest

from growth_engine.models.data_structures import Metric, Sex, TrendStatus, Visit


def _visit_at(engine, age, z, sex=Sex.MALE):
    return Visit(age_months=age,
                 weight_kg=engine.zscore_to_value(Metric.WEIGHT, sex, age, z))


class TestTrend:

    def test_single_visit_is_insufficient(self, analyzer, engine):
        result = analyzer.analyze([_visit_at(engine, 12, 0)], Sex.MALE)
        assert result.status == TrendStatus.NEUTRAL
        assert result.message == "Insufficient data"
        assert result.velocity_kg_per_month is None

    def test_empty_history(self, analyzer):
        assert analyzer.analyze([], "female").message == "Insufficient data"

    def test_same_age_is_invalid(self, analyzer):
        history = [Visit(age_months=12, weight_kg=9.0), Visit(age_months=12, weight_kg=9.4)]
        result = analyzer.analyze(history, Sex.MALE)
        assert result.status == TrendStatus.NEUTRAL
        assert result.message == "Invalid data"
        assert result.velocity_kg_per_month is None

    def test_faltering(self, analyzer, engine):
        previous, latest = _visit_at(engine, 12, 0.0), _visit_at(engine, 15, -0.7)
        result = analyzer.analyze([previous, latest], Sex.MALE)
        assert result.status == TrendStatus.FALTERING
        assert result.message == "Warning: growth slowing"
        assert "dropped by 0.70 SD" in result.description
        assert result.velocity_kg_per_month == pytest.approx(
            (latest.weight_kg - previous.weight_kg) / 3)

    def test_drop_just_inside_threshold_is_not_faltering(self, analyzer, engine):
        history = [_visit_at(engine, 12, 0.0), _visit_at(engine, 15, -0.66)]
        assert analyzer.analyze(history, Sex.MALE).status == TrendStatus.NEUTRAL

    def test_concerning(self, analyzer, engine):
        history = [_visit_at(engine, 6, 0.0), _visit_at(engine, 9, 1.2)]
        result = analyzer.analyze(history, Sex.MALE)
        assert result.status == TrendStatus.CONCERNING
        assert result.message == "Warning: gaining too fast"

    def test_rapid_gain_outranks_catch_up(self, analyzer, engine):
        history = [_visit_at(engine, 6, -2.5), _visit_at(engine, 9, -1.3)]
        assert analyzer.analyze(history, Sex.MALE).status == TrendStatus.CONCERNING

    def test_stable(self, analyzer, engine):
        history = [_visit_at(engine, 18, 0.3, Sex.FEMALE),
                   _visit_at(engine, 21, 0.4, Sex.FEMALE)]
        result = analyzer.analyze(history, Sex.FEMALE)
        assert result.status == TrendStatus.STABLE
        assert result.message == "Stable growth"

    def test_improving(self, analyzer, engine):
        history = [_visit_at(engine, 6, -2.5), _visit_at(engine, 9, -2.0)]
        result = analyzer.analyze(history, Sex.MALE)
        assert result.status == TrendStatus.IMPROVING
        assert result.message == "Good news: improving"

    def test_gain_from_normal_is_neutral(self, analyzer, engine):
        history = [_visit_at(engine, 6, 0.0), _visit_at(engine, 9, 0.5)]
        result = analyzer.analyze(history, Sex.MALE)
        assert result.status == TrendStatus.NEUTRAL
        assert result.message == "Normal trend"

    def test_only_last_two_visits_count(self, analyzer, engine):
        history = [_visit_at(engine, 3, 2.0), _visit_at(engine, 6, 0.0),
                   _visit_at(engine, 9, 0.05)]
        assert analyzer.analyze(history, Sex.MALE).status == TrendStatus.STABLE

    def test_history_is_sorted_by_age(self, analyzer, engine):
        history = [_visit_at(engine, 15, -0.7), _visit_at(engine, 12, 0.0)]
        assert analyzer.analyze(history, Sex.MALE).status == TrendStatus.FALTERING

    def test_visits_without_weight_are_skipped(self, analyzer, engine, caplog):
        history = [_visit_at(engine, 12, 0.0), _visit_at(engine, 15, -0.7),
                   Visit(age_months=18, height_cm=82.0)]
        result = analyzer.analyze(history, Sex.MALE)
        assert result.status == TrendStatus.FALTERING
        assert "without a weight" in caplog.text

    def test_crossing_standard_boundary(self, analyzer, engine):
        history = [_visit_at(engine, 54, 0.0), _visit_at(engine, 66, 0.0)]
        result = analyzer.analyze(history, Sex.MALE)
        assert result.status == TrendStatus.STABLE
        assert result.velocity_kg_per_month > 0

    def test_to_dict(self, analyzer, engine):
        history = [_visit_at(engine, 12, 0.0), _visit_at(engine, 15, 0.0)]
        data = analyzer.analyze(history, Sex.MALE).to_dict()
        assert data["status"] == "stable"
        assert isinstance(data["velocity_kg_per_month"], float)
