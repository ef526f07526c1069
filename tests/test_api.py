"""
Tests for the Growth Standards Interpretation API
Run: pytest tests/test_api.py -v
"""
import pytest
from fastapi.testclient import TestClient

from config.settings import API_VERSION
from growth_engine.api.server import app


@pytest.fixture(scope="module")
def client():
    with TestClient(app) as c:
        yield c


class TestHealthAndInfo:

    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "healthy"
        assert data["version"] == API_VERSION
        assert data["metrics_available"] == ["weight", "height", "bmi"]
        assert "WHO:weight:male" in data["tables_loaded"]
        assert "CDC:bmi:female" in data["tables_loaded"]

    def test_docs_available(self, client):
        r = client.get("/docs")
        assert r.status_code == 200


class TestStandards:

    def test_who_table(self, client):
        r = client.get("/standards/height", params={"sex": "female", "age_months": 24})
        assert r.status_code == 200
        data = r.json()
        assert data["standard"] == "WHO"
        assert len(data["points"]) == 61

    def test_cdc_table_above_60_months(self, client):
        r = client.get("/standards/weight", params={"sex": "male", "age_months": 61})
        assert r.status_code == 200
        data = r.json()
        assert data["standard"] == "CDC"
        assert data["points"][0]["age_months"] == 24.0

    def test_unknown_metric(self, client):
        r = client.get("/standards/head", params={"sex": "male"})
        assert r.status_code == 422


class TestZScore:

    def test_at_median(self, client):
        r = client.get("/zscore", params={
            "metric": "weight", "sex": "male", "age_months": 24, "value": 12.1515,
        })
        assert r.status_code == 200
        data = r.json()
        assert data["z_score"] == pytest.approx(0.0, abs=1e-3)
        assert data["percentile"] == pytest.approx(50.0)
        assert data["standard"] == "WHO"

    def test_invalid_sex(self, client):
        r = client.get("/zscore", params={
            "metric": "weight", "sex": "other", "age_months": 24, "value": 12,
        })
        assert r.status_code == 422

    def test_non_positive_value(self, client):
        r = client.get("/zscore", params={
            "metric": "height", "sex": "male", "age_months": 24, "value": 0,
        })
        assert r.status_code == 422

    @pytest.mark.parametrize("z", [-4.5, 4.01, 5.5])
    def test_measurement_z_outside_limit(self, client, z):
        r = client.get("/measurement", params={
            "metric": "bmi", "sex": "male", "age_months": 240, "z": z,
        })
        assert r.status_code == 422

    def test_measurement_at_limit_is_above_lower_values(self, client):
        values = [
            client.get("/measurement", params={
                "metric": "weight", "sex": "male", "age_months": 240, "z": z,
            }).json()["value"]
            for z in (3.0, 3.5, 4.0)
        ]
        assert values[0] < values[1] < values[2]

    def test_measurement_at_zero_is_median(self, client):
        r = client.get("/measurement", params={
            "metric": "height", "sex": "male", "age_months": 24, "z": 0,
        })
        assert r.status_code == 200
        assert r.json()["value"] == pytest.approx(87.116)


class TestHeightAgeAndIBW:

    def test_height_age(self, client):
        r = client.get("/height-age", params={"sex": "male", "height_cm": 72.0})
        assert r.status_code == 200
        assert r.json()["height_age_months"] == pytest.approx(9.0)

    def test_ideal_body_weight(self, client):
        r = client.get("/ideal-body-weight", params={"sex": "male", "height_cm": 72.0})
        assert r.status_code == 200
        assert r.json()["ibw_kg"] == pytest.approx(8.98)


class TestInterpretation:

    PAYLOAD = {"sex": "male", "age_months": 24, "weight_kg": 9.1, "height_cm": 72.0}

    def test_interpretation(self, client):
        r = client.post("/interpretation", json=self.PAYLOAD)
        assert r.status_code == 200
        data = r.json()
        assert data["height_for_age"]["status"] == "Severely Stunted"
        assert data["weight_for_age"]["status"] == "Underweight"
        assert data["waterlow"]["status"] == "Well Nourished"
        assert data["waterlow"]["percent"] == pytest.approx(101.3)
        assert data["ibw"] == pytest.approx(8.98)

    def test_waterlow(self, client):
        r = client.post("/waterlow", json=self.PAYLOAD)
        assert r.status_code == 200
        data = r.json()
        assert data["wasting"] == "Well Nourished"
        assert data["stunting"] == "Severely Stunted"

    def test_zero_weight_rejected(self, client):
        r = client.post("/interpretation", json={**self.PAYLOAD, "weight_kg": 0})
        assert r.status_code == 422

    def test_age_from_dates(self, client):
        # 730 days / 30.44 = 23.98 -> 24.0 months
        payload = {"sex": "male", "weight_kg": 9.1, "height_cm": 72.0,
                   "birth_date": "2022-01-15", "measured_on": "2024-01-15"}
        r = client.post("/interpretation", json=payload)
        assert r.status_code == 200
        assert r.json() == client.post("/interpretation", json=self.PAYLOAD).json()

    def test_age_months_wins_over_dates(self, client):
        payload = {**self.PAYLOAD, "birth_date": "2020-01-01", "measured_on": "2024-01-01"}
        r = client.post("/waterlow", json=payload)
        assert r.status_code == 200
        assert r.json()["stunting"] == "Severely Stunted"

    def test_missing_age_rejected(self, client):
        payload = {"sex": "male", "weight_kg": 9.1, "height_cm": 72.0,
                   "birth_date": "2022-01-15"}
        r = client.post("/interpretation", json=payload)
        assert r.status_code == 422

    def test_measured_before_birth_rejected(self, client):
        payload = {"sex": "male", "weight_kg": 9.1, "height_cm": 72.0,
                   "birth_date": "2024-01-15", "measured_on": "2022-01-15"}
        r = client.post("/interpretation", json=payload)
        assert r.status_code == 422

    def test_age_beyond_standards_rejected(self, client):
        payload = {"sex": "female", "weight_kg": 60.0, "height_cm": 165.0,
                   "birth_date": "2000-01-01", "measured_on": "2024-01-01"}
        r = client.post("/interpretation", json=payload)
        assert r.status_code == 422


class TestAge:

    def test_age(self, client):
        r = client.get("/age", params={"birth_date": "2024-01-15",
                                       "measured_on": "2026-01-10"})
        assert r.status_code == 200
        data = r.json()
        # 726 days
        assert data["age_months"] == 23.9
        assert (data["years"], data["months"], data["days"]) == (1, 11, 26)

    def test_age_reversed_dates(self, client):
        r = client.get("/age", params={"birth_date": "2026-01-10",
                                       "measured_on": "2024-01-15"})
        assert r.status_code == 422


class TestTrendAndSeries:

    def test_single_visit_trend(self, client):
        r = client.post("/trend", json={
            "sex": "female", "visits": [{"age_months": 6, "weight_kg": 7.3}],
        })
        assert r.status_code == 200
        data = r.json()
        assert data["status"] == "neutral"
        assert data["message"] == "Insufficient data"
        assert data["velocity_kg_per_month"] is None

    def test_trend_faltering(self, client):
        r = client.post("/trend", json={
            "sex": "male",
            "visits": [
                {"age_months": 12, "weight_kg": 9.65},
                {"age_months": 15, "weight_kg": 9.2},
            ],
        })
        assert r.status_code == 200
        assert r.json()["status"] == "faltering"

    def test_trend_with_dated_visits(self, client):
        # 365 and 457 days after birth: 12.0 and 15.0 months
        r = client.post("/trend", json={
            "sex": "male",
            "visits": [
                {"birth_date": "2023-01-01", "measured_on": "2024-01-01", "weight_kg": 9.65},
                {"birth_date": "2023-01-01", "measured_on": "2024-04-02", "weight_kg": 9.2},
            ],
        })
        assert r.status_code == 200
        assert r.json()["status"] == "faltering"

    def test_series(self, client):
        r = client.post("/series", json={
            "sex": "male", "metric": "height",
            "visits": [
                {"age_months": 24, "weight_kg": 12.0, "height_cm": 87.1161},
                {"age_months": 12, "weight_kg": 9.6},
            ],
        })
        assert r.status_code == 200
        points = r.json()["points"]
        assert len(points) == 1
        assert points[0]["z_score"] == pytest.approx(0.0, abs=1e-3)
        assert points[0]["percentile"] == pytest.approx(50.0)


class TestReferenceLines:

    def test_curves(self, client):
        r = client.get("/reference/curves", params={"metric": "bmi", "sex": "female"})
        assert r.status_code == 200
        curves = r.json()["curves"]
        assert len(curves) == 61
        assert curves[0]["zneg2"] < curves[0]["median"] < curves[0]["zpos2"]

    def test_percentile_lines(self, client):
        r = client.get("/reference/percentile-lines", params={
            "metric": "height", "sex": "male", "standard": "CDC", "percentiles": "5,50,95",
        })
        assert r.status_code == 200
        lines = r.json()["lines"]
        assert [line["percentile"] for line in lines] == [5, 50, 95]
        assert lines[1]["points"][0]["value"] == pytest.approx(87.78)

    def test_percentile_lines_bad_input(self, client):
        r = client.get("/reference/percentile-lines", params={"percentiles": "3,abc"})
        assert r.status_code == 422

    def test_percentile_out_of_range(self, client):
        r = client.get("/reference/percentile-lines", params={"percentiles": "0,50"})
        assert r.status_code == 422
