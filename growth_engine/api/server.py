"""
Growth Standards Interpretation Engine — FastAPI Backend
========================================================

Stateless WHO (0-5 y) / CDC (2-20 y) growth standard interpretation.

REST API endpoints:
    GET    /health                       Health check
    GET    /standards/{metric}           LMS reference table for an age
    GET    /zscore                       Z-score & percentile of a measurement
    GET    /measurement                  Measurement at a z-score
    GET    /age                          Age in months from dates
    GET    /height-age                   Height-age for a height
    GET    /ideal-body-weight            Ideal body weight for a height
    POST   /interpretation               Clinical interpretation of a visit
    POST   /waterlow                     Waterlow wasting/stunting summary
    POST   /trend                        Growth trend over visits
    POST   /series                       Per-visit z-scores for charting
    GET    /reference/curves             SD reference curves
    GET    /reference/percentile-lines   Percentile reference lines
"""
import logging
import math
from contextlib import asynccontextmanager
from datetime import date
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, model_validator

from config.settings import (
    HOST, PORT, LOG_LEVEL, CORS_ORIGINS, API_VERSION, MEASUREMENT_Z_LIMIT,
)
from growth_engine.models.data_structures import Metric, Sex, Standard, Visit
from growth_engine.models.errors import DomainError
from growth_engine.models.lms_engine import standard_for_age
from growth_engine import standards

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load and validate the reference tables on startup."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    engine = standards.default_engine()
    logger.info("Growth standards API ready (%d reference tables)",
                len(engine.store.available))
    yield
    logger.info("Shutting down")


# ── App ──────────────────────────────────────────────────────

app = FastAPI(
    title="Growth Standards Interpretation API",
    description=(
        "WHO/CDC LMS growth standards: z-scores, height-age, ideal body weight, "
        "WHO and Waterlow nutritional classification and growth trend analysis."
    ),
    version=API_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    return JSONResponse(status_code=422, content={"detail": str(exc)})


# ── Request / Response Models ─────────────────────────────────

class AgedModel(BaseModel):
    """Age in months, given directly or derived from birth and measurement dates.

    An explicit age_months wins over the dates.
    """
    age_months: Optional[float] = Field(None, ge=0, le=240)
    birth_date: Optional[date] = None
    measured_on: Optional[date] = None

    @model_validator(mode="after")
    def derive_age_months(self):
        if self.age_months is not None:
            return self
        if self.birth_date is None or self.measured_on is None:
            raise ValueError("Provide age_months, or both birth_date and measured_on")
        if self.measured_on < self.birth_date:
            raise ValueError("measured_on is before birth_date")
        age_months = standards.age_in_months(self.birth_date, self.measured_on)
        if age_months > 240:
            raise ValueError(f"Age of {age_months} months is beyond the 240-month standards")
        self.age_months = age_months
        return self

class VisitModel(AgedModel):
    weight_kg: Optional[float] = Field(None, ge=0, le=300)
    height_cm: Optional[float] = Field(None, ge=0, le=250)

    def to_visit(self) -> Visit:
        return Visit(age_months=self.age_months, weight_kg=self.weight_kg,
                     height_cm=self.height_cm)

class InterpretationRequest(AgedModel):
    sex: Sex
    weight_kg: float = Field(..., gt=0, le=300)
    height_cm: float = Field(..., gt=0, le=250)

class HistoryRequest(BaseModel):
    sex: Sex
    visits: List[VisitModel]

class SeriesRequest(HistoryRequest):
    metric: Metric = Metric.WEIGHT

class ZScoreResponse(BaseModel):
    metric: Metric
    sex: Sex
    age_months: float
    value: float
    standard: Standard
    z_score: float
    percentile: float

class ReferencePointResponse(BaseModel):
    age_months: float
    L: float
    M: float
    S: float

class StandardTableResponse(BaseModel):
    metric: Metric
    sex: Sex
    standard: Standard
    points: List[ReferencePointResponse]


# ── Helper ────────────────────────────────────────────────────

def _safe(val, digits: int = 3):
    if val is None:
        return None
    try:
        if math.isnan(val):
            return None
    except (TypeError, ValueError):
        return None
    return round(val, digits)


# ── Endpoints ─────────────────────────────────────────────────

@app.get("/health")
async def health_check():
    engine = standards.default_engine()
    return {
        "status": "healthy",
        "metrics_available": engine.available_metrics,
        "tables_loaded": engine.store.available,
        "version": API_VERSION,
    }


# ── Reference data ────────────────────────────────────────────

@app.get("/standards/{metric}", response_model=StandardTableResponse)
async def get_standard(metric: Metric, sex: Sex = Query(...),
                       age_months: float = Query(0, ge=0, le=240)):
    table = standards.get_standard_data(metric, sex, age_months)
    return StandardTableResponse(
        metric=metric, sex=sex, standard=standard_for_age(age_months),
        points=[ReferencePointResponse(age_months=p.age_months, L=p.L, M=p.M, S=p.S)
                for p in table],
    )


# ── Z-Scores ─────────────────────────────────────────────────

@app.get("/zscore", response_model=ZScoreResponse)
async def get_zscore(metric: Metric, sex: Sex,
                     age_months: float = Query(..., ge=0, le=240),
                     value: float = Query(..., gt=0)):
    z = standards.calculate_z_score(value, age_months, sex, metric)
    return ZScoreResponse(
        metric=metric, sex=sex, age_months=age_months, value=value,
        standard=standard_for_age(age_months),
        z_score=_safe(z),
        percentile=_safe(standards.default_engine().zscore_to_percentile(z), 1),
    )


@app.get("/measurement")
async def get_measurement(metric: Metric, sex: Sex,
                          age_months: float = Query(..., ge=0, le=240),
                          z: float = Query(..., ge=-MEASUREMENT_Z_LIMIT,
                                           le=MEASUREMENT_Z_LIMIT)):
    value = standards.get_measurement_for_z_score(z, age_months, sex, metric)
    return {"metric": metric, "sex": sex, "age_months": age_months,
            "z_score": z, "value": _safe(value)}


# ── Age ──────────────────────────────────────────────────────

@app.get("/age")
async def get_age(birth_date: date, measured_on: date):
    if measured_on < birth_date:
        raise HTTPException(422, "measured_on is before birth_date")
    years, months, days = standards.detailed_age(birth_date, measured_on)
    return {"birth_date": birth_date, "measured_on": measured_on,
            "age_months": standards.age_in_months(birth_date, measured_on),
            "years": years, "months": months, "days": days}


# ── Height-age / IBW ─────────────────────────────────────────

@app.get("/height-age")
async def get_height_age(sex: Sex, height_cm: float = Query(..., gt=0, le=250)):
    return {"sex": sex, "height_cm": height_cm,
            "height_age_months": _safe(standards.calculate_height_age(height_cm, sex), 1)}


@app.get("/ideal-body-weight")
async def get_ideal_body_weight(sex: Sex, height_cm: float = Query(..., gt=0, le=250)):
    return {"sex": sex, "height_cm": height_cm,
            "ibw_kg": _safe(standards.calculate_ideal_body_weight(height_cm, sex), 2)}


# ── Interpretation ───────────────────────────────────────────

@app.post("/interpretation")
async def interpret(req: InterpretationRequest):
    result = standards.get_interpretation(
        req.weight_kg, req.height_cm, req.age_months, req.sex
    )
    return result.to_dict()


@app.post("/waterlow")
async def waterlow(req: InterpretationRequest):
    summary = standards.get_waterlow_classification(
        req.weight_kg, req.height_cm, req.age_months, req.sex
    )
    return summary.to_dict()


# ── Trend / series ───────────────────────────────────────────

@app.post("/trend")
async def trend(req: HistoryRequest):
    result = standards.get_growth_trend([v.to_visit() for v in req.visits], req.sex)
    return result.to_dict()


@app.post("/series")
async def series(req: SeriesRequest):
    points = standards.score_series(
        [v.to_visit() for v in req.visits], req.sex, req.metric
    )
    return {"metric": req.metric, "sex": req.sex,
            "points": [p.to_dict() for p in points]}


# ── Reference Lines ──────────────────────────────────────────

@app.get("/reference/curves")
async def reference_curves(metric: Metric = Metric.WEIGHT, sex: Sex = Sex.MALE,
                           standard: Standard = Standard.WHO):
    engine = standards.default_engine()
    curves = engine.reference_curves(metric, sex, standard)
    return {
        "metric": metric, "sex": sex, "standard": standard,
        "curves": [{k: _safe(v, 2) for k, v in point.items()} for point in curves],
    }


@app.get("/reference/percentile-lines")
async def percentile_lines(metric: Metric = Metric.WEIGHT, sex: Sex = Sex.MALE,
                           standard: Standard = Standard.WHO,
                           percentiles: str = Query("3,15,50,85,97")):
    try:
        pct_list = [float(x.strip()) for x in percentiles.split(",") if x.strip()]
    except ValueError:
        raise HTTPException(422, f"Invalid percentiles '{percentiles}'")
    engine = standards.default_engine()
    lines = engine.percentile_lines(metric, sex, standard, pct_list)
    return {
        "metric": metric, "sex": sex, "standard": standard,
        "lines": [
            {"percentile": line["percentile"],
             "points": [{"age_months": p["age_months"], "value": _safe(p["value"], 2)}
                        for p in line["points"]]}
            for line in lines
        ],
    }


# ── Run ───────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("growth_engine.api.server:app", host=HOST, port=PORT, reload=True)
