"""FastAPI main application."""

import logging
from typing import Dict, List, Optional
from fastapi import Depends, FastAPI, HTTPException, Query
from pydantic import BaseModel, Field
from ...application.services.crop_analytics_service import CropAnalyticsService
from ...infrastructure.repositories.conab_csv_repository import ConabCsvRepository
from config.settings import (
    CROP_DATA_FILE,
    ANALYTICS_SETTINGS,
    BIENNIAL_SETTINGS,
    ANOMALY_SETTINGS,
    TREND_SETTINGS,
    RECOMMENDATION_SETTINGS,
    VALIDATION_SETTINGS,
    API_SETTINGS,
    LOG_SETTINGS,
)

logging.basicConfig(level=LOG_SETTINGS["level"], format=LOG_SETTINGS["format"])
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

_service: Optional[CropAnalyticsService] = None


def get_service() -> CropAnalyticsService:
    """Service over the configured data file, created on first use."""
    global _service
    if _service is None:
        _service = CropAnalyticsService(
            repository=ConabCsvRepository(str(CROP_DATA_FILE)),
            analytics_settings=ANALYTICS_SETTINGS,
            biennial_settings=BIENNIAL_SETTINGS,
            anomaly_settings=ANOMALY_SETTINGS,
            trend_settings=TREND_SETTINGS,
            recommendation_settings=RECOMMENDATION_SETTINGS,
            validation_settings=VALIDATION_SETTINGS,
        )
    return _service


# Response models
class PredictionResponse(BaseModel):
    """Projection for one future year."""

    target_year: int
    predicted_value: float
    lower_bound: float
    upper_bound: float
    growth_rate_percent: float
    confidence_score: float
    derivation_notes: List[str]


class ProjectionResponse(BaseModel):
    region_code: str
    predictions: List[PredictionResponse]


class EfficiencyEntryResponse(BaseModel):
    region_code: str
    region_group: str
    avg_productivity: float
    total_production: float
    efficiency_index: float
    rank: int
    anomaly_count: int


class CropRecordResponse(BaseModel):
    id: str
    year: int
    region_code: str
    region_group: str
    crop_type: str
    production: float
    productivity: float
    area: float
    captured_at: str


class TrendResponse(BaseModel):
    volatility_percent: float
    direction: str
    is_cyclic: bool


class RecommendationResponse(BaseModel):
    recommendations: List[str]


class SummaryResponse(BaseModel):
    record_count: int
    total_production: float
    avg_productivity: float
    total_area: float
    production_by_region: Dict[str, float]


class ValidationResponse(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": API_SETTINGS["title"],
        "version": API_SETTINGS["version"],
        "endpoints": {
            "summary": "/summary",
            "efficiency": "/efficiency",
            "projection": "/regions/{code}/projection",
            "anomalies": "/regions/{code}/anomalies",
            "trends": "/regions/{code}/trends",
            "recommendations": "/regions/{code}/recommendations",
            "validation": "/validation",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/summary", response_model=SummaryResponse)
def summary(
    year: List[int] = Query(default=[]),
    region: List[str] = Query(default=[]),
    service: CropAnalyticsService = Depends(get_service),
) -> SummaryResponse:
    try:
        return SummaryResponse(**service.summary(years=year, region_codes=region).to_dict())
    except Exception as e:
        logger.error(f"Summary error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/efficiency", response_model=List[EfficiencyEntryResponse])
def efficiency(
    year: Optional[int] = None,
    service: CropAnalyticsService = Depends(get_service),
) -> List[EfficiencyEntryResponse]:
    """Rank states by productivity relative to the national average."""
    try:
        return [EfficiencyEntryResponse(**e.to_dict()) for e in service.efficiency_matrix(year)]
    except Exception as e:
        logger.error(f"Efficiency matrix error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/regions/{region_code}/projection", response_model=ProjectionResponse)
def projection(
    region_code: str,
    horizon: int = Query(default=ANALYTICS_SETTINGS["default_horizon"], ge=1, le=16),
    service: CropAnalyticsService = Depends(get_service),
) -> ProjectionResponse:
    """
    Project a state's production with the biennial adjustment.

    Args:
        region_code: State code
        horizon: Years ahead

    Returns:
        Projection with one prediction per year (empty with under two records)
    """
    try:
        predictions = service.project_region(region_code, horizon)
        return ProjectionResponse(
            region_code=region_code.upper(),
            predictions=[PredictionResponse(**p.to_dict()) for p in predictions],
        )
    except Exception as e:
        logger.error(f"Projection error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/regions/{region_code}/anomalies", response_model=List[CropRecordResponse])
def anomalies(
    region_code: str,
    service: CropAnalyticsService = Depends(get_service),
) -> List[CropRecordResponse]:
    try:
        return [CropRecordResponse(**r.to_dict()) for r in service.region_anomalies(region_code)]
    except Exception as e:
        logger.error(f"Anomaly detection error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/regions/{region_code}/trends", response_model=TrendResponse)
def trends(
    region_code: str,
    service: CropAnalyticsService = Depends(get_service),
) -> TrendResponse:
    try:
        return TrendResponse(**service.region_trends(region_code).to_dict())
    except Exception as e:
        logger.error(f"Trend analysis error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/regions/{region_code}/recommendations", response_model=RecommendationResponse)
def region_recommendations(
    region_code: str,
    service: CropAnalyticsService = Depends(get_service),
) -> RecommendationResponse:
    try:
        return RecommendationResponse(
            recommendations=service.region_recommendations(region_code)
        )
    except Exception as e:
        logger.error(f"Recommendation error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/records/{record_id}/recommendations", response_model=RecommendationResponse)
def record_recommendations(
    record_id: str,
    service: CropAnalyticsService = Depends(get_service),
) -> RecommendationResponse:
    try:
        return RecommendationResponse(recommendations=service.record_recommendations(record_id))
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Record not found: {record_id}")
    except Exception as e:
        logger.error(f"Recommendation error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/validation", response_model=ValidationResponse)
def validation(service: CropAnalyticsService = Depends(get_service)) -> ValidationResponse:
    """Integrity check of the loaded dataset."""
    try:
        return ValidationResponse(**service.validate().to_dict())
    except Exception as e:
        logger.error(f"Validation error: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
