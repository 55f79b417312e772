"""Health check and platform information endpoints."""
from datetime import datetime, timezone
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.config import settings, PlatformConfig
from app.models.responses import (
    HealthData, DependencyStatus, HealthMetrics,
    SupportedFormatsData, PlatformFeatures
)
from app.utils.response_helpers import ResponseHelper
from app.utils.validators import YouTubeURLClassifier

router = APIRouter(tags=["health"])

service_start_time = datetime.now()

@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "YouTube Transcript Digest Service is running"}

@router.get("/health")
async def health_check():
    """
    Health check endpoint with dependency status
    """
    uptime = int((datetime.now() - service_start_time).total_seconds())

    dependencies = DependencyStatus(
        transcript_service="configured" if settings.transcript_api_key else "not_configured"
    )

    health_data = HealthData(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.api_version,
        dependencies=dependencies,
        metrics=HealthMetrics(uptime_seconds=uptime)
    )

    return JSONResponse(
        status_code=200,
        content=health_data.model_dump()
    )

@router.get("/supported-formats")
async def get_supported_formats():
    """
    Get supported YouTube URL formats
    """
    request_id = ResponseHelper.generate_request_id()

    platforms = [
        PlatformFeatures(
            name="youtube",
            domains=PlatformConfig.get_platform_domains("youtube"),
            supported_features=PlatformConfig.get_platform_features("youtube"),
            url_formats=YouTubeURLClassifier.supported_formats()
        )
    ]

    formats_data = SupportedFormatsData(
        platforms=platforms,
        max_transcript_chars=settings.max_transcript_chars
    )

    return ResponseHelper.create_success_response(formats_data.model_dump(), request_id)
