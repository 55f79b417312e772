"""Response models for the YouTube Transcript Digest Service."""
from typing import Any, Optional, List
from pydantic import BaseModel

class ResponseMetadata(BaseModel):
    """Standard response metadata."""
    request_id: str
    api_version: str = "1.0.0"
    timestamp: Optional[str] = None
    processing_time_ms: Optional[int] = None

class ErrorDetails(BaseModel):
    """Detailed error information."""
    url: Optional[str] = None
    status_code: Optional[int] = None
    setting: Optional[str] = None
    reason: Optional[str] = None

class ErrorInfo(BaseModel):
    """Error information structure."""
    code: str
    message: str
    details: Optional[ErrorDetails] = None

class SuccessResponse(BaseModel):
    """Standard success response."""
    success: bool = True
    data: Any
    metadata: ResponseMetadata

class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = False
    error: ErrorInfo
    metadata: ResponseMetadata

class PlatformFeatures(BaseModel):
    """Platform feature description."""
    name: str
    domains: List[str]
    supported_features: List[str]
    url_formats: List[str]

class SupportedFormatsData(BaseModel):
    """Supported URL formats information."""
    platforms: List[PlatformFeatures]
    max_transcript_chars: int

class DependencyStatus(BaseModel):
    """Service dependency status."""
    transcript_service: str

class HealthMetrics(BaseModel):
    """Service health metrics."""
    uptime_seconds: int

class HealthData(BaseModel):
    """Complete health check response."""
    status: str
    timestamp: str
    version: str
    dependencies: DependencyStatus
    metrics: HealthMetrics
