"""Data models for the YouTube Transcript Digest Service."""
from .requests import DigestRequest, ClassifyRequest, FetchTranscriptsRequest
from .transcript import TranscriptResult, BatchSummary, TranscriptBatchResponse
from .digest import Digest, ClassifiedURL, ClassificationData
from .responses import (
    ResponseMetadata, ErrorDetails, ErrorInfo,
    SuccessResponse, ErrorResponse,
    PlatformFeatures, SupportedFormatsData,
    DependencyStatus, HealthMetrics, HealthData
)

__all__ = [
    "DigestRequest", "ClassifyRequest", "FetchTranscriptsRequest",
    "TranscriptResult", "BatchSummary", "TranscriptBatchResponse",
    "Digest", "ClassifiedURL", "ClassificationData",
    "ResponseMetadata", "ErrorDetails", "ErrorInfo",
    "SuccessResponse", "ErrorResponse",
    "PlatformFeatures", "SupportedFormatsData",
    "DependencyStatus", "HealthMetrics", "HealthData"
]
