"""Transcript digest API endpoints."""
from datetime import datetime
from fastapi import APIRouter, Depends, Security

from app.models.requests import DigestRequest, ClassifyRequest, FetchTranscriptsRequest
from app.models.digest import ClassifiedURL, ClassificationData
from app.services import DigestAssembler, TranscriptFetcher
from app.core.dependencies import (
    verify_api_key, get_transcript_api_key,
    get_digest_assembler_dep, get_transcript_fetcher_dep
)
from app.core.exceptions import TranscriptDigestBaseException, ValidationError
from app.utils.response_helpers import ResponseHelper
from app.utils.validators import YouTubeURLClassifier

# Create router
router = APIRouter(prefix="/transcripts", tags=["transcripts"])


def _elapsed_ms(start_time: datetime) -> int:
    return int((datetime.now() - start_time).total_seconds() * 1000)


@router.post("/digest")
async def create_digest(
    request: DigestRequest,
    api_key: str = Security(verify_api_key),
    transcript_api_key: str = Depends(get_transcript_api_key),
    assembler: DigestAssembler = Depends(get_digest_assembler_dep)
):
    """Build an LLM-ready transcript digest from a list of YouTube URLs.

    Unsupported URLs and failed transcripts are described inside the digest
    content rather than reported as request errors.
    """
    request_id = ResponseHelper.generate_request_id()
    start_time = datetime.now()

    digest = await assembler.process(request.urls, transcript_api_key, request_id)

    return ResponseHelper.create_success_response(
        data=digest.model_dump(),
        request_id=request_id,
        processing_time_ms=_elapsed_ms(start_time)
    )


@router.post("/classify")
async def classify_urls(
    request: ClassifyRequest,
    api_key: str = Security(verify_api_key)
):
    """Report which URLs are supported YouTube links and their video IDs."""
    request_id = ResponseHelper.generate_request_id()
    start_time = datetime.now()

    classified = []
    for url in request.urls:
        video_id = YouTubeURLClassifier.extract_video_id(url)
        classified.append(ClassifiedURL(url=url, video_id=video_id, supported=video_id is not None))

    valid_count = sum(1 for item in classified if item.supported)
    data = ClassificationData(
        urls=classified,
        valid_count=valid_count,
        invalid_count=len(classified) - valid_count
    )

    return ResponseHelper.create_success_response(
        data=data.model_dump(),
        request_id=request_id,
        processing_time_ms=_elapsed_ms(start_time)
    )


@router.post("/fetch")
async def fetch_transcripts(
    request: FetchTranscriptsRequest,
    api_key: str = Security(verify_api_key),
    transcript_api_key: str = Depends(get_transcript_api_key),
    fetcher: TranscriptFetcher = Depends(get_transcript_fetcher_dep)
):
    """Fetch raw transcripts for the supported URLs in one batch."""
    request_id = ResponseHelper.generate_request_id()
    start_time = datetime.now()

    try:
        valid_urls, invalid_urls = YouTubeURLClassifier.partition(request.urls)
        if not valid_urls:
            raise ValidationError(
                "No supported YouTube URLs provided",
                {"reason": f"{len(invalid_urls)} URL(s) were not in a supported format"}
            )

        batch = await fetcher.fetch_transcripts(valid_urls, transcript_api_key, request_id)

        data = batch.model_dump()
        data["invalid_urls"] = invalid_urls
        return ResponseHelper.create_success_response(
            data=data,
            request_id=request_id,
            processing_time_ms=_elapsed_ms(start_time)
        )

    except TranscriptDigestBaseException as e:
        return ResponseHelper.create_error_from_exception(e, request_id)
