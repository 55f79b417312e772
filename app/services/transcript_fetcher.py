"""Batch transcript fetching against the remote transcription service."""
import asyncio
from typing import List, Optional

import aiohttp

from app.core.config import settings
from app.core.exceptions import TranscriptServiceError
from app.models.transcript import TranscriptBatchResponse
from app.utils.logging import CorrelatedLogger, MetricsLogger


def _describe_fault(error: Exception) -> str:
    """Map a failed fetch to the message reported for every URL in the batch."""
    if isinstance(error, TranscriptServiceError):
        return error.message
    # Transport faults: connection errors, timeouts, unparseable bodies
    if str(error):
        return str(error)
    if isinstance(error, (asyncio.TimeoutError, TimeoutError)):
        return "Request to the transcription service timed out. Please try again later."
    return type(error).__name__


class TranscriptFetcher:
    """Fetches transcripts for a batch of YouTube URLs in a single request."""

    def __init__(self, api_url: Optional[str] = None, timeout_seconds: Optional[int] = None):
        self.api_url = api_url or settings.transcript_api_url
        self.timeout_seconds = timeout_seconds or settings.transcript_request_timeout
        self.metrics = MetricsLogger()

    async def fetch_transcripts(
        self,
        urls: List[str],
        api_key: str,
        request_id: Optional[str] = None
    ) -> TranscriptBatchResponse:
        """
        Fetch transcripts for all URLs with one POST to the transcription service.

        Never raises: a rejected or failed request yields a batch in which
        every URL failed with the same error message.

        Args:
            urls: Validated YouTube URLs, in order
            api_key: Credential for the transcription service
            request_id: Request correlation ID for logging

        Returns:
            TranscriptBatchResponse as reported by the service, or an all-failed batch
        """
        logger = CorrelatedLogger(__name__, request_id)
        logger.info(f"Fetching transcripts for {len(urls)} URLs: {', '.join(urls)}")

        try:
            result = await self._request_batch(urls, api_key, logger)
        except Exception as e:
            error_message = _describe_fault(e)
            logger.error(f"Failed to fetch transcripts: {error_message}")
            self.metrics.log_batch_metrics(
                request_id,
                requested=len(urls),
                successful=0,
                failed=len(urls),
                total_cost=0.0,
                status="failed",
                status_code=getattr(e, "status_code", None)
            )
            return TranscriptBatchResponse.all_failed(urls, error_message)

        summary = result.summary
        logger.info(
            f"Successfully fetched {summary.successful}/{summary.requested} transcripts. "
            f"Cost: ${summary.total_cost}"
        )
        self.metrics.log_batch_metrics(
            request_id,
            requested=summary.requested,
            successful=summary.successful,
            failed=summary.failed,
            total_cost=summary.total_cost,
            status="success",
            status_code=200
        )
        return result

    async def _request_batch(
        self,
        urls: List[str],
        api_key: str,
        logger: CorrelatedLogger
    ) -> TranscriptBatchResponse:
        """Perform the HTTP round trip; raises on any failure."""
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        headers = {
            'Content-Type': 'application/json',
            'x-api-key': api_key,
        }

        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.post(self.api_url, json={'urls': urls}, headers=headers) as response:
                logger.info(f"API response status: {response.status}")

                if not 200 <= response.status < 300:
                    error_text = await response.text()
                    logger.error(f"API error: {response.status} {error_text}")
                    raise TranscriptServiceError(response.status, error_text)

                data = await response.json(content_type=None)

        return TranscriptBatchResponse.model_validate(data)
