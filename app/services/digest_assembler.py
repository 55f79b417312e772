"""Assembles transcript digests for language-model prompts."""
from typing import List, Optional

from app.config.templates import DigestTemplateEngine, get_template_engine
from app.core.config import settings
from app.models.digest import Digest
from app.models.transcript import TranscriptResult
from app.services.transcript_fetcher import TranscriptFetcher
from app.utils.logging import CorrelatedLogger
from app.utils.validators import YouTubeURLClassifier


class DigestAssembler:
    """Turns a list of raw URLs into a single transcript digest."""

    def __init__(
        self,
        fetcher: Optional[TranscriptFetcher] = None,
        templates: Optional[DigestTemplateEngine] = None,
        max_transcript_chars: Optional[int] = None
    ):
        self.fetcher = fetcher or TranscriptFetcher()
        self.templates = templates or get_template_engine()
        self.max_transcript_chars = max_transcript_chars or settings.max_transcript_chars

    async def process(
        self,
        urls: List[str],
        api_key: str,
        request_id: Optional[str] = None
    ) -> Digest:
        """
        Build a digest for the given URLs.

        Outcomes, in priority order: empty input, no supported URLs,
        no transcripts retrieved, at least one transcript retrieved.
        The transcription service is called at most once.
        """
        logger = CorrelatedLogger(__name__, request_id)

        if not urls:
            return Digest(content="", success_count=0, cost=0.0)

        logger.info(f"Processing {len(urls)} YouTube URLs")

        valid_urls, invalid_urls = YouTubeURLClassifier.partition(urls)

        if not valid_urls:
            logger.info(f"All {len(invalid_urls)} URLs were unsupported")
            content = self.templates.render_all_invalid(YouTubeURLClassifier.supported_formats())
            return Digest(content=content, success_count=0, cost=0.0)

        response = await self.fetcher.fetch_transcripts(valid_urls, api_key, request_id)
        summary = response.summary

        if summary.successful == 0:
            failed = response.failed_results
            main_error = (failed[0].error if failed else None) or self.templates.text('transcripts', 'unknown_error')
            logger.info(f"All transcripts failed. Main error: {main_error}")
            # No usable content, so no cost is reported
            return Digest(content=self.templates.render_all_failed(main_error), success_count=0, cost=0.0)

        sections = [
            self._render_section(number, result)
            for number, result in enumerate(response.successful_results, start=1)
        ]
        unknown_error = self.templates.text('transcripts', 'unknown_error')
        failed_entries = [(t.url, t.error or unknown_error) for t in response.failed_results]
        invalid_reason = self.templates.text('transcripts', 'invalid_reason')
        invalid_entries = [(url, invalid_reason) for url in invalid_urls]

        content = self.templates.render_transcripts(sections, failed_entries, invalid_entries)

        logger.info(
            f"Built digest with {len(sections)} transcripts, "
            f"{len(failed_entries)} failed, {len(invalid_entries)} invalid"
        )
        return Digest(content=content, success_count=summary.successful, cost=summary.total_cost)

    def truncate_transcript(self, transcript: str) -> str:
        """Cap a transcript body at max_transcript_chars, marking the cut."""
        if len(transcript) > self.max_transcript_chars:
            return f"{transcript[:self.max_transcript_chars]}\n\n{self.templates.truncation_marker()}"
        return transcript

    def _render_section(self, number: int, result: TranscriptResult) -> str:
        body = self.truncate_transcript(result.transcript or "")
        return self.templates.render_section(number, result.title, result.url, body)
