"""Unit tests for DigestAssembler."""
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from app.models.transcript import TranscriptBatchResponse, TranscriptResult, BatchSummary
from app.services.digest_assembler import DigestAssembler
from app.services.transcript_fetcher import TranscriptFetcher


INSTRUCTION = (
    "Instructions: Use the above YouTube video transcripts to answer the user's query. "
    "Reference specific content from the videos where relevant."
)


def make_response(transcripts, successful, failed, total_cost=0.0):
    """Build a batch response the way the transcription service reports it."""
    return TranscriptBatchResponse(
        transcripts=transcripts,
        summary=BatchSummary(
            requested=len(transcripts),
            processed=len(transcripts),
            successful=successful,
            failed=failed,
            total_cost=total_cost
        )
    )


class TestDigestAssembler:
    """Test cases for DigestAssembler."""

    @pytest.fixture
    def fetcher(self):
        """Mock transcript fetcher."""
        return AsyncMock()

    @pytest.fixture
    def assembler(self, fetcher):
        """Create an assembler around the mock fetcher."""
        return DigestAssembler(fetcher=fetcher, max_transcript_chars=15000)

    @pytest.fixture
    def partial_response(self):
        """Two successes and one failure, costing 0.05."""
        return make_response(
            [
                TranscriptResult(url="https://youtu.be/aaa", success=True, title="First Video", transcript="alpha text"),
                TranscriptResult(url="https://youtu.be/bbb", success=True, transcript="beta text"),
                TranscriptResult(url="https://youtu.be/ccc", success=False, error="No captions available"),
            ],
            successful=2, failed=1, total_cost=0.05
        )

    @pytest.mark.asyncio
    async def test_empty_input_skips_fetcher(self, assembler, fetcher):
        """Test that no URLs means no request and an empty digest."""
        digest = await assembler.process([], "key")

        fetcher.fetch_transcripts.assert_not_called()
        assert digest.content == ""
        assert digest.success_count == 0
        assert digest.cost == 0

    @pytest.mark.asyncio
    async def test_all_invalid_urls(self, assembler, fetcher):
        """Test the digest when nothing is a supported YouTube URL."""
        digest = await assembler.process(["not a url", "https://vimeo.com/1"], "key")

        fetcher.fetch_transcripts.assert_not_called()
        assert digest.success_count == 0
        assert digest.cost == 0
        assert digest.content == (
            "YouTube Video Processing Failed:\n\n"
            "All provided YouTube URLs were invalid or not in a supported format.\n\n"
            "Supported YouTube URL formats:\n"
            "- https://www.youtube.com/watch?v=VIDEO_ID\n"
            "- https://youtu.be/VIDEO_ID\n"
            "- https://youtube.com/embed/VIDEO_ID\n"
            "- https://youtube.com/v/VIDEO_ID\n"
            "- https://youtube.com/live/VIDEO_ID\n\n"
            "Instructions: Let the user know they need to provide valid YouTube URLs.\n\n"
        )

    @pytest.mark.asyncio
    async def test_fetcher_receives_only_valid_urls(self, assembler, fetcher, partial_response):
        """Test that unsupported URLs never reach the service."""
        fetcher.fetch_transcripts.return_value = partial_response

        await assembler.process(
            ["https://youtu.be/aaa", "junk", "https://youtu.be/bbb", "https://youtu.be/ccc"],
            "key",
            request_id="req_1"
        )

        fetcher.fetch_transcripts.assert_awaited_once_with(
            ["https://youtu.be/aaa", "https://youtu.be/bbb", "https://youtu.be/ccc"], "key", "req_1"
        )

    @pytest.mark.asyncio
    async def test_total_fetch_failure(self, assembler, fetcher):
        """Test the digest when no transcript could be retrieved."""
        urls = ["https://youtu.be/aaa", "https://youtu.be/bbb"]
        fetcher.fetch_transcripts.return_value = TranscriptBatchResponse.all_failed(
            urls, "Authentication failed (401): Invalid API key or insufficient permissions."
        )

        digest = await assembler.process(urls, "bad-key")

        assert digest.success_count == 0
        assert digest.cost == 0
        assert digest.content == (
            "YouTube Video Processing Failed:\n\n"
            "YouTube URLs were detected but transcript extraction failed with the following error:\n"
            "Authentication failed (401): Invalid API key or insufficient permissions.\n\n"
            "Possible solutions:\n"
            "1. Verify the API key has sufficient balance and transcript access permissions\n"
            "2. Ensure the YouTube videos have available captions/transcripts\n"
            "3. Check if the videos are public and not age-restricted or deleted\n"
            "4. Try again later if you received a rate limit error\n\n"
            "Instructions: Let the user know that YouTube transcript processing is currently unavailable.\n\n"
        )

    @pytest.mark.asyncio
    async def test_total_failure_reports_zero_cost(self, assembler, fetcher):
        """Test that cost is dropped when nothing usable was produced."""
        fetcher.fetch_transcripts.return_value = make_response(
            [TranscriptResult(url="https://youtu.be/aaa", success=False, error="Video unavailable")],
            successful=0, failed=1, total_cost=0.01
        )

        digest = await assembler.process(["https://youtu.be/aaa"], "key")

        assert digest.cost == 0
        assert "Video unavailable" in digest.content

    @pytest.mark.asyncio
    async def test_total_failure_without_error_message(self, assembler, fetcher):
        fetcher.fetch_transcripts.return_value = make_response(
            [TranscriptResult(url="https://youtu.be/aaa", success=False)],
            successful=0, failed=1
        )

        digest = await assembler.process(["https://youtu.be/aaa"], "key")

        assert "the following error:\nUnknown error\n" in digest.content

    @pytest.mark.asyncio
    async def test_partial_success(self, assembler, fetcher, partial_response):
        """Test numbered sections plus trailing failure notes."""
        fetcher.fetch_transcripts.return_value = partial_response

        digest = await assembler.process(
            ["https://youtu.be/aaa", "https://youtu.be/bbb", "https://youtu.be/ccc", "not a url"],
            "key"
        )

        assert digest.success_count == 2
        assert digest.cost == 0.05
        assert digest.content == (
            "YouTube Video Transcripts:\n\n"
            "[YouTube Video 1] First Video\n"
            "URL: https://youtu.be/aaa\n\n"
            "alpha text"
            "\n\n---\n\n"
            "[YouTube Video 2] Unknown Title\n"
            "URL: https://youtu.be/bbb\n\n"
            "beta text"
            "\n\nNote: 1 YouTube video(s) could not be processed:\n"
            "- https://youtu.be/ccc: No captions available\n"
            "\n\nNote: 1 URL(s) were invalid and skipped:\n"
            "- not a url: Not a supported YouTube URL format\n"
            "\n" + INSTRUCTION + "\n\n"
        )

    @pytest.mark.asyncio
    async def test_full_success_has_no_notes(self, assembler, fetcher):
        fetcher.fetch_transcripts.return_value = make_response(
            [TranscriptResult(url="https://youtu.be/aaa", success=True, title="Only", transcript="text")],
            successful=1, failed=0, total_cost=0.01
        )

        digest = await assembler.process(["https://youtu.be/aaa"], "key")

        assert "Note:" not in digest.content
        assert digest.content.endswith("text\n" + INSTRUCTION + "\n\n")
        assert digest.success_count == 1
        assert digest.cost == 0.01

    @pytest.mark.asyncio
    async def test_failed_notes_keep_service_order(self, assembler, fetcher):
        fetcher.fetch_transcripts.return_value = make_response(
            [
                TranscriptResult(url="https://youtu.be/zzz", success=False, error="first"),
                TranscriptResult(url="https://youtu.be/aaa", success=True, transcript="ok"),
                TranscriptResult(url="https://youtu.be/mmm", success=False),
            ],
            successful=1, failed=2
        )

        digest = await assembler.process(
            ["https://youtu.be/zzz", "https://youtu.be/aaa", "https://youtu.be/mmm"], "key"
        )

        assert (
            "Note: 2 YouTube video(s) could not be processed:\n"
            "- https://youtu.be/zzz: first\n"
            "- https://youtu.be/mmm: Unknown error\n"
        ) in digest.content

    @pytest.mark.asyncio
    async def test_long_transcript_truncated(self, assembler, fetcher):
        """Test that bodies over the cap are cut to exactly the cap plus a marker."""
        fetcher.fetch_transcripts.return_value = make_response(
            [TranscriptResult(url="https://youtu.be/aaa", success=True, title="Long", transcript="a" * 20000)],
            successful=1, failed=0
        )

        digest = await assembler.process(["https://youtu.be/aaa"], "key")

        assert ("\n\n" + "a" * 15000 + "\n\n[Transcript truncated...]\n") in digest.content
        assert "a" * 15001 not in digest.content

    @pytest.mark.asyncio
    async def test_transcript_at_cap_not_truncated(self, assembler, fetcher):
        fetcher.fetch_transcripts.return_value = make_response(
            [TranscriptResult(url="https://youtu.be/aaa", success=True, title="Exact", transcript="b" * 15000)],
            successful=1, failed=0
        )

        digest = await assembler.process(["https://youtu.be/aaa"], "key")

        assert "b" * 15000 in digest.content
        assert "[Transcript truncated...]" not in digest.content

    def test_truncate_transcript(self, assembler):
        assert assembler.truncate_transcript("short") == "short"
        assert assembler.truncate_transcript("c" * 15001) == "c" * 15000 + "\n\n[Transcript truncated...]"

    @pytest.mark.asyncio
    async def test_identical_inputs_give_identical_digest(self, assembler, fetcher, partial_response):
        """Test that the digest body carries no timestamps or randomness."""
        fetcher.fetch_transcripts.return_value = partial_response
        urls = ["https://youtu.be/aaa", "https://youtu.be/bbb", "https://youtu.be/ccc", "bad"]

        first = await assembler.process(urls, "key")
        second = await assembler.process(urls, "key")

        assert first.content == second.content
        assert first == second

    @pytest.mark.asyncio
    async def test_rejected_credential_end_to_end(self):
        """Test a 401 from the service through the real fetcher."""
        response = MagicMock(status=401)
        response.text = AsyncMock(return_value='{"error": "invalid key"}')
        response.__aenter__.return_value = response

        session = MagicMock()
        session.__aenter__.return_value = session
        session.post.return_value = response

        assembler = DigestAssembler(
            fetcher=TranscriptFetcher(api_url="https://transcripts.test/api", timeout_seconds=5)
        )
        urls = ["https://youtu.be/aaa", "not a url", "https://www.youtube.com/watch?v=bbb"]

        with patch('app.services.transcript_fetcher.aiohttp.ClientSession', return_value=session):
            digest = await assembler.process(urls, "bad-key")

        session.post.assert_called_once()
        assert session.post.call_args.kwargs["json"] == {
            "urls": ["https://youtu.be/aaa", "https://www.youtube.com/watch?v=bbb"]
        }
        assert digest.success_count == 0
        assert digest.cost == 0
        assert "Authentication failed" in digest.content
        assert digest.content.startswith("YouTube Video Processing Failed:")
