"""Transcript-related data models."""
from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field


class TranscriptResult(BaseModel):
    """Outcome of a transcript request for a single URL."""
    url: str = Field(..., description="Source URL as supplied by the caller")
    success: bool = Field(..., description="Whether a transcript was retrieved")
    title: Optional[str] = Field(None, description="Video title reported by the service")
    transcript: Optional[str] = Field(None, description="Transcript text if successful")
    error: Optional[str] = Field(None, description="Error message if the request failed")


class BatchSummary(BaseModel):
    """Aggregate counters for one batch request."""
    model_config = ConfigDict(populate_by_name=True)

    requested: int = Field(..., description="Number of URLs sent to the service")
    processed: int = Field(..., description="Number of URLs the service handled")
    successful: int = Field(..., description="Number of transcripts retrieved")
    failed: int = Field(..., description="Number of URLs that failed")
    total_cost: float = Field(0.0, alias="totalCost", description="Total cost in service currency units")


class TranscriptBatchResponse(BaseModel):
    """Per-URL results plus summary, mirroring the transcription service payload."""
    transcripts: List[TranscriptResult] = Field(default_factory=list)
    summary: BatchSummary

    @classmethod
    def all_failed(cls, urls: List[str], error: str) -> "TranscriptBatchResponse":
        """Build a batch where every URL failed with the same error."""
        return cls(
            transcripts=[TranscriptResult(url=url, success=False, error=error) for url in urls],
            summary=BatchSummary(
                requested=len(urls),
                processed=len(urls),
                successful=0,
                failed=len(urls),
                total_cost=0.0
            )
        )

    @property
    def successful_results(self) -> List[TranscriptResult]:
        return [t for t in self.transcripts if t.success]

    @property
    def failed_results(self) -> List[TranscriptResult]:
        return [t for t in self.transcripts if not t.success]
