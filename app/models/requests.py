"""Request models for the YouTube Transcript Digest Service."""
from typing import List
from pydantic import BaseModel, Field

class DigestRequest(BaseModel):
    """Request model for building a transcript digest."""
    # Plain strings: unsupported URLs are reported in the digest, not rejected
    urls: List[str] = Field(default_factory=list)

class ClassifyRequest(BaseModel):
    """Request model for URL classification."""
    urls: List[str] = Field(default_factory=list)

class FetchTranscriptsRequest(BaseModel):
    """Request model for a raw transcript batch fetch."""
    urls: List[str]
