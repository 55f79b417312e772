"""Digest-related data models."""
from typing import List, Optional
from pydantic import BaseModel, Field


class Digest(BaseModel):
    """LLM-ready transcript digest with its summary scalars."""
    content: str = Field("", description="Formatted digest text")
    success_count: int = Field(0, description="Number of transcripts included")
    cost: float = Field(0.0, description="Total cost reported by the transcription service")


class ClassifiedURL(BaseModel):
    """Classification of a single URL."""
    url: str
    video_id: Optional[str] = None
    supported: bool = False


class ClassificationData(BaseModel):
    """Classification of a list of URLs."""
    urls: List[ClassifiedURL]
    valid_count: int
    invalid_count: int
