"""Dependency injection setup for FastAPI."""
from functools import lru_cache
from typing import Optional
from fastapi import Depends, Header, Security
from fastapi.security import APIKeyHeader

from .config import settings
from .exceptions import APIKeyInvalidError
from app.services import TranscriptFetcher, DigestAssembler

# Security dependency
api_key_header = APIKeyHeader(name="x-api-key")

# Service instances cache
@lru_cache()
def get_transcript_fetcher() -> TranscriptFetcher:
    """Get TranscriptFetcher service instance."""
    return TranscriptFetcher()

@lru_cache()
def get_digest_assembler() -> DigestAssembler:
    """Get DigestAssembler service instance."""
    return DigestAssembler(fetcher=get_transcript_fetcher())

# Authentication dependency
async def verify_api_key(api_key: str = Security(api_key_header)) -> str:
    """Verify API key from request header."""
    if api_key != settings.api_key:
        raise APIKeyInvalidError()
    return api_key

async def get_transcript_api_key(
    x_transcript_api_key: Optional[str] = Header(None)
) -> str:
    """Transcription service credential: request header, else configured key."""
    return x_transcript_api_key or settings.transcript_api_key

# Service dependencies
def get_transcript_fetcher_dep(
    fetcher: TranscriptFetcher = Depends(get_transcript_fetcher)
) -> TranscriptFetcher:
    """Dependency for TranscriptFetcher service."""
    return fetcher

def get_digest_assembler_dep(
    assembler: DigestAssembler = Depends(get_digest_assembler)
) -> DigestAssembler:
    """Dependency for DigestAssembler service."""
    return assembler
