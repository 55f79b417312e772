"""Services module for the YouTube Transcript Digest Service."""
from .transcript_fetcher import TranscriptFetcher
from .digest_assembler import DigestAssembler

__all__ = ["TranscriptFetcher", "DigestAssembler"]
