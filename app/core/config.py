"""
Configuration management for the YouTube Transcript Digest Service.
Centralizes environment variable handling and application settings.
"""
import os
from typing import List
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        # API Configuration
        self.api_title = "YouTube Transcript Digest Service"
        self.api_description = "A service that turns YouTube links into an LLM-ready transcript digest"
        self.api_version = "1.0.0"
        self.debug_mode = os.getenv("DEBUG_MODE", "false").lower() == "true"

        # Security
        self.api_key = os.getenv("API_KEY", "your-default-api-key-here")
        self.allowed_origins = ["*"]  # Would be configurable in production

        # Transcription service
        self.transcript_api_url = os.getenv(
            "TRANSCRIPT_API_URL", "https://nano-gpt.com/api/youtube-transcribe"
        )
        self.transcript_api_key = os.getenv("NANOGPT_API_KEY", "")
        self.transcript_request_timeout = int(os.getenv("TRANSCRIPT_REQUEST_TIMEOUT", "120"))  # seconds

        # Digest
        self.max_transcript_chars = int(os.getenv("MAX_TRANSCRIPT_CHARS", "15000"))
        self.digest_language = os.getenv("DIGEST_LANGUAGE", "en")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

class PlatformConfig:
    """Platform-specific configurations."""

    SUPPORTED_PLATFORMS = {
        "youtube": {
            "domains": ["youtube.com", "www.youtube.com", "m.youtube.com", "youtu.be"],
            "features": ["transcript_extraction", "batch_digest"],
        }
    }

    @classmethod
    def get_platform_domains(cls, platform: str) -> List[str]:
        """Get supported domains for a platform."""
        return cls.SUPPORTED_PLATFORMS.get(platform, {}).get("domains", [])

    @classmethod
    def get_platform_features(cls, platform: str) -> List[str]:
        """Get supported features for a platform."""
        return cls.SUPPORTED_PLATFORMS.get(platform, {}).get("features", [])

# Create global settings instance
settings = Settings()
