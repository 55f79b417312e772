"""Entry point for the YouTube Transcript Digest Service."""

if __name__ == "__main__":
    import uvicorn
    from app.core.config import settings

    print(f"🚀 Starting {settings.api_title} v{settings.api_version}")
    print(f"🔑 Transcript service key configured: {bool(settings.transcript_api_key)}")
    print(f"✂️ Max transcript chars: {settings.max_transcript_chars}")
    print(f"📝 Log level: {settings.log_level}")

    uvicorn.run(
        "app.main:app",  # Use string import for hot reload
        host="0.0.0.0",
        port=8000,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower()
    )
