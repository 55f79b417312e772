"""Utility modules for the YouTube Transcript Digest Service."""
from .validators import YouTubeURLClassifier, URLShape
from .response_helpers import ResponseHelper
from .logging import LoggerSetup, CorrelatedLogger, MetricsLogger

__all__ = [
    "YouTubeURLClassifier", "URLShape", "ResponseHelper",
    "LoggerSetup", "CorrelatedLogger", "MetricsLogger"
]
