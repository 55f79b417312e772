"""YouTube URL classification utilities."""
import re
from typing import List, NamedTuple, Optional, Sequence, Tuple


class URLShape(NamedTuple):
    """A recognized YouTube URL shape."""
    name: str
    pattern: re.Pattern
    example: str


class YouTubeURLClassifier:
    """Classifies raw strings as supported YouTube video URLs."""

    # Ordered, first match wins
    URL_SHAPES: Tuple[URLShape, ...] = (
        URLShape("watch", re.compile(r'youtube\.com/watch\?v=([^?&]+)'),
                 "https://www.youtube.com/watch?v=VIDEO_ID"),
        URLShape("short", re.compile(r'youtu\.be/([^?&]+)'),
                 "https://youtu.be/VIDEO_ID"),
        URLShape("embed", re.compile(r'youtube\.com/embed/([^?&]+)'),
                 "https://youtube.com/embed/VIDEO_ID"),
        URLShape("v", re.compile(r'youtube\.com/v/([^?&]+)'),
                 "https://youtube.com/v/VIDEO_ID"),
        URLShape("live", re.compile(r'youtube\.com/live/([^?&]+)'),
                 "https://youtube.com/live/VIDEO_ID"),
    )

    @classmethod
    def extract_video_id(cls, url: str) -> Optional[str]:
        """Extract the video ID from a YouTube URL, or None if no shape matches."""
        if not isinstance(url, str):
            return None

        for shape in cls.URL_SHAPES:
            match = shape.pattern.search(url)
            if match and match.group(1):
                return match.group(1)
        return None

    @classmethod
    def is_supported(cls, url: str) -> bool:
        """Check whether the URL is a supported YouTube video URL."""
        return cls.extract_video_id(url) is not None

    @classmethod
    def partition(cls, urls: Sequence[str]) -> Tuple[List[str], List[str]]:
        """Split URLs into (valid, invalid), both in input order."""
        valid_urls = []
        invalid_urls = []
        for url in urls:
            if cls.is_supported(url):
                valid_urls.append(url)
            else:
                invalid_urls.append(url)
        return valid_urls, invalid_urls

    @classmethod
    def supported_formats(cls) -> List[str]:
        """Example of every supported URL shape, in matching order."""
        return [shape.example for shape in cls.URL_SHAPES]
