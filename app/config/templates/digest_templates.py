"""
Digest Template Engine for transcript digest wording.
Handles template loading, rendering, and validation.
"""
import yaml
from typing import Dict, Any, Optional, List, Tuple
from pathlib import Path
from jinja2 import Template

from app.core.config import settings
from app.core.exceptions import ConfigurationError
from app.utils.logging import CorrelatedLogger


# Keys every language file must define, per section
REQUIRED_KEYS = {
    "all_invalid": ["heading", "message", "formats_heading", "instruction"],
    "all_failed": ["heading", "message", "solutions_heading", "solutions", "instruction"],
    "transcripts": [
        "heading", "section_title", "section_url", "unknown_title", "separator",
        "truncation_marker", "failed_note", "invalid_note", "invalid_reason",
        "unknown_error", "instruction"
    ],
}


class DigestTemplateEngine:
    """
    Template engine for the wording and layout of transcript digests.

    Wording lives in prompts/<digest_type>/<language>.yaml; single-line
    templates are rendered with Jinja2. Layout (blank lines, separators,
    bullet lists) is fixed here so that identical inputs always render
    byte-identical digests.
    """

    def __init__(
        self,
        config_dir: Optional[str] = None,
        digest_type: str = "youtube_digest",
        language: Optional[str] = None
    ):
        """
        Initialize the template engine.

        Args:
            config_dir: Path to configuration directory. Defaults to app/config/
            digest_type: Name of the prompt directory holding the wording
            language: Language code, defaults to settings.digest_language
        """
        self.logger = CorrelatedLogger(__name__)

        if config_dir is None:
            config_dir = Path(__file__).parent.parent

        self.config_dir = Path(config_dir)
        self.prompts_dir = self.config_dir / "prompts"
        self.digest_type = digest_type
        self.language = language or settings.digest_language

        self._config_cache: Dict[str, Dict[str, Any]] = {}

    def load_config(self) -> Dict[str, Any]:
        """
        Load the digest wording for the configured type and language.

        Raises:
            ConfigurationError: If configuration cannot be loaded
        """
        cache_key = f"{self.digest_type}_{self.language}"

        if cache_key in self._config_cache:
            return self._config_cache[cache_key]

        config_path = self.prompts_dir / self.digest_type / f"{self.language}.yaml"

        if not config_path.exists():
            raise ConfigurationError(
                f"Digest configuration not found: {config_path}",
                f"Available languages for {self.digest_type}: {self.get_available_languages()}"
            )

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except Exception as e:
            raise ConfigurationError(f"Failed to load digest configuration: {config_path}", str(e))

        self._config_cache[cache_key] = config_data
        self.logger.info(f"Loaded digest configuration: {self.digest_type}/{self.language}")
        return config_data

    def validate_configuration(self) -> bool:
        """
        Validate that every required key is present.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        config = self.load_config()

        for section, keys in REQUIRED_KEYS.items():
            section_data = config.get(section)
            if not isinstance(section_data, dict):
                raise ConfigurationError(f"{self.digest_type}/{self.language}", f"missing section '{section}'")
            for key in keys:
                if key not in section_data:
                    raise ConfigurationError(
                        f"{self.digest_type}/{self.language}", f"missing key '{section}.{key}'"
                    )

        return True

    def get_available_languages(self) -> List[str]:
        """Get available language codes for the digest type."""
        digest_dir = self.prompts_dir / self.digest_type

        if not digest_dir.exists():
            return []

        return sorted(
            item.stem for item in digest_dir.iterdir()
            if item.is_file() and item.suffix == '.yaml'
        )

    def text(self, section: str, key: str, **template_vars) -> str:
        """Get a single wording entry, rendering template variables if any."""
        config = self.load_config()
        try:
            value = config[section][key]
        except (KeyError, TypeError):
            raise ConfigurationError(f"{self.digest_type}/{self.language}", f"missing key '{section}.{key}'")

        if template_vars:
            return Template(str(value)).render(**template_vars)
        return str(value)

    def render_all_invalid(self, supported_formats: List[str]) -> str:
        """Render the digest for a request where no URL was supported."""
        formats = "\n".join(f"- {fmt}" for fmt in supported_formats)
        return (
            f"{self.text('all_invalid', 'heading')}\n\n"
            f"{self.text('all_invalid', 'message')}\n\n"
            f"{self.text('all_invalid', 'formats_heading')}\n"
            f"{formats}\n\n"
            f"{self.text('all_invalid', 'instruction')}\n\n"
        )

    def render_all_failed(self, error: str) -> str:
        """Render the digest for a batch where no transcript was retrieved."""
        solutions = self.load_config()["all_failed"]["solutions"]
        numbered = "\n".join(f"{i}. {solution}" for i, solution in enumerate(solutions, start=1))
        return (
            f"{self.text('all_failed', 'heading')}\n\n"
            f"{self.text('all_failed', 'message')}\n"
            f"{error}\n\n"
            f"{self.text('all_failed', 'solutions_heading')}\n"
            f"{numbered}\n\n"
            f"{self.text('all_failed', 'instruction')}\n\n"
        )

    def render_section(self, number: int, title: Optional[str], url: str, body: str) -> str:
        """Render one numbered transcript section."""
        title_line = self.text(
            'transcripts', 'section_title',
            number=number, title=title or self.text('transcripts', 'unknown_title')
        )
        url_line = self.text('transcripts', 'section_url', url=url)
        return f"{title_line}\n{url_line}\n\n{body}"

    def render_transcripts(
        self,
        sections: List[str],
        failed: List[Tuple[str, str]],
        invalid: List[Tuple[str, str]]
    ) -> str:
        """
        Render the digest for a batch with at least one transcript.

        Args:
            sections: Rendered transcript sections, in order
            failed: (url, error) for every URL the service could not process
            invalid: (url, reason) for every URL that was not a supported format
        """
        separator = f"\n\n{self.text('transcripts', 'separator')}\n\n"
        body = separator.join(sections)

        notes = ""
        if failed:
            notes += self._render_note('failed_note', failed)
        if invalid:
            notes += self._render_note('invalid_note', invalid)

        return (
            f"{self.text('transcripts', 'heading')}\n\n"
            f"{body}{notes}\n"
            f"{self.text('transcripts', 'instruction')}\n\n"
        )

    def truncation_marker(self) -> str:
        return self.text('transcripts', 'truncation_marker')

    def _render_note(self, key: str, entries: List[Tuple[str, str]]) -> str:
        heading = self.text('transcripts', key, count=len(entries))
        lines = "\n".join(f"- {url}: {reason}" for url, reason in entries)
        return f"\n\n{heading}\n{lines}\n"


# Global template engine instance
_template_engine = None

def get_template_engine() -> DigestTemplateEngine:
    """Get global template engine instance (singleton pattern)."""
    global _template_engine
    if _template_engine is None:
        _template_engine = DigestTemplateEngine()
    return _template_engine
