"""Template system for transcript digest wording."""

from .digest_templates import DigestTemplateEngine, get_template_engine

__all__ = ['DigestTemplateEngine', 'get_template_engine']
