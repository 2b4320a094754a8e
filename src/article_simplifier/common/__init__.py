"""
Shared plumbing for the article simplifier.
Import surface: `from article_simplifier.common import settings, get_logger`.
"""

from .settings import settings
from .structured_logging import get_logger

__all__ = [
    "settings",
    "get_logger",
]
