"""
Readability estimation and level-targeted article simplification.
Import surface: `from article_simplifier import analyze, Simplifier, ProficiencyLevel`.
"""

from .analyzer import analyze, count_syllables
from .errors import SimplifierError, UnknownLevelError, VocabularyLoadError
from .models import Article, ProficiencyLevel, ReadabilityMetrics
from .pipeline import ProgressCallback, Simplifier
from .rewriter import SentenceRewriter
from .vocabulary import BuiltinVocabularySource, JsonVocabularySource, Vocabulary, VocabularySource

__version__ = "0.1.0"

__all__ = [
    "analyze",
    "count_syllables",
    "Article",
    "ProficiencyLevel",
    "ReadabilityMetrics",
    "ProgressCallback",
    "Simplifier",
    "SentenceRewriter",
    "Vocabulary",
    "VocabularySource",
    "BuiltinVocabularySource",
    "JsonVocabularySource",
    "SimplifierError",
    "UnknownLevelError",
    "VocabularyLoadError",
]
