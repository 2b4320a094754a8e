"""Level-specific word substitution tables.

A :class:`Vocabulary` answers "is this word hard, and what should replace
it?" for one proficiency level. Where the mapping comes from is a
:class:`VocabularySource`: the small builtin tables below, or a JSON lexicon
on disk layered over them.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Protocol, runtime_checkable

from .common.settings import settings as S
from .common.structured_logging import get_logger
from .errors import VocabularyLoadError
from .models import ProficiencyLevel

logger = get_logger(__name__)

__all__ = [
    "VocabularySource",
    "BuiltinVocabularySource",
    "JsonVocabularySource",
    "Vocabulary",
]

BEGINNER_WORDS: Dict[str, str] = {
    "utilize": "use",
    "commence": "start",
    "terminate": "end",
    "residence": "home",
    "purchase": "buy",
    "inquire": "ask",
    "observe": "see",
    "obtain": "get",
    "assistance": "help",
    "demonstrate": "show",
    "approximately": "about",
    "sufficient": "enough",
    "however": "but",
    "therefore": "so",
    "additionally": "also",
    "attempt": "try",
    "require": "need",
}

# Layered on top of the beginner table
ELEMENTARY_EXTRA_WORDS: Dict[str, str] = {
    "facilitate": "help",
    "construct": "build",
    "complete": "finish",
    "numerous": "many",
    "previously": "before",
}


@runtime_checkable
class VocabularySource(Protocol):
    """Anything that can suggest a simpler word for a lowercased word."""

    def lookup(self, word: str) -> Optional[str]:
        ...


class _MappingSource:
    """Read-only mapping-backed source."""

    def __init__(self, mapping: Mapping[str, str]):
        self._mapping = MappingProxyType(dict(mapping))

    @property
    def mapping(self) -> Mapping[str, str]:
        return self._mapping

    def lookup(self, word: str) -> Optional[str]:
        return self._mapping.get(word)

    def __len__(self) -> int:
        return len(self._mapping)


class BuiltinVocabularySource(_MappingSource):
    """The curated in-memory table for a level."""

    def __init__(self, level: ProficiencyLevel):
        table = dict(BEGINNER_WORDS)
        if level == ProficiencyLevel.ELEMENTARY:
            table.update(ELEMENTARY_EXTRA_WORDS)
        super().__init__(table)
        self.level = level


class JsonVocabularySource(_MappingSource):
    """Hard -> simple pairs read from a JSON object on disk.

    Entries from the file win over *base*; lookups that miss the file fall
    through to *base* when one is given.
    """

    def __init__(self, path: str | Path, base: Optional[VocabularySource] = None):
        self.path = Path(path)
        self.base = base
        super().__init__(self._load(self.path))
        logger.info(
            "Loaded vocabulary file",
            extra={"path": str(self.path), "entries": len(self)},
        )

    @staticmethod
    def _load(path: Path) -> Dict[str, str]:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise VocabularyLoadError(f"Vocabulary file not found: {path}", path=str(path)) from e
        except (OSError, ValueError) as e:
            raise VocabularyLoadError(f"Could not read vocabulary file {path}: {e}", path=str(path)) from e

        if not isinstance(raw, dict):
            raise VocabularyLoadError(
                f"Vocabulary file {path} must contain a JSON object", path=str(path)
            )

        table = {}
        for hard, simple in raw.items():
            if not isinstance(simple, str):
                raise VocabularyLoadError(
                    f"Replacement for {hard!r} in {path} is not a string", path=str(path)
                )
            table[hard.strip().lower()] = simple.strip().lower()
        return table

    def lookup(self, word: str) -> Optional[str]:
        found = super().lookup(word)
        if found is None and self.base is not None:
            return self.base.lookup(word)
        return found


def _default_source(level: ProficiencyLevel) -> VocabularySource:
    builtin = BuiltinVocabularySource(level)
    if S.vocabulary_path:
        return JsonVocabularySource(S.vocabulary_path, base=builtin)
    return builtin


class Vocabulary:
    """Simplicity queries for one proficiency level.

    The underlying source is fixed at construction and only ever read, so a
    single instance can be shared between rewriters.
    """

    def __init__(self, level: ProficiencyLevel, source: Optional[VocabularySource] = None):
        self.level = level
        self.source = source if source is not None else _default_source(level)

    def lookup(self, word: str) -> Optional[str]:
        return self.source.lookup(word.lower())

    def is_simple(self, word: str) -> bool:
        """True when *word* has no registered simpler replacement."""
        return self.lookup(word) is None

    def get_simpler_word(self, word: str) -> str:
        """Return the replacement for *word*, or *word* itself unchanged."""
        simpler = self.lookup(word)
        return word if simpler is None else simpler
