from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field

from .errors import UnknownLevelError

# Label per estimated level; index 0 means the level could not be determined
CEFR_LABELS = ["?", "A1", "A2", "B1", "B2", "C1", "C2"]


class ProficiencyLevel(str, Enum):
    """Target reader level for a simplification run."""

    BEGINNER = "beginner"
    ELEMENTARY = "elementary"

    @property
    def cefr(self) -> str:
        return _LEVEL_CEFR[self]

    @property
    def max_sentence_words(self) -> int:
        """Sentences longer than this are candidates for splitting."""
        return _LEVEL_WORD_LIMITS[self]

    @classmethod
    def parse(cls, value: Any) -> "ProficiencyLevel":
        """Resolve *value* by enum value, member name or CEFR code.

        >>> ProficiencyLevel.parse("A2")
        <ProficiencyLevel.ELEMENTARY: 'elementary'>
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if key in (member.value, member.name.lower(), member.cefr.lower()):
                return member
        raise UnknownLevelError(value, choices=[m.value for m in cls])


_LEVEL_CEFR = {
    ProficiencyLevel.BEGINNER: "A1",
    ProficiencyLevel.ELEMENTARY: "A2",
}

_LEVEL_WORD_LIMITS = {
    ProficiencyLevel.BEGINNER: 10,
    ProficiencyLevel.ELEMENTARY: 15,
}


class ReadabilityMetrics(BaseModel):
    """Statistics and Flesch-based estimate for one piece of text."""

    model_config = ConfigDict(frozen=True)

    avg_words_per_sentence: float = 0.0
    avg_syllables_per_word: float = 0.0
    flesch_score: float = 0.0
    estimated_level: int = Field(0, ge=0, le=6)  # 0 = undetermined
    sentence_count: int = 0
    word_count: int = 0
    syllable_count: int = 0

    @computed_field
    @property
    def cefr_label(self) -> str:
        return CEFR_LABELS[self.estimated_level]


class Article(BaseModel):
    """Output of a full simplification run."""

    model_config = ConfigDict(frozen=True)

    original: str
    simplified: str
    level: ProficiencyLevel
    sentence_count: int = 0
    chunk_count: int = 0
