"""Heuristic readability analysis: syllables, Flesch reading ease, level.

This is rule-based counting, not phonetics. The level cutoffs are rough
calibrations kept stable so scores stay comparable between runs.
"""

from __future__ import annotations

from typing import List

from .common.metrics import ANALYSES_TOTAL
from .common.structured_logging import get_logger
from .models import ReadabilityMetrics

logger = get_logger(__name__)

__all__ = [
    "SENTENCE_TERMINATORS",
    "count_syllables",
    "flesch_reading_ease",
    "estimate_level",
    "split_terminated_sentences",
    "analyze",
]

SENTENCE_TERMINATORS = ".!?"
VOWELS = "aeiouy"

# (minimum Flesch score, level), checked top-down
LEVEL_THRESHOLDS = [
    (80.0, 1),
    (65.0, 2),
    (50.0, 3),
    (40.0, 4),
    (25.0, 5),
]


def count_syllables(word: str) -> int:
    """Approximate syllables by counting vowel groups, minus a silent final e.

    Never returns less than 1.

    >>> count_syllables("banana")
    3
    >>> count_syllables("hope")
    1
    """
    word = word.lower()

    count = 0
    last_was_vowel = False
    for ch in word:
        is_vowel = ch in VOWELS
        if is_vowel and not last_was_vowel:
            count += 1
        last_was_vowel = is_vowel

    # silent e
    if len(word) > 2 and word.endswith("e"):
        count -= 1

    return max(1, count)


def flesch_reading_ease(words_per_sentence: float, syllables_per_word: float) -> float:
    return 206.835 - (1.015 * words_per_sentence) - (84.6 * syllables_per_word)


def estimate_level(flesch_score: float) -> int:
    """Map a Flesch score onto levels 1 (easiest) to 6."""
    for minimum, level in LEVEL_THRESHOLDS:
        if flesch_score >= minimum:
            return level
    return 6


def split_terminated_sentences(text: str) -> List[str]:
    """Split *text* after every '.', '!' or '?'.

    Text after the last terminator is discarded.
    """
    sentences = []
    current = []
    for ch in text:
        current.append(ch)
        if ch in SENTENCE_TERMINATORS:
            sentences.append("".join(current))
            current = []
    return sentences


def _words(sentence: str) -> List[str]:
    words = []
    for token in sentence.split():
        # any Unicode letter counts, so "café" and "日本語" are words
        word = "".join(ch for ch in token if ch.isalpha())
        if word:
            words.append(word)
    return words


def analyze(text: str) -> ReadabilityMetrics:
    """Compute sentence/word/syllable statistics and a level estimate for *text*.

    Text with no terminated sentence yields an all-zero record with level 0.
    """
    ANALYSES_TOTAL.inc()

    sentences = split_terminated_sentences(text)
    if not sentences:
        logger.debug("No terminated sentences found", extra={"text_length": len(text)})
        return ReadabilityMetrics()

    total_words = 0
    total_syllables = 0
    for sentence in sentences:
        words = _words(sentence)
        total_words += len(words)
        total_syllables += sum(count_syllables(w) for w in words)

    words_per_sentence = total_words / len(sentences)
    syllables_per_word = total_syllables / total_words if total_words else 0.0
    score = flesch_reading_ease(words_per_sentence, syllables_per_word)

    metrics = ReadabilityMetrics(
        avg_words_per_sentence=words_per_sentence,
        avg_syllables_per_word=syllables_per_word,
        flesch_score=score,
        estimated_level=estimate_level(score),
        sentence_count=len(sentences),
        word_count=total_words,
        syllable_count=total_syllables,
    )
    logger.debug(
        "Readability analysed",
        extra={
            "sentence_count": metrics.sentence_count,
            "word_count": metrics.word_count,
            "flesch_score": round(score, 2),
            "estimated_level": metrics.estimated_level,
        },
    )
    return metrics
