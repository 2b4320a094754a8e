"""Cross-check the heuristic analyzer against textstat's readability formulas.

The grade-style formulas are averaged into a US school grade, which is then
placed on the same 1-6 scale (A1..C2) that :func:`analyzer.analyze` reports,
so the two estimates can be read side by side.
"""
from typing import Dict, Optional

import textstat

from ..analyzer import analyze
from ..models import CEFR_LABELS, ReadabilityMetrics

# Formulas that return a US grade level; averaged for the level estimate
GRADE_FORMULAS = {
    "flesch_kincaid_grade": textstat.flesch_kincaid_grade,
    "gunning_fog": textstat.gunning_fog,
    "smog_index": textstat.smog_index,
    "automated_readability_index": textstat.automated_readability_index,
    "coleman_liau_index": textstat.coleman_liau_index,
    "linsear_write_formula": textstat.linsear_write_formula,
}

# Reported for reference only
SCORE_FORMULAS = {
    "flesch_reading_ease": textstat.flesch_reading_ease,
    "dale_chall_readability_score": textstat.dale_chall_readability_score,
}

# (highest average grade, level), checked top-down; anything above is 6
GRADE_LEVEL_CEILINGS = [
    (2.0, 1),
    (4.0, 2),
    (6.0, 3),
    (8.0, 4),
    (12.0, 5),
]

MIN_TEXT_LENGTH = 50


def grade_to_level(grade: float) -> int:
    """Place an average US grade on the 1 (A1) to 6 (C2) scale."""
    for ceiling, level in GRADE_LEVEL_CEILINGS:
        if grade <= ceiling:
            return level
    return 6


def readability_formula_estimator(
    text: str, metrics: Optional[ReadabilityMetrics] = None
) -> Dict:
    """Score *text* with textstat and compare against the heuristic level.

    *metrics* is the caller's own ``analyze(text)`` result when it already
    has one. Text under 50 characters is left undetermined (level 0).
    """
    if not text or len(text.strip()) < MIN_TEXT_LENGTH:
        return {"estimated_level": 0, "cefr_label": CEFR_LABELS[0]}

    if metrics is None:
        metrics = analyze(text)

    grades = {name: fn(text) for name, fn in GRADE_FORMULAS.items()}
    avg_grade = sum(grades.values()) / len(grades)
    level = grade_to_level(avg_grade)

    return {
        "scores": {**grades, **{name: fn(text) for name, fn in SCORE_FORMULAS.items()}},
        "average_grade_level": avg_grade,
        "estimated_level": level,
        "cefr_label": CEFR_LABELS[level],
        "heuristic_level": metrics.estimated_level,
        "heuristic_label": metrics.cefr_label,
        # positive when the formulas rate the text harder than the heuristic
        "level_gap": level - metrics.estimated_level,
    }
