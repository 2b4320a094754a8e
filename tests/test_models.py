import pytest
from pydantic import ValidationError

from article_simplifier.errors import SimplifierError, UnknownLevelError
from article_simplifier.models import ProficiencyLevel, ReadabilityMetrics


class TestProficiencyLevel:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("beginner", ProficiencyLevel.BEGINNER),
            ("BEGINNER", ProficiencyLevel.BEGINNER),
            ("a1", ProficiencyLevel.BEGINNER),
            (" Elementary ", ProficiencyLevel.ELEMENTARY),
            ("A2", ProficiencyLevel.ELEMENTARY),
            (ProficiencyLevel.ELEMENTARY, ProficiencyLevel.ELEMENTARY),
        ],
    )
    def test_parse(self, value, expected):
        assert ProficiencyLevel.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(UnknownLevelError) as exc:
            ProficiencyLevel.parse("C2")
        assert isinstance(exc.value, ValueError)
        assert isinstance(exc.value, SimplifierError)
        assert exc.value.to_dict()["error_code"] == "UNKNOWN_LEVEL"
        assert exc.value.details["choices"] == ["beginner", "elementary"]

    def test_level_attributes(self):
        assert ProficiencyLevel.BEGINNER.cefr == "A1"
        assert ProficiencyLevel.ELEMENTARY.cefr == "A2"
        assert ProficiencyLevel.BEGINNER.max_sentence_words == 10
        assert ProficiencyLevel.ELEMENTARY.max_sentence_words == 15


class TestReadabilityMetrics:
    @pytest.mark.parametrize(
        "level,label",
        [(0, "?"), (1, "A1"), (2, "A2"), (3, "B1"), (4, "B2"), (5, "C1"), (6, "C2")],
    )
    def test_cefr_label(self, level, label):
        assert ReadabilityMetrics(estimated_level=level).cefr_label == label

    def test_level_out_of_range(self):
        with pytest.raises(ValidationError):
            ReadabilityMetrics(estimated_level=7)

    def test_dump_includes_label(self):
        dumped = ReadabilityMetrics(estimated_level=3).model_dump()
        assert dumped["cefr_label"] == "B1"
        assert dumped["flesch_score"] == 0.0
