import sys
from pathlib import Path

# Ensure the project's `src/` directory is on sys.path so test modules
# can import `article_simplifier` without installing the package first.
root_dir = Path(__file__).resolve().parents[1]
src_dir = root_dir / "src"
if src_dir.exists() and str(src_dir) not in sys.path:
    sys.path.insert(0, str(src_dir))

import pytest

from article_simplifier.common.settings import settings as S


@pytest.fixture(autouse=True)
def _no_external_vocabulary(monkeypatch):
    """Keep a VOCABULARY_PATH from the developer's environment out of tests."""
    monkeypatch.setattr(S, "vocabulary_path", None)


@pytest.fixture
def lexicon_file(tmp_path):
    path = tmp_path / "lexicon.json"
    path.write_text('{"Enormous": "Big", "utilize": "employ"}', encoding="utf-8")
    return path
