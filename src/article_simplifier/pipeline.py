"""
Article simplification pipeline.

Segments an article into sentences, rewrites each one for the target level
and stitches the pieces back into prose. Sentences are rewritten
independently of each other; only their order matters on reassembly.
"""
from typing import Callable, List, Optional

from .analyzer import SENTENCE_TERMINATORS
from .common.metrics import CHUNKS_TOTAL, RUN_DURATION_SECONDS, RUNS_TOTAL, SENTENCES_TOTAL
from .common.structured_logging import clear_run_context, get_logger, set_run_context
from .models import Article, ProficiencyLevel
from .rewriter import SentenceRewriter
from .vocabulary import Vocabulary, VocabularySource

logger = get_logger(__name__)

# Called as progress(completed_sentences, total_sentences)
ProgressCallback = Callable[[int, int], None]


class Simplifier:
    """Rewrite whole articles toward one proficiency level."""

    def __init__(
        self,
        level: ProficiencyLevel,
        progress: Optional[ProgressCallback] = None,
        vocabulary_source: Optional[VocabularySource] = None,
    ):
        self.level = level
        self.vocabulary = Vocabulary(level, source=vocabulary_source)
        self.rewriter = SentenceRewriter(level, self.vocabulary)
        self._progress = progress

    def set_progress(self, callback: Optional[ProgressCallback]) -> None:
        """Register the progress callback; ``None`` turns notifications off."""
        self._progress = callback

    def split_sentences(self, text: str) -> List[str]:
        """Split after every terminator, keeping any unterminated tail.

        Unlike :func:`analyzer.split_terminated_sentences`, trailing text with
        no '.', '!' or '?' is returned as a final sentence.
        """
        sentences = []
        current = []
        for ch in text:
            current.append(ch)
            if ch in SENTENCE_TERMINATORS:
                sentences.append("".join(current))
                current = []
        if current:
            sentences.append("".join(current))
        return sentences

    def rejoin(self, chunks: List[str]) -> str:
        """Capitalise and terminate each chunk, then join with single spaces."""
        parts = []
        for chunk in chunks:
            s = chunk.lstrip(" \t\n")
            if not s:
                continue
            s = s[0].upper() + s[1:]
            if s[-1] not in SENTENCE_TERMINATORS:
                s += "."
            parts.append(s)
        return " ".join(parts)

    def run(self, text: str) -> Article:
        run_id = set_run_context(target_level=self.level.value)
        try:
            with logger.log_performance("simplify_article", text_length=len(text)) as perf:
                sentences = self.split_sentences(text)
                total = len(sentences)

                chunks = []
                for i, sentence in enumerate(sentences):
                    parts = self.rewriter.rewrite(sentence)
                    chunks.extend(parts)
                    logger.debug(
                        "Sentence rewritten",
                        extra={"index": i, "chunks": len(parts)},
                    )
                    if self._progress is not None:
                        self._progress(i + 1, total)

                simplified = self.rejoin(chunks)

            SENTENCES_TOTAL.labels(level=self.level.value).inc(total)
            CHUNKS_TOTAL.labels(level=self.level.value).inc(len(chunks))
            RUNS_TOTAL.labels(level=self.level.value).inc()
            RUN_DURATION_SECONDS.labels(level=self.level.value).observe(perf.duration)
        finally:
            clear_run_context()

        logger.debug(
            "Article simplified",
            extra={"run_id": run_id, "sentence_count": total, "chunk_count": len(chunks)},
        )
        return Article(
            original=text,
            simplified=simplified,
            level=self.level,
            sentence_count=total,
            chunk_count=len(chunks),
        )
