import re
import string
from typing import List

from .common.structured_logging import get_logger
from .models import ProficiencyLevel
from .vocabulary import Vocabulary

logger = get_logger(__name__)

# Innermost-first match: nested parentheses leave a stray ")" behind
_PARENTHETICAL_RE = re.compile(r"\([^)]*\)")

SPLIT_CONJUNCTIONS = frozenset({"and", "but", "because"})


class SentenceRewriter:
    """
    Rewrite a single sentence for a target level.

    Stages run in a fixed order: parenthetical stripping, vocabulary
    substitution, passive-voice rewriting (currently a pass-through) and
    splitting at conjunctions. The vocabulary is borrowed, not owned.
    """

    def __init__(self, level: ProficiencyLevel, vocabulary: Vocabulary):
        self.level = level
        self.vocabulary = vocabulary

    @property
    def word_limit(self) -> int:
        return self.level.max_sentence_words

    def strip_parens(self, sentence: str) -> str:
        """Drop "(...)" asides for beginner readers; other levels keep them."""
        if self.level != ProficiencyLevel.BEGINNER:
            return sentence
        return _PARENTHETICAL_RE.sub("", sentence)

    def swap_words(self, sentence: str) -> str:
        """Replace hard words, keeping trailing punctuation attached.

        Leading punctuation stays glued to the word, so '"utilize' is not
        matched.
        """
        out = []
        for token in sentence.split():
            word = token.rstrip(string.punctuation)
            suffix = token[len(word):]
            out.append(self.vocabulary.get_simpler_word(word) + suffix)
        return " ".join(out)

    def fix_passive(self, sentence: str) -> str:
        # Passive -> active ("the ball was kicked by john" -> "john kicked
        # the ball") is not attempted yet; the stage is kept so the order
        # of rewrite() stays stable.
        return sentence

    def try_split(self, sentence: str) -> List[str]:
        """Break an overlong sentence after 'and', 'but' or 'because'.

        A conjunction only closes a chunk once the chunk holds at least half
        the level's word limit, and it stays at the end of that chunk.
        Single pass: chunks can still exceed the limit when no conjunction
        shows up late enough.
        """
        words = sentence.split()
        limit = self.word_limit
        if len(words) <= limit:
            return [sentence]

        chunks = []
        chunk = []
        for word in words:
            chunk.append(word)
            if word.lower() in SPLIT_CONJUNCTIONS and len(chunk) >= limit // 2:
                chunks.append(" ".join(chunk))
                chunk = []
        if chunk:
            chunks.append(" ".join(chunk))

        logger.debug(
            "Split long sentence",
            extra={"word_count": len(words), "limit": limit, "chunks": len(chunks)},
        )
        return chunks

    def rewrite(self, sentence: str) -> List[str]:
        s = self.strip_parens(sentence)
        s = self.swap_words(s)
        s = self.fix_passive(s)
        return self.try_split(s)
