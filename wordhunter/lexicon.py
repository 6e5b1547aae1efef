from __future__ import annotations

import bisect
import logging
from typing import Iterable

from wordhunter.errors import InvalidArgumentError, LexiconLoadError

logger = logging.getLogger("wordhunter")

# Upper bound for prefix range queries: sorts after any character a word can hold
_MAX_CHAR = "\U0010ffff"


class Lexicon:
    """Sorted set of uppercase words supporting exact and prefix lookups."""

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words: list[str] = sorted({w.upper() for w in words})

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Lexicon:
        return cls(w for w in words if w)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __iter__(self):
        return iter(self._words)

    def contains(self, word: str) -> bool:
        i = bisect.bisect_left(self._words, word)
        return i < len(self._words) and self._words[i] == word

    def has_prefix(self, prefix: str) -> bool:
        """True if at least one word starts with ``prefix`` (a word is its own prefix)."""
        return self.count_prefix(prefix) > 0

    def count_prefix(self, prefix: str) -> int:
        """Number of words in the half-open range [prefix, prefix + MAX_CHAR)."""
        lo = bisect.bisect_left(self._words, prefix)
        hi = bisect.bisect_left(self._words, prefix + _MAX_CHAR, lo)
        return hi - lo


def load_lexicon(path) -> Lexicon:
    """Load a word list file: every whitespace-delimited token becomes an uppercase word."""
    if path is None:
        raise InvalidArgumentError("lexicon path must not be None")
    try:
        with open(path, "r", encoding="utf-8") as f:
            lexicon = Lexicon.from_words(token for line in f for token in line.split())
    except (OSError, UnicodeDecodeError) as e:
        raise LexiconLoadError(f"Error loading word list: {path}: {e}") from e
    logger.info("Loaded %d words from %s", len(lexicon), path)
    return lexicon
