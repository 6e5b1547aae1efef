from typing import Iterable

from wordhunter.errors import InvalidArgumentError


def check_min_length(min_length) -> int:
    if isinstance(min_length, bool) or not isinstance(min_length, int) or min_length < 1:
        raise InvalidArgumentError(f"minimum word length must be an integer >= 1, got {min_length!r}")
    return min_length


def score_words(words: Iterable[str], min_length: int) -> int:
    """Total score: one point for a word of exactly ``min_length`` characters,
    plus one point per character beyond it. Shorter words score nothing.

    Words are trusted as given; nothing checks they are on the board or in the lexicon.
    """
    if words is None:
        raise InvalidArgumentError("words must not be None")
    check_min_length(min_length)
    score = 0
    for word in words:
        if len(word) >= min_length:
            score += 1 + (len(word) - min_length)
    return score
