"""
Text normalization for keyword matching.

Request text and profile keywords go through the same steps so matching can
be an exact comparison of token sequences.
"""
import re
from typing import Iterable, List, Sequence, Set, Tuple

# Apostrophes inside words are dropped ("don't" -> "dont") before splitting
_APOSTROPHES = re.compile(r"['’]")
_NON_WORD = re.compile(r"[\W_]+")

STOPWORDS: Set[str] = {
    "a", "an", "and", "are", "as", "at", "be", "by", "can", "for", "from",
    "how", "i", "in", "is", "it", "me", "my", "of", "on", "or", "our",
    "please", "so", "that", "the", "this", "to", "we", "with", "you", "your",
}


def normalize_tokens(text: str) -> List[str]:
    """Case-fold text, strip punctuation and return the word sequence."""
    lowered = _APOSTROPHES.sub("", text.casefold())
    return [token for token in _NON_WORD.split(lowered) if token]


def normalize_phrase(text: str) -> str:
    """Normalized form of a keyword: its tokens joined by single spaces."""
    return " ".join(normalize_tokens(text))


def contains_phrase(tokens: Sequence[str], phrase: Tuple[str, ...]) -> bool:
    """True when ``phrase`` occurs as a contiguous run inside ``tokens``."""
    size = len(phrase)
    if size == 0 or size > len(tokens):
        return False
    if size == 1:
        return phrase[0] in tokens
    return any(
        tuple(tokens[i:i + size]) == phrase for i in range(len(tokens) - size + 1)
    )


def unmatched_terms(tokens: Sequence[str], matched: Iterable[str]) -> List[str]:
    """Content tokens not covered by any matched phrase, first-seen order."""
    covered: Set[str] = set()
    for phrase in matched:
        covered.update(phrase.split())
    seen: Set[str] = set()
    result: List[str] = []
    for token in tokens:
        if token in STOPWORDS or token in covered or token in seen:
            continue
        seen.add(token)
        result.append(token)
    return result
