"""Keyword frequency extraction for explainability views."""

import re
from collections import Counter
from typing import Iterable, List, Optional

from .constants import LexiconConstants

# ASCII letters plus Latin-1 Supplement / Latin Extended-A and -B
_NON_LETTER = re.compile(r"[^a-zA-Z\u00C0-\u024F\s]")

_DEFAULT_STOPWORDS = frozenset(LexiconConstants.STOPWORDS)


def tokenize(text: str, stopwords: Optional[Iterable[str]] = None) -> List[str]:
    """Lowercase, strip non-letters and drop stop words and short tokens."""
    if not text:
        return []
    stop = _DEFAULT_STOPWORDS if stopwords is None else frozenset(stopwords)
    cleaned = _NON_LETTER.sub(" ", text.lower())
    return [
        token for token in cleaned.split()
        if token not in stop and len(token) >= LexiconConstants.MIN_TOKEN_LENGTH
    ]


def top_keywords(text: str, k: int = 6, stopwords: Optional[Iterable[str]] = None) -> List[str]:
    """Most frequent tokens of ``text``; ties keep first-occurrence order."""
    if k <= 0:
        return []
    freq = Counter(tokenize(text, stopwords))
    ranked = sorted(freq.items(), key=lambda item: -item[1])
    return [word for word, _ in ranked[:k]]
