"""Text normalization, tokenization and crude suffix stemming.

The same ``stem`` must be applied to requirement tokens and resume
tokens, otherwise word forms stop lining up.
"""

import re
from collections.abc import Iterable

from nltk.stem import RegexpStemmer

# English plus a small Malay subset
STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "or", "for", "with", "from", "that", "this", "you", "your",
    "are", "was", "were",
    "dan", "atau", "yang", "dengan", "untuk", "pada", "serta", "dll", "etc",
    "kepada", "di",
    "of", "in", "to", "a", "an", "is", "as", "by", "be",
})

MIN_TOKEN_LENGTH = 3

_BULLET_GLYPHS_RE = re.compile(r"[•▪●]")  # • ▪ ●
_NON_ALNUM_RE = re.compile(r"[^a-z0-9\s]")

# One trailing suffix, removed once. RegexpStemmer substitutes the
# leftmost match, so "sizes" -> "siz" and "audits" -> "audit".
_stemmer = RegexpStemmer(r"(?:ing|ed|es|s)$")


def normalize(text: str | None) -> str:
    """Unify line endings, map bullet glyphs to '-', trim."""
    if not text:
        return ""
    text = text.replace("\r", "\n")
    text = _BULLET_GLYPHS_RE.sub("-", text)
    return text.strip()


def tokenize(text: str | None) -> list[str]:
    """Split text into lowercase alphanumeric tokens.

    Tokens shorter than three characters and stop words are dropped.
    Order and duplicates are preserved.
    """
    cleaned = _NON_ALNUM_RE.sub(" ", normalize(text).lower())
    return [
        w for w in cleaned.split()
        if len(w) >= MIN_TOKEN_LENGTH and w not in STOP_WORDS
    ]


def stem(token: str) -> str:
    return _stemmer.stem(token.lower())


def token_set(tokens: Iterable[str]) -> frozenset[str]:
    return frozenset(tokens)


def stem_set(tokens: Iterable[str]) -> frozenset[str]:
    """Stem every token and collect the result."""
    return frozenset(stem(t) for t in tokens)
