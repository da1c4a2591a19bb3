"""Sentence-level evidence lookup over a resume."""

import re
from collections.abc import Sequence

from models.schemas.evidence import EvidenceSentence
from services.tokenizer import token_set, tokenize

NOT_MENTIONED = "Not mentioned in text."

_CHUNK_SPLIT_RE = re.compile(r"[\n.!?]")


def build_sentence_index(resume_text: str) -> tuple[EvidenceSentence, ...]:
    """Split a resume into sentence-like chunks with their token sets.

    Built once per analysis and only read afterwards.
    """
    chunks = (c.strip() for c in _CHUNK_SPLIT_RE.split(resume_text or ""))
    return tuple(
        EvidenceSentence(text=chunk, tokens=token_set(tokenize(chunk)))
        for chunk in chunks
        if chunk
    )


def find_evidence(
    requirement_tokens: Sequence[str],
    sentence_index: Sequence[EvidenceSentence],
) -> str | None:
    """Return the sentence sharing the most tokens with a requirement.

    Duplicate requirement tokens count once per occurrence. Ties keep the
    earliest sentence; no overlap at all returns None.
    """
    best_sentence: str | None = None
    best_overlap = 0
    for sentence in sentence_index:
        overlap = sum(1 for t in requirement_tokens if t in sentence.tokens)
        if overlap > best_overlap:
            best_overlap = overlap
            best_sentence = sentence.text
    return best_sentence
