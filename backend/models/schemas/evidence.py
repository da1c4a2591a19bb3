"""Resume chunk used as requirement evidence."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EvidenceSentence:
    text: str
    tokens: frozenset[str]
