"""Turn a job description into an ordered list of requirement strings."""

import logging
import re

from services.tokenizer import normalize

logger = logging.getLogger(__name__)

MIN_LINE_LENGTH = 15
MAX_LINE_REQUIREMENTS = 60

# Sentence fallback for JDs written as prose
MIN_SENTENCE_LENGTH = 26
MAX_SENTENCE_REQUIREMENTS = 40
MIN_LINE_REQUIREMENTS = 3

_LEADING_BULLETS_RE = re.compile(r"^[-*]+")
_SENTENCE_SPLIT_RE = re.compile(r"[.;]")


def _line_requirements(job_description: str) -> list[str]:
    requirements: list[str] = []
    for line in normalize(job_description).split("\n"):
        line = line.strip()
        if len(line) < MIN_LINE_LENGTH:
            continue
        # A separator such as "-----" strips to "" but still counts toward
        # the line total; the evaluator skips it as not evaluable.
        requirements.append(_LEADING_BULLETS_RE.sub("", line).strip())
    return requirements


def _sentence_requirements(job_description: str) -> list[str]:
    """Split the raw (not normalized) text on '.' and ';'."""
    sentences = (s.strip() for s in _SENTENCE_SPLIT_RE.split(job_description or ""))
    return [s for s in sentences if len(s) >= MIN_SENTENCE_LENGTH]


def extract_requirements(job_description: str) -> list[str]:
    """Extract requirement lines, falling back to sentences.

    Bullet-formatted JDs yield one requirement per line (max 60). When that
    gives fewer than three, the JD is treated as prose and split into
    sentences longer than 25 characters (max 40). No deduplication.
    """
    requirements = _line_requirements(job_description)
    if len(requirements) >= MIN_LINE_REQUIREMENTS:
        return requirements[:MAX_LINE_REQUIREMENTS]

    logger.debug(
        "Only %d line requirements found, falling back to sentence split",
        len(requirements),
    )
    return _sentence_requirements(job_description)[:MAX_SENTENCE_REQUIREMENTS]
