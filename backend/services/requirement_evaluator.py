"""Requirement evaluator: weighted stem overlap plus evidence lookup.

For one requirement:
    tokens  = tokenize(requirement)            (no tokens -> not evaluable)
    stems   = stem(t) for t in tokens
    total   = sum(weight(s))                   critical stems weigh 2
    matched = sum(weight(s) for s matched via its synonym list)
    score   = round(matched / total * 100)     clamped to 0-100
Evidence is looked up with the unstemmed tokens so the quoted sentence
reads naturally.
"""

from collections.abc import Sequence

from config import ScoringThresholds
from models.schemas.analysis_result import MatchStatus, RequirementEvaluation
from models.schemas.evidence import EvidenceSentence
from services.evidence_index import NOT_MENTIONED, find_evidence
from services.tokenizer import stem, tokenize
from services.vocabulary import stem_matches, weight_of

DEFAULT_THRESHOLDS = ScoringThresholds()


def rounded_ratio(numerator: int, denominator: int) -> int:
    """Integer numerator / denominator rounded half up (145 / 2 -> 73).

    Done in integers so exact halves never drift below .5 in floating point.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def clamp_score(value: int) -> int:
    return max(0, min(100, value))


def status_for_score(
    score: int, thresholds: ScoringThresholds = DEFAULT_THRESHOLDS
) -> MatchStatus:
    if score >= thresholds.status_yes_cutoff:
        return "Yes"
    if score >= thresholds.status_partial_cutoff:
        return "Partially"
    return "No"


def score_stems(requirement_stems: Sequence[str], resume_stems: frozenset[str]) -> int:
    """Weighted share of requirement stems found in the resume, 0-100."""
    total_weight = sum(weight_of(s) for s in requirement_stems)
    if total_weight == 0:
        total_weight = len(requirement_stems)
    if total_weight == 0:
        return 0

    matched_weight = sum(
        weight_of(s) for s in requirement_stems if stem_matches(s, resume_stems)
    )
    return clamp_score(rounded_ratio(matched_weight * 100, total_weight))


def evaluate_requirement(
    requirement: str,
    resume_stems: frozenset[str],
    sentence_index: Sequence[EvidenceSentence],
    thresholds: ScoringThresholds = DEFAULT_THRESHOLDS,
) -> RequirementEvaluation | None:
    """Score one requirement against a resume.

    Returns None when the requirement has no usable tokens; such a
    requirement is left out of the results rather than reported.
    """
    raw_tokens = tokenize(requirement)
    if not raw_tokens:
        return None

    score = score_stems([stem(t) for t in raw_tokens], resume_stems)
    evidence = find_evidence(raw_tokens, sentence_index)

    return RequirementEvaluation(
        requirement=requirement,
        status=status_for_score(score, thresholds),
        score=score,
        evidence=evidence or NOT_MENTIONED,
    )
