import pytest

from config import ScoringThresholds
from conftest import SAMPLE_RESUME
from services.evidence_index import NOT_MENTIONED, build_sentence_index
from services.requirement_evaluator import (
    clamp_score,
    evaluate_requirement,
    rounded_ratio,
    score_stems,
    status_for_score,
)
from services.tokenizer import stem, stem_set, tokenize


@pytest.fixture
def resume_stems():
    return stem_set(tokenize(SAMPLE_RESUME))


@pytest.fixture
def sentence_index():
    return build_sentence_index(SAMPLE_RESUME)


class TestEvaluateRequirement:
    def test_weighted_match_with_evidence(self, resume_stems, sentence_index):
        ev = evaluate_requirement(
            "Experience with ISO 9001 audit and documentation", resume_stems, sentence_index
        )
        # iso, 9001, audit weigh 2; experience, documentation weigh 1; only experience missing
        assert ev.score == 88
        assert ev.status == "Yes"
        assert ev.evidence.startswith("Led internal audits")

    def test_communication_scores_33_via_communicator_synonym(self, resume_stems, sentence_index):
        # Only "communication" matches; "strong" and "skills" have no resume form
        ev = evaluate_requirement("Strong communication skills", resume_stems, sentence_index)
        assert ev.score == 33
        assert ev.status == "Partially"
        assert ev.evidence == NOT_MENTIONED

    def test_full_match(self, resume_stems, sentence_index):
        ev = evaluate_requirement("Internal audits", resume_stems, sentence_index)
        assert ev.score == 100
        assert ev.status == "Yes"

    def test_no_match(self, resume_stems, sentence_index):
        ev = evaluate_requirement("Python programming", resume_stems, sentence_index)
        assert ev.score == 0
        assert ev.status == "No"
        assert ev.evidence == NOT_MENTIONED

    def test_requirement_kept_verbatim(self, resume_stems, sentence_index):
        requirement = "  ISO 9001 audits (mandatory)  "
        ev = evaluate_requirement(requirement, resume_stems, sentence_index)
        assert ev.requirement == requirement

    def test_stop_words_only_is_not_evaluable(self, resume_stems, sentence_index):
        assert evaluate_requirement("and or the of", resume_stems, sentence_index) is None
        assert evaluate_requirement("", resume_stems, sentence_index) is None

    def test_idempotent(self, resume_stems, sentence_index):
        requirement = "Experience with ISO 9001 audit and documentation"
        first = evaluate_requirement(requirement, resume_stems, sentence_index)
        second = evaluate_requirement(requirement, resume_stems, sentence_index)
        assert first == second

    def test_custom_thresholds(self, resume_stems, sentence_index):
        strict = ScoringThresholds(status_yes_cutoff=90, status_partial_cutoff=50)
        ev = evaluate_requirement(
            "Experience with ISO 9001 audit and documentation",
            resume_stems, sentence_index, strict,
        )
        assert ev.status == "Partially"


class TestScoreStems:
    def test_critical_terms_weigh_double(self):
        stems = [stem("iso"), stem("training")]
        assert score_stems(stems, frozenset({"iso"})) == 67
        assert score_stems(stems, frozenset({"train"})) == 33

    def test_empty(self):
        assert score_stems([], frozenset({"iso"})) == 0

    def test_monotonic_in_resume_stems(self):
        stems = [stem(t) for t in tokenize("ISO 17025 calibration records and audit reports")]
        resume: set[str] = set()
        previous = score_stems(stems, frozenset(resume))
        for extra in ["iso", "record", "17025", "calibration", "report", "audit"]:
            resume.add(extra)
            current = score_stems(stems, frozenset(resume))
            assert current >= previous
            assert 0 <= current <= 100
            previous = current
        assert previous == 100


class TestStatus:
    @pytest.mark.parametrize("score,status", [
        (100, "Yes"), (60, "Yes"), (59, "Partially"), (30, "Partially"), (29, "No"), (0, "No"),
    ])
    def test_default_cutoffs(self, score, status):
        assert status_for_score(score) == status


def test_rounded_ratio_half_up():
    assert rounded_ratio(175, 2) == 88
    assert rounded_ratio(145, 2) == 73
    assert rounded_ratio(1, 3) == 0
    assert rounded_ratio(2, 3) == 1
    assert rounded_ratio(700, 8) == 88


def test_clamp_score():
    assert clamp_score(-5) == 0
    assert clamp_score(150) == 100
    assert clamp_score(42) == 42
