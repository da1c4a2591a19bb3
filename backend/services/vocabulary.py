"""Synonym and weight tables for requirement scoring.

Both tables are written with readable words and re-keyed through
``stem`` at import, so a key is always reachable from a stemmed
requirement token ("training" is stored under "train").
"""

from services.tokenizer import stem, tokenize

CRITICAL_WEIGHT = 2
DEFAULT_WEIGHT = 1

# ---------------------------------------------------------------------------
# Equivalent surface forms per concept (quality / audit role family)
# ---------------------------------------------------------------------------
_SYNONYM_SOURCE: dict[str, list[str]] = {
    "maintain": ["maintain", "update", "improve", "keep"],
    "documentation": [
        "documentation", "documents", "records", "manual", "procedure",
        "procedures", "instructions", "docs",
    ],
    "audit": [
        "audit", "auditing", "audits", "review", "reviews", "compliance",
        "monitoring", "monitor",
    ],
    "compliance": ["compliance", "conformance", "conformity", "conform"],
    "calibration": ["calibration", "calibrated", "calibrating", "calibrate"],
    "proficiency": ["proficiency", "competence", "competency"],
    "quality": ["quality", "qms", "quality management"],
    "management": ["management", "manage", "managing", "managed"],
    "training": ["training", "train", "trained", "coaching", "learning"],
    "performance": ["performance", "kpi", "key performance", "analysis", "monitoring"],
    "customer": ["customer", "client", "stakeholder"],
    "nonconformity": ["nonconformity", "non-conformity", "deviation", "noncompliance"],
    "feedback": ["feedback", "survey", "comments"],
    "report": ["report", "reporting"],
    "investigation": ["investigation", "investigate", "analysis", "analyzing"],
    "competency": ["competency", "competence", "competences"],
    "communication": [
        "communication", "communicator", "communicate", "communicating",
        "presentation",
    ],
}

# Standards and certification terms weighted double
_CRITICAL_SOURCE: tuple[str, ...] = (
    "iso", "17025", "9001", "audit", "auditing", "compliance", "quality",
    "calibration", "proficiency", "testing", "management", "review", "analysis",
)


def _build_synonyms() -> dict[str, tuple[str, ...]]:
    table: dict[str, tuple[str, ...]] = {}
    for key, forms in _SYNONYM_SOURCE.items():
        table[stem(key)] = tuple(f.lower() for f in forms)
    return table


SYNONYMS: dict[str, tuple[str, ...]] = _build_synonyms()
CRITICAL_STEMS: frozenset[str] = frozenset(stem(t) for t in _CRITICAL_SOURCE)


def weight_of(token_stem: str) -> int:
    """Scoring weight of a requirement stem."""
    return CRITICAL_WEIGHT if token_stem in CRITICAL_STEMS else DEFAULT_WEIGHT


def synonyms_for(token_stem: str) -> tuple[str, ...]:
    return SYNONYMS.get(token_stem, (token_stem,))


def synonym_present(synonym: str, resume_stems: frozenset[str]) -> bool:
    """Check whether a synonym surface form occurs in a stemmed token set.

    Single words are stemmed and looked up directly. Phrases such as
    "quality management" go through ``tokenize`` and need every stemmed
    word present.
    """
    if synonym.isalnum():
        return stem(synonym) in resume_stems
    words = tokenize(synonym)
    if not words:
        return False
    return all(stem(w) in resume_stems for w in words)


def stem_matches(token_stem: str, resume_stems: frozenset[str]) -> bool:
    """Return True when a requirement stem, or any of its synonyms, is in the resume.

    A stem with no table entry is looked up as-is. Re-stemming it would
    strip a second suffix ("process" -> "proces" -> "proce") and it
    would then miss its own resume form.
    """
    forms = SYNONYMS.get(token_stem)
    if forms is None:
        return token_stem in resume_stems
    return any(synonym_present(form, resume_stems) for form in forms)
