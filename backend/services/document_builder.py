"""Template-based generation of derived documents.

Everything here reads a frozen AnalysisContext and returns plain text;
rendering to DOCX/PDF is left to document_writer.
"""

import logging

from config import ScoringThresholds, settings
from models.schemas.analysis_context import AnalysisContext

logger = logging.getLogger(__name__)

JD_FOCUS_LINES = 4

_PROFESSIONAL_SUMMARIES: dict[str, str] = {
    "Strong": (
        "A highly qualified candidate who meets nearly all job requirements and "
        "brings strong technical and soft skills."
    ),
    "Moderate": (
        "A candidate with solid core skills and experience, with some gaps that can "
        "be quickly closed through training and growth."
    ),
    "Weak": (
        "A motivated candidate eager to learn and develop, bringing foundational "
        "skills and a passion for growth."
    ),
}

_COVER_LETTER = """Dear Hiring Manager,

I am writing to express my interest in the position described in your job posting. Based on a structured, evidence-based comparison between my resume and the job description, my overall alignment score is approximately {score}%.

This score reflects clear matches on several responsibilities and requirements, as well as a number of gaps which I am confident I can close quickly. In particular, my background demonstrates strong capability in areas such as:

- Delivering on responsibilities that closely mirror your requirements.
- Applying practical, hands-on skills in real working environments.
- Collaborating effectively with cross-functional teams and stakeholders.

Your role, which focuses on {focus}, strongly appeals to me because it aligns with my strengths and my long-term career direction. I believe my track record of learning quickly, taking ownership, and improving processes will allow me to contribute meaningful results in this position.

Thank you for considering my application. I would welcome the opportunity to further discuss how I can add value to your organisation.

Sincerely,
[Your Name Here]"""


def build_cover_letter(
    ctx: AnalysisContext, thresholds: ScoringThresholds | None = None
) -> str:
    """Cover letter for strong matches; a short notice otherwise."""
    thresholds = thresholds or settings.thresholds
    score = ctx.result.overall_score
    if score < thresholds.strong_cutoff:
        return (
            f"Match score is {score}%, below the {thresholds.strong_cutoff}% needed for "
            "a strong match. A cover letter will not be generated. Please improve your "
            "resume for a better chance."
        )

    focus_lines = (ctx.job_description or "").split("\n")[:JD_FOCUS_LINES]
    focus = " ".join(line.strip() for line in focus_lines if line.strip())
    return _COVER_LETTER.format(
        score=score,
        focus=focus or "the responsibilities outlined in your advertisement",
    )


def build_enhanced_resume(ctx: AnalysisContext) -> str:
    """ATS-friendly resume: summary, original content, then gap-closing items."""
    parts = [
        "ATS-Friendly Resume",
        "",
        "Professional Summary:",
        _PROFESSIONAL_SUMMARIES[ctx.result.tier],
        "",
    ]

    original = ctx.resume_text.strip()
    if original:
        parts += ["Original Resume Content:", original, ""]

    additions = [
        f"- Experienced in {ev.requirement.rstrip('.')}."
        for ev in ctx.result.evaluations
        if ev.status != "Yes"
    ]
    if additions:
        parts.append("Additional Skills & Qualifications (to close gaps):")
        parts += additions
    else:
        parts += [
            "Additional Skills & Qualifications:",
            "- Your resume already covers all critical job requirements. Continue to "
            "highlight your achievements using concise bullet points.",
        ]
    return "\n".join(parts)


def build_gap_table(ctx: AnalysisContext) -> str:
    """Requirement-by-requirement table with status, score and evidence."""
    result = ctx.result
    lines = [
        f"Overall alignment: {result.overall_score}% - {result.classification}",
        result.explanation,
        "",
        "Status     Match  Requirement",
        "---------  -----  -----------",
    ]
    for ev in result.evaluations:
        lines.append(f"{ev.status:<9}  {ev.score:>4}%  {ev.requirement}")
        lines.append(f"{'':<18}Evidence: {ev.evidence}")

    lines += ["", "Strengths:"]
    lines += [f"- {s}" for s in result.strengths] or ["- None"]
    lines += ["", "Gaps:"]
    lines += [f"- {g}" for g in result.gaps] or ["- None"]
    return "\n".join(lines)


def build_document(kind: str, ctx: AnalysisContext) -> str:
    logger.debug("Building %s for overall score %d", kind, ctx.result.overall_score)
    if kind == "cover-letter":
        return build_cover_letter(ctx)
    if kind == "enhanced-resume":
        return build_enhanced_resume(ctx)
    if kind == "gap-table":
        return build_gap_table(ctx)
    raise ValueError(f"Unknown document kind: {kind}")
