"""Prompt templates for Gemini API calls."""


def build_evaluation_prompt(resume_text: str, job_description: str) -> str:
    """Itemized requirement-by-requirement evaluation in strict JSON."""
    return f"""You are an assistant that evaluates how well a resume matches a job description and returns a structured JSON report.

Compare the resume against every requirement in the job description.

STATUS RULES (follow strictly):
- "Yes": the resume clearly demonstrates the requirement.
- "Partially": the resume shows related or transferable evidence.
- "No": the requirement is not mentioned.

RESUME:
---
{resume_text}
---

JOB DESCRIPTION:
---
{job_description}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "overall_score": <number 0-100, the percentage match>,
  "classification": "<Strong Match | Moderate Match | Weak Match>",
  "itemized": [
    {{
      "requirement": "<requirement text from the job description>",
      "status": "<Yes | Partially | No>",
      "match_percent": <number 0-100>,
      "justification": "<quote from the resume, or note that evidence is missing>"
    }}
  ],
  "strengths": [<requirement strings where the candidate scored 100%>],
  "gaps": [<requirement strings where the candidate scored 20% or below>],
  "summary": "<short narrative summarising the match>"
}}"""
