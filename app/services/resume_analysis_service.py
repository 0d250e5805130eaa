"""
Resume Analysis Service - ATS-style scoring of resume text with Groq.

Flow:
1. Hash the extracted text and check the Mongo analysis cache
2. No Groq key configured -> deterministic mock analysis (local dev)
3. Otherwise ask the model for strict JSON and validate it
4. Cache the validated result
"""

import copy
import logging
import math
from typing import Any, List

from app.core.errors import AIServiceError
from app.services.document_store import cache_analysis, compute_text_hash, get_cached_analysis
from app.services.llm_client import get_groq_client, groq_configured

logger = logging.getLogger(__name__)

MAX_PROMPT_CHARS = 10000
SKILLS_TOTAL = 20
BREAKDOWN_KEYS = ("formatting", "keywords", "experience", "skillsMatch")

MOCK_ANALYSIS = {
    "overallScore": 70,
    "atsScore": 65,
    "strengths": [
        "Clear section headings and layout",
        "Relevant experience listed in reverse-chronological order",
        "Concise bullet points",
    ],
    "improvements": [
        "Add more quantifiable achievements (metrics, impact)",
        "Include a brief professional summary at the top",
        "Tailor keywords to the target role/job description",
    ],
    "keywords": ["JavaScript", "React", "Node.js", "REST API", "TypeScript"],
    "atsBreakdown": {
        "formatting": {"score": 80, "note": "Readable structure and consistent formatting"},
        "keywords": {"score": 60, "note": "Add more role-specific keywords"},
        "experience": {"score": 72, "note": "Consider highlighting outcomes with metrics"},
        "skillsMatch": {"score": 65, "note": "List core tools/technologies explicitly"},
    },
    "skillsMatched": 13,
    "skillsTotal": SKILLS_TOTAL,
}

SYSTEM_PROMPT = (
    "You are an expert resume analyzer and ATS specialist. "
    "Provide detailed, actionable feedback in JSON format."
)

ANALYSIS_PROMPT = """You are an expert ATS (Applicant Tracking System) and resume analyzer. Analyze the following resume and provide detailed feedback.

Resume Text:
{resume_text}

Provide a comprehensive analysis with:
1. Overall Resume Score (0-100)
2. ATS Compatibility Score (0-100)
3. Top 3-5 Strengths (specific, actionable points)
4. Top 3-5 Areas for Improvement (specific, actionable suggestions)
5. Keywords Found (list 5-10 relevant technical/professional keywords)
6. ATS Breakdown:
   - Formatting score and note
   - Keywords score and note
   - Experience documentation score and note
   - Skills match score and note
7. Skills matched count (estimate out of 20 common skills for the role)

Format your response as JSON with this exact structure:
{{
  "overallScore": number,
  "atsScore": number,
  "strengths": ["string"],
  "improvements": ["string"],
  "keywords": ["string"],
  "atsBreakdown": {{
    "formatting": {{ "score": number, "note": "string" }},
    "keywords": {{ "score": number, "note": "string" }},
    "experience": {{ "score": number, "note": "string" }},
    "skillsMatch": {{ "score": number, "note": "string" }}
  }},
  "skillsMatched": number,
  "skillsTotal": 20
}}

Be honest but constructive. Focus on actionable improvements."""


# ============================================================
# JSON VALIDATION HELPERS
# ============================================================

def _is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _clamp_score(value: Any, low: int = 0, high: int = 100) -> int:
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return low
    if not math.isfinite(number):
        return low
    return int(max(low, min(high, round(number))))


def _string_list(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item).strip() for item in value if item is not None and str(item).strip()]


def validate_analysis(data: dict) -> dict:
    """
    Validate and sanitize the model's analysis.
    overallScore and atsScore must be numbers; everything else is coerced.
    """
    if not _is_number(data.get("overallScore")) or not _is_number(data.get("atsScore")):
        logger.error("Invalid AI response structure: %s", data)
        raise AIServiceError("AI analysis failed: Invalid AI response format")

    breakdown_in = data.get("atsBreakdown") if isinstance(data.get("atsBreakdown"), dict) else {}
    breakdown = {}
    for key in BREAKDOWN_KEYS:
        item = breakdown_in.get(key) if isinstance(breakdown_in.get(key), dict) else {}
        breakdown[key] = {
            "score": _clamp_score(item.get("score", 0)),
            "note": str(item.get("note", "")).strip(),
        }

    skills_total = SKILLS_TOTAL
    return {
        "overallScore": _clamp_score(data["overallScore"]),
        "atsScore": _clamp_score(data["atsScore"]),
        "strengths": _string_list(data.get("strengths")),
        "improvements": _string_list(data.get("improvements")),
        "keywords": _string_list(data.get("keywords")),
        "atsBreakdown": breakdown,
        "skillsMatched": _clamp_score(data.get("skillsMatched", 0), 0, skills_total),
        "skillsTotal": skills_total,
    }


# ============================================================
# ANALYSIS
# ============================================================

def mock_analysis() -> dict:
    return copy.deepcopy(MOCK_ANALYSIS)


def analyze_resume_with_ai(resume_text: str) -> dict:
    """Ask Groq for an ATS analysis of the resume text."""
    client = get_groq_client()
    prompt = ANALYSIS_PROMPT.format(resume_text=resume_text[:MAX_PROMPT_CHARS])

    logger.info("Calling Groq for resume analysis (%d chars)", len(resume_text))
    try:
        data = client.chat_json(SYSTEM_PROMPT, prompt, max_tokens=2048, temperature=0.5)
    except AIServiceError as e:
        raise AIServiceError(f"AI analysis failed: {e}") from e

    return validate_analysis(data)


def analyze_resume_text(resume_text: str) -> dict:
    """
    Full analysis pipeline for extracted resume text.
    Returns the validated analysis dict.
    """
    if not groq_configured():
        logger.warning("No Groq API key configured, using mock analysis")
        return mock_analysis()

    text_hash = compute_text_hash(resume_text)
    cached = get_cached_analysis(text_hash)
    if cached:
        logger.info("Resume analysis cache hit %s", text_hash[:12])
        return cached

    analysis = analyze_resume_with_ai(resume_text)
    cache_analysis(text_hash, analysis, model=get_groq_client().model)

    logger.info(
        "Resume analysis complete - overall: %s, ATS: %s",
        analysis["overallScore"], analysis["atsScore"]
    )
    return analysis
