"""
Interview AI Service - prompts and post-processing for AI interviews.

AI is used for:
1. Realtime interviewer instructions per interview phase
2. Question generation for a role + experience level (Groq)
3. Scored feedback over the candidate's answers (OpenAI)
4. Transcript analysis for free-form voice interviews (OpenAI)

Model output is validated and clamped here before anything is stored.
"""

import logging
import math
import random
import re
from typing import List, Optional

from app.core.errors import AIServiceError
from app.services.llm_client import get_groq_client, get_openai_client, groq_configured
from app.services.question_bank import pick_questions

logger = logging.getLogger(__name__)

CATEGORIES = {"technical", "behavioral", "situational", "experience", "general"}
DIFFICULTIES = {"easy", "medium", "hard"}

FEEDBACK_DIMENSIONS = (
    "contentRelevance",
    "detailDepth",
    "fluencyClarity",
    "confidenceTone",
    "grammarStructure",
)
DIMENSION_MAX_SCORE = 20

BRIEF_ANSWER_WORDS = 8
FOLLOW_UP_PROMPT = (
    "Hmm, that's a bit brief. Could you expand on that a little? "
    "I'd love to hear more details about your experience."
)


# ============================================================
# REALTIME INSTRUCTIONS
# ============================================================

def build_interview_instructions(phase: Optional[str], metadata: Optional[dict] = None) -> str:
    """Interviewer instructions for a realtime voice session in the given phase."""
    metadata = metadata or {}
    job_role = metadata.get("jobRole")
    experience_level = metadata.get("experienceLevel")

    if phase == "intro":
        return (
            "You are a friendly, professional AI interviewer named Alex.\n\n"
            "Your task is to conduct a natural, conversational job interview. Start by warmly "
            "greeting the candidate and briefly introducing yourself.\n\n"
            "Then, ask them TWO questions in a natural, conversational way:\n"
            "1. What job role are they interviewing for? (e.g., Software Engineer, Marketing Manager, Data Analyst, etc.)\n"
            "2. What is their experience level? (e.g., Fresher/Entry-level, Mid-level, or Senior)\n\n"
            "Be warm, friendly, and encouraging. Speak like a real human interviewer, not a robot. "
            "After they answer both questions, acknowledge their responses positively and let them "
            "know you'll begin the interview questions shortly.\n\n"
            "Keep your responses concise and natural."
        )

    if phase == "collecting_info":
        return (
            "You are Alex, a friendly AI interviewer. You're in the process of learning about the "
            "candidate's background.\n\n"
            f"The candidate is interviewing for: {job_role or 'a position'}\n"
            f"Experience level: {experience_level or 'not yet specified'}\n\n"
            "If you don't have both pieces of information yet, ask the missing question naturally. "
            "Once you have both, warmly acknowledge their responses and transition to the main "
            "interview by saying something like:\n\n"
            f"\"Great! I'm excited to learn more about your background for the {job_role or 'open'} "
            "position. Let's dive into some questions.\"\n\n"
            "Be conversational and human-like."
        )

    if phase == "interviewing":
        role = job_role or "professional"
        return (
            f"You are Alex, an expert interviewer conducting a real job interview for a {role} "
            f"position at the {experience_level or 'mid'}-level.\n\n"
            "Conduct a thorough, realistic interview:\n"
            "- Ask 5-7 relevant questions based on the role and experience level\n"
            "- Mix behavioral questions (STAR method), technical questions, and situational questions\n"
            "- Ask thoughtful follow-up questions based on their answers\n"
            "- Be encouraging and professional, like a real interviewer\n"
            "- Listen carefully and ask for clarification when needed\n"
            "- Take note of their communication style, technical knowledge, and problem-solving approach\n\n"
            f"For a {role} role, focus on:\n"
            "- Relevant technical skills and experience\n"
            "- Problem-solving abilities\n"
            "- Teamwork and collaboration\n"
            "- Adaptability and learning mindset\n"
            "- Role-specific competencies\n\n"
            "Keep your questions conversational and natural. After 5-7 substantial questions with "
            "follow-ups, you can conclude the interview naturally."
        )

    if phase == "completed":
        return (
            "You are wrapping up the interview. Thank the candidate warmly for their time and let "
            "them know they'll receive detailed feedback shortly. Be professional and encouraging."
        )

    return "You are a professional AI interviewer. Conduct a natural, conversational interview."


# ============================================================
# QUESTION GENERATION
# ============================================================

QUESTION_SYSTEM_PROMPT = """You are an experienced hiring manager preparing a structured interview. Return ONLY valid JSON.
Output format:
{
  "questions": [
    {"question_text": "string", "category": "technical|behavioral|situational|experience|general", "difficulty": "easy|medium|hard"}
  ]
}"""


def _question_prompt(job_role: str, experience_level: str, count: int) -> str:
    return (
        f"Write {count} interview questions for a {job_role} candidate at the "
        f"{experience_level} level.\n"
        "- Open with one warm-up question about their background\n"
        "- Mix technical, behavioral (STAR), situational and experience questions\n"
        "- Match difficulty to the experience level\n"
        "- Each question must be answerable out loud in under two minutes\n"
        "- No numbering, no follow-up notes"
    )


def normalize_generated_questions(data: dict, count: int) -> List[dict]:
    """Validate the model's question list; unknown tags fall back to defaults."""
    raw = data.get("questions") if isinstance(data, dict) else None
    if not isinstance(raw, list):
        return []

    questions = []
    seen = set()
    for item in raw:
        if isinstance(item, str):
            item = {"question_text": item}
        if not isinstance(item, dict):
            continue
        text = str(item.get("question_text") or item.get("question") or "").strip()
        if not text or text.lower() in seen:
            continue
        seen.add(text.lower())

        category = str(item.get("category") or "").strip().lower()
        difficulty = str(item.get("difficulty") or "").strip().lower()
        questions.append({
            "question_text": text,
            "category": category if category in CATEGORIES else "general",
            "difficulty": difficulty if difficulty in DIFFICULTIES else "medium",
        })
        if len(questions) == count:
            break
    return questions


def generate_interview_questions(
    job_role: str,
    experience_level: str,
    count: int = 7,
    rng: Optional[random.Random] = None,
) -> List[dict]:
    """
    Generate `count` questions. Shortfalls (no Groq key, provider error,
    too few usable questions) are filled from the question bank.
    """
    questions: List[dict] = []
    if groq_configured():
        try:
            data = get_groq_client().chat_json(
                QUESTION_SYSTEM_PROMPT,
                _question_prompt(job_role, experience_level, count),
                max_tokens=1500,
                temperature=0.7,
            )
            questions = normalize_generated_questions(data, count)
        except AIServiceError as e:
            logger.warning("Question generation failed, using question bank: %s", e)
    else:
        logger.info("No Groq API key configured, using question bank")

    if len(questions) < count:
        questions += pick_questions(
            job_role,
            experience_level,
            count - len(questions),
            exclude=[q["question_text"] for q in questions],
            rng=rng,
        )
    return questions


# ============================================================
# ANSWER HEURISTICS
# ============================================================

TECHNICAL_TERMS = {
    "api", "database", "sql", "python", "java", "javascript", "typescript", "react",
    "cloud", "aws", "azure", "docker", "kubernetes", "algorithm", "architecture",
    "latency", "scalability", "testing", "deployment", "pipeline", "model", "data",
    "performance", "cache", "microservice", "microservices", "framework", "design",
    "security", "analytics", "metrics", "debugging", "git", "ci", "cd",
}
STRUCTURE_MARKERS = (
    "first", "second", "then", "finally", "because", "as a result", "situation",
    "task", "action", "result", "for example", "for instance", "therefore",
)
NUMBER_PATTERN = re.compile(r"\d+(?:[.,]\d+)?\s*(?:%|percent|x|k|ms|hours?|days?|weeks?|months?|years?|users?)?", re.I)
WORD_PATTERN = re.compile(r"[A-Za-z0-9']+")


def word_count(text: str) -> int:
    return len((text or "").split())


def needs_elaboration(answer_text: str, question_number: int) -> bool:
    """Answers under 8 words get a follow-up, except on the opening question."""
    return question_number > 1 and word_count(answer_text) < BRIEF_ANSWER_WORDS


def compute_answer_metrics(answers: List[str]) -> dict:
    """
    Cheap, deterministic signals over the answers, attached to the LLM
    feedback as `analytics`. Scores are 0-100.
    """
    answers = [a for a in answers if a and a.strip()]
    if not answers:
        return {
            "avgAnswerLength": 0,
            "technicalDepth": 0,
            "structureScore": 0,
            "specificityScore": 0,
            "questionsAnswered": 0,
        }

    lengths = [word_count(a) for a in answers]
    technical_hits = 0
    structure_hits = 0
    specific_hits = 0
    for answer in answers:
        lowered = answer.lower()
        words = {w.lower() for w in WORD_PATTERN.findall(answer)}
        technical_hits += len(words & TECHNICAL_TERMS)
        structure_hits += sum(1 for marker in STRUCTURE_MARKERS if marker in lowered)
        specific_hits += len(NUMBER_PATTERN.findall(answer))

    n = len(answers)
    return {
        "avgAnswerLength": round(sum(lengths) / n),
        "technicalDepth": min(100, round(technical_hits / n * 20)),
        "structureScore": min(100, round(structure_hits / n * 25)),
        "specificityScore": min(100, round(specific_hits / n * 34)),
        "questionsAnswered": n,
    }


# ============================================================
# FEEDBACK
# ============================================================

FEEDBACK_SYSTEM_PROMPT = """You are an expert interview evaluator with extensive experience in recruitment and talent assessment.

Score the candidate on five dimensions, each out of 20:
- contentRelevance: answers address the question asked
- detailDepth: concrete examples, specifics, depth of expertise
- fluencyClarity: clear, well-paced, easy to follow
- confidenceTone: confident, professional, positive
- grammarStructure: grammatical, logically structured (e.g. STAR)

Be constructive, specific, and fair. Reference actual answers when possible.

Return ONLY valid JSON with this structure:
{
  "score": number (0-100, the sum of the five dimension scores),
  "scoreBreakdown": {
    "contentRelevance": {"score": number},
    "detailDepth": {"score": number},
    "fluencyClarity": {"score": number},
    "confidenceTone": {"score": number},
    "grammarStructure": {"score": number}
  },
  "strengths": ["specific strength"],
  "improvementAreas": ["actionable improvement"],
  "summary": "3-4 sentence summary",
  "detailedAnalysis": {
    "contentRelevance": "string",
    "detailDepth": "string",
    "fluencyClarity": "string",
    "confidenceTone": "string",
    "grammarStructure": "string"
  }
}"""


def _format_qa_pairs(qa_pairs: List[dict]) -> str:
    blocks = []
    for i, pair in enumerate(qa_pairs, start=1):
        answer = pair.get("answer_text") or "(no answer given)"
        blocks.append(f"Q{i}: {pair.get('question_text', '')}\nA{i}: {answer}")
    return "\n\n".join(blocks)


def _finite_number(raw) -> Optional[float]:
    """The value as a float, or None when it is missing, non-numeric or not finite."""
    if isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    return value if math.isfinite(value) else None


def _dimension_score(raw) -> float:
    if isinstance(raw, dict):
        raw = raw.get("score")
    value = _finite_number(raw)
    if value is None:
        return 0.0
    return max(0.0, min(float(DIMENSION_MAX_SCORE), value))


def normalize_feedback(data: dict, answers: List[str]) -> dict:
    """
    Clamp the model's dimension scores, derive percentages and the total,
    and attach locally computed answer analytics.
    """
    breakdown_in = data.get("scoreBreakdown") if isinstance(data.get("scoreBreakdown"), dict) else {}
    breakdown = {}
    for key in FEEDBACK_DIMENSIONS:
        score = _dimension_score(breakdown_in.get(key))
        breakdown[key] = {
            "score": round(score, 1),
            "maxScore": DIMENSION_MAX_SCORE,
            "percentage": round(score / DIMENSION_MAX_SCORE * 100),
        }

    dimension_total = round(sum(item["score"] for item in breakdown.values()))
    total = data.get("score")
    if isinstance(total, (int, float)) and _finite_number(total) is not None:
        total = int(max(0, min(100, round(total))))
    else:
        total = dimension_total

    analysis_in = data.get("detailedAnalysis") if isinstance(data.get("detailedAnalysis"), dict) else {}

    return {
        "score": total,
        "scoreBreakdown": breakdown,
        "strengths": [str(s) for s in data.get("strengths") or [] if str(s).strip()],
        "improvementAreas": [str(s) for s in data.get("improvementAreas") or [] if str(s).strip()],
        "summary": str(data.get("summary") or "").strip(),
        "detailedAnalysis": {key: str(analysis_in.get(key) or "") for key in FEEDBACK_DIMENSIONS},
        "analytics": compute_answer_metrics(answers),
    }


def generate_interview_feedback(job_role: str, experience_level: str, qa_pairs: List[dict]) -> dict:
    """
    Score an interview from its question/answer pairs.

    Args:
        qa_pairs: [{"question_text": ..., "answer_text": ... or None}, ...]
    """
    user_content = (
        f"Role: {job_role or 'not specified'}\n"
        f"Experience level: {experience_level or 'not specified'}\n\n"
        f"Interview:\n\n{_format_qa_pairs(qa_pairs)}\n\n"
        "Evaluate this interview and respond in valid JSON."
    )
    data = get_openai_client().chat_json(
        FEEDBACK_SYSTEM_PROMPT, user_content, max_tokens=2048, temperature=0.7
    )
    answers = [p.get("answer_text") or "" for p in qa_pairs]
    return normalize_feedback(data, answers)


# ============================================================
# TRANSCRIPT ANALYSIS
# ============================================================

TRANSCRIPT_PROMPT = """You are an expert interview evaluator with extensive experience in recruitment and talent assessment.

Analyze the following job interview transcript for a {job_role} position at the {experience_level} level.

Evaluate the candidate on these key dimensions:

1. **Communication Skills** (30 points)
   - Clarity and articulation, professional language, active listening, confidence
2. **Technical Knowledge** (35 points)
   - Depth of expertise for {job_role}, problem-solving approach, practical experience
3. **Behavioral Competencies** (35 points)
   - Teamwork, leadership potential, adaptability, self-awareness

Provide an overall score out of 100, feedback for each category with specific scores,
2-3 strengths, 2-3 improvements with actionable advice, and a 3-4 sentence summary.

Format your response as valid JSON matching this structure exactly:
{{
  "overall_score": number (0-100),
  "communication": {{"score": number (0-30), "feedback": "string", "strengths": ["string"], "improvements": ["string"]}},
  "technical": {{"score": number (0-35), "feedback": "string", "strengths": ["string"], "improvements": ["string"]}},
  "behavioral": {{"score": number (0-35), "feedback": "string", "strengths": ["string"], "improvements": ["string"]}},
  "summary": "string"
}}"""

TRANSCRIPT_CATEGORY_MAX = {"communication": 30, "technical": 35, "behavioral": 35}


def normalize_transcript_analysis(data: dict) -> dict:
    """Clamp category scores to their maxima and the overall score to 0-100."""
    result = dict(data)
    category_total = 0
    for key, max_score in TRANSCRIPT_CATEGORY_MAX.items():
        item = data.get(key) if isinstance(data.get(key), dict) else {}
        value = _finite_number(item.get("score", 0))
        score = max(0, min(max_score, round(value))) if value is not None else 0
        category_total += score
        result[key] = {
            "score": score,
            "feedback": str(item.get("feedback") or ""),
            "strengths": [str(s) for s in item.get("strengths") or []],
            "improvements": [str(s) for s in item.get("improvements") or []],
        }

    overall = _finite_number(data.get("overall_score"))
    result["overall_score"] = max(0, min(100, round(overall))) if overall is not None else category_total
    result["summary"] = str(data.get("summary") or "")
    return result


def analyze_transcript(
    transcript: List[str],
    job_role: Optional[str] = None,
    experience_level: Optional[str] = None,
) -> dict:
    """Evaluate a free-form interview transcript."""
    system_prompt = TRANSCRIPT_PROMPT.format(
        job_role=job_role or "professional",
        experience_level=experience_level or "unspecified",
    )
    conversation = "\n\n".join(transcript)
    user_content = (
        f"Interview Transcript:\n\n{conversation}\n\n"
        "Please analyze this interview and provide detailed, constructive feedback in valid JSON format."
    )
    data = get_openai_client().chat_json(system_prompt, user_content, max_tokens=2048, temperature=0.7)
    return normalize_transcript_analysis(data)
