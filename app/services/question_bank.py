"""
Built-in interview question bank.

Used whenever the LLM is unavailable or returns too few usable questions.
Pools are templated on the job role and mixed by experience level.
"""

import random
from typing import List, Optional

EASY_QUESTIONS = [
    "Tell me a bit about your background and what interests you about {role}.",
    "What are your strongest skills related to {role}?",
    "Can you walk me through your most recent project or work experience?",
    "How do you typically approach learning new technologies or concepts?",
    "What motivates you in your work?",
]

MEDIUM_QUESTIONS = [
    "Describe a challenging problem you faced recently and how you solved it.",
    "Tell me about a time you had to work with a difficult team member. How did you handle it?",
    "How do you prioritize tasks when you have multiple deadlines?",
    "Can you share an example of when you had to learn something quickly under pressure?",
    "What's your approach to debugging or troubleshooting complex issues?",
    "Describe a situation where you had to make a decision without complete information.",
]

HARD_QUESTIONS = [
    "How do you balance technical excellence with business requirements?",
    "Tell me about a time you disagreed with a technical decision. How did you handle it?",
    "Describe your approach to mentoring or leading junior team members.",
    "How do you stay updated with industry trends while maintaining productivity?",
    "Can you discuss a project that didn't go as planned? What would you do differently?",
    "How do you approach system design or architecture decisions?",
]

BEHAVIORAL_QUESTIONS = [
    "Can you give me an example of a time you showed initiative at work?",
    "Tell me about your most significant achievement so far.",
    "How do you handle feedback or criticism?",
    "Describe a time when you had to adapt to a significant change.",
    "What's your approach to work-life balance?",
]

ENTRY_MARKERS = ("entry", "fresher", "junior", "intern", "graduate")
MID_MARKERS = ("mid",)


def experience_tier(experience_level: str) -> str:
    """Map free-text experience level onto entry / mid / senior."""
    level = (experience_level or "").lower()
    if any(marker in level for marker in ENTRY_MARKERS):
        return "entry"
    if any(marker in level for marker in MID_MARKERS):
        return "mid"
    return "senior"


def _tagged(questions: List[str], category: str, difficulty: str) -> List[dict]:
    return [
        {"question_text": q, "category": category, "difficulty": difficulty}
        for q in questions
    ]


def build_question_pool(job_role: str, experience_level: str) -> List[dict]:
    """Assemble the candidate pool for a role and experience level."""
    role = job_role.strip() or "this role"
    easy = _tagged([q.format(role=role) for q in EASY_QUESTIONS], "general", "easy")
    medium = _tagged(MEDIUM_QUESTIONS, "situational", "medium")
    hard = _tagged(HARD_QUESTIONS, "technical", "hard")
    behavioral = _tagged(BEHAVIORAL_QUESTIONS, "behavioral", "medium")

    tier = experience_tier(experience_level)
    if tier == "entry":
        return easy + medium[:3] + behavioral[:2]
    if tier == "mid":
        return easy[:2] + medium + hard[:3] + behavioral
    return easy[:1] + medium[:3] + hard + behavioral[:3]


def pick_questions(
    job_role: str,
    experience_level: str,
    count: int,
    exclude: Optional[List[str]] = None,
    rng: Optional[random.Random] = None,
) -> List[dict]:
    """
    Draw up to `count` shuffled questions, skipping any whose text is in
    `exclude` (case-insensitive).
    """
    rng = rng or random.Random()
    excluded = {q.strip().lower() for q in (exclude or [])}
    pool = [q for q in build_question_pool(job_role, experience_level)
            if q["question_text"].lower() not in excluded]
    rng.shuffle(pool)
    return pool[:max(0, count)]
