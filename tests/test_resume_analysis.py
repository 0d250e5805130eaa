import pytest

from app.core.errors import AIServiceError
from app.services import resume_analysis_service as analysis
from app.services.document_store import compute_text_hash
from tests.conftest import FakeLLM

RESUME = "Jane Doe. Senior data engineer. Python, Spark, Airflow, AWS. Led a team of five."

MODEL_OUTPUT = {
    "overallScore": 82.6,
    "atsScore": 77,
    "strengths": ["Quantified impact", None, "  "],
    "improvements": ["Add a summary"],
    "keywords": ["Python", "Spark"],
    "atsBreakdown": {
        "formatting": {"score": 140, "note": " Clean "},
        "keywords": {"score": 70},
        "skillsMatch": "high",
    },
    "skillsMatched": 31,
    "skillsTotal": 50,
}


def test_validate_analysis_sanitizes():
    result = analysis.validate_analysis(MODEL_OUTPUT)

    assert result["overallScore"] == 83
    assert result["strengths"] == ["Quantified impact"]
    assert result["atsBreakdown"]["formatting"] == {"score": 100, "note": "Clean"}
    assert result["atsBreakdown"]["keywords"] == {"score": 70, "note": ""}
    assert result["atsBreakdown"]["experience"] == {"score": 0, "note": ""}
    assert result["atsBreakdown"]["skillsMatch"] == {"score": 0, "note": ""}
    assert result["skillsMatched"] == 20
    assert result["skillsTotal"] == 20


@pytest.mark.parametrize("payload", [
    {"atsScore": 50},
    {"overallScore": "90", "atsScore": 50},
    {"overallScore": True, "atsScore": 50},
])
def test_validate_analysis_requires_numeric_scores(payload):
    with pytest.raises(AIServiceError, match="Invalid AI response format"):
        analysis.validate_analysis(payload)


@pytest.mark.parametrize("payload", [
    {"overallScore": float("inf"), "atsScore": 50},
    {"overallScore": 80, "atsScore": float("nan")},
    {"overallScore": 10 ** 400, "atsScore": 50},
])
def test_validate_analysis_rejects_non_finite_scores(payload):
    with pytest.raises(AIServiceError, match="Invalid AI response format"):
        analysis.validate_analysis(payload)


def test_validate_analysis_zeroes_non_finite_breakdown():
    result = analysis.validate_analysis({
        "overallScore": 80,
        "atsScore": 75,
        "atsBreakdown": {"formatting": {"score": float("inf")}, "keywords": {"score": "1e999"}},
        "skillsMatched": float("-inf"),
    })
    assert result["atsBreakdown"]["formatting"]["score"] == 0
    assert result["atsBreakdown"]["keywords"]["score"] == 0
    assert result["skillsMatched"] == 0


def test_mock_analysis_without_key(monkeypatch):
    monkeypatch.setattr(analysis, "get_cached_analysis", lambda h: pytest.fail("cache should not be read"))
    result = analysis.analyze_resume_text(RESUME)
    assert result == analysis.MOCK_ANALYSIS
    result["strengths"].append("mutated")
    assert "mutated" not in analysis.MOCK_ANALYSIS["strengths"]


def test_cache_hit_skips_model(monkeypatch, groq_key):
    cached = {"overallScore": 61, "atsScore": 58}
    seen = []
    monkeypatch.setattr(analysis, "get_cached_analysis", lambda h: seen.append(h) or cached)
    monkeypatch.setattr(analysis, "get_groq_client", lambda: pytest.fail("model should not be called"))

    assert analysis.analyze_resume_text(RESUME) == cached
    assert seen == [compute_text_hash(RESUME)]


def test_model_result_is_validated_and_cached(monkeypatch, groq_key):
    llm = FakeLLM(MODEL_OUTPUT, model="llama-test")
    stored = {}
    monkeypatch.setattr(analysis, "get_cached_analysis", lambda h: None)
    monkeypatch.setattr(analysis, "get_groq_client", lambda: llm)
    monkeypatch.setattr(analysis, "cache_analysis",
                        lambda h, result, model=None: stored.update(hash=h, result=result, model=model))

    result = analysis.analyze_resume_text(RESUME)

    assert result["overallScore"] == 83
    assert stored == {"hash": compute_text_hash(RESUME), "result": result, "model": "llama-test"}
    assert RESUME in llm.calls[0]["user"]


def test_prompt_truncates_long_resumes(monkeypatch, groq_key):
    llm = FakeLLM(MODEL_OUTPUT)
    monkeypatch.setattr(analysis, "get_groq_client", lambda: llm)
    analysis.analyze_resume_with_ai("x" * (analysis.MAX_PROMPT_CHARS + 500))
    assert "x" * analysis.MAX_PROMPT_CHARS in llm.calls[0]["user"]
    assert "x" * (analysis.MAX_PROMPT_CHARS + 1) not in llm.calls[0]["user"]


def test_model_failure_is_wrapped(monkeypatch, groq_key):
    monkeypatch.setattr(analysis, "get_cached_analysis", lambda h: None)
    monkeypatch.setattr(analysis, "get_groq_client", lambda: FakeLLM(error=AIServiceError("Groq request failed")))
    with pytest.raises(AIServiceError, match="AI analysis failed: Groq request failed"):
        analysis.analyze_resume_text(RESUME)


def test_text_hash_ignores_whitespace():
    assert compute_text_hash("Jane  Doe\n\nEngineer") == compute_text_hash(" Jane Doe Engineer ")
    assert compute_text_hash("Jane Doe") != compute_text_hash("John Doe")
