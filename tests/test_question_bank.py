import random

import pytest

from app.services.question_bank import build_question_pool, experience_tier, pick_questions


@pytest.mark.parametrize("level, tier", [
    ("Entry-level", "entry"),
    ("Fresher", "entry"),
    ("Junior developer", "entry"),
    ("Mid-level", "mid"),
    ("Senior", "senior"),
    ("", "senior"),
    (None, "senior"),
])
def test_experience_tier(level, tier):
    assert experience_tier(level) == tier


@pytest.mark.parametrize("level, size", [("Entry", 10), ("Mid", 16), ("Senior", 13)])
def test_pool_size_by_tier(level, size):
    assert len(build_question_pool("Engineer", level)) == size


def test_pool_is_templated_on_role():
    pool = build_question_pool("Data Scientist", "Entry")
    assert pool[0]["question_text"] == (
        "Tell me a bit about your background and what interests you about Data Scientist."
    )
    assert build_question_pool("  ", "Entry")[0]["question_text"].endswith("about this role.")


def test_senior_pool_leans_hard():
    pool = build_question_pool("Engineer", "Senior")
    hard = [q for q in pool if q["difficulty"] == "hard"]
    easy = [q for q in pool if q["difficulty"] == "easy"]
    assert len(hard) == 6
    assert len(easy) == 1


def test_pick_is_deterministic_with_rng():
    first = pick_questions("Engineer", "Mid", 5, rng=random.Random(42))
    second = pick_questions("Engineer", "Mid", 5, rng=random.Random(42))
    assert first == second
    assert len(first) == 5


def test_pick_excludes_case_insensitively():
    pool = build_question_pool("Engineer", "Entry")
    exclude = [q["question_text"].upper() for q in pool[:4]]
    picked = pick_questions("Engineer", "Entry", 20, exclude=exclude)
    assert len(picked) == 6
    assert not {q["question_text"].upper() for q in picked} & set(exclude)


def test_pick_zero_or_negative():
    assert pick_questions("Engineer", "Mid", 0) == []
    assert pick_questions("Engineer", "Mid", -2) == []
