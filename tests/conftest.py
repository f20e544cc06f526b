import random

import pytest

from content.catalog import QUIZ_QUESTIONS
from models.diagnostic_models import EnvironmentHints
from models.quiz_models import QuestionRecord


def _make_pool(size):
    return [
        QuestionRecord(
            id=i,
            question=f"Question {i}?",
            options=(f"Q{i} right", f"Q{i} wrong a", f"Q{i} wrong b", f"Q{i} wrong c"),
            answer=0,
            explanation=f"Because {i}.",
        )
        for i in range(1, size + 1)
    ]


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def pool():
    return list(QUIZ_QUESTIONS)


@pytest.fixture
def hints():
    return EnvironmentHints(
        user_agent="Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 Chrome/126.0 Safari/537.36",
        platform="Linux",
        cores=8,
        device_memory=8,
        effective_type="4g",
        downlink=10,
        rtt=50,
    )


@pytest.fixture
def make_pool():
    return _make_pool
