"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from career_assistant.clients.llm_client import LLMClient, LLMResponse
from career_assistant.models.requests import (
    CoverLetterContent,
    InterviewEvaluationContent,
    InterviewFeedbackContent,
    InterviewQuestion,
    InterviewQuestionsContent,
    ResumeAnalysisContent,
    SkillGapContent,
)


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Doe
jane@example.com | 555-0100

Experience:
- Acme Corp (2021 - present) - Backend Engineer
  - Built REST APIs in Python/FastAPI serving 2M requests per day
  - Cut p95 latency by 40% with Redis caching

- Initech (2018 - 2021) - Software Engineer
  - Maintained Django services on AWS

Skills: Python, FastAPI, Django, PostgreSQL, Redis, Docker
"""


@pytest.fixture
def sample_jd_text() -> str:
    return """Senior Backend Engineer

Responsibilities:
- Design and operate high-traffic microservices
- Own API design and data modeling

Requirements:
- 5+ years building backend services in Python or Go
- Kubernetes, Kafka, PostgreSQL
"""


@pytest.fixture
def resume_analysis_content(sample_resume_text, sample_jd_text) -> ResumeAnalysisContent:
    return ResumeAnalysisContent(resume=sample_resume_text, job_description=sample_jd_text)


@pytest.fixture
def cover_letter_content(sample_jd_text) -> CoverLetterContent:
    return CoverLetterContent(
        full_name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        company="Globex",
        position="Senior Backend Engineer",
        job_description=sample_jd_text,
        experience="6 years of Python backend work",
        tone="enthusiastic",
    )


@pytest.fixture
def skill_gap_content(sample_resume_text, sample_jd_text) -> SkillGapContent:
    return SkillGapContent(
        resume=sample_resume_text,
        job_title="Senior Backend Engineer",
        job_description=sample_jd_text,
    )


@pytest.fixture
def interview_feedback_content() -> InterviewFeedbackContent:
    return InterviewFeedbackContent(
        question="Tell me about a time you improved system performance.",
        response="At Acme I added Redis caching which cut latency by 40%.",
        position_type="Backend Engineer",
    )


@pytest.fixture
def interview_questions_content() -> InterviewQuestionsContent:
    return InterviewQuestionsContent(role="Backend Engineer", level="Senior")


@pytest.fixture
def interview_evaluation_content() -> InterviewEvaluationContent:
    return InterviewEvaluationContent(
        role="Backend Engineer",
        level="Senior",
        questions=[
            InterviewQuestion(id=1, text="Describe a scaling challenge.", category="Technical"),
            InterviewQuestion(
                id=2, text="Tell me about a conflict.", category="Behavioral", time_allocation=120
            ),
        ],
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    return client


@pytest.fixture
def llm_reply(mock_llm_client):
    """Set the text the mocked LLM returns."""

    def _set(text: str) -> None:
        mock_llm_client.generate.return_value = LLMResponse(
            text=text, input_tokens=100, output_tokens=50
        )

    return _set
