"""Tests for the typed dispatcher client."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from career_assistant.clients.assistant_client import (
    CONNECTION_FAILED,
    REQUEST_FAILED,
    UNREADABLE_RESPONSE,
    CareerAssistantClient,
)
from career_assistant.errors import DecodeError, DispatcherError, RequestInProgressError
from career_assistant.models.results import (
    CoverLetterResult,
    InterviewEvaluationResult,
    InterviewFeedbackResult,
    InterviewQuestionsResult,
    ResumeAnalysisResult,
    SkillGapResult,
)

ENDPOINT = "http://dispatcher.test/ai-career-assistant"


def _client(handler, notices: list[str]) -> CareerAssistantClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return CareerAssistantClient(ENDPOINT, notify=notices.append, http=http)


def _replying(payload, status: int = 200, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(json.loads(request.content))
        return httpx.Response(status, json=payload)

    return handler


class TestTypedWrappers:
    async def test_analyze_resume_posts_envelope(self, resume_analysis_content):
        seen: list = []
        notices: list[str] = []
        client = _client(_replying({"overallScore": 80, "keywords": ["Python"]}, seen=seen), notices)

        result = await client.analyze_resume(resume_analysis_content)

        assert isinstance(result, ResumeAnalysisResult)
        assert result.overall_score == 80
        assert seen[0]["type"] == "resume_analysis"
        assert seen[0]["content"]["jobDescription"].startswith("Senior Backend Engineer")
        assert notices == []

    async def test_generate_cover_letter(self, cover_letter_content):
        client = _client(_replying({"content": "Dear Hiring Manager"}), [])
        result = await client.generate_cover_letter(cover_letter_content)
        assert isinstance(result, CoverLetterResult)
        assert result.content == "Dear Hiring Manager"

    async def test_analyze_skill_gap(self, skill_gap_content):
        client = _client(_replying({"matchPercentage": 60, "missingSkills": ["Kafka"]}), [])
        result = await client.analyze_skill_gap(skill_gap_content)
        assert isinstance(result, SkillGapResult)
        assert result.missing_skills[0].name == "Kafka"
        assert result.missing_skills[0].gap == 50

    async def test_get_interview_feedback(self, interview_feedback_content):
        client = _client(_replying({"overallScore": 70, "strengths": ["Specific"]}), [])
        result = await client.get_interview_feedback(interview_feedback_content)
        assert isinstance(result, InterviewFeedbackResult)
        assert result.strengths == ["Specific"]

    async def test_generate_interview_questions(self, interview_questions_content):
        payload = [{"id": 1, "text": "Q1", "category": "Behavioral", "timeAllocation": 90}]
        client = _client(_replying(payload), [])
        result = await client.generate_interview_questions(interview_questions_content)
        assert isinstance(result, InterviewQuestionsResult)
        assert result.questions[0].time_allocation == 90

    async def test_evaluate_interview(self, interview_evaluation_content):
        seen: list = []
        client = _client(_replying({"content": {"score": 88}}, seen=seen), [])
        result = await client.evaluate_interview(interview_evaluation_content)
        assert isinstance(result, InterviewEvaluationResult)
        assert result.content.score == 88
        assert len(seen[0]["content"]["questions"]) == 2


class TestFailures:
    async def test_server_error_notifies_and_raises(self, resume_analysis_content):
        notices: list[str] = []
        client = _client(_replying({"error": "Overloaded"}, status=500), notices)

        with pytest.raises(DispatcherError) as exc_info:
            await client.analyze_resume(resume_analysis_content)

        assert exc_info.value.status_code == 500
        assert str(exc_info.value) == "Overloaded"
        assert notices == [REQUEST_FAILED]
        assert client.is_loading is False

    async def test_connection_error_notifies_and_raises(self, resume_analysis_content):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        notices: list[str] = []
        client = _client(handler, notices)
        with pytest.raises(httpx.ConnectError):
            await client.analyze_resume(resume_analysis_content)
        assert notices == [CONNECTION_FAILED]
        assert client.is_loading is False

    async def test_embedded_parse_error_raises_decode_error(self, skill_gap_content):
        notices: list[str] = []
        payload = {"error": "Failed to parse AI response", "raw": "no json"}
        client = _client(_replying(payload), notices)

        with pytest.raises(DecodeError) as exc_info:
            await client.analyze_skill_gap(skill_gap_content)
        assert exc_info.value.raw == "no json"
        assert notices == [UNREADABLE_RESPONSE]

    async def test_non_json_body_raises_decode_error(self, interview_questions_content):
        def handler(request):
            return httpx.Response(200, text="<html>gateway</html>")

        notices: list[str] = []
        client = _client(handler, notices)
        with pytest.raises(DecodeError):
            await client.generate_interview_questions(interview_questions_content)
        assert notices == [UNREADABLE_RESPONSE]


class TestLoadingFlag:
    async def test_flag_set_during_call_and_blocks_duplicates(self, resume_analysis_content):
        release = asyncio.Event()
        observed: list[bool] = []

        async def handler(request):
            observed.append(client.is_loading)
            await release.wait()
            return httpx.Response(200, json={"overallScore": 1})

        client = _client(handler, [])
        first = asyncio.create_task(client.analyze_resume(resume_analysis_content))
        await asyncio.sleep(0)
        while not observed:
            await asyncio.sleep(0)

        with pytest.raises(RequestInProgressError):
            await client.analyze_resume(resume_analysis_content)

        release.set()
        result = await first
        assert observed == [True]
        assert result.overall_score == 1
        assert client.is_loading is False

    async def test_owned_http_client_closed(self):
        client = CareerAssistantClient(ENDPOINT)
        async with client:
            pass
        assert client._http.is_closed
