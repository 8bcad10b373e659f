"""Typed client for the dispatcher endpoint, one wrapper per feature."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

import httpx

from career_assistant.errors import (
    CareerAssistantError,
    DecodeError,
    DispatcherError,
    RequestInProgressError,
)
from career_assistant.models.decode import decode_result
from career_assistant.models.requests import (
    ContentModel,
    CoverLetterContent,
    InterviewEvaluationContent,
    InterviewFeedbackContent,
    InterviewQuestionsContent,
    RequestEnvelope,
    RequestType,
    ResumeAnalysisContent,
    SkillGapContent,
)
from career_assistant.models.results import (
    CoverLetterResult,
    InterviewEvaluationResult,
    InterviewFeedbackResult,
    InterviewQuestionsResult,
    ResultModel,
    ResumeAnalysisResult,
    SkillGapResult,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=ResultModel)

Notifier = Callable[[str], None]

REQUEST_FAILED = "Error processing your request. Please try again."
CONNECTION_FAILED = "Error connecting to AI services."
UNREADABLE_RESPONSE = "The AI response could not be read. Please try again."


def _log_notifier(message: str) -> None:
    logger.error(message)


class CareerAssistantClient:
    """Async client for the dispatcher.

    Each call sets ``is_loading`` for its duration; a second call while one is
    in flight raises RequestInProgressError. Failures are reported through
    ``notify`` and then re-raised to the caller.
    """

    def __init__(
        self,
        endpoint_url: str,
        timeout: float = 120.0,
        notify: Notifier | None = None,
        http: httpx.AsyncClient | None = None,
    ):
        self.endpoint_url = endpoint_url
        self.notify = notify or _log_notifier
        self._http = http or httpx.AsyncClient(timeout=timeout)
        self._owns_http = http is None
        self.is_loading = False

    async def aclose(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    async def __aenter__(self) -> CareerAssistantClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def call(self, request_type: RequestType, content: ContentModel) -> dict | list:
        """Post one envelope and return the raw JSON payload."""
        if self.is_loading:
            raise RequestInProgressError(f"A request is already in progress ({request_type.value})")
        self.is_loading = True
        try:
            envelope = RequestEnvelope.wrap(request_type, content)
            logger.debug("Making %s request to AI assistant", request_type.value)
            try:
                response = await self._http.post(
                    self.endpoint_url, json=envelope.model_dump(mode="json")
                )
            except httpx.HTTPError:
                logger.error("Error calling AI assistant", exc_info=True)
                self.notify(CONNECTION_FAILED)
                raise
            if response.is_error:
                message = _error_message(response)
                logger.error("AI assistant error (%d): %s", response.status_code, message)
                self.notify(REQUEST_FAILED)
                raise DispatcherError(response.status_code, message)
            logger.debug("Received %s response", request_type.value)
            try:
                return response.json()
            except ValueError as e:
                self.notify(UNREADABLE_RESPONSE)
                raise DecodeError("Response body is not JSON", raw=response.text) from e
        finally:
            self.is_loading = False

    async def _request(self, request_type: RequestType, content: ContentModel, model: type[T]) -> T:
        payload = await self.call(request_type, content)
        try:
            result = decode_result(request_type, payload)
        except DecodeError:
            self.notify(UNREADABLE_RESPONSE)
            raise
        if not isinstance(result, model):
            raise CareerAssistantError(f"Unexpected result type {type(result).__name__}")
        return result

    async def analyze_resume(self, content: ResumeAnalysisContent) -> ResumeAnalysisResult:
        return await self._request(RequestType.RESUME_ANALYSIS, content, ResumeAnalysisResult)

    async def generate_cover_letter(self, content: CoverLetterContent) -> CoverLetterResult:
        return await self._request(RequestType.COVER_LETTER, content, CoverLetterResult)

    async def analyze_skill_gap(self, content: SkillGapContent) -> SkillGapResult:
        return await self._request(RequestType.SKILL_GAP, content, SkillGapResult)

    async def get_interview_feedback(
        self, content: InterviewFeedbackContent
    ) -> InterviewFeedbackResult:
        return await self._request(RequestType.INTERVIEW_FEEDBACK, content, InterviewFeedbackResult)

    async def generate_interview_questions(
        self, content: InterviewQuestionsContent
    ) -> InterviewQuestionsResult:
        return await self._request(
            RequestType.INTERVIEW_QUESTIONS, content, InterviewQuestionsResult
        )

    async def evaluate_interview(
        self, content: InterviewEvaluationContent
    ) -> InterviewEvaluationResult:
        return await self._request(
            RequestType.INTERVIEW_EVALUATION, content, InterviewEvaluationResult
        )


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.reason_phrase
