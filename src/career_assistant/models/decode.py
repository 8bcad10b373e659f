"""Decode raw dispatcher payloads into typed result models."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from career_assistant.errors import DecodeError
from career_assistant.models.requests import RequestType
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

RESULT_MODELS: dict[RequestType, type[ResultModel]] = {
    RequestType.RESUME_ANALYSIS: ResumeAnalysisResult,
    RequestType.COVER_LETTER: CoverLetterResult,
    RequestType.SKILL_GAP: SkillGapResult,
    RequestType.INTERVIEW_FEEDBACK: InterviewFeedbackResult,
    RequestType.INTERVIEW_QUESTIONS: InterviewQuestionsResult,
    RequestType.INTERVIEW_EVALUATION: InterviewEvaluationResult,
}


def decode_result(request_type: RequestType, payload: Any) -> ResultModel:
    """Validate a dispatcher payload against the result model for its type.

    An ``{"error", "raw"}`` envelope (the dispatcher's parse-failure reply)
    and any payload that does not fit the model raise DecodeError.
    """
    if isinstance(payload, dict) and "error" in payload and "raw" in payload:
        raise DecodeError(str(payload["error"]), raw=str(payload["raw"]))

    model = RESULT_MODELS[RequestType(request_type)]
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.warning("Could not decode %s payload: %s", request_type, e)
        raise DecodeError(f"Unexpected {RequestType(request_type).value} payload") from e
