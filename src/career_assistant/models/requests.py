"""Pydantic models for dispatcher request envelopes and per-type content."""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class RequestType(str, Enum):
    RESUME_ANALYSIS = "resume_analysis"
    COVER_LETTER = "cover_letter"
    SKILL_GAP = "skill_gap"
    INTERVIEW_FEEDBACK = "interview_feedback"
    INTERVIEW_QUESTIONS = "interview_questions"
    INTERVIEW_EVALUATION = "interview_evaluation"


class ContentModel(BaseModel):
    """Base for request content: camelCase on the wire, snake_case in Python."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class ResumeAnalysisContent(ContentModel):
    resume: str
    job_description: str | None = None


class CoverLetterContent(ContentModel):
    full_name: str
    email: str
    phone: str
    address: str | None = None
    company: str
    position: str
    hiring_manager: str | None = None
    job_description: str
    experience: str | None = None
    tone: Literal["professional", "enthusiastic", "conversational"] = "professional"
    length: Literal["short", "medium", "long"] = "medium"


class SkillGapContent(ContentModel):
    resume: str
    job_title: str
    job_description: str


class InterviewFeedbackContent(ContentModel):
    question: str
    response: str
    position_type: str | None = None


class InterviewQuestionsContent(ContentModel):
    role: str
    level: str


class InterviewQuestion(ContentModel):
    id: int
    text: str
    category: str = "Technical"
    time_allocation: int = 180  # seconds


class InterviewEvaluationContent(ContentModel):
    role: str
    level: str
    questions: list[InterviewQuestion] = Field(default_factory=list)


CONTENT_MODELS: dict[RequestType, type[ContentModel]] = {
    RequestType.RESUME_ANALYSIS: ResumeAnalysisContent,
    RequestType.COVER_LETTER: CoverLetterContent,
    RequestType.SKILL_GAP: SkillGapContent,
    RequestType.INTERVIEW_FEEDBACK: InterviewFeedbackContent,
    RequestType.INTERVIEW_QUESTIONS: InterviewQuestionsContent,
    RequestType.INTERVIEW_EVALUATION: InterviewEvaluationContent,
}


class RequestEnvelope(BaseModel):
    """Wire body sent to the dispatcher: ``{"type": ..., "content": {...}}``."""

    type: RequestType
    content: dict[str, Any]

    @classmethod
    def wrap(cls, request_type: RequestType, content: ContentModel) -> RequestEnvelope:
        return cls(type=request_type, content=content.to_wire())
