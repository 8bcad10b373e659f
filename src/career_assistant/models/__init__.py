"""Data models for the career assistant."""

from career_assistant.models.requests import (
    CONTENT_MODELS,
    CoverLetterContent,
    InterviewEvaluationContent,
    InterviewFeedbackContent,
    InterviewQuestion,
    InterviewQuestionsContent,
    RequestEnvelope,
    RequestType,
    ResumeAnalysisContent,
    SkillGapContent,
)
from career_assistant.models.results import (
    AssessmentArea,
    CourseRecommendation,
    CoverLetterResult,
    InterviewEvaluationResult,
    InterviewFeedbackResult,
    InterviewQuestionsResult,
    ResumeAnalysisResult,
    SkillAssessment,
    SkillGapResult,
)
from career_assistant.models.session import User

__all__ = [
    "AssessmentArea",
    "CONTENT_MODELS",
    "CourseRecommendation",
    "CoverLetterContent",
    "CoverLetterResult",
    "InterviewEvaluationContent",
    "InterviewEvaluationResult",
    "InterviewFeedbackContent",
    "InterviewFeedbackResult",
    "InterviewQuestion",
    "InterviewQuestionsContent",
    "InterviewQuestionsResult",
    "RequestEnvelope",
    "RequestType",
    "ResumeAnalysisContent",
    "ResumeAnalysisResult",
    "SkillAssessment",
    "SkillGapContent",
    "SkillGapResult",
    "User",
]
