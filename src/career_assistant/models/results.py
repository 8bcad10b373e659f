"""Pydantic models for typed dispatcher results.

Generated JSON is loosely shaped: fields go missing, skills arrive as bare
strings or as objects with varying key names, scores arrive as strings or
floats. Each model normalizes its input in a ``before`` validator so that
absent or unrecognized fields decode to explicit defaults.
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from career_assistant.models.requests import InterviewQuestion


def _score(value: Any) -> int:
    """Coerce a generated score to an int in [0, 100]; unparseable → 0."""
    if isinstance(value, bool):
        return 0
    try:
        number = float(str(value).strip().rstrip("%"))
    except (TypeError, ValueError):
        return 0
    if not math.isfinite(number):
        return 0
    return max(0, min(100, int(round(number))))


def _int(value: Any, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _strings(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value.strip() else []
    if not isinstance(value, list):
        return []
    out: list[str] = []
    for item in value:
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, dict):
            # e.g. {"suggestion": "..."} or {"text": "..."}
            text = next((v for v in item.values() if isinstance(v, str)), None)
            if text:
                out.append(text)
        elif item is not None:
            out.append(str(item))
    return out


class ResultModel(BaseModel):
    model_config = {"alias_generator": to_camel, "populate_by_name": True}

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class ResumeAnalysisResult(ResultModel):
    overall_score: int = 0
    ats_compatibility: int = 0
    keyword_match: int = 0
    formatting_score: int = 0
    content_score: int = 0
    keywords: list[str] = Field(default_factory=list)
    missing_keywords: list[str] = Field(default_factory=list)
    suggestions: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)

    @field_validator(
        "overall_score", "ats_compatibility", "keyword_match",
        "formatting_score", "content_score", mode="before",
    )
    @classmethod
    def _clamp(cls, v: Any) -> int:
        return _score(v)

    @field_validator("keywords", "missing_keywords", "suggestions", "errors", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> list[str]:
        return _strings(v)


class CoverLetterResult(ResultModel):
    content: str


class SkillAssessment(ResultModel):
    name: str
    level: int = 0  # 0-100
    gap: int = 0  # 0-100
    required: bool = False


class CourseRecommendation(ResultModel):
    title: str = ""
    provider: str = ""
    url: str = "#"
    duration: str = "Self-paced"
    level: str = "Intermediate"
    skills: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"title": data}
        if not isinstance(data, dict):
            return {}

        def text(*keys: str, default: str = "") -> str:
            value = next((data[k] for k in keys if data.get(k)), None)
            return str(value) if value is not None else default

        return {
            "title": text("title", "course", "name"),
            "provider": text("provider", "platform"),
            "url": text("url", "link", default="#"),
            "duration": text("duration", default="Self-paced"),
            "level": text("level", default="Intermediate"),
            "skills": _strings(data.get("skills")),
        }


def _skill_name(item: Any) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        return str(item.get("name") or item.get("skill") or "")
    return ""


def _strong_skill(item: Any) -> dict:
    level = item.get("level") if isinstance(item, dict) else None
    return {
        "name": _skill_name(item),
        "level": _score(level) if level else 100,
        "gap": 0,
        "required": bool(isinstance(item, dict) and item.get("required")),
    }


def _partial_skill(item: Any) -> dict:
    obj = item if isinstance(item, dict) else {}
    return {
        "name": _skill_name(item),
        "level": _score(obj.get("currentLevel", obj.get("level", 0))),
        "gap": _score(obj.get("gapSize", obj.get("gap", 0))),
        "required": bool(obj.get("required")),
    }


def _missing_skill(item: Any) -> dict:
    obj = item if isinstance(item, dict) else {}
    gap = obj.get("requiredLevel") or obj.get("gap") or 50
    return {
        "name": _skill_name(item),
        "level": 0,
        "gap": _score(gap),
        "required": bool(obj.get("required")),
    }


class SkillGapResult(ResultModel):
    match_percentage: int = 0
    strong_skills: list[SkillAssessment] = Field(default_factory=list)
    partial_skills: list[SkillAssessment] = Field(default_factory=list)
    missing_skills: list[SkillAssessment] = Field(default_factory=list)
    recommendations: list[CourseRecommendation] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _reshape(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        def items(key: str) -> list:
            value = data.get(key)
            return value if isinstance(value, list) else []

        return {
            "match_percentage": _score(data.get("matchPercentage", 0)),
            "strong_skills": [_strong_skill(s) for s in items("strongSkills")],
            "partial_skills": [_partial_skill(s) for s in items("partialSkills")],
            "missing_skills": [_missing_skill(s) for s in items("missingSkills")],
            "recommendations": items("recommendations"),
        }


class InterviewFeedbackResult(ResultModel):
    overall_score: int = 0
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    alternatives: list[str] = Field(default_factory=list)

    @field_validator("overall_score", mode="before")
    @classmethod
    def _clamp(cls, v: Any) -> int:
        return _score(v)

    @field_validator("strengths", "improvements", "alternatives", mode="before")
    @classmethod
    def _lists(cls, v: Any) -> list[str]:
        return _strings(v)


class InterviewQuestionsResult(ResultModel):
    questions: list[InterviewQuestion] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _reshape(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = data.get("questions", [])
        if not isinstance(data, list):
            return {"questions": []}
        questions = []
        for index, item in enumerate(data, start=1):
            if isinstance(item, str):
                questions.append({"id": index, "text": item})
            elif isinstance(item, dict) and (item.get("text") or item.get("question")):
                questions.append({
                    "id": _int(item.get("id"), index),
                    "text": item.get("text") or item.get("question"),
                    "category": item.get("category") or "Technical",
                    "timeAllocation": _int(
                        item.get("timeAllocation", item.get("time_allocation")), 180
                    ),
                })
        return {"questions": questions}


class AssessmentArea(ResultModel):
    score: int = 0
    feedback: str = ""
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _reshape(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return {}
        feedback = data.get("feedback")
        return {
            "score": _score(data.get("score", 0)),
            "feedback": feedback if isinstance(feedback, str) else "",
            "strengths": _strings(data.get("strengths")),
            "improvements": _strings(data.get("improvements")),
        }


class InterviewEvaluationResult(ResultModel):
    delivery: AssessmentArea = Field(default_factory=AssessmentArea)
    content: AssessmentArea = Field(default_factory=AssessmentArea)
    confidence: AssessmentArea = Field(default_factory=AssessmentArea)

    @model_validator(mode="before")
    @classmethod
    def _fill(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return {key: data.get(key) or {} for key in ("delivery", "content", "confidence")}
