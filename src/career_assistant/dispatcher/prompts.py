"""Prompt templates for the six request types."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable

from career_assistant.models.requests import (
    ContentModel,
    CoverLetterContent,
    InterviewEvaluationContent,
    InterviewFeedbackContent,
    InterviewQuestionsContent,
    RequestType,
    ResumeAnalysisContent,
    SkillGapContent,
)

RESUME_ANALYSIS_SYSTEM = """\
You are an expert ATS (Applicant Tracking System) analyzer.
Analyze the provided resume content against the job description.
Provide a detailed analysis including:
1. Overall match percentage (numeric value between 0-100)
2. ATS compatibility score (numeric value between 0-100)
3. Keyword match score (numeric value between 0-100)
4. Formatting score (numeric value between 0-100)
5. Content quality score (numeric value between 0-100)
6. A list of key industry keywords found in the resume
7. A list of missing important keywords from the job description
8. Specific suggestions for improvements
Format the response as valid JSON with these keys: overallScore, atsCompatibility, \
keywordMatch, formattingScore, contentScore, keywords, missingKeywords, suggestions"""

COVER_LETTER_SYSTEM = """\
You are a professional cover letter writer with expertise in career services.
Create a compelling, personalized cover letter based on the provided information.
The tone should match the requested style, and the content should highlight relevant \
skills and experiences.
Keep the cover letter concise, professional, and tailored to the specific job.
Format the response as plain text with appropriate paragraph breaks."""

SKILL_GAP_SYSTEM = """\
You are a career development specialist and industry expert.
Analyze the provided resume and job description to identify skill gaps.
Provide a comprehensive analysis including:
1. Overall match percentage (numeric value between 0-100)
2. List of strong skills already present in the resume
3. List of skills present but needing improvement (with current level 0-100 and gap size)
4. List of completely missing skills (with required level 0-100)
5. Recommended courses or resources to develop the missing skills
Format the response as valid JSON with these keys: matchPercentage, strongSkills, \
partialSkills, missingSkills, recommendations"""

INTERVIEW_FEEDBACK_SYSTEM = """\
You are an expert interview coach with experience in technical and behavioral interviews.
Analyze the provided interview response and question to provide constructive feedback.
Consider clarity, relevance, structure, technical accuracy, and delivery in your assessment.
Provide:
1. Overall score (0-100)
2. Strengths in the response
3. Areas for improvement
4. Alternative approaches or points that could have been included
Format the response as valid JSON with these keys: overallScore, strengths, \
improvements, alternatives"""

INTERVIEW_QUESTIONS_SYSTEM = """\
You are an expert technical interviewer with extensive experience in conducting interviews.
Generate a set of 5 interview questions tailored for the specified role and experience level.
Each question should:
1. Be appropriate for the role and level
2. Include a mix of behavioral and technical questions
3. Have an estimated time allocation for the answer
Format the response as a JSON array of objects with these keys: id, text, \
category (Behavioral/Technical), timeAllocation (in seconds)"""

INTERVIEW_EVALUATION_SYSTEM = """\
You are an expert interview evaluator with experience in technical hiring.
Analyze the candidate's interview performance for the specified role and level.
Provide a comprehensive evaluation including:
1. Delivery assessment (score, feedback, strengths, areas for improvement)
2. Content assessment (score, feedback, strengths, areas for improvement)
3. Confidence assessment (score, feedback, strengths, areas for improvement)
Format the response as valid JSON with nested objects for delivery, content, and \
confidence, each containing: score (0-100), feedback (string), strengths (string[]), \
improvements (string[])"""


def _resume_analysis(c: ResumeAnalysisContent) -> str:
    return (
        f"Resume: {c.resume}\n\n"
        f"Job Description: {c.job_description or 'General industry position'}"
    )


def _cover_letter(c: CoverLetterContent) -> str:
    return f"""\
Full Name: {c.full_name}
Email: {c.email}
Phone: {c.phone}
Address: {c.address or ""}
Company: {c.company}
Position: {c.position}
Hiring Manager: {c.hiring_manager or "Hiring Manager"}
Job Description: {c.job_description}
Relevant Experience: {c.experience or ""}
Tone: {c.tone}
Desired Length: {c.length}"""


def _skill_gap(c: SkillGapContent) -> str:
    return (
        f"Resume: {c.resume}\n\n"
        f"Job Title: {c.job_title}\n\n"
        f"Job Description: {c.job_description}"
    )


def _interview_feedback(c: InterviewFeedbackContent) -> str:
    return (
        f"Interview Question: {c.question}\n\n"
        f"Candidate Response: {c.response}\n\n"
        f"Position Type: {c.position_type or 'General'}"
    )


def _interview_questions(c: InterviewQuestionsContent) -> str:
    return f"Role: {c.role}\nExperience Level: {c.level}"


def _interview_evaluation(c: InterviewEvaluationContent) -> str:
    questions = json.dumps(
        [q.model_dump(by_alias=True) for q in c.questions], ensure_ascii=False
    )
    return f"Role: {c.role}\nLevel: {c.level}\nQuestions and Context: {questions}"


@dataclass(frozen=True)
class PromptTemplate:
    system: str
    render_user: Callable[..., str]
    expects_json: bool = True


TEMPLATES: dict[RequestType, PromptTemplate] = {
    RequestType.RESUME_ANALYSIS: PromptTemplate(RESUME_ANALYSIS_SYSTEM, _resume_analysis),
    RequestType.COVER_LETTER: PromptTemplate(COVER_LETTER_SYSTEM, _cover_letter, expects_json=False),
    RequestType.SKILL_GAP: PromptTemplate(SKILL_GAP_SYSTEM, _skill_gap),
    RequestType.INTERVIEW_FEEDBACK: PromptTemplate(INTERVIEW_FEEDBACK_SYSTEM, _interview_feedback),
    RequestType.INTERVIEW_QUESTIONS: PromptTemplate(INTERVIEW_QUESTIONS_SYSTEM, _interview_questions),
    RequestType.INTERVIEW_EVALUATION: PromptTemplate(
        INTERVIEW_EVALUATION_SYSTEM, _interview_evaluation
    ),
}


def build_prompt(request_type: RequestType, content: ContentModel) -> tuple[str, str]:
    """Return the (system, user) prompt pair for a validated request."""
    template = TEMPLATES[request_type]
    return template.system, template.render_user(content)
