"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import httpx
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from career_assistant.auth.session import AuthService, Session, SessionStore
from career_assistant.clients.assistant_client import CareerAssistantClient
from career_assistant.config import AppConfig, load_config
from career_assistant.errors import AuthenticationError, CareerAssistantError
from career_assistant.models.requests import (
    CoverLetterContent,
    InterviewEvaluationContent,
    InterviewFeedbackContent,
    InterviewQuestion,
    InterviewQuestionsContent,
    ResumeAnalysisContent,
    SkillGapContent,
)
from career_assistant.models.results import AssessmentArea, SkillAssessment
from career_assistant.parsers.resume_parser import parse_resume

app = typer.Typer(
    name="career-assistant",
    help="AI career tools: ATS scan, cover letters, skill gaps and mock interviews",
    no_args_is_help=True,
)
console = Console()


@dataclass
class AppContext:
    config: AppConfig
    auth: AuthService
    session: Session


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Path = typer.Option(None, "--config", help="Path to config.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    config = load_config(config_path)
    auth = AuthService(SessionStore(config.session.resolved_path))
    ctx.obj = AppContext(config=config, auth=auth, session=auth.restore())


def _toast(message: str) -> None:
    console.print(f"[red]{message}[/red]")


def _run(ctx: typer.Context, method: str, content):
    """Call one client wrapper, exiting non-zero on failure."""
    state: AppContext = ctx.obj

    async def go():
        async with CareerAssistantClient(
            state.config.client.endpoint_url,
            timeout=state.config.client.timeout,
            notify=_toast,
        ) as client:
            return await getattr(client, method)(content)

    try:
        with console.status("Waiting for AI response..."):
            return asyncio.run(go())
    except CareerAssistantError as e:
        console.print(f"[dim]{e}[/dim]")
        raise typer.Exit(1)
    except httpx.HTTPError as e:
        console.print(f"[dim]{type(e).__name__}: {e}[/dim]")
        raise typer.Exit(1)


def _read_text(path: Path | None, label: str) -> str | None:
    if path is None:
        return None
    if not path.exists():
        console.print(f"[red]{label} file not found: {path}[/red]")
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8")


def _load_resume(path: Path) -> str:
    if not path.exists():
        console.print(f"[red]Resume file not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return parse_resume(path)
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _bullets(items: list[str]) -> str:
    return "\n".join(f"• {item}" for item in items) or "[dim]none[/dim]"


@app.command()
def serve(
    ctx: typer.Context,
    host: str = typer.Option(None, "--host", help="Bind address"),
    port: int = typer.Option(None, "--port", help="Bind port"),
) -> None:
    """Run the dispatcher HTTP endpoint."""
    import uvicorn

    from career_assistant.server import create_app

    config: AppConfig = ctx.obj.config
    uvicorn.run(
        create_app(config),
        host=host or config.server.host,
        port=port or config.server.port,
    )


@app.command()
def scan(
    ctx: typer.Context,
    resume: Path = typer.Option(..., "--resume", help="Resume file (PDF/DOCX/TXT/MD)"),
    jd: Path = typer.Option(None, "--jd", help="Job description text file"),
) -> None:
    """Score a resume for ATS compatibility against a job description."""
    content = ResumeAnalysisContent(
        resume=_load_resume(resume), job_description=_read_text(jd, "Job description")
    )
    result = _run(ctx, "analyze_resume", content)

    table = Table(title="ATS Scan", show_header=False)
    table.add_row("Overall", str(result.overall_score))
    table.add_row("ATS compatibility", str(result.ats_compatibility))
    table.add_row("Keyword match", str(result.keyword_match))
    table.add_row("Formatting", str(result.formatting_score))
    table.add_row("Content", str(result.content_score))
    console.print(table)
    console.print(Panel(", ".join(result.keywords) or "-", title="Keywords found"))
    console.print(Panel(", ".join(result.missing_keywords) or "-", title="Missing keywords"))
    console.print(Panel(_bullets(result.suggestions), title="Suggestions"))


@app.command("cover-letter")
def cover_letter(
    ctx: typer.Context,
    company: str = typer.Option(..., "--company"),
    position: str = typer.Option(..., "--position"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    name: str = typer.Option(None, "--name", help="Defaults to the signed-in user"),
    email: str = typer.Option(None, "--email", help="Defaults to the signed-in user"),
    phone: str = typer.Option(..., "--phone"),
    address: str = typer.Option(None, "--address"),
    hiring_manager: str = typer.Option(None, "--hiring-manager"),
    experience: Path = typer.Option(None, "--experience", help="Relevant experience text file"),
    tone: str = typer.Option("professional", "--tone"),
    length: str = typer.Option("medium", "--length"),
    output: Path = typer.Option(None, "--output", "-o", help="Write the letter to a file"),
) -> None:
    """Generate a cover letter."""
    user = ctx.obj.session.user
    full_name = name or (user.name if user else None)
    sender = email or (user.email if user else None)
    if not full_name or not sender:
        console.print("[red]--name and --email are required when not signed in.[/red]")
        raise typer.Exit(1)

    try:
        content = CoverLetterContent(
            full_name=full_name,
            email=sender,
            phone=phone,
            address=address,
            company=company,
            position=position,
            hiring_manager=hiring_manager,
            job_description=_read_text(jd, "Job description"),
            experience=_read_text(experience, "Experience"),
            tone=tone,
            length=length,
        )
    except ValueError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

    result = _run(ctx, "generate_cover_letter", content)
    if output:
        output.write_text(result.content, encoding="utf-8")
        console.print(f"[green]Saved: {output}[/green]")
    else:
        console.print(Panel(result.content, title=f"{position} @ {company}"))


def _skill_table(title: str, skills: list[SkillAssessment]) -> Table:
    table = Table(title=title)
    table.add_column("Skill")
    table.add_column("Level", justify="right")
    table.add_column("Gap", justify="right")
    for skill in skills:
        table.add_row(skill.name, str(skill.level), str(skill.gap))
    return table


@app.command("skill-gap")
def skill_gap(
    ctx: typer.Context,
    resume: Path = typer.Option(..., "--resume", help="Resume file (PDF/DOCX/TXT/MD)"),
    title: str = typer.Option(..., "--title", help="Target job title"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
) -> None:
    """Compare resume skills with a job's requirements."""
    content = SkillGapContent(
        resume=_load_resume(resume),
        job_title=title,
        job_description=_read_text(jd, "Job description"),
    )
    result = _run(ctx, "analyze_skill_gap", content)

    console.print(f"[bold]Match: {result.match_percentage}%[/bold]")
    console.print(_skill_table("Strong skills", result.strong_skills))
    console.print(_skill_table("Needs improvement", result.partial_skills))
    console.print(_skill_table("Missing skills", result.missing_skills))
    for course in result.recommendations:
        console.print(
            f"• {course.title} ({course.provider or 'n/a'}, {course.duration}, {course.level}) {course.url}"
        )


@app.command("interview-questions")
def interview_questions(
    ctx: typer.Context,
    role: str = typer.Option(..., "--role"),
    level: str = typer.Option(..., "--level"),
    output: Path = typer.Option(None, "--output", "-o", help="Save questions as JSON"),
) -> None:
    """Generate mock interview questions."""
    result = _run(ctx, "generate_interview_questions", InterviewQuestionsContent(role=role, level=level))
    if not result.questions:
        console.print("[red]Failed to generate questions. Please try again.[/red]")
        raise typer.Exit(1)
    for q in result.questions:
        console.print(f"{q.id}. [{q.category}] {q.text} [dim]({q.time_allocation}s)[/dim]")
    if output:
        output.write_text(
            json.dumps([q.model_dump(by_alias=True) for q in result.questions], ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        console.print(f"[green]Saved: {output}[/green]")


@app.command("interview-feedback")
def interview_feedback(
    ctx: typer.Context,
    question: str = typer.Option(..., "--question"),
    answer: Path = typer.Option(..., "--answer", help="Text file with your answer"),
    position: str = typer.Option(None, "--position", help="Position type"),
) -> None:
    """Get feedback on a single interview answer."""
    content = InterviewFeedbackContent(
        question=question, response=_read_text(answer, "Answer"), position_type=position
    )
    result = _run(ctx, "get_interview_feedback", content)
    console.print(f"[bold]Score: {result.overall_score}[/bold]")
    console.print(Panel(_bullets(result.strengths), title="Strengths"))
    console.print(Panel(_bullets(result.improvements), title="Improvements"))
    console.print(Panel(_bullets(result.alternatives), title="Alternatives"))


@app.command("interview-evaluate")
def interview_evaluate(
    ctx: typer.Context,
    role: str = typer.Option(..., "--role"),
    level: str = typer.Option(..., "--level"),
    questions: Path = typer.Option(..., "--questions", help="JSON file from interview-questions"),
) -> None:
    """Evaluate a whole mock interview session."""
    raw = _read_text(questions, "Questions")
    try:
        items = [InterviewQuestion.model_validate(q) for q in json.loads(raw)]
    except (ValueError, TypeError) as e:
        console.print(f"[red]Invalid questions file: {e}[/red]")
        raise typer.Exit(1)

    result = _run(
        ctx,
        "evaluate_interview",
        InterviewEvaluationContent(role=role, level=level, questions=items),
    )
    areas: dict[str, AssessmentArea] = {
        "Delivery": result.delivery,
        "Content": result.content,
        "Confidence": result.confidence,
    }
    for label, area in areas.items():
        body = f"{area.feedback}\n\n[green]Strengths[/green]\n{_bullets(area.strengths)}"
        body += f"\n\n[yellow]Improvements[/yellow]\n{_bullets(area.improvements)}"
        console.print(Panel(body, title=f"{label}: {area.score}"))


@app.command()
def signup(
    ctx: typer.Context,
    email: str = typer.Option(..., "--email"),
    name: str = typer.Option(..., "--name"),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
) -> None:
    """Create a local account and sign in."""
    state: AppContext = ctx.obj
    try:
        state.session = state.auth.sign_up(email, password, name)
    except AuthenticationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print("[green]Account created successfully[/green]")


@app.command()
def login(
    ctx: typer.Context,
    email: str = typer.Option(..., "--email"),
    password: str = typer.Option(..., "--password", prompt=True, hide_input=True),
) -> None:
    """Sign in (demo account only)."""
    state: AppContext = ctx.obj
    try:
        state.session = state.auth.sign_in(email, password)
    except AuthenticationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    console.print("[green]Signed in successfully[/green]")


@app.command()
def logout(ctx: typer.Context) -> None:
    """Sign out and remove the stored session."""
    state: AppContext = ctx.obj
    state.auth.sign_out(state.session)
    console.print("[green]Signed out successfully[/green]")


@app.command()
def whoami(ctx: typer.Context) -> None:
    """Show the signed-in user."""
    user = ctx.obj.session.user
    if user is None:
        console.print("[dim]Not signed in[/dim]")
        raise typer.Exit(1)
    console.print(f"{user.name} <{user.email}> [dim]{user.id}[/dim]")


if __name__ == "__main__":
    app()
