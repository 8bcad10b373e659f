"""Extract plain text from uploaded resume files."""

from __future__ import annotations

import io
import re
from pathlib import Path

TEXT_SUFFIXES = (".txt", ".md")
SUPPORTED_SUFFIXES = (".pdf", ".docx", *TEXT_SUFFIXES)


def parse_resume(file_path: str | Path) -> str:
    """Parse a resume file (PDF, DOCX, TXT, MD) and return clean plain text."""
    path = Path(file_path)
    return parse_resume_bytes(path.read_bytes(), path.name)


def parse_resume_bytes(data: bytes, filename: str) -> str:
    """Parse an in-memory upload, dispatching on the file extension."""
    suffix = Path(filename).suffix.lower()
    if suffix == ".pdf":
        text = _parse_pdf(data)
    elif suffix == ".docx":
        text = _parse_docx(data)
    elif suffix in TEXT_SUFFIXES:
        text = data.decode("utf-8-sig")
    elif suffix == ".doc":
        raise ValueError(
            "Legacy Word (.doc) files cannot be read; save as .docx or paste the text instead."
        )
    else:
        raise ValueError(f"Unsupported file format: {suffix or filename}")

    text = clean_text(text)
    if not text:
        raise ValueError(
            f"No text could be extracted from {filename}; please paste the content manually."
        )
    return text


def clean_text(text: str) -> str:
    """Normalize extracted text: drop invisible characters, unify bullets,
    collapse runs of spaces and blank lines."""
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(r"^(\s*)[●•◦◆■▪○]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = []
    for line in text.splitlines():
        stripped = line.strip()
        indent = line[: len(line) - len(line.lstrip())].replace("\t", "    ")
        stripped = re.sub(r"[ \t]{2,}", " ", stripped)
        lines.append(f"{indent}{stripped}" if stripped else "")
    text = "\n".join(lines)

    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def _parse_pdf(data: bytes) -> str:
    import fitz  # pymupdf

    with fitz.open(stream=data, filetype="pdf") as doc:
        return "\n".join(page.get_text() for page in doc)


def _parse_docx(data: bytes) -> str:
    from docx import Document

    doc = Document(io.BytesIO(data))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
