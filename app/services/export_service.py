# /app/services/export_service.py

from typing import List, Optional

from ..models.note_model import GeneratedContent, GeneratedQuestion


def format_question(question: GeneratedQuestion) -> str:
    """The plain-text block used when a single question is copied."""
    options = ", ".join(question.options)
    return f"Q: {question.question or ''}\nOptions: {options}\nAnswer: {question.answer or ''}"


def render_markdown(content: GeneratedContent, title: Optional[str] = None) -> str:
    """
    Renders generated study material as one markdown document.
    Missing or empty sections are left out.
    """
    lines: List[str] = []
    if title:
        lines += [f"# {title}", ""]

    summary = content.notes.summary if content.notes else None
    if summary:
        lines += ["## Notes", "", summary.strip(), ""]

    if content.questions:
        lines += ["## Questions", ""]
        for index, question in enumerate(content.questions, start=1):
            lines.append(f"{index}. {question.question or ''}")
            lines += [f"   - {option}" for option in question.options]
            if question.answer:
                lines.append(f"   **Answer:** {question.answer}")
            lines.append("")

    if content.flashcards:
        lines += ["## Flashcards", ""]
        for card in content.flashcards:
            lines.append(f"- **{card.front or ''}**: {card.back or ''}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"
