# /app/services/prompt_library.py

"""
This file is the central, version-controlled library for the master prompt
and output schema used by the note generator. The prompt is parameterized
only by the kind of content being analyzed.
"""

from ..models.note_model import InputKind

# --- CONTENT DESCRIPTIONS (one per input kind) ---
CONTENT_DESCRIPTIONS = {
    InputKind.TEXT: "the provided text",
    InputKind.IMAGE: "the content of the provided image (perform OCR if necessary)",
    InputKind.AUDIO: "the content of the provided audio file",
    InputKind.PDF: "the content of the provided PDF document",
    InputKind.SLIDESHOW: "the content of the provided presentation (PPT) file",
}


NOTE_GENERATION_PROMPT = """
Analyze {content_description}. Your task is to generate a structured JSON output containing three distinct sections:

1.  **Notes**: A concise summary of the key information.
2.  **Questions**: 3-5 multiple-choice questions to test understanding. Each question must have exactly 4 options.
3.  **Flashcards**: 3-5 flashcards with a 'front' (term/question) and a 'back' (definition/answer).

Please adhere strictly to the provided JSON schema.
"""


# --- RESPONSE SCHEMA (Gemini structured output) ---
RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "notes": {
            "type": "OBJECT",
            "properties": {
                "summary": {
                    "type": "STRING",
                    "description": "A concise, well-structured summary of the content in markdown format. Should be easy to read and capture the key points.",
                },
            },
            "required": ["summary"],
        },
        "questions": {
            "type": "ARRAY",
            "description": "A list of 3-5 multiple-choice questions to test comprehension of the content.",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "question": {"type": "STRING", "description": "The question text."},
                    "options": {
                        "type": "ARRAY",
                        "description": "An array of 4 potential answers (strings).",
                        "items": {"type": "STRING"},
                    },
                    "answer": {"type": "STRING", "description": "The correct answer from the options list."},
                },
                "required": ["question", "options", "answer"],
            },
        },
        "flashcards": {
            "type": "ARRAY",
            "description": "A list of 3-5 flashcards based on key concepts from the content.",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "front": {"type": "STRING", "description": "The front of the flashcard (a question or term)."},
                    "back": {"type": "STRING", "description": "The back of the flashcard (the answer or definition)."},
                },
                "required": ["front", "back"],
            },
        },
    },
    "required": ["notes", "questions", "flashcards"],
}


def build_note_prompt(kind: InputKind) -> str:
    return NOTE_GENERATION_PROMPT.format(content_description=CONTENT_DESCRIPTIONS[kind]).strip()
