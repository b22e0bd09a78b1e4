from dataclasses import dataclass, field
from typing import Any

from notebook_content.errors import InvalidResponseFormatError, MissingTitleError


@dataclass(frozen=True)
class GenerationResult:
    title: str
    summary: str | None = None
    notebook_icon: str | None = None
    background_color: str | None = None
    example_questions: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class NotebookContent:
    """Values written to the notebook record once generation completes."""

    title: str
    description: str | None
    icon: str
    color: str
    example_questions: list[str]

    def as_record(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "color": self.color,
            "example_questions": self.example_questions,
        }

    def as_response(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "color": self.color,
            "exampleQuestions": self.example_questions,
        }


def parse_generation_response(data: Any) -> GenerationResult:
    """Read the ``{"output": {...}}`` envelope returned by the generation service.

    Raises InvalidResponseFormatError when the envelope is missing and
    MissingTitleError when it carries no title.
    """
    output = data.get("output") if isinstance(data, dict) else None
    if output is None or not isinstance(output, dict):
        raise InvalidResponseFormatError()
    title = _text(output.get("title"))
    if not title:
        raise MissingTitleError()
    return GenerationResult(
        title=title,
        summary=_text(output.get("summary")),
        notebook_icon=_text(output.get("notebook_icon")),
        background_color=_text(output.get("background_color")),
        example_questions=_questions(output.get("example_questions")),
    )


def _text(value: Any) -> str | None:
    # scalars are stringified, nested values are dropped so defaults apply
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _questions(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [question for question in (_text(item) for item in value) if question]


def apply_defaults(result: GenerationResult, default_icon: str, default_color: str) -> NotebookContent:
    return NotebookContent(
        title=result.title,
        description=result.summary or None,
        icon=result.notebook_icon or default_icon,
        color=result.background_color or default_color,
        example_questions=list(result.example_questions),
    )
