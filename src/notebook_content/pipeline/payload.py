from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class FileReference:
    """Source stored as a file or reachable by URL; the generation service fetches it."""

    source_type: str
    file_path: str

    def as_payload(self) -> dict[str, Any]:
        return {"sourceType": self.source_type, "filePath": self.file_path}


@dataclass(frozen=True)
class InlineContent:
    """Text source whose content travels inside the request."""

    source_type: str
    content: str | None = None

    def as_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"sourceType": self.source_type}
        if self.content:
            payload["content"] = self.content
        return payload


SourcePayload = FileReference | InlineContent


def inline_content(source_type: str, content: str | None, char_limit: int) -> InlineContent:
    if not content:
        return InlineContent(source_type=source_type)
    return InlineContent(source_type=source_type, content=content[:char_limit])
