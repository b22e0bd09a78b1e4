import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from pydantic import ValidationError

from notebook_content.api.schemas import GenerateNotebookRequest, GenerateNotebookResponse
from notebook_content.config import Settings, get_settings
from notebook_content.errors import (
    ConfigurationMissingError,
    MissingInputError,
    NotebookContentError,
    NotebookUpdateError,
)
from notebook_content.pipeline.payload import FileReference, SourcePayload, inline_content
from notebook_content.pipeline.result import apply_defaults, parse_generation_response
from notebook_content.providers.generation.webhook import GenerationWebhookClient
from notebook_content.providers.store.notebooks import GenerationStatus, SupabaseNotebookStore

logger = logging.getLogger(__name__)


class NotebookStore(Protocol):
    async def set_status(self, notebook_id: str, status: GenerationStatus) -> None: ...

    async def fetch_source_content(self, notebook_id: str) -> str | None: ...

    async def save_generated_content(self, notebook_id: str, values: dict[str, Any]) -> None: ...


class GenerationClient(Protocol):
    async def generate(self, source: SourcePayload) -> Any: ...


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    body: dict[str, Any]


class NotebookContentService:
    def __init__(
        self,
        settings: Settings | None = None,
        store: NotebookStore | None = None,
        client: GenerationClient | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.store = store or SupabaseNotebookStore(self.settings)
        self.client = client or GenerationWebhookClient(self.settings)

    async def generate(self, raw_body: bytes | str) -> HandlerResponse:
        try:
            content = await self._generate(self._parse_request(raw_body))
            return HandlerResponse(status_code=200, body=content)
        except NotebookContentError as exc:
            return HandlerResponse(status_code=exc.status_code, body=exc.as_payload())
        except Exception:
            logger.exception("notebook.generate.failed")
            return HandlerResponse(status_code=500, body={"error": "Internal server error"})

    @staticmethod
    def _parse_request(raw_body: bytes | str) -> GenerateNotebookRequest:
        body = json.loads(raw_body)
        if not isinstance(body, dict):
            raise MissingInputError()
        try:
            request = GenerateNotebookRequest.model_validate(body)
        except ValidationError as exc:
            logger.info("notebook.generate.invalid errors=%d", exc.error_count())
            raise MissingInputError() from exc
        if not request.is_complete():
            raise MissingInputError()
        return request

    async def _generate(self, request: GenerateNotebookRequest) -> dict[str, Any]:
        notebook_id = str(request.notebook_id)
        source_type = str(request.source_type)
        logger.info(
            "notebook.generate.request notebook_id=%s source_type=%s file_path=%s",
            notebook_id,
            source_type,
            request.file_path,
        )

        missing = self.settings.missing_generation_settings()
        if missing:
            logger.error("notebook.generate.config_missing missing=%s", ",".join(missing))
            raise ConfigurationMissingError(missing)

        await self.store.set_status(notebook_id, GenerationStatus.GENERATING)
        source = await self._build_source(notebook_id, source_type, request.file_path)

        try:
            data = await self.client.generate(source)
            result = parse_generation_response(data)
        except NotebookContentError as exc:
            logger.error("notebook.generate.downstream_failed notebook_id=%s error=%s", notebook_id, exc.error)
            await self._mark_failed(notebook_id)
            raise

        content = apply_defaults(
            result,
            default_icon=self.settings.default_notebook_icon,
            default_color=self.settings.default_notebook_color,
        )
        response = GenerateNotebookResponse.model_validate(content.as_response())
        try:
            await self.store.save_generated_content(notebook_id, content.as_record())
        except Exception as exc:
            # generation_status stays "generating"; no compensating write
            logger.exception("notebook.update.failed notebook_id=%s", notebook_id)
            raise NotebookUpdateError() from exc

        logger.info(
            "notebook.generate.completed notebook_id=%s title=%s example_questions=%d",
            notebook_id,
            content.title,
            len(content.example_questions),
        )
        return response.model_dump(by_alias=True)

    async def _build_source(self, notebook_id: str, source_type: str, file_path: str | None) -> SourcePayload:
        if file_path:
            return FileReference(source_type=source_type, file_path=file_path)
        stored = await self.store.fetch_source_content(notebook_id)
        return inline_content(source_type, stored, self.settings.source_content_char_limit)

    async def _mark_failed(self, notebook_id: str) -> None:
        try:
            await self.store.set_status(notebook_id, GenerationStatus.FAILED)
        except Exception as exc:
            logger.warning(
                "notebook.status.failed_write notebook_id=%s type=%s detail=%s",
                notebook_id,
                exc.__class__.__name__,
                exc,
            )
