import json
import logging
from typing import Any

import httpx

from notebook_content.config import Settings
from notebook_content.errors import GenerationServiceError, InvalidResponseFormatError
from notebook_content.pipeline.payload import SourcePayload

logger = logging.getLogger(__name__)


class GenerationWebhookClient:
    """Client for the external notebook generation webhook."""

    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self.settings = settings
        self.url = settings.generation_url
        self.timeout = settings.generation_timeout_seconds
        self.transport = transport

    async def generate(self, source: SourcePayload) -> Any:
        request_body = source.as_payload()
        logger.info(
            "generation.request url=%s source_type=%s kind=%s",
            self.url,
            source.source_type,
            source.__class__.__name__,
        )
        logger.info(
            "generation.request.payload=%s",
            self._clip(self._to_json(request_body), self.settings.log_payload_limit),
        )

        headers = {
            "Content-Type": "application/json",
            "Authorization": self.settings.generation_auth,
        }
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self.transport,
            follow_redirects=True,
        ) as client:
            http_response = await client.post(self.url, json=request_body, headers=headers)
            if not http_response.is_success:
                logger.error(
                    "generation.error status=%d reason=%s body=%s",
                    http_response.status_code,
                    http_response.reason_phrase,
                    self._clip(http_response.text, self.settings.log_payload_limit),
                )
                raise GenerationServiceError(http_response.status_code, http_response.text)
            try:
                response = http_response.json()
            except ValueError as exc:
                logger.error(
                    "generation.invalid_body status=%d body=%s",
                    http_response.status_code,
                    self._clip(http_response.text, self.settings.log_payload_limit),
                )
                raise InvalidResponseFormatError() from exc

        logger.info(
            "generation.response.payload=%s",
            self._clip(self._to_json(response), self.settings.log_payload_limit),
        )
        return response

    @staticmethod
    def _clip(text: str, limit: int) -> str:
        normalized = " ".join(text.split()).strip()
        if len(normalized) <= limit:
            return normalized
        return f"{normalized[:limit]}...(truncated)"

    @staticmethod
    def _to_json(payload: Any) -> str:
        try:
            return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
        except (TypeError, ValueError):
            return str(payload)
