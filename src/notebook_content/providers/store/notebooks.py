import logging
from enum import Enum
from typing import Any

from supabase import AsyncClient, acreate_client

from notebook_content.config import Settings

logger = logging.getLogger(__name__)

NOTEBOOKS_TABLE = "notebooks"
SOURCES_TABLE = "sources"


class GenerationStatus(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    COMPLETED = "completed"
    FAILED = "failed"


class SupabaseNotebookStore:
    """Reads sources and writes notebook generation state through Supabase."""

    def __init__(self, settings: Settings, client: AsyncClient | None = None) -> None:
        self.settings = settings
        self._client = client

    async def set_status(self, notebook_id: str, status: GenerationStatus) -> None:
        logger.info("store.status notebook_id=%s status=%s", notebook_id, status.value)
        await self._update_notebook(notebook_id, {"generation_status": status.value})

    async def fetch_source_content(self, notebook_id: str) -> str | None:
        client = await self._get_client()
        response = (
            await client.table(SOURCES_TABLE)
            .select("content")
            .eq("notebook_id", notebook_id)
            .limit(1)
            .execute()
        )
        rows = response.data or []
        if not rows:
            logger.info("store.source.missing notebook_id=%s", notebook_id)
            return None
        content = rows[0].get("content")
        logger.info("store.source notebook_id=%s chars=%d", notebook_id, len(content or ""))
        return content

    async def save_generated_content(self, notebook_id: str, values: dict[str, Any]) -> None:
        record = {**values, "generation_status": GenerationStatus.COMPLETED.value}
        await self._update_notebook(notebook_id, record)

    async def _update_notebook(self, notebook_id: str, values: dict[str, Any]) -> None:
        client = await self._get_client()
        await client.table(NOTEBOOKS_TABLE).update(values).eq("id", notebook_id).execute()

    async def _get_client(self) -> AsyncClient:
        if self._client is None:
            self._client = await acreate_client(
                self.settings.supabase_url,
                self.settings.supabase_service_role_key,
            )
        return self._client
