"""HTTP access to the game's resource service."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from pystoneage.assets import Scene, Texture, decode_texture

if TYPE_CHECKING:
    from pystoneage.managers.settings import Settings

logger = logging.getLogger(__name__)


class ResourcesClient:
    """Asynchronous client fetching scenes and texture records by id."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.http = httpx.AsyncClient(
            base_url=settings.resources_url,
            timeout=settings.request_timeout_seconds,
            headers={"User-Agent": settings.user_agent},
        )

    async def scene(self, scene_id) -> Scene:
        """Fetches and parses ``/scenes/<id>``. HTTP errors propagate."""
        resp = await self.http.get(f"/scenes/{scene_id}")
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, dict):
            raise ValueError(f"Scene {scene_id}: expected a JSON object, got {type(data).__name__}")
        logger.debug(f"Fetched scene {scene_id}")
        return Scene.from_dict(scene_id, data)

    async def texture(self, texture_id) -> Texture:
        """Fetches and decodes ``/textures/<id>.bin``. HTTP errors propagate."""
        resp = await self.http.get(f"/textures/{texture_id}.bin")
        resp.raise_for_status()
        logger.debug(f"Fetched texture {texture_id} ({len(resp.content)} bytes)")
        return decode_texture(resp.content, self.settings.texture_byte_order, asset_id=texture_id)

    async def aclose(self) -> None:
        await self.http.aclose()


__all__ = ["ResourcesClient"]
