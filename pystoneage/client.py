import logging

from .managers import Settings, SceneManager, ResourceArchive, TextureManager
from .network import ResourcesClient

logger = logging.getLogger(__name__)

class GameClient:
    def __init__(self, settings: Settings | None = None):
        self.settings = settings or Settings(self)
        if self.settings.client_ref is None:
            self.settings.client_ref = self
        logging.getLogger("pystoneage").setLevel(self.settings.log_level.to_logging_level())
        logger.info("GameClient initializing...")

        self.resources = ResourcesClient(self.settings)
        self.scenes = SceneManager(self.resources.scene)

        # The archives are only opened when a texture is first requested
        self._archive: ResourceArchive | None = None
        self._textures: TextureManager | None = None

        logger.info(f"GameClient initialized against {self.settings.resources_url}")

    @property
    def textures(self) -> TextureManager:
        if self._textures is None:
            self._archive = ResourceArchive(self.settings.adrn_path, self.settings.real_path)
            self._textures = TextureManager(self.settings, self._archive)
        return self._textures

    def __str__(self) -> str:
        return f"GameClient(Resources: {self.settings.resources_url}, Active scene: {self.scenes.active_id})"

    async def close(self):
        logger.info("GameClient close requested.")
        await self.scenes.close()
        await self.resources.aclose()
        if self._archive is not None:
            self._archive.close()
        logger.info("GameClient closed.")
