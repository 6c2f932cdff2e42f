"""
Client runtime settings and constants.
"""
import os

from pystoneage.types import ByteOrder, LogLevel

class Settings:
    """
    Manages client settings: where resources are fetched from, where
    generated textures are cached, and how texture records are decoded.
    """

    # --- Class Variables (Constants and Static Defaults) ---
    DEFAULT_RESOURCES_URL: str = "http://localhost:8080/resources"
    """Base URL of the resource service serving scenes and textures."""

    USER_AGENT: str = "PyStoneAge/0.1"
    """HTTP User-Agent header passed by the client."""

    RESOURCE_DIR: str = "pystoneage_data"
    """Default directory for generated files (texture cache)."""

    TEXTURE_SUBDIR: str = "textures"
    """Subdirectory of the output path holding cached ``<id>.bin`` textures."""

    ADRN_FILE: str = "Adrn.bin"
    """Default name of the graphic address index."""

    REAL_FILE: str = "Real.bin"
    """Default name of the graphic data file."""

    LOG_LEVEL: LogLevel = LogLevel.INFO
    """Default logging level for the library."""

    # --- Instance Variables (Configurable per GameClient instance) ---
    def __init__(self, client_ref=None):
        """
        Initializes the Settings for a GameClient instance.

        Args:
            client_ref: A reference to the GameClient instance this Settings object belongs to.
        """
        self.client_ref = client_ref

        self.resources_url: str = self.DEFAULT_RESOURCES_URL
        """Base URL of the resource service."""

        self.user_agent: str = self.USER_AGENT

        self.request_timeout: int = 30 * 1000  # ms
        """Timeout for a single resource request."""

        self.output_path: str = self.RESOURCE_DIR
        """Root directory for generated files."""

        self.resource_path: str = "data"
        """Directory holding the StoneAge graphic archives."""

        self.adrn_path: str = os.path.join(self.resource_path, self.ADRN_FILE)
        self.real_path: str = os.path.join(self.resource_path, self.REAL_FILE)

        self.texture_byte_order: ByteOrder = ByteOrder.BIG
        """Byte order of texture record headers served to the client.

        Cached ``<id>.bin`` files carry no byte order marker and are read back
        with the current value; clear the texture directory after changing it."""

        self.use_texture_disk_cache: bool = True
        """Whether textures built from the archives are written to and read from disk."""

        self.log_level: LogLevel = self.LOG_LEVEL

    @property
    def texture_dir(self) -> str:
        return os.path.join(self.output_path, self.TEXTURE_SUBDIR)

    @property
    def request_timeout_seconds(self) -> float:
        return self.request_timeout / 1000.0
