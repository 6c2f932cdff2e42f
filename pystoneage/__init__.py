"""pystoneage: scene and texture resources for a StoneAge web client."""

__version__ = "0.1.0"

from .client import GameClient
from .managers import SceneManager, SceneLookup, Settings, TextureManager, ResourceArchive
from .assets import Scene, Texture, decode_texture
from .network import ResourcesClient

__all__ = [
    "__version__",
    "GameClient",
    "SceneManager",
    "SceneLookup",
    "Settings",
    "TextureManager",
    "ResourceArchive",
    "Scene",
    "Texture",
    "decode_texture",
    "ResourcesClient",
]
