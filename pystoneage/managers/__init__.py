# This file marks pystoneage.managers as a Python package.

from .settings import Settings
from .scene_manager import SceneManager, SceneLookup
from .resource_archive import ResourceArchive
from .texture_manager import TextureManager, create_texture

__all__ = [
    "Settings",
    "SceneManager",
    "SceneLookup",
    "ResourceArchive",
    "TextureManager",
    "create_texture",
]
