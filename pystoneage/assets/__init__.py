# __init__.py for pystoneage.assets
# This file marks the directory as a Python package.

from .asset_base import Asset
from .asset_scene import Scene
from .asset_texture import Texture, decode_texture, TEXTURE_HEADER_SIZE

__all__ = [
    "Asset",
    "Scene",
    "Texture",
    "decode_texture",
    "TEXTURE_HEADER_SIZE",
]
