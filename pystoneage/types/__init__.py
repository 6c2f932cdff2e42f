# Main __init__.py for the types sub-package

from .enums import LogLevel, ByteOrder, SceneState
from .archive_defs import AdrnBlock, RealBlock, ADRN_RECORD_SIZE, REAL_HEADER_SIZE, REAL_MAGIC

__all__ = [
    "LogLevel", "ByteOrder", "SceneState",
    "AdrnBlock", "RealBlock", "ADRN_RECORD_SIZE", "REAL_HEADER_SIZE", "REAL_MAGIC",
]
