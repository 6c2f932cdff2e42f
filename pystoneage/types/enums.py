import logging
from enum import Enum, IntEnum

class LogLevel(IntEnum):
    NONE = 0; DEBUG = 1; INFO = 2; WARNING = 3; ERROR = 4

    def to_logging_level(self) -> int:
        """Maps the library level onto the stdlib ``logging`` level."""
        return {
            LogLevel.NONE: logging.CRITICAL + 10,
            LogLevel.DEBUG: logging.DEBUG,
            LogLevel.INFO: logging.INFO,
            LogLevel.WARNING: logging.WARNING,
            LogLevel.ERROR: logging.ERROR,
        }[self]

class ByteOrder(Enum):
    """Byte order of multi-byte fields, as a ``struct`` prefix."""
    BIG = ">"
    LITTLE = "<"

class SceneState(Enum):
    UNKNOWN = "unknown"   # never prepared
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"
