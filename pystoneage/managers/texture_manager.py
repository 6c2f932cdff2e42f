import logging
import os
import threading
from typing import TYPE_CHECKING, Dict

from pystoneage.assets import Texture, decode_texture
from pystoneage.types import AdrnBlock, RealBlock
from pystoneage.utils import decode_run_length, flip_vertical

if TYPE_CHECKING:
    from pystoneage.managers.resource_archive import ResourceArchive
    from pystoneage.managers.settings import Settings

logger = logging.getLogger(__name__)

class TextureManager:
    """
    Builds textures from the graphic archives and caches them in memory and
    as ``<id>.bin`` files under the settings' texture directory.
    """

    def __init__(self, settings: 'Settings', archive: 'ResourceArchive'):
        self.settings = settings
        self.archive = archive
        self.texture_dir = settings.texture_dir
        self.byte_order = settings.texture_byte_order
        self._textures: Dict[int, Texture] = {}
        self._lock = threading.Lock()

    def _output_texture_path(self, texture_id: int) -> str:
        return os.path.join(self.texture_dir, f"{texture_id}.bin")

    def get_texture(self, texture_id: int) -> Texture:
        texture = self._textures.get(texture_id)
        if texture is not None:
            return texture
        with self._lock:
            # another thread may have built it while we waited
            texture = self._textures.get(texture_id)
            if texture is not None:
                return texture

            path = self._output_texture_path(texture_id)
            if self.settings.use_texture_disk_cache and os.path.exists(path):
                texture = self._read_texture(texture_id, path)
            else:
                adrn = self.archive.get_adrn_block(texture_id)
                real = self.archive.get_real_block(adrn.address, adrn.size)
                texture = create_texture(adrn, real)
                texture.asset_id = texture_id
                texture.byte_order = self.byte_order
                if self.settings.use_texture_disk_cache:
                    self._write_texture(texture, path)
            self._textures[texture_id] = texture
        return texture

    def get_texture_bytes(self, texture_id: int) -> bytes:
        """The encoded record for ``texture_id``, as served to the browser client."""
        return self.get_texture(texture_id).to_bytes(self.byte_order)

    def _read_texture(self, texture_id: int, path: str) -> Texture:
        try:
            with open(path, "rb") as f:
                data = f.read()
        except OSError as e:
            raise RuntimeError(f"Could not read {path}") from e
        logger.debug(f"Texture {texture_id} read from {path}")
        return decode_texture(data, self.byte_order, asset_id=texture_id)

    def _write_texture(self, texture: Texture, path: str) -> None:
        data = texture.to_bytes(self.byte_order)
        try:
            os.makedirs(self.texture_dir, exist_ok=True)
            with open(path, "wb") as f:
                f.write(data)
        except OSError as e:
            raise RuntimeError(f"Could not write {path}") from e
        logger.debug(f"Texture {texture.asset_id} written to {path}")

    def clear(self) -> None:
        """Drops the in-memory cache; files on disk are kept."""
        with self._lock:
            self._textures.clear()

def create_texture(adrn: AdrnBlock, real: RealBlock) -> Texture:
    """
    Builds a bottom-up texture from an archive entry. Compressed blocks are
    run-length decoded; the rows are then flipped.

    Raises:
        ValueError: If the entry does not fit a texture record or the block
            holds fewer pixels than the entry declares.
    """
    if not (-0x8000 <= adrn.x_offset <= 0x7FFF and -0x8000 <= adrn.y_offset <= 0x7FFF):
        raise ValueError(f"Texture {adrn.index}: offset ({adrn.x_offset},{adrn.y_offset}) does not fit int16")
    if adrn.width > 0xFFFF or adrn.height > 0xFFFF:
        raise ValueError(f"Texture {adrn.index}: size {adrn.width}x{adrn.height} does not fit uint16")
    size = adrn.width * adrn.height
    if real.is_compressed:
        buf = bytearray(size)
        written = decode_run_length(real.data, buf)
        if written < size:
            logger.warning(f"Texture {adrn.index}: run-length data filled {written} of {size} bytes")
    else:
        if len(real.data) < size:
            raise ValueError(f"Texture {adrn.index}: block has {len(real.data)} bytes, expected {size}")
        buf = bytearray(real.data[:size])
    flip_vertical(buf, adrn.width, adrn.height)
    return Texture(asset_id=adrn.index, loaded_successfully=True,
                   x=adrn.x_offset, y=adrn.y_offset, width=adrn.width, height=adrn.height,
                   bitmap=bytes(buf))
