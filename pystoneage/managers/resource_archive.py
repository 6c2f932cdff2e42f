import logging
import threading
from typing import BinaryIO, Dict

from pystoneage.types import AdrnBlock, RealBlock, ADRN_RECORD_SIZE

logger = logging.getLogger(__name__)

class ResourceArchive:
    """
    Read access to the StoneAge graphic archives.

    The address index is read fully on first use; image blocks are read from
    the data file on demand.
    """

    def __init__(self, adrn_path: str, real_path: str):
        self.adrn_path = adrn_path
        self.real_path = real_path
        self._adrn: Dict[int, AdrnBlock] | None = None
        self._real_file: BinaryIO | None = None
        self._lock = threading.Lock()

    def _load_index(self) -> Dict[int, AdrnBlock]:
        with open(self.adrn_path, "rb") as f:
            data = f.read()
        count, remainder = divmod(len(data), ADRN_RECORD_SIZE)
        if remainder:
            logger.warning(f"{self.adrn_path}: ignoring {remainder} trailing bytes")
        index: Dict[int, AdrnBlock] = {}
        for i in range(count):
            block = AdrnBlock.from_bytes(data, i * ADRN_RECORD_SIZE)
            index[block.index] = block
        logger.info(f"Loaded {len(index)} ADRN entries from {self.adrn_path}")
        return index

    def _index(self) -> Dict[int, AdrnBlock]:
        with self._lock:
            if self._adrn is None:
                self._adrn = self._load_index()
            return self._adrn

    def get_adrn_block(self, texture_id: int) -> AdrnBlock:
        """
        Raises:
            KeyError: If the index has no entry for ``texture_id``.
        """
        try:
            return self._index()[texture_id]
        except KeyError:
            raise KeyError(f"No ADRN entry for texture {texture_id}") from None

    def get_real_block(self, address: int, size: int) -> RealBlock:
        """
        Raises:
            ValueError: If the block is short or does not start with the REAL magic.
        """
        with self._lock:
            if self._real_file is None:
                self._real_file = open(self.real_path, "rb")
            self._real_file.seek(address)
            data = self._real_file.read(size)
        if len(data) < size:
            raise ValueError(f"{self.real_path}: short read at {address}, wanted {size} got {len(data)}")
        return RealBlock.from_bytes(data)

    def __len__(self) -> int:
        return len(self._index())

    def close(self) -> None:
        with self._lock:
            if self._real_file is not None:
                self._real_file.close()
                self._real_file = None

    def __enter__(self) -> 'ResourceArchive':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
