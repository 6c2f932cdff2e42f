import dataclasses

@dataclasses.dataclass
class Asset:
    """Base class for all resource types."""
    asset_id: int | str = 0
    raw_data: bytes = b""
    loaded_successfully: bool = False

    def from_bytes(self, data: bytes) -> bool:
        """
        Populates asset fields from raw byte data.
        Base implementation stores raw data and marks as loaded.
        Subclasses should override this to perform actual parsing.
        """
        self.raw_data = data
        self.loaded_successfully = True
        return self.loaded_successfully

    def __str__(self):
        return f"{self.__class__.__name__}(ID={self.asset_id}, Loaded={self.loaded_successfully}, DataSize={len(self.raw_data)})"

    def __repr__(self):
        return f"<{self.__class__.__name__} asset_id={self.asset_id!r} loaded_successfully={self.loaded_successfully}>"
