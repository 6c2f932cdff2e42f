import dataclasses
from typing import Any, Dict, Mapping

from .asset_base import Asset

@dataclasses.dataclass(repr=False)
class Scene(Asset):
    """A game level as served by the resource service."""
    name: str = ""
    width: int = 0
    height: int = 0
    properties: Dict[str, Any] = dataclasses.field(default_factory=dict)

    @property
    def scene_id(self) -> int | str:
        return self.asset_id

    @classmethod
    def from_dict(cls, scene_id: int | str, data: Mapping[str, Any]) -> 'Scene':
        """Builds a scene from the service's JSON payload; unknown keys go to ``properties``."""
        known = {"id", "name", "width", "height"}
        try:
            width = int(data.get("width", 0))
            height = int(data.get("height", 0))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Scene {scene_id}: invalid dimensions: {e}") from e
        return cls(
            asset_id=scene_id,
            name=str(data.get("name", "")),
            width=width,
            height=height,
            properties={k: v for k, v in data.items() if k not in known},
            loaded_successfully=True,
        )

    def __str__(self):
        return f"Scene(ID={self.scene_id}, Name='{self.name}', Size={self.width}x{self.height})"
