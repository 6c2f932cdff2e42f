import asyncio
import dataclasses
import logging
from collections.abc import Hashable
from typing import Awaitable, Callable, Dict

from pystoneage.assets import Scene
from pystoneage.types import SceneState

logger = logging.getLogger(__name__)

SceneId = Hashable
SceneLoader = Callable[[SceneId], Awaitable[Scene]]

@dataclasses.dataclass
class SceneLookup:
    """Snapshot of a scene's cache state, so callers can tell pending from ready."""
    scene_id: SceneId
    state: SceneState = SceneState.UNKNOWN
    scene: Scene | None = None
    error: str | None = None
    task: asyncio.Task | None = None

    @property
    def ready(self) -> bool:
        return self.state == SceneState.READY

class SceneManager:
    """
    Caches scenes by id and tracks the active one.

    Scenes are filled asynchronously by ``loader`` (typically
    ``ResourcesClient.scene``). Nothing is ever evicted.
    """

    def __init__(self, loader: SceneLoader):
        self._loader = loader
        self._scenes: Dict[SceneId, Scene] = {}
        self._pending: Dict[SceneId, asyncio.Task] = {}
        self._failed: Dict[SceneId, BaseException] = {}
        self.active_id: SceneId | None = None

    def prepare_scene(self, scene_id: SceneId) -> asyncio.Task | None:
        """
        Makes ``scene_id`` the active scene, starting a background load if it
        is neither cached nor already loading. Must be called with a running
        event loop when a load is needed.

        Returns:
            The newly scheduled load task, or None if nothing was scheduled.
        """
        task = None
        if scene_id not in self._scenes and self._pending_task(scene_id) is None:
            self._failed.pop(scene_id, None)
            task = asyncio.get_running_loop().create_task(self._load(scene_id))
            self._pending[scene_id] = task
            task.add_done_callback(lambda t, sid=scene_id: self._forget_pending(sid, t))
            logger.info(f"Loading scene {scene_id}")
        self.active_id = scene_id
        return task

    def get_scene(self) -> Scene | None:
        """Returns the active scene, or None if it has not finished loading."""
        if self.active_id is None:
            return None
        return self._scenes.get(self.active_id)

    def lookup(self, scene_id: SceneId | None = None) -> SceneLookup:
        """Reports the cache state of ``scene_id`` (default: the active scene)."""
        if scene_id is None:
            scene_id = self.active_id
        if scene_id in self._scenes:
            return SceneLookup(scene_id, SceneState.READY, scene=self._scenes[scene_id])
        task = self._pending_task(scene_id)
        if task is not None:
            return SceneLookup(scene_id, SceneState.PENDING, task=task)
        if scene_id in self._failed:
            return SceneLookup(scene_id, SceneState.FAILED, error=str(self._failed[scene_id]) or type(self._failed[scene_id]).__name__)
        return SceneLookup(scene_id)

    async def wait_for_scene(self, scene_id: SceneId | None = None, timeout: float | None = None) -> Scene:
        """
        Waits for a prepared scene to finish loading.

        Raises:
            LookupError: If the scene was never prepared.
            asyncio.TimeoutError: If it does not load within ``timeout`` seconds.
            Exception: The loader's own error if the load failed.
        """
        if scene_id is None:
            scene_id = self.active_id
        if scene_id in self._scenes:
            return self._scenes[scene_id]
        task = self._pending_task(scene_id)
        if task is not None:
            # shield so a timeout here does not cancel the shared load
            await asyncio.wait_for(asyncio.shield(task), timeout)
            if scene_id in self._scenes:
                return self._scenes[scene_id]
        if scene_id in self._failed:
            raise self._failed[scene_id]
        raise LookupError(f"Scene {scene_id} has not been prepared")

    def is_loaded(self, scene_id: SceneId) -> bool:
        return scene_id in self._scenes

    async def _load(self, scene_id: SceneId) -> None:
        try:
            scene = await self._loader(scene_id)
        except asyncio.CancelledError:
            logger.debug(f"Load of scene {scene_id} cancelled")
            raise
        except Exception as e:
            self._failed[scene_id] = e
            logger.error(f"Failed to load scene {scene_id}: {e!r}")
        else:
            self._scenes[scene_id] = scene
            logger.info(f"Scene {scene_id} loaded")

    def _pending_task(self, scene_id: SceneId) -> asyncio.Task | None:
        task = self._pending.get(scene_id)
        if task is None or task.done():
            return None
        return task

    def _forget_pending(self, scene_id: SceneId, task: asyncio.Task) -> None:
        # runs even when the task is cancelled before its first step
        if self._pending.get(scene_id) is task:
            del self._pending[scene_id]

    async def close(self) -> None:
        """Cancels all loads still in flight."""
        tasks = list(self._pending.values())
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._pending.clear()
