# -*- coding: utf-8 -*-
"""
GMTool Scenario Model

Root aggregate of a scenario document:
- Metadata and game settings
- Ordered scene list (exclusively owned)
- Dirty flag and source path
- Observer pattern for change notifications
"""

from typing import Callable, Dict, List, Optional

from gmtool_enums import SceneType
from gmtool_logger import get_logger
from models.metadata import ScenarioMetadata
from models.scenes import AnyScene
from models.settings import GameSettings

logger = get_logger("models.scenario")


class Scenario:
    """
    A complete scenario: metadata, game settings and scenes.

    Every mutating operation goes through mark_modified(), which sets the
    dirty flag and bumps the metadata's last-modified timestamp.
    """

    def __init__(
        self,
        metadata: Optional[ScenarioMetadata] = None,
        game_settings: Optional[GameSettings] = None,
        scenes: Optional[List[AnyScene]] = None,
        file_path: Optional[str] = None,
    ):
        self.metadata = metadata or ScenarioMetadata()
        self.game_settings = game_settings or GameSettings()
        self._scenes: List[AnyScene] = list(scenes or [])
        self._file_path = file_path
        self._has_unsaved_changes = False

        # Observer pattern
        self._observers: Dict[str, List[Callable]] = {
            'modified': [],
            'saved': [],
        }

    # =============================================================================
    # PROPERTIES
    # =============================================================================

    @property
    def scenes(self) -> List[AnyScene]:
        return list(self._scenes)

    @property
    def file_path(self) -> Optional[str]:
        return self._file_path

    @property
    def has_unsaved_changes(self) -> bool:
        return self._has_unsaved_changes

    @property
    def title(self) -> str:
        return self.metadata.title

    # =============================================================================
    # OBSERVER PATTERN
    # =============================================================================

    def add_observer(self, event: str, callback: Callable):
        """Subscribe to 'modified' or 'saved'."""
        if event in self._observers:
            self._observers[event].append(callback)

    def remove_observer(self, event: str, callback: Callable):
        if event in self._observers and callback in self._observers[event]:
            self._observers[event].remove(callback)

    def _notify(self, event: str, *args):
        """Notify all subscribers of an event."""
        for callback in self._observers.get(event, []):
            try:
                callback(*args)
            except Exception as e:
                logger.error(f"Error in scenario observer callback for '{event}': {e}")

    # =============================================================================
    # STATE
    # =============================================================================

    def mark_modified(self):
        self._has_unsaved_changes = True
        self.metadata.update_last_modified()
        self._notify('modified', self)

    def mark_saved(self, file_path: Optional[str] = None):
        if file_path is not None:
            self._file_path = str(file_path)
        self._has_unsaved_changes = False
        self._notify('saved', self)

    def set_title(self, title: Optional[str]):
        self.metadata.set_title(title)
        self.mark_modified()

    # =============================================================================
    # SCENE OPERATIONS
    # =============================================================================

    def add_scene(self, scene: AnyScene):
        self._scenes.append(scene)
        self.mark_modified()

    def remove_scene(self, scene: AnyScene) -> bool:
        if scene not in self._scenes:
            return False
        self._scenes.remove(scene)
        self.mark_modified()
        return True

    def move_scene(self, scene: AnyScene, new_index: int) -> bool:
        """Move a scene to a new position, clamped to the list bounds."""
        if scene not in self._scenes:
            return False
        self._scenes.remove(scene)
        new_index = max(0, min(len(self._scenes), new_index))
        self._scenes.insert(new_index, scene)
        self.mark_modified()
        return True

    def get_scenes_by_type(self, scene_type: SceneType) -> List[AnyScene]:
        return [scene for scene in self._scenes if scene.scene_type == scene_type]

    def get_scene_by_name(self, name: str) -> Optional[AnyScene]:
        for scene in self._scenes:
            if scene.name == name:
                return scene
        return None

    def __repr__(self) -> str:
        return (f"Scenario(title={self.metadata.title!r}, scenes={len(self._scenes)}, "
                f"unsaved={self._has_unsaved_changes})")
