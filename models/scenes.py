# -*- coding: utf-8 -*-
"""
GMTool Scene Models

Closed set of scene variants, dispatched on `scene_type`:
- ExplorationScene: named locations, one text per judgement level
- SecretDistributionScene: one target per active player, keyed by name
- NarrativeScene: named prose items
"""

import uuid
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union

from gmtool_enums import SceneType
from gmtool_exceptions import InvalidNameError
from gmtool_logger import get_logger
from models.settings import GameSettings
from models.targets import JudgementTarget, NarrativeTarget

logger = get_logger("models.scenes")


class Scene(ABC):
    """Fields shared by every scene variant."""

    scene_type: SceneType = None

    def __init__(self, name: str = "", memo: str = ""):
        self.id = uuid.uuid4().hex
        self.name = name
        self.memo = memo

    @property
    @abstractmethod
    def items(self) -> list:
        """Ordered items of the scene."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, items={len(self.items)})"


class ExplorationScene(Scene):
    """Scene whose items are locations, each with one text per judgement level."""

    scene_type = SceneType.EXPLORATION

    def __init__(self, name: str = "", memo: str = ""):
        super().__init__(name, memo)
        self._locations: List[JudgementTarget] = []

    @property
    def locations(self) -> List[JudgementTarget]:
        return list(self._locations)

    @property
    def items(self) -> List[JudgementTarget]:
        return self.locations

    def add_location(self, name: str, game_settings: GameSettings) -> JudgementTarget:
        """
        Add a location, or return the existing one with the same name.

        Raises:
            InvalidNameError: If the name is blank
        """
        if not name or not name.strip():
            raise InvalidNameError("Location name must not be blank", field="location")
        name = name.strip()
        existing = self.get_location(name)
        if existing is not None:
            return existing
        location = JudgementTarget(name, game_settings.get_judgement_level_count())
        self._locations.append(location)
        return location

    def get_location(self, name: str) -> Optional[JudgementTarget]:
        for location in self._locations:
            if location.name == name:
                return location
        return None

    def rename_location(self, old_name: str, new_name: str) -> bool:
        location = self.get_location(old_name)
        if location is None or not new_name or not new_name.strip():
            return False
        new_name = new_name.strip()
        if new_name != old_name and self.get_location(new_name) is not None:
            return False
        location.name = new_name
        return True

    def remove_location(self, name: str) -> bool:
        location = self.get_location(name)
        if location is None:
            return False
        self._locations.remove(location)
        return True


class SecretDistributionScene(Scene):
    """Scene handing each active player a private target, keyed by player name."""

    scene_type = SceneType.SECRET_DISTRIBUTION

    def __init__(self, name: str = "", memo: str = ""):
        super().__init__(name, memo)
        self._player_targets: Dict[str, JudgementTarget] = {}

    @property
    def player_targets(self) -> Dict[str, JudgementTarget]:
        return dict(self._player_targets)

    @property
    def items(self) -> List[JudgementTarget]:
        return list(self._player_targets.values())

    def initialize_from_game_settings(self, game_settings: GameSettings):
        """Create one empty target per active player."""
        level_count = game_settings.get_judgement_level_count()
        self._player_targets = {
            name: JudgementTarget(name, level_count)
            for name in game_settings.get_scenario_player_names()
        }

    def refresh_from_game_settings(self, game_settings: GameSettings):
        """Rebuild for the current roster, keeping texts of players still present."""
        level_count = game_settings.get_judgement_level_count()
        refreshed: Dict[str, JudgementTarget] = {}
        for name in game_settings.get_scenario_player_names():
            target = self._player_targets.get(name)
            if target is None:
                target = JudgementTarget(name, level_count)
            else:
                target.resize(level_count)
            refreshed[name] = target
        self._player_targets = refreshed

    def add_player_target(self, player_name: str, game_settings: GameSettings) -> JudgementTarget:
        """
        Add a target for a player, or return the existing one.

        Raises:
            InvalidNameError: If the player name is blank
        """
        if not player_name or not player_name.strip():
            raise InvalidNameError("Player name must not be blank", field="player")
        player_name = player_name.strip()
        existing = self._player_targets.get(player_name)
        if existing is not None:
            return existing
        target = JudgementTarget(player_name, game_settings.get_judgement_level_count())
        self._player_targets[player_name] = target
        return target

    def get_player_target(self, player_name: str) -> Optional[JudgementTarget]:
        return self._player_targets.get(player_name)

    def get_player_name_by_target(self, target: JudgementTarget) -> Optional[str]:
        for name, candidate in self._player_targets.items():
            if candidate is target:
                return name
        return None

    def get_available_player_names(self) -> List[str]:
        return list(self._player_targets.keys())

    def rename_player(self, old_name: str, new_name: str) -> bool:
        """Re-key a target in place, keeping its texts and position."""
        if old_name not in self._player_targets or not new_name or not new_name.strip():
            return False
        new_name = new_name.strip()
        if new_name == old_name:
            return True
        if new_name in self._player_targets:
            return False
        rekeyed: Dict[str, JudgementTarget] = {}
        for name, target in self._player_targets.items():
            if name == old_name:
                target.name = new_name
                rekeyed[new_name] = target
            else:
                rekeyed[name] = target
        self._player_targets = rekeyed
        return True

    def remove_player_target(self, player_name: str) -> bool:
        return self._player_targets.pop(player_name, None) is not None


class NarrativeScene(Scene):
    """Scene made of named prose items."""

    scene_type = SceneType.NARRATIVE

    def __init__(self, name: str = "", memo: str = ""):
        super().__init__(name, memo)
        self._items: List[NarrativeTarget] = []

    @property
    def items(self) -> List[NarrativeTarget]:
        return list(self._items)

    def add_item(self, name: str, content: str = "") -> NarrativeTarget:
        """
        Append a new item.

        Raises:
            InvalidNameError: If the name is blank
        """
        if not name or not name.strip():
            raise InvalidNameError("Item name must not be blank", field="item")
        item = NarrativeTarget(name.strip(), content)
        self._items.append(item)
        return item

    def get_item(self, name: str) -> Optional[NarrativeTarget]:
        for item in self._items:
            if item.name == name:
                return item
        return None

    def add_or_update_item(self, name: str, content: str) -> NarrativeTarget:
        item = self.get_item((name or "").strip())
        if item is None:
            return self.add_item(name, content)
        item.set_content(content)
        return item

    def rename_item(self, old_name: str, new_name: str) -> bool:
        item = self.get_item(old_name)
        if item is None or not new_name or not new_name.strip():
            return False
        new_name = new_name.strip()
        if new_name != old_name and self.get_item(new_name) is not None:
            return False
        item.name = new_name
        return True

    def update_content(self, name: str, content: str) -> bool:
        item = self.get_item(name)
        if item is None:
            return False
        item.set_content(content)
        return True

    def remove_item(self, name: str) -> bool:
        item = self.get_item(name)
        if item is None:
            return False
        self._items.remove(item)
        return True

    def remove_empty_items(self) -> int:
        """Drop items without content. Returns the number removed."""
        before = len(self._items)
        self._items = [item for item in self._items if item.content.strip()]
        return before - len(self._items)

    def clear_items(self):
        self._items.clear()


AnyScene = Union[ExplorationScene, SecretDistributionScene, NarrativeScene]

_SCENE_CLASSES = {
    SceneType.EXPLORATION: ExplorationScene,
    SceneType.SECRET_DISTRIBUTION: SecretDistributionScene,
    SceneType.NARRATIVE: NarrativeScene,
}


def create_scene(scene_type: SceneType, name: str = "") -> AnyScene:
    """Create an empty scene of the given variant."""
    try:
        scene_class = _SCENE_CLASSES[SceneType(scene_type)]
    except (KeyError, ValueError):
        raise ValueError(f"Unknown scene type: {scene_type}")
    return scene_class(name)
