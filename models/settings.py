# -*- coding: utf-8 -*-
"""
GMTool Game Settings Model

Player roster and judgement level list shared by every scene of a scenario.
"""

import copy
from typing import List, Optional

import gmtool_config as config
from gmtool_logger import get_logger

logger = get_logger("models.settings")


def placeholder_player_name(index: int) -> str:
    """Positional placeholder for a roster slot (0-based index)."""
    return config.PLAYER_PLACEHOLDER_FORMAT.format(index=index + 1)


def is_valid_level_name(name: str) -> bool:
    """A level name must be non-blank and free of the `:` or `：` that ends it in `- <Level>: <text>`."""
    text = (name or "").strip()
    return bool(text) and ":" not in text and "：" not in text


class PlayerSettings:
    """
    Fixed-capacity roster of player name slots.

    The first `scenario_player_count` slots are the ones in play for the
    scenario; blank slots inside that prefix are skipped by the active name
    queries.
    """

    MAX_SUPPORTED_PLAYERS = config.MAX_SUPPORTED_PLAYERS
    DEFAULT_SCENARIO_PLAYER_COUNT = config.DEFAULT_SCENARIO_PLAYER_COUNT

    def __init__(self):
        self._player_names: List[str] = [
            placeholder_player_name(i) for i in range(self.MAX_SUPPORTED_PLAYERS)
        ]
        self._scenario_player_count = self.DEFAULT_SCENARIO_PLAYER_COUNT

    @property
    def player_names(self) -> List[str]:
        """All roster slots (copy)."""
        return list(self._player_names)

    @property
    def scenario_player_count(self) -> int:
        return self._scenario_player_count

    def set_scenario_player_count(self, count: int):
        """Set the active player count, clamped into [1, MAX_SUPPORTED_PLAYERS]."""
        clamped = max(1, min(self.MAX_SUPPORTED_PLAYERS, int(count)))
        if clamped != count:
            logger.debug(f"Player count {count} clamped to {clamped}")
        self._scenario_player_count = clamped

    def set_player_name(self, index: int, name: Optional[str]) -> bool:
        """
        Set the name of a roster slot.

        Args:
            index: 0-based slot index
            name: New name; None is stored as blank

        Returns:
            True if the index was valid
        """
        if not self.is_valid_player_index(index):
            return False
        self._player_names[index] = (name or "").strip()
        return True

    def get_player_name(self, index: int) -> str:
        if not self.is_valid_player_index(index):
            return ""
        return self._player_names[index]

    def is_valid_player_index(self, index: int) -> bool:
        return 0 <= index < self.MAX_SUPPORTED_PLAYERS

    def is_scenario_player_index(self, index: int) -> bool:
        return 0 <= index < self._scenario_player_count

    def get_scenario_player_names(self) -> List[str]:
        """Non-blank names among the active slots."""
        return [
            name for name in self._player_names[:self._scenario_player_count]
            if name.strip()
        ]

    def get_all_active_player_names(self) -> List[str]:
        """Non-blank names across the whole roster."""
        return [name for name in self._player_names if name.strip()]

    def reset(self):
        """Restore placeholders and the default count."""
        self.__init__()

    def __repr__(self) -> str:
        return f"PlayerSettings(count={self._scenario_player_count}, names={self._player_names})"


class JudgementLevelSettings:
    """
    Ordered list of judgement outcome names.

    Item texts are keyed by the position of a level in this list.
    """

    def __init__(self, level_names: Optional[List[str]] = None):
        self._level_names: List[str] = list(config.DEFAULT_JUDGEMENT_LEVELS)
        self.default_level_index = config.DEFAULT_JUDGEMENT_INDEX
        if level_names:
            self.set_level_names(level_names)

    @property
    def level_names(self) -> List[str]:
        return list(self._level_names)

    @property
    def level_count(self) -> int:
        return len(self._level_names)

    def set_level_names(self, names: List[str]):
        """
        Replace the level list.

        Blank names and names containing a colon are dropped; an empty
        result keeps the current levels.
        """
        cleaned = []
        for name in names:
            if is_valid_level_name(name):
                cleaned.append(name.strip())
            elif name and name.strip():
                logger.warning(f"Judgement level name with a colon dropped: '{name}'")
        if not cleaned:
            logger.debug("Empty judgement level list ignored")
            return
        self._level_names = cleaned
        if not self.is_valid_index(self.default_level_index):
            self.default_level_index = 0

    def index_of(self, name: str) -> int:
        """Case-insensitive lookup of a level name; -1 when unknown."""
        wanted = (name or "").strip().casefold()
        for i, level in enumerate(self._level_names):
            if level.casefold() == wanted:
                return i
        return -1

    def is_valid_index(self, index: int) -> bool:
        return 0 <= index < len(self._level_names)

    def get_level_name(self, index: int) -> str:
        if not self.is_valid_index(index):
            return ""
        return self._level_names[index]

    def __repr__(self) -> str:
        return f"JudgementLevelSettings({self._level_names})"


class GameSettings:
    """Player roster plus judgement levels, with derived queries."""

    def __init__(self):
        self.player_settings = PlayerSettings()
        self.judgement_levels = JudgementLevelSettings()

    def get_scenario_player_names(self) -> List[str]:
        return self.player_settings.get_scenario_player_names()

    def get_scenario_player_count(self) -> int:
        return self.player_settings.scenario_player_count

    def set_scenario_player_count(self, count: int):
        self.player_settings.set_scenario_player_count(count)

    def get_max_supported_players(self) -> int:
        return PlayerSettings.MAX_SUPPORTED_PLAYERS

    def get_judgement_level_count(self) -> int:
        return self.judgement_levels.level_count

    def get_default_judgement_index(self) -> int:
        return self.judgement_levels.default_level_index

    def is_valid_player_index(self, index: int) -> bool:
        return self.player_settings.is_valid_player_index(index)

    def is_active_player(self, name: str) -> bool:
        return name in self.get_scenario_player_names()

    def copy(self) -> 'GameSettings':
        """Deep copy, so parsed settings never alias a caller's instance."""
        return copy.deepcopy(self)

    def __repr__(self) -> str:
        return f"GameSettings({self.player_settings!r}, {self.judgement_levels!r})"
