# -*- coding: utf-8 -*-
"""
Game Settings Section Parser

Reads the `## Game Settings` block with its two sub-sections:
- Players: numbered roster entries 1..6, empty markers leave a slot unset
- Judgement Levels: numbered level names in display order
"""

from typing import Dict, List, Optional, Sequence

from gmtool_logger import get_logger
from models.results import SectionParseResult
from models.settings import GameSettings, PlayerSettings, is_valid_level_name, placeholder_player_name
from parser.base import BaseSectionParser, ParseContext

logger = get_logger("parser.game_settings")

_PLAYERS = "players"
_LEVELS = "levels"


class GameSettingsParser(BaseSectionParser):
    """Parser for the game settings section (heading depth 2, sub-sections at depth 3)."""

    section_name = "GameSettings"

    def _header_patterns(self) -> Sequence[str]:
        return self.config.sections.game_settings_headers

    def _parse_section(self, lines: List[str], start_index: int,
                       context: ParseContext) -> SectionParseResult:
        end = self._section_end(lines, start_index, 2)
        warnings: List[str] = []
        if context.scenes_parsed:
            warnings.append(context.message("parse_settings_after_scenes"))

        player_entries: Dict[int, Optional[str]] = {}
        level_names: List[str] = []
        sub_section: Optional[str] = None

        for index in range(start_index + 1, end):
            line = lines[index].strip()
            if not line:
                continue

            depth = self.classifier.heading_depth(line)
            if depth == 3:
                sub_section = self._sub_section_for(line)
                if sub_section is None:
                    warnings.append(context.message("parse_unknown_sub_section", line=line))
                continue
            if depth:
                warnings.append(context.message("parse_unprocessed_line", line=line))
                continue

            entry = self.classifier.numbered_item(line)
            if entry is None or sub_section is None:
                warnings.append(context.message("parse_unprocessed_line", line=line))
                continue

            number, content = entry
            if sub_section == _PLAYERS:
                if not 1 <= number <= PlayerSettings.MAX_SUPPORTED_PLAYERS:
                    warnings.append(context.message("parse_player_out_of_range", line=line,
                                                    max=PlayerSettings.MAX_SUPPORTED_PLAYERS))
                    continue
                player_entries[number] = None if self.classifier.is_empty_marker(content) else content
            elif not is_valid_level_name(content):
                warnings.append(context.message("parse_invalid_level_name", line=line))
            else:
                level_names.append(content)

        game_settings = context.game_settings.copy()
        self._apply_players(game_settings, player_entries)
        if level_names:
            game_settings.judgement_levels.set_level_names(level_names)

        logger.debug(
            f"Game settings section: players={game_settings.get_scenario_player_names()}, "
            f"levels={game_settings.judgement_levels.level_names}"
        )
        return SectionParseResult.ok(game_settings, end, warnings)

    def _sub_section_for(self, line: str) -> Optional[str]:
        if self.matcher.matches(line, self.config.sections.players_sub_headers):
            return _PLAYERS
        if self.matcher.matches(line, self.config.sections.judgement_sub_headers):
            return _LEVELS
        return None

    @staticmethod
    def _apply_players(game_settings: GameSettings, entries: Dict[int, Optional[str]]):
        """
        Fill the roster from numbered entries.

        The active count is the highest slot holding a name. Unfilled slots
        below it stay blank; slots above it get their placeholder back.
        """
        filled = {number: name for number, name in entries.items() if name}
        if not filled:
            return

        count = max(filled)
        players = game_settings.player_settings
        for number in range(1, players.MAX_SUPPORTED_PLAYERS + 1):
            if number <= count:
                players.set_player_name(number - 1, filled.get(number, ""))
            else:
                players.set_player_name(number - 1, placeholder_player_name(number - 1))
        players.set_scenario_player_count(count)
