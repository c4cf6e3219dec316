# -*- coding: utf-8 -*-
"""
Scenario Serializer Module

Renders a Scenario back into the canonical document text. Parsing the
output again yields an equivalent scenario, and serializing that one gives
the same text.
"""

from typing import List, Optional

from gmtool_enums import SceneType
from gmtool_logger import get_logger
from models.metadata import format_datetime
from models.scenario import Scenario
from parser.patterns import DialectLabels, ENGLISH_LABELS

logger = get_logger("core.serializer")


class ScenarioSerializer:
    """
    Writes scenarios in the canonical dialect.

    Headings and keys are spelled according to `labels` (English by default).
    """

    def __init__(self, labels: Optional[DialectLabels] = None):
        self.labels = labels or ENGLISH_LABELS

    def serialize(self, scenario: Scenario) -> str:
        lines: List[str] = [f"# {scenario.metadata.title}", ""]
        self._append_metadata(lines, scenario)
        self._append_game_settings(lines, scenario)
        self._append_scenes(lines, scenario)
        logger.debug(f"Serialized {scenario!r} into {len(lines)} lines")
        return "\n".join(lines)

    def _append_metadata(self, lines: List[str], scenario: Scenario):
        labels = self.labels
        metadata = scenario.metadata
        lines.append(f"## {labels.metadata_header}")
        lines.append(f"- {labels.key_title}: {metadata.title}")
        if metadata.author:
            lines.append(f"- {labels.key_author}: {metadata.author}")
        lines.append(f"- {labels.key_created}: {format_datetime(metadata.created_at)}")
        lines.append(f"- {labels.key_modified}: {format_datetime(metadata.last_modified_at)}")
        if metadata.version:
            lines.append(f"- {labels.key_version}: {metadata.version}")
        if metadata.description:
            lines.append(f"- {labels.key_description}: {metadata.description}")
        lines.append("")

    def _append_game_settings(self, lines: List[str], scenario: Scenario):
        labels = self.labels
        players = scenario.game_settings.player_settings
        lines.append(f"## {labels.game_settings_header}")
        lines.append("")

        lines.append(f"### {labels.players_header}")
        for index, name in enumerate(players.player_names):
            # Slots outside the active prefix are written as the empty marker
            if players.is_scenario_player_index(index) and name.strip():
                lines.append(f"{index + 1}. {name}")
            else:
                lines.append(f"{index + 1}. {labels.empty_marker}")
        lines.append("")

        lines.append(f"### {labels.judgement_levels_header}")
        for index, level_name in enumerate(scenario.game_settings.judgement_levels.level_names):
            lines.append(f"{index + 1}. {level_name}")
        lines.append("")

    def _append_scenes(self, lines: List[str], scenario: Scenario):
        labels = self.labels
        level_names = scenario.game_settings.judgement_levels.level_names
        lines.append(f"## {labels.scenes_header}")
        lines.append("")

        for scene in scenario.scenes:
            lines.append(f"### {labels.scene_label(scene.scene_type)}: {scene.name}")
            if scene.memo:
                lines.append(f"{labels.memo}: {scene.memo}")
            lines.append("")

            for item in scene.items:
                lines.append(f"#### {item.name}")
                if item.memo:
                    lines.append(f"{labels.memo}: {item.memo}")

                if scene.scene_type == SceneType.NARRATIVE:
                    if item.content.strip():
                        lines.append(item.content)
                else:
                    for index, text in item.non_empty_texts():
                        if index < len(level_names):
                            lines.append(f"- {level_names[index]}: {text}")
                lines.append("")
