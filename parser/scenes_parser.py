# -*- coding: utf-8 -*-
"""
Scenes Section Parser

Reads the `## Scenes` block. Each `### <label>: <name>` header opens a scene
of the variant named by the label; `#### <name>` headers open items inside
it. Exploration and secret-distribution items hold `- <Level>: <text>`
lines, narrative items hold free text.
"""

from typing import List, Optional, Sequence, Set

from gmtool_enums import SceneType
from gmtool_logger import get_logger
from models.results import SectionParseResult
from models.scenes import AnyScene, create_scene
from parser.base import BaseSectionParser, ParseContext

logger = get_logger("parser.scenes")


class _SceneCursor:
    """Scene and item currently receiving lines."""

    def __init__(self):
        self.scene: Optional[AnyScene] = None
        self.item = None
        self.item_names: Set[str] = set()
        self.narrative_lines: List[str] = []

    def open_scene(self, scene: Optional[AnyScene]):
        self.close_item()
        self.scene = scene
        self.item_names = set()

    def open_item(self, item):
        self.close_item()
        self.item = item

    def close_item(self):
        """Store accumulated narrative text on the open item."""
        if self.item is not None and self.scene is not None \
                and self.scene.scene_type == SceneType.NARRATIVE:
            self.item.set_content("\n".join(_trim_blank_edges(self.narrative_lines)))
        self.item = None
        self.narrative_lines = []


class ScenesParser(BaseSectionParser):
    """Parser for the scenes section (heading depth 2, scenes at 3, items at 4)."""

    section_name = "Scenes"

    def _header_patterns(self) -> Sequence[str]:
        return self.config.sections.scenes_headers

    def _parse_section(self, lines: List[str], start_index: int,
                       context: ParseContext) -> SectionParseResult:
        end = self._section_end(lines, start_index, 2)
        scenes: List[AnyScene] = []
        warnings: List[str] = []
        cursor = _SceneCursor()

        for index in range(start_index + 1, end):
            raw = lines[index]
            line = raw.strip()
            depth = self.classifier.heading_depth(line)

            if depth == 3:
                scene = self._open_scene(line, context, warnings)
                cursor.open_scene(scene)
                if scene is not None:
                    scenes.append(scene)
            elif depth == 4:
                cursor.close_item()
                cursor.open_item(self._open_item(line, cursor, context, warnings))
            elif depth:
                warnings.append(context.message("parse_unprocessed_line", line=line))
            else:
                self._consume_line(raw, cursor, context, warnings)

        cursor.close_item()
        logger.debug(f"Scenes section: lines {start_index + 1}-{end}, {len(scenes)} scene(s)")
        return SectionParseResult.ok(scenes, end, warnings)

    # =========================================================================
    # HEADERS
    # =========================================================================

    def _open_scene(self, line: str, context: ParseContext,
                    warnings: List[str]) -> Optional[AnyScene]:
        header = self.classifier.scene_header(line)
        if header is None:
            if self.classifier.looks_like_scene_header(line):
                warnings.append(context.message("parse_unknown_scene_type", line=line))
            else:
                warnings.append(context.message("parse_unprocessed_line", line=line))
            return None

        scene_type, name = header
        scene = create_scene(scene_type, name)
        if scene_type == SceneType.SECRET_DISTRIBUTION:
            scene.initialize_from_game_settings(context.game_settings)
        return scene

    def _open_item(self, line: str, cursor: _SceneCursor, context: ParseContext,
                   warnings: List[str]):
        name = self.classifier.item_header(line)
        scene = cursor.scene
        if scene is None or name is None:
            warnings.append(context.message("parse_unprocessed_line", line=line))
            return None

        if name in cursor.item_names:
            warnings.append(context.message("parse_duplicate_item", name=name, scene=scene.name))
        cursor.item_names.add(name)

        game_settings = context.game_settings

        if scene.scene_type == SceneType.EXPLORATION:
            return scene.add_location(name, game_settings)
        if scene.scene_type == SceneType.SECRET_DISTRIBUTION:
            return scene.add_player_target(name, game_settings)
        return scene.add_or_update_item(name, "")

    # =========================================================================
    # BODY LINES
    # =========================================================================

    def _consume_line(self, raw: str, cursor: _SceneCursor, context: ParseContext,
                      warnings: List[str]):
        line = raw.strip()
        scene, item = cursor.scene, cursor.item
        is_narrative_item = (item is not None and scene.scene_type == SceneType.NARRATIVE)

        if not line:
            if is_narrative_item:
                cursor.narrative_lines.append("")
            return

        memo = self.classifier.memo(line)
        if memo is not None and scene is not None:
            if item is not None:
                item.memo = memo
            else:
                scene.memo = memo
            return

        if item is None:
            warnings.append(context.message("parse_unprocessed_line", line=line))
            return

        if is_narrative_item:
            cursor.narrative_lines.append(raw.rstrip())
            return

        result = self.classifier.judgement_result(line)
        if result is not None:
            level_name, text = result
            levels = context.game_settings.judgement_levels
            level_index = levels.index_of(level_name)
            if level_index >= 0:
                item.set_text(level_index, text)
                return
            logger.debug(f"Judgement level '{level_name}' not in {levels.level_names}")
        warnings.append(context.message("parse_unprocessed_line", line=line))


def _trim_blank_edges(lines: List[str]) -> List[str]:
    start, end = 0, len(lines)
    while start < end and not lines[start].strip():
        start += 1
    while end > start and not lines[end - 1].strip():
        end -= 1
    return lines[start:end]
