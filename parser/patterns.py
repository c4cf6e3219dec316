# -*- coding: utf-8 -*-
"""
Scenario Document Patterns

Configurable regex pattern lists for the scenario dialect, the matcher that
applies them (first match wins) and the spellings the serializer writes.
"""

import json
import re
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import gmtool_config as config
from gmtool_enums import DocumentLanguage, SceneType
from gmtool_exceptions import FormatConfigurationError
from gmtool_logger import get_logger

logger = get_logger("parser.patterns")


# =========================================================================
# FORMAT CONFIGURATION
# =========================================================================

@dataclass(frozen=True)
class SectionPatterns:
    """Header patterns per section, tried in order."""
    metadata_headers: Tuple[str, ...] = (
        r'^##\s*メタ情報\s*$',
        r'^##\s*Metadata\s*$',
        r'^##\s*ファイル情報\s*$',
    )
    game_settings_headers: Tuple[str, ...] = (
        r'^##\s*ゲーム設定\s*$',
        r'^##\s*Game\s+Settings\s*$',
        r'^##\s*設定\s*$',
    )
    scenes_headers: Tuple[str, ...] = (
        r'^##\s*シーン\s*$',
        r'^##\s*Scenes\s*$',
        r'^##\s*場面\s*$',
    )
    players_sub_headers: Tuple[str, ...] = (
        r'^###\s*プレイヤー\s*$',
        r'^###\s*Players\s*$',
        r'^###\s*参加者\s*$',
    )
    judgement_sub_headers: Tuple[str, ...] = (
        r'^###\s*判定レベル\s*$',
        r'^###\s*Judge?ment\s+Levels?\s*$',
        r'^###\s*ダイス判定\s*$',
    )


@dataclass(frozen=True)
class ItemPatterns:
    """Line-level patterns inside sections."""
    key_value: str = r'^-\s*([^:：]+)[：:]\s*(.+)$'
    numbered_list: str = r'^(\d+)[．.]\s*(.+)$'
    item_definition: str = r'^####\s*(.+)$'
    memo_patterns: Tuple[str, ...] = (
        r'^メモ[：:]\s*(.+)$',
        r'^Memo[：:]\s*(.+)$',
        r'^Note[：:]\s*(.+)$',
    )
    # Ordered (scene type, header pattern) table
    scene_definitions: Tuple[Tuple[SceneType, str], ...] = (
        (SceneType.EXPLORATION, r'^###\s*探索シーン\s*[：:]\s*(.+)$'),
        (SceneType.EXPLORATION, r'^###\s*Exploration(?:\s+Scene)?\s*[：:]\s*(.+)$'),
        (SceneType.SECRET_DISTRIBUTION, r'^###\s*秘匿配布シーン\s*[：:]\s*(.+)$'),
        (SceneType.SECRET_DISTRIBUTION, r'^###\s*Secret\s+Distribution(?:\s+Scene)?\s*[：:]\s*(.+)$'),
        (SceneType.NARRATIVE, r'^###\s*地の文シーン\s*[：:]\s*(.+)$'),
        (SceneType.NARRATIVE, r'^###\s*Narrative(?:\s+Scene)?\s*[：:]\s*(.+)$'),
    )
    # Generic scene header, used to tell an unknown label from a stray line
    scene_header_shape: str = r'^###\s*([^：:#]+?)\s*[：:]\s*(.+)$'
    empty_markers: Tuple[str, ...] = ("(空)", "（空）", "(empty)", "-", "none", "なし")
    # Metadata field -> accepted (normalized) key spellings
    metadata_keys: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
        ("title", ("title", "タイトル", "名前", "name")),
        ("author", ("author", "作成者", "作者", "creator")),
        ("created", ("created", "createdat", "作成日", "作成日時")),
        ("modified", ("modified", "lastmodified", "更新日", "更新日時")),
        ("version", ("version", "ver", "バージョン")),
        ("description", ("description", "説明", "概要", "summary")),
    )


@dataclass(frozen=True)
class JudgementPatterns:
    """Patterns for judgement result lines inside items."""
    judgement_result: str = r'^-\s*([^：:]+)[：:]\s*(.+)$'


@dataclass(frozen=True)
class FormatConfiguration:
    """
    Immutable pattern configuration for the scenario dialect.

    Every concept holds an ordered tuple of patterns; the first one that
    matches wins, so native spellings are listed before English aliases.
    """
    version: str = config.DEFAULT_FORMAT_VERSION
    sections: SectionPatterns = field(default_factory=SectionPatterns)
    items: ItemPatterns = field(default_factory=ItemPatterns)
    judgements: JudgementPatterns = field(default_factory=JudgementPatterns)

    @classmethod
    def default(cls) -> 'FormatConfiguration':
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> 'FormatConfiguration':
        """
        Build a configuration from a JSON-like dictionary.

        Missing keys keep their default patterns. Expected layout:
        {"version": str, "sections": {...}, "items": {...}, "judgements": {...}}
        with the same field names as the dataclasses.

        Raises:
            FormatConfigurationError: If the structure is invalid
        """
        if not isinstance(data, dict):
            raise FormatConfigurationError("Format configuration must be a JSON object")

        defaults = cls()
        try:
            sections = _merge_patterns(SectionPatterns, defaults.sections, data.get("sections", {}))
            items_data = dict(data.get("items", {}))
            if "scene_definitions" in items_data:
                items_data["scene_definitions"] = _scene_table(items_data["scene_definitions"])
            if "metadata_keys" in items_data:
                items_data["metadata_keys"] = _metadata_key_table(items_data["metadata_keys"])
            items = _merge_patterns(ItemPatterns, defaults.items, items_data)
            judgements = _merge_patterns(JudgementPatterns, defaults.judgements, data.get("judgements", {}))
        except (TypeError, ValueError, AttributeError) as e:
            raise FormatConfigurationError(f"Invalid format configuration: {e}")

        return cls(
            version=str(data.get("version", defaults.version)),
            sections=sections,
            items=items,
            judgements=judgements,
        )


def _merge_patterns(dataclass_type, defaults, overrides: dict):
    """Return a copy of `defaults` with the given fields replaced."""
    if not isinstance(overrides, dict):
        raise TypeError(f"'{dataclass_type.__name__}' section must be an object")
    values = {}
    for name, value in overrides.items():
        if not hasattr(defaults, name):
            logger.warning(f"Unknown format configuration key ignored: {name}")
            continue
        if isinstance(value, list):
            value = tuple(value)
        values[name] = value
    return replace(defaults, **values)


def _scene_table(entries) -> Tuple[Tuple[SceneType, str], ...]:
    """Accept [{"type": ..., "pattern": ...}] or [[type, pattern]] lists."""
    table = []
    for entry in entries:
        if isinstance(entry, dict):
            scene_type, pattern = entry["type"], entry["pattern"]
        else:
            scene_type, pattern = entry
        table.append((SceneType(scene_type), str(pattern)))
    return tuple(table)


def _metadata_key_table(entries) -> Tuple[Tuple[str, Tuple[str, ...]], ...]:
    """Accept {"title": [...], ...} mapping."""
    return tuple((str(name), tuple(aliases)) for name, aliases in dict(entries).items())


def load_format_configuration(path) -> FormatConfiguration:
    """
    Load a format configuration from a JSON file.

    Raises:
        FormatConfigurationError: If the file cannot be read or is invalid
    """
    config_path = Path(path)
    try:
        with config_path.open('r', encoding='utf-8') as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise FormatConfigurationError(f"Invalid JSON: {e}", config_path=str(config_path))
    except OSError as e:
        raise FormatConfigurationError(f"Cannot read format configuration: {e}", config_path=str(config_path))

    try:
        format_config = FormatConfiguration.from_dict(data)
    except FormatConfigurationError as e:
        raise FormatConfigurationError(e.message, config_path=str(config_path))
    logger.info(f"Format configuration loaded: {config_path} (version {format_config.version})")
    return format_config


# =========================================================================
# PATTERN MATCHER
# =========================================================================

@dataclass(frozen=True)
class PatternMatch:
    """A successful match: which pattern hit and what it captured."""
    pattern: str
    index: int
    groups: Tuple[Optional[str], ...]

    def group(self, number: int, default: str = "") -> str:
        """1-based captured group, stripped; `default` when absent."""
        if 1 <= number <= len(self.groups) and self.groups[number - 1] is not None:
            return self.groups[number - 1].strip()
        return default


class PatternMatcher:
    """
    First-match-wins matcher over ordered pattern lists.

    Matching is case-insensitive. Patterns that fail to compile are skipped
    and remembered, so a broken configuration entry never raises.
    """

    def __init__(self):
        self._cache: Dict[str, Optional[re.Pattern]] = {}

    def compile(self, pattern: str) -> Optional[re.Pattern]:
        if pattern in self._cache:
            return self._cache[pattern]
        try:
            compiled = re.compile(pattern, re.IGNORECASE)
        except (re.error, TypeError) as e:
            logger.debug(f"Invalid pattern skipped: {pattern!r} ({e})")
            compiled = None
        self._cache[pattern] = compiled
        return compiled

    def match_any(self, line: str, patterns: Sequence[str]) -> Optional[PatternMatch]:
        """
        Try `patterns` in order against `line`.

        Returns:
            The first PatternMatch, or None if nothing matched
        """
        if line is None:
            return None
        for index, pattern in enumerate(patterns):
            compiled = self.compile(pattern)
            if compiled is None:
                continue
            match = compiled.match(line)
            if match:
                return PatternMatch(pattern, index, match.groups())
        return None

    def matches(self, line: str, patterns: Sequence[str]) -> bool:
        return self.match_any(line, patterns) is not None


# =========================================================================
# OUTPUT SPELLINGS
# =========================================================================

@dataclass(frozen=True)
class DialectLabels:
    """Heading and key spellings written by the serializer."""
    metadata_header: str
    game_settings_header: str
    players_header: str
    judgement_levels_header: str
    scenes_header: str
    exploration_scene: str
    secret_distribution_scene: str
    narrative_scene: str
    memo: str
    empty_marker: str
    key_title: str
    key_author: str
    key_created: str
    key_modified: str
    key_version: str
    key_description: str

    def scene_label(self, scene_type: SceneType) -> str:
        if scene_type == SceneType.EXPLORATION:
            return self.exploration_scene
        if scene_type == SceneType.SECRET_DISTRIBUTION:
            return self.secret_distribution_scene
        return self.narrative_scene


ENGLISH_LABELS = DialectLabels(
    metadata_header="Metadata",
    game_settings_header="Game Settings",
    players_header="Players",
    judgement_levels_header="Judgement Levels",
    scenes_header="Scenes",
    exploration_scene="Exploration Scene",
    secret_distribution_scene="Secret Distribution Scene",
    narrative_scene="Narrative Scene",
    memo="Memo",
    empty_marker="(empty)",
    key_title="Title",
    key_author="Author",
    key_created="Created",
    key_modified="Modified",
    key_version="Version",
    key_description="Description",
)

JAPANESE_LABELS = DialectLabels(
    metadata_header="メタ情報",
    game_settings_header="ゲーム設定",
    players_header="プレイヤー",
    judgement_levels_header="判定レベル",
    scenes_header="シーン",
    exploration_scene="探索シーン",
    secret_distribution_scene="秘匿配布シーン",
    narrative_scene="地の文シーン",
    memo="メモ",
    empty_marker="(空)",
    key_title="タイトル",
    key_author="作成者",
    key_created="作成日",
    key_modified="更新日",
    key_version="バージョン",
    key_description="説明",
)


def labels_for(language) -> DialectLabels:
    """Labels preset for a DocumentLanguage or language code; English when unknown."""
    try:
        language = DocumentLanguage(language)
    except ValueError:
        logger.warning(f"Unknown document language '{language}', using English")
        return ENGLISH_LABELS
    if language == DocumentLanguage.JAPANESE:
        return JAPANESE_LABELS
    return ENGLISH_LABELS
