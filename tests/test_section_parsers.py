# -*- coding: utf-8 -*-
"""
Unit Tests for Section Parsers

Tests for the metadata, game settings and scenes parsers in isolation.
"""

from datetime import datetime

import pytest

import gmtool_config as config
from gmtool_enums import SceneType
from interfaces.i_parser import ISectionParser
from models.settings import GameSettings
from parser.base import ParseContext
from parser.game_settings_parser import GameSettingsParser
from parser.metadata_parser import MetadataParser
from parser.scenes_parser import ScenesParser


def _lines(text):
    return text.strip("\n").splitlines()


class TestSectionParserContract:
    """Tests shared by all section parsers."""

    @pytest.mark.parametrize("parser_class", [MetadataParser, GameSettingsParser, ScenesParser])
    def test_implements_protocol(self, parser_class):
        assert isinstance(parser_class(), ISectionParser)

    def test_can_handle_aliases(self):
        assert MetadataParser().can_handle("## Metadata")
        assert MetadataParser().can_handle("## メタ情報")
        assert MetadataParser().can_handle("  ##  metadata  ")
        assert not MetadataParser().can_handle("### Metadata")
        assert GameSettingsParser().can_handle("## Game Settings")
        assert GameSettingsParser().can_handle("## 設定")
        assert ScenesParser().can_handle("## Scenes")
        assert ScenesParser().can_handle("## 場面")

    def test_exception_becomes_failure(self, monkeypatch):
        """Test that an error inside a section resumes right after its header."""
        def boom(self, lines, start_index, context):
            raise RuntimeError("boom")

        monkeypatch.setattr(MetadataParser, "_parse_section", boom)
        result = MetadataParser().parse(["## Metadata", "- Title: X"], 0, ParseContext())

        assert not result.success
        assert result.error_message == "boom"
        assert result.next_index == 1


class TestMetadataParser:
    """Tests for the metadata section."""

    def test_known_keys(self):
        lines = _lines("""
## Metadata
- Title: Night Train
- Author: Kei
- Created: 2024-01-02 10:00:00
- Last Modified: 2024-02-03 04:05:06
- Ver: 2.1
- Summary: A mystery
## Scenes
""")
        result = MetadataParser().parse(lines, 0, ParseContext())
        metadata = result.data

        assert result.success
        assert result.next_index == 7
        assert metadata.title == "Night Train"
        assert metadata.author == "Kei"
        assert metadata.created_at == datetime(2024, 1, 2, 10, 0, 0)
        assert metadata.last_modified_at == datetime(2024, 2, 3, 4, 5, 6)
        assert metadata.version == "2.1"
        assert metadata.description == "A mystery"
        assert result.warnings == []

    def test_japanese_keys(self):
        lines = _lines("""
## メタ情報
- タイトル: 夜行列車
- 作者: ケイ
- 説明：謎解き
""")
        metadata = MetadataParser().parse(lines, 0, ParseContext()).data
        assert metadata.title == "夜行列車"
        assert metadata.author == "ケイ"
        assert metadata.description == "謎解き"

    def test_unknown_keys_ignored_and_bad_dates_defaulted(self):
        lines = _lines("""
## Metadata
- Genre: Horror
- Created: someday
""")
        result = MetadataParser().parse(lines, 0, ParseContext())

        assert result.success
        assert result.warnings == []
        assert isinstance(result.data.created_at, datetime)
        assert result.data.title == config.DEFAULT_SCENARIO_TITLE

    def test_non_key_value_line_warns(self):
        lines = _lines("""
## Metadata
just some text
- Title: X
""")
        result = MetadataParser().parse(lines, 0, ParseContext())
        assert result.warnings == ["Unprocessed line: just some text"]
        assert result.data.title == "X"


class TestGameSettingsParser:
    """Tests for the game settings section."""

    def _parse(self, text, context=None):
        return GameSettingsParser().parse(_lines(text), 0, context or ParseContext())

    def test_players_and_levels(self):
        result = self._parse("""
## Game Settings
### Players
1. Alice
2. Bob
### Judgement Levels
1. Hit
2. Miss
""")
        settings = result.data

        assert result.success
        assert settings.get_scenario_player_count() == 2
        assert settings.get_scenario_player_names() == ["Alice", "Bob"]
        assert settings.player_settings.player_names[2:] == ["Player 3", "Player 4", "Player 5", "Player 6"]
        assert settings.judgement_levels.level_names == ["Hit", "Miss"]

    def test_gap_counts_highest_filled_index(self):
        result = self._parse("""
## Game Settings
### Players
1. Alice
2. (empty)
3. Bob
""")
        settings = result.data

        assert settings.get_scenario_player_count() == 3
        assert settings.get_scenario_player_names() == ["Alice", "Bob"]
        assert settings.player_settings.player_names[1] == ""

    def test_all_empty_keeps_default_roster(self):
        result = self._parse("""
## ゲーム設定
### プレイヤー
1. (空)
2. なし
""")
        settings = result.data
        assert settings.get_scenario_player_count() == config.DEFAULT_SCENARIO_PLAYER_COUNT
        assert settings.get_scenario_player_names() == ["Player 1", "Player 2", "Player 3", "Player 4"]

    def test_missing_levels_keep_defaults(self):
        settings = self._parse("""
## Game Settings
### Players
1. Alice
""").data
        assert settings.judgement_levels.level_names == list(config.DEFAULT_JUDGEMENT_LEVELS)

    def test_out_of_range_and_stray_lines_warn(self):
        result = self._parse("""
## Game Settings
stray before any sub-section
### Players
7. Eve
Alice
### Weather
1. Rain
""")
        assert result.warnings == [
            "Unprocessed line: stray before any sub-section",
            "Player number out of range (1-6): 7. Eve",
            "Unprocessed line: Alice",
            "Unknown sub-section: ### Weather",
            "Unprocessed line: 1. Rain",
        ]

    def test_stops_at_next_section(self):
        lines = _lines("""
## Game Settings
### Players
1. Alice
## Scenes
""")
        result = GameSettingsParser().parse(lines, 0, ParseContext())
        assert result.next_index == 3

    def test_does_not_alias_context_settings(self):
        context = ParseContext()
        settings = self._parse("""
## Game Settings
### Players
1. Alice
""", context).data
        assert settings is not context.game_settings
        assert context.game_settings.get_scenario_player_names()[0] == "Player 1"

    def test_warns_when_after_scenes(self):
        context = ParseContext(scenes_parsed=True)
        result = self._parse("""
## Game Settings
### Players
1. Alice
""", context)
        assert len(result.warnings) == 1
        assert "after Scenes" in result.warnings[0]

    def test_level_name_with_colon_is_skipped(self):
        result = self._parse("""
## Game Settings
### Judgement Levels
1. Hit
2. Near: Miss
3. 大失敗：痛恨
4. Miss
""")
        assert result.data.judgement_levels.level_names == ["Hit", "Miss"]
        assert result.warnings == [
            "Judgement level names cannot contain a colon, level skipped: 2. Near: Miss",
            "Judgement level names cannot contain a colon, level skipped: 3. 大失敗：痛恨",
        ]

    def test_warnings_use_context_language(self):
        result = self._parse("""
## Game Settings
### Weather
""", ParseContext(language="ja"))
        assert result.warnings == ["不明なサブセクション: ### Weather"]


class TestScenesParser:
    """Tests for the scenes section."""

    def _parse(self, text, game_settings=None):
        context = ParseContext(game_settings=game_settings or GameSettings())
        return ScenesParser().parse(_lines(text), 0, context)

    def test_exploration_scene(self):
        result = self._parse("""
## Scenes
### Exploration Scene: Hall
Memo: Dusty
#### Door
Memo: Oak
- Success: opens
- critical failure: jams
""")
        scene = result.data[0]
        door = scene.get_location("Door")

        assert scene.scene_type == SceneType.EXPLORATION
        assert scene.name == "Hall"
        assert scene.memo == "Dusty"
        assert door.memo == "Oak"
        assert door.texts == ["", "opens", "", "jams"]
        assert result.warnings == []

    def test_unknown_level_warns(self):
        result = self._parse("""
## Scenes
### Exploration: Hall
#### Door
- Fumble: trips
""")
        assert result.warnings == ["Unprocessed line: - Fumble: trips"]

    def test_secret_scene_prepopulated_from_roster(self):
        result = self._parse("""
## Scenes
### Secret Distribution Scene: Whispers
#### Player 2
- Success: psst
#### Stranger
""")
        scene = result.data[0]

        assert scene.get_available_player_names() == ["Player 1", "Player 2", "Player 3", "Player 4", "Stranger"]
        assert scene.get_player_target("Player 2").display_text(1) == "psst"

    def test_narrative_content(self):
        result = self._parse("""
## Scenes
### Narrative Scene: Opening
#### Intro
Memo: read aloud

Line one.
- not a judgement: kept as text

Line three.

#### Outro
The end.
""")
        scene = result.data[0]

        assert scene.get_item("Intro").memo == "read aloud"
        assert scene.get_item("Intro").content == "Line one.\n- not a judgement: kept as text\n\nLine three."
        assert scene.get_item("Outro").content == "The end."
        assert result.warnings == []

    def test_unknown_scene_type_skips_header_only(self):
        result = self._parse("""
## Scenes
### Battle Scene: Boss
### Exploration: Hall
#### Door
""")
        assert [scene.name for scene in result.data] == ["Hall"]
        assert result.warnings == ["Unknown scene type, header skipped: ### Battle Scene: Boss"]

    def test_duplicate_location_merges(self):
        result = self._parse("""
## Scenes
### Exploration: Hall
#### Door
- Success: opens
#### Door
- Failure: stuck
""")
        scene = result.data[0]

        assert len(scene.locations) == 1
        assert scene.get_location("Door").texts == ["", "opens", "stuck", ""]
        assert result.warnings == ["Duplicate item 'Door' in scene 'Hall' merged"]

    def test_item_before_scene_warns(self):
        result = self._parse("""
## Scenes
#### Orphan
text
""")
        assert result.data == []
        assert result.warnings == ["Unprocessed line: #### Orphan", "Unprocessed line: text"]

    def test_levels_from_context(self):
        settings = GameSettings()
        settings.judgement_levels.set_level_names(["Hit", "Miss"])
        result = self._parse("""
## Scenes
### Exploration: Range
#### Target
- Miss: wide
""", settings)
        assert result.data[0].get_location("Target").texts == ["", "wide"]

    def test_hash_prose_in_narrative_does_not_end_section(self):
        result = self._parse("""
## Scenes
### Narrative: Intro
#### Letter
The note reads:
#3 is the killer
### Exploration: Hall
#### Door
- Success: opens
""")
        intro, hall = result.data

        assert [scene.name for scene in result.data] == ["Intro", "Hall"]
        assert intro.get_item("Letter").content == "The note reads:\n#3 is the killer"
        assert hall.get_location("Door").texts[1] == "opens"
        assert result.next_index == 9
        assert result.warnings == []
