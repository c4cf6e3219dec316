# -*- coding: utf-8 -*-
"""
Unit Tests for Pattern Matching and Line Classifiers
"""

import json

import pytest

from gmtool_enums import DocumentLanguage, SceneType
from gmtool_exceptions import FormatConfigurationError
from parser.classifiers import LineClassifier
from parser.patterns import (
    ENGLISH_LABELS,
    JAPANESE_LABELS,
    FormatConfiguration,
    PatternMatcher,
    labels_for,
    load_format_configuration,
)


class TestPatternMatcher:
    """Tests for first-match-wins matching."""

    def test_first_matching_pattern_wins(self):
        """Test that list order decides between overlapping patterns."""
        matcher = PatternMatcher()
        match = matcher.match_any("## Metadata", [r'^##\s*(\w+)$', r'^##\s*Metadata$'])

        assert match.index == 0
        assert match.group(1) == "Metadata"

    def test_case_insensitive(self):
        matcher = PatternMatcher()
        assert matcher.match_any("## METADATA", [r'^##\s*Metadata\s*$']) is not None

    def test_no_match_returns_none(self):
        matcher = PatternMatcher()
        assert matcher.match_any("plain text", [r'^##']) is None
        assert matcher.match_any(None, [r'.*']) is None

    def test_invalid_pattern_is_skipped(self):
        """Test that a broken pattern does not stop the later ones."""
        matcher = PatternMatcher()
        match = matcher.match_any("## Scenes", [r'^##\s*(Scenes', r'^##\s*Scenes\s*$'])

        assert match is not None
        assert match.index == 1

    def test_group_out_of_range_returns_default(self):
        matcher = PatternMatcher()
        match = matcher.match_any("x", [r'^x$'])
        assert match.group(1) == ""
        assert match.group(5, "d") == "d"


class TestFormatConfiguration:
    """Tests for the immutable pattern configuration."""

    def test_default_is_frozen(self):
        config = FormatConfiguration.default()
        with pytest.raises(Exception):
            config.version = "2.0"

    def test_from_dict_overrides_only_given_fields(self):
        config = FormatConfiguration.from_dict({
            "version": "2.0",
            "sections": {"metadata_headers": [r'^##\s*Info\s*$']},
        })

        assert config.version == "2.0"
        assert config.sections.metadata_headers == (r'^##\s*Info\s*$',)
        assert config.sections.scenes_headers == FormatConfiguration().sections.scenes_headers

    def test_from_dict_scene_table(self):
        config = FormatConfiguration.from_dict({
            "items": {"scene_definitions": [{"type": "narrative", "pattern": r'^###\s*Story:\s*(.+)$'}]},
        })
        assert config.items.scene_definitions == ((SceneType.NARRATIVE, r'^###\s*Story:\s*(.+)$'),)

    def test_from_dict_rejects_bad_scene_type(self):
        with pytest.raises(FormatConfigurationError):
            FormatConfiguration.from_dict({"items": {"scene_definitions": [["battle", "^x$"]]}})

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(FormatConfigurationError):
            FormatConfiguration.from_dict(["not", "a", "dict"])

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "format.json"
        path.write_text(json.dumps({"version": "1.5"}), encoding='utf-8')

        assert load_format_configuration(path).version == "1.5"

    def test_load_invalid_json(self, tmp_path):
        path = tmp_path / "format.json"
        path.write_text("{not json", encoding='utf-8')

        with pytest.raises(FormatConfigurationError) as exc_info:
            load_format_configuration(path)
        assert exc_info.value.config_path == str(path)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FormatConfigurationError):
            load_format_configuration(tmp_path / "missing.json")


class TestLineClassifier:
    """Tests for the line shape extractors."""

    @pytest.fixture
    def classifier(self):
        return LineClassifier()

    def test_key_value_half_and_full_width_colon(self, classifier):
        assert classifier.key_value("- Author: Kei") == ("Author", "Kei")
        assert classifier.key_value("- 作成者：ケイ") == ("作成者", "ケイ")
        assert classifier.key_value("Author: Kei") is None

    def test_numbered_item(self, classifier):
        assert classifier.numbered_item("3. Bob") == (3, "Bob")
        assert classifier.numbered_item("2．ボブ") == (2, "ボブ")
        assert classifier.numbered_item("- Bob") is None

    def test_judgement_result_keeps_later_colons(self, classifier):
        assert classifier.judgement_result("- Success: opens: slowly") == ("Success", "opens: slowly")

    def test_memo(self, classifier):
        assert classifier.memo("Memo: check the lock") == "check the lock"
        assert classifier.memo("note: lowercase works") == "lowercase works"
        assert classifier.memo("メモ：日本語") == "日本語"
        assert classifier.memo("Memorandum") is None

    def test_item_header(self, classifier):
        assert classifier.item_header("#### Front Door") == "Front Door"
        assert classifier.item_header("### Front Door") is None

    def test_scene_header_variants(self, classifier):
        assert classifier.scene_header("### Exploration: Door") == (SceneType.EXPLORATION, "Door")
        assert classifier.scene_header("### Exploration Scene: Door") == (SceneType.EXPLORATION, "Door")
        assert classifier.scene_header("### 秘匿配布シーン：囁き") == (SceneType.SECRET_DISTRIBUTION, "囁き")
        assert classifier.scene_header("### Narrative Scene: Intro") == (SceneType.NARRATIVE, "Intro")
        assert classifier.scene_header("### Battle Scene: Boss") is None
        assert classifier.looks_like_scene_header("### Battle Scene: Boss")
        assert not classifier.looks_like_scene_header("### Players")

    def test_heading_depth_and_boundary(self, classifier):
        assert classifier.heading_depth("# Title") == 1
        assert classifier.heading_depth("#### Item") == 4
        assert classifier.heading_depth("##### too deep") == 0
        assert classifier.heading_depth("plain") == 0
        assert classifier.heading_depth("#3 is the killer") == 0
        assert classifier.heading_depth("##") == 2

        assert classifier.is_boundary("## Scenes", 3)
        assert classifier.is_boundary("### Scene: x", 3)
        assert not classifier.is_boundary("#### Item", 3)
        assert not classifier.is_boundary("text", 3)

    def test_empty_markers(self, classifier):
        for marker in ["(empty)", "(EMPTY)", "-", "None", "(空)", "（空）", "なし", "", "  "]:
            assert classifier.is_empty_marker(marker), marker
        assert not classifier.is_empty_marker("Alice")

    def test_normalize_key(self, classifier):
        assert classifier.normalize_key(" Last-Modified ") == "lastmodified"
        assert classifier.normalize_key("created_at") == "createdat"
        assert classifier.normalize_key("作成　日") == "作成日"


class TestDialectLabels:
    """Tests for output spelling presets."""

    def test_labels_for(self):
        assert labels_for("ja") is JAPANESE_LABELS
        assert labels_for(DocumentLanguage.ENGLISH) is ENGLISH_LABELS
        assert labels_for("xx") is ENGLISH_LABELS

    def test_scene_label(self):
        assert ENGLISH_LABELS.scene_label(SceneType.SECRET_DISTRIBUTION) == "Secret Distribution Scene"
        assert JAPANESE_LABELS.scene_label(SceneType.NARRATIVE) == "地の文シーン"
