# -*- coding: utf-8 -*-
"""
GMTool Parser Package

Section-based parser for scenario documents. Section parsers share a
common base and are dispatched by the document parser in parser.core.
"""

from parser.base import BaseSectionParser, ParseContext
from parser.patterns import (
    FormatConfiguration,
    PatternMatch,
    PatternMatcher,
    DialectLabels,
    ENGLISH_LABELS,
    JAPANESE_LABELS,
    labels_for,
    load_format_configuration,
)
from parser.classifiers import LineClassifier
from parser.metadata_parser import MetadataParser
from parser.game_settings_parser import GameSettingsParser
from parser.scenes_parser import ScenesParser
from parser.core import ScenarioDocumentParser, parse_scenario_text

__all__ = [
    'BaseSectionParser',
    'ParseContext',
    'FormatConfiguration',
    'PatternMatch',
    'PatternMatcher',
    'DialectLabels',
    'ENGLISH_LABELS',
    'JAPANESE_LABELS',
    'labels_for',
    'load_format_configuration',
    'LineClassifier',
    'MetadataParser',
    'GameSettingsParser',
    'ScenesParser',
    'ScenarioDocumentParser',
    'parse_scenario_text',
]
