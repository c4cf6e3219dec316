# -*- coding: utf-8 -*-
"""
Parser Core Functions

Document-level parsing: title line, then dispatch of each section to the
first section parser that claims its header.
"""

from typing import List, Optional

from gmtool_localization import get_language, tr_in
from gmtool_logger import get_logger
from models.results import ScenarioParseResult
from models.settings import GameSettings
from interfaces.i_parser import ISectionParser
from parser.base import ParseContext
from parser.classifiers import LineClassifier
from parser.game_settings_parser import GameSettingsParser
from parser.metadata_parser import MetadataParser
from parser.patterns import FormatConfiguration, PatternMatcher
from parser.scenes_parser import ScenesParser

logger = get_logger("parser.core")


class ScenarioDocumentParser:
    """
    Parses scenario text into a ScenarioParseResult.

    Never raises: section failures become "<Section>: <message>" errors and
    lines no parser claims become "Unprocessed line" warnings.
    """

    DOCUMENT_SECTION = "Document"

    def __init__(self, config: Optional[FormatConfiguration] = None,
                 language: Optional[str] = None):
        self.config = config or FormatConfiguration.default()
        self.language = language
        matcher = PatternMatcher()
        self.classifier = LineClassifier(self.config, matcher)
        self.section_parsers: List[ISectionParser] = [
            MetadataParser(self.config, matcher),
            GameSettingsParser(self.config, matcher),
            ScenesParser(self.config, matcher),
        ]

    def parse(self, text: Optional[str], game_settings: Optional[GameSettings] = None,
              language: Optional[str] = None) -> ScenarioParseResult:
        """
        Parse a whole document.

        Args:
            text: Document text
            game_settings: Settings used for judgement lines when no Game
                Settings section precedes the Scenes section; returned as the
                result's game settings when the document has none
            language: Message language of errors and warnings; defaults to the
                parser's language, then to the UI language at call time

        Returns:
            ScenarioParseResult with best-effort data, errors and warnings
        """
        result = ScenarioParseResult()
        language = language or self.language or get_language()
        if text is None or not text.strip():
            result.errors.append(f"{self.DOCUMENT_SECTION}: {tr_in(language, 'parse_empty_document')}")
            return result

        lines = text.splitlines()
        context = ParseContext(game_settings=game_settings.copy() if game_settings else GameSettings(),
                               language=language)

        index = self._parse_title(lines, result)
        while index < len(lines):
            line = lines[index].strip()
            if not line:
                index += 1
                continue

            parser = self._parser_for(line)
            if parser is None:
                result.warnings.append(context.message("parse_unprocessed_line", line=line))
                index += 1
                continue

            section = parser.parse(lines, index, context)
            result.warnings.extend(section.warnings)
            if section.success:
                self._store_section(parser, section.data, result, context)
            else:
                result.errors.append(f"{parser.section_name}: {section.error_message}")
            index = max(section.next_index, index + 1)

        # Items were sized against the seed, so it stands in for a missing section
        if result.game_settings is None and game_settings is not None:
            result.game_settings = context.game_settings

        logger.debug(
            f"Parsed document: title={result.title!r}, scenes={len(result.scenes)}, "
            f"errors={len(result.errors)}, warnings={len(result.warnings)}"
        )
        return result

    def _parse_title(self, lines: List[str], result: ScenarioParseResult) -> int:
        """Read the optional `# Title` line; returns the index dispatch starts at."""
        index = 0
        while index < len(lines) and not lines[index].strip():
            index += 1
        if index < len(lines) and self.classifier.heading_depth(lines[index]) == 1:
            title = lines[index].strip().lstrip('#').strip()
            result.title = title or None
            return index + 1
        return index

    def _parser_for(self, line: str) -> Optional[ISectionParser]:
        for parser in self.section_parsers:
            if parser.can_handle(line):
                return parser
        return None

    @staticmethod
    def _store_section(parser: ISectionParser, data, result: ScenarioParseResult,
                       context: ParseContext):
        if isinstance(parser, MetadataParser):
            result.metadata = data
        elif isinstance(parser, GameSettingsParser):
            result.game_settings = data
            context.game_settings = data
            context.game_settings_parsed = True
        elif isinstance(parser, ScenesParser):
            result.scenes.extend(data)
            context.scenes_parsed = True


def parse_scenario_text(text: str, config: Optional[FormatConfiguration] = None,
                        game_settings: Optional[GameSettings] = None,
                        language: Optional[str] = None) -> ScenarioParseResult:
    """Parse scenario text with a one-off document parser."""
    return ScenarioDocumentParser(config, language).parse(text, game_settings)
