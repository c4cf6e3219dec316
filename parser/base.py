# -*- coding: utf-8 -*-
"""
Base Section Parser Classes

Abstract base class shared by the metadata, game settings and scenes
parsers, plus the per-call context handed between them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from gmtool_localization import tr_in
from gmtool_logger import get_logger
from models.results import SectionParseResult
from models.settings import GameSettings
from parser.classifiers import LineClassifier
from parser.patterns import FormatConfiguration, PatternMatcher

logger = get_logger("parser.base")


@dataclass
class ParseContext:
    """
    State of one document parse, shared by the section parsers.

    Attributes:
        game_settings (GameSettings): Settings scene items are resolved against.
        game_settings_parsed (bool): True once a Game Settings section was read.
        scenes_parsed (bool): True once a Scenes section was read.
        language (str): Message language of warnings; None follows the UI language.
    """
    game_settings: GameSettings = field(default_factory=GameSettings)
    game_settings_parsed: bool = False
    scenes_parsed: bool = False
    language: Optional[str] = None

    def message(self, key: str, **kwargs) -> str:
        return tr_in(self.language, key, **kwargs)


class BaseSectionParser(ABC):
    """
    Abstract base class for section parsers.

    Concrete parsers implement `_parse_section`; `parse` turns any exception
    raised there into a failure result so nothing escapes the section.
    Instances hold only configuration and may be shared between calls.
    """

    #: Name used as the category prefix of error messages
    section_name: str = "Section"

    def __init__(self, config: Optional[FormatConfiguration] = None,
                 matcher: Optional[PatternMatcher] = None):
        self.config = config or FormatConfiguration.default()
        self.matcher = matcher or PatternMatcher()
        self.classifier = LineClassifier(self.config, self.matcher)

    @abstractmethod
    def _header_patterns(self) -> Sequence[str]:
        """Patterns recognizing this section's header line."""
        pass

    @abstractmethod
    def _parse_section(self, lines: List[str], start_index: int,
                       context: ParseContext) -> SectionParseResult:
        """Parse the section whose header sits at `start_index`."""
        pass

    def can_handle(self, line: str) -> bool:
        """Check if the line is this section's header."""
        return self.matcher.matches((line or "").strip(), self._header_patterns())

    def parse(self, lines: List[str], start_index: int,
              context: Optional[ParseContext] = None) -> SectionParseResult:
        """
        Parse one section.

        Args:
            lines: All document lines
            start_index: Index of the section header
            context: Per-document parse state

        Returns:
            SectionParseResult; on failure next_index points past the header
        """
        context = context or ParseContext()
        try:
            result = self._parse_section(lines, start_index, context)
        except Exception as e:
            logger.warning(f"{self.section_name} section failed at line {start_index + 1}: {e}")
            return SectionParseResult.failure(str(e), start_index + 1)

        # The cursor must always move forward
        if result.next_index <= start_index:
            result.next_index = start_index + 1
        return result

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _section_end(self, lines: List[str], start_index: int, depth: int) -> int:
        """Index of the first boundary at `depth` or shallower after the header."""
        index = start_index + 1
        while index < len(lines) and not self.classifier.is_boundary(lines[index], depth):
            index += 1
        return index

    @staticmethod
    def _is_blank(line: str) -> bool:
        return not (line or "").strip()
