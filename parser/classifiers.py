# -*- coding: utf-8 -*-
"""
Line Classifiers

Pure extractors that tell what shape a single document line has.
None of them raise: a line that does not fit simply returns None.
"""

from typing import Optional, Tuple

from gmtool_enums import SceneType
from parser.patterns import FormatConfiguration, PatternMatcher

_MAX_HEADING_DEPTH = 4


class LineClassifier:
    """Line shape detection driven by a FormatConfiguration."""

    def __init__(self, config: Optional[FormatConfiguration] = None,
                 matcher: Optional[PatternMatcher] = None):
        self.config = config or FormatConfiguration.default()
        self.matcher = matcher or PatternMatcher()
        self._empty_markers = frozenset(m.strip().casefold() for m in self.config.items.empty_markers)

    # =========================================================================
    # LIST LINES
    # =========================================================================

    def key_value(self, line: str) -> Optional[Tuple[str, str]]:
        """`- key: value` -> (key, value)."""
        match = self.matcher.match_any(_clean(line), (self.config.items.key_value,))
        if match is None:
            return None
        return match.group(1), match.group(2)

    def numbered_item(self, line: str) -> Optional[Tuple[int, str]]:
        """`3. content` -> (3, content)."""
        match = self.matcher.match_any(_clean(line), (self.config.items.numbered_list,))
        if match is None:
            return None
        try:
            number = int(match.group(1))
        except ValueError:
            return None
        return number, match.group(2)

    def judgement_result(self, line: str) -> Optional[Tuple[str, str]]:
        """`- Level: text` -> (level name, text)."""
        match = self.matcher.match_any(_clean(line), (self.config.judgements.judgement_result,))
        if match is None:
            return None
        return match.group(1), match.group(2)

    def memo(self, line: str) -> Optional[str]:
        match = self.matcher.match_any(_clean(line), self.config.items.memo_patterns)
        if match is None:
            return None
        return match.group(1)

    # =========================================================================
    # HEADINGS
    # =========================================================================

    def item_header(self, line: str) -> Optional[str]:
        """`#### name` -> name."""
        cleaned = _clean(line)
        if self.heading_depth(cleaned) != 4:
            return None
        match = self.matcher.match_any(cleaned, (self.config.items.item_definition,))
        if match is None:
            return None
        return match.group(1) or None

    def scene_header(self, line: str) -> Optional[Tuple[SceneType, str]]:
        """`### <label>: <name>` -> (scene type, name) for a known label."""
        table = self.config.items.scene_definitions
        match = self.matcher.match_any(_clean(line), [pattern for _, pattern in table])
        if match is None:
            return None
        return table[match.index][0], match.group(1)

    def looks_like_scene_header(self, line: str) -> bool:
        """True for any `### <label>: <name>` line, known label or not."""
        return self.matcher.matches(_clean(line), (self.config.items.scene_header_shape,))

    def heading_depth(self, line: str) -> int:
        """
        Number of leading '#' markers (1-4), 0 for anything else.

        The markers must be followed by whitespace or end the line, so prose
        such as "#3 is the killer" is not a heading.
        """
        cleaned = _clean(line)
        depth = len(cleaned) - len(cleaned.lstrip('#'))
        if depth == 0 or depth > _MAX_HEADING_DEPTH:
            return 0
        rest = cleaned[depth:]
        if rest and not rest[0].isspace():
            return 0
        return depth

    def is_boundary(self, line: str, depth: int) -> bool:
        """True for a heading at `depth` or shallower."""
        found = self.heading_depth(line)
        return 0 < found <= depth

    # =========================================================================
    # VALUES
    # =========================================================================

    def is_empty_marker(self, value: Optional[str]) -> bool:
        if value is None:
            return True
        text = value.strip()
        return not text or text.casefold() in self._empty_markers

    @staticmethod
    def normalize_key(key: str) -> str:
        """Lowercase and drop spaces, full-width spaces, '-' and '_'."""
        text = (key or "").strip().lower()
        for ch in (" ", "　", "-", "_"):
            text = text.replace(ch, "")
        return text


def _clean(line: Optional[str]) -> str:
    return (line or "").strip()
