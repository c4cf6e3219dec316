# -*- coding: utf-8 -*-
"""
Metadata Section Parser

Reads the `## Metadata` block: `- Key: Value` lines mapped onto
ScenarioMetadata fields through the configured key aliases.
"""

from typing import Dict, List, Optional, Sequence

from gmtool_logger import get_logger
from models.metadata import ScenarioMetadata, parse_datetime
from models.results import SectionParseResult
from parser.base import BaseSectionParser, ParseContext

logger = get_logger("parser.metadata")


class MetadataParser(BaseSectionParser):
    """Parser for the metadata section (heading depth 2)."""

    section_name = "Metadata"

    def _header_patterns(self) -> Sequence[str]:
        return self.config.sections.metadata_headers

    def _parse_section(self, lines: List[str], start_index: int,
                       context: ParseContext) -> SectionParseResult:
        end = self._section_end(lines, start_index, 2)
        values: Dict[str, str] = {}
        warnings: List[str] = []

        for index in range(start_index + 1, end):
            line = lines[index].strip()
            if not line:
                continue

            pair = self.classifier.key_value(line)
            if pair is None:
                warnings.append(context.message("parse_unprocessed_line", line=line))
                continue

            key, value = pair
            field_name = self.field_for_key(key)
            if field_name is None:
                logger.debug(f"Unknown metadata key ignored: '{key}'")
                continue
            values[field_name] = value

        metadata = ScenarioMetadata.from_parsed(
            title=values.get("title"),
            author=values.get("author"),
            description=values.get("description"),
            version=values.get("version"),
            created_at=parse_datetime(values.get("created", "")),
            last_modified_at=parse_datetime(values.get("modified", "")),
        )
        logger.debug(f"Metadata section: lines {start_index + 1}-{end}, keys={sorted(values)}")
        return SectionParseResult.ok(metadata, end, warnings)

    def field_for_key(self, key: str) -> Optional[str]:
        """Metadata field a document key maps to, or None for unknown keys."""
        normalized = self.classifier.normalize_key(key)
        for field_name, aliases in self.config.items.metadata_keys:
            if normalized in (self.classifier.normalize_key(alias) for alias in aliases):
                return field_name
        return None
