# -*- coding: utf-8 -*-
"""
GMTool Scenario Metadata Model

Descriptive information about a scenario: title, author, version and
creation/modification timestamps.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

import gmtool_config as config
from gmtool_logger import get_logger

logger = get_logger("models.metadata")


@dataclass
class ScenarioMetadata:
    """
    Metadata block of a scenario document.

    Attributes:
        title (str): Scenario title. Never blank when set through set_title().
        author (str): Author name, may be empty.
        description (str): Free-form summary, may be empty.
        version (str): Document version string carried as-is.
        created_at (datetime): Creation timestamp.
        last_modified_at (datetime): Last modification timestamp.
    """
    title: str = config.DEFAULT_SCENARIO_TITLE
    author: str = ""
    description: str = ""
    version: str = config.DEFAULT_FORMAT_VERSION
    created_at: datetime = field(default_factory=datetime.now)
    last_modified_at: datetime = field(default_factory=datetime.now)

    def set_title(self, title: Optional[str]):
        """Set the title, falling back to the untitled placeholder, and refresh last_modified_at."""
        if title is None or not title.strip():
            self.title = config.UNTITLED_SCENARIO_TITLE
        else:
            self.title = title.strip()
        self.update_last_modified()

    def update_last_modified(self):
        """Bump the modification timestamp to now."""
        self.last_modified_at = datetime.now()

    @classmethod
    def from_parsed(
        cls,
        title: Optional[str] = None,
        author: Optional[str] = None,
        description: Optional[str] = None,
        version: Optional[str] = None,
        created_at: Optional[datetime] = None,
        last_modified_at: Optional[datetime] = None,
    ) -> 'ScenarioMetadata':
        """
        Build metadata from values read out of a document.

        Missing or blank values are replaced by defaults; timestamps that
        could not be read default to now.
        """
        now = datetime.now()
        return cls(
            title=title.strip() if title and title.strip() else config.DEFAULT_SCENARIO_TITLE,
            author=(author or "").strip(),
            description=(description or "").strip(),
            version=version.strip() if version and version.strip() else config.DEFAULT_FORMAT_VERSION,
            created_at=created_at or now,
            last_modified_at=last_modified_at or now,
        )

    def copy(self) -> 'ScenarioMetadata':
        """Create a copy of this metadata."""
        from dataclasses import replace
        return replace(self)


def parse_datetime(value: str) -> Optional[datetime]:
    """
    Parse a timestamp written in one of the accepted document formats.

    Args:
        value: Raw text from a metadata line

    Returns:
        The parsed datetime, or None when no format matches
    """
    text = (value or "").strip()
    if not text:
        return None
    for fmt in config.ACCEPTED_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        logger.debug(f"Unparsable timestamp left at default: '{text}'")
        return None


def format_datetime(value: datetime) -> str:
    """Format a timestamp the way documents store it."""
    return value.strftime(config.DATE_FORMAT)
