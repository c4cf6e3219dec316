# -*- coding: utf-8 -*-
"""
GMTool Parser Interfaces

Protocol definition for section parsers dispatched by the document parser.
"""

from typing import TYPE_CHECKING, List, Protocol, runtime_checkable

from models.results import SectionParseResult

if TYPE_CHECKING:
    from parser.base import ParseContext


@runtime_checkable
class ISectionParser(Protocol):
    """
    Protocol for section parsers.

    A section parser recognizes its own header line and consumes lines up to
    the next boundary at its depth or shallower.
    """

    section_name: str

    def can_handle(self, line: str) -> bool:
        """Check if the line is this section's header."""
        ...

    def parse(self, lines: List[str], start_index: int, context: "ParseContext") -> SectionParseResult:
        """
        Parse the section starting at `start_index`.

        Returns:
            SectionParseResult whose next_index is greater than start_index
        """
        ...
