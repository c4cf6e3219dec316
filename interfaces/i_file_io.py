# -*- coding: utf-8 -*-
"""
GMTool File IO Interfaces

Protocol definition for the storage collaborator. The parser and serializer
only ever see text; reading and writing files goes through this contract.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IFileIOService(Protocol):
    """Protocol for reading and writing scenario text."""

    def read_text(self, file_path: str) -> str:
        """
        Read a whole file as text.

        Raises:
            FileOperationError: With reason NOT_FOUND, ACCESS_DENIED or INVALID
        """
        ...

    def write_text(self, file_path: str, text: str) -> bool:
        """Write text to a file. Returns False on failure."""
        ...

    def is_valid_file(self, file_path: str, *extensions: str) -> bool:
        """Check that the file exists and has one of the given extensions."""
        ...
