# -*- coding: utf-8 -*-
"""
File IO Service Module

Plain UTF-8 file access implementing IFileIOService. A UTF-8 byte order
mark is accepted on read; files are always written without one.
"""

from pathlib import Path

from gmtool_enums import FileErrorReason
from gmtool_exceptions import FileOperationError
from gmtool_logger import get_logger

logger = get_logger("core.file_io")


class FileIOService:
    """Reads and writes scenario text files."""

    def read_text(self, file_path: str) -> str:
        """
        Read a whole file.

        Raises:
            FileOperationError: NOT_FOUND, ACCESS_DENIED or INVALID
        """
        if not file_path or not str(file_path).strip():
            raise FileOperationError("Invalid file path", file_path=file_path, operation="read")

        path = Path(file_path)
        if not path.is_file():
            raise FileOperationError(f"File not found: {path}", file_path=str(path), operation="read",
                                     reason=FileErrorReason.NOT_FOUND)
        try:
            with path.open('r', encoding='utf-8-sig') as f:
                return f.read()
        except PermissionError as e:
            raise FileOperationError(f"Access denied: {e}", file_path=str(path), operation="read",
                                     reason=FileErrorReason.ACCESS_DENIED)
        except UnicodeDecodeError as e:
            raise FileOperationError(f"Not a UTF-8 text file: {e}", file_path=str(path), operation="read")
        except OSError as e:
            raise FileOperationError(f"Cannot read file: {e}", file_path=str(path), operation="read")

    def write_text(self, file_path: str, text: str) -> bool:
        """Write text, creating parent directories. Returns False on failure."""
        if not file_path or not str(file_path).strip():
            logger.error("Cannot write: empty file path")
            return False
        path = Path(file_path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open('w', encoding='utf-8', newline='\n') as f:
                f.write(text or "")
            return True
        except OSError as e:
            logger.error(f"Cannot write file {path}: {e}")
            return False

    def is_valid_file(self, file_path: str, *extensions: str) -> bool:
        """Existing, readable, non-blank file with one of the given extensions (any when none given)."""
        if not file_path:
            return False
        path = Path(file_path)
        if not path.is_file():
            return False

        if extensions:
            normalized = {ext.lower() if ext.startswith('.') else f".{ext.lower()}" for ext in extensions}
            if path.suffix.lower() not in normalized:
                return False

        try:
            return bool(self.read_text(str(path)).strip())
        except FileOperationError as e:
            logger.debug(f"File rejected: {e}")
            return False
