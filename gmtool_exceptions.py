# -*- coding: utf-8 -*-
"""
GMTool Exceptions Module
Custom exception classes for structured error handling across the tool.
"""

from gmtool_enums import FileErrorReason


class GMToolError(Exception):
    """
    Base exception class for all GMTool-related errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional details (dict, string, etc.)
    """

    def __init__(self, message: str, details=None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self):
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Parser Exceptions
# =============================================================================

class ParserError(GMToolError):
    """Base exception for parser-related errors."""
    pass


class FormatConfigurationError(ParserError):
    """Raised when a format configuration file cannot be loaded."""

    def __init__(self, message: str, config_path: str = None):
        super().__init__(message, details={'config_path': config_path})
        self.config_path = config_path


# =============================================================================
# Model Exceptions
# =============================================================================

class ModelError(GMToolError):
    """Base exception for scenario model errors."""
    pass


class InvalidNameError(ModelError):
    """Raised when an item or scene is given a blank name."""

    def __init__(self, message: str, field: str = None):
        super().__init__(message, details={'field': field})
        self.field = field


# =============================================================================
# Core/File Exceptions
# =============================================================================

class CoreError(GMToolError):
    """Base exception for core module errors."""
    pass


class FileOperationError(CoreError):
    """Raised when a file operation (read/write) fails."""

    def __init__(self, message: str, file_path: str = None, operation: str = None,
                 reason: FileErrorReason = FileErrorReason.INVALID):
        super().__init__(message, details={'file_path': file_path, 'operation': operation, 'reason': reason.value})
        self.file_path = file_path
        self.operation = operation
        self.reason = reason


class SaveError(CoreError):
    """Raised when saving a scenario fails."""

    def __init__(self, message: str, file_path: str = None):
        super().__init__(message, details={'file_path': file_path})
        self.file_path = file_path


class ScenarioAssemblyError(CoreError):
    """Raised when parse output cannot be turned into a scenario."""
    pass

