# -*- coding: utf-8 -*-
"""
GMTool Result Models

Value objects returned across component boundaries instead of raising:
section parse results, document parse results, operation results,
validation results and error summaries.
"""

from dataclasses import dataclass, field
from typing import Any, Generic, List, Optional, TypeVar

from models.metadata import ScenarioMetadata
from models.scenes import AnyScene
from models.settings import GameSettings

T = TypeVar('T')


@dataclass
class SectionParseResult:
    """
    Outcome of one section parser run.

    Attributes:
        success (bool): False when the section could not be read.
        next_index (int): First line the section parser did not consume.
        data (Any): Parsed payload on success.
        error_message (str): Reason on failure.
        warnings (List[str]): Recoverable issues met while parsing.
    """
    success: bool
    next_index: int
    data: Any = None
    error_message: str = ""
    warnings: List[str] = field(default_factory=list)

    @classmethod
    def ok(cls, data: Any, next_index: int, warnings: Optional[List[str]] = None) -> 'SectionParseResult':
        return cls(True, next_index, data=data, warnings=list(warnings or []))

    @classmethod
    def failure(cls, error_message: str, next_index: int,
                warnings: Optional[List[str]] = None) -> 'SectionParseResult':
        return cls(False, next_index, error_message=error_message, warnings=list(warnings or []))


@dataclass
class ScenarioParseResult:
    """Best-effort output of parsing a whole document."""
    title: Optional[str] = None
    metadata: Optional[ScenarioMetadata] = None
    game_settings: Optional[GameSettings] = None
    scenes: List[AnyScene] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)


@dataclass
class OperationResult(Generic[T]):
    """Success or failure of a user-level operation, with caveats."""
    is_success: bool
    data: Optional[T] = None
    error_message: str = ""
    warnings: List[str] = field(default_factory=list)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    @classmethod
    def success(cls, data: T) -> 'OperationResult[T]':
        return cls(True, data=data)

    @classmethod
    def success_with_warnings(cls, data: T, warnings: List[str]) -> 'OperationResult[T]':
        return cls(True, data=data, warnings=list(warnings))

    @classmethod
    def failure(cls, error_message: str) -> 'OperationResult[T]':
        return cls(False, error_message=error_message)


@dataclass
class ValidationResult:
    """Business-rule problems found in a scenario."""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, message: str):
        self.errors.append(message)

    def add_warning(self, message: str):
        self.warnings.append(message)

    def merge(self, other: 'ValidationResult'):
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)


@dataclass
class ScenarioErrorInfo:
    """User-facing summary of a document parse."""
    has_errors: bool = False
    has_unprocessed_lines: bool = False
    errors: List[str] = field(default_factory=list)
    unprocessed_lines: List[str] = field(default_factory=list)
    user_message: str = ""
