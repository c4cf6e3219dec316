# -*- coding: utf-8 -*-
"""
Error Handler Module

Turns parse results and exceptions into user-facing summaries, and decides
which parse errors make a document unloadable.
"""

import re
from typing import Optional

from gmtool_enums import ErrorLevel, FileErrorReason
from gmtool_exceptions import FileOperationError, FormatConfigurationError
from gmtool_localization import tr
from models.results import ScenarioErrorInfo, ScenarioParseResult


class ErrorHandler:
    """
    Analyzes parse output and exceptions and returns structured summaries.
    """

    # Error categories that make a document unloadable
    CRITICAL_CATEGORIES = ("metadata", "title", "メタデータ", "タイトル", "メタ情報")

    _CATEGORY_SPLIT = re.compile(r'[:：]')

    @classmethod
    def analyze_parse_result(cls, parse_result: Optional[ScenarioParseResult]) -> ScenarioErrorInfo:
        """
        Collect errors and unprocessed lines of a parse.

        Args:
            parse_result: Output of the document parser

        Returns:
            ScenarioErrorInfo with a localized user message
        """
        if parse_result is None:
            return ScenarioErrorInfo(
                has_errors=True,
                errors=["Parse result is missing"],
                user_message=tr("error_invalid_parse_result"),
            )

        info = ScenarioErrorInfo(
            errors=list(parse_result.errors),
            unprocessed_lines=list(parse_result.warnings),
        )
        info.has_errors = bool(info.errors)
        info.has_unprocessed_lines = bool(info.unprocessed_lines)
        info.user_message = cls.generate_user_message(info)
        return info

    @staticmethod
    def generate_user_message(info: Optional[ScenarioErrorInfo]) -> str:
        if info is None:
            return tr("error_unknown")

        if info.has_errors:
            if len(info.errors) == 1:
                return tr("error_load_single", error=info.errors[0])
            return tr("error_load_multiple", count=len(info.errors))

        if info.has_unprocessed_lines:
            return tr("error_load_unprocessed", count=len(info.unprocessed_lines))

        return tr("error_load_success")

    @staticmethod
    def get_error_level(info: Optional[ScenarioErrorInfo]) -> ErrorLevel:
        if info is None or info.has_errors:
            return ErrorLevel.ERROR
        if info.has_unprocessed_lines:
            return ErrorLevel.WARNING
        return ErrorLevel.SUCCESS

    @staticmethod
    def create_from_exception(exception: BaseException, context: Optional[str] = None) -> ScenarioErrorInfo:
        """
        Build a summary for an exception raised during `context`.

        File errors map to specific messages by reason; anything else gets a
        generic message naming the context.
        """
        context = context or tr("context_operation")
        raw = getattr(exception, "message", None) or str(exception)

        if isinstance(exception, FileOperationError):
            if exception.reason == FileErrorReason.NOT_FOUND:
                user_message = tr("file_not_found", path=exception.file_path)
            elif exception.reason == FileErrorReason.ACCESS_DENIED:
                user_message = tr("file_access_denied", path=exception.file_path)
            else:
                user_message = tr("file_invalid", path=exception.file_path)
        elif isinstance(exception, FormatConfigurationError):
            user_message = tr("format_config_invalid", path=exception.config_path, error=raw)
        elif isinstance(exception, FileNotFoundError):
            user_message = tr("file_not_found", path=exception.filename)
        elif isinstance(exception, PermissionError):
            user_message = tr("file_access_denied", path=exception.filename)
        elif isinstance(exception, UnicodeDecodeError):
            user_message = tr("file_invalid", path="")
        else:
            user_message = tr("error_during_context", context=context, error=raw)

        return ScenarioErrorInfo(has_errors=True, errors=[raw], user_message=user_message)

    @classmethod
    def error_category(cls, message: str) -> str:
        """Text before the first ':' of a parse error ("Metadata: ..." -> "Metadata")."""
        return cls._CATEGORY_SPLIT.split(message or "", maxsplit=1)[0].strip()

    @classmethod
    def is_critical_error(cls, message: str) -> bool:
        """True when a parse error concerns metadata or the title."""
        category = cls.error_category(message).casefold()
        return any(keyword.casefold() in category for keyword in cls.CRITICAL_CATEGORIES)
