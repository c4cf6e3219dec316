# -*- coding: utf-8 -*-
"""
Unit Tests for the Error Handler and Scenario Validator
"""

import pytest

from core.error_handler import ErrorHandler
from core.validator import ScenarioValidator
from gmtool_enums import ErrorLevel, FileErrorReason
from gmtool_exceptions import FileOperationError, FormatConfigurationError
from models.results import ScenarioErrorInfo, ScenarioParseResult
from models.scenario import Scenario
from models.scenes import ExplorationScene, SecretDistributionScene


class TestErrorHandler:
    """Tests for parse result analysis."""

    def test_clean_result(self):
        info = ErrorHandler.analyze_parse_result(ScenarioParseResult())

        assert not info.has_errors
        assert not info.has_unprocessed_lines
        assert info.user_message == "The file was read successfully"
        assert ErrorHandler.get_error_level(info) == ErrorLevel.SUCCESS

    def test_unprocessed_lines(self):
        info = ErrorHandler.analyze_parse_result(ScenarioParseResult(warnings=["a", "b"]))

        assert info.has_unprocessed_lines
        assert info.user_message == "The file was read, but 2 line(s) could not be processed"
        assert ErrorHandler.get_error_level(info) == ErrorLevel.WARNING

    def test_single_error(self):
        info = ErrorHandler.analyze_parse_result(ScenarioParseResult(errors=["Scenes: bad"], warnings=["w"]))

        assert info.user_message == "An error occurred while reading the file: Scenes: bad"
        assert ErrorHandler.get_error_level(info) == ErrorLevel.ERROR

    def test_multiple_errors(self):
        info = ErrorHandler.analyze_parse_result(ScenarioParseResult(errors=["a: 1", "b: 2"]))
        assert info.user_message == "2 errors occurred while reading the file"

    def test_missing_result(self):
        info = ErrorHandler.analyze_parse_result(None)

        assert info.has_errors
        assert info.user_message == "The parse result is invalid"
        assert ErrorHandler.get_error_level(None) == ErrorLevel.ERROR
        assert ErrorHandler.generate_user_message(None) == "An unknown error occurred"

    def test_message_follows_ui_language(self):
        import gmtool_localization as localization

        localization.set_language("ja")
        info = ErrorHandler.analyze_parse_result(ScenarioParseResult())
        assert info.user_message != "The file was read successfully"

    @pytest.mark.parametrize("message, critical", [
        ("Metadata: x", True),
        ("metadata：x", True),
        ("Title: x", True),
        ("メタデータ: x", True),
        ("タイトル: x", True),
        ("Scenes: metadata is fine", False),
        ("GameSettings: title", False),
        ("no category at all", False),
    ])
    def test_is_critical_error(self, message, critical):
        assert ErrorHandler.is_critical_error(message) is critical

    def test_error_category(self):
        assert ErrorHandler.error_category("Scenes: a: b") == "Scenes"
        assert ErrorHandler.error_category("シーン：壊れた") == "シーン"
        assert ErrorHandler.error_category("") == ""


class TestErrorHandlerExceptions:
    """Tests for exception summaries."""

    @pytest.mark.parametrize("reason, expected", [
        (FileErrorReason.NOT_FOUND, "File not found: a.md"),
        (FileErrorReason.ACCESS_DENIED, "Access to the file was denied: a.md"),
        (FileErrorReason.INVALID, "The file is not a valid scenario text file: a.md"),
    ])
    def test_file_operation_errors(self, reason, expected):
        error = FileOperationError("raw", file_path="a.md", operation="read", reason=reason)
        info = ErrorHandler.create_from_exception(error)

        assert info.has_errors
        assert info.errors == ["raw"]
        assert info.user_message == expected

    def test_format_configuration_error(self):
        info = ErrorHandler.create_from_exception(FormatConfigurationError("bad", config_path="f.json"))
        assert info.user_message == "Invalid format configuration (f.json): bad"

    def test_builtin_os_errors(self):
        not_found = FileNotFoundError(2, "No such file", "x.md")
        denied = PermissionError(13, "Denied", "y.md")

        assert ErrorHandler.create_from_exception(not_found).user_message == "File not found: x.md"
        assert ErrorHandler.create_from_exception(denied).user_message == "Access to the file was denied: y.md"

    def test_other_exception_names_context(self):
        info = ErrorHandler.create_from_exception(ValueError("boom"), "loading")
        assert info.user_message == "An error occurred during loading: boom"

        info = ErrorHandler.create_from_exception(ValueError("boom"))
        assert info.user_message == "An error occurred during the operation: boom"
        assert isinstance(info, ScenarioErrorInfo)


class TestScenarioValidator:
    """Tests for business-rule checks."""

    def test_sample_is_valid(self, english_scenario):
        result = ScenarioValidator.validate(english_scenario)
        assert result.is_valid
        assert result.warnings == []

    def test_empty_scenario_warns(self):
        result = ScenarioValidator.validate(Scenario())
        assert result.is_valid
        assert result.warnings == ["The scenario has no scenes"]

    def test_blank_title_warns(self):
        scenario = Scenario(scenes=[ExplorationScene("Hall")])
        scenario.metadata.title = "  "
        assert ScenarioValidator.validate(scenario).warnings == ["The scenario has no title"]

    def test_too_few_levels_is_error(self):
        scenario = Scenario(scenes=[ExplorationScene("Hall")])
        scenario.game_settings.judgement_levels.set_level_names(["Only"])
        result = ScenarioValidator.validate(scenario)

        assert not result.is_valid
        assert result.errors == ["At least 2 judgement levels are required"]

    def test_inactive_secret_target_warns(self, game_settings):
        secret = SecretDistributionScene("Whispers")
        secret.initialize_from_game_settings(game_settings)
        secret.add_player_target("Stranger", game_settings)
        scenario = Scenario(game_settings=game_settings, scenes=[secret])

        result = ScenarioValidator.validate(scenario)
        assert result.warnings == ["Scene 'Whispers' has a target for 'Stranger', who is not an active player"]
