# -*- coding: utf-8 -*-
"""
Scenario Validator Module

Business-rule checks run before saving or on demand from the CLI.
"""

import gmtool_config as config
from gmtool_enums import SceneType
from gmtool_localization import tr
from gmtool_logger import get_logger
from models.results import ValidationResult
from models.scenario import Scenario

logger = get_logger("core.validator")


class ScenarioValidator:
    """Checks a scenario for problems the parser does not reject."""

    @staticmethod
    def validate(scenario: Scenario) -> ValidationResult:
        result = ValidationResult()
        game_settings = scenario.game_settings

        if not scenario.metadata.title or not scenario.metadata.title.strip():
            result.add_warning(tr("validation_title_missing"))

        if game_settings.get_scenario_player_count() < 1:
            result.add_error(tr("validation_player_count"))

        if game_settings.get_judgement_level_count() < config.MIN_JUDGEMENT_LEVELS:
            result.add_error(tr("validation_judgement_levels", min=config.MIN_JUDGEMENT_LEVELS))

        if not scenario.scenes:
            result.add_warning(tr("validation_no_scenes"))

        for scene in scenario.get_scenes_by_type(SceneType.SECRET_DISTRIBUTION):
            for player_name in scene.get_available_player_names():
                if not game_settings.is_active_player(player_name):
                    result.add_warning(tr("validation_inactive_secret_target",
                                          scene=scene.name, player=player_name))

        logger.debug(f"Validated {scenario!r}: {len(result.errors)} error(s), {len(result.warnings)} warning(s)")
        return result
