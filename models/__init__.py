# -*- coding: utf-8 -*-
"""
GMTool Models Package

Scenario domain model (metadata, game settings, scenes and items) and the
result objects passed between parser, assembler and services.
"""

from models.metadata import ScenarioMetadata
from models.settings import PlayerSettings, JudgementLevelSettings, GameSettings
from models.targets import JudgementTarget, NarrativeTarget
from models.scenes import (
    ExplorationScene,
    SecretDistributionScene,
    NarrativeScene,
    create_scene,
)
from models.scenario import Scenario
from models.results import (
    SectionParseResult,
    ScenarioParseResult,
    OperationResult,
    ValidationResult,
    ScenarioErrorInfo,
)

__all__ = [
    'ScenarioMetadata',
    'PlayerSettings',
    'JudgementLevelSettings',
    'GameSettings',
    'JudgementTarget',
    'NarrativeTarget',
    'ExplorationScene',
    'SecretDistributionScene',
    'NarrativeScene',
    'create_scene',
    'Scenario',
    'SectionParseResult',
    'ScenarioParseResult',
    'OperationResult',
    'ValidationResult',
    'ScenarioErrorInfo',
]
