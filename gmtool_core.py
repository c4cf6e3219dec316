# -*- coding: utf-8 -*-
"""
GMTool Core Module

Scenario file service: load (read -> parse -> assemble), save
(serialize -> write -> mark saved), new scenarios and validation.
Storage goes through an IFileIOService collaborator.
"""

from typing import Optional

from gmtool_logger import get_logger
logger = get_logger("core")

import gmtool_config as config
from gmtool_exceptions import GMToolError, SaveError
from gmtool_localization import tr

from core.assembler import ScenarioAssembler
from core.error_handler import ErrorHandler
from core.file_io import FileIOService
from core.serializer import ScenarioSerializer
from core.validator import ScenarioValidator
from interfaces.i_file_io import IFileIOService
from models.results import OperationResult, ScenarioParseResult, ValidationResult
from models.scenario import Scenario
from parser.core import ScenarioDocumentParser
from parser.patterns import DialectLabels, FormatConfiguration, labels_for, load_format_configuration


class ScenarioFileService:
    """
    Loads and saves scenario documents.

    Args:
        file_io: Storage collaborator; plain UTF-8 files when omitted
        config: Pattern configuration for parsing
        labels: Spellings used when writing documents
    """

    def __init__(self, file_io: Optional[IFileIOService] = None,
                 config: Optional[FormatConfiguration] = None,
                 labels: Optional[DialectLabels] = None):
        self.file_io = file_io or FileIOService()
        self.parser = ScenarioDocumentParser(config)
        self.serializer = ScenarioSerializer(labels)
        self.assembler = ScenarioAssembler()

    @classmethod
    def from_settings(cls, settings: dict, file_io: Optional[IFileIOService] = None) -> 'ScenarioFileService':
        """
        Build a service from user settings.

        Raises:
            FormatConfigurationError: If `format_config_path` points to an invalid file
        """
        format_config = None
        if settings.get("format_config_path"):
            format_config = load_format_configuration(settings["format_config_path"])
        labels = labels_for(settings.get("document_language", config.DEFAULT_DOCUMENT_LANGUAGE))
        return cls(file_io=file_io, config=format_config, labels=labels)

    # =============================================================================
    # LOAD / SAVE
    # =============================================================================

    def load_from_file(self, file_path: str) -> OperationResult[Scenario]:
        """Read, parse and assemble a scenario file."""
        logger.info(f"Loading scenario: {file_path}")
        try:
            text = self.file_io.read_text(file_path)
        except GMToolError as e:
            info = ErrorHandler.create_from_exception(e, tr("context_load"))
            logger.warning(f"Could not read {file_path}: {e}")
            return OperationResult.failure(info.user_message)

        parse_result = self.parse_text(text)
        info = ErrorHandler.analyze_parse_result(parse_result)
        logger.info(f"[{ErrorHandler.get_error_level(info).value}] {info.user_message}")

        result = self.assembler.assemble(parse_result, file_path)
        if not result.is_success:
            logger.error(f"Scenario could not be loaded: {result.error_message}")
        return result

    def save_to_file(self, scenario: Scenario, file_path: Optional[str] = None) -> OperationResult[str]:
        """Serialize and write a scenario; on success the scenario is marked saved at the path."""
        target = file_path or scenario.file_path
        if not target:
            return OperationResult.failure(tr("save_no_path"))

        try:
            text = self.serialize(scenario)
            if not self.file_io.write_text(str(target), text):
                raise SaveError(tr("save_failed", path=target), file_path=str(target))
        except GMToolError as e:
            logger.error(f"Save failed: {e}")
            return OperationResult.failure(e.message)

        scenario.mark_saved(str(target))
        logger.info(f"Scenario saved: {target}")
        return OperationResult.success(str(target))

    # =============================================================================
    # TEXT
    # =============================================================================

    def parse_text(self, text: str) -> ScenarioParseResult:
        return self.parser.parse(text)

    def serialize(self, scenario: Scenario) -> str:
        return self.serializer.serialize(scenario)

    def load_from_text(self, text: str, file_path: Optional[str] = None) -> OperationResult[Scenario]:
        """Parse and assemble text that was obtained elsewhere."""
        return self.assembler.assemble(self.parse_text(text), file_path)

    # =============================================================================
    # MISC
    # =============================================================================

    def is_valid_scenario_file(self, file_path: str) -> bool:
        return self.file_io.is_valid_file(file_path, *config.SCENARIO_FILE_EXTENSIONS)

    @staticmethod
    def create_new_scenario(title: Optional[str] = None) -> Scenario:
        """Fresh scenario with default settings and no scenes."""
        scenario = Scenario()
        scenario.set_title(title or config.DEFAULT_SCENARIO_TITLE)
        logger.debug(f"New scenario created: {scenario.title}")
        return scenario

    @staticmethod
    def validate(scenario: Scenario) -> ValidationResult:
        return ScenarioValidator.validate(scenario)
