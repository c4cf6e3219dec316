# -*- coding: utf-8 -*-
"""
Scenario Assembler Module

Builds a Scenario from document parser output: applies defaults, decides
whether parse errors are fatal and downgrades the rest to warnings.
"""

import copy
from typing import List, Optional

from core.error_handler import ErrorHandler
from gmtool_exceptions import ScenarioAssemblyError
from gmtool_localization import tr
from gmtool_logger import get_logger
from models.metadata import ScenarioMetadata
from models.results import OperationResult, ScenarioParseResult
from models.scenario import Scenario
from models.settings import GameSettings

logger = get_logger("core.assembler")


class ScenarioAssembler:
    """Converts a ScenarioParseResult into a Scenario or a fatal failure."""

    def assemble(self, parse_result: ScenarioParseResult,
                 file_path: Optional[str] = None) -> OperationResult[Scenario]:
        """
        Assemble a scenario.

        Args:
            parse_result: Output of the document parser
            file_path: Path the text was read from, recorded on the scenario

        Returns:
            OperationResult holding the scenario, or a failure with one message
        """
        try:
            scenario = self.build(parse_result)
        except ScenarioAssemblyError as e:
            logger.warning(f"Scenario assembly failed: {e.message}")
            return OperationResult.failure(e.message)

        warnings = self.collect_warnings(parse_result)
        scenario.mark_saved(file_path)

        logger.debug(f"Assembled {scenario!r} with {len(warnings)} warning(s)")
        if warnings:
            return OperationResult.success_with_warnings(scenario, warnings)
        return OperationResult.success(scenario)

    def build(self, parse_result: ScenarioParseResult) -> Scenario:
        """
        Build the scenario without touching timestamps or the dirty flag.

        Raises:
            ScenarioAssemblyError: If the parse result is missing or a metadata/title error occurred
        """
        if parse_result is None:
            raise ScenarioAssemblyError(tr("error_invalid_parse_result"))

        critical = [error for error in parse_result.errors if ErrorHandler.is_critical_error(error)]
        if critical:
            raise ScenarioAssemblyError(tr("assemble_metadata_unreadable", error=critical[0]),
                                        details=critical)

        metadata = parse_result.metadata.copy() if parse_result.metadata else ScenarioMetadata()
        if parse_result.title and parse_result.title != metadata.title:
            metadata.title = parse_result.title

        game_settings = parse_result.game_settings.copy() if parse_result.game_settings else GameSettings()
        return Scenario(metadata, game_settings, copy.deepcopy(parse_result.scenes))

    @staticmethod
    def collect_warnings(parse_result: ScenarioParseResult) -> List[str]:
        """Non-fatal errors as "partially unreadable" warnings, followed by parser warnings."""
        warnings = [tr("assemble_partially_unreadable", error=error) for error in parse_result.errors]
        warnings.extend(parse_result.warnings)
        return warnings
