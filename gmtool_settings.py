"""
GMTool Settings Module
Handles loading and saving of user settings.
"""

import json
import gmtool_config as config
from gmtool_enums import DocumentLanguage
from gmtool_localization import SUPPORTED_UI_LANGUAGES
from gmtool_logger import get_logger
logger = get_logger("settings")


def default_settings():
    """Fresh copy of the default settings dictionary."""
    return {
        "ui_language": config.DEFAULT_UI_LANGUAGE,
        "document_language": config.DEFAULT_DOCUMENT_LANGUAGE,
        "format_config_path": None,
    }


def load_settings(settings_file=None):
    """Load settings from JSON file, or return defaults if not found."""

    settings_file = settings_file or config.SETTINGS_FILE_PATH
    defaults = default_settings()

    if not settings_file.is_file():
        logger.info(f"Settings file not found ({settings_file}). Using defaults.")
        return defaults

    try:
        logger.debug(f"Loading settings: {settings_file}")
        with settings_file.open('r', encoding='utf-8') as f:
            loaded_data = json.load(f)
    except json.JSONDecodeError:
        logger.error(f"Settings file ({settings_file}) is corrupt (invalid JSON). Using defaults.")
        return defaults
    except OSError as e:
        logger.error(f"Error while loading settings ({settings_file}): {e}. Using defaults.")
        return defaults

    if not isinstance(loaded_data, dict):
        logger.warning("Settings file format is invalid (not a dictionary). Using defaults.")
        return defaults

    settings = defaults.copy()
    settings.update(loaded_data)

    # Validate ui_language
    if settings.get("ui_language") not in SUPPORTED_UI_LANGUAGES:
        logger.warning(f"Invalid 'ui_language' value ({settings.get('ui_language')}). Using default.")
        settings["ui_language"] = config.DEFAULT_UI_LANGUAGE

    # Validate document_language
    if settings.get("document_language") not in [lang.value for lang in DocumentLanguage]:
        logger.warning(f"Invalid 'document_language' value ({settings.get('document_language')}). Using default.")
        settings["document_language"] = config.DEFAULT_DOCUMENT_LANGUAGE

    # Validate format_config_path
    path_value = settings.get("format_config_path")
    if path_value is not None and not (isinstance(path_value, str) and path_value.strip()):
        logger.warning("Invalid 'format_config_path' value. Built-in format is used.")
        settings["format_config_path"] = None

    logger.debug("Settings loaded successfully.")
    return settings


def save_settings(settings_data, settings_file=None):
    """Save settings to JSON file."""

    settings_file = settings_file or config.SETTINGS_FILE_PATH
    try:
        logger.debug(f"Saving settings: {settings_file}")

        # Ensure directory exists
        settings_file.parent.mkdir(parents=True, exist_ok=True)

        with settings_file.open('w', encoding='utf-8') as f:
            json.dump(settings_data, f, indent=4, ensure_ascii=False)
        logger.info("Settings saved successfully.")
        return True
    except (OSError, TypeError) as e:
        logger.critical(f"Could not save settings ({settings_file}): {e}")
        return False


logger.debug("gmtool_settings.py loaded")
