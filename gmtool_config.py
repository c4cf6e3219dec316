import os, sys
from pathlib import Path

def resource_path(relative_path):
    """Get absolute path to resource, works for dev and for PyInstaller."""
    try:
        # PyInstaller creates a temp folder and stores path in _MEIPASS
        base_path = sys._MEIPASS
    except AttributeError:
        # Development mode: use directory containing this config file (project root)
        base_path = os.path.dirname(os.path.abspath(__file__))

    return os.path.join(base_path, relative_path)

VERSION = "0.4.0"
DEFAULT_UI_LANGUAGE = "en"  # Supported: "en" (English), "ja" (Japanese)
DEFAULT_DOCUMENT_LANGUAGE = "en"  # Heading spellings written by the serializer

SETTINGS_DIR = Path.home() / ".gmtool"
SETTINGS_FILE_PATH = SETTINGS_DIR / "settings.json"

# Scenario document format
DEFAULT_FORMAT_VERSION = "1.0"
SCENARIO_FILE_EXTENSIONS = (".scenario", ".md")
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
ACCEPTED_DATE_FORMATS = (
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d",
    "%Y/%m/%d %H:%M:%S",
    "%Y/%m/%d %H:%M",
    "%Y/%m/%d",
)

# Scenario defaults
DEFAULT_SCENARIO_TITLE = "New Scenario"
UNTITLED_SCENARIO_TITLE = "Untitled Scenario"
PLAYER_PLACEHOLDER_FORMAT = "Player {index}"

MAX_SUPPORTED_PLAYERS = 6
DEFAULT_SCENARIO_PLAYER_COUNT = 4

DEFAULT_JUDGEMENT_LEVELS = (
    "Critical Success",
    "Success",
    "Failure",
    "Critical Failure",
)
DEFAULT_JUDGEMENT_INDEX = 0
MIN_JUDGEMENT_LEVELS = 2

__all__ = [
    "VERSION", "resource_path", "Path",
    "DEFAULT_UI_LANGUAGE", "DEFAULT_DOCUMENT_LANGUAGE",
    "SETTINGS_DIR", "SETTINGS_FILE_PATH",
    "DEFAULT_FORMAT_VERSION", "SCENARIO_FILE_EXTENSIONS",
    "DATE_FORMAT", "ACCEPTED_DATE_FORMATS",
    "DEFAULT_SCENARIO_TITLE", "UNTITLED_SCENARIO_TITLE", "PLAYER_PLACEHOLDER_FORMAT",
    "MAX_SUPPORTED_PLAYERS", "DEFAULT_SCENARIO_PLAYER_COUNT",
    "DEFAULT_JUDGEMENT_LEVELS", "DEFAULT_JUDGEMENT_INDEX", "MIN_JUDGEMENT_LEVELS",
]

# Import logger at the end to avoid circular imports
from gmtool_logger import get_logger
_logger = get_logger("config")
_logger.debug("gmtool_config.py loaded")
