"""
GMTool Enum Definitions

Type-safe enums for scene variants, file errors and result levels.
"""

from enum import Enum


class SceneType(str, Enum):
    """Closed set of scene variants"""
    EXPLORATION = 'exploration'
    SECRET_DISTRIBUTION = 'secret_distribution'
    NARRATIVE = 'narrative'


class FileErrorReason(str, Enum):
    """Why the file collaborator could not read a file"""
    NOT_FOUND = 'not_found'
    ACCESS_DENIED = 'access_denied'
    INVALID = 'invalid'


class ErrorLevel(str, Enum):
    """Overall outcome of loading a scenario"""
    SUCCESS = 'success'
    WARNING = 'warning'    # loaded, with unprocessed lines
    ERROR = 'error'        # loaded partially or not at all


class DocumentLanguage(str, Enum):
    """Heading spellings used when writing a scenario document"""
    ENGLISH = 'en'
    JAPANESE = 'ja'
