# -*- coding: utf-8 -*-
"""
GMTool Localization Module

User-facing messages (parse warnings, load summaries, CLI output) are looked
up by key in locales/<code>.json. The UI language only changes these
messages; document spellings are chosen separately by DialectLabels.
"""

import json
from pathlib import Path
from typing import Dict, Optional

from gmtool_logger import get_logger
logger = get_logger("localization")

FALLBACK_LANGUAGE = "en"


class LocalizationManager:
    """
    Process-wide message catalog.

    Every supported catalog is read once on first use. Lookups fall back
    from the current language to English and finally to the key itself, so
    a missing entry never breaks message formatting.
    """

    _instance: Optional['LocalizationManager'] = None

    SUPPORTED_LANGUAGES = {
        "en": "English",
        "ja": "日本語",
    }

    def __new__(cls) -> 'LocalizationManager':
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._current_language = FALLBACK_LANGUAGE
            instance._catalogs = {}
            instance._locales_dir = _find_locales_dir()
            for code in cls.SUPPORTED_LANGUAGES:
                catalog = _read_catalog(instance._locales_dir / f"{code}.json")
                if catalog is not None:
                    instance._catalogs[code] = catalog
            logger.debug(f"Message catalogs loaded: {sorted(instance._catalogs)}")
            cls._instance = instance
        return cls._instance

    @property
    def current_language(self) -> str:
        return self._current_language

    def set_language(self, lang_code: str) -> bool:
        """
        Switch the message language.

        Returns:
            False if the code is unsupported or its catalog could not be read
        """
        if lang_code not in self.SUPPORTED_LANGUAGES:
            logger.warning(f"Unsupported UI language: '{lang_code}'")
            return False
        if lang_code not in self._catalogs:
            logger.error(f"No message catalog for '{lang_code}' in {self._locales_dir}")
            return False
        self._current_language = lang_code
        return True

    def translate(self, key: str, **kwargs) -> str:
        return self.translate_to(self._current_language, key, **kwargs)

    def translate_to(self, lang_code: Optional[str], key: str, **kwargs) -> str:
        """Translate a message key in `lang_code`; None means the current language."""
        template = self._lookup(key, lang_code or self._current_language)
        if not kwargs:
            return template
        try:
            return template.format(**kwargs)
        except (KeyError, IndexError) as e:
            logger.warning(f"Message '{key}' is missing argument {e}")
            return template

    def _lookup(self, key: str, lang_code: str) -> str:
        for code in (lang_code, FALLBACK_LANGUAGE):
            text = self._catalogs.get(code, {}).get(key)
            if text is not None:
                return text
        logger.debug(f"No message for key '{key}'")
        return key


def _find_locales_dir() -> Path:
    """locales/ next to this module, else in the working directory, else the bundle."""
    candidates = [Path(__file__).parent / "locales", Path.cwd() / "locales"]
    import gmtool_config as config
    candidates.append(Path(config.resource_path("locales")))
    for candidate in candidates:
        if candidate.is_dir():
            return candidate
    logger.warning("Locales directory not found, messages will show their keys")
    return candidates[0]


def _read_catalog(json_path: Path) -> Optional[Dict[str, str]]:
    try:
        with json_path.open('r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.warning(f"Message catalog not found: {json_path}")
        return None
    except (OSError, json.JSONDecodeError) as e:
        logger.error(f"Cannot read message catalog {json_path}: {e}")
        return None
    if not isinstance(data, dict):
        logger.error(f"Message catalog is not a JSON object: {json_path}")
        return None
    return data


# =============================================================================
# MODULE-LEVEL SHORTCUTS
# =============================================================================

def tr(key: str, **kwargs) -> str:
    """Translate a message key in the current UI language."""
    return LocalizationManager().translate(key, **kwargs)


def tr_in(lang_code: Optional[str], key: str, **kwargs) -> str:
    """Translate a message key in an explicit language, independent of the UI language."""
    return LocalizationManager().translate_to(lang_code, key, **kwargs)


def set_language(lang_code: str) -> bool:
    return LocalizationManager().set_language(lang_code)


def get_language() -> str:
    return LocalizationManager().current_language


SUPPORTED_UI_LANGUAGES = LocalizationManager.SUPPORTED_LANGUAGES
