# -*- coding: utf-8 -*-
"""
GMTool Scene Item Models

Judgement-capable targets (one text per judgement level) and narrative
targets (a single always-selected text).
"""

import uuid
from typing import List, Optional, Tuple

from gmtool_logger import get_logger

logger = get_logger("models.targets")


def _new_id() -> str:
    return uuid.uuid4().hex


class JudgementTarget:
    """
    A scene item carrying one text per judgement level.

    Indexes follow the order of the scenario's judgement level list.
    Out-of-range reads return "" and out-of-range writes are ignored.
    """

    def __init__(self, name: str = "", level_count: int = 0, memo: str = ""):
        self.id = _new_id()
        self.name = name
        self.memo = memo
        self._texts: List[str] = []
        self.initialize(level_count)

    @property
    def texts(self) -> List[str]:
        return list(self._texts)

    @property
    def level_count(self) -> int:
        return len(self._texts)

    @property
    def has_judgement_levels(self) -> bool:
        return self.level_count > 1

    def initialize(self, level_count: int):
        """Reset to `level_count` empty texts."""
        self._texts = [""] * max(0, level_count)

    def resize(self, level_count: int):
        """Pad or truncate the text list, keeping existing texts."""
        level_count = max(0, level_count)
        if level_count < len(self._texts):
            self._texts = self._texts[:level_count]
        else:
            self._texts.extend([""] * (level_count - len(self._texts)))

    def set_text(self, index: int, value: Optional[str]):
        if 0 <= index < len(self._texts):
            self._texts[index] = value if value is not None else ""

    def display_text(self, index: int) -> str:
        if 0 <= index < len(self._texts):
            return self._texts[index]
        return ""

    def non_empty_texts(self) -> List[Tuple[int, str]]:
        """(index, text) pairs for every slot holding text."""
        return [(i, text) for i, text in enumerate(self._texts) if text.strip()]

    def __repr__(self) -> str:
        return f"JudgementTarget(name={self.name!r}, texts={self._texts})"


class NarrativeTarget:
    """A named block of prose with one always-selected text slot."""

    def __init__(self, name: str = "", content: str = "", memo: str = ""):
        self.id = _new_id()
        self.name = name
        self.memo = memo
        self.content = content or ""

    @property
    def level_count(self) -> int:
        return 1

    @property
    def has_judgement_levels(self) -> bool:
        return False

    def set_content(self, value: Optional[str]):
        self.content = value or ""

    def display_text(self, index: int) -> str:
        return self.content if index == 0 else ""

    def __repr__(self) -> str:
        return f"NarrativeTarget(name={self.name!r}, content={self.content!r})"
