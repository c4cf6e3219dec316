# -*- coding: utf-8 -*-
"""
GMTool Test Fixtures

Shared fixtures for all tests.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


ENGLISH_DOCUMENT = """# The Haunted Manor

## Metadata
- Title: The Haunted Manor
- Author: Kei
- Created: 2024-01-02 10:00:00
- Modified: 2024-01-03 11:30:00
- Version: 1.2
- Description: A short horror one-shot

## Game Settings

### Players
1. Alice
2. Bob
3. Carol
4. (empty)
5. (empty)
6. (empty)

### Judgement Levels
1. Critical Success
2. Success
3. Failure
4. Critical Failure

## Scenes

### Exploration Scene: Entrance Hall
Memo: First scene

#### Front Door
Memo: Locked at night
- Success: The door creaks open.
- Failure: The door will not budge.

#### Portrait
- Critical Success: A hidden key falls out.

### Secret Distribution Scene: Whispers
#### Alice
- Success: You hear your name.
#### Bob

### Narrative Scene: Opening
#### Intro
Rain hammers the windows.

The butler waits by the stairs.
"""


JAPANESE_DOCUMENT = """# 幽霊屋敷

## メタ情報
- タイトル: 幽霊屋敷
- 作成者: ケイ
- 作成日: 2024-01-02 10:00:00

## ゲーム設定

### プレイヤー
1. アリス
2. ボブ
3. (空)

### 判定レベル
1. 大成功
2. 成功
3. 失敗

## シーン

### 探索シーン: 玄関
メモ: 最初のシーン

#### 扉
- 成功: 扉が開く
- 失敗：びくともしない

### 地の文シーン: 導入
#### 語り
雨が窓を叩く。
"""


# =============================================================================
# ENVIRONMENT FIXTURES
# =============================================================================

@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Point the settings file at a temp location and restore the UI language."""
    import gmtool_config as config
    import gmtool_localization as localization

    monkeypatch.setattr(config, "SETTINGS_FILE_PATH", tmp_path / "settings" / "settings.json")
    localization.set_language("en")
    yield
    localization.set_language("en")


# =============================================================================
# DOCUMENT FIXTURES
# =============================================================================

@pytest.fixture
def english_document() -> str:
    """Complete English scenario document."""
    return ENGLISH_DOCUMENT


@pytest.fixture
def japanese_document() -> str:
    """Complete Japanese scenario document."""
    return JAPANESE_DOCUMENT


# =============================================================================
# COMPONENT FIXTURES
# =============================================================================

@pytest.fixture
def document_parser():
    """ScenarioDocumentParser with the default format configuration."""
    from parser.core import ScenarioDocumentParser
    return ScenarioDocumentParser()


@pytest.fixture
def assembler():
    from core.assembler import ScenarioAssembler
    return ScenarioAssembler()


@pytest.fixture
def serializer():
    """English serializer."""
    from core.serializer import ScenarioSerializer
    return ScenarioSerializer()


@pytest.fixture
def load_text(document_parser, assembler):
    """Parse and assemble text, asserting success."""
    def _load(text, game_settings=None):
        result = assembler.assemble(document_parser.parse(text, game_settings))
        assert result.is_success, result.error_message
        return result.data
    return _load


@pytest.fixture
def english_scenario(load_text, english_document):
    """Scenario assembled from the English sample document."""
    return load_text(english_document)


@pytest.fixture
def game_settings():
    """Default GameSettings."""
    from models.settings import GameSettings
    return GameSettings()


# =============================================================================
# TEMP FILE FIXTURES
# =============================================================================

@pytest.fixture
def temp_scenario_file(tmp_path, english_document) -> Path:
    """Write the English sample to a temporary .scenario file."""
    file_path = tmp_path / "manor.scenario"
    file_path.write_text(english_document, encoding='utf-8')
    return file_path
