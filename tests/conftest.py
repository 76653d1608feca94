"""
pytest共通設定とフィクスチャ
"""

import pytest
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def empty_board():
    """空の5x5盤面を提供するフィクスチャ"""
    from src.engine import Board
    return Board()


@pytest.fixture
def engine():
    """デフォルト設定（5x5、各7個）のエンジン"""
    from src.engine import RulesEngine
    return RulesEngine()


@pytest.fixture
def small_engine():
    """終局まで短い 3x3、各1個のエンジン"""
    from src.engine import RulesEngine
    return RulesEngine(board_size=3, pieces_per_type=1)


@pytest.fixture
def white_player():
    """白プレイヤーを提供するフィクスチャ"""
    from src.engine import Player
    return Player.WHITE


@pytest.fixture
def black_player():
    """黒プレイヤーを提供するフィクスチャ"""
    from src.engine import Player
    return Player.BLACK
