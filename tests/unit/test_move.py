"""
単体テスト: 手（駒の配置）の表現
"""

import pytest
from dataclasses import FrozenInstanceError
from src.engine import Move, Player, PieceType


class TestMove:
    """手のテストクラス"""

    def test_to_dict(self):
        move = Move((2, 4), PieceType.SHIELD, Player.BLACK)
        assert move.to_dict() == {"to": [2, 4], "piece_type": "SHIELD", "player": "BLACK"}

    def test_str_and_repr(self):
        move = Move((0, 1), PieceType.SWORD, Player.WHITE)
        assert str(move) == "WHITE SWORD -> (0, 1)"
        assert repr(move) == "Move(to=(0, 1), piece=SWORD, player=WHITE)"

    def test_move_is_immutable(self):
        move = Move((0, 0), PieceType.SOLDIER, Player.WHITE)
        with pytest.raises(FrozenInstanceError):
            move.to_pos = (1, 1)

    def test_moves_compare_by_value(self):
        a = Move((3, 3), PieceType.SWORD, Player.BLACK)
        assert a == Move((3, 3), PieceType.SWORD, Player.BLACK)
        assert len({a, Move((3, 3), PieceType.SWORD, Player.BLACK)}) == 1
