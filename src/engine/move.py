"""
一手（駒の配置）を表現するモジュール
"""

from dataclasses import dataclass
from typing import Tuple
from .piece import PieceType, Player


@dataclass(frozen=True)
class Move:
    """駒を一つ置く手を表すクラス"""

    to_pos: Tuple[int, int]  # 置いたマス (x, y)
    piece_type: PieceType
    player: Player

    def __str__(self):
        return f"{self.player.name} {self.piece_type.name} -> {self.to_pos}"

    def __repr__(self):
        return (
            f"Move(to={self.to_pos}, "
            f"piece={self.piece_type.name}, "
            f"player={self.player.name})"
        )

    def to_dict(self) -> dict:
        """手を辞書形式に変換（API用）"""
        return {
            "to": list(self.to_pos),
            "piece_type": self.piece_type.name,
            "player": self.player.name,
        }
