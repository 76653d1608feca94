"""
駒の種類とプレイヤーを定義するモジュール
"""

from dataclasses import dataclass
from enum import Enum


class Player(Enum):
    """プレイヤーの定義"""
    WHITE = 0  # 先手（白）
    BLACK = 1  # 後手（黒）

    @property
    def opponent(self):
        """相手プレイヤーを返す"""
        return Player.BLACK if self == Player.WHITE else Player.WHITE


class PieceType(Enum):
    """駒の種類"""
    SWORD = 0    # 剣
    SHIELD = 1   # 盾
    SOLDIER = 2  # 兵


# 各プレイヤーが駒種ごとに持つ駒の初期数
PIECES_PER_TYPE = 7

# 駒の表示名
PIECE_NAMES = {
    PieceType.SWORD: "剣",
    PieceType.SHIELD: "盾",
    PieceType.SOLDIER: "兵",
}


@dataclass(frozen=True)
class Piece:
    """盤上に置かれた駒（置いた後は変更されない）"""

    piece_type: PieceType
    owner: Player

    def __str__(self):
        """駒の文字列表現（例: 'w剣', 'b盾'）"""
        prefix = 'w' if self.owner == Player.WHITE else 'b'
        return f"{prefix}{PIECE_NAMES[self.piece_type]}"

    def __repr__(self):
        return f"Piece({self.piece_type.name}, {self.owner.name})"

    def to_dict(self) -> dict:
        """駒を辞書形式に変換（API用）"""
        return {
            "type": self.piece_type.name,
            "owner": self.owner.name,
        }
