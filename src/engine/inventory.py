"""
持ち駒と得点の管理
プレイヤー・駒種は数が固定なので、Enumの値をインデックスにした配列で持つ
"""

from typing import Dict, List, Optional
from .piece import Player, PieceType, PIECES_PER_TYPE


class Inventory:
    """各プレイヤーの残り駒数"""

    def __init__(self, pieces_per_type: int = PIECES_PER_TYPE):
        if pieces_per_type <= 0:
            raise ValueError(f"pieces_per_type must be positive: {pieces_per_type}")
        self.pieces_per_type = pieces_per_type
        # counts[player.value][piece_type.value]
        self.counts: List[List[int]] = [
            [pieces_per_type for _ in PieceType]
            for _ in Player
        ]

    def remaining(self, player: Player, piece_type: PieceType) -> int:
        return self.counts[player.value][piece_type.value]

    def has_piece(self, player: Player, piece_type: PieceType) -> bool:
        return self.remaining(player, piece_type) > 0

    def take(self, player: Player, piece_type: PieceType):
        """駒を一つ使う（残りが0なら ValueError）"""
        if not self.has_piece(player, piece_type):
            raise ValueError(
                f"No {piece_type.name} left for {player.name}"
            )
        self.counts[player.value][piece_type.value] -= 1

    def total(self, player: Optional[Player] = None) -> int:
        """残り駒の合計（player省略時は両者の合計）"""
        players = [player] if player is not None else list(Player)
        return sum(sum(self.counts[p.value]) for p in players)

    def is_exhausted(self) -> bool:
        """全プレイヤーの全駒種が0か"""
        return self.total() == 0

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        return {
            player.name: {
                piece_type.name: self.remaining(player, piece_type)
                for piece_type in PieceType
            }
            for player in Player
        }


class ScoreBoard:
    """各プレイヤーの得点（加算のみ）"""

    def __init__(self):
        self.scores: List[int] = [0 for _ in Player]

    def get(self, player: Player) -> int:
        return self.scores[player.value]

    def add(self, player: Player, points: int):
        if points < 0:
            raise ValueError(f"Points must not be negative: {points}")
        self.scores[player.value] += points

    def leader(self) -> Optional[Player]:
        """得点が真に多いプレイヤー（同点ならNone）"""
        white = self.get(Player.WHITE)
        black = self.get(Player.BLACK)
        if white > black:
            return Player.WHITE
        if black > white:
            return Player.BLACK
        return None

    def to_dict(self) -> Dict[str, int]:
        return {player.name: self.get(player) for player in Player}
