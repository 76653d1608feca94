"""
盤面を管理するモジュール
"""

from typing import List, Set, Tuple
from .exceptions import InvalidPositionError
from .piece import Piece, Player, PieceType

# 盤面サイズ（デフォルト）
BOARD_SIZE = 5


class Stack:
    """一つのマスに積まれた駒を管理するクラス"""

    def __init__(self):
        self.pieces: List[Piece] = []  # 置かれた順の駒のリスト

    def __len__(self):
        return len(self.pieces)

    def is_empty(self) -> bool:
        return len(self.pieces) == 0

    def has_piece(self, piece_type: PieceType, owner: Player) -> bool:
        """同じ種類・同じ持ち主の駒が既にあるか確認"""
        return any(
            piece.piece_type == piece_type and piece.owner == owner
            for piece in self.pieces
        )

    def add_piece(self, piece: Piece) -> bool:
        """
        スタックの一番上に駒を追加
        返り値: 成功したらTrue、同じ種類・持ち主の駒が既にあればFalse
        """
        if self.has_piece(piece.piece_type, piece.owner):
            return False
        self.pieces.append(piece)
        return True

    def get_types(self, owner: Player) -> Set[PieceType]:
        """指定プレイヤーがこのマスに置いた駒の種類の集合"""
        return {piece.piece_type for piece in self.pieces if piece.owner == owner}

    def get_all_types(self) -> Set[PieceType]:
        """両プレイヤー合わせた駒の種類の集合"""
        return {piece.piece_type for piece in self.pieces}

    def __str__(self):
        if self.is_empty():
            return "   "
        return "/".join(str(piece) for piece in self.pieces)

    def to_dict(self) -> List[dict]:
        """スタックを辞書形式に変換（API用）"""
        return [piece.to_dict() for piece in self.pieces]


class Board:
    """ゲームボードを表すクラス"""

    def __init__(self, size: int = BOARD_SIZE):
        if size <= 0:
            raise ValueError(f"Board size must be positive: {size}")
        self.size = size
        # stacks[x][y]
        self.stacks: List[List[Stack]] = [
            [Stack() for _ in range(size)]
            for _ in range(size)
        ]

    def is_valid_position(self, position: Tuple[int, int]) -> bool:
        """位置が盤面内か確認"""
        x, y = position
        return 0 <= x < self.size and 0 <= y < self.size

    def get_stack(self, position: Tuple[int, int]) -> Stack:
        """指定位置のスタックを取得"""
        if not self.is_valid_position(position):
            raise InvalidPositionError(position)
        x, y = position
        return self.stacks[x][y]

    def get_pieces(self, position: Tuple[int, int]) -> Tuple[Piece, ...]:
        """指定位置の駒を置いた順に返す（コピー）"""
        return tuple(self.get_stack(position).pieces)

    def add_piece(self, position: Tuple[int, int], piece: Piece) -> bool:
        """指定位置に駒を追加"""
        if not self.is_valid_position(position):
            return False
        return self.get_stack(position).add_piece(piece)

    def positions(self):
        """全マスの座標を順に返す"""
        for x in range(self.size):
            for y in range(self.size):
                yield (x, y)

    def __str__(self):
        """盤面の文字列表現を返す（上がy最大）"""
        cell_width = 12
        separator_length = self.size * (cell_width + 1) + 1

        result = []

        # x座標ヘッダー
        header = "   "
        for x in range(self.size):
            header += f"{x:^{cell_width}}|"
        result.append(header)
        result.append("  " + "-" * separator_length)

        for y in reversed(range(self.size)):
            row_str = f"{y} |"
            for x in range(self.size):
                stack = self.stacks[x][y]
                if stack.is_empty():
                    row_str += " " * cell_width + "|"
                else:
                    row_str += f"{str(stack):^{cell_width}}|"
            result.append(row_str)
            result.append("  " + "-" * separator_length)

        return "\n".join(result)

    def to_dict(self) -> dict:
        """盤面を辞書形式に変換（API用）、board[x][y] がスタック"""
        return {
            "size": self.size,
            "board": [
                [self.stacks[x][y].to_dict() for y in range(self.size)]
                for x in range(self.size)
            ],
        }
