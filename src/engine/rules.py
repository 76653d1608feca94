"""
ルール判定を行うモジュール
配置の合法性、得点計算、終局判定
"""

import logging
from typing import List, Optional, Tuple
from .board import Board, Stack
from .inventory import Inventory, ScoreBoard
from .move import Move
from .piece import Player, PieceType

logger = logging.getLogger(__name__)

# 剣の後の盾が置ける距離（マンハッタン距離）
SWORD_SHIELD_MAX_DISTANCE = 2

# 一人で三種類揃えた時の得点
TRIAD_POINTS = 3
# 両者合わせて三種類揃えた時の得点
MIXED_POINTS = 1


class Rules:
    """ルールを管理するクラス（状態を持たない）"""

    @staticmethod
    def get_rejection_reason(
        board: Board,
        inventory: Inventory,
        player: Player,
        to_pos: Tuple[int, int],
        piece_type: PieceType,
        last_move: Optional[Move] = None,
        is_first_move: bool = True
    ) -> Optional[str]:
        """
        配置できない理由を返す（置ける場合はNone）
        判定順: 盤面内 → 持ち駒 → 同種の重複 → 剣と盾の隣接ルール
        """
        if not board.is_valid_position(to_pos):
            return "out of bounds"

        if not inventory.has_piece(player, piece_type):
            return "no pieces left"

        if board.get_stack(to_pos).has_piece(piece_type, player):
            return "duplicate piece in cell"

        if not Rules.is_valid_placement(to_pos, piece_type, last_move, is_first_move):
            return "shield too far from last sword"

        return None

    @staticmethod
    def can_place(
        board: Board,
        inventory: Inventory,
        player: Player,
        to_pos: Tuple[int, int],
        piece_type: PieceType,
        last_move: Optional[Move] = None,
        is_first_move: bool = True
    ) -> bool:
        """指定の駒を指定位置に置けるか"""
        reason = Rules.get_rejection_reason(
            board, inventory, player, to_pos, piece_type, last_move, is_first_move
        )
        return reason is None

    @staticmethod
    def is_valid_placement(
        to_pos: Tuple[int, int],
        piece_type: PieceType,
        last_move: Optional[Move],
        is_first_move: bool
    ) -> bool:
        """
        直前の駒による配置制限
        剣の直後の盾は、剣と同じ行か列で距離2以内にしか置けない
        """
        # 第一手はどこでも置ける
        if is_first_move or last_move is None:
            return True

        if last_move.piece_type == PieceType.SWORD and piece_type == PieceType.SHIELD:
            x, y = to_pos
            last_x, last_y = last_move.to_pos
            distance = abs(x - last_x) + abs(y - last_y)
            return distance <= SWORD_SHIELD_MAX_DISTANCE and (x == last_x or y == last_y)

        return True

    @staticmethod
    def get_legal_moves(
        board: Board,
        inventory: Inventory,
        player: Player,
        last_move: Optional[Move] = None,
        is_first_move: bool = True,
        piece_type: Optional[PieceType] = None
    ) -> List[Move]:
        """指定プレイヤーが置ける手をすべて取得"""
        piece_types = [piece_type] if piece_type is not None else list(PieceType)
        legal_moves = []

        for candidate_type in piece_types:
            if not inventory.has_piece(player, candidate_type):
                continue
            for position in board.positions():
                if Rules.can_place(
                    board, inventory, player, position, candidate_type,
                    last_move, is_first_move
                ):
                    legal_moves.append(Move(position, candidate_type, player))

        return legal_moves

    @staticmethod
    def score_cell(stack: Stack) -> Optional[Tuple[Player, int]]:
        """
        マスの駒全体から得点を判定する
        返り値: (得点するプレイヤー, 点数) または None

        - 一人で三種類を揃えている → そのプレイヤーに3点（これが優先）
        - 両者合わせて三種類ある → 種類数が多い方に1点
          種類数が同じ場合は白に入る
        """
        player_types = {player: stack.get_types(player) for player in Player}

        for player in Player:
            if len(player_types[player]) == len(PieceType):
                return player, TRIAD_POINTS

        if len(stack.get_all_types()) == len(PieceType):
            # TODO: 同数の場合に白が得点する扱いはゲームデザインとして要確認
            white_count = len(player_types[Player.WHITE])
            black_count = len(player_types[Player.BLACK])
            majority = Player.BLACK if black_count > white_count else Player.WHITE
            return majority, MIXED_POINTS

        return None

    @staticmethod
    def apply_score(board: Board, scores: ScoreBoard, position: Tuple[int, int]) -> Optional[Tuple[Player, int]]:
        """配置したマスの得点を加算する"""
        award = Rules.score_cell(board.get_stack(position))
        if award is not None:
            player, points = award
            scores.add(player, points)
            logger.debug("%s scores %d at %s", player.name, points, position)
        return award

    @staticmethod
    def is_game_over(inventory: Inventory) -> bool:
        """両プレイヤーの駒がすべて無くなったら終局"""
        return inventory.is_exhausted()

    @staticmethod
    def get_winner(scores: ScoreBoard) -> Optional[Player]:
        """得点が多い方が勝ち、同点は引き分け（None）"""
        return scores.leader()
