"""
ゲームの進行を管理するモジュール
盤面・持ち駒・得点・手番をまとめて持ち、配置の唯一の入口 try_place を提供する
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Tuple

from .board import Board, BOARD_SIZE
from .inventory import Inventory, ScoreBoard
from .move import Move
from .piece import Piece, Player, PieceType, PIECES_PER_TYPE
from .rules import Rules

logger = logging.getLogger(__name__)


class Status(Enum):
    """ゲームの状態"""
    IN_PROGRESS = auto()
    ENDED = auto()


@dataclass(frozen=True)
class GameStatus:
    """ゲームの状態と勝者（引き分けは winner=None）"""

    status: Status
    winner: Optional[Player] = None

    @property
    def is_over(self) -> bool:
        return self.status == Status.ENDED

    @property
    def is_draw(self) -> bool:
        return self.is_over and self.winner is None

    def to_dict(self) -> dict:
        return {
            "status": self.status.name,
            "winner": self.winner.name if self.winner else None,
            "is_draw": self.is_draw,
        }


class RulesEngine:
    """
    1ゲーム分の状態を持つルールエンジン
    新しいゲームは新しいインスタンスで始める（途中でリセットしない）

    スレッドセーフではないので、複数から呼ぶ場合は呼び出し側で直列化すること
    """

    def __init__(self, board_size: int = BOARD_SIZE, pieces_per_type: int = PIECES_PER_TYPE):
        self.board_size = board_size
        self.pieces_per_type = pieces_per_type
        self.board = Board(board_size)
        self.inventory = Inventory(pieces_per_type)
        self.scores = ScoreBoard()
        self._current_player = Player.WHITE
        self._last_move: Optional[Move] = None
        self._is_first_move = True
        self._move_history: List[Move] = []

    # --- 配置 ---

    def try_place(self, x: int, y: int, piece_type: PieceType) -> bool:
        """
        現在のプレイヤーの駒を (x, y) に置く
        返り値: 置けたらTrue。置けない場合は状態を変えずにFalse
        """
        position = (x, y)
        player = self._current_player

        if self.status().is_over:
            logger.debug("Rejected %s %s at %s: game is over", player.name, piece_type.name, position)
            return False

        reason = Rules.get_rejection_reason(
            self.board,
            self.inventory,
            player,
            position,
            piece_type,
            self._last_move,
            self._is_first_move
        )
        if reason is not None:
            logger.debug("Rejected %s %s at %s: %s", player.name, piece_type.name, position, reason)
            return False

        self._place(position, piece_type, player)
        return True

    def _place(self, position: Tuple[int, int], piece_type: PieceType, player: Player):
        """検証済みの配置を適用する"""
        self.board.add_piece(position, Piece(piece_type, player))
        self.inventory.take(player, piece_type)

        Rules.apply_score(self.board, self.scores, position)

        move = Move(position, piece_type, player)
        self._last_move = move
        self._is_first_move = False
        self._move_history.append(move)
        self._current_player = player.opponent

        self._check_end()

    def _check_end(self):
        status = self.status()
        if not status.is_over:
            return
        white = self.scores.get(Player.WHITE)
        black = self.scores.get(Player.BLACK)
        if status.is_draw:
            logger.info("Game over: draw (WHITE %d - BLACK %d)", white, black)
        else:
            logger.info("Game over: %s wins (WHITE %d - BLACK %d)", status.winner.name, white, black)

    # --- 参照（状態は変えない） ---

    def pieces_at(self, x: int, y: int) -> Tuple[Piece, ...]:
        """(x, y) の駒を置いた順に返す。盤面外なら InvalidPositionError"""
        return self.board.get_pieces((x, y))

    def remaining(self, player: Player, piece_type: PieceType) -> int:
        return self.inventory.remaining(player, piece_type)

    def score(self, player: Player) -> int:
        return self.scores.get(player)

    def current_player(self) -> Player:
        return self._current_player

    def status(self) -> GameStatus:
        if Rules.is_game_over(self.inventory):
            return GameStatus(Status.ENDED, Rules.get_winner(self.scores))
        return GameStatus(Status.IN_PROGRESS)

    @property
    def last_move(self) -> Optional[Move]:
        return self._last_move

    @property
    def is_first_move(self) -> bool:
        return self._is_first_move

    @property
    def move_history(self) -> Tuple[Move, ...]:
        return tuple(self._move_history)

    def get_legal_moves(self, piece_type: Optional[PieceType] = None) -> List[Move]:
        """現在のプレイヤーが置ける手の一覧（終局後は空）"""
        if self.status().is_over:
            return []
        return Rules.get_legal_moves(
            self.board,
            self.inventory,
            self._current_player,
            self._last_move,
            self._is_first_move,
            piece_type
        )

    def to_dict(self) -> dict:
        """ゲーム状態を辞書形式に変換"""
        return {
            "board": self.board.to_dict(),
            "current_player": self._current_player.name,
            "move_count": len(self._move_history),
            "last_move": self._last_move.to_dict() if self._last_move else None,
            "remaining": self.inventory.to_dict(),
            "scores": self.scores.to_dict(),
            "status": self.status().to_dict(),
        }

    def __str__(self):
        return str(self.board)
