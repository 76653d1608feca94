"""
剣・盾・兵のゲームエンジン - パッケージ初期化
"""

from .piece import Piece, Player, PieceType, PIECES_PER_TYPE, PIECE_NAMES
from .board import Board, Stack, BOARD_SIZE
from .exceptions import InvalidPositionError
from .inventory import Inventory, ScoreBoard
from .move import Move
from .rules import Rules, TRIAD_POINTS, MIXED_POINTS
from .game import RulesEngine, GameStatus, Status

__all__ = [
    'Piece',
    'Player',
    'PieceType',
    'PIECES_PER_TYPE',
    'PIECE_NAMES',
    'Board',
    'Stack',
    'BOARD_SIZE',
    'InvalidPositionError',
    'Inventory',
    'ScoreBoard',
    'Move',
    'Rules',
    'TRIAD_POINTS',
    'MIXED_POINTS',
    'RulesEngine',
    'GameStatus',
    'Status',
]
