"""
単体テスト: 得点計算
一人で三種類 → 3点（優先）、両者合わせて三種類 → 種類数が多い方に1点
"""

import pytest
from src.engine import (
    Board, Piece, Player, PieceType, Rules, ScoreBoard, Stack,
    TRIAD_POINTS, MIXED_POINTS,
)


def make_stack(*pieces):
    stack = Stack()
    for piece_type, owner in pieces:
        assert stack.add_piece(Piece(piece_type, owner))
    return stack


W, B = Player.WHITE, Player.BLACK
SWORD, SHIELD, SOLDIER = PieceType.SWORD, PieceType.SHIELD, PieceType.SOLDIER


class TestScoreCell:
    """マスの得点判定"""

    def test_empty_cell_scores_nothing(self):
        assert Rules.score_cell(Stack()) is None

    def test_two_types_score_nothing(self):
        stack = make_stack((SWORD, W), (SHIELD, B), (SHIELD, W))
        assert Rules.score_cell(stack) is None

    @pytest.mark.parametrize("player", [W, B])
    def test_triad(self, player):
        stack = make_stack((SWORD, player), (SHIELD, player), (SOLDIER, player))
        assert Rules.score_cell(stack) == (player, TRIAD_POINTS)
        assert TRIAD_POINTS == 3

    def test_triad_beats_mixed(self):
        """一人で三種類あれば、両者合わせた判定は行わない"""
        stack = make_stack(
            (SWORD, B), (SWORD, W), (SHIELD, W), (SOLDIER, W), (SHIELD, B)
        )
        assert Rules.score_cell(stack) == (W, TRIAD_POINTS)

    def test_triad_checks_white_first(self):
        """両者とも三種類揃っている場合は白が先に判定される"""
        stack = make_stack(
            (SWORD, W), (SHIELD, W), (SOLDIER, W),
            (SWORD, B), (SHIELD, B), (SOLDIER, B),
        )
        assert Rules.score_cell(stack) == (W, TRIAD_POINTS)

    def test_mixed_majority_white(self):
        stack = make_stack((SWORD, W), (SHIELD, B), (SOLDIER, W))
        assert Rules.score_cell(stack) == (W, MIXED_POINTS)
        assert MIXED_POINTS == 1

    def test_mixed_majority_black(self):
        stack = make_stack((SOLDIER, B), (SWORD, W), (SHIELD, B))
        assert Rules.score_cell(stack) == (B, MIXED_POINTS)

    def test_mixed_tie_goes_to_white(self):
        """種類数が同じなら白が得点する"""
        stack = make_stack((SWORD, W), (SHIELD, W), (SHIELD, B), (SOLDIER, B))
        assert Rules.score_cell(stack) == (W, MIXED_POINTS)


class TestApplyScore:
    """得点の加算"""

    def test_apply_score_adds_points(self):
        board = Board()
        scores = ScoreBoard()
        for piece_type in PieceType:
            board.add_piece((0, 0), Piece(piece_type, B))

        award = Rules.apply_score(board, scores, (0, 0))

        assert award == (B, 3)
        assert scores.get(B) == 3
        assert scores.get(W) == 0

    def test_apply_score_without_award(self):
        board = Board()
        scores = ScoreBoard()
        board.add_piece((1, 1), Piece(SWORD, W))
        assert Rules.apply_score(board, scores, (1, 1)) is None
        assert scores.to_dict() == {"WHITE": 0, "BLACK": 0}
