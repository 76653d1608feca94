"""
エンジンの例外定義
"""

from typing import Tuple


class InvalidPositionError(ValueError):
    """盤面外の座標が指定された"""

    def __init__(self, position: Tuple[int, int]):
        self.position = position
        super().__init__(f"Invalid position: {position}")
