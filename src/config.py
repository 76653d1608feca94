"""
環境変数による設定
"""

import os

from .engine.board import BOARD_SIZE
from .engine.piece import PIECES_PER_TYPE

DEFAULT_BOARD_SIZE = int(os.getenv("KISHI_BOARD_SIZE", str(BOARD_SIZE)))
DEFAULT_PIECES_PER_TYPE = int(os.getenv("KISHI_PIECES_PER_TYPE", str(PIECES_PER_TYPE)))

HOST = os.getenv("KISHI_HOST", "0.0.0.0")
PORT = int(os.getenv("KISHI_PORT", "8001"))
LOG_LEVEL = os.getenv("KISHI_LOG_LEVEL", "info")

CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")
