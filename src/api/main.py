"""
剣・盾・兵 FastAPI サーバ
盤面描画側（フロントエンド）にゲームの状態と配置のエンドポイントを提供する
"""

import logging
import uuid
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, field_validator

from .. import config
from ..engine import InvalidPositionError, PieceType, RulesEngine

logger = logging.getLogger(__name__)

app = FastAPI(
    title="剣・盾・兵 API",
    description="剣・盾・兵ゲームのバックエンドAPI",
    version="1.0.0"
)

# CORS設定（フロントエンドからのアクセスを許可）
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ゲームIDごとのエンジン（1ゲーム1インスタンス）
games: Dict[str, RulesEngine] = {}


def parse_piece_type(value: str) -> PieceType:
    """駒の種類を名前（"SWORD"、"shield" など）から取得する"""
    try:
        return PieceType[value.upper()]
    except KeyError:
        raise ValueError(f"Unknown piece type: {value!r}")


# Pydanticモデル（リクエスト/レスポンス用）

class NewGameRequest(BaseModel):
    board_size: Optional[int] = Field(default=None, gt=0, le=19)
    pieces_per_type: Optional[int] = Field(default=None, gt=0, le=99)


class NewGameResponse(BaseModel):
    game_id: str
    message: str
    game_state: dict


class PlaceRequest(BaseModel):
    x: int
    y: int
    piece_type: PieceType

    @field_validator("piece_type", mode="before")
    @classmethod
    def validate_piece_type(cls, value):
        """駒の種類は名前（"SWORD" など）で受け付ける"""
        if isinstance(value, str):
            return parse_piece_type(value)
        return value


class PlaceResponse(BaseModel):
    success: bool
    message: str
    game_state: dict
    legal_moves: Optional[List[dict]] = None


def _get_engine(game_id: str) -> RulesEngine:
    if game_id not in games:
        raise HTTPException(status_code=404, detail="ゲームが見つかりません")
    return games[game_id]


def _game_state(game_id: str, engine: RulesEngine) -> dict:
    state = engine.to_dict()
    state["game_id"] = game_id
    return state


# エンドポイント

@app.get("/api")
async def root():
    """APIルート"""
    return {
        "message": "剣・盾・兵 API へようこそ",
        "version": "1.0.0",
        "endpoints": [
            "/new_game",
            "/place/{game_id}",
            "/get_legal_moves/{game_id}",
            "/get_game/{game_id}",
            "/pieces/{game_id}/{x}/{y}",
            "/delete_game/{game_id}",
        ]
    }


@app.post("/new_game", response_model=NewGameResponse)
async def new_game(request: Optional[NewGameRequest] = None):
    """新しいゲームを開始する（空の盤面から）"""
    request = request or NewGameRequest()
    board_size = request.board_size or config.DEFAULT_BOARD_SIZE
    pieces_per_type = request.pieces_per_type or config.DEFAULT_PIECES_PER_TYPE

    game_id = str(uuid.uuid4())
    engine = RulesEngine(board_size=board_size, pieces_per_type=pieces_per_type)
    games[game_id] = engine
    logger.info("New game %s (board %d, %d pieces per type)", game_id, board_size, pieces_per_type)

    return NewGameResponse(
        game_id=game_id,
        message="新しいゲームを開始しました",
        game_state=_game_state(game_id, engine)
    )


@app.get("/get_game/{game_id}")
async def get_game(game_id: str):
    """ゲームの状態を取得"""
    return _game_state(game_id, _get_engine(game_id))


@app.post("/place/{game_id}", response_model=PlaceResponse)
async def place(game_id: str, request: PlaceRequest):
    """現在のプレイヤーの駒を置く"""
    engine = _get_engine(game_id)

    if engine.status().is_over:
        raise HTTPException(status_code=400, detail="ゲームは既に終了しています")

    player = engine.current_player()
    if not engine.try_place(request.x, request.y, request.piece_type):
        logger.info(
            "Invalid placement in %s: %s %s at (%d, %d)",
            game_id, player.name, request.piece_type.name, request.x, request.y
        )
        return PlaceResponse(
            success=False,
            message="この位置には置けません",
            game_state=_game_state(game_id, engine)
        )

    status = engine.status()
    if status.is_over:
        if status.is_draw:
            message = "ゲーム終了：引き分けです"
        else:
            message = f"ゲーム終了：{status.winner.name}の勝利です"
        return PlaceResponse(
            success=True,
            message=message,
            game_state=_game_state(game_id, engine),
            legal_moves=None
        )

    legal_moves = [move.to_dict() for move in engine.get_legal_moves()]
    return PlaceResponse(
        success=True,
        message="駒を置きました",
        game_state=_game_state(game_id, engine),
        legal_moves=legal_moves
    )


@app.get("/get_legal_moves/{game_id}")
async def get_legal_moves(game_id: str, piece_type: Optional[str] = None):
    """現在のプレイヤーが置ける手を取得"""
    engine = _get_engine(game_id)

    if engine.status().is_over:
        return {"legal_moves": [], "message": "ゲームは終了しています"}

    try:
        selected = parse_piece_type(piece_type) if piece_type else None
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    legal_moves = engine.get_legal_moves(selected)

    return {
        "legal_moves": [move.to_dict() for move in legal_moves],
        "count": len(legal_moves),
        "current_player": engine.current_player().name
    }


@app.get("/pieces/{game_id}/{x}/{y}")
async def get_pieces(game_id: str, x: int, y: int):
    """指定マスの駒を置いた順に取得"""
    engine = _get_engine(game_id)
    try:
        pieces = engine.pieces_at(x, y)
    except InvalidPositionError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "position": [x, y],
        "pieces": [piece.to_dict() for piece in pieces]
    }


@app.delete("/delete_game/{game_id}")
async def delete_game(game_id: str):
    """ゲームを削除"""
    _get_engine(game_id)
    del games[game_id]
    logger.info("Deleted game %s", game_id)
    return {"message": "ゲームを削除しました"}
