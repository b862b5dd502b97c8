"""
Форматы сообщений WebSocket.
Каждый кадр — один JSON-объект; у серверных сообщений есть поле type.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .constants import GameResult, Marker, Turn
from .errors import MalformedMessageError

MAX_GRID_ID_DIGITS = 9


class MoveMessage(BaseModel):
    """Ход от клиента: {gameId, player, gridId}."""

    model_config = ConfigDict(extra="ignore")

    gameId: int
    player: Marker
    gridId: str

    @field_validator("gridId", mode="before")
    @classmethod
    def grid_id_numeric(cls, v):
        if isinstance(v, bool):
            raise ValueError("gridId must be numeric")
        if isinstance(v, int):
            v = str(v)
        if not isinstance(v, str):
            raise ValueError("gridId must be numeric")
        v = v.strip()
        digits = v[1:] if v.startswith("-") else v
        # Только ASCII-цифры и короткие номера: int() не должен падать
        if not digits.isascii() or not digits.isdigit() or len(digits) > MAX_GRID_ID_DIGITS:
            raise ValueError("gridId must be numeric")
        int(v)
        return v

    @property
    def grid_id_as_int(self) -> int:
        return int(self.gridId)


class HandshakeMessage(BaseModel):
    type: Literal["handshake"] = "handshake"
    gameId: int
    playerLetter: Marker


class TurnMessage(BaseModel):
    type: Literal["turn"] = "turn"
    turn: Turn


class OpponentUpdateMessage(BaseModel):
    type: Literal["response"] = "response"
    markedBy: Marker
    gridId: str
    winner: bool
    tied: bool


class GameOverMessage(BaseModel):
    type: Literal["game_over"] = "game_over"
    result: GameResult


class ErrorMessage(BaseModel):
    type: Literal["error"] = "error"
    code: str
    message: str


def parse_move(raw: str | bytes) -> MoveMessage:
    """Разобрать кадр с ходом; при нарушении схемы — MalformedMessageError."""
    try:
        return MoveMessage.model_validate_json(raw)
    except ValidationError as e:
        raise MalformedMessageError(
            f"Invalid move message: {e.error_count()} error(s)"
        ) from e


def dump(message: BaseModel) -> dict:
    return message.model_dump(mode="json")
