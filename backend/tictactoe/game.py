"""
Партия: доска, два игрока и очередь ходов.
Партия не пишет в соединения — она возвращает факты о ходе,
а уведомления собирает протокол.
"""
import logging
import threading
from dataclasses import dataclass, field
from typing import Any

from .board import Board
from .constants import MARKER_ORDER, GameStatus, Marker
from .errors import (
    GameFullError,
    GameNotInProgressError,
    PlayerNotFoundError,
    WrongTurnError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Player:
    marker: Marker
    channel: Any  # Connection; игрок его не закрывает


@dataclass(frozen=True)
class MoveOutcome:
    marker: Marker
    cell_index: int
    winner: bool = False
    tied: bool = False

    @property
    def finished(self) -> bool:
        return self.winner or self.tied


@dataclass
class Game:
    id: int
    board: Board = field(default_factory=Board)
    players: dict[Marker, Player] = field(default_factory=dict)
    status: GameStatus = GameStatus.WAITING
    current_turn: Marker = Marker.X
    winner: Marker | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def add_player(self, channel: Any) -> Player:
        """
        Добавить игрока: первый получает X, второй O.
        Со вторым игроком партия переходит в IN_PROGRESS.
        """
        with self._lock:
            if len(self.players) >= len(MARKER_ORDER):
                raise GameFullError(self.id)
            marker = MARKER_ORDER[len(self.players)]
            player = Player(marker=marker, channel=channel)
            self.players[marker] = player
            if len(self.players) == len(MARKER_ORDER):
                self.status = GameStatus.IN_PROGRESS
                logger.info("Game %s: started", self.id)
            return player

    def mark_cell(self, cell_index: int, marker: Marker) -> MoveOutcome:
        """
        Сделать ход. При любой ошибке состояние партии не меняется.
        Победа проверяется ровно один раз, ничья — только без победителя.
        """
        with self._lock:
            if self.status is not GameStatus.IN_PROGRESS:
                raise GameNotInProgressError(self.id, self.status)
            if marker is not self.current_turn:
                raise WrongTurnError(self.id, marker, self.current_turn)
            self.board.mark(cell_index, marker)

            winner = self.board.is_winner(marker)
            tied = not winner and self.board.is_tied()
            if winner:
                self.winner = marker
                self.status = GameStatus.FINISHED
            elif tied:
                self.status = GameStatus.FINISHED
            else:
                self.current_turn = marker.opponent
            return MoveOutcome(marker=marker, cell_index=cell_index, winner=winner, tied=tied)

    def get_player(self, marker: Marker) -> Player:
        player = self.players.get(marker)
        if player is None:
            raise PlayerNotFoundError(self.id, marker)
        return player

    def get_opponent(self, marker: Marker) -> Player:
        return self.get_player(marker.opponent)

    def marker_for(self, channel: Any) -> Marker:
        """Метка, закреплённая за соединением при входе в партию."""
        for player in self.players.values():
            if player.channel is channel:
                return player.marker
        raise PlayerNotFoundError(self.id)

    @property
    def is_waiting(self) -> bool:
        return self.status is GameStatus.WAITING
