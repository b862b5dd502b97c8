"""
Реестр партий (in-memory) и пейринг.
Ожидающая партия ищется в порядке создания — самая старая первой.
"""
import itertools
import logging
import threading
from typing import Any

from .game import Game, Player
from .errors import GameNotFoundError

logger = logging.getLogger(__name__)


class GameRegistry:
    def __init__(self):
        self._games: dict[int, Game] = {}
        self._ids = itertools.count(1)
        self._lock = threading.RLock()

    def find_or_create_game(self) -> Game:
        """Вернуть ожидающую партию или создать новую."""
        with self._lock:
            for game in self._games.values():
                if game.is_waiting:
                    return game
            game = Game(id=next(self._ids))
            self._games[game.id] = game
            logger.info("Game %s: created", game.id)
            return game

    def join(self, channel: Any) -> tuple[Game, Player]:
        """
        Атомарно найти партию и добавить в неё игрока.
        Два одновременных входа попадают в одну партию.
        """
        with self._lock:
            game = self.find_or_create_game()
            player = game.add_player(channel)
            return game, player

    def get(self, game_id: int) -> Game:
        with self._lock:
            game = self._games.get(game_id)
        if game is None:
            raise GameNotFoundError(game_id)
        return game

    def discard(self, game_id: int) -> bool:
        """Убрать партию. Возвращает True если она была в реестре."""
        with self._lock:
            return self._games.pop(game_id, None) is not None

    def games(self) -> list[Game]:
        with self._lock:
            return list(self._games.values())

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)
