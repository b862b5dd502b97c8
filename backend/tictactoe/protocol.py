"""
Протокол: перевод событий соединения в операции партии и обратно.
Методы синхронные и возвращают список исходящих сообщений;
отправкой занимается обработчик WebSocket.
"""
import logging
from dataclasses import dataclass
from typing import Any

from .constants import GameResult, GameStatus, Marker, Turn
from .errors import PlayerNotFoundError, TicTacToeError
from .game import Game
from .messages import (
    ErrorMessage,
    GameOverMessage,
    HandshakeMessage,
    OpponentUpdateMessage,
    TurnMessage,
    dump,
    parse_move,
)
from .registry import GameRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outbound:
    channel: Any
    payload: dict


class MessageProtocol:
    def __init__(
        self,
        registry: GameRegistry,
        trust_client_marker: bool = False,
        evict_abandoned: bool = True,
        notify_errors: bool = False,
    ):
        self.registry = registry
        self.trust_client_marker = trust_client_marker
        self.evict_abandoned = evict_abandoned
        self.notify_errors = notify_errors
        # соединение -> id партии, в которую оно вошло
        self._sessions: dict[Any, int] = {}

    @classmethod
    def from_config(cls, registry: GameRegistry, config) -> "MessageProtocol":
        return cls(
            registry,
            trust_client_marker=config.trust_client_marker,
            evict_abandoned=config.evict_abandoned,
            notify_errors=config.notify_errors,
        )

    def on_connect(self, channel: Any) -> list[Outbound]:
        """Пейринг нового соединения: handshake и, если партия началась, turn обоим."""
        game, player = self.registry.join(channel)
        self._sessions[channel] = game.id
        logger.info("Game %s: player %s joined", game.id, player.marker.value)

        out = [Outbound(channel, dump(HandshakeMessage(gameId=game.id, playerLetter=player.marker)))]
        if game.status is GameStatus.IN_PROGRESS:
            out.append(Outbound(
                game.get_player(Marker.X).channel,
                dump(TurnMessage(turn=Turn.YOUR_TURN)),
            ))
            out.append(Outbound(
                game.get_player(Marker.O).channel,
                dump(TurnMessage(turn=Turn.WAITING)),
            ))
        return out

    def on_message(self, channel: Any, raw: str) -> list[Outbound]:
        """
        Обработать ход. Ошибки игры не меняют состояние и по умолчанию
        молча отбрасываются.
        """
        try:
            return self._apply_move(channel, raw)
        except TicTacToeError as e:
            logger.info("Move rejected (%s): %s", e.code, e)
            if self.notify_errors:
                return [Outbound(channel, dump(ErrorMessage(code=e.code, message=str(e))))]
            return []

    def on_disconnect(self, channel: Any) -> None:
        game_id = self._sessions.pop(channel, None)
        if game_id is None or not self.evict_abandoned:
            return
        try:
            game = self.registry.get(game_id)
        except TicTacToeError:
            return
        # Игрок ушёл, не дождавшись соперника — партия никому не нужна
        if game.is_waiting and self.registry.discard(game_id):
            logger.info("Game %s: discarded, waiting player left", game_id)

    def _apply_move(self, channel: Any, raw: str) -> list[Outbound]:
        move = parse_move(raw)
        game = self.registry.get(move.gameId)
        marker = move.player
        if not self.trust_client_marker:
            self._check_binding(channel, game, marker)

        player = game.get_player(marker)
        opponent = game.get_opponent(marker)
        outcome = game.mark_cell(move.grid_id_as_int, marker)
        logger.info(
            "Game %s: %s marked %s (winner=%s tied=%s)",
            game.id, marker.value, outcome.cell_index, outcome.winner, outcome.tied,
        )

        out = [Outbound(opponent.channel, dump(OpponentUpdateMessage(
            markedBy=marker,
            gridId=move.gridId,
            winner=outcome.winner,
            tied=outcome.tied,
        )))]
        if outcome.winner:
            out.append(Outbound(player.channel, dump(GameOverMessage(result=GameResult.YOU_WIN))))
        elif outcome.tied:
            out.append(Outbound(player.channel, dump(GameOverMessage(result=GameResult.TIED))))
        return out

    def _check_binding(self, channel: Any, game: Game, marker: Marker) -> None:
        """Соединение может ходить только своей меткой в своей партии."""
        if self._sessions.get(channel) != game.id or game.marker_for(channel) is not marker:
            raise PlayerNotFoundError(game.id, marker)
