"""
Иерархия ошибок игры.
Все ошибки восстановимые: протокол ловит их и отбрасывает сообщение.
"""


class TicTacToeError(Exception):
    """Базовая ошибка пакета."""

    code = "ERROR"


class BoardError(TicTacToeError):
    """Недопустимый ход на уровне доски."""


class InvalidCellError(BoardError):
    code = "INVALID_CELL"

    def __init__(self, cell_index):
        self.cell_index = cell_index
        super().__init__(f"Cell {cell_index!r} is outside the board")


class CellOccupiedError(BoardError):
    code = "CELL_OCCUPIED"

    def __init__(self, cell_index: int):
        self.cell_index = cell_index
        super().__init__(f"Cell {cell_index} is already marked")


class SessionError(TicTacToeError):
    """Нарушение правил партии."""


class GameNotInProgressError(SessionError):
    code = "GAME_NOT_IN_PROGRESS"

    def __init__(self, game_id: int, status):
        self.game_id = game_id
        self.status = status
        super().__init__(f"Game {game_id} is {status.value}, not in progress")


class WrongTurnError(SessionError):
    code = "WRONG_TURN"

    def __init__(self, game_id: int, marker, expected):
        self.game_id = game_id
        self.marker = marker
        self.expected = expected
        super().__init__(
            f"Game {game_id}: {marker.value} moved out of turn, expected {expected.value}"
        )


class GameFullError(SessionError):
    code = "GAME_FULL"

    def __init__(self, game_id: int):
        self.game_id = game_id
        super().__init__(f"Game {game_id} already has two players")


class PlayerNotFoundError(SessionError):
    code = "PLAYER_NOT_FOUND"

    def __init__(self, game_id: int, marker=None):
        self.game_id = game_id
        self.marker = marker
        if marker is None:
            super().__init__(f"Connection is not a player of game {game_id}")
        else:
            super().__init__(f"Game {game_id} has no player {marker.value}")


class GameNotFoundError(TicTacToeError):
    code = "GAME_NOT_FOUND"

    def __init__(self, game_id):
        self.game_id = game_id
        super().__init__(f"Game {game_id!r} not found")


class MalformedMessageError(TicTacToeError):
    code = "MALFORMED_MESSAGE"
