"""Константы игры: метки игроков, статусы партии, линии победы."""
from enum import Enum


class Marker(str, Enum):
    X = "X"
    O = "O"  # noqa: E741

    @property
    def opponent(self) -> "Marker":
        return Marker.O if self is Marker.X else Marker.X


class GameStatus(str, Enum):
    WAITING = "waiting"
    IN_PROGRESS = "in_progress"
    FINISHED = "finished"


class Turn(str, Enum):
    YOUR_TURN = "your_turn"
    WAITING = "waiting"


class GameResult(str, Enum):
    YOU_WIN = "YOU_WIN"
    TIED = "TIED"


BOARD_SIDE = 3
BOARD_CELLS = BOARD_SIDE * BOARD_SIDE

# Порядок заполнения: X всегда первый, O второй
MARKER_ORDER: tuple[Marker, ...] = (Marker.X, Marker.O)

WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # строки
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # столбцы
    (0, 4, 8), (2, 4, 6),              # диагонали
)
