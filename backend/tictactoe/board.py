"""Доска 3x3: отметка клеток, проверка победы и ничьей."""
from .constants import BOARD_CELLS, WIN_LINES, Marker
from .errors import CellOccupiedError, InvalidCellError


class Board:
    def __init__(self):
        self._cells: list[Marker | None] = [None] * BOARD_CELLS

    @property
    def cells(self) -> tuple[Marker | None, ...]:
        return tuple(self._cells)

    def cell(self, index: int) -> Marker | None:
        _check_index(index)
        return self._cells[index]

    def mark(self, index: int, marker: Marker) -> None:
        """
        Поставить метку в пустую клетку.
        Занятая клетка никогда не перезаписывается.
        """
        _check_index(index)
        if self._cells[index] is not None:
            raise CellOccupiedError(index)
        self._cells[index] = marker

    def is_winner(self, marker: Marker) -> bool:
        return any(
            all(self._cells[i] is marker for i in line)
            for line in WIN_LINES
        )

    def is_full(self) -> bool:
        return all(c is not None for c in self._cells)

    def is_tied(self) -> bool:
        """Ничья: доска заполнена и ни у кого нет линии."""
        if not self.is_full():
            return False
        return not any(self.is_winner(m) for m in Marker)

    def empty_cells(self) -> list[int]:
        return [i for i, c in enumerate(self._cells) if c is None]

    def __str__(self) -> str:
        rows = []
        for r in range(0, BOARD_CELLS, 3):
            rows.append("".join(c.value if c else "." for c in self._cells[r:r + 3]))
        return "\n".join(rows)


def _check_index(index) -> None:
    # bool — подкласс int, но номером клетки не является
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidCellError(index)
    if not 0 <= index < BOARD_CELLS:
        raise InvalidCellError(index)
