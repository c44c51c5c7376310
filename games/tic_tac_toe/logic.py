import logging
from enum import Enum

logger = logging.getLogger(__name__)

ROWS = 3
COLS = 3


class Mark(Enum):
    EMPTY = ''
    X = 'X'
    O = 'O'


class GamePhase(Enum):
    PLAYING = 'playing'
    DRAW = 'draw'
    X_WON = 'x_won'
    O_WON = 'o_won'


WIN_PHASES = {
    Mark.X: GamePhase.X_WON,
    Mark.O: GamePhase.O_WON,
}


class TicTacToeLogic:
    def __init__(self):
        self.reset_game()

    def reset_game(self):
        self.board = [[Mark.EMPTY for _ in range(COLS)] for _ in range(ROWS)]
        self.current_player = Mark.X  # X всегда ходит первым
        self.phase = GamePhase.PLAYING
        self.winning_line = []  # Координаты победной линии [(0,0), (0,1), (0,2)]

    @property
    def game_over(self):
        return self.phase != GamePhase.PLAYING

    @property
    def winner(self):
        if self.phase == GamePhase.X_WON:
            return Mark.X
        if self.phase == GamePhase.O_WON:
            return Mark.O
        return None

    def cell(self, row, col):
        return self.board[row][col]

    def in_bounds(self, row, col):
        return 0 <= row < ROWS and 0 <= col < COLS

    def apply_move(self, row, col):
        """Ставит знак текущего игрока в клетку (row, col).

        Недопустимый ход (игра окончена, клетка вне поля или занята)
        просто игнорируется и возвращает False.
        """
        if self.game_over:
            return False

        if not self.in_bounds(row, col):
            return False

        if self.board[row][col] != Mark.EMPTY:
            return False

        mark = self.current_player
        self.board[row][col] = mark

        # Сначала победа, потом ничья
        if self.has_won(mark, row, col):
            self.phase = WIN_PHASES[mark]
            self.winning_line = self._find_winning_line(mark, row, col)
        elif self.is_draw():
            self.phase = GamePhase.DRAW
        else:
            self.phase = GamePhase.PLAYING
            self.current_player = Mark.O if mark == Mark.X else Mark.X

        if self.game_over:
            logger.debug("Game finished: %s", self.phase.value)
        return True

    def has_won(self, mark, row, col):
        b = self.board
        return (
            (b[row][0] == mark and b[row][1] == mark and b[row][2] == mark)
            or (b[0][col] == mark and b[1][col] == mark and b[2][col] == mark)
            # Обе диагонали проверяются всегда
            or (b[0][0] == mark and b[1][1] == mark and b[2][2] == mark)
            or (b[0][2] == mark and b[1][1] == mark and b[2][0] == mark)
        )

    def is_draw(self):
        for row in self.board:
            if Mark.EMPTY in row:
                return False
        return True

    def _find_winning_line(self, mark, row, col):
        candidates = [
            [(row, c) for c in range(COLS)],
            [(r, col) for r in range(ROWS)],
            [(0, 0), (1, 1), (2, 2)],
            [(0, 2), (1, 1), (2, 0)],
        ]
        for line in candidates:
            if all(self.board[r][c] == mark for r, c in line):
                return line
        return []
