import logging

from PyQt6.QtWidgets import QWidget, QLabel, QVBoxLayout
from PyQt6.QtGui import QPainter, QPen, QColor, QFont
from PyQt6.QtCore import Qt, pyqtSignal

from core.base_window import FixedWindow
from core.settings import SettingsManager
from games.tic_tac_toe.logic import TicTacToeLogic, Mark, GamePhase, ROWS, COLS

logger = logging.getLogger(__name__)

GAME_OVER_MESSAGES = {
    GamePhase.DRAW: "It's a draw! Click to play again.",
    GamePhase.X_WON: "X won! Click to play again.",
    GamePhase.O_WON: "O won! Click to play again.",
}


class BoardCanvas(QWidget):
    # Пиксельные координаты левого клика
    clicked = pyqtSignal(int, int)

    def __init__(self, logic, settings, parent=None):
        super().__init__(parent)
        self.logic = logic
        self.settings = settings

        self.cell_size = settings.get("cell_size")
        self.grid_width = settings.get("grid_width")
        self.cell_padding = self.cell_size // 6
        self.symbol_size = self.cell_size - self.cell_padding * 2

        self.setFixedSize(self.cell_size * COLS, self.cell_size * ROWS)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            pos = event.position()
            self.clicked.emit(int(pos.x()), int(pos.y()))
            event.accept()
            return
        super().mousePressEvent(event)

    def paintEvent(self, event):
        logger.debug("Repainting board")
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        painter.fillRect(self.rect(), QColor(self.settings.get("background_color")))

        # Подсветка победной линии
        highlight = QColor(self.settings.get("win_highlight_color"))
        for row, col in self.logic.winning_line:
            painter.fillRect(col * self.cell_size, row * self.cell_size,
                             self.cell_size, self.cell_size, highlight)

        self._draw_grid(painter)

        for row in range(ROWS):
            for col in range(COLS):
                symbol = self.logic.cell(row, col)
                if symbol == Mark.X:
                    self._draw_x(painter, row, col)
                elif symbol == Mark.O:
                    self._draw_o(painter, row, col)

        painter.end()

    def _draw_grid(self, painter):
        half = self.grid_width // 2
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QColor(self.settings.get("grid_color")))

        for row in range(1, ROWS):
            painter.drawRoundedRect(0, self.cell_size * row - half,
                                    self.width() - 1, self.grid_width, half, half)
        for col in range(1, COLS):
            painter.drawRoundedRect(self.cell_size * col - half, 0,
                                    self.grid_width, self.height() - 1, half, half)

    def _symbol_pen(self, color_key):
        pen = QPen(QColor(self.settings.get(color_key)))
        pen.setWidth(self.settings.get("symbol_stroke_width"))
        pen.setCapStyle(Qt.PenCapStyle.RoundCap)
        pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
        return pen

    def _draw_x(self, painter, row, col):
        painter.setPen(self._symbol_pen("x_color"))
        painter.setBrush(Qt.BrushStyle.NoBrush)

        x1 = col * self.cell_size + self.cell_padding
        y1 = row * self.cell_size + self.cell_padding
        x2 = (col + 1) * self.cell_size - self.cell_padding
        y2 = (row + 1) * self.cell_size - self.cell_padding
        painter.drawLine(x1, y1, x2, y2)
        painter.drawLine(x2, y1, x1, y2)

    def _draw_o(self, painter, row, col):
        painter.setPen(self._symbol_pen("o_color"))
        painter.setBrush(Qt.BrushStyle.NoBrush)

        x1 = col * self.cell_size + self.cell_padding
        y1 = row * self.cell_size + self.cell_padding
        painter.drawEllipse(x1, y1, self.symbol_size, self.symbol_size)


class TicTacToeGame(FixedWindow):
    def __init__(self):
        settings = SettingsManager()
        super().__init__(settings.get("window_title"))
        self.settings = settings
        self.logic = TicTacToeLogic()
        self.cell_size = settings.get("cell_size")

        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setContentsMargins(0, 0, 0, 0)
        self.main_layout.setSpacing(0)

        self.canvas = BoardCanvas(self.logic, settings)
        self.canvas.clicked.connect(self.on_pointer_click)
        self.main_layout.addWidget(self.canvas)

        # Статус бар снизу
        self.status_label = QLabel("    ")
        self.status_label.setFont(QFont(settings.get("status_font"),
                                        settings.get("status_font_size"),
                                        QFont.Weight.Bold))
        self.status_label.setContentsMargins(5, 2, 5, 4)
        self.main_layout.addWidget(self.status_label)

        self.render()
        self.lock_size()

    def point_to_cell(self, x, y):
        return y // self.cell_size, x // self.cell_size

    def on_pointer_click(self, x, y):
        if self.logic.phase == GamePhase.PLAYING:
            row, col = self.point_to_cell(x, y)
            logger.debug("Clicked row %d, col %d", row, col)
            if self.logic.in_bounds(row, col) and self.logic.cell(row, col) == Mark.EMPTY:
                self.logic.apply_move(row, col)
            else:
                logger.debug("Ignored click at (%d, %d)", x, y)
        else:
            # Игра окончена - любой клик начинает заново
            logger.debug("Restarting after %s", self.logic.phase.value)
            self.logic.reset_game()

        self.render()

    def status_text(self):
        if self.logic.phase == GamePhase.PLAYING:
            return f"{self.logic.current_player.value}'s Turn"
        return GAME_OVER_MESSAGES[self.logic.phase]

    def render(self):
        if self.logic.game_over:
            color = self.settings.get("status_game_over_color")
        else:
            color = self.settings.get("status_color")
        self.status_label.setText(self.status_text())
        self.status_label.setStyleSheet(f"color: {color};")
        self.canvas.update()
