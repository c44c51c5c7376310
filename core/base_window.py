from PyQt6.QtWidgets import QMainWindow


class FixedWindow(QMainWindow):
    """Обычное окно с заголовком, размер которого нельзя менять."""

    def __init__(self, title):
        super().__init__()
        self.setWindowTitle(title)

    def lock_size(self):
        # Вызывать после того как central widget собран
        self.adjustSize()
        self.setFixedSize(self.sizeHint())
