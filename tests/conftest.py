import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from core.settings import SettingsManager
from games.tic_tac_toe.ui import TicTacToeGame


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def game(qapp):
    SettingsManager().restore_defaults()
    window = TicTacToeGame()
    yield window
    window.close()
    window.deleteLater()
