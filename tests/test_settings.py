import pytest

from core.settings import SettingsManager, DEFAULT_SETTINGS
from games.tic_tac_toe.ui import TicTacToeGame


def test_settings_is_singleton():
    assert SettingsManager() is SettingsManager()


def test_defaults():
    settings = SettingsManager()
    settings.restore_defaults()
    assert settings.get("cell_size") == 100
    assert settings.get("window_title") == "Tic Tac Toe"


def test_unknown_key_rejected():
    with pytest.raises(KeyError):
        SettingsManager().set("board_size", 4)


def test_restore_defaults():
    settings = SettingsManager()
    settings.set("cell_size", 60)
    settings.restore_defaults()
    assert settings.data == DEFAULT_SETTINGS


def test_cell_size_drives_canvas_and_mapping(qapp):
    settings = SettingsManager()
    settings.set("cell_size", 60)
    try:
        game = TicTacToeGame()
        assert game.canvas.width() == 180
        assert game.point_to_cell(130, 70) == (1, 2)
        game.close()
        game.deleteLater()
    finally:
        settings.restore_defaults()
