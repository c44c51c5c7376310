APP_NAME = "tictactoe"

DEFAULT_SETTINGS = {
    "window_title": "Tic Tac Toe",
    "cell_size": 100,  # ширина и высота клетки
    "grid_width": 8,  # толщина линий сетки
    "symbol_stroke_width": 8,  # толщина пера для X и O
    "background_color": "#FFFFFF",
    "grid_color": "#C0C0C0",
    "x_color": "#FF0000",
    "o_color": "#0000FF",
    "win_highlight_color": "#3200FF00",  # #AARRGGBB
    "status_font": "Monospace",
    "status_font_size": 15,
    "status_color": "black",
    "status_game_over_color": "red",
}


class SettingsManager:
    """Настройки отрисовки. Хранятся только в памяти, файла настроек нет."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(SettingsManager, cls).__new__(cls)
            cls._instance.data = DEFAULT_SETTINGS.copy()
        return cls._instance

    def get(self, key):
        return self.data.get(key, DEFAULT_SETTINGS.get(key))

    def set(self, key, value):
        if key not in DEFAULT_SETTINGS:
            raise KeyError(f"Unknown setting: {key}")
        self.data[key] = value

    def restore_defaults(self):
        self.data = DEFAULT_SETTINGS.copy()
