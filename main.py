import sys
import logging

from PyQt6.QtWidgets import QApplication

from games.tic_tac_toe.ui import TicTacToeGame


def main():
    logging.basicConfig(level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    app = QApplication(sys.argv)
    game = TicTacToeGame()
    game.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
