# main.py
from __future__ import annotations

import logging
import os
import sys
from typing import NoReturn

from PySide6.QtWidgets import QApplication

from rubik_algebra.app.main_window import MainWindow


def main() -> NoReturn:
    """Punto de entrada de la aplicación.

    Configura logging (nivel en `RUBIK_LOG_LEVEL`, por defecto INFO), crea
    la instancia de `QApplication`, construye la ventana principal
    (`MainWindow`) y ejecuta el loop de eventos de Qt.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    logging.basicConfig(
        level=os.environ.get("RUBIK_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = QApplication(sys.argv)
    w = MainWindow()
    w.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
