# rubik_algebra/app/main_window.py
from __future__ import annotations

import logging
from typing import List

from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from rubik_algebra.core.arrow import Arrow
from rubik_algebra.core.cube_state import FaceTurn, RubikCube, apply_turn, initial_state
from rubik_algebra.core.errors import ContractViolation
from rubik_algebra.logic.controls import FACE_TURNS
from rubik_algebra.render.cube_gl_widget import CubeGLWidget

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Ventana principal: visor 3D del cubo y panel de giros.

    Esta clase coordina:
    - El estado actual del cubo (`RubikCube`, un valor inmutable)
    - La visualización 3D (`CubeGLWidget`)
    - El historial (undo/redo) de ejes girados
    """

    def __init__(self) -> None:
        """Inicializa la ventana principal, crea la UI y conecta señales."""
        super().__init__()
        self.setWindowTitle("Rubik - álgebra del cubo")

        # --- Estado + render ---
        self.cube: RubikCube = initial_state()
        self.gl_widget: CubeGLWidget = CubeGLWidget(self.cube, self)

        # --- Historial ---
        self.history: List[Arrow] = []
        self.redo_stack: List[Arrow] = []

        # --- UI ---
        root = QWidget()
        root_layout = QHBoxLayout(root)
        root_layout.addWidget(self.gl_widget, 1)

        panel = QWidget()
        panel_layout = QVBoxLayout(panel)
        panel.setFixedWidth(280)

        self.lbl_state = QLabel("")
        panel_layout.addWidget(self.lbl_state)

        row_main = QHBoxLayout()
        self.btn_reset = QPushButton("Reset")
        self.btn_undo = QPushButton("Undo")
        self.btn_redo = QPushButton("Redo")
        row_main.addWidget(self.btn_reset)
        row_main.addWidget(self.btn_undo)
        row_main.addWidget(self.btn_redo)
        panel_layout.addLayout(row_main)

        # Giros (uno por cara)
        panel_layout.addWidget(QLabel("Girar capa (o teclas U D F B L R)"))
        grid = QGridLayout()
        for i, (label, axis) in enumerate(FACE_TURNS.items()):
            btn = QPushButton(f"{label}  {axis}")
            btn.clicked.connect(lambda _=False, a=axis: self.on_turn(a))
            grid.addWidget(btn, i // 2, i % 2)
        panel_layout.addLayout(grid)

        panel_layout.addWidget(QLabel("Historial de giros"))
        self.list_history = QListWidget()
        panel_layout.addWidget(self.list_history, 1)

        root_layout.addWidget(panel)
        self.setCentralWidget(root)

        # --- Conexiones ---
        self.btn_reset.clicked.connect(self.on_reset)
        self.btn_undo.clicked.connect(self.on_undo)
        self.btn_redo.clicked.connect(self.on_redo)
        self.gl_widget.turn_requested.connect(self.on_turn)

        # Atajos
        self.btn_undo.setShortcut("Ctrl+Z")
        self.btn_redo.setShortcut("Ctrl+Y")
        self.btn_reset.setShortcut("Ctrl+R")

        self._refresh()

    # -------------------
    # Helpers UI
    # -------------------
    def _set_cube(self, cube: RubikCube) -> None:
        """Reemplaza el estado actual por uno nuevo (congelado) y repinta."""
        self.cube = cube.frozen()
        self.gl_widget.set_cube(self.cube)
        self._refresh()

    def _refresh(self) -> None:
        """Actualiza el label de estado y la disponibilidad de undo/redo."""
        self.lbl_state.setText(
            "Estado: resuelto ✅" if self.cube.is_solved() else "Estado: mezclado 🔄"
        )
        self.btn_undo.setEnabled(bool(self.history))
        self.btn_redo.setEnabled(bool(self.redo_stack))

    def _show_status(self, msg: str) -> None:
        self.statusBar().showMessage(msg, 1500)

    def _push_history(self, axis: Arrow) -> None:
        self.history.append(axis)
        self.list_history.addItem(str(axis))
        self.list_history.scrollToBottom()

    # -------------------
    # Giros
    # -------------------
    def on_turn(self, axis: Arrow) -> None:
        """Aplica un giro pedido por botón o teclado.

        Args:
            axis: Eje del giro (debe ser unitario).
        """
        try:
            cube = apply_turn(self.cube, axis)
        except ContractViolation as exc:
            logger.exception("Giro rechazado: %s", axis)
            QMessageBox.warning(self, "Giro inválido", str(exc))
            return

        self.redo_stack.clear()
        self._push_history(axis)
        self._set_cube(cube)
        self._show_status(f"Giro: {axis}")
        logger.info("Giro %s (%d en historial)", axis, len(self.history))

    def on_undo(self) -> None:
        """Revierte el último giro aplicando el giro inverso (tres veces el mismo)."""
        if not self.history:
            return

        axis = self.history.pop()
        self.list_history.takeItem(self.list_history.count() - 1)
        self.redo_stack.append(axis)

        self._set_cube(FaceTurn(axis).inverse().apply(self.cube))
        self._show_status(f"Undo: {axis}")

    def on_redo(self) -> None:
        """Re-aplica el último giro deshecho."""
        if not self.redo_stack:
            return

        axis = self.redo_stack.pop()
        self._push_history(axis)
        self._set_cube(apply_turn(self.cube, axis))
        self._show_status(f"Redo: {axis}")

    def on_reset(self) -> None:
        """Vuelve al cubo resuelto y limpia el historial."""
        self.history.clear()
        self.redo_stack.clear()
        self.list_history.clear()
        self.gl_widget.reset_view()
        self._set_cube(initial_state())
        logger.info("Cubo reiniciado")
