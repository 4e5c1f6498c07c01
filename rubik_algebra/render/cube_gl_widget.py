# rubik_algebra/render/cube_gl_widget.py
from __future__ import annotations

import logging

from PySide6.QtCore import QPoint, QTimer, Qt, Signal
from PySide6.QtGui import QKeyEvent, QMouseEvent, QWheelEvent
from PySide6.QtOpenGLWidgets import QOpenGLWidget

from OpenGL.GL import (
    glBegin,
    glClear,
    glClearColor,
    glColor3f,
    glEnable,
    glEnd,
    glLoadIdentity,
    glMatrixMode,
    glRotatef,
    glTranslatef,
    glVertex3f,
    glViewport,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_PROJECTION,
    GL_QUADS,
)
from OpenGL.GLU import gluPerspective

from rubik_algebra.core.arrow import ZERO, Arrow
from rubik_algebra.core.cube_state import RubikCube, stickers
from rubik_algebra.logic.controls import press_rotation, release_rotation, turn_for_key
from rubik_algebra.render.geometry import color_rgb, sticker_quad

logger = logging.getLogger(__name__)


class CubeGLWidget(QOpenGLWidget):
    """Widget OpenGL que dibuja un estado del cubo (`RubikCube`).

    El widget no modifica el estado: consulta el color de cada sticker y,
    cuando el usuario presiona una tecla de cara, emite `turn_requested`
    con el eje del giro. Quien lo contiene aplica el giro y llama a
    `set_cube` con el estado nuevo.

    Controles:
    - U D F B L R: pedir un giro.
    - Flechas (mantener): girar el punto de vista.
    - Enter: restablecer la vista.
    - Botón derecho + arrastre: orbitar. Rueda: zoom.
    """

    turn_requested = Signal(object)  # Arrow

    DEFAULT_YAW: float = 35.0
    DEFAULT_PITCH: float = -20.0
    DEFAULT_DISTANCE: float = 6.0
    SPIN_STEP: float = 2.0  # grados por tick con una flecha presionada

    STICKER_MARGIN: float = 0.04
    STICKER_OFFSET: float = 0.01
    PLASTIC: tuple = (0.05, 0.05, 0.06)

    def __init__(self, cube: RubikCube, parent=None) -> None:
        """Crea el widget con un estado inicial y la cámara por defecto.

        Args:
            cube: Estado del cubo a dibujar.
            parent: Widget padre (Qt), opcional.
        """
        super().__init__(parent)
        self.cube: RubikCube = cube

        # Cámara / orbit
        self.yaw: float = self.DEFAULT_YAW
        self.pitch: float = self.DEFAULT_PITCH
        self.distance: float = self.DEFAULT_DISTANCE

        self._last_mouse_pos: QPoint = QPoint()
        self._orbiting: bool = False

        # Rotación de vista acumulada por las flechas
        self.view_rotation: Arrow = ZERO
        self._spin_timer: QTimer = QTimer(self)
        self._spin_timer.setInterval(16)  # ~60fps
        self._spin_timer.timeout.connect(self._on_spin_tick)

        self.setFocusPolicy(Qt.StrongFocus)

    def set_cube(self, cube: RubikCube) -> None:
        """Reemplaza el estado dibujado y repinta."""
        self.cube = cube
        self.update()

    def reset_view(self) -> None:
        self.yaw = self.DEFAULT_YAW
        self.pitch = self.DEFAULT_PITCH
        self.distance = self.DEFAULT_DISTANCE
        self.update()

    # --------------------------
    # OpenGL lifecycle
    # --------------------------
    def initializeGL(self) -> None:
        """Inicializa parámetros OpenGL (clear color y depth test)."""
        glClearColor(0.10, 0.10, 0.12, 1.0)
        glEnable(GL_DEPTH_TEST)

    def resizeGL(self, w: int, h: int) -> None:
        """Ajusta viewport y proyección cuando cambia el tamaño del widget.

        Args:
            w: Ancho lógico del widget (Qt).
            h: Alto lógico del widget (Qt).
        """
        if h == 0:
            h = 1

        dpr = self.devicePixelRatioF()
        fb_w = int(w * dpr)
        fb_h = int(h * dpr)

        glViewport(0, 0, fb_w, fb_h)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(45.0, fb_w / float(fb_h), 0.1, 100.0)

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def paintGL(self) -> None:
        """Dibuja todos los stickers del estado actual."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glTranslatef(0.0, 0.0, -self.distance)
        glRotatef(self.pitch, 1.0, 0.0, 0.0)
        glRotatef(self.yaw, 0.0, 1.0, 0.0)

        glBegin(GL_QUADS)

        for sticker in stickers():
            # Base "plástico" detrás del sticker
            glColor3f(*self.PLASTIC)
            for v in sticker_quad(sticker, margin=0.0, offset=self.STICKER_OFFSET * 0.5):
                glVertex3f(*v)

            glColor3f(*color_rgb(self.cube[sticker]))
            for v in sticker_quad(sticker, self.STICKER_MARGIN, self.STICKER_OFFSET):
                glVertex3f(*v)

        glEnd()

    # --------------------------
    # Teclado
    # --------------------------
    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Flechas: acumula rotación de vista. Teclas de cara: pide un giro.

        Args:
            event: Evento de teclado de Qt.
        """
        key = event.key()

        self.view_rotation = press_rotation(self.view_rotation, key)
        self._sync_spin_timer()

        axis = turn_for_key(key)
        if axis is not None and not event.isAutoRepeat():
            logger.debug("Giro pedido por teclado: %s", axis)
            self.turn_requested.emit(axis)
            event.accept()
            return

        super().keyPressEvent(event)

    def keyReleaseEvent(self, event: QKeyEvent) -> None:
        """Suelta la rotación de vista de la tecla; Enter restablece la vista.

        Args:
            event: Evento de teclado de Qt.
        """
        if event.isAutoRepeat():
            return

        key = event.key()
        self.view_rotation = release_rotation(self.view_rotation, key)
        self._sync_spin_timer()

        if key in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self.reset_view()
            event.accept()
            return

        super().keyReleaseEvent(event)

    def _sync_spin_timer(self) -> None:
        if self.view_rotation.is_non_zero():
            if not self._spin_timer.isActive():
                self._spin_timer.start()
        else:
            self._spin_timer.stop()

    def _on_spin_tick(self) -> None:
        """Tick del timer: gira la vista según las flechas presionadas."""
        x, y, _ = self.view_rotation.to_tuple()
        self.yaw += x * self.SPIN_STEP
        self.pitch -= y * self.SPIN_STEP
        self.pitch = max(-89.0, min(89.0, self.pitch))
        self.update()

    # --------------------------
    # Mouse
    # --------------------------
    def mousePressEvent(self, event: QMouseEvent) -> None:
        """Botón derecho: empieza a orbitar.

        Args:
            event: Evento de mouse de Qt.
        """
        if event.button() == Qt.RightButton:
            self._orbiting = True
            self._last_mouse_pos = event.pos()
            event.accept()
            return

        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        """Orbita la cámara mientras se arrastra con el botón derecho.

        Args:
            event: Evento de mouse de Qt.
        """
        if self._orbiting:
            dx = event.position().x() - self._last_mouse_pos.x()
            dy = event.position().y() - self._last_mouse_pos.y()
            self._last_mouse_pos = event.pos()

            sens = 0.4
            self.yaw += dx * sens
            self.pitch += dy * sens
            self.pitch = max(-89.0, min(89.0, self.pitch))

            self.update()
            event.accept()
            return

        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.RightButton and self._orbiting:
            self._orbiting = False
            event.accept()
            return

        super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        """Zoom in/out con la rueda del mouse.

        Args:
            event: Evento de rueda de Qt.
        """
        delta = event.angleDelta().y() / 120.0
        self.distance -= delta * 0.3
        self.distance = max(2.5, min(20.0, self.distance))
        self.update()
        event.accept()
