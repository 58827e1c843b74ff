from PySide6.QtWidgets import QWidget, QSizePolicy
from PySide6.QtCore import (
    Qt, QSize, Signal, QPointF, QRectF,
    QVariantAnimation, QSequentialAnimationGroup, QEasingCurve,
)
from PySide6.QtGui import QPainter, QColor, QPen

from ..config import (
    BOARD_MIN_SIDE, CELL_COLOR, GRID_COLOR, X_COLOR, O_COLOR, WIN_LINE_COLOR,
    CELL_PRESS_SCALE, CELL_PRESS_MS, CELL_SPRING_MS,
)
from ..game_logic import BOARD_CELLS, EMPTY, X

SIZE = 3   # cells per side


class BoardWidget(QWidget):
    """
    custom widget to draw and tap the tic-tac-toe board
    """
    cell_clicked = Signal(int)  # emits cell index 0-8 on click

    def __init__(self, session, parent=None):
        super().__init__(parent)
        self.session = session          # reads state from here on paint
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.setMinimumSize(QSize(BOARD_MIN_SIDE, BOARD_MIN_SIDE))
        self._scales = [1.0] * BOARD_CELLS
        self._pulses = [None] * BOARD_CELLS

    def heightForWidth(self, width):
        # keep square shape
        return width

    def hasHeightForWidth(self):
        return True

    def _geometry(self):
        # square area centred in the widget
        w, h = self.width(), self.height()
        side = min(w, h)
        return (w - side) / 2, (h - side) / 2, side

    def cell_rect(self, index):
        ox, oy, side = self._geometry()
        cell = side / SIZE
        r, c = divmod(index, SIZE)
        return QRectF(ox + c * cell, oy + r * cell, cell, cell)

    def pulse(self, index):
        """
        shrink the cell then spring it back
        """
        self._drop_pulse(index)
        group = QSequentialAnimationGroup(self)
        for start, end, ms, curve in (
                (1.0, CELL_PRESS_SCALE, CELL_PRESS_MS, QEasingCurve.OutQuad),
                (CELL_PRESS_SCALE, 1.0, CELL_SPRING_MS, QEasingCurve.OutBack)):
            anim = QVariantAnimation(group)
            anim.setStartValue(start); anim.setEndValue(end)
            anim.setDuration(ms); anim.setEasingCurve(curve)
            anim.valueChanged.connect(lambda v, i=index: self._set_scale(i, v))
            group.addAnimation(anim)
        group.finished.connect(lambda i=index: self._pulse_done(i))
        self._pulses[index] = group
        group.start()

    def _set_scale(self, index, value):
        self._scales[index] = float(value)
        self.update()

    def _drop_pulse(self, index):
        group = self._pulses[index]
        if group is not None:
            group.stop(); group.deleteLater()
        self._pulses[index] = None

    def _pulse_done(self, index):
        self._drop_pulse(index)
        self._set_scale(index, 1.0)

    def reset_animations(self):
        # stop pulses, back to full size
        for i in range(BOARD_CELLS):
            self._drop_pulse(i)
        self._scales = [1.0] * BOARD_CELLS
        self.update()

    def paintEvent(self, event):
        """
        draw cells, X/O marks, and the winning line
        """
        state = self.session.state
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            for i in range(BOARD_CELLS):
                rect = self.cell_rect(i)
                scale = self._scales[i]
                # scale around the cell centre
                painter.save()
                painter.translate(rect.center())
                painter.scale(scale, scale)
                painter.translate(-rect.center())
                painter.setPen(QPen(QColor(GRID_COLOR), 1))
                painter.setBrush(QColor(CELL_COLOR))
                painter.drawRect(rect)
                self._draw_mark(painter, rect, state.board[i])
                painter.restore()
            outcome = state.outcome
            if outcome is not None and outcome.line is not None:
                a, c = outcome.line[0], outcome.line[-1]
                pen = QPen(QColor(WIN_LINE_COLOR), 6, Qt.SolidLine, Qt.RoundCap)
                painter.setPen(pen)
                painter.drawLine(self.cell_rect(a).center(), self.cell_rect(c).center())
        finally:
            painter.end()

    def _draw_mark(self, painter, rect, sym):
        if sym == EMPTY:
            return
        cx, cy = rect.center().x(), rect.center().y()
        rad = rect.width() / 2 * 0.55
        if sym == X:
            painter.setPen(QPen(QColor(X_COLOR), 6, Qt.SolidLine, Qt.RoundCap))
            # two crossing lines
            painter.drawLine(QPointF(cx - rad, cy - rad), QPointF(cx + rad, cy + rad))
            painter.drawLine(QPointF(cx + rad, cy - rad), QPointF(cx - rad, cy + rad))
        else:
            painter.setPen(QPen(QColor(O_COLOR), 6))
            painter.setBrush(Qt.NoBrush)
            painter.drawEllipse(QPointF(cx, cy), rad, rad)

    def index_at(self, x, y):
        """
        map widget coords to a cell index, None outside the grid
        """
        ox, oy, side = self._geometry()
        if side <= 0 or not (ox <= x < ox + side and oy <= y < oy + side):
            return None
        cell = side / SIZE
        col = min(int((x - ox) // cell), SIZE - 1)
        row = min(int((y - oy) // cell), SIZE - 1)
        return row * SIZE + col

    def mouseReleaseEvent(self, event):
        """
        handle clicks: map coords to board cell and emit
        """
        pos = event.position()
        index = self.index_at(pos.x(), pos.y())
        if index is not None:
            self.cell_clicked.emit(index)  # session decides if it counts
