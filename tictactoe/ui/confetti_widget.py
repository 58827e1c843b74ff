from PySide6.QtWidgets import QWidget
from PySide6.QtCore import Qt, QTimer, QElapsedTimer, QRectF
from PySide6.QtGui import QPainter, QColor

from ..confetti import ConfettiBurst
from ..config import CONFETTI_FRAME_MS


class ConfettiWidget(QWidget):
    """
    transparent overlay that plays one confetti burst at a time
    """
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setAttribute(Qt.WA_TransparentForMouseEvents, True)
        self.setAttribute(Qt.WA_NoSystemBackground, True)
        self.burst = None
        self._clock = QElapsedTimer()
        self._timer = QTimer(self)
        self._timer.setInterval(CONFETTI_FRAME_MS)
        self._timer.timeout.connect(self._tick)
        self.hide()

    def fire(self):
        # cover the parent, origin: top centre
        if self.parentWidget() is not None:
            self.setGeometry(self.parentWidget().rect())
        self.burst = ConfettiBurst((self.width() / 2, 0.0))
        self._clock.start()
        self.show(); self.raise_()
        self._timer.start()

    def stop(self):
        self._timer.stop()
        self.burst = None
        self.hide()

    def _tick(self):
        dt = self._clock.restart() / 1000.0
        if self.burst is None or not self.burst.step(dt):
            self.stop()
            return
        self.update()

    def paintEvent(self, event):
        if self.burst is None:
            return
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.Antialiasing, True)
            painter.setOpacity(self.burst.opacity)
            painter.setPen(Qt.NoPen)
            for p in self.burst.particles:
                if p.y > self.height() + 20:
                    continue   # already off screen
                painter.save()
                painter.translate(p.x, p.y)
                painter.rotate(p.angle)
                painter.setBrush(QColor(p.color))
                painter.drawRect(QRectF(-p.width / 2, -p.height / 2, p.width, p.height))
                painter.restore()
        finally:
            painter.end()
