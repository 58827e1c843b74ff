from PySide6.QtCore import QObject, QTimer


class TimerHandle:
    """
    cancel() side of a single-shot QTimer
    """
    def __init__(self, timer):
        self._timer = timer

    @property
    def active(self):
        return self._timer is not None

    def cancel(self):
        if self._timer is not None:
            self._timer.stop()
            self._timer.deleteLater()
            self._timer = None


class QtScheduler(QObject):
    """
    session scheduler backed by single-shot QTimers on the gui thread
    """
    def schedule(self, delay_ms, callback):
        timer = QTimer(self)
        timer.setSingleShot(True)
        handle = TimerHandle(timer)

        def fire():
            handle.cancel()
            callback()
        timer.timeout.connect(fire)
        timer.start(delay_ms)
        return handle
