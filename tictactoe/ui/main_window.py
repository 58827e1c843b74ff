import logging

from ..config import (
    WINDOW_TITLE, BACKGROUND_COLOR, ACCENT_COLOR, HUMAN_MARK,
    SCORE_PULSE_SCALE, SCORE_PULSE_MS, SCORE_SPRING_MS,
)
from ..session import GameSession
from ..ui.board_widget import BoardWidget
from ..ui.confetti_widget import ConfettiWidget
from ..ui.scheduler import QtScheduler
from ..ui.sounds import SoundBoard

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QPushButton, QLabel, QSizePolicy
)
from PySide6.QtGui import QFont
from PySide6.QtCore import (
    Qt, Slot,
    QVariantAnimation, QSequentialAnimationGroup, QEasingCurve,
)

logger = logging.getLogger(__name__)

SCORE_FONT_PT = 20


class TicTacToeWindow(QMainWindow):
    """
    main window UI and game flow
    """
    def __init__(self, selector=None, opponent_delay_ms=None, muted=False):
        """
        init session, ui widgets, signals
        """
        super().__init__()
        self.scheduler = QtScheduler(self)
        kwargs = {} if opponent_delay_ms is None else {"opponent_delay_ms": opponent_delay_ms}
        self.session = GameSession(selector=selector, scheduler=self.scheduler,
                                   human_mark=HUMAN_MARK, **kwargs)
        self.session.add_listener(self._on_transition)
        self.sounds = SoundBoard(muted=muted, parent=self)
        self._score_scale = 1.0
        self._score_pulse = None

        self._setup_ui()
        self._refresh()

    def _setup_ui(self):
        '''window look + layout'''
        self.setWindowTitle(WINDOW_TITLE)
        self.setStyleSheet(f"""
            QMainWindow {{ background-color: {BACKGROUND_COLOR}; }}
            QLabel {{ color: #222; }}
            QLabel#title {{ color: {ACCENT_COLOR}; }}
            QPushButton#reset {{
                background-color: {ACCENT_COLOR}; color: #fff;
                padding: 10px 20px; border-radius: 6px;
                font-size: 16px; font-weight: 600;
            }}
        """)
        self.central_widget = QWidget()
        self.setCentralWidget(self.central_widget)
        self.main_layout = QVBoxLayout(self.central_widget)
        self.main_layout.setAlignment(Qt.AlignCenter)

        self.title_label = QLabel(WINDOW_TITLE); self.title_label.setObjectName("title")
        f = QFont(); f.setPointSize(28); f.setBold(True); self.title_label.setFont(f)
        self.title_label.setAlignment(Qt.AlignCenter)
        self.main_layout.addWidget(self.title_label)

        self._create_scoreboard()
        self.main_layout.addWidget(self.score_widget)

        self.message_label = QLabel("")
        f = QFont(); f.setPointSize(16); self.message_label.setFont(f)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Preferred)
        self.main_layout.addWidget(self.message_label)

        self.board_widget = BoardWidget(self.session, parent=self)
        self.board_widget.cell_clicked.connect(self._on_cell_clicked)
        self.main_layout.addWidget(self.board_widget, 1)

        self.reset_button = QPushButton("Restart"); self.reset_button.setObjectName("reset")
        self.reset_button.clicked.connect(self.reset_game)
        self.main_layout.addWidget(self.reset_button, alignment=Qt.AlignCenter)

        # overlay on top of everything, ignores mouse
        self.confetti = ConfettiWidget(self.central_widget)
        self.confetti.setGeometry(self.central_widget.rect())

    def _create_scoreboard(self):
        # one label per mark, pulsed together on a win
        self.score_widget = QWidget()
        hl = QHBoxLayout(self.score_widget)
        hl.setSpacing(20)
        self.score_labels = {}
        for mark in (self.session.human_mark, self.session.ai_mark):
            label = QLabel("")
            label.setAlignment(Qt.AlignCenter)
            self.score_labels[mark] = label
            hl.addWidget(label)
        self._apply_score_scale(1.0)

    def _apply_score_scale(self, value):
        self._score_scale = float(value)
        f = QFont(); f.setBold(True)
        f.setPointSizeF(SCORE_FONT_PT * self._score_scale)
        for label in self.score_labels.values():
            label.setFont(f)

    def _animate_score(self):
        # grow, then spring back
        self._drop_score_pulse()
        group = QSequentialAnimationGroup(self)
        for start, end, ms, curve in (
                (1.0, SCORE_PULSE_SCALE, SCORE_PULSE_MS, QEasingCurve.OutQuad),
                (SCORE_PULSE_SCALE, 1.0, SCORE_SPRING_MS, QEasingCurve.OutElastic)):
            anim = QVariantAnimation(group)
            anim.setStartValue(start); anim.setEndValue(end)
            anim.setDuration(ms); anim.setEasingCurve(curve)
            anim.valueChanged.connect(self._apply_score_scale)
            group.addAnimation(anim)
        group.finished.connect(self._score_pulse_done)
        self._score_pulse = group
        group.start()

    def _drop_score_pulse(self):
        if self._score_pulse is not None:
            self._score_pulse.stop(); self._score_pulse.deleteLater()
        self._score_pulse = None

    @Slot()
    def _score_pulse_done(self):
        self._drop_score_pulse()
        self._apply_score_scale(1.0)

    def _update_message(self, text, is_success=False):
        # set message text + style
        style = f"color: {ACCENT_COLOR}; font-weight: bold;" if is_success else "color: #222;"
        self.message_label.setStyleSheet(style)
        self.message_label.setText(text)

    def _refresh(self):
        # redraw score, status, board from session state
        state = self.session.state
        score = self.session.score
        for mark, label in self.score_labels.items():
            label.setText(f"{mark}: {score[mark]}")
        if state.is_over:
            self._update_message(state.outcome.describe(), is_success=True)
        else:
            human, ai = self.session.human_mark, self.session.ai_mark
            self._update_message(f"Turn: {state.current_mark} (You: {human}, AI: {ai})")
        self.board_widget.update()

    def _on_transition(self, transition):
        """
        session callback: pick feedback cues from what just changed
        """
        if transition.reset:
            self.board_widget.reset_animations()
            self.confetti.stop()
        elif transition.index is not None:
            self.board_widget.pulse(transition.index)
            if transition.mark == self.session.human_mark:
                self.sounds.play_click()
        if transition.outcome_changed and not transition.state.outcome.is_draw:
            self.sounds.play_win()
            self.confetti.fire()
            self._animate_score()
        self._refresh()

    @Slot(int)
    def _on_cell_clicked(self, index):
        # ignored taps get no feedback at all
        self.session.play(index)

    @Slot()
    def reset_game(self):
        logger.debug("restart pressed")
        self.session.reset()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.confetti.setGeometry(self.central_widget.rect())

    def closeEvent(self, event):
        # ensure the pending reply never fires after close
        self.session.close()
        self.confetti.stop()
        event.accept()
