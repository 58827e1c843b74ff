import logging
import tempfile
from pathlib import Path

from PySide6.QtCore import QObject, QStandardPaths, QUrl
from PySide6.QtMultimedia import QSoundEffect

from ..config import CLICK_TONE, SOUND_VOLUME, WIN_TONES
from ..tones import write_wav

logger = logging.getLogger(__name__)

CUES = {
    "click": (CLICK_TONE,),
    "win": WIN_TONES,
}


def sound_dir():
    """
    per-user cache dir for the generated wav files
    """
    base = QStandardPaths.writableLocation(QStandardPaths.CacheLocation)
    path = Path(base or tempfile.gettempdir()) / "sounds"
    path.mkdir(parents=True, exist_ok=True)
    return path


class SoundBoard(QObject):
    """
    short feedback cues: click on a move, fanfare on a win
    """
    def __init__(self, muted=False, parent=None):
        super().__init__(parent)
        self.muted = muted
        self._effects = {}
        if not muted:
            self._load()

    def _load(self):
        try:
            folder = sound_dir()
            for name, notes in CUES.items():
                path = folder / f"{name}.wav"
                if not path.exists():
                    write_wav(path, notes)
                effect = QSoundEffect(self)
                effect.setSource(QUrl.fromLocalFile(str(path)))
                effect.setVolume(SOUND_VOLUME)
                self._effects[name] = effect
        except OSError as e:
            logger.warning("sounds disabled: %s", e)
            self._effects.clear()

    def play(self, name):
        if self.muted:
            return
        effect = self._effects.get(name)
        if effect is None:
            logger.debug("no sound loaded for %r", name)
            return
        effect.stop()      # replay from the start
        effect.play()

    def play_click(self):
        self.play("click")

    def play_win(self):
        self.play("win")
