from .game_logic import X

# -----------------------------------------------------------------------------
# GAME
# -----------------------------------------------------------------------------

HUMAN_MARK = X                   # moves first, opponent gets the other mark
OPPONENT_DELAY_MS = 600          # pause before the opponent replies

# -----------------------------------------------------------------------------
# LAYOUT + COLORS
# -----------------------------------------------------------------------------

WINDOW_TITLE = "Tic Tac Toe"
BOARD_MIN_SIDE = 300
BACKGROUND_COLOR = "#FFF5E6"
ACCENT_COLOR = "#9A4020"
CELL_COLOR = "#FFFFFF"
GRID_COLOR = "#333333"
X_COLOR = "#2a6fb0"
O_COLOR = "#c0392b"
WIN_LINE_COLOR = "#9A4020"
CONFETTI_COLORS = ("#e74c3c", "#f1c40f", "#2ecc71", "#3498db", "#9b59b6", "#e67e22")

# -----------------------------------------------------------------------------
# ANIMATION
# -----------------------------------------------------------------------------

CELL_PRESS_SCALE = 0.8
CELL_PRESS_MS = 100
CELL_SPRING_MS = 350
SCORE_PULSE_SCALE = 1.3
SCORE_PULSE_MS = 200
SCORE_SPRING_MS = 450

CONFETTI_COUNT = 150
CONFETTI_FRAME_MS = 16
CONFETTI_LIFETIME_S = 3.0
CONFETTI_GRAVITY = 900.0         # px / s^2

# -----------------------------------------------------------------------------
# SOUND
# -----------------------------------------------------------------------------

SAMPLE_RATE = 22050
CLICK_TONE = (880.0, 60)         # hz, ms
WIN_TONES = ((523.25, 120), (659.25, 120), (783.99, 120), (1046.5, 260))
SOUND_VOLUME = 0.6
