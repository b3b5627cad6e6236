"""
Constants shared by the Pong simulation core and its hosts.
"""

# Playfield geometry
PLAYFIELD_MARGIN = 20  # distance from the viewport edge at which the ball bounces/scores
CATCH_HALF_HEIGHT = 50  # half-height of the catch window around a paddle centre
PADDLE_HALF_HEIGHT = 50  # half-height used when clamping paddles inside the viewport
PADDLE_STEP_DIVISOR = 100  # a paddle moves viewport_height / 100 per frame

# Difficulty
SCORE_SPEED_CAP = 20
SCORE_SPEED_DIVISOR = 5.0
RALLY_SPEED_DIVISOR = 3.0
BASE_SPEED_FACTOR = 1.0

# Ball
BALL_START_X = 0.0
BALL_START_Y = 0.0
BALL_VELOCITY_X = 3.0
BALL_VELOCITY_Y = 3.0

# Window
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600
SCREEN_CAPTION = "Pong"
FPS = 60
HEADLESS_FRAMES = 3600

# Sprites
BALL_SIZE = 40
PADDLE_WIDTH = 20
PADDLE_HEIGHT = 100
PADDLE_INSET = 10  # paddles are drawn this far in from the left/right edge
SCORE_FONT_SIZE = 60
SCORE_LABEL = "Score: {tally}"

# Colors
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RED = (255, 0, 0)
BLUE = (0, 0, 255)
BACKGROUND_COLOR = WHITE
BALL_COLOR = BLACK
PADDLE_COLOR = BLACK

# Sounds (procedurally generated)
SOUND_SAMPLE_RATE = 44100
BUTTON_SOUND_DURATION = 0.08
BUTTON_SOUND_FREQUENCIES = (660, 440)
PING_SOUND_DURATION = 0.3
PING_SOUND_FREQUENCIES = (880, 1320)
SOUND_VOLUME = 0.5

# Host modes
MODE_WINDOW = "window"
MODE_HEADLESS = "headless"

# CLI arguments
ARG_MODE = "mode"
ARG_WIDTH = "width"
ARG_HEIGHT = "height"
ARG_FPS = "fps"
ARG_FRAMES = "frames"
