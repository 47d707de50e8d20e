# core/settings.py

TITLE = "Sonic-style Platformer Core"
WIDTH = 640
HEIGHT = 360
FPS = 60

# Physics runs at a fixed logical rate; every tuned constant is per-tick.
TICK_RATE = 60
MAX_TICKS_PER_FRAME = 5       # backlog cap for the tick accumulator

# Placeholder terrain (flat floor) and spawn point
FLOOR_Y = 240.0
SPAWN_X = 30.0
SPAWN_Y = 240.0

DEFAULT_PRESET = "default"

# |gsp| below this counts as standing still for look up / crouch
STILL_EPSILON = 1e-9

# True reproduces the old engine: degree angles fed straight into sin/cos
LEGACY_RADIAN_TRIG = False

# Camera
CAMERA_BORDER = (-16.0, -32.0, 16.0, 64.0)   # left, top, right, bottom
CAMERA_H_SPEED = 16.0
CAMERA_Y_SLOW = 6.0
CAMERA_Y_FAST = 16.0
CAMERA_PAN_SPEED = 2.0
CAMERA_LOOK_UP_MAX = 104.0
CAMERA_LOOK_DOWN_MAX = 88.0
CAMERA_FAST_FOLLOW_GSP = 6.0

# Colors (R,G,B)
BG_COLOR = (18, 18, 24)
FLOOR_COLOR = (70, 70, 88)
PLAYER_COLOR = (60, 110, 230)
HITBOX_COLOR = (255, 0, 255)
CAMERA_BORDER_COLOR = (255, 255, 255)
HUD_COLOR = (245, 245, 255)

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
