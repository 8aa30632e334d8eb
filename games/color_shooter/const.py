import math

# -----------------------------
# Tuning constants
# -----------------------------

# Session
START_LIVES = 3
START_LEVEL = 1
POINTS_PER_HIT = 10

# Target cluster
SPAWN_X = 250                # x of the first target in a new cluster
SPAWN_SPACING = 50           # px between neighbouring targets
SPAWN_Y = 250
PHASE_STEP = 0.01            # oscillation phase added every frame
BOUNCE_PHASE_JUMP = math.pi  # half turn reverses the lateral direction
DROP_STEP = 35               # px every target drops on a wall bounce
FLOOR_MARGIN = 100           # lose once the lowest target passes h - this

# Shooter / projectile
SHOOTER_BOTTOM_OFFSET = 60   # shooter center is this far above the bottom edge
SHOOTER_START_ANGLE = math.pi / 2
MUZZLE_OFFSET = 40           # projectile spawns this far along the aim
SHOOTER_SIZE = 80            # sprite is drawn SHOOTER_SIZE x SHOOTER_SIZE
NEXT_SHOT_LIFT = 30          # next-shot preview sits this much above the muzzle

# Collision
HIT_DISTANCE = 20            # center distance below which a shot hits

# Difficulty presets: (target radius px, cluster speed, projectile speed px/frame)
DIFFICULTIES = {
    "easy": (25, 0.5, 5),
    "hard": (15, 1.5, 8),
}
DEFAULT_DIFFICULTY = "easy"

# Palette: label -> RGB
COLORS = {
    "red": (220, 40, 40),
    "blue": (40, 90, 230),
    "green": (40, 180, 70),
    "yellow": (240, 210, 40),
    "purple": (150, 60, 200),
}

# UX
HUD_COLOR = (240, 240, 240)
HUD_FONT_SIZE = 28
TITLE_FONT_SIZE = 56
OVERLAY_FONT_SIZE = 30
BACKGROUND_TOP = (22, 40, 60)
BACKGROUND_BOTTOM = (10, 70, 55)
