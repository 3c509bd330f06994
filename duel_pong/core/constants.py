"""
Fixed arena and physics constants
"""

# Dimensions
FIELD_WIDTH, FIELD_HEIGHT = 800, 600
PADDLE_WIDTH = 10.0
PADDLE_HEIGHT = 50.0
BALL_RADIUS = 10.0

# Paddle travel limits and hit-box (relative to the paddle's top edge)
PADDLE_MIN_Y = 0.0
PADDLE_MAX_Y = 550.0
PADDLE_HITBOX_ABOVE = 10.0
PADDLE_HITBOX_BELOW = 60.0
PADDLE_RESET_Y = 50.0

# Ball collision thresholds
LEFT_PADDLE_X = 10.0
RIGHT_PADDLE_X = 780.0
WALL_TOP_Y = 0.0
WALL_BOTTOM_Y = 590.0

# Speeds, per frame
PADDLE_SPEED = 10.0
BALL_SPEED = 6.5

# Spawn point
BALL_SPAWN_X = 50.0
BALL_SPAWN_Y = 50.0

# Pause after a miss, in milliseconds
FREEZE_DURATION_MS = 400
