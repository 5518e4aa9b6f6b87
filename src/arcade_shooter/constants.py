"""Global constants for the game."""

# Frame timing
DEFAULT_FPS = 60  # Simulation steps (and rendered frames) per second

# Playfield dimensions in units (1 unit == 1 pixel at scale 1)
PLAYFIELD_WIDTH = 480
PLAYFIELD_HEIGHT = 640

# Player ship
PLAYER_WIDTH = 30
PLAYER_HEIGHT = 30
PLAYER_SPEED = 5  # Units per frame
PLAYER_START_X = PLAYFIELD_WIDTH / 2 - PLAYER_WIDTH / 2
PLAYER_START_Y = PLAYFIELD_HEIGHT - 60
SHOOT_DELAY = 10  # Frames between shots while fire is held

# Bullets
BULLET_WIDTH = 4
BULLET_HEIGHT = 12
BULLET_SPEED = 7  # Units per frame, upward

# Enemies
ENEMY_WIDTH = 30
ENEMY_HEIGHT = 30
ENEMY_SPAWN_Y = -30  # Spawned just above the visible top edge
ENEMY_BASE_SPEED = 2  # Units per frame, downward
ENEMY_SPEED_VARIANCE = 2  # Speed is drawn from [base, base + variance)
ENEMY_SPAWN_INTERVAL = 60  # Frames between spawns
ENEMY_REWARD = 100  # Score per enemy destroyed

# Frames a recording keeps showing the game over screen before it ends
GAME_OVER_HOLD_FRAMES = 30

# Colors
BACKGROUND_COLOR = (0, 0, 0)
ENTITY_COLOR = (255, 255, 255)
HUD_COLOR = (255, 255, 255)
OVERLAY_COLOR = (0, 0, 0, 153)  # 60% black over the frozen frame
