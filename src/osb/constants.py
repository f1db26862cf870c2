"""Global constants for the library."""

# Storyboard playfield, in osu! pixels
PLAYFIELD_WIDTH = 640
PLAYFIELD_HEIGHT = 480
DEFAULT_POSITION = (320, 240)  # Sprites start at the playfield centre

# Storyboard scripts
DEFAULT_ENTRYPOINT = "storyboard"  # Function a script defines to build its storyboard
ENTRYPOINT_ENV_VAR = "OSB_ENTRYPOINT"

# Preview rendering
PREVIEW_BACKGROUND_COLOR = (0, 0, 0)
PREVIEW_GRID_COLOR = (40, 40, 40)
PREVIEW_OUTLINE_COLOR = (255, 255, 255)
PREVIEW_SPRITE_SIZE = 48  # Side of a sprite placeholder at scale 1, in pixels
PREVIEW_ORIGIN_MARKER_RADIUS = 2
