# Search result codes
# Returned when the frontier empties before the target is discovered
NO_PATH = -1
# Returned when the shortest path would not fit in the caller's buffer
BUFFER_TOO_SMALL = -2
# Distance value of a cell that has not been discovered yet
UNDISCOVERED = -1

# Map file: JSON definition of the demo grid (relative to the package)
MAP_FILE = 'maps/default.json'

# Viewer settings
# Side length of one grid cell on screen (pixels)
CELL_SIZE = 48
FPS = 30
# Width of the lines separating cells (pixels, 0 disables them)
GRID_LINE_WIDTH = 1
WINDOW_CAPTION = "gridpath"

# Colors
WALKABLE_COLOR = (220, 220, 220)
BLOCKED_COLOR = (40, 40, 40)
GRID_LINE_COLOR = (120, 120, 120)
PATH_COLOR = (90, 160, 230)
START_COLOR = (60, 180, 75)
TARGET_COLOR = (230, 70, 60)
