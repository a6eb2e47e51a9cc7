# IN THIS FILE: ALL CONSTANTS (BOARD BOUNDS, COMMAND GRAMMAR, OUTPUT FORMAT)

# -----------------------------------------------------------------------------
# 1. BOARD DIMENSIONS
# -----------------------------------------------------------------------------
# Highest valid index on each axis. 4 gives a 5x5 board (0..4 inclusive).
MAX_X = 4
MAX_Y = 4

# -----------------------------------------------------------------------------
# 2. COMMAND GRAMMAR
# -----------------------------------------------------------------------------
# Bare commands may be followed by whitespace only ("MOVE adsf" is rejected).
COMMAND_REGEXP = r"(MOVE|LEFT|RIGHT|REPORT)\s*"

# Coordinates are substituted with an alternation of the in-range integers,
# so "PLACE 5,0,EAST" or "PLACE -2,0,EAST" never match on a 0..4 board.
PLACE_CMD_REGEXP = r"(PLACE)\s+({x})\s*,\s*({y})\s*,\s*(NORTH|SOUTH|EAST|WEST)"

# -----------------------------------------------------------------------------
# 3. OUTPUT
# -----------------------------------------------------------------------------
# Field order and both angle + name must stay as is (consumers parse it).
REPORT_FORMAT = "Position: {x}, {y}, {angle}, {facing}"

INTERACTIVE_PROMPT = "> "

# Environment overrides read by the HTTP server at startup
ENV_MAX_X = "TABLETOP_MAX_X"
ENV_MAX_Y = "TABLETOP_MAX_Y"
