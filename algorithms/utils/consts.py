# IN THIS FILE: ALL CONSTANTS
import os

# -----------------------------------------------------------------------------
# 1. GRID LIMITS
# -----------------------------------------------------------------------------
# Largest coordinate allowed for the upper-right corner (lower-left is 0,0).
MAX_COORDINATE = 50

# -----------------------------------------------------------------------------
# 2. INSTRUCTION LIMITS
# -----------------------------------------------------------------------------
# Instruction strings must be strictly shorter than this (0..99 characters).
MAX_INSTRUCTION_LENGTH = 100

# Suffix appended to a result line when the robot fell off the grid.
LOST_SUFFIX = "LOST"

# -----------------------------------------------------------------------------
# 3. SERVER / CLIENT
# -----------------------------------------------------------------------------
SERVER_HOST = os.environ.get("MARS_HOST", "0.0.0.0")
SERVER_PORT = int(os.environ.get("MARS_PORT", "5000"))
API_URL = os.environ.get("MARS_API_URL", f"http://localhost:{SERVER_PORT}")
REQUEST_TIMEOUT = 10    # seconds

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
