"""
Configuration constants for the gridpath engine.

Weights, grid defaults, and tunable parameters are defined here.
Runtime overrides come from environment variables.
"""

import math
import os
from pathlib import Path

# =============================================================================
# Path Configuration
# =============================================================================

# Project root is parent of gridpath/
PROJECT_ROOT = Path(__file__).parent.parent

# Optional .env file read by scripts
ENV_PATH = PROJECT_ROOT / ".env"

# =============================================================================
# Edge Weights
# =============================================================================

# Weight of a horizontal or vertical step
CARDINAL_WEIGHT = 1.0

# Weight of a corner-to-corner step
DIAGONAL_WEIGHT = math.sqrt(2)

# =============================================================================
# Grid Defaults
# =============================================================================

DEFAULT_GRID_WIDTH = int(os.environ.get("GRIDPATH_WIDTH", "20"))
DEFAULT_GRID_HEIGHT = int(os.environ.get("GRIDPATH_HEIGHT", "20"))

# =============================================================================
# Shortest-Path Configuration
# =============================================================================

# Frontier selection strategy:
#   "linear" - scan the frontier for the minimum (O(V^2) overall)
#   "heap"   - binary heap keyed by (distance, insertion order)
FRONTIER_STRATEGY = os.environ.get("GRIDPATH_FRONTIER", "linear")

FRONTIER_STRATEGIES = ("linear", "heap")

# Tolerance used when comparing summed path weights to recorded distances
DISTANCE_TOLERANCE = 1e-9

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Log line format used by scripts
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
