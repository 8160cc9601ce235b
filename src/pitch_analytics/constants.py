"""Pitch geometry and threshold constants shared across the package."""

from __future__ import annotations

# Pitch size in metres; event coordinates are 0-100 percentages of these.
PITCH_LENGTH_M = 105.0
PITCH_WIDTH_M = 68.0
NORMALIZED_MAX = 100.0

# Depth thresholds along x (attacking towards x=100).
FINAL_THIRD_START_X = 66.67
BOX_START_X = 83.0
SIX_YARD_START_X = 94.76

# Width thresholds along y.
LEFT_WING_END_Y = 30.0
RIGHT_WING_START_Y = 70.0
BOX_Y_MIN = 21.0
BOX_Y_MAX = 79.0
SIX_YARD_Y_MIN = 36.0
SIX_YARD_Y_MAX = 64.0

CORNER_ZONE_X = 90.0
CORNER_ZONE_LEFT_Y = 15.0
CORNER_ZONE_RIGHT_Y = 85.0

SHORT_PASS_MAX_M = 10.0
LONG_PASS_MIN_M = 25.0

PROGRESSIVE_PASS_MIN_GAIN = 10.0
KEY_PASS_TARGET_X = 75.0
SHOT_FOLLOW_UP_MINUTES = 1

GOAL_CENTER_X = 100.0
GOAL_CENTER_Y = 50.0
XG_BOX_X = 84.0
XG_BOX_MULTIPLIER = 1.5
XG_CENTRAL_Y_MIN = 35.0
XG_CENTRAL_Y_MAX = 65.0
XG_CENTRAL_MULTIPLIER = 1.3
XG_MIN = 0.02
XG_MAX = 0.95

HEATMAP_NEIGHBOR_WEIGHT = 0.3

OVERTIME_START_MINUTE = 90
MAX_MATCH_MINUTE = 120
