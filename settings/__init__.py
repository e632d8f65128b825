"""Application settings."""

import os
from pathlib import Path

# Logging
LOG_DIR = Path(os.getenv("COALITION_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("COALITION_LOG_LEVEL", "INFO")

# Parliament
TOTAL_SEATS = int(os.getenv("COALITION_TOTAL_SEATS", "150"))
MINORITY_FLOOR = int(os.getenv("COALITION_MINORITY_FLOOR", "60"))

# Ideological axes, each bounded to [-AXIS_LIMIT, AXIS_LIMIT]
AXIS_LIMIT = 10.0

# Enumeration
MIN_COALITION_SIZE = 2
DEFAULT_MAX_SIZE = int(os.getenv("COALITION_MAX_SIZE", "4"))
MAX_COALITION_SIZE = 6

# Compatibility weights
IDEOLOGY_WEIGHT = float(os.getenv("COALITION_IDEOLOGY_WEIGHT", "0.60"))
HISTORICAL_WEIGHT = float(os.getenv("COALITION_HISTORICAL_WEIGHT", "0.25"))
EXCLUSION_WEIGHT = float(os.getenv("COALITION_EXCLUSION_WEIGHT", "0.15"))

# Stability weights
FLEXIBILITY_WEIGHT = 0.4
SIZE_WEIGHT = 0.3
EXPERIENCE_WEIGHT = 0.3
SIZE_PENALTY_PER_PARTY = 0.1

# Historical prediction check
PREDICTION_SCORE_CUTOFF = 0.6
