"""Application-wide constants.

This module centralizes domain limits that are shared by schemas,
services and tests. For environment-specific configuration, see config.py.
"""

import re

# =============================================================================
# User Limits
# =============================================================================

# Accepted age range for registered children (inclusive)
MIN_USER_AGE: int = 5
MAX_USER_AGE: int = 12

MAX_NAME_LENGTH: int = 255

# =============================================================================
# Email
# =============================================================================

# local-part@domain.tld, no whitespace
EMAIL_PATTERN: re.Pattern[str] = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# =============================================================================
# Activity Limits
# =============================================================================

MIN_ACCURACY: float = 0.0
MAX_ACCURACY: float = 100.0

DEFAULT_LEVEL_REACHED: int = 1

MAX_EXERCISE_TYPE_LENGTH: int = 100
MAX_ACHIEVEMENT_TYPE_LENGTH: int = 100
