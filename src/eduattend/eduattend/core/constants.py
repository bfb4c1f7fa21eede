"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

JOIN_CODE_PREFIX = "EDU-"
JOIN_CODE_LENGTH = 8
DEFAULT_LOG_LEVEL = "INFO"
