import logging
import os

GLOBAL_LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO").upper()
if GLOBAL_LOG_LEVEL not in logging.getLevelNamesMapping():
    GLOBAL_LOG_LEVEL = "INFO"

# each area can be tuned with <AREA>_LOG_LEVEL, e.g. AUTH_LOG_LEVEL=DEBUG
log_sources: list[str] = [
    "AUTH",
    "HTTP",
    "HTTP_TRACING",
    "INITIALIZATION",
]

SRC_LOG_LEVELS: dict[str, str] = {}

for source in log_sources:
    log_env_var = source + "_LOG_LEVEL"
    level = os.environ.get(log_env_var, "").upper()
    if level not in logging.getLevelNamesMapping():
        level = GLOBAL_LOG_LEVEL
    SRC_LOG_LEVELS[source] = level
