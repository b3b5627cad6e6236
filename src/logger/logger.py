"""
Logging for the Pong simulation and its hosts
"""

import logging
import os

# Set PONG_LOG_LEVEL=DEBUG to see catches, wall bounces and skipped predictions
LOG_LEVEL = os.environ.get("PONG_LOG_LEVEL", "INFO").upper()

logging.basicConfig(level=LOG_LEVEL, format="%(message)s")
logger = logging.getLogger("pong")
