"""
Configuration settings for WhiskeyClub reviews.

Centralized configuration for storage containers, export and logging.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
DATA_ROOT = Path(os.getenv("WHISKEYCLUB_DATA_ROOT", str(PROJECT_ROOT / "data")))
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Containers: name -> partition key field
REVIEWS_CONTAINER = "Reviews"
SPIRITS_CONTAINER = "Spirits"
USERS_CONTAINER = "Users"

CONTAINER_PARTITION_KEYS = {
    REVIEWS_CONTAINER: "reviewId",
    SPIRITS_CONTAINER: "spiritId",
    USERS_CONTAINER: "userId",
}

# Export
EXPORT_FILENAME = "reviews.csv"

# Logging
LOG_LEVEL = os.getenv("WHISKEYCLUB_LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE = "whiskeyclub.log"
