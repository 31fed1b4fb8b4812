"""
Configuration file for the Roster Reporter
Contains default settings and configuration options.
"""

import logging
import os

# Database Configuration
# to point at another roster use: export ROSTER_DATABASE="path/to/roster.csv"
DATABASE_PATH = os.environ.get('ROSTER_DATABASE', 'database.csv')
FILE_ENCODING = 'utf-8-sig'

# Roster Layout (positional columns)
NAME_COLUMN = 0
FIELD_COLUMN = 3

# Output Configuration
LOG_LEVEL = os.environ.get('ROSTER_LOG_LEVEL', 'INFO')
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
LOG_FILENAME = 'roster_report.log'

# API Configuration
API_HOST = '0.0.0.0'
API_PORT = 8000


def setup_logging(level: str = None, filename: str = LOG_FILENAME) -> None:
    """Configure the root logger for the command line and API entry points."""
    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(filename),
            logging.StreamHandler()
        ]
    )
