"""
Utility functions for the hello-api service.

This module contains configuration and logging helpers shared by the
application entry point and its tests.
"""

import os
import logging
from typing import Dict, Any

from dotenv import load_dotenv

DEFAULT_PORT = 3000
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = 'INFO') -> logging.Logger:
    """
    Set up logging configuration.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    return logging.getLogger(__name__)


def get_config() -> Dict[str, Any]:
    """
    Get application configuration from environment variables.

    Values from a local .env file are loaded first; variables already
    present in the environment win.

    Returns:
        Dictionary containing configuration values
    """
    load_dotenv()
    return {
        'PORT': int(os.getenv('PORT', DEFAULT_PORT)),
        'HOST': os.getenv('HOST', '0.0.0.0'),
        'DEBUG': os.getenv('DEBUG', 'False').lower() == 'true',
        'LOG_LEVEL': os.getenv('LOG_LEVEL', 'INFO')
    }
