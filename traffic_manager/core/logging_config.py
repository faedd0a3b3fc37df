"""Logging setup"""

import logging
import sys


def configure_logging(level: str = "INFO"):
    """Configure root logging for the manager process"""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )
