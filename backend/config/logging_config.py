"""
Logging configuration
"""
import logging
import sys

from config.settings import settings

_configured = False

def get_logger(name: str):
    """Get a logger instance"""
    global _configured

    if not _configured:
        logging.basicConfig(
            level=getattr(logging, settings.log_level, logging.INFO),
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            handlers=[logging.StreamHandler(sys.stdout)]
        )
        _configured = True

    return logging.getLogger(name)
