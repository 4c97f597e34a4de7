"""Logging configuration for the application."""

import logging
import sys

# Handler installed by the last setup_logging() call
_console_handler = None

def setup_logging(level: int = logging.INFO):
    """Configure logging for the application."""
    global _console_handler
    
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    
    # Replace rather than stack handlers when called again (CLI runs, app factory)
    if _console_handler is not None:
        root_logger.removeHandler(_console_handler)
    
    _console_handler = logging.StreamHandler(sys.stdout)
    _console_handler.setFormatter(formatter)
    root_logger.addHandler(_console_handler)
    
    # Set higher log levels for noisy components
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('werkzeug').setLevel(logging.WARNING)
    
    loggers = [
        'gestion_eventos.web.api',
        'gestion_eventos.controller',
        'gestion_eventos.web.routes.events'
    ]
    
    for logger_name in loggers:
        logging.getLogger(logger_name).setLevel(level)
