"""Environment configuration module.

Loads the .env file and exposes the environment flag used by the web admin,
the CLI and the API client configuration.

Usage:
    from gestion_eventos.config.environment import IS_PRODUCTION_ENVIRONMENT

Note:
    Variables already present in the process environment take precedence over
    the .env file (python-dotenv does not override them).
"""

import os
import logging
from dotenv import load_dotenv

load_dotenv()

env_setting = os.environ.get('ENVIRONMENT', '').lower()
IS_PRODUCTION_ENVIRONMENT = env_setting == 'production'

if env_setting not in ['development', 'production']:
    logging.warning(
        f"Environment setting '{env_setting}' is invalid or not specified. "
        "Expected 'development' or 'production'. Defaulting to development environment."
    )

__all__ = ['IS_PRODUCTION_ENVIRONMENT']
