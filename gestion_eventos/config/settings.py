import os

from .api import DEFAULT_API_BASE_URL, DEFAULT_API_TIMEOUT

class Config:
    # Flask configuration
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev')
    DEBUG = os.getenv('FLASK_DEBUG', 'False').lower() == 'true'
    
    # API configuration
    API_BASE_URL = os.getenv('API_BASE_URL', DEFAULT_API_BASE_URL)
    API_TIMEOUT = float(os.getenv('API_TIMEOUT', DEFAULT_API_TIMEOUT))
    
    # Edit screen lives outside this app
    EDIT_URL_TEMPLATE = os.getenv('EDIT_URL_TEMPLATE', '/editar-evento/{id}')
