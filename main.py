"""
Entry point for the Users API
"""

import sys
import os
import logging
from dotenv import load_dotenv

# Load environment variables from .env file before settings are read
load_dotenv()

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from users_api.config.logging_config import configure_logging

# Configure logging before settings and app modules log at import time
configure_logging()
logger = logging.getLogger(__name__)

from users_api.app import app
from users_api.config.settings import PORT

if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Users API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
