"""
WSGI entrypoint for production (gunicorn/systemd).

This module should have no side effects beyond creating the Flask app.
"""
import logging

from printing.config import settings
from web.app import create_app

logging.basicConfig(level=settings.log_level)

app = create_app()
