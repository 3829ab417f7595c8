"""
Flask Extensions
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager backing the session provider
login_manager = LoginManager()
