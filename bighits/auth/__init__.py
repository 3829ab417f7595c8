"""
Auth Blueprint

Sign-in and sign-out for site accounts, backed by Flask-Login.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from bighits.auth import routes  # noqa: E402, F401
