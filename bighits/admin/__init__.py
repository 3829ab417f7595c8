"""
Admin Blueprint

CRUD screens for blogs, products and tutors, gated by the access guard.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from bighits.admin import routes  # noqa: E402, F401
