"""
Public Blueprint

Home page, blog, shop and tutoring pages. Only published records are shown.
"""

from flask import Blueprint

public_bp = Blueprint('public', __name__)

from bighits.public import routes  # noqa: E402, F401
