"""
Models Package

Exports all models for easy importing.
"""

from bighits.models.user import User
from bighits.models.blog import Blog
from bighits.models.product import Product
from bighits.models.tutor import Tutor

__all__ = ['User', 'Blog', 'Product', 'Tutor']
