"""
Database models for the blog backend.

Posts and visits are independent tables: no foreign keys link them.
"""

from .post import Post
from .visit import Visit

__all__ = ["Post", "Visit"]
