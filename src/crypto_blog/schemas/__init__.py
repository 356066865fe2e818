"""
Pydantic schemas for post store request/response models.

These schemas define the structure of store data for serialization and validation.
"""

from .post import Post, PostCreate

__all__ = ["Post", "PostCreate"]
