"""DAO implementations for the projects schema."""

from .project_dao import ProjectDao

__all__ = ["ProjectDao"]
