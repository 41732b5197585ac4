"""
service.py
----------
Business-level operations over `ProjectDao`.
Turns "no such row" results into `NotFoundError`.
"""

from __future__ import annotations

from typing import List, Optional

from .core.errors import NotFoundError
from .dao.project_dao import ProjectDao
from .entities import Category, Material, Project, Step
from .utils.logger import get_logger

logger = get_logger(__name__)


class ProjectService:
    """Service facade used by the console menu."""

    def __init__(self, dao: Optional[ProjectDao] = None):
        self.dao = dao or ProjectDao()

    def add_project(self, project: Project) -> Project:
        return self.dao.insert_project(project)

    def fetch_all_projects(self) -> List[Project]:
        return self.dao.fetch_all_projects()

    def fetch_project_by_id(self, project_id: int) -> Project:
        """
        Fetch a project with its materials, steps, and categories.

        Raises:
            NotFoundError: If no project has this ID.
        """
        project = self.dao.fetch_project_by_id(project_id)
        if project is None:
            raise NotFoundError(f"Project with project ID={project_id} does not exist.")
        return project

    def modify_project_details(self, project: Project) -> None:
        if not self.dao.modify_project_details(project):
            raise NotFoundError(f"Project with ID={project.projectId} does not exist.")
        logger.info(f"Modified project #{project.projectId}.")

    def delete_project(self, project_id: int) -> None:
        if not self.dao.delete_project(project_id):
            raise NotFoundError(f"Project with ID={project_id} does not exist.")
        logger.info(f"Deleted project #{project_id}.")

    def add_material(self, material: Material) -> Material:
        self.fetch_project_by_id(material.projectId)
        return self.dao.add_material(material)

    def add_step(self, step: Step) -> Step:
        self.fetch_project_by_id(step.projectId)
        return self.dao.add_step(step)

    def fetch_all_categories(self) -> List[Category]:
        return self.dao.fetch_all_categories()

    def add_category(self, category: Category) -> Category:
        return self.dao.add_category(category)

    def add_category_to_project(self, project_id: int, category_id: int) -> None:
        self.fetch_project_by_id(project_id)
        self.dao.add_category_to_project(project_id, category_id)
