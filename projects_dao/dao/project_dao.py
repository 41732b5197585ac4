"""Data access for projects and their materials, steps, and categories."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from ..core.contracts import ConnectionProvider, DatabasePort
from ..core.dao import DaoBase
from ..core.marshalling import bind_all
from ..core.metadata import shape_metadata
from ..core.sequences import last_insert_id, next_ordinal
from ..core.statements import (
    delete_sql,
    insert_params,
    insert_sql,
    select_sql,
    update_params,
    update_sql,
)
from ..entities import Category, Material, Project, Step
from ..ports.db_api.connection import get_connection
from ..utils.logger import get_logger

logger = get_logger(__name__)

PROJECT = shape_metadata(Project)
MATERIAL = shape_metadata(Material)
STEP = shape_metadata(Step)
CATEGORY = shape_metadata(Category)
PROJECT_CATEGORY_TABLE = "project_category"


class ProjectDao(DaoBase):
    """Transactional CRUD for the `project` table and its child tables.

    Each public method opens its own connection and transaction; see
    `DaoBase`.
    """

    def __init__(self, connect: Optional[ConnectionProvider] = None):
        super().__init__(connect or get_connection)

    # ── project ───────────────────────────────────────────

    def insert_project(self, project: Project) -> Project:
        """Insert a project row and set `project.projectId` after commit."""

        with self.transaction() as db:
            db.execute_update(
                insert_sql(db.dialect, PROJECT),
                insert_params(project, PROJECT).values(),
            )
            project_id = last_insert_id(db, PROJECT.table)

        project.projectId = project_id
        logger.info(f"Inserted project #{project_id} ({project.projectName}).")
        return project

    def fetch_all_projects(self) -> List[Project]:
        """Return all project rows ordered by name, without child rows."""

        with self.transaction() as db:
            sql = select_sql(db.dialect, PROJECT, order_by="project_name")
            return self._fetch_all(db, sql, Project)

    def fetch_project_by_id(self, project_id: int) -> Optional[Project]:
        """Return the project with its materials, steps, and categories.

        The parent row and the three child queries share one transaction.
        Child queries run only when the parent row exists.
        """

        with self.transaction() as db:
            sql = select_sql(db.dialect, PROJECT, where_column=PROJECT.pk_column)
            project = self._fetch_one(db, sql, Project, bind_all((project_id, int)))
            if project is None:
                return None

            project.materials.extend(self._fetch_materials_for_project(db, project_id))
            project.steps.extend(self._fetch_steps_for_project(db, project_id))
            project.categories.extend(self._fetch_categories_for_project(db, project_id))
            return project

    def modify_project_details(self, project: Project) -> bool:
        """Update the scalar columns of a project; True if exactly one row changed."""

        with self.transaction() as db:
            affected = self._execute_update(
                db,
                update_sql(db.dialect, PROJECT),
                update_params(project, PROJECT),
            )
        return affected == 1

    def delete_project(self, project_id: int) -> bool:
        """Delete a project (children cascade); True if exactly one row was removed."""

        with self.transaction() as db:
            affected = self._execute_update(
                db,
                delete_sql(db.dialect, PROJECT),
                bind_all((project_id, int)),
            )
        return affected == 1

    # ── children ──────────────────────────────────────────

    def add_material(self, material: Material) -> Material:
        with self.transaction() as db:
            db.execute_update(
                insert_sql(db.dialect, MATERIAL),
                insert_params(material, MATERIAL).values(),
            )
            material_id = last_insert_id(db, MATERIAL.table)

        material.materialId = material_id
        return material

    def add_step(self, step: Step) -> Step:
        """Insert a step at the next `step_order` position of its project."""

        with self.transaction() as db:
            step_order = next_ordinal(db, step.projectId, STEP.table, "project_id")
            db.execute_update(
                insert_sql(db.dialect, STEP),
                insert_params(replace(step, stepOrder=step_order), STEP).values(),
            )
            step_id = last_insert_id(db, STEP.table)

        step.stepId = step_id
        step.stepOrder = step_order
        return step

    def add_category(self, category: Category) -> Category:
        with self.transaction() as db:
            db.execute_update(
                insert_sql(db.dialect, CATEGORY),
                insert_params(category, CATEGORY).values(),
            )
            category_id = last_insert_id(db, CATEGORY.table)

        category.categoryId = category_id
        return category

    def fetch_all_categories(self) -> List[Category]:
        with self.transaction() as db:
            sql = select_sql(db.dialect, CATEGORY, order_by="category_name")
            return self._fetch_all(db, sql, Category)

    def add_category_to_project(self, project_id: int, category_id: int) -> None:
        with self.transaction() as db:
            d = db.dialect
            sql = (
                f"INSERT INTO {d.q(PROJECT_CATEGORY_TABLE)} "
                f"({d.q('project_id')}, {d.q('category_id')}) "
                f"VALUES ({d.placeholders(2)})"
            )
            self._execute_update(db, sql, bind_all((project_id, int), (category_id, int)))

    def _fetch_materials_for_project(self, db: DatabasePort, project_id: int) -> List[Material]:
        sql = select_sql(
            db.dialect, MATERIAL, where_column="project_id", order_by=MATERIAL.pk_column
        )
        return self._fetch_all(db, sql, Material, bind_all((project_id, int)))

    def _fetch_steps_for_project(self, db: DatabasePort, project_id: int) -> List[Step]:
        sql = select_sql(db.dialect, STEP, where_column="project_id", order_by="step_order")
        return self._fetch_all(db, sql, Step, bind_all((project_id, int)))

    def _fetch_categories_for_project(self, db: DatabasePort, project_id: int) -> List[Category]:
        d = db.dialect
        sql = (
            f"SELECT c.* FROM {d.q(CATEGORY.table)} c "
            f"JOIN {d.q(PROJECT_CATEGORY_TABLE)} pc USING ({d.q(CATEGORY.pk_column)}) "
            f"WHERE pc.{d.q('project_id')} = {d.placeholder()}"
        )
        return self._fetch_all(db, sql, Category, bind_all((project_id, int)))
