"""Project CRUD with materials, steps, and categories on a SQLite file."""

from __future__ import annotations

import os
import sys
import tempfile
from decimal import Decimal
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "projects_dao").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from projects_dao import (
    Category,
    Material,
    Project,
    ProjectDao,
    Step,
    apply_schema,
    connect_sqlite,
)


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "projects.db")

        # 1) Create tables. Each DAO call opens its own connection, so use a file.
        with connect_sqlite(path) as db:
            apply_schema(db)
        dao = ProjectDao(lambda: connect_sqlite(path))

        # 2) Insert a project; the generated key is set after commit.
        shed = dao.insert_project(
            Project(projectName="Build shed", estimatedHours=Decimal("10.00"), difficulty=3)
        )
        print("Inserted:", shed.projectId)

        # 3) Add child rows. Steps get the next position automatically.
        dao.add_material(
            Material(projectId=shed.projectId, materialName="2x4", numRequired=12, cost=Decimal("3.75"))
        )
        dao.add_step(Step(projectId=shed.projectId, stepText="Frame the walls"))
        dao.add_step(Step(projectId=shed.projectId, stepText="Add the roof"))
        garden = dao.add_category(Category(categoryName="Garden"))
        dao.add_category_to_project(shed.projectId, garden.categoryId)

        # 4) Fetch the aggregate in one transaction.
        print("Fetched:", dao.fetch_project_by_id(shed.projectId))

        # 5) Update and delete report whether a row was affected.
        shed.actualHours = Decimal("12.50")
        print("Updated:", dao.modify_project_details(shed))
        print("Deleted:", dao.delete_project(shed.projectId))
        print("Remaining:", dao.fetch_all_projects())


if __name__ == "__main__":
    main()
