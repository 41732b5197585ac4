"""Menu-driven console application for project CRUD operations."""

from __future__ import annotations

import sys
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional, TextIO

from . import config
from .core.errors import ProjectsError
from .entities import Project
from .ports.db_api.connection import get_connection
from .schema import apply_schema
from .service import ProjectService
from .utils.logger import get_logger

logger = get_logger(__name__)

OPERATIONS = [
    "1) Add a project",
    "2) List projects",
    "3) Select a project",
    "4) Update project details",
    "5) Delete a project",
]

_HUNDREDTHS = Decimal("0.01")


class ProjectsApp:
    """Console menu over `ProjectService`.

    An empty menu selection (or end of input) exits the loop.
    """

    def __init__(
        self,
        service: Optional[ProjectService] = None,
        *,
        input_func: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
    ):
        self.service = service or ProjectService()
        self.cur_project: Optional[Project] = None
        self._input = input_func
        self._out = output or sys.stdout

    def process_user_selections(self) -> None:
        done = False
        while not done:
            try:
                selection = self._get_user_selection()
                if selection == -1:
                    done = self._exit_menu()
                elif selection == 1:
                    self._create_project()
                elif selection == 2:
                    self._list_projects()
                elif selection == 3:
                    self._select_project()
                elif selection == 4:
                    self._update_project_details()
                elif selection == 5:
                    self._delete_project()
                else:
                    self._print(f"\n{selection} is not a valid selection. Try again.")
            except (ProjectsError, ValueError) as exc:
                logger.debug("Menu operation failed", exc_info=exc)
                self._print(f"\nError: {exc} Try again.")

    # ── operations ────────────────────────────────────────

    def _create_project(self) -> None:
        project = Project(
            projectName=self._get_string_input("Enter the project name"),
            estimatedHours=self._get_decimal_input("Enter the estimated hours"),
            actualHours=self._get_decimal_input("Enter the actual hours"),
            difficulty=self._get_int_input("Enter the project difficulty (1-5)"),
            notes=self._get_string_input("Enter the project notes"),
        )
        db_project = self.service.add_project(project)
        self._print(f"You have successfully created project: {db_project}")

    def _list_projects(self) -> None:
        projects = self.service.fetch_all_projects()
        self._print("\nProjects:")
        for project in projects:
            self._print(f"   {project.projectId}: {project.projectName}")

    def _select_project(self) -> None:
        self._list_projects()
        project_id = self._get_int_input("Enter a project ID to select a project")
        self.cur_project = None
        self.cur_project = self.service.fetch_project_by_id(project_id)

    def _update_project_details(self) -> None:
        cur = self.cur_project
        if cur is None:
            self._print("\nPlease select a project.")
            return

        name = self._get_string_input(f"Enter the project name [{cur.projectName}]")
        estimated = self._get_decimal_input(f"Enter the estimated hours [{cur.estimatedHours}]")
        actual = self._get_decimal_input(f"Enter the actual hours [{cur.actualHours}]")
        difficulty = self._get_int_input(
            f"Enter the project difficulty (1-5) [{cur.difficulty}]"
        )
        notes = self._get_string_input(f"Enter the project notes [{cur.notes}]")

        project = Project(
            projectId=cur.projectId,
            projectName=cur.projectName if name is None else name,
            estimatedHours=cur.estimatedHours if estimated is None else estimated,
            actualHours=cur.actualHours if actual is None else actual,
            difficulty=cur.difficulty if difficulty is None else difficulty,
            notes=cur.notes if notes is None else notes,
        )
        self.service.modify_project_details(project)
        self.cur_project = self.service.fetch_project_by_id(cur.projectId)

    def _delete_project(self) -> None:
        self._list_projects()
        project_id = self._get_int_input("Enter the ID of the project to delete")
        if project_id is None:
            return

        self.service.delete_project(project_id)
        self._print(f"Project {project_id} was deleted successfully.")

        if self.cur_project is not None and self.cur_project.projectId == project_id:
            self.cur_project = None

    def _exit_menu(self) -> bool:
        self._print("Exiting the menu.")
        return True

    # ── input helpers ─────────────────────────────────────

    def _get_user_selection(self) -> int:
        self._print_operations()
        selection = self._get_int_input("Enter a menu selection")
        return -1 if selection is None else selection

    def _get_decimal_input(self, prompt: str) -> Optional[Decimal]:
        text = self._get_string_input(prompt)
        if text is None:
            return None
        try:
            return Decimal(text).quantize(_HUNDREDTHS)
        except InvalidOperation as exc:
            raise ValueError(f"{text} is not a valid decimal number.") from exc

    def _get_int_input(self, prompt: str) -> Optional[int]:
        text = self._get_string_input(prompt)
        if text is None:
            return None
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{text} is not a valid number.") from exc

    def _get_string_input(self, prompt: str) -> Optional[str]:
        try:
            text = self._input(f"{prompt}: ")
        except EOFError:
            return None
        return text.strip() or None

    def _print_operations(self) -> None:
        self._print("\nThese are the available selections. Press the Enter key to quit:")
        for line in OPERATIONS:
            self._print(f"   {line}")

        if self.cur_project is None:
            self._print("\nYou are not working with a project.")
        else:
            self._print(f"\nYou are working with project: {self.cur_project}")

    def _print(self, text: str = "") -> None:
        print(text, file=self._out)


def main() -> None:
    """Entry point for `python -m projects_dao`."""

    if config.DB_BACKEND == "sqlite":
        with get_connection() as db:
            apply_schema(db)
    ProjectsApp().process_user_selections()
