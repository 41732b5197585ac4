"""Binding typed statement parameters, including typed NULLs."""

from __future__ import annotations

import sys
from decimal import Decimal
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "projects_dao").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from projects_dao import StatementParameters, UnsupportedTypeError, bind_all


def main() -> None:
    # 1) Bind by position; None is bound as a NULL of the declared type.
    params = StatementParameters()
    params.bind(1, "Build shed", str)
    params.bind(2, None, Decimal)
    params.bind(3, 3, int)
    print(params)
    print("DB-API values:", params.values())

    # 2) Shorthand for a whole statement.
    print(bind_all(("Garden", str), (7, int)))

    # 3) Unmapped types are rejected before any SQL runs.
    try:
        StatementParameters().bind(1, [1, 2], list)
    except UnsupportedTypeError as exc:
        print("Rejected:", exc)


if __name__ == "__main__":
    main()
