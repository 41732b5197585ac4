"""Entity record shapes for the projects schema.

Attribute names are camelCase on purpose: the row extractor maps each one to
its snake_case column (`projectName` -> `project_name`). Collection fields
have no column and are filled only by `ProjectDao.fetch_project_by_id`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional


@dataclass
class Material:
    materialId: Optional[int] = field(default=None, metadata={"pk": True})
    projectId: Optional[int] = None
    materialName: Optional[str] = None
    numRequired: Optional[int] = None
    cost: Optional[Decimal] = None

    def __str__(self) -> str:
        return (
            f"ID={self.materialId}, materialName={self.materialName}, "
            f"numRequired={self.numRequired}, cost={self.cost}"
        )


@dataclass
class Step:
    stepId: Optional[int] = field(default=None, metadata={"pk": True})
    projectId: Optional[int] = None
    stepText: Optional[str] = None
    stepOrder: Optional[int] = None

    def __str__(self) -> str:
        return f"ID={self.stepId}, stepText={self.stepText}"


@dataclass
class Category:
    categoryId: Optional[int] = field(default=None, metadata={"pk": True})
    categoryName: Optional[str] = None

    def __str__(self) -> str:
        return f"ID={self.categoryId}, categoryName={self.categoryName}"


@dataclass
class Project:
    projectId: Optional[int] = field(default=None, metadata={"pk": True})
    projectName: Optional[str] = None
    estimatedHours: Optional[Decimal] = None
    actualHours: Optional[Decimal] = None
    difficulty: Optional[int] = None
    notes: Optional[str] = None

    materials: List[Material] = field(default_factory=list, metadata={"collection": True})
    steps: List[Step] = field(default_factory=list, metadata={"collection": True})
    categories: List[Category] = field(default_factory=list, metadata={"collection": True})

    def __str__(self) -> str:
        lines = [
            f"   ID={self.projectId}",
            f"   name={self.projectName}",
            f"   estimatedHours={self.estimatedHours}",
            f"   actualHours={self.actualHours}",
            f"   difficulty={self.difficulty}",
            f"   notes={self.notes}",
            "   Materials:",
        ]
        lines.extend(f"      {material}" for material in self.materials)
        lines.append("   Steps:")
        lines.extend(f"      {step}" for step in self.steps)
        lines.append("   Categories:")
        lines.extend(f"      {category}" for category in self.categories)
        return "\n" + "\n".join(lines)
