from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple


class ProjectCategory(str, Enum):
    """Closed set of project tabs, iterated in declaration order."""

    PRODUCTION = "production"
    TOY = "toy"

    @property
    def display_title(self) -> str:
        return _CATEGORY_TITLES[self]

    @classmethod
    def default(cls) -> "ProjectCategory":
        return cls.PRODUCTION

    @classmethod
    def parse(cls, name: Optional[str]) -> Optional["ProjectCategory"]:
        """Return the category whose URL name is ``name``, or ``None``."""
        if not name:
            return None
        try:
            return cls(name)
        except ValueError:
            return None

    @classmethod
    def coerce(cls, name: Optional[str]) -> "ProjectCategory":
        return cls.parse(name) or cls.default()

    def __str__(self) -> str:
        return self.value


_CATEGORY_TITLES = {
    ProjectCategory.PRODUCTION: "Production Projects",
    ProjectCategory.TOY: "Toy Projects",
}


@dataclass(slots=True, frozen=True)
class Project:
    id: str
    title: str
    description: str
    category: ProjectCategory = ProjectCategory.PRODUCTION
    tech_stack: Tuple[str, ...] = field(default_factory=tuple)
    github_url: Optional[str] = None
    try_it_url: Optional[str] = None
